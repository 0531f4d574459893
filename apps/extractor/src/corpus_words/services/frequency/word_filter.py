"""Ordered rule chain deciding whether a token candidate is a word.

Each rule takes the token as left by the previous rule and returns either
the (possibly transformed) token or ``None`` to reject it. Rules run in the
order of ``WORD_FILTER_RULES`` and the first rejection wins.

The vowel and roman-numeral rules overlap on the letter ``i``, so ordinary
words spelled only from ``i v x l c d m`` (``civil``, ``vivid``, ``mimic``)
are rejected. That behavior is kept until someone decides otherwise.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from corpus_words.services.frequency.types import FilterOutcome

TRIM_CHARACTERS = "'\"-&.,;:()[]{}"
MIN_WORD_LENGTH = 2
VOWELS = frozenset("aeiou")
ROMAN_NUMERAL_LETTERS = frozenset("ivxlcdm")


@dataclass(frozen=True)
class FilterRule:
    name: str
    apply: Callable[[str], str | None]


def trim_punctuation(token: str) -> str | None:
    return token.strip(TRIM_CHARACTERS)


def require_min_length(token: str) -> str | None:
    if len(token) < MIN_WORD_LENGTH:
        return None
    return token


def require_ascii_letters(token: str) -> str | None:
    if not (token.isascii() and token.isalpha()):
        return None
    return token


def reject_inner_uppercase(token: str) -> str | None:
    if any(character.isupper() for character in token[1:]):
        return None
    return token


def lowercase(token: str) -> str | None:
    return token.lower()


def require_vowel(token: str) -> str | None:
    if not any(character in VOWELS for character in token):
        return None
    return token


def reject_roman_numerals(token: str) -> str | None:
    if all(character in ROMAN_NUMERAL_LETTERS for character in token):
        return None
    return token


WORD_FILTER_RULES: tuple[FilterRule, ...] = (
    FilterRule("trim", trim_punctuation),
    FilterRule("length", require_min_length),
    FilterRule("alpha_only", require_ascii_letters),
    FilterRule("inner_uppercase", reject_inner_uppercase),
    FilterRule("lowercase", lowercase),
    FilterRule("vowel", require_vowel),
    FilterRule("roman_numeral", reject_roman_numerals),
)


def evaluate_token(
    token: str,
    rules: tuple[FilterRule, ...] = WORD_FILTER_RULES,
) -> FilterOutcome:
    current = token
    for rule in rules:
        result = rule.apply(current)
        if result is None:
            return FilterOutcome(word=None, rejected_by=rule.name)
        current = result
    return FilterOutcome(word=current, rejected_by=None)


def normalize_word(token: str) -> str | None:
    """Return the lowercase word for ``token`` or ``None`` if any rule rejects it."""
    return evaluate_token(token).word
