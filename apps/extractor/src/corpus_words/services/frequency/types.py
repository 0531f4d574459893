from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Document:
    path: Path
    text: str


@dataclass(frozen=True)
class FilterOutcome:
    """Result of running one token candidate through the word filter.

    Exactly one of ``word`` and ``rejected_by`` is set.
    """

    word: str | None
    rejected_by: str | None

    @property
    def accepted(self) -> bool:
        return self.word is not None


@dataclass(frozen=True)
class ExtractionSummary:
    file_count: int
    unique_words: int
    total_words: int
