from __future__ import annotations

from collections.abc import Iterator

LINE_DELIMITER = "\n"
TOKEN_DELIMITER = " "


def iter_lines(text: str, *, strip_carriage_returns: bool = False) -> Iterator[str]:
    """Lazily yield the lines of ``text`` split strictly on ``\\n``.

    A trailing ``\\r`` stays attached to the line unless
    ``strip_carriage_returns`` is set. Like ``str.split``, text ending with a
    newline yields a final empty line.
    """
    cursor = 0
    while True:
        end = text.find(LINE_DELIMITER, cursor)
        line = text[cursor:] if end == -1 else text[cursor:end]
        if strip_carriage_returns and line.endswith("\r"):
            line = line[:-1]
        yield line
        if end == -1:
            return
        cursor = end + 1


def split_tokens(line: str) -> list[str]:
    # consecutive spaces produce empty candidates; the word filter drops them
    return line.split(TOKEN_DELIMITER)
