from __future__ import annotations

from pathlib import Path

from corpus_words.services.frequency.errors import FileOpenError, FileReadError
from corpus_words.services.frequency.types import Document

# Invalid byte sequences decode to U+FFFD instead of failing.
DECODE_ENCODING = "utf-8"
DECODE_ERRORS = "replace"
REPLACEMENT_CHARACTER = "�"


def decode_lossy(data: bytes) -> str:
    return data.decode(DECODE_ENCODING, errors=DECODE_ERRORS)


def read_document(path: Path) -> Document:
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise FileOpenError(f"Failed to open file {path}: {exc}", path=path) from exc

    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise FileReadError(f"Failed to read file {path}: {exc}", path=path) from exc

    return Document(path=path, text=decode_lossy(data))
