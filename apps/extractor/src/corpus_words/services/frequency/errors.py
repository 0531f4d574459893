from __future__ import annotations

from pathlib import Path


class CorpusWordsError(RuntimeError):
    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class InputPathNotFoundError(CorpusWordsError):
    pass


class NoMatchingFilesError(CorpusWordsError):
    pass


class FileOpenError(CorpusWordsError):
    pass


class FileReadError(CorpusWordsError):
    pass


class OutputWriteError(CorpusWordsError):
    pass
