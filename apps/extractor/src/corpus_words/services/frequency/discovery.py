from __future__ import annotations

from pathlib import Path

from corpus_words.services.frequency.errors import InputPathNotFoundError, NoMatchingFilesError


def discover_files(input_dir: Path, extension: str) -> list[Path]:
    """Return every file under ``input_dir`` whose name ends with ``extension``.

    This is a plain suffix match on the file name, not an extension-boundary
    check: ``notreallytxt`` matches ``txt``.
    """
    if not input_dir.exists():
        raise InputPathNotFoundError(f"Input path does not exist: {input_dir}", path=input_dir)
    if not input_dir.is_dir():
        raise InputPathNotFoundError(f"Input path is not a directory: {input_dir}", path=input_dir)

    files = sorted(
        path
        for path in input_dir.rglob("*")
        if path.is_file() and path.name.endswith(extension)
    )

    if not files:
        raise NoMatchingFilesError(
            f"Input path does not contain any files matching '{extension}': {input_dir}",
            path=input_dir,
        )

    return files
