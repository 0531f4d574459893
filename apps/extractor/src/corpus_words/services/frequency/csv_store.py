from __future__ import annotations

from collections.abc import Iterable
import csv
from pathlib import Path


def _sorted_rows(entries: Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    return sorted(entries, key=lambda item: (-item[1], item[0]))


def write_frequency_csv(output_path: Path, entries: Iterable[tuple[str, int]]) -> int:
    """Write one ``word,count`` row per entry, without a header row.

    Rows come out most frequent first; readers should not depend on that.
    """
    rows = _sorted_rows(entries)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerows(rows)
    return len(rows)


def read_frequency_csv(path: Path) -> dict[str, int]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return {word: int(count) for word, count in csv.reader(handle)}
