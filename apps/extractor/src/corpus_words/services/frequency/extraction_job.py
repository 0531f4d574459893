from __future__ import annotations

import os
from pathlib import Path
from time import perf_counter
from typing import TypedDict

from tqdm import tqdm

from corpus_words.services.frequency.aggregator import FrequencyTable
from corpus_words.services.frequency.csv_store import write_frequency_csv
from corpus_words.services.frequency.discovery import discover_files
from corpus_words.services.frequency.errors import OutputWriteError
from corpus_words.services.frequency.pipeline import extract_word_frequencies
from corpus_words.services.frequency.types import ExtractionSummary


class ExtractionResult(TypedDict):
    files: int
    unique_words: int
    total_words: int
    output_path: str
    duration_ms: int


def _persist_table(output_path: Path, table: FrequencyTable) -> None:
    tmp_path = output_path.with_name(f"{output_path.name}.tmp")
    try:
        if tmp_path.exists():
            tmp_path.unlink()
        write_frequency_csv(tmp_path, table.items())
        os.replace(tmp_path, output_path)
    except OSError as exc:
        raise OutputWriteError(
            f"Failed to write output CSV {output_path}: {exc}",
            path=output_path,
        ) from exc
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def summarize(file_count: int, table: FrequencyTable) -> ExtractionSummary:
    return ExtractionSummary(
        file_count=file_count,
        unique_words=len(table),
        total_words=table.total(),
    )


def run_extraction_job(
    *,
    input_dir: Path,
    extension: str,
    output_path: Path,
    workers: int,
    batch_lines: int,
    shards: int = 64,
    strip_carriage_returns: bool = False,
    show_progress: bool = False,
) -> ExtractionResult:
    start = perf_counter()

    files = discover_files(input_dir, extension)
    print(f"[corpus-words] found {len(files)} '{extension}' files under {input_dir}", flush=True)

    table = FrequencyTable(shards=shards)
    with tqdm(
        total=len(files),
        desc="[corpus-words] processing",
        unit="file",
        leave=False,
        disable=not show_progress,
    ) as progress:
        extract_word_frequencies(
            files,
            table=table,
            workers=workers,
            batch_lines=batch_lines,
            strip_carriage_returns=strip_carriage_returns,
            on_file_done=lambda _path: progress.update(1),
        )

    summary = summarize(len(files), table)
    _persist_table(output_path, table)

    duration_ms = int((perf_counter() - start) * 1000)
    return {
        "files": summary.file_count,
        "unique_words": summary.unique_words,
        "total_words": summary.total_words,
        "output_path": str(output_path),
        "duration_ms": duration_ms,
    }
