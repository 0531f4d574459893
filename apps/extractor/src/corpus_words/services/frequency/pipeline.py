from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from pathlib import Path

from corpus_words.services.frequency.aggregator import FrequencyTable
from corpus_words.services.frequency.ingestor import read_document
from corpus_words.services.frequency.splitter import iter_lines, split_tokens
from corpus_words.services.frequency.word_filter import normalize_word


def _batched(lines: Iterator[str], size: int) -> Iterator[list[str]]:
    while True:
        batch = list(islice(lines, size))
        if not batch:
            return
        yield batch


def count_lines(lines: Iterable[str], table: FrequencyTable) -> int:
    accepted = 0
    for line in lines:
        for token in split_tokens(line):
            word = normalize_word(token)
            if word is None:
                continue
            table.increment(word)
            accepted += 1
    return accepted


def extract_word_frequencies(
    files: Iterable[Path],
    *,
    table: FrequencyTable | None = None,
    workers: int = 1,
    batch_lines: int = 512,
    strip_carriage_returns: bool = False,
    on_file_done: Callable[[Path], None] | None = None,
) -> FrequencyTable:
    """Count accepted words across ``files`` into one shared table.

    Files are read one at a time. The lines of the current file are handed to
    the thread pool in batches, and the next file is not read until every
    batch of the current one has been counted. The first read failure
    propagates and stops the run.
    """
    if workers <= 0:
        raise ValueError("workers must be > 0")
    if batch_lines <= 0:
        raise ValueError("batch_lines must be > 0")

    if table is None:
        table = FrequencyTable()

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="corpus-words") as executor:
        for path in files:
            document = read_document(path)
            lines = iter_lines(document.text, strip_carriage_returns=strip_carriage_returns)
            futures = [
                executor.submit(count_lines, batch, table)
                for batch in _batched(lines, batch_lines)
            ]
            for future in futures:
                future.result()

            if on_file_done is not None:
                on_file_done(path)

    return table
