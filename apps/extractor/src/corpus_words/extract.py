from __future__ import annotations

import argparse
from pathlib import Path
import sys

from corpus_words.config import get_settings
from corpus_words.services.frequency import run_extraction_job


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="corpus-words",
        description="Extract English word frequencies from a directory of text files",
    )
    parser.add_argument(
        "-i",
        "--input",
        default=settings.input_dir,
        help="Root directory containing text files",
    )
    parser.add_argument(
        "-e",
        "--extension",
        default=settings.extension,
        help="Filename suffix of the text files to read",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=settings.output_path,
        help="CSV output file",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.workers,
        help="Threads used to process the lines of each file",
    )
    parser.add_argument(
        "--batch-lines",
        type=int,
        default=settings.batch_lines,
        help="Lines handed to a worker per task",
    )
    parser.add_argument(
        "--strip-carriage-returns",
        action="store_true",
        default=settings.strip_carriage_returns,
        help="Drop a trailing carriage return from each line before tokenizing",
    )
    parser.add_argument(
        "--no-progress",
        action="store_false",
        dest="progress",
        default=settings.show_progress,
        help="Disable the per-file progress bar",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    try:
        metrics = run_extraction_job(
            input_dir=Path(args.input),
            extension=args.extension,
            output_path=Path(args.output),
            workers=args.workers,
            batch_lines=args.batch_lines,
            shards=settings.shards,
            strip_carriage_returns=args.strip_carriage_returns,
            show_progress=args.progress,
        )
    except Exception as exc:
        print(f"[corpus-words] failed: {exc}", file=sys.stderr, flush=True)
        raise SystemExit(1) from exc

    print(
        "[corpus-words] completed "
        f"files={metrics['files']} "
        f"unique_words={metrics['unique_words']} "
        f"total_words={metrics['total_words']} "
        f"duration_ms={metrics['duration_ms']} "
        f"output={metrics['output_path']}",
        flush=True,
    )


if __name__ == "__main__":
    main()
