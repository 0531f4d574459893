from dataclasses import dataclass
from functools import lru_cache
import os


def _to_bool(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: str | None, *, default: int, minimum: int) -> int:
    if value is None:
        return default
    parsed = int(value)
    return max(minimum, parsed)


@dataclass(frozen=True)
class Settings:
    input_dir: str
    extension: str
    output_path: str
    workers: int
    batch_lines: int
    shards: int
    strip_carriage_returns: bool
    show_progress: bool


@lru_cache
def get_settings() -> Settings:
    return Settings(
        input_dir=os.getenv("CORPUS_WORDS_INPUT_DIR", "data/corpus"),
        extension=os.getenv("CORPUS_WORDS_EXTENSION", "txt"),
        output_path=os.getenv("CORPUS_WORDS_OUTPUT_PATH", "data/word_frequencies.csv"),
        workers=_to_int(
            os.getenv("CORPUS_WORDS_WORKERS"),
            default=os.cpu_count() or 1,
            minimum=1,
        ),
        batch_lines=_to_int(os.getenv("CORPUS_WORDS_BATCH_LINES"), default=512, minimum=1),
        shards=_to_int(os.getenv("CORPUS_WORDS_SHARDS"), default=64, minimum=1),
        strip_carriage_returns=_to_bool(os.getenv("CORPUS_WORDS_STRIP_CR"), default=False),
        show_progress=_to_bool(os.getenv("CORPUS_WORDS_PROGRESS"), default=True),
    )
