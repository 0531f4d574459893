from collections.abc import Iterator
from pathlib import Path

import pytest

from corpus_words.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    source_dir = tmp_path / "corpus"
    (source_dir / "nested" / "deeper").mkdir(parents=True)
    (source_dir / "a.txt").write_text(
        "The quick brown fox jumps over the lazy dog.\n"
        "The dog sleeps; the fox runs!\n",
        encoding="utf-8",
    )
    (source_dir / "nested" / "b.txt").write_text(
        "Chapter XVI\n\"Hello,\" said the fox. (Again) the end\n",
        encoding="utf-8",
    )
    (source_dir / "nested" / "deeper" / "c.txt").write_bytes(
        b"caf\xc3\xa9 broken \xff\xfe bytes here\nthe  fox\n"
    )
    (source_dir / "ignored.md").write_text("markdown words ignored here\n", encoding="utf-8")
    return source_dir
