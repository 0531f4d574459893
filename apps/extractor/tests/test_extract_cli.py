from pathlib import Path

import pytest

from corpus_words.extract import main
from corpus_words.services.frequency.csv_store import read_frequency_csv


def test_main_writes_output_and_reports_summary(
    corpus_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_path = tmp_path / "words.csv"

    main(
        [
            "--input",
            str(corpus_dir),
            "--extension",
            "txt",
            "--output",
            str(output_path),
            "--workers",
            "3",
            "--no-progress",
        ]
    )

    captured = capsys.readouterr()
    assert "[corpus-words] found 3 'txt' files" in captured.out
    assert "[corpus-words] completed files=3 unique_words=17 total_words=27" in captured.out
    assert read_frequency_csv(output_path)["the"] == 7


def test_main_uses_environment_defaults(
    monkeypatch: pytest.MonkeyPatch, corpus_dir: Path, tmp_path: Path
) -> None:
    output_path = tmp_path / "env.csv"
    monkeypatch.setenv("CORPUS_WORDS_INPUT_DIR", str(corpus_dir))
    monkeypatch.setenv("CORPUS_WORDS_OUTPUT_PATH", str(output_path))
    monkeypatch.setenv("CORPUS_WORDS_PROGRESS", "false")

    main([])

    assert read_frequency_csv(output_path)["fox"] == 4


def test_main_strip_carriage_returns_flag(tmp_path: Path) -> None:
    source_dir = tmp_path / "crlf"
    source_dir.mkdir()
    (source_dir / "doc.txt").write_bytes(b"hello world\r\n")
    output_path = tmp_path / "words.csv"

    main(["-i", str(source_dir), "-o", str(output_path), "--no-progress", "--strip-carriage-returns"])

    assert read_frequency_csv(output_path) == {"hello": 1, "world": 1}


def test_main_exits_nonzero_on_missing_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_path = tmp_path / "words.csv"

    with pytest.raises(SystemExit) as exc_info:
        main(["-i", str(tmp_path / "absent"), "-o", str(output_path), "--no-progress"])

    assert exc_info.value.code == 1
    assert "[corpus-words] failed: Input path does not exist" in capsys.readouterr().err
    assert not output_path.exists()


def test_main_exits_nonzero_without_matching_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source_dir = tmp_path / "source"
    source_dir.mkdir()
    (source_dir / "notes.md").write_text("words", encoding="utf-8")
    output_path = tmp_path / "words.csv"

    with pytest.raises(SystemExit) as exc_info:
        main(["-i", str(source_dir), "-e", "txt", "-o", str(output_path), "--no-progress"])

    assert exc_info.value.code == 1
    assert "does not contain any files matching 'txt'" in capsys.readouterr().err
    assert not output_path.exists()
