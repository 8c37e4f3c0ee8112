"""CLI parser and command tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import pytest

from uxguide.cli import _build_parser, main
from uxguide.logging import configure_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    yield
    configure_logging()


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "search", "glass"])
    assert args.verbose is True
    assert args.command == "search"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["search", "glass", "--verbose"])
    assert args.verbose is True
    assert args.query == "glass"


def test_cli_rejects_unknown_domain() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["search", "glass", "--domain", "nope"])


def test_cli_design_system_defaults() -> None:
    parser = _build_parser()
    args = parser.parse_args(["design-system", "fintech banking"])
    assert args.format is None
    assert args.persist is False
    assert args.page is None


def test_search_command_prints_compact_results(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--config", str(tmp_path), "search", "glassmorphism", "-d", "style"])

    out = capsys.readouterr().out
    assert "✓ style (" in out
    assert "• Glassmorphism" in out


def test_search_command_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--config", str(tmp_path), "search", "color palette hex", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["domain"] == "color"
    assert payload["file"] == "colors.csv"


def test_stack_command_requires_stack(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "stack", "forms"])
    assert excinfo.value.code == 1


def test_stack_command_uses_configured_default(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".uxguide.yml").write_text("design_system:\n  default_stack: react\n", encoding="utf-8")

    main(["--config", str(tmp_path), "stack", "list keys"])

    out = capsys.readouterr().out
    assert "✓ react (" in out
    assert "• Stable Keys (HIGH)" in out


def test_design_system_command_persists(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--config",
            str(tmp_path),
            "design-system",
            "beauty spa wellness",
            "-p",
            "Serenity Spa",
            "-f",
            "json",
            "--persist",
            "--page",
            "booking",
            "--output-dir",
            str(tmp_path / "out"),
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert payload["project_name"] == "Serenity Spa"
    base = tmp_path / "out" / "design-system" / "serenity-spa"
    assert (base / "MASTER.md").is_file()
    assert (base / "pages" / "booking.md").is_file()


def test_design_system_command_ascii(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--config", str(tmp_path), "design-system", "fintech banking", "-f", "ascii"])

    out = capsys.readouterr().out
    assert out.startswith("+---")
    assert "TARGET: FINTECH BANKING - RECOMMENDED DESIGN SYSTEM" in out


def test_invalid_configuration_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".uxguide.yml").write_text("search:\n  max_results: 0\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "search", "glass"])

    assert excinfo.value.code == 1
    assert "invalid configuration" in capsys.readouterr().err


def test_missing_data_dir_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "--data-dir", str(tmp_path / "missing"), "search", "glass"])
    assert excinfo.value.code == 1


def test_log_file_option_receives_records(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], restore_logging: None
) -> None:
    log_file = tmp_path / "logs" / "run.log"

    main(
        [
            "--config",
            str(tmp_path),
            "--log-file",
            str(log_file),
            "design-system",
            "fintech banking",
            "-p",
            "Ledger",
            "--persist",
            "--output-dir",
            str(tmp_path / "out"),
            "-v",
        ]
    )

    capsys.readouterr()
    assert "Persisted design system for Ledger" in log_file.read_text(encoding="utf-8")


def test_log_file_from_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], restore_logging: None
) -> None:
    (tmp_path / ".uxguide.yml").write_text("log_file: uxguide.log\n", encoding="utf-8")

    main(["--config", str(tmp_path), "search", "glassmorphism", "-d", "style", "--verbose"])

    capsys.readouterr()
    assert (tmp_path / "uxguide.log").is_file()
    assert "Writing log records to" in (tmp_path / "uxguide.log").read_text(encoding="utf-8")
