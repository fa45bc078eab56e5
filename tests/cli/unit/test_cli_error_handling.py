"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from correspondence_engine.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--report", "/tmp/out.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--cases" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_case_file_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(["check", "--cases", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Case file not found" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_case_file_returns_error_message(tmp_path: Path, capsys) -> None:
    case_path = tmp_path / "cases.yaml"
    case_path.write_text(
        "cases:\n  - id: c\n    relation: {kind: tolerance, tolerance: -1}\n"
        "    actual: [1]\n    expected: [1]\n",
        encoding="utf-8",
    )

    exit_code = main(["check", "--cases", str(case_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "tolerance (-1) cannot be negative" in captured.err


def test_generate_cases_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "cases.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-cases", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"
