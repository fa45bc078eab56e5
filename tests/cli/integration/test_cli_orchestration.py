"""CLI orchestration tests across case loading, matching and report writing."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from correspondence_engine.cli import main
from openpyxl import load_workbook

_PASSING_CASES = """
cases:
  - id: prefixes
    relation: starts_with
    actual: [foot, barn]
    expected: [foo, bar]
  - id: lengths-in-order
    in_order: true
    relation: length
    actual: [feet, barns, gallons]
    expected: [4, 5, 7]
"""

_FAILING_CASES = """
cases:
  - id: prefixes
    relation: starts_with
    actual: [foot, barn]
    expected: [foo, bar]
  - id: unexpected-gallon
    relation: starts_with
    actual: [foot, barn, gallon]
    expected: [foot, barn]
"""


@pytest.fixture(autouse=True)
def _reset_package_logger():
    package_logger = logging.getLogger("correspondence_engine")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


def _write(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_check_passes_for_passing_case_file(tmp_path: Path, capsys) -> None:
    case_path = _write(tmp_path / "cases.yaml", _PASSING_CASES)

    exit_code = main(["check", "--cases", str(case_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.splitlines() == ["PASSED prefixes", "PASSED lengths-in-order"]
    assert captured.err == ""


def test_check_reports_failures_and_exit_code(tmp_path: Path, capsys) -> None:
    case_path = _write(tmp_path / "cases.yaml", _FAILING_CASES)

    exit_code = main(["check", "--cases", str(case_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    lines = captured.out.splitlines()
    assert lines[0] == "PASSED prefixes"
    assert lines[1] == "FAILED unexpected-gallon"
    assert lines[2] == (
        "    Not true that <[foot, barn, gallon]> contains exactly one element that starts with "
        "each element of <[foot, barn]>. It has unexpected elements <[gallon]>"
    )
    assert "1 of 2 case(s) failed." in captured.err


def test_check_writes_report(tmp_path: Path, capsys) -> None:
    case_path = _write(tmp_path / "cases.yaml", _FAILING_CASES)
    report_path = tmp_path / "results.xlsx"

    exit_code = main(["check", "--cases", str(case_path), "--report", str(report_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert str(report_path.resolve()) in captured.out
    sheet = load_workbook(report_path)["Results"]
    assert [sheet.cell(row=row, column=4).value for row in (2, 3)] == ["PASSED", "FAILED"]


def test_generate_cases_then_check(tmp_path: Path, capsys) -> None:
    case_path = tmp_path / "cases.yaml"

    assert main(["generate-cases", "--output", str(case_path)]) == 0
    assert main(["check", "--cases", str(case_path)]) == 0
    captured = capsys.readouterr()

    assert str(case_path.resolve()) in captured.out
    assert "PASSED prefixes" in captured.out
    assert "PASSED close-enough" in captured.out


def test_verbose_logs_engine_diagnostics(tmp_path: Path, capsys) -> None:
    case_path = _write(
        tmp_path / "cases.yaml",
        "cases:\n  - id: with-none\n    relation: starts_with\n"
        "    actual: [foot, null]\n    expected: [foot]\n",
    )

    exit_code = main(["check", "--cases", str(case_path), "--verbose"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "compare(None, 'foot') raised AttributeError" in captured.err
    assert "Ran 1 case(s): 0 passed, 1 failed." in captured.err
