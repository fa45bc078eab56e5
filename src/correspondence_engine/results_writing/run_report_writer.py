"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import CaseResult, CaseStatus, RunMetadata

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"
RESULT_COLUMNS = ("ID", "CHECK", "RELATION", "STATUS", "FAILURE")
_COLUMN_WIDTHS = (24, 20, 36, 12, 100)


def write_results_workbook(
    results: Sequence[CaseResult],
    output_path: Path | str,
    run_metadata: RunMetadata,
) -> Path:
    """Write one row per case plus a RunInfo sheet and return the resolved output path."""
    workbook = Workbook()
    results_sheet = workbook.active
    results_sheet.title = RESULTS_SHEET_NAME
    _write_results_sheet(results_sheet, results)
    _write_run_info_sheet(workbook.create_sheet(RUN_INFO_SHEET_NAME), results, run_metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_results_sheet(sheet: Worksheet, results: Sequence[CaseResult]) -> None:
    for column, header in enumerate(RESULT_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column, value=header)
        cell.font = Font(bold=True)
    for column, width in enumerate(_COLUMN_WIDTHS, start=1):
        sheet.column_dimensions[get_column_letter(column)].width = width
    sheet.freeze_panes = "A2"

    for row, result in enumerate(results, start=2):
        failure_text = "" if result.failure is None else result.failure.render()
        values = (result.case_id, result.check, result.relation, result.status.value, failure_text)
        for column, value in enumerate(values, start=1):
            sheet.cell(row=row, column=column, value=value)
        sheet.cell(row=row, column=len(values)).alignment = Alignment(wrap_text=True)


def _write_run_info_sheet(
    sheet: Worksheet,
    results: Sequence[CaseResult],
    run_metadata: RunMetadata,
) -> None:
    passed = sum(1 for result in results if result.status == CaseStatus.PASSED)
    rows = (
        ("Run start", run_metadata.run_start.isoformat()),
        ("Case file", str(run_metadata.cases_path)),
        ("Report", str(run_metadata.report_path)),
        ("Cases", len(results)),
        ("Passed", passed),
        ("Failed", len(results) - passed),
    )
    for row, (label, value) in enumerate(rows, start=1):
        sheet.cell(row=row, column=1, value=label).font = Font(bold=True)
        sheet.cell(row=row, column=2, value=value)
    sheet.column_dimensions["A"].width = 16
    sheet.column_dimensions["B"].width = 60
