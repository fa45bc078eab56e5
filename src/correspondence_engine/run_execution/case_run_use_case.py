"""Case run use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from correspondence_engine.case_files import (
    CaseFileError,
    CheckKind,
    CorrespondenceCase,
    build_relation,
    load_case_file,
)
from correspondence_engine.failure_reporting import (
    CheckResult,
    check_contains,
    check_contains_exactly,
    check_corresponds,
)
from correspondence_engine.relations import Relation
from correspondence_engine.results_writing import CaseResult, RunMetadata, write_results_workbook

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a case run cannot be completed."""


def execute_case_run(request: RunRequest) -> RunOutcome:
    """Run every case of a case file and optionally write the results workbook."""
    run_start = datetime.now(UTC)
    try:
        case_file = load_case_file(request.cases_path)
    except CaseFileError as exc:
        raise RunExecutionError(str(exc)) from exc

    results = tuple(run_case(case) for case in case_file.cases)
    failed = sum(1 for result in results if result.failure is not None)
    _LOGGER.info(
        "Ran %d case(s): %d passed, %d failed.", len(results), len(results) - failed, failed
    )

    report_path: Path | None = None
    if request.report_path is not None:
        metadata = RunMetadata(
            run_start=run_start,
            cases_path=case_file.path.resolve(),
            report_path=Path(request.report_path).resolve(),
        )
        try:
            report_path = write_results_workbook(results, request.report_path, metadata)
        except OSError as exc:
            raise RunExecutionError(f"Failed to write results workbook: {exc}") from exc

    return RunOutcome(results=results, report_path=report_path)


def run_case(case: CorrespondenceCase) -> CaseResult:
    """Run one case through the matching engine."""
    relation = build_relation(case.relation)
    check_result = _run_check(case, relation)
    return CaseResult(
        case_id=case.case_id,
        check=case.check.value,
        relation=relation.describe(),
        failure=check_result.failure,
    )


def _run_check(case: CorrespondenceCase, relation: Relation) -> CheckResult:
    if case.check == CheckKind.CONTAINS_EXACTLY:
        return check_contains_exactly(
            case.actual,
            case.expected,
            relation,
            in_order=case.in_order,
        )
    if case.check == CheckKind.CONTAINS:
        return check_contains(case.actual, case.expected, relation)
    return check_corresponds(case.actual, case.expected, relation)
