"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from correspondence_engine.failure_reporting import FailureDescription


class CaseStatus(str, Enum):
    """Rendered status in the output workbook status column."""

    PASSED = "PASSED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class CaseResult:
    """Outcome of running one case."""

    case_id: str
    check: str
    relation: str
    failure: FailureDescription | None = None

    @property
    def status(self) -> CaseStatus:
        return CaseStatus.PASSED if self.failure is None else CaseStatus.FAILED


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    cases_path: Path
    report_path: Path
