"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from correspondence_engine.results_writing import CaseResult, CaseStatus


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one case run."""

    cases_path: str
    report_path: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed case run."""

    results: tuple[CaseResult, ...]
    report_path: Path | None

    @property
    def failed_results(self) -> tuple[CaseResult, ...]:
        return tuple(result for result in self.results if result.status == CaseStatus.FAILED)

    @property
    def all_passed(self) -> bool:
        return not self.failed_results
