"""Run execution domain exports."""

from .case_run_use_case import RunExecutionError, execute_case_run, run_case
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_case_run",
    "run_case",
]
