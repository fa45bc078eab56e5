"""Failure reporting domain exports."""

from .correspondence_checks import (
    EXCEPTIONS_THROWN_KEY,
    EXPECTED_ORDER_KEY,
    FIRST_EXCEPTION_KEY,
    FIRST_OUT_OF_ORDER_KEY,
    check_contains,
    check_contains_exactly,
    check_corresponds,
)
from .failure_models import CheckResult, CorrespondenceAssertionError, Fact, FailureDescription
from .value_formatting import format_value

__all__ = [
    "CheckResult",
    "CorrespondenceAssertionError",
    "Fact",
    "FailureDescription",
    "EXCEPTIONS_THROWN_KEY",
    "EXPECTED_ORDER_KEY",
    "FIRST_EXCEPTION_KEY",
    "FIRST_OUT_OF_ORDER_KEY",
    "check_contains",
    "check_contains_exactly",
    "check_corresponds",
    "format_value",
]
