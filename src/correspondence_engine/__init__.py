"""Correspondence-based equivalence and matching engine."""

import logging

from .failure_reporting import (
    CheckResult,
    CorrespondenceAssertionError,
    FailureDescription,
    check_contains,
    check_contains_exactly,
    check_corresponds,
)
from .pairing import (
    MatchOutcome,
    MatchStatus,
    evaluate_pairing_matrix,
    solve_matching,
    verify_order,
)
from .relations import Relation, from_predicate, from_transform, from_transforms, tolerance

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Relation",
    "from_predicate",
    "from_transform",
    "from_transforms",
    "tolerance",
    "MatchOutcome",
    "MatchStatus",
    "evaluate_pairing_matrix",
    "solve_matching",
    "verify_order",
    "CheckResult",
    "CorrespondenceAssertionError",
    "FailureDescription",
    "check_contains",
    "check_contains_exactly",
    "check_corresponds",
]
