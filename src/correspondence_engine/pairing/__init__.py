"""Pairing matrix, matching and order verification exports."""

from .matching_solver import solve_matching
from .order_verifier import verify_order
from .pairing_matrix import evaluate_pairing_matrix
from .pairing_outcomes import (
    CellOutcome,
    CellResult,
    ComparisonError,
    MatchOutcome,
    MatchStatus,
    OrderVerification,
    PairingMatrix,
)

__all__ = [
    "CellOutcome",
    "CellResult",
    "ComparisonError",
    "MatchOutcome",
    "MatchStatus",
    "OrderVerification",
    "PairingMatrix",
    "evaluate_pairing_matrix",
    "solve_matching",
    "verify_order",
]
