"""Positional order verification after a full match."""

from __future__ import annotations

from .pairing_outcomes import CellOutcome, MatchOutcome, OrderVerification, PairingMatrix


def verify_order(matrix: PairingMatrix, outcome: MatchOutcome) -> OrderVerification:
    """Check that the i-th actual element corresponds to the i-th expected element.

    Reads the already evaluated matrix diagonal, so the relation is not invoked again. No
    alternative order-respecting pairing is searched for: a failing position fails the check
    even when some permutation matches.

    Raises:
      ValueError: If ``outcome`` is not a full match.
    """
    if not outcome.is_full_match:
        raise ValueError("Order can only be verified after a full match.")
    for index in range(len(matrix.expected)):
        if matrix.outcome(index, index) != CellOutcome.MATCH:
            return OrderVerification(in_order=False, first_out_of_order_index=index)
    return OrderVerification(in_order=True)
