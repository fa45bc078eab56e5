"""Pairing matrix evaluation service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from correspondence_engine.relations import Relation

from .pairing_outcomes import CellOutcome, CellResult, ComparisonError, PairingMatrix

_LOGGER = logging.getLogger(__name__)


def evaluate_pairing_matrix(
    actual: Sequence[Any],
    expected: Sequence[Any],
    relation: Relation,
) -> PairingMatrix:
    """Evaluate the relation once for every actual/expected pair, row by row.

    Errors raised by the relation are recorded as ERRORED cells; the first one in row-major
    order is kept as the matrix's representative error. Evaluation always runs to the end.
    """
    actual_values = tuple(actual)
    expected_values = tuple(expected)
    first_error: ComparisonError | None = None
    rows: list[tuple[CellResult, ...]] = []

    for actual_index, actual_value in enumerate(actual_values):
        row: list[CellResult] = []
        for expected_index, expected_value in enumerate(expected_values):
            cell = _evaluate_cell(relation, actual_value, expected_value)
            if cell.error is not None and first_error is None:
                first_error = ComparisonError(
                    actual_index=actual_index,
                    expected_index=expected_index,
                    actual=actual_value,
                    expected=expected_value,
                    error=cell.error,
                )
            row.append(cell)
        rows.append(tuple(row))

    return PairingMatrix(
        actual=actual_values,
        expected=expected_values,
        cells=tuple(rows),
        first_error=first_error,
    )


def _evaluate_cell(relation: Relation, actual_value: Any, expected_value: Any) -> CellResult:
    try:
        corresponds = relation.compare(actual_value, expected_value)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        _LOGGER.debug(
            "compare(%r, %r) raised %s for relation %r.",
            actual_value,
            expected_value,
            type(exc).__name__,
            relation.describe(),
        )
        return CellResult(outcome=CellOutcome.ERRORED, error=exc)
    if corresponds:
        return CellResult(outcome=CellOutcome.MATCH)
    return CellResult(outcome=CellOutcome.NO_MATCH)
