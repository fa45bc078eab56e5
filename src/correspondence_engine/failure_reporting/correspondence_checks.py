"""Correspondence checks producing structured failure descriptions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from correspondence_engine.pairing import (
    CellOutcome,
    ComparisonError,
    MatchOutcome,
    PairingMatrix,
    evaluate_pairing_matrix,
    solve_matching,
    verify_order,
)
from correspondence_engine.relations import Relation

from .failure_models import CheckResult, Fact, FailureDescription
from .value_formatting import bracketed, describe_comparison_error

_LOGGER = logging.getLogger(__name__)

EXCEPTIONS_THROWN_KEY = "additionally, one or more exceptions were thrown while comparing elements"
FIRST_EXCEPTION_KEY = "first exception"
EXPECTED_ORDER_KEY = "expected order"
FIRST_OUT_OF_ORDER_KEY = "first out-of-order position"


def check_contains_exactly(
    actual: Sequence[Any],
    expected: Sequence[Any],
    relation: Relation,
    *,
    in_order: bool = False,
) -> CheckResult:
    """Check that actual and expected elements pair up one-to-one under ``relation``.

    With ``in_order``, a full match must also hold position by position.
    """
    matrix = evaluate_pairing_matrix(actual, expected, relation)
    outcome = solve_matching(matrix)
    if not outcome.is_full_match:
        _LOGGER.debug(
            "contains-exactly failed: %d unexpected, %d missing.",
            len(outcome.unmatched_actual_indices),
            len(outcome.unmatched_expected_indices),
        )
        return CheckResult(failure=_partial_match_failure(matrix, outcome, relation))
    if not in_order:
        return CheckResult()

    verification = verify_order(matrix, outcome)
    if verification.first_out_of_order_index is None:
        return CheckResult()
    return CheckResult(
        failure=_order_failure(matrix, relation, verification.first_out_of_order_index)
    )


def check_contains(
    actual: Sequence[Any],
    expected_element: Any,
    relation: Relation,
) -> CheckResult:
    """Check that at least one actual element corresponds to ``expected_element``."""
    matrix = evaluate_pairing_matrix(actual, (expected_element,), relation)
    if any(row[0].outcome == CellOutcome.MATCH for row in matrix.cells):
        return CheckResult()
    headline = (
        f"Not true that {bracketed(matrix.actual)} contains at least one element that "
        f"{relation.describe()} {bracketed(expected_element)}"
    )
    facts = (Fact(headline), *_error_facts(matrix.first_error))
    return CheckResult(failure=FailureDescription(facts=facts))


def check_corresponds(actual: Any, expected: Any, relation: Relation) -> CheckResult:
    """Check one actual/expected pair, adding the relation's diff text on failure."""
    headline = f"Not true that {bracketed(actual)} {relation.describe()} {bracketed(expected)}"
    try:
        corresponds = relation.compare(actual, expected)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        comparison_error = ComparisonError(
            actual_index=0,
            expected_index=0,
            actual=actual,
            expected=expected,
            error=exc,
        )
        facts = (Fact(headline), *_error_facts(comparison_error))
        return CheckResult(failure=FailureDescription(facts=facts))
    if corresponds:
        return CheckResult()

    diff = relation.diff_description(actual, expected)
    if diff:
        headline = f"{headline} ({diff})"
    return CheckResult(failure=FailureDescription(facts=(Fact(headline),)))


def _partial_match_failure(
    matrix: PairingMatrix,
    outcome: MatchOutcome,
    relation: Relation,
) -> FailureDescription:
    headline = (
        f"{_contains_exactly_prefix(matrix, relation)}. "
        f"{_describe_missing_or_unexpected(matrix, outcome, relation)}"
    )
    return FailureDescription(facts=(Fact(headline), *_error_facts(outcome.first_error)))


def _order_failure(
    matrix: PairingMatrix,
    relation: Relation,
    out_of_order_index: int,
) -> FailureDescription:
    headline = (
        f"{_contains_exactly_prefix(matrix, relation)} in order. "
        "The elements correspond but not in the expected order"
    )
    expected_order = "; ".join(
        f"#{position} an element that {relation.describe()} {bracketed(value)}"
        for position, value in enumerate(matrix.expected)
    )
    out_of_order = (
        f"#{out_of_order_index} {bracketed(matrix.actual[out_of_order_index])} does not "
        f"correspond to {bracketed(matrix.expected[out_of_order_index])}"
    )
    return FailureDescription(
        facts=(
            Fact(headline),
            Fact(EXPECTED_ORDER_KEY, expected_order),
            Fact(FIRST_OUT_OF_ORDER_KEY, out_of_order),
        )
    )


def _contains_exactly_prefix(matrix: PairingMatrix, relation: Relation) -> str:
    return (
        f"Not true that {bracketed(matrix.actual)} contains exactly one element that "
        f"{relation.describe()} each element of {bracketed(matrix.expected)}"
    )


def _describe_missing_or_unexpected(
    matrix: PairingMatrix,
    outcome: MatchOutcome,
    relation: Relation,
) -> str:
    missing = [matrix.expected[index] for index in outcome.unmatched_expected_indices]
    unexpected = [matrix.actual[index] for index in outcome.unmatched_actual_indices]
    unexpected_text = f"has unexpected elements {bracketed(unexpected)}"
    if not missing:
        return f"It {unexpected_text}"

    if len(missing) == 1:
        missing_text = f"is missing an element that {relation.describe()} {bracketed(missing[0])}"
    else:
        missing_text = f"is missing elements that {relation.describe()} {bracketed(missing)}"
    if not unexpected:
        return f"It {missing_text}"
    return f"It {missing_text} and {unexpected_text}"


def _error_facts(comparison_error: ComparisonError | None) -> tuple[Fact, ...]:
    if comparison_error is None:
        return ()
    return (
        Fact(EXCEPTIONS_THROWN_KEY),
        Fact(FIRST_EXCEPTION_KEY, describe_comparison_error(comparison_error)),
    )
