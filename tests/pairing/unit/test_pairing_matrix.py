"""Pairing matrix evaluation tests."""

from __future__ import annotations

import pytest
from correspondence_engine.pairing import CellOutcome, evaluate_pairing_matrix
from correspondence_engine.relations import from_predicate


class _RecordingPredicate:
    """Prefix predicate that records every invocation."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, object]] = []

    def __call__(self, actual: str, expected: str) -> bool:
        self.calls.append((actual, expected))
        return actual.startswith(expected)


def test_evaluates_every_cell_once_in_row_major_order() -> None:
    predicate = _RecordingPredicate()
    relation = from_predicate(predicate, "starts with")

    evaluate_pairing_matrix(["foot", "barn"], ["foo", "bar", "baz"], relation)

    assert predicate.calls == [
        ("foot", "foo"),
        ("foot", "bar"),
        ("foot", "baz"),
        ("barn", "foo"),
        ("barn", "bar"),
        ("barn", "baz"),
    ]


def test_classifies_cells_as_match_and_no_match() -> None:
    relation = from_predicate(lambda actual, expected: actual.startswith(expected), "starts with")

    matrix = evaluate_pairing_matrix(["foot", "barn"], ["foo", "bar"], relation)

    assert matrix.outcome(0, 0) == CellOutcome.MATCH
    assert matrix.outcome(0, 1) == CellOutcome.NO_MATCH
    assert matrix.outcome(1, 0) == CellOutcome.NO_MATCH
    assert matrix.outcome(1, 1) == CellOutcome.MATCH
    assert matrix.matching_expected_indices(0) == (0,)
    assert matrix.first_error is None


def test_records_errors_and_keeps_first_in_row_major_order() -> None:
    predicate = _RecordingPredicate()
    relation = from_predicate(predicate, "starts with")

    matrix = evaluate_pairing_matrix(["foot", None, None], ["foot", "barn"], relation)

    assert len(predicate.calls) == 6
    assert matrix.outcome(1, 0) == CellOutcome.ERRORED
    assert matrix.outcome(2, 1) == CellOutcome.ERRORED
    assert matrix.first_error is not None
    assert (matrix.first_error.actual_index, matrix.first_error.expected_index) == (1, 0)
    assert matrix.first_error.actual is None
    assert matrix.first_error.expected == "foot"
    assert isinstance(matrix.first_error.error, AttributeError)
    assert matrix.cells[1][0].error is matrix.first_error.error


def test_first_error_is_deterministic_across_runs() -> None:
    relation = from_predicate(lambda actual, expected: actual.startswith(expected), "starts with")
    actual = ["foot", "barn", None]
    expected = [None, "foot"]

    first = evaluate_pairing_matrix(actual, expected, relation)
    second = evaluate_pairing_matrix(actual, expected, relation)

    assert first.first_error is not None and second.first_error is not None
    assert (first.first_error.actual_index, first.first_error.expected_index) == (0, 0)
    assert (second.first_error.actual_index, second.first_error.expected_index) == (0, 0)
    assert [[cell.outcome for cell in row] for row in first.cells] == [
        [cell.outcome for cell in row] for row in second.cells
    ]


def test_supports_empty_sequences() -> None:
    relation = from_predicate(lambda actual, expected: actual == expected, "is equal to")

    matrix = evaluate_pairing_matrix([], ["a"], relation)

    assert matrix.actual == ()
    assert matrix.expected == ("a",)
    assert matrix.cells == ()
    assert matrix.first_error is None


def test_accepts_one_shot_iterables() -> None:
    relation = from_predicate(lambda actual, expected: actual == expected, "is equal to")

    matrix = evaluate_pairing_matrix(iter(["a", "b"]), iter(["b"]), relation)

    assert matrix.actual == ("a", "b")
    assert matrix.outcome(1, 0) == CellOutcome.MATCH


def test_interrupts_are_not_recorded_as_errors() -> None:
    def _interrupting(actual: object, expected: object) -> bool:
        raise KeyboardInterrupt

    relation = from_predicate(_interrupting, "interrupts")

    with pytest.raises(KeyboardInterrupt):
        evaluate_pairing_matrix(["a"], ["b"], relation)
