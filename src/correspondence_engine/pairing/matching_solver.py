"""Maximum bipartite matching over a pairing matrix."""

from __future__ import annotations

from .pairing_outcomes import MatchOutcome, MatchStatus, PairingMatrix


def solve_matching(matrix: PairingMatrix) -> MatchOutcome:
    """Compute a maximum matching over the matrix's MATCH cells.

    Rows are processed in ascending actual index and candidates tried in ascending expected
    index, so identical matrices always produce identical unmatched sets. ERRORED cells are
    never edges. The representative error is attached only to partial outcomes.
    """
    actual_count = len(matrix.actual)
    expected_count = len(matrix.expected)
    adjacency = tuple(matrix.matching_expected_indices(index) for index in range(actual_count))
    actual_by_expected: list[int | None] = [None] * expected_count

    for actual_index in range(actual_count):
        _augment(actual_index, adjacency, actual_by_expected)

    pairs = tuple(
        sorted(
            (actual_index, expected_index)
            for expected_index, actual_index in enumerate(actual_by_expected)
            if actual_index is not None
        )
    )
    matched_actual = {actual_index for actual_index, _ in pairs}
    unmatched_actual = tuple(index for index in range(actual_count) if index not in matched_actual)
    unmatched_expected = tuple(
        index for index, owner in enumerate(actual_by_expected) if owner is None
    )

    if not unmatched_actual and not unmatched_expected:
        return MatchOutcome(
            status=MatchStatus.FULL,
            pairs=pairs,
            unmatched_actual_indices=(),
            unmatched_expected_indices=(),
        )
    return MatchOutcome(
        status=MatchStatus.PARTIAL,
        pairs=pairs,
        unmatched_actual_indices=unmatched_actual,
        unmatched_expected_indices=unmatched_expected,
        first_error=matrix.first_error,
    )


def _augment(
    root_index: int,
    adjacency: tuple[tuple[int, ...], ...],
    actual_by_expected: list[int | None],
) -> bool:
    visited: set[int] = set()
    # (actual index, next candidate position); path[k] is the column tried by frame k.
    stack: list[tuple[int, int]] = [(root_index, 0)]
    path: list[int] = []
    while stack:
        actual_index, position = stack[-1]
        candidates = adjacency[actual_index]
        if position >= len(candidates):
            stack.pop()
            if path:
                path.pop()
            continue
        stack[-1] = (actual_index, position + 1)
        expected_index = candidates[position]
        if expected_index in visited:
            continue
        visited.add(expected_index)
        path.append(expected_index)
        owner = actual_by_expected[expected_index]
        if owner is None:
            for (row, _), column in zip(stack, path, strict=True):
                actual_by_expected[column] = row
            return True
        stack.append((owner, 0))
    return False
