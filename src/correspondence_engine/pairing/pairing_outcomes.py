"""Pairing and matching domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CellOutcome(str, Enum):
    """Result of evaluating the relation for one actual/expected pair."""

    MATCH = "match"
    NO_MATCH = "no_match"
    ERRORED = "errored"


class MatchStatus(str, Enum):
    """Overall matching status over a pairing matrix."""

    FULL = "full"
    PARTIAL = "partial"


@dataclass(frozen=True)
class CellResult:
    """Evaluated cell of a pairing matrix."""

    outcome: CellOutcome
    error: Exception | None = None


@dataclass(frozen=True)
class ComparisonError:
    """Error raised by the relation while comparing one actual/expected pair."""

    actual_index: int
    expected_index: int
    actual: Any
    expected: Any
    error: Exception


@dataclass(frozen=True)
class PairingMatrix:
    """Relation outcomes for every actual/expected index pair, in row-major order."""

    actual: tuple[Any, ...]
    expected: tuple[Any, ...]
    cells: tuple[tuple[CellResult, ...], ...]
    first_error: ComparisonError | None

    def outcome(self, actual_index: int, expected_index: int) -> CellOutcome:
        """Return the outcome of one cell."""
        return self.cells[actual_index][expected_index].outcome

    def matching_expected_indices(self, actual_index: int) -> tuple[int, ...]:
        """Return expected indices whose cell in the given row is a match, ascending."""
        return tuple(
            expected_index
            for expected_index, cell in enumerate(self.cells[actual_index])
            if cell.outcome == CellOutcome.MATCH
        )


@dataclass(frozen=True)
class MatchOutcome:
    """Maximum matching computed over a pairing matrix."""

    status: MatchStatus
    pairs: tuple[tuple[int, int], ...]
    unmatched_actual_indices: tuple[int, ...]
    unmatched_expected_indices: tuple[int, ...]
    first_error: ComparisonError | None = None

    @property
    def is_full_match(self) -> bool:
        """Return True when every actual and expected element is paired."""
        return self.status == MatchStatus.FULL


@dataclass(frozen=True)
class OrderVerification:
    """Positional re-check of a full match."""

    in_order: bool
    first_out_of_order_index: int | None = None
