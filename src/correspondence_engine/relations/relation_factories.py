"""Factories building relations from predicates, transforms and numeric tolerances."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .relation import Relation

BinaryPredicate = Callable[[Any, Any], bool]
Transform = Callable[[Any], Any]


@dataclass(frozen=True, eq=False)
class PredicateRelation(Relation):
    """Relation backed by an arbitrary two-argument predicate."""

    predicate: BinaryPredicate
    description: str

    def compare(self, actual: Any, expected: Any) -> bool:
        return bool(self.predicate(actual, expected))

    def describe(self) -> str:
        return self.description


@dataclass(frozen=True, eq=False)
class TransformingRelation(Relation):
    """Relation comparing transformed values with absence-aware equality."""

    actual_transform: Transform
    expected_transform: Transform | None
    description: str

    def compare(self, actual: Any, expected: Any) -> bool:
        actual_value = self.actual_transform(actual)
        expected_value = (
            expected if self.expected_transform is None else self.expected_transform(expected)
        )
        return _values_equal(actual_value, expected_value)

    def describe(self) -> str:
        return self.description


@dataclass(frozen=True, eq=False)
class ToleranceRelation(Relation):
    """Relation accepting finite numbers at most ``tolerance`` apart."""

    tolerance: float

    def __post_init__(self) -> None:
        _check_tolerance(self.tolerance)

    def compare(self, actual: Any, expected: Any) -> bool:
        actual_number = _as_float(actual, "actual")
        expected_number = _as_float(expected, "expected")
        if not (math.isfinite(actual_number) and math.isfinite(expected_number)):
            return False
        return abs(actual_number - expected_number) <= self.tolerance

    def describe(self) -> str:
        return f"is a finite number within {self.tolerance} of"


def from_predicate(predicate: BinaryPredicate, description: str) -> Relation:
    """Build a relation from a predicate such as ``lambda a, e: a.startswith(e)``."""
    return PredicateRelation(predicate=predicate, description=description)


def from_transform(transform: Transform, description: str) -> Relation:
    """Build a relation comparing ``transform(actual)`` with the expected value."""
    return TransformingRelation(
        actual_transform=transform,
        expected_transform=None,
        description=description,
    )


def from_transforms(
    actual_transform: Transform,
    expected_transform: Transform,
    description: str,
) -> Relation:
    """Build a relation comparing both sides after mapping them to a common type."""
    return TransformingRelation(
        actual_transform=actual_transform,
        expected_transform=expected_transform,
        description=description,
    )


def tolerance(value: float) -> Relation:
    """Build a relation accepting finite numbers within ``value`` of each other.

    Raises:
      ValueError: If ``value`` is negative or NaN.
    """
    return ToleranceRelation(tolerance=value)


def _values_equal(actual_value: object, expected_value: object) -> bool:
    if actual_value is None or expected_value is None:
        return actual_value is None and expected_value is None
    return bool(actual_value == expected_value)


def _check_tolerance(value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real | Decimal):
        raise TypeError(f"tolerance must be a real number, got {type(value).__name__}.")
    if math.isnan(value) or value < 0:
        raise ValueError(f"tolerance ({value}) cannot be negative")


def _as_float(value: object, operand: str) -> float:
    if value is None:
        raise TypeError(f"{operand} value must not be None for a tolerance comparison.")
    if isinstance(value, bool) or not isinstance(value, numbers.Real | Decimal):
        raise TypeError(
            f"{operand} value must be a real number for a tolerance comparison, "
            f"got {type(value).__name__}."
        )
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf
