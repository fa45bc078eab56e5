"""Built-in relations addressable by name from case files."""

from __future__ import annotations

from collections.abc import Sized

from correspondence_engine.relations import (
    Relation,
    from_predicate,
    from_transform,
    from_transforms,
    tolerance,
)

from .case_models import RelationKind, RelationSpec


def build_relation(spec: RelationSpec) -> Relation:
    """Build the relation named by ``spec``.

    Raises:
      ValueError: If a tolerance relation has no tolerance or a negative one.
    """
    if spec.kind == RelationKind.TOLERANCE:
        if spec.tolerance is None:
            raise ValueError("tolerance relation requires a tolerance value")
        return tolerance(spec.tolerance)
    if spec.kind == RelationKind.EQUALS:
        return from_predicate(lambda actual, expected: actual == expected, "is equal to")
    if spec.kind == RelationKind.STARTS_WITH:
        return from_predicate(
            lambda actual, expected: actual.startswith(expected), "starts with"
        ).formatting_diffs_using(_describe_common_prefix)
    if spec.kind == RelationKind.ENDS_WITH:
        return from_predicate(lambda actual, expected: actual.endswith(expected), "ends with")
    if spec.kind == RelationKind.CONTAINS_TEXT:
        return from_predicate(lambda actual, expected: expected in actual, "contains")
    if spec.kind == RelationKind.CASE_INSENSITIVE:
        return from_transforms(_casefold, _casefold, "is equal, ignoring case, to")
    return from_transform(_length, "has a length of")


def _casefold(value: str) -> str:
    return value.casefold()


def _length(value: Sized) -> int:
    return len(value)


def _describe_common_prefix(actual: str, expected: str) -> str | None:
    shared = 0
    for actual_char, expected_char in zip(actual, expected, strict=False):
        if actual_char != expected_char:
            break
        shared += 1
    if shared >= len(expected):
        return None
    return f"differs from the expected prefix at index {shared}"
