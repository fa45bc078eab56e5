"""Rendering of actual and expected values inside failure text."""

from __future__ import annotations

import traceback
from collections.abc import Mapping, Sequence, Set

from correspondence_engine.pairing import ComparisonError


def format_value(value: object) -> str:
    """Render a value the way failure messages show it: ``[foot, None]``, ``2.0``, ``None``.

    A container that contains itself renders the repeat as ``[...]`` or ``{...}``.
    """
    return _format(value, frozenset())


def _format(value: object, enclosing: frozenset[int]) -> str:
    if isinstance(value, str | bytes):
        return str(value)
    if isinstance(value, Mapping):
        if id(value) in enclosing:
            return "{...}"
        inner = enclosing | {id(value)}
        entries = (f"{_format(key, inner)}={_format(item, inner)}" for key, item in value.items())
        return "{" + ", ".join(entries) + "}"
    if isinstance(value, Sequence | Set):
        if id(value) in enclosing:
            return "[...]"
        inner = enclosing | {id(value)}
        return "[" + ", ".join(_format(item, inner) for item in value) + "]"
    return str(value)


def bracketed(value: object) -> str:
    return f"<{format_value(value)}>"


def describe_comparison_error(comparison_error: ComparisonError) -> str:
    """Render ``compare(<actual>, <expected>) threw <ErrorType>: <message>`` plus traceback."""
    error = comparison_error.error
    summary = (
        f"compare({format_value(comparison_error.actual)}, "
        f"{format_value(comparison_error.expected)}) threw {type(error).__name__}"
    )
    message = str(error)
    if message:
        summary = f"{summary}: {message}"
    formatted_traceback = "".join(traceback.format_tb(error.__traceback__)).rstrip()
    if not formatted_traceback:
        return summary
    return f"{summary}\n---\n{formatted_traceback}"
