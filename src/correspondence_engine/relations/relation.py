"""Relation domain entities."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

_LOGGER = logging.getLogger(__name__)

DiffFormatter = Callable[[Any, Any], str | None]


class Relation(ABC):
    """Named binary relation between an actual element and an expected element.

    Relations do not support equality or hashing; comparing two raises TypeError.
    """

    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def compare(self, actual: Any, expected: Any) -> bool:
        """Return True when ``actual`` corresponds to ``expected``.

        Implementations may raise; callers evaluating many pairs record the error as data.
        """

    @abstractmethod
    def describe(self) -> str:
        """Return the human-readable fragment used in failure messages."""

    def diff_description(self, actual: Any, expected: Any) -> str | None:
        """Explain how ``actual`` differs from ``expected``, or None when unavailable.

        Never raises: errors from the underlying formatter are logged and suppressed.
        """
        try:
            return self._format_diff(actual, expected)
        except Exception:  # pylint: disable=broad-exception-caught
            _LOGGER.debug(
                "Suppressed diff formatting error for relation %r.", self.describe(), exc_info=True
            )
            return None

    def _format_diff(self, actual: Any, expected: Any) -> str | None:
        del actual, expected
        return None

    def formatting_diffs_using(self, formatter: DiffFormatter) -> Relation:
        """Return a relation with the same comparison and description plus a diff formatter."""
        return DiffFormattingRelation(delegate=self, formatter=formatter)

    def __eq__(self, other: object) -> bool:
        raise TypeError(f"{type(self).__name__} does not support equality comparison.")

    def __ne__(self, other: object) -> bool:
        raise TypeError(f"{type(self).__name__} does not support equality comparison.")

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, eq=False)
class DiffFormattingRelation(Relation):
    """Relation delegating comparison to another relation while adding diff text."""

    delegate: Relation
    formatter: DiffFormatter

    def compare(self, actual: Any, expected: Any) -> bool:
        return self.delegate.compare(actual, expected)

    def describe(self) -> str:
        return self.delegate.describe()

    def _format_diff(self, actual: Any, expected: Any) -> str | None:
        return self.formatter(actual, expected)
