"""Failure description entities."""

from __future__ import annotations

from dataclasses import dataclass


class CorrespondenceAssertionError(AssertionError):
    """Raised by callers that turn a failed check into an assertion error."""

    def __init__(self, failure: FailureDescription) -> None:
        super().__init__(failure.render())
        self.failure = failure


@dataclass(frozen=True)
class Fact:
    """One key/value line of a failure description; ``value`` is None for key-only facts."""

    key: str
    value: str | None = None

    def render(self) -> str:
        """Render the fact as one or more text lines."""
        if self.value is None:
            return self.key
        return f"{self.key}: {self.value}"


@dataclass(frozen=True)
class FailureDescription:
    """Structured failure data in the fixed order a renderer needs."""

    facts: tuple[Fact, ...]

    @property
    def headline(self) -> str:
        """Return the first fact key, which carries the headline sentence."""
        return self.facts[0].key

    @property
    def fact_keys(self) -> tuple[str, ...]:
        """Return the keys of all facts in order."""
        return tuple(fact.key for fact in self.facts)

    def fact_value(self, key: str) -> str | None:
        """Return the value of the first fact with ``key``.

        Raises:
          KeyError: If no fact has the given key.
        """
        for fact in self.facts:
            if fact.key == key:
                return fact.value
        raise KeyError(key)

    def render(self) -> str:
        return "\n".join(fact.render() for fact in self.facts)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one correspondence check."""

    failure: FailureDescription | None = None

    @property
    def passed(self) -> bool:
        """Return True when the check produced no failure."""
        return self.failure is None

    def raise_for_failure(self) -> None:
        """Raise ``CorrespondenceAssertionError`` when the check failed."""
        if self.failure is not None:
            raise CorrespondenceAssertionError(self.failure)
