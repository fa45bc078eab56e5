"""Case file domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class CheckKind(str, Enum):
    """Supported correspondence checks."""

    CONTAINS_EXACTLY = "contains_exactly"
    CONTAINS = "contains"
    CORRESPONDS = "corresponds"


class RelationKind(str, Enum):
    """Built-in relations a case file can name."""

    EQUALS = "equals"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    CONTAINS_TEXT = "contains_text"
    CASE_INSENSITIVE = "case_insensitive"
    LENGTH = "length"
    TOLERANCE = "tolerance"


@dataclass(frozen=True)
class RelationSpec:
    """Relation selection for one case."""

    kind: RelationKind
    tolerance: float | None = None


@dataclass(frozen=True)
class CorrespondenceCase:
    """One check declared in a case file."""

    case_id: str
    check: CheckKind
    relation: RelationSpec
    actual: Any
    expected: Any
    in_order: bool = False


@dataclass(frozen=True)
class CaseFile:
    """Parsed case file."""

    path: Path
    cases: tuple[CorrespondenceCase, ...]
