"""Case file loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .builtin_relations import build_relation
from .case_models import CaseFile, CheckKind, CorrespondenceCase, RelationKind, RelationSpec

_LOGGER = logging.getLogger(__name__)


class CaseFileError(Exception):
    """Raised when the case file is invalid."""


def load_case_file(case_path: Path | str) -> CaseFile:
    """Load and validate a YAML/JSON case file."""
    path = Path(case_path)
    if not path.exists():
        raise CaseFileError(f"Case file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CaseFileError(f"Failed to parse case file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CaseFileError("Case file root must be a mapping.")

    raw_cases = parsed.get("cases")
    if not isinstance(raw_cases, Sequence) or isinstance(raw_cases, str):
        raise CaseFileError("Case file requires a 'cases' list.")
    if not raw_cases:
        raise CaseFileError("Case file must declare at least one case.")

    cases: list[CorrespondenceCase] = []
    seen_ids: set[str] = set()
    for position, raw_case in enumerate(raw_cases, start=1):
        case = _parse_case(raw_case, position)
        if case.case_id in seen_ids:
            raise CaseFileError(f"Duplicate case id: {case.case_id}")
        seen_ids.add(case.case_id)
        cases.append(case)

    _LOGGER.debug("Loaded %d case(s) from %s.", len(cases), path)
    return CaseFile(path=path, cases=tuple(cases))


def _parse_case(value: Any, position: int) -> CorrespondenceCase:
    section = _require_mapping(value, f"cases[{position}]")
    case_id = _require_non_empty_string(section.get("id"), f"cases[{position}].id")
    label = f"case '{case_id}'"

    raw_check = section.get("check", CheckKind.CONTAINS_EXACTLY.value)
    check = _parse_enum(CheckKind, raw_check, label)
    relation = _parse_relation(section.get("relation"), label)
    if "actual" not in section:
        raise CaseFileError(f"{label}.actual is required.")
    if "expected" not in section:
        raise CaseFileError(f"{label}.expected is required.")
    actual = section["actual"]
    expected = section["expected"]

    if check in (CheckKind.CONTAINS_EXACTLY, CheckKind.CONTAINS):
        _require_list(actual, f"{label}.actual")
    if check == CheckKind.CONTAINS_EXACTLY:
        _require_list(expected, f"{label}.expected")

    in_order = section.get("in_order", False)
    if not isinstance(in_order, bool):
        raise CaseFileError(f"{label}.in_order must be a boolean.")
    if in_order and check != CheckKind.CONTAINS_EXACTLY:
        raise CaseFileError(f"{label}.in_order is only supported for contains_exactly.")

    return CorrespondenceCase(
        case_id=case_id,
        check=check,
        relation=relation,
        actual=actual,
        expected=expected,
        in_order=in_order,
    )


def _parse_relation(value: Any, label: str) -> RelationSpec:
    if isinstance(value, str):
        value = {"kind": value}
    section = _require_mapping(value, f"{label}.relation")
    kind = _parse_enum(RelationKind, section.get("kind"), f"{label}.relation")
    raw_tolerance = section.get("tolerance")
    if raw_tolerance is not None and (
        isinstance(raw_tolerance, bool) or not isinstance(raw_tolerance, int | float)
    ):
        raise CaseFileError(f"{label}.relation.tolerance must be a number.")
    spec = RelationSpec(kind=kind, tolerance=raw_tolerance)
    try:
        build_relation(spec)
    except (TypeError, ValueError) as exc:
        raise CaseFileError(f"{label}.relation is invalid: {exc}") from exc
    return spec


def _parse_enum(enum_type: type[CheckKind] | type[RelationKind], value: Any, label: str) -> Any:
    raw = _require_non_empty_string(value, f"{label} kind")
    try:
        return enum_type(raw.lower())
    except ValueError as exc:
        supported = ", ".join(member.value for member in enum_type)
        raise CaseFileError(
            f"{label} has unsupported kind '{raw}' (supported: {supported})."
        ) from exc


def _require_list(value: Any, field_name: str) -> None:
    if not isinstance(value, list):
        raise CaseFileError(f"{field_name} must be a list.")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise CaseFileError(f"Case file section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if isinstance(value, bool) or not isinstance(value, str | int):
        raise CaseFileError(f"{field_name} must be a string.")
    stripped = str(value).strip()
    if not stripped:
        raise CaseFileError(f"{field_name} must not be empty.")
    return stripped
