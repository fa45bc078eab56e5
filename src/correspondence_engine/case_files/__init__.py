"""Case file domain exports."""

from .builtin_relations import build_relation
from .case_models import CaseFile, CheckKind, CorrespondenceCase, RelationKind, RelationSpec
from .case_scaffold_builder import (
    DEFAULT_CASE_FILENAME,
    build_placeholder_case_file,
    write_placeholder_case_file,
)
from .loader import CaseFileError, load_case_file

__all__ = [
    "CaseFile",
    "CheckKind",
    "CorrespondenceCase",
    "RelationKind",
    "RelationSpec",
    "CaseFileError",
    "build_relation",
    "load_case_file",
    "DEFAULT_CASE_FILENAME",
    "build_placeholder_case_file",
    "write_placeholder_case_file",
]
