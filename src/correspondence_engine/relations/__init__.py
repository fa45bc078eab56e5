"""Relation domain exports."""

from .relation import DiffFormattingRelation, Relation
from .relation_factories import (
    PredicateRelation,
    ToleranceRelation,
    TransformingRelation,
    from_predicate,
    from_transform,
    from_transforms,
    tolerance,
)

__all__ = [
    "Relation",
    "DiffFormattingRelation",
    "PredicateRelation",
    "TransformingRelation",
    "ToleranceRelation",
    "from_predicate",
    "from_transform",
    "from_transforms",
    "tolerance",
]
