"""Neutral request/response models shared by all engine adapters."""

from searchbridge.models.condition import (
    AndCondition,
    Condition,
    EqualCondition,
    GeoBoundingBoxCondition,
    GeoDistanceCondition,
    GreaterThanCondition,
    GreaterThanEqualCondition,
    IdentifierCondition,
    InCondition,
    LessThanCondition,
    LessThanEqualCondition,
    NotEqualCondition,
    NotInCondition,
    OrCondition,
    SearchCondition,
)
from searchbridge.models.result import Document, Result
from searchbridge.models.schema import Field, FieldType, Index
from searchbridge.models.search import Search

__all__ = [
    "AndCondition",
    "Condition",
    "Document",
    "EqualCondition",
    "Field",
    "FieldType",
    "GeoBoundingBoxCondition",
    "GeoDistanceCondition",
    "GreaterThanCondition",
    "GreaterThanEqualCondition",
    "IdentifierCondition",
    "InCondition",
    "Index",
    "LessThanCondition",
    "LessThanEqualCondition",
    "NotEqualCondition",
    "NotInCondition",
    "OrCondition",
    "Result",
    "Search",
    "SearchCondition",
]
