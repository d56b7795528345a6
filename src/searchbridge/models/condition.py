"""Filter conditions — The closed set of predicates a ``Search`` can carry.

Conditions form a tree: leaf predicates (equality, ranges, geo) combined
with ``AndCondition`` / ``OrCondition``.  Every variant derives from
``Condition`` so that containers can hold any node, but adapters only
understand the variants defined here.  Anything else is rejected when the
tree is compiled.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

FilterValue = bool | int | float | str
"""Scalar value a field can be compared against."""


class Condition(BaseModel):
    """Base class of all filter-tree nodes."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class IdentifierCondition(Condition):
    """Match the document whose identifier field equals ``identifier``."""

    identifier: str = Field(description="Document identifier")


class SearchCondition(Condition):
    """Free-text query term.  Not a filter: it becomes the engine query."""

    query: str = Field(description="Free-text query")


class EqualCondition(Condition):
    field: str
    value: FilterValue


class NotEqualCondition(Condition):
    field: str
    value: FilterValue


class InCondition(Condition):
    """Match when ``field`` equals any of ``values``."""

    field: str
    values: tuple[FilterValue, ...] = Field(min_length=1)

    def create_or_condition(self) -> OrCondition:
        """Rewrite as the equivalent ``OrCondition`` of ``EqualCondition`` nodes."""
        return OrCondition(conditions=tuple(EqualCondition(field=self.field, value=v) for v in self.values))


class NotInCondition(Condition):
    field: str
    values: tuple[FilterValue, ...]


class GreaterThanCondition(Condition):
    field: str
    value: FilterValue


class GreaterThanEqualCondition(Condition):
    field: str
    value: FilterValue


class LessThanCondition(Condition):
    field: str
    value: FilterValue


class LessThanEqualCondition(Condition):
    field: str
    value: FilterValue


class GeoDistanceCondition(Condition):
    """Documents within ``distance`` meters of a point."""

    latitude: float
    longitude: float
    distance: int | float = Field(ge=0, description="Radius in meters")


class GeoBoundingBoxCondition(Condition):
    """Documents inside the box spanned by the north-east and south-west corners."""

    north_latitude: float
    east_longitude: float
    south_latitude: float
    west_longitude: float


class AndCondition(Condition):
    conditions: tuple[Condition, ...] = ()


class OrCondition(Condition):
    conditions: tuple[Condition, ...] = ()
