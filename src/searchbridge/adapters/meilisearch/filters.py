"""Meilisearch filter compiler — Renders condition trees as filter expressions.

Meilisearch `filter expressions`_ are strings such as::

    status = "published" AND (views > 10 OR featured = true)

Sibling conditions are joined with ``AND`` (conjunctive) or ``OR``.  As soon
as a nested ``AndCondition`` / ``OrCondition`` is joined with siblings its
expression is parenthesized, so the result never relies on the engine's
operator precedence.

The free-text ``SearchCondition`` is not a filter: it is extracted from the
tree and returned next to the filter string.

.. _filter expressions: https://www.meilisearch.com/docs/learn/filtering_and_sorting/filter_expression_reference
"""

from __future__ import annotations

from collections.abc import Iterable

from searchbridge.adapters.base.exceptions import DuplicateSearchConditionError, UnsupportedConditionError
from searchbridge.models.condition import (
    AndCondition,
    Condition,
    EqualCondition,
    FilterValue,
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
from searchbridge.models.schema import Index

_COMPARISON_OPERATORS: dict[type[Condition], str] = {
    EqualCondition: "=",
    NotEqualCondition: "!=",
    GreaterThanCondition: ">",
    GreaterThanEqualCondition: ">=",
    LessThanCondition: "<",
    LessThanEqualCondition: "<=",
}


def escape_filter_value(value: FilterValue) -> str:
    """Render a scalar as a filter literal.

    Strings are double-quoted with backslashes and double quotes escaped;
    booleans become ``true`` / ``false``; numbers keep their decimal form.
    """
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def escape_array_filter_values(values: Iterable[FilterValue]) -> str:
    return ", ".join(escape_filter_value(v) for v in values)


def compile_filters(
    index: Index,
    conditions: Iterable[Condition],
    conjunctive: bool = True,
) -> tuple[str, str | None]:
    """Compile sibling conditions into a filter expression.

    Args:
        index: Schema of the searched index (resolves the identifier field).
        conditions: Sibling conditions, in order.
        conjunctive: Join siblings with ``AND`` when true, ``OR`` otherwise.

    Returns:
        ``(filter, query)``: the filter expression (``""`` when nothing
        filters) and the free-text query (``None`` means match all).

    Raises:
        UnsupportedConditionError: For a condition type outside the supported set.
        DuplicateSearchConditionError: If the tree holds more than one ``SearchCondition``.
    """
    expression, _, query = _compile(index, conditions, conjunctive)
    return expression, query


def _compile(
    index: Index,
    conditions: Iterable[Condition],
    conjunctive: bool,
) -> tuple[str, bool, str | None]:
    # Each part is (expression, is_group); groups get parenthesized when joined.
    parts: list[tuple[str, bool]] = []
    query: str | None = None

    for condition in conditions:
        if isinstance(condition, InCondition):
            condition = condition.create_or_condition()

        if isinstance(condition, SearchCondition):
            query = _merge_query(query, condition.query)
        elif isinstance(condition, (AndCondition, OrCondition)):
            nested, is_group, nested_query = _compile(
                index,
                condition.conditions,
                isinstance(condition, AndCondition),
            )
            if nested_query is not None:
                query = _merge_query(query, nested_query)
            if nested:
                parts.append((nested, is_group))
        else:
            parts.append((_render_condition(index, condition), False))

    if not parts:
        return "", False, query

    if len(parts) == 1:
        expression, is_group = parts[0]
        return expression, is_group, query

    expression = (" AND " if conjunctive else " OR ").join(
        f"({part})" if is_group else part for part, is_group in parts
    )
    return expression, True, query


def _render_condition(index: Index, condition: Condition) -> str:
    if isinstance(condition, IdentifierCondition):
        return f"{index.get_identifier_field_name()} = {escape_filter_value(condition.identifier)}"

    operator = _COMPARISON_OPERATORS.get(type(condition))
    if operator is not None:
        return f"{condition.field} {operator} {escape_filter_value(condition.value)}"  # type: ignore[attr-defined]

    if isinstance(condition, NotInCondition):
        return f"{condition.field} NOT IN [{escape_array_filter_values(condition.values)}]"

    if isinstance(condition, GeoDistanceCondition):
        return f"_geoRadius({condition.latitude}, {condition.longitude}, {condition.distance})"

    if isinstance(condition, GeoBoundingBoxCondition):
        return (
            f"_geoBoundingBox([{condition.north_latitude}, {condition.east_longitude}], "
            f"[{condition.south_latitude}, {condition.west_longitude}])"
        )

    raise UnsupportedConditionError(condition)


def _merge_query(current: str | None, new: str) -> str:
    if current is not None:
        raise DuplicateSearchConditionError(
            f"Only one SearchCondition is supported per search, got '{current}' and '{new}'."
        )
    return new