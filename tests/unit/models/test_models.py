"""Tests for the neutral search models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from searchbridge.adapters.base.exceptions import ConfigurationError
from searchbridge.models.condition import (
    EqualCondition,
    IdentifierCondition,
    InCondition,
    OrCondition,
    SearchCondition,
)
from searchbridge.models.result import Result
from searchbridge.models.schema import Field, FieldType, Index
from searchbridge.models.search import Search

# ── Conditions ───────────────────────────────────────────────────────────────


class TestConditions:
    def test_values_keep_their_type(self) -> None:
        assert EqualCondition(field="a", value=True).value is True
        assert type(EqualCondition(field="a", value=1).value) is int
        assert type(EqualCondition(field="a", value=1.5).value) is float
        assert EqualCondition(field="a", value="1").value == "1"

    def test_in_creates_or_condition(self) -> None:
        condition = InCondition(field="tags", values=["a", "b"])
        assert condition.create_or_condition() == OrCondition(
            conditions=[EqualCondition(field="tags", value="a"), EqualCondition(field="tags", value="b")]
        )

    def test_in_requires_values(self) -> None:
        with pytest.raises(ValidationError):
            InCondition(field="tags", values=[])

    def test_conditions_are_immutable(self) -> None:
        condition = EqualCondition(field="a", value=1)
        with pytest.raises(ValidationError):
            condition.value = 2  # type: ignore[misc]


# ── Schema ───────────────────────────────────────────────────────────────────


class TestIndex:
    def test_identifier_field_name(self, index: Index) -> None:
        assert index.get_identifier_field_name() == "id"

    def test_custom_identifier_field(self) -> None:
        index = Index(name="products", fields={"sku": Field(type=FieldType.IDENTIFIER)})
        assert index.get_identifier_field_name() == "sku"

    def test_missing_identifier_field(self) -> None:
        with pytest.raises(ConfigurationError, match="'plain' has no identifier field"):
            Index(name="plain").get_identifier_field_name()


# ── Search ───────────────────────────────────────────────────────────────────


class TestSearch:
    def test_defaults(self, index: Index) -> None:
        search = Search(index=index)
        assert search.filters == ()
        assert search.offset == 0
        assert search.limit is None
        assert search.highlight_pre_tag == "<mark>"
        assert search.highlight_post_tag == "</mark>"

    def test_negative_offset_rejected(self, index: Index) -> None:
        with pytest.raises(ValidationError):
            Search(index=index, offset=-1)

    def test_invalid_sort_direction_rejected(self, index: Index) -> None:
        with pytest.raises(ValidationError):
            Search(index=index, sort_bys={"views": "up"})

    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({"filters": [IdentifierCondition(identifier="1")], "limit": 1}, True),
            ({"filters": [IdentifierCondition(identifier="1")], "limit": 1, "offset": 1}, False),
            ({"filters": [IdentifierCondition(identifier="1")]}, False),
            ({"filters": [IdentifierCondition(identifier="1"), SearchCondition(query="x")], "limit": 1}, False),
            ({"filters": [EqualCondition(field="id", value="1")], "limit": 1}, False),
        ],
    )
    def test_is_identifier_lookup(self, index: Index, kwargs: dict, expected: bool) -> None:
        assert Search(index=index, **kwargs).is_identifier_lookup() is expected

    def test_get_identifier_lookup_returns_condition(self, index: Index) -> None:
        condition = IdentifierCondition(identifier="42")
        assert Search(index=index, filters=[condition], limit=1).get_identifier_lookup() == condition
        assert Search(index=index, filters=[condition], limit=2).get_identifier_lookup() is None


# ── Result ───────────────────────────────────────────────────────────────────


class TestResult:
    def test_iterates_documents(self) -> None:
        result = Result(iter([{"id": "1"}, {"id": "2"}]), 2)
        assert result.total_count == 2
        assert [doc["id"] for doc in result] == ["1", "2"]

    def test_empty(self) -> None:
        result = Result.create_empty()
        assert result.total_count == 0
        assert list(result) == []

    def test_unknown_total(self) -> None:
        assert Result([], None).total_count is None
