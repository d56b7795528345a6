"""Search request model — What the caller wants to find, engine independent."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from searchbridge.models.condition import Condition, IdentifierCondition
from searchbridge.models.schema import Index

SortDirection = Literal["asc", "desc"]


class Search(BaseModel):
    """A single search request against one index.

    ``filters`` are the top-level conditions, combined conjunctively.
    ``sort_bys`` keeps insertion order, which is also the sort priority.
    A ``limit`` of ``None`` leaves the page size to the engine.
    """

    model_config = ConfigDict(frozen=True)

    index: Index = Field(description="Target index")
    filters: tuple[Condition, ...] = Field(default=(), description="Top-level filter conditions (AND)")
    sort_bys: dict[str, SortDirection] = Field(default_factory=dict, description="Field -> sort direction")
    offset: int = Field(default=0, ge=0, description="Number of hits to skip")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of hits, None for unbounded")
    highlight_fields: tuple[str, ...] = Field(default=(), description="Fields to return highlighted")
    highlight_pre_tag: str = Field(default="<mark>", description="Marker inserted before a highlight")
    highlight_post_tag: str = Field(default="</mark>", description="Marker inserted after a highlight")

    def get_identifier_lookup(self) -> IdentifierCondition | None:
        """The identifier condition when the request fetches exactly one document by it."""
        if len(self.filters) != 1 or self.offset != 0 or self.limit != 1:
            return None
        condition = self.filters[0]
        return condition if isinstance(condition, IdentifierCondition) else None

    def is_identifier_lookup(self) -> bool:
        return self.get_identifier_lookup() is not None
