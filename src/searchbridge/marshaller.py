"""Marshaller — Converts raw engine records into neutral documents.

Engines store some field types in their own layout (Meilisearch keeps the
geo point of a document in a reserved ``_geo`` attribute as
``{"lat": ..., "lng": ...}``).  The marshaller walks the index schema and
rebuilds the neutral shape from a raw record, dropping everything the
schema does not describe.
"""

from __future__ import annotations

from typing import Any, TypedDict

from searchbridge.models.result import Document
from searchbridge.models.schema import Field, FieldType


class GeoPointFieldConfig(TypedDict):
    name: str
    latitude: str
    longitude: str


class Marshaller:
    """Schema-driven conversion of raw records.

    Args:
        geo_point_field_config: Where the engine keeps geo points.  When set,
            every geo-point field is read from ``raw[config["name"]]`` using
            the configured latitude/longitude keys.
    """

    def __init__(self, geo_point_field_config: GeoPointFieldConfig | None = None) -> None:
        self._geo_point_field_config = geo_point_field_config

    def unmarshall(self, fields: dict[str, Field], raw: dict[str, Any]) -> Document:
        document: Document = {}

        for name, field in fields.items():
            if field.type == FieldType.GEOPOINT and self._geo_point_field_config is not None:
                config = self._geo_point_field_config
                value = _unmarshall_geo_point(raw.get(config["name"]), config)
                if value is not None:
                    document[name] = value
                continue

            if name not in raw:
                if field.multiple:
                    document[name] = []
                continue

            value = raw[name]
            if field.type == FieldType.OBJECT:
                if field.multiple:
                    value = [self.unmarshall(field.fields, item) for item in value or []]
                elif value is not None:
                    value = self.unmarshall(field.fields, value)

            document[name] = value

        return document


def _unmarshall_geo_point(raw: Any, config: GeoPointFieldConfig) -> dict[str, float] | None:
    if not isinstance(raw, dict):
        return None

    return {
        "latitude": raw[config["latitude"]],
        "longitude": raw[config["longitude"]],
    }
