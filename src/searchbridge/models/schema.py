"""Index schema — Field descriptors of a searchable index."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field as PydanticField

from searchbridge.adapters.base.exceptions import ConfigurationError


class FieldType(StrEnum):
    IDENTIFIER = "identifier"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    GEOPOINT = "geopoint"
    OBJECT = "object"


class Field(BaseModel):
    """A single field of an index schema.

    ``fields`` is only used by ``FieldType.OBJECT`` and holds the nested
    schema of the object.
    """

    model_config = ConfigDict(frozen=True)

    type: FieldType = PydanticField(default=FieldType.TEXT, description="Field type")
    multiple: bool = PydanticField(default=False, description="Whether the field holds a list of values")
    searchable: bool = PydanticField(default=True, description="Included in free-text search")
    filterable: bool = PydanticField(default=False, description="Usable in filter conditions")
    sortable: bool = PydanticField(default=False, description="Usable in sort specifications")
    fields: dict[str, Field] = PydanticField(default_factory=dict, description="Nested fields of an object")


class Index(BaseModel):
    """Schema descriptor of an index: its name and ordered field map."""

    model_config = ConfigDict(frozen=True)

    name: str = PydanticField(description="Index name (engine uid)")
    fields: dict[str, Field] = PydanticField(default_factory=dict, description="Field name -> descriptor")

    def get_identifier_field_name(self) -> str:
        """Name of the identifier field.

        Raises:
            ConfigurationError: If the schema has no identifier field.
        """
        for name, field in self.fields.items():
            if field.type == FieldType.IDENTIFIER:
                return name
        raise ConfigurationError(f"Index '{self.name}' has no identifier field.")
