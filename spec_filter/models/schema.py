from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from spec_filter.models.refs import schema_ref, simple_ref

COMPOSITION_KEYS = {"allOf": "all_of", "oneOf": "one_of", "anyOf": "any_of"}


@dataclass
class Schema:
    """A data shape, either inline or a reference to a named component schema.

    `ref` holds the simple schema name (`Pet`), never the object it points to.
    Keywords without a dedicated field are kept in `extensions` untouched.
    """

    ref: Optional[str] = None
    type: Optional[str] = None
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    required: Optional[List[str]] = None
    properties: Optional[Dict[str, "Schema"]] = None
    items: Optional["Schema"] = None
    additional_properties: Optional[Union["Schema", bool]] = None
    all_of: Optional[List["Schema"]] = None
    one_of: Optional[List["Schema"]] = None
    any_of: Optional[List["Schema"]] = None
    nullable: Optional[bool] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_reference(self) -> bool:
        return self.ref is not None

    def compositions(self) -> List["Schema"]:
        """All members of allOf, oneOf and anyOf, in that order."""
        members: List[Schema] = []
        for composed in (self.all_of, self.one_of, self.any_of):
            if composed:
                members.extend(composed)
        return members

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Schema":
        data = dict(data)
        schema = Schema()

        if "$ref" in data:
            schema.ref = simple_ref(data.pop("$ref"))
        for key in ("type", "format", "title", "description", "required", "nullable"):
            if key in data:
                setattr(schema, key, data.pop(key))

        if "properties" in data:
            properties = data.pop("properties") or {}
            schema.properties = {name: Schema.from_dict(value) for name, value in properties.items()}
        if "items" in data:
            schema.items = Schema.from_dict(data.pop("items"))
        if "additionalProperties" in data:
            additional = data.pop("additionalProperties")
            schema.additional_properties = (
                Schema.from_dict(additional) if isinstance(additional, dict) else additional
            )
        for key, attribute in COMPOSITION_KEYS.items():
            if key in data:
                setattr(schema, attribute, [Schema.from_dict(member) for member in data.pop(key)])

        schema.extensions = data
        return schema

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.ref is not None:
            result["$ref"] = schema_ref(self.ref)
        for key in ("type", "format", "title", "description", "required", "nullable"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.properties is not None:
            result["properties"] = {name: value.to_dict() for name, value in self.properties.items()}
        if self.items is not None:
            result["items"] = self.items.to_dict()
        if isinstance(self.additional_properties, Schema):
            result["additionalProperties"] = self.additional_properties.to_dict()
        elif self.additional_properties is not None:
            result["additionalProperties"] = self.additional_properties
        for key, attribute in COMPOSITION_KEYS.items():
            members = getattr(self, attribute)
            if members is not None:
                result[key] = [member.to_dict() for member in members]
        result.update(self.extensions)
        return result
