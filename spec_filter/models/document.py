from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from spec_filter.models.path_item import PathItem
from spec_filter.models.schema import Schema


@dataclass
class Tag:
    """A tag declared at the document root and referenced by name from operations"""

    name: str
    description: Optional[str] = None
    external_docs: Optional[Dict[str, Any]] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Tag":
        data = dict(data)
        return Tag(
            name=data.pop("name"),
            description=data.pop("description", None),
            external_docs=data.pop("externalDocs", None),
            extensions=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.description is not None:
            result["description"] = self.description
        if self.external_docs is not None:
            result["externalDocs"] = self.external_docs
        result.update(self.extensions)
        return result


@dataclass
class Components:
    """Reusable definitions.

    Only `schemas` is modelled; the other sections (responses, parameters,
    requestBodies, headers, securitySchemes, ...) are kept as raw mappings.
    """

    schemas: Optional[Dict[str, Schema]] = None
    sections: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Components":
        data = dict(data)
        schemas = data.pop("schemas", None)
        return Components(
            schemas={name: Schema.from_dict(value) for name, value in schemas.items()} if schemas is not None else None,
            sections=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.schemas is not None:
            result["schemas"] = {name: schema.to_dict() for name, schema in self.schemas.items()}
        result.update(self.sections)
        return result


@dataclass
class Document:
    """Root of an API definition.

    Holds the ordered path table, declared tags, reusable components and the
    top-level metadata that passes through filtering unchanged.
    """

    openapi: Optional[str] = None
    info: Optional[Dict[str, Any]] = None
    servers: Optional[List[Dict[str, Any]]] = None
    security: Optional[List[Dict[str, List[str]]]] = None
    tags: Optional[List[Tag]] = None
    external_docs: Optional[Dict[str, Any]] = None
    paths: Dict[str, PathItem] = field(default_factory=dict)
    components: Optional[Components] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    def get_tag_names(self) -> List[str]:
        return [tag.name for tag in self.tags or []]

    def get_schemas(self) -> Dict[str, Schema]:
        if self.components is None or self.components.schemas is None:
            return {}
        return self.components.schemas

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Document":
        data = dict(data)
        tags = data.pop("tags", None)
        components = data.pop("components", None)
        # Swagger 2 documents keep their schemas under `definitions`
        definitions = data.pop("definitions", None)
        if definitions is not None and components is None:
            components = {"schemas": definitions}
        return Document(
            openapi=data.pop("openapi", None),
            info=data.pop("info", None),
            servers=data.pop("servers", None),
            security=data.pop("security", None),
            tags=[Tag.from_dict(tag) for tag in tags] if tags is not None else None,
            external_docs=data.pop("externalDocs", None),
            paths={path: PathItem.from_dict(value or {}) for path, value in (data.pop("paths", None) or {}).items()},
            components=Components.from_dict(components) if components is not None else None,
            extensions=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in (("openapi", self.openapi), ("info", self.info), ("servers", self.servers)):
            if value is not None:
                result[key] = value
        if self.tags is not None:
            result["tags"] = [tag.to_dict() for tag in self.tags]
        result["paths"] = {path: path_item.to_dict() for path, path_item in self.paths.items()}
        if self.components is not None:
            result["components"] = self.components.to_dict()
        if self.security is not None:
            result["security"] = self.security
        if self.external_docs is not None:
            result["externalDocs"] = self.external_docs
        result.update(self.extensions)
        return result
