from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from spec_filter.models.schema import Schema


@dataclass
class MediaType:
    """A single entry of a `content` map."""

    schema: Optional[Schema] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "MediaType":
        data = dict(data)
        schema = data.pop("schema", None)
        return MediaType(schema=Schema.from_dict(schema) if schema is not None else None, extensions=data)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.schema is not None:
            result["schema"] = self.schema.to_dict()
        result.update(self.extensions)
        return result


def content_from_dict(data: Optional[Dict[str, Any]]) -> Optional[Dict[str, MediaType]]:
    if data is None:
        return None
    return {media_type: MediaType.from_dict(value or {}) for media_type, value in data.items()}


def content_to_dict(content: Dict[str, MediaType]) -> Dict[str, Any]:
    return {media_type: value.to_dict() for media_type, value in content.items()}


@dataclass
class Parameter:
    """An operation or path-level parameter."""

    name: Optional[str] = None
    location: Optional[str] = None
    ref: Optional[str] = None
    description: Optional[str] = None
    required: Optional[bool] = None
    schema: Optional[Schema] = None
    content: Optional[Dict[str, MediaType]] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    def schemas(self) -> List[Schema]:
        """Every schema the parameter carries, directly or through its content map."""
        found = [self.schema] if self.schema is not None else []
        for media_type in (self.content or {}).values():
            if media_type.schema is not None:
                found.append(media_type.schema)
        return found

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Parameter":
        data = dict(data)
        schema = data.pop("schema", None)
        return Parameter(
            ref=data.pop("$ref", None),
            name=data.pop("name", None),
            location=data.pop("in", None),
            description=data.pop("description", None),
            required=data.pop("required", None),
            schema=Schema.from_dict(schema) if schema is not None else None,
            content=content_from_dict(data.pop("content", None)),
            extensions=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.ref is not None:
            result["$ref"] = self.ref
        if self.name is not None:
            result["name"] = self.name
        if self.location is not None:
            result["in"] = self.location
        if self.description is not None:
            result["description"] = self.description
        if self.required is not None:
            result["required"] = self.required
        if self.schema is not None:
            result["schema"] = self.schema.to_dict()
        if self.content is not None:
            result["content"] = content_to_dict(self.content)
        result.update(self.extensions)
        return result


@dataclass
class RequestBody:
    ref: Optional[str] = None
    description: Optional[str] = None
    required: Optional[bool] = None
    content: Optional[Dict[str, MediaType]] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    def schemas(self) -> List[Schema]:
        return [media_type.schema for media_type in (self.content or {}).values() if media_type.schema is not None]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "RequestBody":
        data = dict(data)
        return RequestBody(
            ref=data.pop("$ref", None),
            description=data.pop("description", None),
            required=data.pop("required", None),
            content=content_from_dict(data.pop("content", None)),
            extensions=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.ref is not None:
            result["$ref"] = self.ref
        if self.description is not None:
            result["description"] = self.description
        if self.required is not None:
            result["required"] = self.required
        if self.content is not None:
            result["content"] = content_to_dict(self.content)
        result.update(self.extensions)
        return result


@dataclass
class Response:
    """One entry of an operation's responses map.

    `headers` and `links` are kept in their raw mapping form.
    """

    ref: Optional[str] = None
    description: Optional[str] = None
    headers: Optional[Dict[str, Any]] = None
    content: Optional[Dict[str, MediaType]] = None
    links: Optional[Dict[str, Any]] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    def schemas(self) -> List[Schema]:
        return [media_type.schema for media_type in (self.content or {}).values() if media_type.schema is not None]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Response":
        data = dict(data)
        return Response(
            ref=data.pop("$ref", None),
            description=data.pop("description", None),
            headers=data.pop("headers", None),
            content=content_from_dict(data.pop("content", None)),
            links=data.pop("links", None),
            extensions=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.ref is not None:
            result["$ref"] = self.ref
        if self.description is not None:
            result["description"] = self.description
        if self.headers is not None:
            result["headers"] = self.headers
        if self.content is not None:
            result["content"] = content_to_dict(self.content)
        if self.links is not None:
            result["links"] = self.links
        result.update(self.extensions)
        return result


@dataclass
class Operation:
    """A single HTTP-method handler at a path"""

    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = None
    parameters: Optional[List[Parameter]] = None
    request_body: Optional[RequestBody] = None
    responses: Optional[Dict[str, Response]] = None
    deprecated: Optional[bool] = None
    security: Optional[List[Dict[str, List[str]]]] = None
    servers: Optional[List[Dict[str, Any]]] = None
    callbacks: Optional[Dict[str, Any]] = None
    external_docs: Optional[Dict[str, Any]] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Operation":
        data = dict(data)
        parameters = data.pop("parameters", None)
        request_body = data.pop("requestBody", None)
        responses = data.pop("responses", None)
        return Operation(
            tags=data.pop("tags", None),
            summary=data.pop("summary", None),
            description=data.pop("description", None),
            operation_id=data.pop("operationId", None),
            parameters=[Parameter.from_dict(p) for p in parameters] if parameters is not None else None,
            request_body=RequestBody.from_dict(request_body) if request_body is not None else None,
            responses=(
                {str(code): Response.from_dict(value) for code, value in responses.items()}
                if responses is not None
                else None
            ),
            deprecated=data.pop("deprecated", None),
            security=data.pop("security", None),
            servers=data.pop("servers", None),
            callbacks=data.pop("callbacks", None),
            external_docs=data.pop("externalDocs", None),
            extensions=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in (
            ("tags", self.tags),
            ("summary", self.summary),
            ("description", self.description),
            ("operationId", self.operation_id),
        ):
            if value is not None:
                result[key] = value
        if self.parameters is not None:
            result["parameters"] = [parameter.to_dict() for parameter in self.parameters]
        if self.request_body is not None:
            result["requestBody"] = self.request_body.to_dict()
        if self.responses is not None:
            result["responses"] = {code: response.to_dict() for code, response in self.responses.items()}
        for key, value in (
            ("deprecated", self.deprecated),
            ("security", self.security),
            ("servers", self.servers),
            ("callbacks", self.callbacks),
            ("externalDocs", self.external_docs),
        ):
            if value is not None:
                result[key] = value
        result.update(self.extensions)
        return result
