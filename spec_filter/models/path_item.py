from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from spec_filter.models.operation import Operation, Parameter


class HttpMethod(Enum):
    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"

    @classmethod
    def values(cls) -> List[str]:
        return [method.value for method in cls]


@dataclass
class PathItem:
    """The operations exposed at one resource path, plus shared metadata"""

    ref: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    servers: Optional[List[Dict[str, Any]]] = None
    parameters: Optional[List[Parameter]] = None
    operations: Dict[HttpMethod, Operation] = field(default_factory=dict)
    extensions: Dict[str, Any] = field(default_factory=dict)

    def get_operation(self, method: HttpMethod) -> Optional[Operation]:
        return self.operations.get(method)

    def set_operation(self, method: HttpMethod, operation: Optional[Operation]) -> None:
        """Attaches an operation, or removes the method when `operation` is None."""
        if operation is None:
            self.operations.pop(method, None)
        else:
            self.operations[method] = operation

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "PathItem":
        data = dict(data)
        parameters = data.pop("parameters", None)
        path_item = PathItem(
            ref=data.pop("$ref", None),
            summary=data.pop("summary", None),
            description=data.pop("description", None),
            servers=data.pop("servers", None),
            parameters=[Parameter.from_dict(p) for p in parameters] if parameters is not None else None,
        )
        for key in list(data.keys()):
            if key.lower() in HttpMethod.values():
                path_item.operations[HttpMethod(key.lower())] = Operation.from_dict(data.pop(key))
        path_item.extensions = data
        return path_item

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in (("$ref", self.ref), ("summary", self.summary), ("description", self.description)):
            if value is not None:
                result[key] = value
        for method, operation in self.operations.items():
            result[method.value] = operation.to_dict()
        if self.servers is not None:
            result["servers"] = self.servers
        if self.parameters is not None:
            result["parameters"] = [parameter.to_dict() for parameter in self.parameters]
        result.update(self.extensions)
        return result
