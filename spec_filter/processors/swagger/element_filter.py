import copy
from dataclasses import fields
from typing import Dict, Optional, Set

from ...filters.spec_filter import SpecFilter
from ...models import (
    ApiDescription,
    HttpMethod,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    RequestContext,
    Response,
)
from ...utils.logger import Logger


def clone_without(element, *excluded: str):
    """Deep-copies a model dataclass, leaving the `excluded` fields as None."""
    values = {
        f.name: None if f.name in excluded else copy.deepcopy(getattr(element, f.name)) for f in fields(element)
    }
    return type(element)(**values)


class ElementFilter:
    """Rebuilds the path table of a document from the elements a SpecFilter accepts.

    One instance serves one filtering run: while walking the operations it
    records the tag names seen on kept operations (`allowed_tags`) and on
    dropped ones (`filtered_tags`).
    """

    def __init__(self, spec_filter: SpecFilter, context: RequestContext):
        self.spec_filter = spec_filter
        self.context = context
        self.allowed_tags: Set[str] = set()
        self.filtered_tags: Set[str] = set()
        self.logger = Logger.get_logger(__name__)

    def filter_paths(self, paths: Dict[str, PathItem]) -> Dict[str, PathItem]:
        cloned_paths: Dict[str, PathItem] = {}
        for resource_path, path_item in paths.items():
            cloned_path_item = self.filter_path_item(resource_path, path_item)
            if cloned_path_item is not None:
                cloned_paths[resource_path] = cloned_path_item
        return cloned_paths

    def filter_path_item(self, resource_path: str, path_item: Optional[PathItem]) -> Optional[PathItem]:
        """Returns a new PathItem holding the surviving operations, or None if none survive."""
        if path_item is None:
            return None

        filtered_path_item = self.spec_filter.filter_path_item(
            path_item, ApiDescription(path=resource_path), self.context
        )
        if filtered_path_item is None:
            self.logger.debug(f"Dropped path {resource_path}")
            for operation in path_item.operations.values():
                self.filtered_tags.update(operation.tags or [])
            return None

        cloned_path_item = clone_without(filtered_path_item, "operations")
        cloned_path_item.operations = {}

        for method, operation in filtered_path_item.operations.items():
            cloned_operation = self.filter_operation(resource_path, method, operation)
            if cloned_operation is None:
                self.logger.debug(f"Dropped operation {method.value.upper()} {resource_path}")
                if operation is not None:
                    self.filtered_tags.update(operation.tags or [])
                continue
            cloned_path_item.set_operation(method, cloned_operation)
            self.allowed_tags.update(cloned_operation.tags or [])

        if not cloned_path_item.operations:
            self.logger.debug(f"No operations left on path {resource_path}")
            return None
        return cloned_path_item

    def filter_operation(
        self, resource_path: str, method: HttpMethod, operation: Optional[Operation]
    ) -> Optional[Operation]:
        if operation is None:
            return None

        api = ApiDescription(path=resource_path, method=method)
        filtered_operation = self.spec_filter.filter_operation(operation, api, self.context)
        if filtered_operation is None:
            return None

        cloned_operation = clone_without(filtered_operation, "parameters", "request_body", "responses")

        if filtered_operation.parameters is not None:
            cloned_operation.parameters = []
            for parameter in filtered_operation.parameters:
                filtered_parameter = self.filter_parameter(filtered_operation, parameter, api)
                if filtered_parameter is not None:
                    cloned_operation.parameters.append(filtered_parameter)

        cloned_operation.request_body = self.filter_request_body(
            filtered_operation, filtered_operation.request_body, api
        )

        if filtered_operation.responses is not None:
            cloned_operation.responses = {}
            for response_key, response in filtered_operation.responses.items():
                filtered_response = self.filter_response(filtered_operation, response, api)
                if filtered_response is not None:
                    cloned_operation.responses[response_key] = filtered_response

        return cloned_operation

    def filter_parameter(
        self, operation: Operation, parameter: Optional[Parameter], api: ApiDescription
    ) -> Optional[Parameter]:
        if parameter is None:
            return None
        filtered_parameter = self.spec_filter.filter_parameter(parameter, operation, api, self.context)
        return copy.deepcopy(filtered_parameter)

    def filter_request_body(
        self, operation: Operation, request_body: Optional[RequestBody], api: ApiDescription
    ) -> Optional[RequestBody]:
        if request_body is None:
            return None
        filtered_request_body = self.spec_filter.filter_request_body(request_body, operation, api, self.context)
        return copy.deepcopy(filtered_request_body)

    def filter_response(
        self, operation: Operation, response: Optional[Response], api: ApiDescription
    ) -> Optional[Response]:
        if response is None:
            return None
        filtered_response = self.spec_filter.filter_response(response, operation, api, self.context)
        return copy.deepcopy(filtered_response)
