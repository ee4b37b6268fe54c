from typing import Optional

from ..models import (
    ApiDescription,
    Document,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    RequestContext,
    Response,
    Schema,
)


class SpecFilter:
    """Per-element decisions consulted while filtering a document.

    Every method returns the element to keep (the same object or a replacement)
    or None to drop it. The defaults accept everything unchanged, so a subclass
    overrides only the element kinds it cares about.
    """

    def filter_document(self, document: Document, context: RequestContext) -> Optional[Document]:
        return document

    def filter_path_item(
        self, path_item: PathItem, api: ApiDescription, context: RequestContext
    ) -> Optional[PathItem]:
        return path_item

    def filter_operation(
        self, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Operation]:
        return operation

    def filter_parameter(
        self, parameter: Parameter, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Parameter]:
        return parameter

    def filter_request_body(
        self, request_body: RequestBody, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[RequestBody]:
        return request_body

    def filter_response(
        self, response: Response, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Response]:
        return response

    def filter_schema(self, schema: Schema, context: RequestContext) -> Optional[Schema]:
        return schema

    def filter_schema_property(
        self, property_schema: Schema, schema: Schema, property_name: str, context: RequestContext
    ) -> Optional[Schema]:
        return property_schema

    def remove_unreferenced_definitions(self) -> bool:
        """Whether schemas nothing points at any more are dropped after filtering."""
        return False
