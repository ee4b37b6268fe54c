from spec_filter.models.document import Components, Document, Tag
from spec_filter.models.operation import MediaType, Operation, Parameter, RequestBody, Response
from spec_filter.models.path_item import HttpMethod, PathItem
from spec_filter.models.request_context import ApiDescription, RequestContext
from spec_filter.models.schema import Schema

__all__ = [
    "ApiDescription",
    "Components",
    "Document",
    "HttpMethod",
    "MediaType",
    "Operation",
    "Parameter",
    "PathItem",
    "RequestBody",
    "RequestContext",
    "Response",
    "Schema",
    "Tag",
]
