from typing import Any, Dict, Optional

from .spec_filter import SpecFilter
from ..models import ApiDescription, Operation, Parameter, RequestContext, Schema


class InternalSpecFilter(SpecFilter):
    """Hides every element flagged as internal through a vendor extension.

    An element is internal when its extensions hold a truthy value under `flag`.
    Schemas left without references are pruned afterwards.
    """

    def __init__(self, flag: str = "x-internal"):
        self.flag = flag

    def is_internal(self, extensions: Dict[str, Any]) -> bool:
        return bool(extensions.get(self.flag))

    def filter_operation(
        self, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Operation]:
        return None if self.is_internal(operation.extensions) else operation

    def filter_parameter(
        self, parameter: Parameter, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Parameter]:
        return None if self.is_internal(parameter.extensions) else parameter

    def filter_schema(self, schema: Schema, context: RequestContext) -> Optional[Schema]:
        return None if self.is_internal(schema.extensions) else schema

    def filter_schema_property(
        self, property_schema: Schema, schema: Schema, property_name: str, context: RequestContext
    ) -> Optional[Schema]:
        return None if self.is_internal(property_schema.extensions) else property_schema

    def remove_unreferenced_definitions(self) -> bool:
        return True
