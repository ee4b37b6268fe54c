from typing import Iterable, Optional

from spec_filter.filters import SpecFilter
from spec_filter.models import ApiDescription, Operation, RequestContext


class PruningFilter(SpecFilter):
    """Accepts everything and asks for unreferenced schemas to be removed."""

    def remove_unreferenced_definitions(self) -> bool:
        return True


class OperationIdFilter(SpecFilter):
    """Drops the operations whose operationId is listed."""

    def __init__(self, rejected: Iterable[str], prune: bool = False):
        self.rejected = set(rejected)
        self.prune = prune

    def filter_operation(
        self, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Operation]:
        return None if operation.operation_id in self.rejected else operation

    def remove_unreferenced_definitions(self) -> bool:
        return self.prune


def json_response(schema_name: str, description: str = "ok") -> dict:
    return {
        "description": description,
        "content": {"application/json": {"schema": {"$ref": f"#/components/schemas/{schema_name}"}}},
    }
