from typing import Iterable, Optional

from .spec_filter import SpecFilter
from ..models import ApiDescription, Operation, RequestContext


class TagSpecFilter(SpecFilter):
    """Keeps only operations that carry at least one of the given tags."""

    def __init__(self, tags: Iterable[str], remove_unreferenced: bool = True, case_sensitive: bool = False):
        self.case_sensitive = case_sensitive
        self.tags = {self._normalize(tag) for tag in tags}
        self.remove_unreferenced = remove_unreferenced

    def _normalize(self, tag: str) -> str:
        return tag if self.case_sensitive else tag.lower()

    def filter_operation(
        self, operation: Operation, api: ApiDescription, context: RequestContext
    ) -> Optional[Operation]:
        if any(self._normalize(tag) in self.tags for tag in operation.tags or []):
            return operation
        return None

    def remove_unreferenced_definitions(self) -> bool:
        return self.remove_unreferenced
