from typing import List, Optional, Set

from ...models import Tag
from ...utils.logger import Logger


class TagReconciler:
    """Recomputes the declared tag list from the operations that survived filtering."""

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def reconcile(
        self, tags: Optional[List[Tag]], allowed_tags: Set[str], filtered_tags: Set[str]
    ) -> Optional[List[Tag]]:
        """
        Removes declared tags that were only seen on dropped operations.

        A tag seen on at least one kept operation stays declared. When removal
        leaves nothing, the result is None rather than an empty list.
        Operation-level tag lists are not touched.
        """
        to_remove = filtered_tags - allowed_tags
        if tags is None or not to_remove:
            return tags

        kept = [tag for tag in tags if tag.name not in to_remove]
        removed = len(tags) - len(kept)
        if removed:
            self.logger.debug(f"Removed {removed} unused tags: {', '.join(sorted(to_remove))}")
        return kept or None
