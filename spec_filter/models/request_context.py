from dataclasses import dataclass, field
from typing import Dict, List, Optional

from spec_filter.models.path_item import HttpMethod


@dataclass
class RequestContext:
    """Request-shaped maps handed unmodified to every filter call"""

    params: Dict[str, List[str]] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, List[str]] = field(default_factory=dict)

    def get_header(self, name: str) -> Optional[str]:
        """Returns the first value of a header, matching the name case-insensitively."""
        for key, values in self.headers.items():
            if key.lower() == name.lower() and values:
                return values[0]
        return None

    def get_param(self, name: str) -> Optional[str]:
        values = self.params.get(name)
        return values[0] if values else None


@dataclass(frozen=True)
class ApiDescription:
    """Structural position of the element being filtered"""

    path: str
    method: Optional[HttpMethod] = None
