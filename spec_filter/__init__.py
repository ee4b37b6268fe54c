from .filters import InternalSpecFilter, SpecFilter, TagSpecFilter
from .models import Document, RequestContext
from .processors.swagger import DocumentFilter

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentFilter",
    "InternalSpecFilter",
    "RequestContext",
    "SpecFilter",
    "TagSpecFilter",
]
