from .internal_filter import InternalSpecFilter
from .spec_filter import SpecFilter
from .tag_filter import TagSpecFilter

__all__ = ["SpecFilter", "TagSpecFilter", "InternalSpecFilter"]
