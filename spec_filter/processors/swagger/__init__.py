from .api_components_filter import APIComponentsFilter
from .api_definition_loader import APIDefinitionError, APIDefinitionLoader
from .api_definition_writer import APIDefinitionWriter
from .document_filter import DocumentFilter
from .element_filter import ElementFilter
from .reference_pruner import ReferenceGraphPruner
from .tag_reconciler import TagReconciler

__all__ = [
    "APIComponentsFilter",
    "APIDefinitionError",
    "APIDefinitionLoader",
    "APIDefinitionWriter",
    "DocumentFilter",
    "ElementFilter",
    "ReferenceGraphPruner",
    "TagReconciler",
]
