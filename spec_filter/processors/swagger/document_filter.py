import copy
import time
from typing import Optional

from .api_components_filter import APIComponentsFilter
from .element_filter import ElementFilter
from .reference_pruner import ReferenceGraphPruner
from .tag_reconciler import TagReconciler
from ...filters.spec_filter import SpecFilter
from ...models import Components, Document, RequestContext
from ...utils.logger import Logger


class DocumentFilter:
    """Produces a filtered copy of a document by orchestrating element filtering,
    tag reconciliation and unreferenced schema pruning."""

    def __init__(
        self,
        components_filter: Optional[APIComponentsFilter] = None,
        tag_reconciler: Optional[TagReconciler] = None,
        pruner: Optional[ReferenceGraphPruner] = None,
    ):
        self.components_filter = components_filter or APIComponentsFilter()
        self.tag_reconciler = tag_reconciler or TagReconciler()
        self.pruner = pruner or ReferenceGraphPruner()
        self.logger = Logger.get_logger(__name__)

    def filter(
        self, document: Document, spec_filter: SpecFilter, context: Optional[RequestContext] = None
    ) -> Optional[Document]:
        """
        Filters a document. The input document is left untouched.

        Args:
            document (Document): Document to filter.
            spec_filter (SpecFilter): Per-element keep/replace/drop decisions.
            context (RequestContext): Query parameters, cookies and headers handed to every
                filter call. Defaults to empty maps.

        Returns:
            Document: A new document, or None when the filter rejects the document itself.
        """
        start_time = time.time()
        context = context or RequestContext()

        filtered_document = self.filter_document(document, spec_filter, context)
        if filtered_document is None:
            self.logger.info("Document rejected by filter")
            return None

        clone = Document(
            openapi=filtered_document.openapi,
            info=copy.deepcopy(filtered_document.info),
            servers=copy.deepcopy(filtered_document.servers),
            security=copy.deepcopy(filtered_document.security),
            tags=copy.deepcopy(filtered_document.tags),
            external_docs=copy.deepcopy(filtered_document.external_docs),
            extensions=copy.deepcopy(filtered_document.extensions),
        )

        element_filter = ElementFilter(spec_filter, context)
        clone.paths = element_filter.filter_paths(filtered_document.paths)
        clone.tags = self.tag_reconciler.reconcile(
            clone.tags, element_filter.allowed_tags, element_filter.filtered_tags
        )

        if filtered_document.components is not None:
            clone.components = Components(
                schemas=self.components_filter.filter_schemas(
                    filtered_document.components.schemas, spec_filter, context
                ),
                sections=copy.deepcopy(filtered_document.components.sections),
            )

        if spec_filter.remove_unreferenced_definitions():
            clone = self.pruner.prune(clone)

        self.logger.info(
            f"Filtered document: kept {len(clone.paths)} of {len(filtered_document.paths)} paths "
            f"and {len(clone.get_schemas())} of {len(filtered_document.get_schemas())} schemas"
        )
        removed_paths = [path for path in filtered_document.paths if path not in clone.paths]
        if removed_paths:
            self.logger.debug("Removed paths:\n" + "\n".join(f"  {path}" for path in removed_paths))
        self.logger.debug(f"Time taken to filter document: {time.time() - start_time:.2f} seconds")
        return clone

    @staticmethod
    def filter_document(
        document: Optional[Document], spec_filter: SpecFilter, context: RequestContext
    ) -> Optional[Document]:
        if document is None:
            return None
        return spec_filter.filter_document(document, context)
