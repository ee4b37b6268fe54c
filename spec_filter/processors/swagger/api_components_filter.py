import copy
import dataclasses
from typing import Dict, Optional

from ...filters.spec_filter import SpecFilter
from ...models import RequestContext, Schema
from ...utils.logger import Logger


class APIComponentsFilter:
    """Rebuilds component schemas from the schemas and properties a SpecFilter accepts."""

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def filter_schemas(
        self, schemas: Optional[Dict[str, Schema]], spec_filter: SpecFilter, context: RequestContext
    ) -> Optional[Dict[str, Schema]]:
        """
        Filters every component schema, reachable or not, and each of its properties.

        Args:
            schemas (Dict[str, Schema]): Component schemas keyed by name.
            spec_filter (SpecFilter): Decides which schemas and properties to keep.
            context (RequestContext): Request maps passed to each filter call.

        Returns:
            Dict[str, Schema]: New schemas in input order, or None when there were none.
        """
        if schemas is None:
            return None

        cloned_schemas: Dict[str, Schema] = {}
        for name, definition in schemas.items():
            if definition is None:
                continue
            filtered_definition = spec_filter.filter_schema(definition, context)
            if filtered_definition is None:
                self.logger.debug(f"Dropped schema {name}")
                continue

            cloned_properties: Optional[Dict[str, Schema]] = None
            if filtered_definition.properties is not None:
                cloned_properties = {}
                for property_name, property_schema in filtered_definition.properties.items():
                    if property_schema is None:
                        continue
                    filtered_property = spec_filter.filter_schema_property(
                        property_schema, definition, property_name, context
                    )
                    if filtered_property is None:
                        self.logger.debug(f"Dropped property {name}.{property_name}")
                        continue
                    cloned_properties[property_name] = filtered_property

            try:
                cloned_schemas[name] = self.clone_schema(filtered_definition, cloned_properties)
            except (TypeError, copy.Error, RecursionError) as e:
                self.logger.warning(f"Skipping schema {name}, it could not be copied: {e}")
                continue

        return cloned_schemas

    @staticmethod
    def clone_schema(schema: Schema, properties: Optional[Dict[str, Schema]]) -> Schema:
        """Returns an independent copy of `schema` carrying `properties` instead of its own."""
        cloned = copy.deepcopy(dataclasses.replace(schema, properties=None))
        cloned.properties = copy.deepcopy(properties)
        return cloned
