import dataclasses
from typing import Any, Dict, Iterable, Optional, Set

from ...models import Document, Parameter, Schema
from ...models.refs import component_section_ref, local_schema_name
from ...utils.logger import Logger


class ReferenceGraphPruner:
    """Removes component schemas no surviving part of a document can reach.

    Schemas are looked up by name in the component table and walked with a
    visited set, so self- and mutually-referencing schemas terminate.
    """

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def prune(self, document: Document) -> Document:
        """Main template method: mark schemas reachable from the roots, sweep the rest."""
        if document.components is None or document.components.schemas is None:
            return document
        schemas = document.components.schemas

        root_refs = self.collect_root_refs(document)
        used_schemas = self.collect_used_schemas(schemas, root_refs)

        filtered_schemas = {name: schema for name, schema in schemas.items() if name in used_schemas}
        removed = len(schemas) - len(filtered_schemas)
        if removed:
            self.logger.debug(f"Removed {removed} unreferenced schemas")

        return self.add_filtered_schemas(document, filtered_schemas)

    def add_filtered_schemas(self, document: Document, filtered_schemas: Dict[str, Schema]) -> Document:
        components = dataclasses.replace(document.components, schemas=filtered_schemas)
        return dataclasses.replace(document, components=components)

    def collect_root_refs(self, document: Document) -> Set[str]:
        """Schema names referenced from paths, directly or through the component sections they use."""
        refs: Set[str] = set()
        section_refs: Set[str] = set()

        for path_item in document.paths.values():
            for parameter in path_item.parameters or []:
                refs |= self.parameter_refs(parameter)
                section_refs |= self.collect_section_refs(parameter.ref)

            for operation in path_item.operations.values():
                for parameter in operation.parameters or []:
                    refs |= self.parameter_refs(parameter)
                    section_refs |= self.collect_section_refs(parameter.ref)

                if operation.request_body is not None:
                    for schema in operation.request_body.schemas():
                        refs |= self.resolve_refs(schema)
                    section_refs |= self.collect_section_refs(operation.request_body.ref)

                for response in (operation.responses or {}).values():
                    for schema in response.schemas():
                        refs |= self.resolve_refs(schema)
                    refs |= self.collect_schema_refs(response.headers)
                    section_refs |= self.collect_section_refs(response.ref)
                    section_refs |= self.collect_section_refs(response.headers)

                refs |= self.collect_schema_refs(operation.callbacks)
                section_refs |= self.collect_section_refs(operation.callbacks)

        if document.components is not None:
            refs |= self.collect_used_section_schemas(document.components.sections, section_refs)

        return refs

    def collect_used_section_schemas(self, sections: Dict[str, Any], section_refs: Iterable[str]) -> Set[str]:
        """
        Schema names behind the component section entries (responses, parameters,
        headers, ...) in `section_refs`, following entries that point at other entries.
        """
        refs: Set[str] = set()
        visited: Set[str] = set()
        refs_to_check = list(section_refs)

        while refs_to_check:
            ref = refs_to_check.pop()
            if ref in visited:
                continue
            visited.add(ref)

            section, name = component_section_ref(ref)
            entries = sections.get(section)
            entry = entries.get(name) if isinstance(entries, dict) else None
            if entry is None:
                continue

            refs |= self.collect_schema_refs(entry)
            refs_to_check.extend(self.collect_section_refs(entry))

        return refs

    def collect_section_refs(self, raw: Any) -> Set[str]:
        """`$ref` strings in a raw fragment (or a bare ref) that point into a non-schema component section."""
        found = {raw} if isinstance(raw, str) else self.collect_refs(raw)
        return {ref for ref in found if component_section_ref(ref)}

    def collect_used_schemas(self, schemas: Dict[str, Schema], root_refs: Iterable[str]) -> Set[str]:
        """Returns the names transitively reachable from `root_refs`."""
        visited: Set[str] = set()
        refs_to_check = list(root_refs)

        while refs_to_check:
            name = refs_to_check.pop()
            if name in visited:
                continue
            visited.add(name)

            schema = schemas.get(name)
            if schema is None:
                continue

            refs_to_check.extend(self.resolve_refs(schema))

        return visited

    def parameter_refs(self, parameter: Parameter) -> Set[str]:
        refs: Set[str] = set()
        for schema in parameter.schemas():
            refs |= self.resolve_refs(schema)
        return refs

    def resolve_refs(self, schema: Optional[Schema]) -> Set[str]:
        """
        Names of the component schemas a schema node points at.

        Follows array items, map values, composition members (allOf, oneOf,
        anyOf) and inline properties down to the first named reference on each
        branch; it never looks a name up, so it cannot loop.
        """
        refs: Set[str] = set()
        if schema is None:
            return refs

        if schema.ref is not None:
            name = local_schema_name(schema.ref)
            if name:
                refs.add(name)

        if schema.items is not None:
            refs |= self.resolve_refs(schema.items)
        if isinstance(schema.additional_properties, Schema):
            refs |= self.resolve_refs(schema.additional_properties)
        for member in schema.compositions():
            refs |= self.resolve_refs(member)
        for property_schema in (schema.properties or {}).values():
            refs |= self.resolve_refs(property_schema)

        refs |= self.collect_schema_refs(schema.extensions)
        return refs

    def collect_schema_refs(self, raw: Any) -> Set[str]:
        """Schema names behind every `$ref` string found in a raw mapping."""
        return {name for name in map(local_schema_name, self.collect_refs(raw)) if name}

    def collect_refs(self, api_def: Any, refs: Optional[Set[str]] = None) -> Set[str]:
        """Recursively collects all $ref strings from a raw fragment."""
        if refs is None:
            refs = set()

        if isinstance(api_def, dict):
            for key, value in api_def.items():
                if key == "$ref" and isinstance(value, str):
                    refs.add(value)
                else:
                    self.collect_refs(value, refs)
        elif isinstance(api_def, list):
            for item in api_def:
                self.collect_refs(item, refs)

        return refs

    def find_dangling_references(self, document: Document) -> Set[str]:
        """
        Consistency check for hosts: schema names referenced somewhere in the
        document that have no definition in its component table.
        """
        schemas = document.get_schemas()
        refs = self.collect_root_refs(document)
        for schema in schemas.values():
            refs |= self.resolve_refs(schema)

        dangling = {name for name in refs if name not in schemas}
        if dangling:
            self.logger.warning(f"Document references undefined schemas: {', '.join(sorted(dangling))}")
        return dangling
