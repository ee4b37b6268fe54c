import dataclasses
import threading

import pytest

from spec_filter.filters import SpecFilter
from spec_filter.models import Document, RequestContext, Schema
from spec_filter.processors.swagger import APIComponentsFilter, DocumentFilter
from tests.helpers import json_response


class DropPropertyY(SpecFilter):
    def __init__(self, prune: bool):
        self.prune = prune

    def filter_schema_property(self, property_schema, schema, property_name, context):
        return None if property_name == "y" else property_schema

    def remove_unreferenced_definitions(self) -> bool:
        return self.prune


def _spec():
    return {
        "openapi": "3.0.1",
        "info": {"title": "Props", "version": "1.0"},
        "paths": {"/points": {"get": {"responses": {"200": json_response("Point")}}}},
        "components": {
            "schemas": {
                "Point": {"type": "object", "properties": {"x": {"type": "number"}, "y": {"type": "number"}}},
                "Other": {"type": "object", "properties": {"y": {"type": "string"}}},
            }
        },
    }


@pytest.mark.parametrize("prune", [True, False])
def test_rejected_property_removed_regardless_of_pruning(prune):
    result = DocumentFilter().filter(Document.from_dict(_spec()), DropPropertyY(prune))

    assert list(result.get_schemas()["Point"].properties) == ["x"]
    assert ("Other" in result.get_schemas()) is not prune


def test_unreachable_schemas_are_filtered_too():
    result = DocumentFilter().filter(Document.from_dict(_spec()), DropPropertyY(prune=False))

    assert result.get_schemas()["Other"].properties == {}


def test_rejected_schema_is_dropped():
    class DropOther(SpecFilter):
        def filter_schema(self, schema, context):
            return None if schema.properties and "x" not in schema.properties else schema

    schemas = Document.from_dict(_spec()).get_schemas()

    result = APIComponentsFilter().filter_schemas(schemas, DropOther(), RequestContext())

    assert list(result) == ["Point"]


def test_property_filter_receives_owning_schema_and_name():
    seen = []

    class Recorder(SpecFilter):
        def filter_schema_property(self, property_schema, schema, property_name, context):
            seen.append((schema.type, property_name, property_schema.type))
            return property_schema

    schemas = Document.from_dict(_spec()).get_schemas()
    APIComponentsFilter().filter_schemas(schemas, Recorder(), RequestContext())

    assert seen == [("object", "x", "number"), ("object", "y", "number"), ("object", "y", "string")]


def test_transformed_property_is_used():
    class Describe(SpecFilter):
        def filter_schema_property(self, property_schema, schema, property_name, context):
            return dataclasses.replace(property_schema, description=f"The {property_name} coordinate")

    schemas = Document.from_dict(_spec()).get_schemas()
    result = APIComponentsFilter().filter_schemas(schemas, Describe(), RequestContext())

    assert result["Point"].properties["x"].description == "The x coordinate"
    assert schemas["Point"].properties["x"].description is None


def test_schema_that_cannot_be_copied_is_skipped():
    class Poison(SpecFilter):
        def filter_schema(self, schema, context):
            if schema.properties and "x" in schema.properties:
                return dataclasses.replace(schema, extensions={"x-lock": threading.Lock()})
            return schema

    schemas = Document.from_dict(_spec()).get_schemas()

    result = APIComponentsFilter().filter_schemas(schemas, Poison(), RequestContext())

    assert list(result) == ["Other"]


def test_schema_without_properties_keeps_none():
    schemas = {"Tag": Schema(type="string")}

    result = APIComponentsFilter().filter_schemas(schemas, SpecFilter(), RequestContext())

    assert result["Tag"].properties is None
    assert result["Tag"] == schemas["Tag"]
    assert result["Tag"] is not schemas["Tag"]


def test_none_schemas_returns_none():
    assert APIComponentsFilter().filter_schemas(None, SpecFilter(), RequestContext()) is None
