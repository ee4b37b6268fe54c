from spec_filter.filters import SpecFilter
from spec_filter.models import HttpMethod, Operation, PathItem, RequestContext
from spec_filter.processors.swagger import ElementFilter
from spec_filter.processors.swagger.element_filter import clone_without


def test_clone_without_copies_remaining_fields():
    operation = Operation(tags=["pets"], summary="List", parameters=[], extensions={"x-rate": {"limit": 10}})

    cloned = clone_without(operation, "parameters")

    assert cloned.parameters is None
    assert cloned.tags == ["pets"]
    assert cloned.extensions == operation.extensions
    assert cloned.extensions is not operation.extensions


def test_records_tags_of_kept_and_dropped_operations():
    class DropPosts(SpecFilter):
        def filter_operation(self, operation, api, context):
            return None if api.method == HttpMethod.POST else operation

    path_item = PathItem(
        operations={
            HttpMethod.GET: Operation(tags=["pets"], responses={}),
            HttpMethod.POST: Operation(tags=["pets", "admin"], responses={}),
        }
    )
    element_filter = ElementFilter(DropPosts(), RequestContext())

    cloned = element_filter.filter_path_item("/pets", path_item)

    assert list(cloned.operations) == [HttpMethod.GET]
    assert element_filter.allowed_tags == {"pets"}
    assert element_filter.filtered_tags == {"pets", "admin"}


def test_none_elements_never_reach_the_filter():
    calls = []

    class Recorder(SpecFilter):
        def filter_request_body(self, request_body, operation, api, context):
            calls.append(request_body)
            return request_body

    element_filter = ElementFilter(Recorder(), RequestContext())
    cloned = element_filter.filter_operation("/pets", HttpMethod.GET, Operation(request_body=None))

    assert element_filter.filter_path_item("/pets", None) is None
    assert cloned.request_body is None
    assert calls == []


def test_none_parameter_and_response_collections_stay_none():
    element_filter = ElementFilter(SpecFilter(), RequestContext())

    cloned = element_filter.filter_operation("/pets", HttpMethod.GET, Operation())

    assert cloned.parameters is None
    assert cloned.responses is None
