import pytest

from spec_filter.models import Tag
from spec_filter.processors.swagger import TagReconciler


def _tags(*names):
    return [Tag(name=name) for name in names]


@pytest.mark.parametrize(
    "declared,allowed,filtered,expected",
    [
        (["pets", "admin"], {"pets", "admin"}, {"admin"}, ["pets", "admin"]),
        (["pets", "admin"], {"pets"}, {"admin"}, ["pets"]),
        (["store", "pets", "admin"], {"pets"}, {"admin", "store"}, ["pets"]),
        (["pets", "unused"], {"pets"}, set(), ["pets", "unused"]),
        (["pets", "unused"], {"pets"}, {"admin"}, ["pets", "unused"]),
    ],
)
def test_reconcile(declared, allowed, filtered, expected):
    result = TagReconciler().reconcile(_tags(*declared), allowed, filtered)

    assert [tag.name for tag in result] == expected


def test_reconcile_all_removed_returns_none():
    assert TagReconciler().reconcile(_tags("admin"), set(), {"admin"}) is None


def test_reconcile_keeps_explicitly_empty_list_when_nothing_removed():
    assert TagReconciler().reconcile([], {"pets"}, set()) == []


def test_reconcile_without_declared_tags():
    assert TagReconciler().reconcile(None, set(), {"admin"}) is None
