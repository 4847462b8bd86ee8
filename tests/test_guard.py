import pytest

from jsonzoom.guard import VisitedGuard, is_container


def test_first_visit_only():
    guard = VisitedGuard()
    node = {"a": 1}
    assert guard.visit(node) is True
    assert guard.visit(node) is False
    assert node in guard
    assert len(guard) == 1


def test_identity_not_equality():
    guard = VisitedGuard()
    assert guard.visit({"a": 1}) is True
    twin = {"a": 1}
    assert twin not in guard
    assert guard.visit(twin) is True


def test_lists_are_tracked():
    guard = VisitedGuard()
    items = [1, 2]
    assert guard.visit(items) is True
    assert guard.visit(items) is False


@pytest.mark.parametrize("value", [None, 1, "s", True, 2.0])
def test_primitives_never_registered(value):
    guard = VisitedGuard()
    assert guard.visit(value) is False
    assert guard.visit(value) is False
    assert len(guard) == 0


def test_visited_nodes_stay_alive():
    guard = VisitedGuard()
    for _ in range(100):
        # Without the guard holding a reference, ids would be recycled here
        assert guard.visit({}) is True
    assert len(guard) == 100


def test_is_container():
    assert is_container({})
    assert is_container([])
    assert is_container(())
    assert not is_container("abc")
    assert not is_container(None)
