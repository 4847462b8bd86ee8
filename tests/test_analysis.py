from jsonzoom.analysis import find_cycles, find_dangling_targets, find_name_collisions
from jsonzoom.model import ClassDescriptor, Edge


def _classes(*names):
    return [ClassDescriptor(name) for name in names]


def _edge(source, target):
    return Edge(id=f"e-{source}-{target}", source=source, target=target)


def test_find_cycles_two_node():
    cycles = find_cycles(_classes("A", "B", "C"), [_edge("A", "B"), _edge("B", "A"), _edge("B", "C")])
    assert len(cycles) == 1
    assert sorted(cycles[0]) == ["A", "B"]


def test_find_cycles_ignores_self_reference():
    assert find_cycles(_classes("Node"), [_edge("Node", "Node")]) == []


def test_find_cycles_ignores_dangling_targets():
    assert find_cycles(_classes("A"), [_edge("A", "Missing")]) == []


def test_find_cycles_long_chain():
    names = [f"C{i}" for i in range(3000)]
    edges = [_edge(a, b) for a, b in zip(names, names[1:])]
    edges.append(_edge(names[-1], names[0]))
    cycles = find_cycles(_classes(*names), edges)
    assert len(cycles) == 1
    assert sorted(cycles[0]) == sorted(names)


def test_find_cycles_separate_components():
    edges = [
        _edge("A", "B"),
        _edge("B", "A"),
        _edge("C", "D"),
        _edge("D", "E"),
        _edge("E", "C"),
    ]
    cycles = find_cycles(_classes("A", "B", "C", "D", "E"), edges)
    assert sorted(sorted(c) for c in cycles) == [["A", "B"], ["C", "D", "E"]]


def test_find_name_collisions():
    assert find_name_collisions(_classes("Root", "Item", "Item", "Tag")) == {"Item": 2}
    assert find_name_collisions(_classes("Root")) == {}


def test_find_dangling_targets():
    edges = [_edge("Root", "Self"), _edge("Root", "Child"), _edge("Child", "Self")]
    assert find_dangling_targets(_classes("Root", "Child"), edges) == ["Self"]
