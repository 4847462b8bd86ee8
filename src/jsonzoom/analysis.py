"""Post-extraction diagram analysis (cycle detection, name collisions, etc.)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from jsonzoom.model import ClassDescriptor, Edge


def find_cycles(classes: Iterable[ClassDescriptor], edges: Iterable[Edge]) -> list[list[str]]:
    """Return groups of classes that reference each other (Tarjan SCCs, size >= 2).

    A group such as ``["Parent", "Child"]`` means each class reaches the other
    through edges. A class that only references itself is not reported. Edge targets
    with no class of their own are ignored.
    """
    graph: dict[str, list[str]] = {}
    for cls in classes:
        graph.setdefault(cls.name, [])
    for edge in edges:
        if edge.source in graph and edge.target not in graph[edge.source]:
            graph[edge.source].append(edge.target)

    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    sccs: list[list[str]] = []
    counter = 0

    def _push(v: str) -> None:
        nonlocal counter
        index[v] = lowlink[v] = counter
        counter += 1
        stack.append(v)
        on_stack.add(v)

    # Iterative DFS: class chains are as long as the document is deep
    for root in graph:
        if root in index:
            continue
        _push(root)
        work = [(root, iter(graph[root]))]
        while work:
            v, successors = work[-1]
            for w in successors:
                if w not in graph:
                    continue
                if w not in index:
                    _push(w)
                    work.append((w, iter(graph[w])))
                    break
                if w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[v])
                if lowlink[v] == index[v]:
                    scc: list[str] = []
                    while True:
                        w = stack.pop()
                        on_stack.discard(w)
                        scc.append(w)
                        if w == v:
                            break
                    if len(scc) >= 2:
                        sccs.append(scc)

    return sccs


def find_name_collisions(classes: Iterable[ClassDescriptor]) -> dict[str, int]:
    """Return class names that were emitted more than once, with their counts."""
    counts = Counter(cls.name for cls in classes)
    return {name: n for name, n in counts.items() if n > 1}


def find_dangling_targets(
    classes: Iterable[ClassDescriptor], edges: Iterable[Edge]
) -> list[str]:
    """Return edge targets (in first-seen order) that have no class descriptor.

    These come from nodes skipped by the visited guard, e.g. the second
    occurrence of a shared or cyclic object.
    """
    names = {cls.name for cls in classes}
    dangling: list[str] = []
    for edge in edges:
        if edge.target not in names and edge.target not in dangling:
            dangling.append(edge.target)
    return dangling
