"""Strongly connected components (Tarjan) and elementary cycles (Johnson).

A graph is a list indexed by vertex, each entry an iterable of the vertices
it links to (``None`` means no links).
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

Graph = list[set[int]]


def _normalise(graph: Sequence[Optional[Iterable[int]]]) -> Graph:
    return [set(edges) if edges else set() for edges in graph]


class Tarjan:
    """Strongly connected components of a directed graph.

    ``sccs`` lists the components in the order they are completed, which is
    a reverse topological order of the condensed graph.
    """

    def __init__(self, graph: Sequence[Optional[Iterable[int]]]) -> None:
        self.graph: Graph = _normalise(graph)
        self.sccs: list[list[int]] = []
        n = len(self.graph)
        self._counter = 0
        self._index = [0] * n
        self._low = [0] * n
        self._on_stack = [False] * n
        self._stack: list[int] = []
        for v in range(n):
            if self._index[v] == 0:
                self._strongconnect(v)

    def _visit(self, v: int) -> None:
        self._counter += 1
        self._index[v] = self._counter
        self._low[v] = self._counter
        self._stack.append(v)
        self._on_stack[v] = True

    def _strongconnect(self, root: int) -> None:
        self._visit(root)
        work = [(root, iter(self.graph[root]))]
        while work:
            v, successors = work[-1]
            for w in successors:
                if self._index[w] == 0:
                    self._visit(w)
                    work.append((w, iter(self.graph[w])))
                    break
                if self._on_stack[w]:
                    self._low[v] = min(self._low[v], self._index[w])
            else:
                work.pop()
                if self._low[v] == self._index[v]:
                    scc = []
                    while True:
                        w = self._stack.pop()
                        self._on_stack[w] = False
                        scc.append(w)
                        if w == v:
                            break
                    self.sccs.append(scc)
                if work:
                    parent = work[-1][0]
                    self._low[parent] = min(self._low[parent], self._low[v])

    def scc_subgraph(self, min_size: int) -> Graph:
        """Return the graph restricted to components of at least ``min_size``.

        The result keeps the vertex numbering of the original graph; it is
        empty when no component is large enough.
        """
        if not self.graph:
            return []
        sub: Graph = [set() for _ in self.graph]
        kept = 0
        for scc in self.sccs:
            if len(scc) < min_size:
                continue
            kept += 1
            members = set(scc)
            for u in scc:
                sub[u].update(self.graph[u] & members)
        return sub if kept else []


def _induced_from(graph: Graph, s: int) -> Graph:
    """Return the subgraph induced by the vertices ``s, s+1, ...``."""
    return [
        set() if u < s else {v for v in edges if v >= s}
        for u, edges in enumerate(graph)
    ]


class _Johnson:
    def __init__(self, graph: Graph) -> None:
        n = len(graph)
        self.adjacent: Graph = [set(e) for e in graph]
        self.b: list[set[int]] = [set() for _ in range(n)]
        self.blocked = [False] * n
        self.s = 0
        self.stack: list[int] = []
        self.result: list[list[int]] = []

    def run(self) -> list[list[int]]:
        while self.s < len(self.adjacent) - 1:
            tarjan = Tarjan(_induced_from(self.adjacent, self.s))
            self.adjacent = tarjan.scc_subgraph(2)
            if not self.adjacent:
                break
            for i, edges in enumerate(self.adjacent):
                if edges:
                    self.blocked[i] = False
                    self.b[i] = set()
            self._circuit(self.s)
            self.s += 1
        return self.result

    def _circuit(self, v: int) -> bool:
        found = False
        self.stack.append(v)
        self.blocked[v] = True
        for w in self.adjacent[v]:
            if w == self.s:
                self.result.append(self.stack + [self.s])
                found = True
            elif not self.blocked[w] and self._circuit(w):
                found = True
        if found:
            self._unblock(v)
        else:
            for w in self.adjacent[v]:
                self.b[w].add(v)
        self.stack.pop()
        return found

    def _unblock(self, u: int) -> None:
        self.blocked[u] = False
        pending, self.b[u] = self.b[u], set()
        for w in pending:
            if self.blocked[w]:
                self._unblock(w)


def cycles_in(graph: Sequence[Optional[Iterable[int]]]) -> list[list[int]]:
    """Return the elementary cycles of a directed graph.

    Each cycle starts and ends at its least vertex. The input is not changed.
    """
    return _Johnson(_normalise(graph)).run()