import pytest

from plotcore.johnson import Tarjan, cycles_in


def graph_of(links, size=None):
    if size is None:
        size = max(links) + 1
    return [set(links.get(i) or ()) for i in range(size)]


def by_length_or_start(components):
    return sorted(components, key=lambda c: (len(c), c[0]))


GRAPH_TESTS = [
    dict(
        g={0: [1], 1: [2, 7], 2: [3, 6], 3: [4], 4: [2, 5], 6: [3, 5], 7: [0, 6]},
        ambiguous=False,
        sccs=[[5], [2, 3, 4, 6], [0, 1, 7]],
        adj={0: [1], 1: [7], 2: [3, 6], 3: [4], 4: [2], 6: [3], 7: [0]},
        cycles=[[0, 1, 7, 0], [2, 3, 4, 2], [2, 6, 3, 4, 2]],
    ),
    dict(
        g={0: [1, 2, 3], 1: [2], 2: [3], 3: [1]},
        ambiguous=False,
        sccs=[[1, 2, 3], [0]],
        adj={1: [2], 2: [3], 3: [1]},
        cycles=[[1, 2, 3, 1]],
    ),
    dict(
        g={0: [1], 1: [0, 2], 2: [1]},
        ambiguous=False,
        sccs=[[0, 1, 2]],
        adj={0: [1], 1: [0, 2], 2: [1]},
        cycles=[[0, 1, 0], [1, 2, 1]],
    ),
    dict(
        g={0: [1], 1: [2, 3], 2: [4, 5], 3: [4, 5], 4: [6], 5: None, 6: None},
        ambiguous=True,
        sccs=[[6], [5], [4], [3], [2], [1], [0]],
        adj=None,
        cycles=[],
    ),
    dict(
        g={0: [1], 1: [2, 3, 4], 2: [0, 3], 3: [4], 4: [3]},
        ambiguous=True,
        sccs=[[3, 4], [0, 1, 2]],
        adj={0: [1], 1: [2], 2: [0], 3: [4], 4: [3]},
        cycles=[[3, 4, 3], [0, 1, 2, 0]],
    ),
]


@pytest.mark.parametrize("case", GRAPH_TESTS)
def test_tarjan(case):
    g = graph_of(case["g"])
    tarjan = Tarjan(g)
    got = [sorted(scc) for scc in tarjan.sccs]
    want = case["sccs"]
    if case["ambiguous"]:
        got = by_length_or_start(got)
        want = by_length_or_start(want)
    assert got == want

    got_adj = tarjan.scc_subgraph(2)
    if case["adj"] is None:
        assert got_adj == []
    else:
        assert got_adj == graph_of(case["adj"], size=len(g))


@pytest.mark.parametrize("case", GRAPH_TESTS)
def test_johnson(case):
    got = by_length_or_start(cycles_in(graph_of(case["g"])))
    assert got == case["cycles"]


def test_cycles_in_leaves_input_unchanged():
    g = graph_of({0: [1], 1: [0, 2], 2: [1]})
    snapshot = [set(e) for e in g]
    cycles_in(g)
    assert g == snapshot


def test_cycles_in_accepts_none_entries():
    assert cycles_in([[1], [0], None]) == [[0, 1, 0]]


def test_tarjan_empty_graph():
    tarjan = Tarjan([])
    assert tarjan.sccs == []
    assert tarjan.scc_subgraph(2) == []


def test_tarjan_covers_every_vertex_once():
    g = graph_of({0: [1], 1: [2, 7], 2: [3, 6], 3: [4], 4: [2, 5], 6: [3, 5], 7: [0, 6]})
    members = sorted(v for scc in Tarjan(g).sccs for v in scc)
    assert members == list(range(len(g)))