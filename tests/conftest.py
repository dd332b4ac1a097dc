# -*- coding: utf-8 -*-
import pytest

from conflictmatch.graph.labeled import DirectedGraph, UndirectedGraph


def pytest_generate_tests(metafunc):
    if 'any_graph' in metafunc.fixturenames:
        metafunc.parametrize('any_graph', ['directed', 'undirected'], indirect=True)


@pytest.fixture
def any_graph(request):
    if request.param == 'directed':
        return DirectedGraph()
    elif request.param == 'undirected':
        return UndirectedGraph()
    else:
        raise ValueError("Invalid internal test config")


@pytest.fixture
def square():
    """The 4-cycle a-c, a-d, b-c, b-d as (graph, left, right)."""
    graph = UndirectedGraph()
    a, b, c, d = (graph.add_vertex(name) for name in 'abcd')
    for v0, v1 in [(a, c), (a, d), (b, c), (b, d)]:
        graph.add_edge(v0, v1)
    return graph, [a, b], [c, d]
