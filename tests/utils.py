# -*- coding: utf-8 -*-
import hypothesis.strategies as st

from conflictmatch.graph.labeled import DirectedGraph, UndirectedGraph


@st.composite
def bipartite_graph(draw, max_left=6, max_right=6):
    """Draws a random (graph, left, right) triple with edges only between the two sides.

    For directed graphs, the direction of each edge is random as well.
    """
    graph = draw(st.sampled_from([UndirectedGraph, DirectedGraph]))()
    n = draw(st.integers(min_value=0, max_value=max_left))
    m = draw(st.integers(min_value=0, max_value=max_right))
    left = [graph.add_vertex(('L', i)) for i in range(n)]
    right = [graph.add_vertex(('R', j)) for j in range(m)]
    for left_vertex in left:
        for right_vertex in right:
            if draw(st.booleans()):
                if draw(st.booleans()):
                    graph.add_edge(left_vertex, right_vertex)
                else:
                    graph.add_edge(right_vertex, left_vertex)
    return graph, left, right


def adjacency_of(graph, left):
    """Returns the left adjacency lists of a bipartite graph, ignoring edge directions."""
    left = set(left)
    adjacency = dict((vertex, []) for vertex in left)
    for edge in graph.edges():
        if edge.v0 in left:
            adjacency[edge.v0].append(edge.v1)
        else:
            adjacency[edge.v1].append(edge.v0)
    return adjacency


def brute_force_matching_size(adjacency):
    """Finds the size of a maximum matching by trying every assignment of the left vertices."""
    lefts = list(adjacency)
    cache = {}

    def best(index, used):
        if index == len(lefts):
            return 0
        if (index, used) not in cache:
            result = best(index + 1, used)
            for right in adjacency[lefts[index]]:
                if right not in used:
                    result = max(result, 1 + best(index + 1, used | {right}))
            cache[index, used] = result
        return cache[index, used]

    return best(0, frozenset())


def assert_valid_matching(graph, left, right, matching):
    left = set(left)
    right = set(right)
    assert len(set(matching.values())) == len(matching), "A right vertex is matched more than once"
    for left_vertex, right_vertex in matching.items():
        assert left_vertex in left, "Matching key {!r} is not a left vertex".format(left_vertex)
        assert right_vertex in right, "Matching value {!r} is not a right vertex".format(right_vertex)
        assert graph.contains(left_vertex, right_vertex) or graph.contains(right_vertex, left_vertex), \
            "Matched pair {!r} is not an edge of the graph".format((left_vertex, right_vertex))
