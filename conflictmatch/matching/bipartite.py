# -*- coding: utf-8 -*-
"""Contains classes and functions related to matchings in bipartite graphs.

The `BipartiteMatcher` class finds a maximum matching in a labeled `~conflictmatch.graph.Graph` for a given
partition of its vertices. The function `compute_max_matching` is a shortcut that only returns the size:

>>> graph = UndirectedGraph()
>>> a, b, c = graph.add_vertex('a'), graph.add_vertex('b'), graph.add_vertex('c')
>>> _ = graph.add_edge(a, b)
>>> _ = graph.add_edge(c, b)
>>> compute_max_matching(graph, [a, c], [b])
1
"""
import logging
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

try:
    from graphviz import Graph as GraphvizGraph
except ImportError:
    GraphvizGraph = None

from .hopcroft_karp import HopcroftKarp
from ..exceptions import InvalidEndpoint, MalformedPartition
from ..graph.labeled import Graph, Vertex

__all__ = ['BipartiteMatcher', 'compute_max_matching']

logger = logging.getLogger(__name__)

VLabel = TypeVar('VLabel')
ELabel = TypeVar('ELabel')

LEFT = 0
RIGHT = 1


class BipartiteMatcher(Generic[VLabel, ELabel]):
    """Finds a maximum matching in a graph with respect to a partition of its vertices.

    Every edge of the graph must connect a vertex from *left* with a vertex from *right*. Edges of a directed
    graph are used regardless of their direction. Edges with an endpoint outside of both sides are ignored, so
    the matching is computed on the subgraph induced by the two sides. Parallel edges are only used once.

    The graph is only read while constructing the matcher; changing it afterwards does not affect the matcher.

    Raises:
        MalformedPartition:
            If the two sides share a vertex, or an edge connects two vertices of the same side.
        InvalidEndpoint:
            If a vertex of either side is not part of the graph.
    """

    def __init__(self, graph: Graph[VLabel, ELabel], left: Iterable[Vertex[VLabel]],
                 right: Iterable[Vertex[VLabel]]) -> None:
        self._graph = graph
        self._left = list(dict.fromkeys(left))
        self._right = list(dict.fromkeys(right))
        self._matching = {}  # type: Dict[Vertex[VLabel], Vertex[VLabel]]
        self._partners = {}  # type: Dict[Vertex[VLabel], Vertex[VLabel]]
        self._adjacency = self._left_adjacency()
        self._hopcroft_karp = HopcroftKarp(self._adjacency)

    def _left_adjacency(self) -> Dict[Vertex[VLabel], List[Vertex[VLabel]]]:
        sides = {}  # type: Dict[Vertex[VLabel], int]
        for part, vertices in ((LEFT, self._left), (RIGHT, self._right)):
            for vertex in vertices:
                if vertex not in self._graph:
                    raise InvalidEndpoint(vertex)
                if sides.setdefault(vertex, part) != part:
                    raise MalformedPartition('Vertex {!r} is part of both sides'.format(vertex))

        # dicts are used as ordered sets to skip parallel edges
        adjacency = dict((vertex, {}) for vertex in self._left)  # type: Dict[Vertex[VLabel], Dict[Vertex[VLabel], None]]
        for edge in self._graph.edges():
            part0 = sides.get(edge.v0)
            part1 = sides.get(edge.v1)
            if part0 is None or part1 is None:
                continue
            if part0 == part1:
                raise MalformedPartition('The edge {!r} connects two vertices of the same side'.format(edge))
            if part0 == LEFT:
                adjacency[edge.v0][edge.v1] = None
            else:
                adjacency[edge.v1][edge.v0] = None
        return dict((vertex, list(neighbors)) for vertex, neighbors in adjacency.items())

    @property
    def left(self) -> List[Vertex[VLabel]]:
        return list(self._left)

    @property
    def right(self) -> List[Vertex[VLabel]]:
        return list(self._right)

    @property
    def phases(self) -> List[int]:
        """The size of the matching after each Hopcroft-Karp phase of the last `find_matching` call."""
        return self._hopcroft_karp.phases

    def find_matching(self) -> Dict[Vertex[VLabel], Vertex[VLabel]]:
        """Finds a maximum matching in the bipartite graph.

        Every call starts over with an empty matching. The size of the result is always the same, but which
        of several maximum matchings is found depends on the order of the vertices and edges.

        Returns:
            A dictionary where each edge of the matching is represented by a key-value pair
            with the key being from the left part of the graph and the value from the right part.
        """
        size, matching = self._hopcroft_karp.get_maximum_matching_num()
        logger.debug("Found matching of size %d for %d left and %d right vertices in %d phases",
                     size, len(self._left), len(self._right), len(self._hopcroft_karp.phases))
        self._matching = matching
        self._partners = dict(matching)
        self._partners.update((right, left) for left, right in matching.items())
        return dict(matching)

    def matching_size(self) -> int:
        """Returns the size of a maximum matching."""
        return len(self.find_matching())

    def partner(self, vertex: Vertex[VLabel]) -> Optional[Vertex[VLabel]]:
        """Returns the vertex matched with the given one in the last found matching, or ``None`` if it is free."""
        return self._partners.get(vertex)

    def as_graph(self) -> GraphvizGraph:  # pragma: no cover
        """Returns a :class:`graphviz.Graph` of the bipartite graph with the last found matching in bold."""
        if GraphvizGraph is None:
            raise ImportError('The graphviz package is required to draw the graph.')
        graph = GraphvizGraph()
        subgraphs = [GraphvizGraph(graph_attr={'rank': 'same'}), GraphvizGraph(graph_attr={'rank': 'same'})]
        names = {}  # type: Dict[Vertex[VLabel], str]
        node_id = 0
        for part, vertices in ((LEFT, self._left), (RIGHT, self._right)):
            for vertex in vertices:
                name = 'node{:d}'.format(node_id)
                names[vertex] = name
                subgraphs[part].node(name, label=str(vertex))
                node_id += 1
        graph.subgraph(subgraphs[LEFT])
        graph.subgraph(subgraphs[RIGHT])
        for left, neighbors in self._adjacency.items():
            for right in neighbors:
                style = self._matching.get(left) is right and 'bold' or 'solid'
                graph.edge(names[left], names[right], style=style)
        return graph


def compute_max_matching(graph: Graph[VLabel, ELabel], left: Iterable[Vertex[VLabel]],
                         right: Iterable[Vertex[VLabel]]) -> int:
    """Returns the size of a maximum matching in the graph for the given partition of its vertices.

    See `BipartiteMatcher` for the requirements on the partition.
    """
    return BipartiteMatcher(graph, left, right).matching_size()
