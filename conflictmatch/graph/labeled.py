# -*- coding: utf-8 -*-
"""Contains a generic labeled graph with a directed and an undirected variant.

Vertices and edges are handles: a `Vertex` is only equal to itself, no matter what label it carries. Each
vertex and edge can carry a label of arbitrary type, which the graph never inspects.

The abstract `Graph` base class stores for every vertex the list of its incident edges. The concrete
`DirectedGraph` and `UndirectedGraph` classes only differ in which of those edges count as adjacent:

>>> graph = UndirectedGraph()
>>> a = graph.add_vertex('a')
>>> b = graph.add_vertex('b')
>>> edge = graph.add_edge(a, b, 42)
>>> graph.neighbors(b) == [a]
True
>>> graph.edge_count()
1
"""
from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

try:
    from graphviz import Digraph, Graph as GraphvizGraph
except ImportError:
    Digraph = GraphvizGraph = None

from ..exceptions import InvalidEndpoint

__all__ = ['Vertex', 'Edge', 'Graph', 'DirectedGraph', 'UndirectedGraph', 'ANY']

VLabel = TypeVar('VLabel')
ELabel = TypeVar('ELabel')

ANY = object()
"""Wildcard label for `Graph.contains`, which matches any edge label."""


class Vertex(Generic[VLabel]):
    """A vertex handle with an immutable label.

    Vertices use identity for equality and hashing, so two vertices with equal labels are still distinct.
    A vertex does not know its edges, those are stored by the graph that created it.
    """

    __slots__ = ('_label', )

    def __init__(self, label: VLabel=None) -> None:
        self._label = label

    @property
    def label(self) -> VLabel:
        """The label of the vertex."""
        return self._label

    def __str__(self):
        return str(self._label)

    def __repr__(self):
        return 'Vertex({!r})'.format(self._label)


class Edge(Generic[VLabel, ELabel]):
    """An edge between two vertices with an optional label.

    In a directed graph, the edge exits `v0` and enters `v1`. In an undirected graph, the order of the
    endpoints carries no meaning.
    """

    __slots__ = ('_v0', '_v1', '_label')

    def __init__(self, v0: Vertex[VLabel], v1: Vertex[VLabel], label: ELabel=None) -> None:
        self._v0 = v0
        self._v1 = v1
        self._label = label

    @property
    def v0(self) -> Vertex[VLabel]:
        """The vertex the edge exits."""
        return self._v0

    @property
    def v1(self) -> Vertex[VLabel]:
        """The vertex the edge enters."""
        return self._v1

    @property
    def label(self) -> ELabel:
        return self._label

    def other(self, vertex: Vertex[VLabel]) -> Vertex[VLabel]:
        """Returns the endpoint opposite to the given one.

        Raises:
            ValueError: If the vertex is not incident to this edge.
        """
        if vertex is self._v0:
            return self._v1
        if vertex is self._v1:
            return self._v0
        raise ValueError('Vertex {!r} is not incident to the edge {!r}'.format(vertex, self))

    def __repr__(self):
        return 'Edge({!r}, {!r}, {!r})'.format(self._v0, self._v1, self._label)


class Graph(Generic[VLabel, ELabel], metaclass=ABCMeta):
    """Base class for labeled graphs.

    Use one of the subclasses `DirectedGraph` or `UndirectedGraph`. Whether the graph is directed is fixed by its
    class and cannot change afterwards.

    Every edge is stored in the incidence lists of both its endpoints (once for a self-loop), so that removing a
    vertex can also remove the edges entering it. The graph itself does not reject self-loops or parallel edges;
    callers that need a simple graph have to avoid creating them.
    """

    __slots__ = ('_incidence', '_edges')

    def __init__(self) -> None:
        self._incidence = {}  # type: Dict[Vertex[VLabel], List[Edge[VLabel, ELabel]]]
        # Used as an ordered set
        self._edges = {}  # type: Dict[Edge[VLabel, ELabel], None]

    @property
    @abstractmethod
    def directed(self) -> bool:
        """True iff this is a directed graph."""
        raise NotImplementedError()

    def _check(self, vertex: Vertex[VLabel]) -> List[Edge[VLabel, ELabel]]:
        try:
            return self._incidence[vertex]
        except (KeyError, TypeError):
            raise InvalidEndpoint(vertex) from None

    def __contains__(self, vertex) -> bool:
        return vertex in self._incidence

    def __len__(self):
        return len(self._incidence)

    def __iter__(self) -> Iterator[Vertex[VLabel]]:
        return iter(list(self._incidence))

    def add_vertex(self, label: VLabel=None) -> Vertex[VLabel]:
        """Adds a new vertex without any edges and returns it."""
        vertex = Vertex(label)
        self._incidence[vertex] = []
        return vertex

    def add_edge(self, v0: Vertex[VLabel], v1: Vertex[VLabel], label: ELabel=None) -> Edge[VLabel, ELabel]:
        """Adds a new edge from *v0* to *v1* and returns it.

        Raises:
            InvalidEndpoint: If one of the endpoints is not a vertex of this graph. The graph is left unchanged.
        """
        edges0 = self._check(v0)
        edges1 = self._check(v1)
        edge = Edge(v0, v1, label)
        edges0.append(edge)
        if v1 is not v0:
            edges1.append(edge)
        self._edges[edge] = None
        return edge

    def remove_vertex(self, vertex: Vertex[VLabel]) -> None:
        """Removes the vertex and all edges incident to it. Does nothing if the vertex is not in the graph."""
        if vertex not in self._incidence:
            return
        for edge in self._incidence.pop(vertex):
            other = edge.other(vertex)
            if other is not vertex:
                self._incidence[other].remove(edge)
            del self._edges[edge]

    def remove_edge(self, edge: Edge[VLabel, ELabel]) -> None:
        """Removes the edge. Does nothing if the edge is not in the graph."""
        if edge not in self._edges:
            return
        del self._edges[edge]
        self._incidence[edge.v0].remove(edge)
        if edge.v1 is not edge.v0:
            self._incidence[edge.v1].remove(edge)

    def remove_edges(self, v0: Vertex[VLabel], v1: Vertex[VLabel]) -> None:
        """Removes all edges from *v0* to *v1* (in either direction for undirected graphs).

        Does nothing if either vertex is not in the graph or there is no such edge.
        """
        if v0 not in self._incidence or v1 not in self._incidence:
            return
        for edge in [e for e in self._incidence[v0] if self._connects(e, v0, v1)]:
            self.remove_edge(edge)

    def _connects(self, edge: Edge[VLabel, ELabel], tail: Vertex[VLabel], head: Vertex[VLabel]) -> bool:
        if edge.v0 is tail and edge.v1 is head:
            return True
        return not self.directed and edge.v0 is head and edge.v1 is tail

    def contains(self, u: Vertex[VLabel], v: Vertex[VLabel], label: Any=ANY) -> bool:
        """Returns True iff there is an edge from *u* to *v*, optionally restricted to the given label."""
        if u not in self._incidence or v not in self._incidence:
            return False
        return any(
            self._connects(e, u, v) and (label is ANY or e.label == label) for e in self._incidence[u]
        )

    def vertices(self) -> List[Vertex[VLabel]]:
        """Returns all vertices in arbitrary order."""
        return list(self._incidence)

    def edges(self) -> List[Edge[VLabel, ELabel]]:
        """Returns all edges, each one once.

        They are sorted according to the last call to `order_edges`, followed by all edges added since then.
        """
        return list(self._edges)

    def vertex_count(self) -> int:
        return len(self._incidence)

    def edge_count(self) -> int:
        return len(self._edges)

    def out_edges(self, vertex: Vertex[VLabel]) -> List[Edge[VLabel, ELabel]]:
        return [e for e in self._check(vertex) if e.v0 is vertex]

    def in_edges(self, vertex: Vertex[VLabel]) -> List[Edge[VLabel, ELabel]]:
        return [e for e in self._check(vertex) if e.v1 is vertex]

    def successors(self, vertex: Vertex[VLabel]) -> List[Vertex[VLabel]]:
        return [e.v1 for e in self.out_edges(vertex)]

    def predecessors(self, vertex: Vertex[VLabel]) -> List[Vertex[VLabel]]:
        return [e.v0 for e in self.in_edges(vertex)]

    def out_degree(self, vertex: Vertex[VLabel]) -> int:
        return len(self.out_edges(vertex))

    def in_degree(self, vertex: Vertex[VLabel]) -> int:
        return len(self.in_edges(vertex))

    @abstractmethod
    def edges_of(self, vertex: Vertex[VLabel]) -> List[Edge[VLabel, ELabel]]:
        """Returns the edges leaving the vertex, i.e. all incident edges for an undirected graph."""
        raise NotImplementedError()

    @abstractmethod
    def neighbors(self, vertex: Vertex[VLabel]) -> List[Vertex[VLabel]]:
        """Returns the vertices adjacent to the given one.

        For a directed graph, only successors are returned. A neighbor occurs once per connecting edge.
        """
        raise NotImplementedError()

    def degree(self, vertex: Vertex[VLabel]) -> int:
        return len(self.edges_of(vertex))

    def order_edges(self, key: Callable[[ELabel], Any], reverse: bool=False) -> None:
        """Sorts the edges by the key of their labels for subsequent calls to `edges`.

        Works like :func:`sorted`, so a comparator can be passed via :func:`functools.cmp_to_key`.
        Edges added later are appended to the end, so the order has to be restored by calling this again.
        """
        ordered = sorted(self._edges, key=lambda e: key(e.label), reverse=reverse)
        self._edges = dict.fromkeys(ordered)

    def as_graph(self) -> Optional[GraphvizGraph]:  # pragma: no cover
        """Returns a :class:`graphviz.Graph` or :class:`graphviz.Digraph` representation of this graph."""
        if GraphvizGraph is None:
            raise ImportError('The graphviz package is required to draw the graph.')
        graph = Digraph() if self.directed else GraphvizGraph()
        names = {}  # type: Dict[Vertex[VLabel], str]
        for node_id, vertex in enumerate(self._incidence):
            name = 'node{:d}'.format(node_id)
            names[vertex] = name
            graph.node(name, label=str(vertex))
        for edge in self._edges:
            edge_label = edge.label is not None and str(edge.label) or ''
            graph.edge(names[edge.v0], names[edge.v1], edge_label)
        return graph


class DirectedGraph(Graph[VLabel, ELabel]):
    """A graph where each edge leads from its `~Edge.v0` to its `~Edge.v1`."""

    __slots__ = ()

    @property
    def directed(self) -> bool:
        return True

    def edges_of(self, vertex: Vertex[VLabel]) -> List[Edge[VLabel, ELabel]]:
        return self.out_edges(vertex)

    def neighbors(self, vertex: Vertex[VLabel]) -> List[Vertex[VLabel]]:
        return self.successors(vertex)


class UndirectedGraph(Graph[VLabel, ELabel]):
    """A graph where every edge can be traversed from both of its endpoints.

    For an undirected graph, incoming and outgoing edges are the same thing:

    >>> graph = UndirectedGraph()
    >>> a, b = graph.add_vertex(1), graph.add_vertex(2)
    >>> _ = graph.add_edge(a, b)
    >>> graph.in_degree(a), graph.out_degree(a)
    (1, 1)
    """

    __slots__ = ()

    @property
    def directed(self) -> bool:
        return False

    def edges_of(self, vertex: Vertex[VLabel]) -> List[Edge[VLabel, ELabel]]:
        return list(self._check(vertex))

    def neighbors(self, vertex: Vertex[VLabel]) -> List[Vertex[VLabel]]:
        return [e.other(vertex) for e in self._check(vertex)]

    out_edges = in_edges = edges_of
    successors = predecessors = neighbors

    def out_degree(self, vertex: Vertex[VLabel]) -> int:
        return len(self._check(vertex))

    in_degree = out_degree
