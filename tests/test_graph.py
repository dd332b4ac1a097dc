# -*- coding: utf-8 -*-
import functools

import pytest

from conflictmatch.exceptions import InvalidEndpoint
from conflictmatch.graph.labeled import DirectedGraph, Edge, UndirectedGraph, Vertex


class TestVertex:
    def test_identity(self):
        v1 = Vertex('x')
        v2 = Vertex('x')
        assert v1.label == v2.label
        assert v1 != v2
        assert v1 == v1
        assert len({v1, v2}) == 2

    def test_label_is_read_only(self):
        vertex = Vertex(1)
        with pytest.raises(AttributeError):
            vertex.label = 2

    def test_str(self):
        assert str(Vertex('abc')) == 'abc'
        assert repr(Vertex('abc')) == "Vertex('abc')"


class TestEdge:
    def test_other(self):
        a, b, c = Vertex('a'), Vertex('b'), Vertex('c')
        edge = Edge(a, b, 'label')

        assert edge.other(a) is b
        assert edge.other(b) is a
        assert edge.label == 'label'

        with pytest.raises(ValueError):
            edge.other(c)

    def test_self_loop(self):
        a = Vertex('a')
        assert Edge(a, a).other(a) is a


class TestGraph:
    def test_add_vertex(self, any_graph):
        vertex = any_graph.add_vertex('a')

        assert vertex in any_graph
        assert any_graph.vertex_count() == 1
        assert len(any_graph) == 1
        assert any_graph.degree(vertex) == 0
        assert any_graph.neighbors(vertex) == []
        assert any_graph.edges_of(vertex) == []

    def test_equal_labels_are_distinct_vertices(self, any_graph):
        v1 = any_graph.add_vertex('a')
        v2 = any_graph.add_vertex('a')

        assert v1 is not v2
        assert any_graph.vertex_count() == 2
        assert set(any_graph.vertices()) == {v1, v2}

    def test_add_edge(self, any_graph):
        a = any_graph.add_vertex('a')
        b = any_graph.add_vertex('b')
        edge = any_graph.add_edge(a, b, 7)

        assert edge.v0 is a
        assert edge.v1 is b
        assert edge.label == 7
        assert any_graph.edges() == [edge]
        assert any_graph.edge_count() == 1
        assert any_graph.contains(a, b)
        assert any_graph.contains(a, b, 7)
        assert not any_graph.contains(a, b, 8)

    @pytest.mark.parametrize('foreign_side', [0, 1])
    def test_add_edge_invalid_endpoint(self, any_graph, foreign_side):
        own = any_graph.add_vertex('own')
        foreign = DirectedGraph().add_vertex('foreign')
        endpoints = [own, own]
        endpoints[foreign_side] = foreign

        with pytest.raises(InvalidEndpoint) as exc_info:
            any_graph.add_edge(*endpoints)

        assert exc_info.value.vertex is foreign
        assert any_graph.edge_count() == 0
        assert any_graph.degree(own) == 0
        assert foreign not in any_graph

    def test_queries_on_foreign_vertex(self, any_graph):
        foreign = Vertex('foreign')

        for query in (any_graph.neighbors, any_graph.edges_of, any_graph.degree, any_graph.successors,
                      any_graph.predecessors, any_graph.in_degree, any_graph.out_degree):
            with pytest.raises(InvalidEndpoint):
                query(foreign)

        assert not any_graph.contains(foreign, foreign)

    def test_remove_vertex(self, any_graph):
        a, b, c = (any_graph.add_vertex(name) for name in 'abc')
        ab = any_graph.add_edge(a, b)
        any_graph.add_edge(c, a)
        bc = any_graph.add_edge(b, c)

        any_graph.remove_vertex(a)

        assert a not in any_graph
        assert any_graph.vertex_count() == 2
        assert any_graph.edges() == [bc]
        assert ab not in any_graph.edges_of(b)
        assert any_graph.edge_count() == 1

        any_graph.remove_vertex(a)
        assert any_graph.vertex_count() == 2

    def test_remove_vertex_with_self_loop(self, any_graph):
        a = any_graph.add_vertex('a')
        any_graph.add_edge(a, a)

        any_graph.remove_vertex(a)

        assert any_graph.vertex_count() == 0
        assert any_graph.edge_count() == 0

    def test_remove_edge(self, any_graph):
        a, b = any_graph.add_vertex('a'), any_graph.add_vertex('b')
        edge = any_graph.add_edge(a, b)
        other = any_graph.add_edge(a, b)

        any_graph.remove_edge(edge)

        assert any_graph.edges() == [other]
        assert any_graph.edges_of(a) == [other]

        any_graph.remove_edge(edge)
        assert any_graph.edge_count() == 1

    def test_remove_edges(self, any_graph):
        a, b, c = (any_graph.add_vertex(name) for name in 'abc')
        any_graph.add_edge(a, b, 1)
        any_graph.add_edge(a, b, 2)
        ac = any_graph.add_edge(a, c)

        any_graph.remove_edges(a, b)

        assert any_graph.edges() == [ac]
        assert not any_graph.contains(a, b)

        any_graph.remove_edges(a, b)
        any_graph.remove_edges(a, Vertex('foreign'))
        assert any_graph.edges() == [ac]

    def test_order_edges(self, any_graph):
        a, b = any_graph.add_vertex('a'), any_graph.add_vertex('b')
        for label in [3, 1, 2]:
            any_graph.add_edge(a, b, label)

        any_graph.order_edges(lambda label: label)
        assert [e.label for e in any_graph.edges()] == [1, 2, 3]

        any_graph.order_edges(lambda label: label, reverse=True)
        assert [e.label for e in any_graph.edges()] == [3, 2, 1]

        by_comparator = functools.cmp_to_key(lambda x, y: x - y)
        any_graph.order_edges(by_comparator)
        assert [e.label for e in any_graph.edges()] == [1, 2, 3]

        any_graph.add_edge(a, b, 0)
        assert [e.label for e in any_graph.edges()] == [1, 2, 3, 0]

    def test_vertices_are_restartable(self, any_graph):
        vertices = {any_graph.add_vertex(i) for i in range(5)}

        assert set(any_graph.vertices()) == vertices
        assert set(any_graph.vertices()) == vertices
        assert set(any_graph) == vertices


class TestDirectedGraph:
    def test_directed(self):
        assert DirectedGraph().directed

    def test_adjacency(self):
        graph = DirectedGraph()
        a, b, c = (graph.add_vertex(name) for name in 'abc')
        ab = graph.add_edge(a, b)
        ca = graph.add_edge(c, a)

        assert graph.neighbors(a) == [b]
        assert graph.successors(a) == [b]
        assert graph.predecessors(a) == [c]
        assert graph.edges_of(a) == [ab]
        assert graph.out_edges(a) == [ab]
        assert graph.in_edges(a) == [ca]
        assert graph.degree(a) == 1
        assert graph.out_degree(a) == 1
        assert graph.in_degree(a) == 1
        assert graph.neighbors(b) == []
        assert graph.degree(b) == 0
        assert graph.in_degree(b) == 1

    def test_contains(self):
        graph = DirectedGraph()
        a, b = graph.add_vertex('a'), graph.add_vertex('b')
        graph.add_edge(a, b)

        assert graph.contains(a, b)
        assert not graph.contains(b, a)

    def test_remove_edges_is_directed(self):
        graph = DirectedGraph()
        a, b = graph.add_vertex('a'), graph.add_vertex('b')
        ba = graph.add_edge(b, a)

        graph.remove_edges(a, b)

        assert graph.edges() == [ba]


class TestUndirectedGraph:
    def test_directed(self):
        assert not UndirectedGraph().directed

    def test_adjacency(self):
        graph = UndirectedGraph()
        a, b, c = (graph.add_vertex(name) for name in 'abc')
        ab = graph.add_edge(a, b)
        ca = graph.add_edge(c, a)

        assert graph.neighbors(a) == [b, c]
        assert graph.neighbors(b) == [a]
        assert graph.neighbors(c) == [a]
        assert graph.edges_of(a) == [ab, ca]
        assert graph.edges_of(b) == [ab]
        assert graph.successors(a) == graph.predecessors(a) == [b, c]
        assert graph.degree(a) == graph.in_degree(a) == graph.out_degree(a) == 2
        assert graph.edge_count() == 2

    def test_contains_either_direction(self):
        graph = UndirectedGraph()
        a, b, c = (graph.add_vertex(name) for name in 'abc')
        graph.add_edge(a, b, 'x')

        assert graph.contains(a, b)
        assert graph.contains(b, a)
        assert graph.contains(b, a, 'x')
        assert not graph.contains(a, c)

    def test_remove_edges_either_direction(self):
        graph = UndirectedGraph()
        a, b = graph.add_vertex('a'), graph.add_vertex('b')
        graph.add_edge(b, a)

        graph.remove_edges(a, b)

        assert graph.edge_count() == 0
        assert graph.degree(a) == graph.degree(b) == 0
