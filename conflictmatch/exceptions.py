# -*- coding: utf-8 -*-
"""Exceptions raised by the graph, the matchers and the input reader.

All of them derive from :class:`ValueError`, so callers that only care about "bad input" can catch that.
"""

__all__ = ['InvalidEndpoint', 'MalformedPartition', 'ParseError']


class InvalidEndpoint(ValueError):
    """Raised when a vertex is used with a graph that does not own it.

    The failing call does not modify the graph.
    """

    def __init__(self, vertex, message=None):
        self.vertex = vertex
        super().__init__(message or 'Vertex {!r} does not belong to this graph'.format(vertex))


class MalformedPartition(ValueError):
    """Raised when a vertex partition is not a valid bipartition of a graph.

    That is the case if the two sides overlap, or if an edge connects two vertices of the same side.
    """


class ParseError(ValueError):
    """Raised when the test case input is malformed."""

    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = '{} (line {:d})'.format(message, line_number)
        super().__init__(message)
