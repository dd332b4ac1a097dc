# -*- coding: utf-8 -*-
"""Contains the vote model and the construction of conflict graphs.

Each `Vote` asks to keep one pet and to discard another one. Two votes contradict each other if one of them
wants to keep what the other one wants to discard, so at most one of them can be satisfied. The votes are
split into cat lovers and dog lovers and the contradictions only ever occur between the two groups, so the
conflict graph is bipartite. A largest set of votes that can all be satisfied at once is the complement of a
minimum vertex cover, whose size equals the size of a maximum matching (König's theorem).

>>> votes = [Vote('C1', 'D1'), Vote('D1', 'C1'), Vote('C2', 'D2')]
>>> max_satisfied(votes)
2
"""
import logging
from typing import Callable, Iterable, List, NamedTuple, Tuple, TypeVar

from .exceptions import MalformedPartition
from .graph.labeled import UndirectedGraph, Vertex
from .matching.bipartite import compute_max_matching

__all__ = ['Vote', 'is_contradiction', 'keeps_prefix', 'build_graph', 'max_satisfied']

logger = logging.getLogger(__name__)

T = TypeVar('T')

Contradiction = Callable[[T, T], bool]
Side = Callable[[T], bool]


class Vote(NamedTuple):
    """A single vote: which pet to keep and which one to discard."""
    keep: str
    discard: str

    def __str__(self):
        return '{} {}'.format(self.keep, self.discard)


def is_contradiction(vote1: Vote, vote2: Vote) -> bool:
    """Returns True iff the two votes cannot both be satisfied.

    >>> is_contradiction(Vote('C1', 'D2'), Vote('D2', 'C1'))
    True
    >>> is_contradiction(Vote('C1', 'D2'), Vote('C1', 'D3'))
    False
    """
    return vote1.keep == vote2.discard or vote2.keep == vote1.discard


def keeps_prefix(prefix: str) -> Side[Vote]:
    """Returns a predicate that puts votes in the left side iff the pet they keep starts with *prefix*."""

    def is_left(vote: Vote) -> bool:
        return vote.keep.startswith(prefix)

    return is_left


def build_graph(elements: Iterable[T], contradicts: Contradiction[T]=is_contradiction,
                is_left: Side[T]=keeps_prefix('C')) \
        -> Tuple[UndirectedGraph[T, None], List[Vertex[T]], List[Vertex[T]]]:
    """Builds the conflict graph for the given elements.

    Every element becomes a vertex labeled with it. An edge connects every pair of distinct elements for which
    *contradicts* holds. An element is never checked against itself, so the graph has no self-loops.

    Args:
        elements:
            The elements (usually `Vote` instances), in the order their vertices are created.
        contradicts:
            Called with two elements, returns True iff they conflict.
        is_left:
            Decides for each element whether its vertex goes in the left or the right side of the partition.

    Returns:
        The graph together with the list of left and right vertices.

    Raises:
        MalformedPartition: If two elements on the same side contradict each other.
    """
    graph = UndirectedGraph()  # type: UndirectedGraph[T, None]
    vertices = []  # type: List[Tuple[Vertex[T], bool]]
    left = []  # type: List[Vertex[T]]
    right = []  # type: List[Vertex[T]]
    for element in elements:
        vertex = graph.add_vertex(element)
        side = bool(is_left(element))
        vertices.append((vertex, side))
        (left if side else right).append(vertex)

    for i, (vertex1, side1) in enumerate(vertices):
        for vertex2, side2 in vertices[i + 1:]:
            if not contradicts(vertex1.label, vertex2.label):
                continue
            if side1 == side2:
                raise MalformedPartition(
                    'Contradicting elements {!r} and {!r} are on the same side'.format(vertex1.label, vertex2.label)
                )
            graph.add_edge(vertex1, vertex2)

    logger.debug("Built conflict graph with %d vertices (%d left, %d right) and %d edges",
                 graph.vertex_count(), len(left), len(right), graph.edge_count())
    return graph, left, right


def max_satisfied(elements: Iterable[T], contradicts: Contradiction[T]=is_contradiction,
                  is_left: Side[T]=keeps_prefix('C')) -> int:
    """Returns the maximum number of elements that can be satisfied simultaneously.

    This is the number of elements minus the size of a maximum matching in their conflict graph.
    """
    graph, left, right = build_graph(elements, contradicts, is_left)
    return graph.vertex_count() - compute_max_matching(graph, left, right)
