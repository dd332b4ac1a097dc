# -*- coding: utf-8 -*-
"""Contains the `HopcroftKarp` class, which finds a maximum matching in a bipartite graph.

The graph is given as a ``dict`` mapping each left vertex to the list of its right neighbours:

>>> hk = HopcroftKarp({'a': [1, 2], 'b': [1]})
>>> hk.get_maximum_matching_num()
(2, {'a': 2, 'b': 1})
"""
import logging
from collections import deque
from typing import Deque, Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

__all__ = ['HopcroftKarp', 'UNREACHED']

logger = logging.getLogger(__name__)

THLeft = TypeVar('THLeft', bound=Hashable)
THRight = TypeVar('THRight', bound=Hashable)

UNREACHED = -1
"""Distance of a vertex that is not part of the current BFS layering."""


class HopcroftKarp(Generic[THLeft, THRight]):
    """Implementation of the Hopcroft-Karp algorithm on a bipartite graph.
    The two partitions of the bipartite graph may have different types,
    which are here represented by THLeft and THRight. A left and a right
    vertex may even be equal, as the two sides are never mixed.

    The constructor accepts a ``dict`` mapping the left vertices to the list
    of connected right vertices.

    An instance of maximum matching may be returned by
    ``.get_maximum_matching()``, while ``.get_maximum_matching_num()``
    returns both cardinality and an instance of maximum matching.

    Each phase consists of a BFS, which layers the left vertices by the
    length of the shortest alternating path from a free left vertex, followed
    by a DFS from every free left vertex which augments along vertex-disjoint
    shortest paths. There are at most O(sqrt(V)) phases, so the total running
    time is O(E sqrt(V)).

    The internal algorithm does not use sets in order to keep identical
    results across different Python versions.
    """

    def __init__(self, graph_left: Dict[THLeft, List[THRight]]):
        """Construct the HopcroftKarp class with a bipartite graph.

        Args:
            graph_left: a dictionary mapping the left-nodes to a list of
                right-nodes among which connections exist. The list shall not
                contain duplicates.

        """
        self._graph_left: Dict[THLeft, List[THRight]] = graph_left
        # Distance of the free right vertices, i.e. the length of the shortest augmenting path
        self._nil_distance: int = UNREACHED
        self._pair_left: Dict[THLeft, THRight] = {}
        self._pair_right: Dict[THRight, THLeft] = {}
        self._left: List[THLeft] = list(self._graph_left.keys())
        self._dist_left: Dict[THLeft, int] = {}
        self._phases: List[int] = []

    @property
    def phases(self) -> List[int]:
        """The size of the matching after each phase of the last run."""
        return list(self._phases)

    def _run_hopcroft_karp(self) -> int:
        self._pair_left.clear()
        self._pair_right.clear()
        self._dist_left.clear()
        self._phases.clear()
        left: THLeft
        for left in self._left:
            self._dist_left[left] = UNREACHED
        matchings: int = 0
        while True:
            if not self._bfs_hopcroft_karp():
                break
            for left in self._left:
                if left in self._pair_left:
                    continue
                if self._dfs_hopcroft_karp(left):
                    matchings += 1
            self._phases.append(matchings)
            logger.debug("Phase %d: shortest augmenting path length %d, matching size %d",
                         len(self._phases), 2 * self._nil_distance - 1, matchings)
        return matchings

    def get_maximum_matching(self) -> Dict[THLeft, THRight]:
        """Find an instance of maximum matching for the given bipartite graph.

        Returns:
            A dictionary representing an instance of maximum matching.

        """
        matchings, maximum_matching = self.get_maximum_matching_num()
        return maximum_matching

    def get_maximum_matching_num(self) -> Tuple[int, Dict[THLeft, THRight]]:
        """Find an instance of maximum matching and the number of matchings
        found.

        Returns:
            A tuple containing the number of matchings found and a dictionary
            representing an instance of maximum matching on the given
            bipartite graph.

        """
        matchings = self._run_hopcroft_karp()
        return matchings, dict(self._pair_left)

    def _bfs_hopcroft_karp(self) -> bool:
        vertex_queue: Deque[THLeft] = deque([])
        left_vert: THLeft
        for left_vert in self._left:
            if left_vert not in self._pair_left:
                vertex_queue.append(left_vert)
                self._dist_left[left_vert] = 0
            else:
                self._dist_left[left_vert] = UNREACHED
        self._nil_distance = UNREACHED
        while vertex_queue:
            left_vertex: THLeft = vertex_queue.popleft()
            # Vertices at or beyond the shortest augmenting path length cannot be on one
            if self._nil_distance != UNREACHED and self._dist_left[left_vertex] >= self._nil_distance:
                continue
            right_vertex: THRight
            for right_vertex in self._graph_left[left_vertex]:
                if right_vertex not in self._pair_right:
                    if self._nil_distance == UNREACHED:
                        self._nil_distance = self._dist_left[left_vertex] + 1
                else:
                    other_left: THLeft = self._pair_right[right_vertex]
                    if self._dist_left[other_left] == UNREACHED:
                        self._dist_left[other_left] = self._dist_left[left_vertex] + 1
                        vertex_queue.append(other_left)
        return self._nil_distance != UNREACHED

    def _swap_lr(self, left: THLeft, right: THRight) -> None:
        self._pair_left[left] = right
        self._pair_right[right] = left

    def _dfs_hopcroft_karp(self, root: THLeft) -> bool:
        # The path alternates between path_left[i] and path_right[i]; the right vertex
        # path_right[i] is currently matched with path_left[i + 1].
        path_left: List[THLeft] = [root]
        path_right: List[THRight] = []
        candidates: List[Iterator[THRight]] = [iter(self._graph_left[root])]
        while candidates:
            left = path_left[-1]
            next_distance = self._dist_left[left] + 1
            for right in candidates[-1]:
                if right not in self._pair_right:
                    if self._nil_distance == next_distance:
                        path_right.append(right)
                        for path_l, path_r in zip(path_left, path_right):
                            self._swap_lr(path_l, path_r)
                        return True
                else:
                    other_left: THLeft = self._pair_right[right]
                    if self._dist_left[other_left] == next_distance:
                        path_right.append(right)
                        path_left.append(other_left)
                        candidates.append(iter(self._graph_left[other_left]))
                        break
            else:
                # Dead end, do not visit this vertex again in this phase
                self._dist_left[left] = UNREACHED
                candidates.pop()
                path_left.pop()
                if path_right:
                    path_right.pop()
        return False
