"""
Implementation of the Hopcroft-Karp algorithm, based on
https://en.wikipedia.org/wiki/Hopcroft%E2%80%93Karp_algorithm
"""

from queue import Queue
from collections.abc import Callable
import numpy as np
from .bipartite_graph import NIL, SIDE_A, BipartiteGraph

__all__ = ['Matching', 'HopcroftKarp', 'prefer']


class Matching:
    """
    Matching between the sides A and B of a bipartite graph,
    stored as the pair of mutually consistent maps A -> B and B -> A
    (unmatched vertices are mapped to NIL).
    """
    def __init__(self, max_id: int):
        self.match_a = np.full(max_id, NIL, dtype=int)
        self.match_b = np.full(max_id, NIL, dtype=int)
        self._size = 0

    def reset(self):
        """
        Unmatch all vertices.
        """
        self.match_a.fill(NIL)
        self.match_b.fill(NIL)
        self._size = 0

    def set_pair(self, a: int, b: int):
        """
        Match 'a' with 'b', releasing their previous partners.
        """
        self.clear_pair(a)
        a_prev = self.match_b[b]
        if a_prev != NIL:
            self.clear_pair(a_prev)
        self.match_a[a] = b
        self.match_b[b] = a
        self._size += 1

    def clear_pair(self, a: int):
        """
        Unmatch 'a' and its partner (if any).
        """
        b = self.match_a[a]
        if b != NIL:
            self.match_a[a] = NIL
            self.match_b[b] = NIL
            self._size -= 1

    def partner_a(self, a: int) -> int:
        """
        Partner of vertex 'a' in side A, or NIL.
        """
        return int(self.match_a[a])

    def partner_b(self, b: int) -> int:
        """
        Partner of vertex 'b' in side B, or NIL.
        """
        return int(self.match_b[b])

    def is_matched(self, vid: int) -> bool:
        return self.match_a[vid] != NIL or self.match_b[vid] != NIL

    def pairs(self) -> list[tuple[int, int]]:
        """
        Matched edges as (a, b) pairs, sorted by 'a'.
        """
        return [(int(a), int(self.match_a[a])) for a in np.nonzero(self.match_a)[0]]

    @property
    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def is_consistent(self, graph: BipartiteGraph = None, verbose: bool = False) -> bool:
        """
        Perform an internal consistency check, and optionally verify
        that all matched pairs are edges of 'graph'.
        """
        count = 0
        for a in np.nonzero(self.match_a)[0]:
            b = self.match_a[a]
            if self.match_b[b] != a:
                if verbose:
                    print(f'Consistency check failed: vertex {a} is matched with {b}, '
                          f'but {b} is matched with {self.match_b[b]}.')
                return False
            if graph is not None and not graph.adjacent(int(a), int(b)):
                if verbose:
                    print(f'Consistency check failed: matched pair ({a}, {b}) is not an edge of the graph.')
                return False
            count += 1
        if count != np.count_nonzero(self.match_b):
            if verbose:
                print(f'Consistency check failed: {count} vertices in A but '
                      f'{np.count_nonzero(self.match_b)} vertices in B are matched.')
            return False
        if count != self._size:
            if verbose:
                print(f'Consistency check failed: stored size {self._size} does not match '
                      f'number of matched pairs {count}.')
            return False
        return True


def prefer(vid: int) -> Callable[[int], bool]:
    """
    Ordering key which tries vertex 'vid' first, and keeps the order of all others.
    """
    return lambda v: v != vid


class HopcroftKarp:
    """
    Implementation of the Hopcroft-Karp algorithm to find a maximum-cardinality matching,
    storing the temporary data for running the algorithm.

    The optional 'key' (as for `sorted`) determines the order in which unmatched
    vertices in A and the neighbors of each vertex are tried; otherwise,
    registration and insertion order is used. The key can only influence
    which maximum matching is found, not its cardinality.
    """
    def __init__(self, graph: BipartiteGraph, key: Callable[[int], object] = None):
        # store a reference to the graph
        self.graph = graph
        self.key = key
        self.matching = Matching(graph.max_id)
        # distance labels indexed by vertex identifier, NIL vertex at index 0
        self.dist = np.zeros(graph.max_id, dtype=int)
        # formally "infinite" distance
        self.inf_dist = graph.max_id + 1
        self.num_phases = 0
        self._roots = []
        self._adj = {}

    def _ordered(self, vertices):
        if self.key is None:
            return list(vertices)
        return sorted(vertices, key=self.key)

    def _connect_unmatched_vertices(self) -> bool:
        """
        Find a path of minimal length connecting
        currently unmatched vertices in 'A' to currently unmatched vertices in 'B'
        via a breadth-first search.
        """
        dist = self.dist
        match_b = self.matching.match_b
        queue = Queue()
        dist.fill(self.inf_dist)
        for a in self._roots:
            if self.matching.match_a[a] == NIL:
                # 'a' has not been matched yet
                dist[a] = 0
                queue.put(a)
        while not queue.empty():
            u = queue.get()
            if dist[u] < dist[NIL]:
                for v in self._adj[u]:
                    w = match_b[v]
                    if dist[w] == self.inf_dist:
                        dist[w] = dist[u] + 1
                        if w != NIL:
                            queue.put(w)
        return dist[NIL] != self.inf_dist

    def _add_augmenting_path(self, root: int) -> bool:
        """
        Add an augmenting path starting from 'root' to the matching
        by performing a depth-first search along increasing distance labels.
        """
        dist = self.dist
        match_b = self.matching.match_b
        # each entry: [vertex in A, iterator over its neighbors, chosen neighbor]
        stack = [[root, iter(self._adj[root]), NIL]]
        while stack:
            entry = stack[-1]
            u = entry[0]
            for v in entry[1]:
                w = match_b[v]
                if dist[w] == dist[u] + 1:
                    entry[2] = v
                    break
            else:
                # do not visit the same vertex multiple times
                dist[u] = self.inf_dist
                stack.pop()
                continue
            w = int(match_b[entry[2]])
            if w != NIL:
                stack.append([w, iter(self._adj[w]), NIL])
                continue
            # reached an unmatched vertex in 'B': flip matching along the path,
            # starting from its end
            for (a, _, b) in reversed(stack):
                self.matching.set_pair(a, b)
                # vertices on the path are used up in this phase
                dist[a] = self.inf_dist
            return True
        return False

    def __call__(self) -> Matching:
        """
        Run the Hopcroft-Karp algorithm to find a maximum-cardinality matching.
        """
        # reset internal data
        self.matching.reset()
        self.num_phases = 0
        self._roots = self._ordered(self.graph.ordered_vertices(SIDE_A))
        self._adj = {a: self._ordered(self.graph.neighbors(a)) for a in self._roots}
        # outer loop of the algorithm
        while self._connect_unmatched_vertices():
            self.num_phases += 1
            for a in self._roots:
                if self.matching.match_a[a] == NIL:
                    self._add_augmenting_path(a)
        return self.matching
