from collections.abc import Iterable
import numpy as np
from scipy import sparse

__all__ = ['NIL', 'SIDE_A', 'SIDE_B', 'BipartiteGraph']


# reserved "no vertex" identifier
NIL = 0

SIDE_A = 0
SIDE_B = 1


class BipartiteGraph:
    """
    Data structure representing a bipartite graph G = ((A, B), E),
    where 'A' and 'B' are the vertices in the two sides and 'E' the edges.

    Vertex identifiers are integers in the range 0 < id < max_id
    (0 is reserved as NIL), and unique across both sides.
    Neighbors of each vertex are stored in insertion order.
    """
    def __init__(self, max_id: int, max_vertices: int = None):
        if max_id < 1:
            raise ValueError(f'max_id must be positive, received {max_id}')
        if max_vertices is None:
            max_vertices = max_id - 1
        if max_vertices < 0:
            raise ValueError(f'max_vertices must be non-negative, received {max_vertices}')
        self.max_id = max_id
        self.max_vertices = max_vertices
        # side of each identifier, -1 for unregistered
        self._side = np.full(max_id, -1, dtype=int)
        # registered vertices in insertion order
        self._order = []
        # adjacency lists indexed by identifier
        self._adj = [[] for _ in range(max_id)]
        self._num_edges = 0

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], max_id: int, max_vertices: int = None):
        """
        Construct a graph from (a, b) pairs, registering 'a' in side A and 'b' in side B.
        Pairs which cannot be added are skipped.
        """
        graph = cls(max_id, max_vertices)
        for (a, b) in edges:
            graph.add_vertex(a, SIDE_A)
            graph.add_vertex(b, SIDE_B)
            graph.add_edge(a, b)
        return graph

    def _valid_id(self, vid: int) -> bool:
        return 0 < vid < self.max_id

    def add_vertex(self, vid: int, side: int) -> bool:
        """
        Register vertex 'vid' in side 'side'.

        Returns False if the vertex is already registered (in either side)
        or the maximum number of vertices has been reached.
        """
        if side not in (SIDE_A, SIDE_B):
            raise ValueError(f'side = {side} invalid; must be SIDE_A (0) or SIDE_B (1).')
        if not self._valid_id(vid):
            return False
        if self._side[vid] != -1:
            return False
        if len(self._order) >= self.max_vertices:
            return False
        self._side[vid] = side
        self._order.append(vid)
        return True

    def add_edge(self, a: int, b: int) -> bool:
        """
        Add the edge between 'a' and 'b', which must both be registered already
        and lie in different sides (in any order).

        Returns whether the edge was newly added.
        """
        if a not in self or b not in self:
            # violates the precondition
            return False
        if self._side[a] == self._side[b]:
            # same-side edge or self-loop
            return False
        if self._side[a] == SIDE_B:
            a, b = b, a
        if b in self._adj[a]:
            return False
        self._adj[a].append(b)
        self._adj[b].append(a)
        self._num_edges += 1
        return True

    def adjacent(self, a: int, b: int) -> bool:
        """
        Whether 'a' and 'b' are connected by an edge.
        """
        if a not in self or b not in self:
            return False
        return b in self._adj[a]

    def neighbors(self, vid: int) -> tuple[int, ...]:
        """
        Neighbors of vertex 'vid' in insertion order.
        """
        if not self._valid_id(vid):
            return ()
        return tuple(self._adj[vid])

    def side(self, vid: int):
        """
        Side of vertex 'vid', or None if it is not registered.
        """
        if vid not in self:
            return None
        return int(self._side[vid])

    def vertices(self, side: int = None) -> set[int]:
        """
        Registered vertex identifiers, optionally restricted to one side.
        """
        if side is None:
            return set(self._order)
        return {v for v in self._order if self._side[v] == side}

    def ordered_vertices(self, side: int) -> list[int]:
        """
        Registered vertices of one side in registration order.
        """
        return [v for v in self._order if self._side[v] == side]

    def edges(self):
        """
        Iterate over all edges as (a, b) pairs with 'a' in side A,
        ordered by registration of 'a' and insertion into its neighbor list.
        """
        for a in self.ordered_vertices(SIDE_A):
            for b in self._adj[a]:
                yield (a, b)

    @property
    def num_vertices(self) -> int:
        return len(self._order)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def __contains__(self, vid) -> bool:
        return isinstance(vid, (int, np.integer)) and self._valid_id(vid) and self._side[vid] != -1

    def __len__(self):
        return len(self._order)

    def biadjacency(self):
        """
        Biadjacency matrix of the graph as sparse CSR matrix.

        Returns:
            tuple: tuple containing
              - mat:    `len(rows) x len(cols)` matrix with unit entries for edges
              - rows:   identifiers of side A vertices, in registration order
              - cols:   identifiers of side B vertices, in registration order
        """
        rows = np.array(self.ordered_vertices(SIDE_A), dtype=int)
        cols = np.array(self.ordered_vertices(SIDE_B), dtype=int)
        # map identifiers to matrix indices
        index = np.zeros(self.max_id, dtype=int)
        index[rows] = np.arange(len(rows))
        index[cols] = np.arange(len(cols))
        ij = [(index[a], index[b]) for (a, b) in self.edges()]
        data = np.ones(len(ij), dtype=int)
        if ij:
            i, j = zip(*ij)
        else:
            i, j = (), ()
        mat = sparse.csr_matrix((data, (np.array(i, dtype=int), np.array(j, dtype=int))),
                                shape=(len(rows), len(cols)))
        return mat, rows, cols
