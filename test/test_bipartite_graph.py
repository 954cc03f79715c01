import unittest
import numpy as np
import bilateral as blt


class TestBipartiteGraph(unittest.TestCase):

    def test_add_vertex(self):

        graph = blt.BipartiteGraph(20, 4)
        self.assertTrue(graph.add_vertex(3, blt.SIDE_A))
        self.assertTrue(graph.add_vertex(12, blt.SIDE_B))
        # duplicates, also in the other side
        self.assertFalse(graph.add_vertex(3, blt.SIDE_A))
        self.assertFalse(graph.add_vertex(3, blt.SIDE_B))
        # NIL and out-of-range identifiers
        self.assertFalse(graph.add_vertex(blt.NIL, blt.SIDE_A))
        self.assertFalse(graph.add_vertex(20, blt.SIDE_A))
        self.assertTrue(graph.add_vertex(5, blt.SIDE_A))
        self.assertTrue(graph.add_vertex(19, blt.SIDE_B))
        # capacity exhausted
        self.assertFalse(graph.add_vertex(7, blt.SIDE_A))
        self.assertEqual(graph.num_vertices, 4)
        self.assertEqual(graph.vertices(), {3, 5, 12, 19})
        self.assertEqual(graph.vertices(blt.SIDE_A), {3, 5})
        self.assertEqual(graph.vertices(blt.SIDE_B), {12, 19})
        self.assertEqual(graph.side(12), blt.SIDE_B)
        self.assertIsNone(graph.side(7))
        self.assertIn(19, graph)
        self.assertNotIn(7, graph)
        with self.assertRaises(ValueError):
            graph.add_vertex(8, 2)
        with self.assertRaises(ValueError):
            blt.BipartiteGraph(0)

    def test_add_edge(self):

        graph = blt.BipartiteGraph(100)
        for a in (1, 2, 3):
            graph.add_vertex(a, blt.SIDE_A)
        for b in (50, 51):
            graph.add_vertex(b, blt.SIDE_B)

        self.assertTrue(graph.add_edge(1, 50))
        self.assertTrue(graph.add_edge(2, 50))
        # reversed order of endpoints
        self.assertTrue(graph.add_edge(51, 1))
        # duplicate edges have no effect
        self.assertFalse(graph.add_edge(1, 50))
        self.assertFalse(graph.add_edge(50, 1))
        # unregistered endpoint
        self.assertFalse(graph.add_edge(4, 50))
        self.assertFalse(graph.add_edge(3, 52))
        # same side and self-loops
        self.assertFalse(graph.add_edge(1, 2))
        self.assertFalse(graph.add_edge(50, 51))
        self.assertFalse(graph.add_edge(3, 3))

        self.assertEqual(graph.num_edges, 3)
        # neighbors in insertion order
        self.assertEqual(graph.neighbors(1), (50, 51))
        self.assertEqual(graph.neighbors(50), (1, 2))
        self.assertEqual(graph.neighbors(51), (1,))
        self.assertEqual(graph.neighbors(3), ())
        self.assertEqual(graph.neighbors(99), ())
        self.assertEqual(graph.neighbors(1000), ())
        self.assertEqual(list(graph.edges()), [(1, 50), (1, 51), (2, 50)])
        self.assertTrue(graph.adjacent(50, 2))
        self.assertFalse(graph.adjacent(2, 51))

    def test_from_edges(self):

        graph = blt.BipartiteGraph.from_edges([(1, 10), (2, 10), (1, 11), (2, 10)], 20)
        self.assertEqual(graph.vertices(blt.SIDE_A), {1, 2})
        self.assertEqual(graph.vertices(blt.SIDE_B), {10, 11})
        self.assertEqual(graph.num_edges, 3)
        self.assertEqual(graph.ordered_vertices(blt.SIDE_B), [10, 11])

    def test_biadjacency(self):

        rng = np.random.default_rng()

        # generate a random bipartite graph
        num_a = rng.integers(1, 30)
        num_b = rng.integers(1, 30)
        edges = []
        for a in range(1, num_a + 1):
            for b in range(100, 100 + num_b):
                if rng.uniform() < 0.2:
                    edges.append((a, b))
        graph = blt.BipartiteGraph.from_edges(edges, 200)

        mat, rows, cols = graph.biadjacency()
        self.assertEqual(mat.shape, (len(rows), len(cols)))
        self.assertEqual(mat.nnz, len(edges))
        for (a, b) in edges:
            i = list(rows).index(a)
            j = list(cols).index(b)
            self.assertEqual(mat[i, j], 1)


if __name__ == '__main__':
    unittest.main()
