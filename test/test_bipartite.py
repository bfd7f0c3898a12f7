import unittest
import numpy as np
import vcgraph as vcg


class TestColorBipartite(unittest.TestCase):

    def test_simple_graphs(self):

        graph = vcg.Graph(vcg.ColorLoad)
        graph.add_path(5)
        self.assertTrue(vcg.color_bipartite(graph))
        self.assertTrue(is_proper_coloring(graph))
        graph.add_cycle(6)
        self.assertTrue(vcg.color_bipartite(graph))
        self.assertTrue(is_proper_coloring(graph))
        graph.add_cycle(5)
        self.assertFalse(vcg.color_bipartite(graph))
        graph.cleanup()

        graph.add_cycle(6)
        self.assertTrue(vcg.color_bipartite(graph))
        self.assertEqual([u.load.color for u in graph], [0, 1, 0, 1, 0, 1])
        graph.cleanup()

        graph.add_cycle(5)
        self.assertFalse(vcg.color_bipartite(graph))
        graph.cleanup()

        for n in range(3, 8):
            graph.add_clique(n)
            self.assertFalse(vcg.color_bipartite(graph))
            graph.cleanup()

        graph.add_full_bipart(3, 5)
        self.assertTrue(vcg.color_bipartite(graph))
        self.assertEqual([u.load.color for u in graph], 3*[0] + 5*[1])

    def test_cycles(self):

        for n in range(3, 20):
            graph = vcg.Graph(vcg.ColorLoad)
            graph.add_cycle(n)
            self.assertEqual(vcg.color_bipartite(graph), n % 2 == 0)
            if n % 2 == 0:
                self.assertTrue(is_proper_coloring(graph))

    def test_random_tree(self):

        rng = np.random.default_rng()

        # attach each vertex to a random predecessor
        n = rng.integers(1, 50)
        graph = vcg.Graph(vcg.ColorLoad)
        graph.add_isolated(n)
        for i in range(1, n):
            graph.add_link(rng.integers(i), i)
        self.assertTrue(vcg.color_bipartite(graph))
        self.assertTrue(is_proper_coloring(graph))

        # closing an odd cycle destroys bipartiteness
        if n >= 3:
            graph.add_link(0, 1)
            graph.add_link(1, 2)
            graph.add_link(0, 2)
            self.assertFalse(vcg.color_bipartite(graph))


def is_proper_coloring(graph: vcg.Graph) -> bool:
    """
    Whether all vertices are {0, 1}-colored and adjacent vertices have different colors.
    """
    for u in graph:
        if u.load.color not in (0, 1):
            return False
        for e in u.arcs:
            if e.tip.load.color == u.load.color:
                return False
    return True


if __name__ == '__main__':
    unittest.main()
