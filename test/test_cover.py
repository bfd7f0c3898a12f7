import unittest
import numpy as np
import vcgraph as vcg


class TestMatchingToCover(unittest.TestCase):

    def test_random_bipartite(self):

        rng = np.random.default_rng()

        # generate a random bipartite graph
        num_u = rng.integers(1, 41)
        num_v = rng.integers(1, 41)
        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_isolated(num_u + num_v)
        for u in range(num_u):
            for v in range(num_u, num_u + num_v):
                if rng.uniform() < 0.2:
                    graph.add_link(u, v)

        self.assertTrue(vcg.color_bipartite(graph))
        matching = vcg.hopcroft_karp(graph)
        ncover = vcg.matching_to_cover(graph)
        # number of vertices in minimum vertex cover must agree with
        # maximum-cardinality matching according to Kőnig's theorem
        self.assertEqual(ncover, matching)
        self.assertEqual(sum(u.load.color for u in graph), ncover)
        self.assertTrue(is_vertex_cover(graph))
        # matching marks are consumed
        self.assertTrue(all(e.load.color == 0 for u in graph for e in u.arcs))

    def test_minimum_vertex_cover(self):

        rng = np.random.default_rng()

        # small random bipartite graph, compare with brute force search
        num_u = rng.integers(1, 7)
        num_v = rng.integers(1, 7)
        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_isolated(num_u + num_v)
        for u in range(num_u):
            for v in range(num_u, num_u + num_v):
                if rng.uniform() < 0.4:
                    graph.add_link(u, v)
        ncover = vcg.minimum_vertex_cover(graph)
        self.assertTrue(is_vertex_cover(graph))
        if ncover > 0:
            self.assertFalse(vcg.vertex_cover_brute(graph, ncover - 1, lambda u: -1))
        self.assertTrue(vcg.vertex_cover_brute(graph, ncover, lambda u: -1))

        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_full_bipart(3, 5)
        self.assertEqual(vcg.minimum_vertex_cover(graph), 3)
        self.assertEqual([u.load.color for u in graph], 3*[1] + 5*[0])

        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_cycle(5)
        with self.assertRaises(ValueError):
            vcg.minimum_vertex_cover(graph)

    def test_alternating_paths(self):

        # path x - y - z - w - t, with vertices stored in order x, y, z, t, w
        # and (non-unique) maximum matching {y - z, w - t}
        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_isolated(5)
        x, y, z, t, w = (graph.vertex(i) for i in range(5))
        graph.add_link(0, 1)
        graph.add_link(1, 2)
        graph.add_link(2, 4)
        graph.add_link(4, 3)
        for (a, b) in [(y, z), (w, t)]:
            e = graph.get_edge(a, b)
            e.load.color = 1
            e.sibling.load.color = 1
        self.assertEqual(vcg.matching_to_cover(graph), 2)
        self.assertTrue(is_vertex_cover(graph))
        self.assertEqual(sum(u.load.color for u in graph), 2)
        self.assertEqual((y.load.color, w.load.color), (1, 1))
        self.assertEqual((x.load.color, z.load.color, t.load.color), (0, 0, 0))

    def test_perfect_matching(self):

        # no exposed vertices at all
        for n in [4, 6, 10]:
            graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
            graph.add_cycle(n)
            self.assertTrue(vcg.color_bipartite(graph))
            self.assertEqual(vcg.hopcroft_karp(graph), n // 2)
            self.assertEqual(vcg.matching_to_cover(graph), n // 2)
            self.assertTrue(is_vertex_cover(graph))
            self.assertEqual(sum(u.load.color for u in graph), n // 2)

    def test_degree_one_cleanup(self):

        # cover of a path must not contain its end points
        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_path(4)
        self.assertEqual(vcg.minimum_vertex_cover(graph), 2)
        self.assertEqual([u.load.color for u in graph], [0, 1, 1, 0])

        # single edge
        graph = vcg.Graph(vcg.ColorLoad, vcg.ColorLoad)
        graph.add_path(2)
        self.assertEqual(vcg.minimum_vertex_cover(graph), 1)
        self.assertTrue(is_vertex_cover(graph))
        self.assertEqual(sum(u.load.color for u in graph), 1)


def is_vertex_cover(graph: vcg.Graph, incover=(1,)) -> bool:
    """
    Whether every edge has at least one end point with a color in 'incover'.
    """
    for u, v, _ in graph.edges():
        if u.load.color not in incover and v.load.color not in incover:
            return False
    return True


if __name__ == '__main__':
    unittest.main()
