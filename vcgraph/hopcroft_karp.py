"""
Implementation of the Hopcroft-Karp algorithm, based on
https://en.wikipedia.org/wiki/Hopcroft%E2%80%93Karp_algorithm
"""

import logging
from .graph import Graph, Vertex

__all__ = ['HopcroftKarp', 'hopcroft_karp']

logger = logging.getLogger(__name__)


class HopcroftKarp:
    """
    Implementation of the Hopcroft-Karp algorithm to find a maximum-cardinality matching
    in a {0, 1}-colored bipartite graph, storing the temporary data for running the algorithm.

    Vertices with color 0 form the left partition 'U', all others the right partition 'V'.
    Vertices are referenced by their index within the graph.
    """
    def __init__(self, graph: Graph):
        # store a reference to the graph
        self.graph = graph
        self.ulist = [u.index for u in graph if u.load.color == 0]
        self.vlist = [v.index for v in graph if v.load.color != 0]
        for i in self.ulist:
            for e in graph.vertex(i).arcs:
                assert e.tip.load.color != 0, 'edges must connect the two partitions'
        # NIL vertex is indexed by -1
        self.matched_pairs_u = {i: -1 for i in self.ulist}
        self.matched_pairs_v = {j: -1 for j in self.vlist}
        self.dist = {}
        # formally "infinite" distance
        self.inf_dist = len(self.ulist) + 1

    def __connect_unmatched_vertices(self) -> bool:
        """
        Layer the alternating graph by a breadth-first search, starting from all
        currently unmatched vertices in 'U'. Returns whether some unmatched vertex
        in 'V' (represented by NIL) has been reached.
        """
        layer = []
        for i in self.ulist:
            if self.matched_pairs_u[i] == -1:
                self.dist[i] = 0
                layer.append(i)
            else:
                self.dist[i] = self.inf_dist
        self.dist[-1] = self.inf_dist
        d = 0
        # stop at the first layer reaching NIL
        while layer and self.dist[-1] == self.inf_dist:
            next_layer = []
            for i in layer:
                for e in self.graph.vertex(i).arcs:
                    k = self.matched_pairs_v[e.tip.index]
                    if self.dist[k] == self.inf_dist:
                        self.dist[k] = d + 1
                        if k != -1:
                            next_layer.append(k)
            layer = next_layer
            d += 1
        return self.dist[-1] != self.inf_dist

    def __add_augmenting_path(self, root: int) -> bool:
        """
        Search an augmenting path starting at the unmatched vertex 'root' in 'U'
        along the layers of the breadth-first search, and flip the matching along it.

        The depth-first search keeps an explicit stack of (vertex, arc position) frames.
        """
        stack = [(root, 0)]
        # edges (i, j) leading from each frame to the next one
        path = []
        while stack:
            i, pos = stack[-1]
            arcs = self.graph.vertex(i).arcs
            if pos == len(arcs):
                # dead end: do not visit this vertex again during the current phase
                self.dist[i] = self.inf_dist
                stack.pop()
                if path:
                    path.pop()
                continue
            stack[-1] = (i, pos + 1)
            j = arcs[pos].tip.index
            k = self.matched_pairs_v[j]
            if self.dist[k] != self.dist[i] + 1:
                continue
            path.append((i, j))
            if k == -1:
                # partners may still change during later searches,
                # hence edges are marked only after convergence
                for (a, b) in path:
                    self.matched_pairs_u[a] = b
                    self.matched_pairs_v[b] = a
                return True
            stack.append((k, 0))
        return False

    def __call__(self) -> int:
        """
        Run the Hopcroft-Karp algorithm to find a maximum-cardinality matching.

        Matched edges (both half-links) are marked by color 1, all other edges by color 0.
        Returns the cardinality of the matching.
        """
        # reset internal data
        # NIL vertex is indexed by -1
        self.matched_pairs_u = {i: -1 for i in self.ulist}
        self.matched_pairs_v = {j: -1 for j in self.vlist}
        self.dist = {}
        matching = 0
        nphases = 0
        # outer loop of the algorithm
        while self.__connect_unmatched_vertices():
            nphases += 1
            for i in self.ulist:
                if self.matched_pairs_u[i] == -1:
                    if self.__add_augmenting_path(i):
                        matching += 1
        logger.debug('maximum matching of size %d found after %d phases', matching, nphases)
        # mark matched edges
        for u in self.graph:
            for e in u.arcs:
                e.load.color = 0
        for u, v in self.matched_pairs():
            e = self.graph.get_edge(u, v)
            assert e is not None
            e.load.color = 1
            self.graph.get_sibling(e, u).load.color = 1
        return matching

    def matched_pairs(self) -> list[tuple[Vertex, Vertex]]:
        """
        Matched vertex pairs (u, v) with 'u' in the left and 'v' in the right partition.
        """
        pairs = []
        for i in self.ulist:
            j = self.matched_pairs_u[i]
            if j != -1:
                assert self.matched_pairs_v[j] == i
                pairs.append((self.graph.vertex(i), self.graph.vertex(j)))
        return pairs


def hopcroft_karp(graph: Graph) -> int:
    """
    Find a maximum-cardinality matching in a {0, 1}-colored bipartite graph,
    mark the matched edges by color 1 and return the size of the matching.
    """
    return HopcroftKarp(graph)()
