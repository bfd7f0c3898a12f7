"""
Minimum vertex cover of bipartite graphs based on Kőnig's theorem.
"""

import logging
from .graph import Graph, Vertex
from .bipartite import color_bipartite
from .hopcroft_karp import hopcroft_karp

__all__ = ['matching_to_cover', 'minimum_vertex_cover']

logger = logging.getLogger(__name__)


def _vertex_unmatched(u: Vertex) -> bool:
    """
    Whether no matched edge (color 1) is attached to 'u'.
    """
    return all(e.load.color != 1 for e in u.arcs)


def _remove_matching(u: Vertex):
    """
    Unmark the matched edge attached to 'u', such that its partner becomes exposed.
    """
    for e in u.arcs:
        if e.load.color == 1:
            e.load.color = 0
            e.sibling.load.color = 0
            return
    assert False, f'vertex {u.index} is supposed to be matched'


def _color_exposed(graph: Graph) -> int:
    """
    Repeatedly color exposed vertices 0 and their matched neighbors 1,
    until no uncolored exposed vertex remains. Returns the number of vertices colored 1.
    """
    ncover = 0
    has_unmatched = True
    while has_unmatched:
        has_unmatched = False
        for u in graph:
            if u.load.color == -1 and _vertex_unmatched(u):
                has_unmatched = True
                u.load.color = 0
                for e in u.arcs:
                    v = e.tip
                    if v.load.color == -1 and not _vertex_unmatched(v):
                        v.load.color = 1
                        ncover += 1
                        # former partner of 'v' is exposed now
                        _remove_matching(v)
    return ncover


def matching_to_cover(graph: Graph) -> int:
    """
    Convert a maximum matching of a bipartite graph (edges marked by color 1)
    into a minimum vertex cover, following the alternating paths of Kőnig's construction.

    Vertices in the cover obtain color 1, all others color 0.
    The matching marks are consumed, i.e., all edges have color 0 afterwards.
    Returns the size of the cover, which agrees with the size of the matching.
    """
    for u in graph:
        u.load.color = -1
    ncover = _color_exposed(graph)
    while True:
        # remaining uncolored vertices are all matched
        u = next((u for u in graph if u.load.color == -1), None)
        if u is None:
            break
        assert not _vertex_unmatched(u)
        u.load.color = 1
        ncover += 1
        _remove_matching(u)
        ncover += _color_exposed(graph)

    # heuristic cleanup: move cover membership from degree-1 vertices to their neighbor
    for u in graph:
        if u.load.color == 1 and len(u.arcs) == 1:
            v = u.arcs[0].tip
            assert v.load.color == 0
            v.load.color = 1
            u.load.color = 0

    logger.debug('vertex cover of size %d from maximum matching', ncover)
    return ncover


def minimum_vertex_cover(graph: Graph) -> int:
    """
    Find a minimum vertex cover of a bipartite graph based on Kőnig's theorem.

    Vertices in the cover obtain color 1. Returns the size of the cover.
    """
    if not color_bipartite(graph):
        raise ValueError('graph is not bipartite')
    matching = hopcroft_karp(graph)
    ncover = matching_to_cover(graph)
    # number of vertices in minimum vertex cover must agree with
    # maximum-cardinality matching according to Kőnig's theorem
    assert ncover == matching
    return ncover
