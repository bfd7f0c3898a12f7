import logging
from .graph import Graph

__all__ = ['color_bipartite']

logger = logging.getLogger(__name__)


def color_bipartite(graph: Graph) -> bool:
    """
    Properly {0, 1}-color the vertices of a graph if it is bipartite.

    Uses a depth-first traversal with an explicit stack (Knuth, TAOCP 7, algorithm B).
    Returns False as soon as an edge between equally colored vertices is found;
    the vertex colors are not meaningful in this case.
    """
    for u in graph:
        u.load.color = -1
    stack = []
    for w in graph:
        if w.load.color >= 0:
            continue
        w.load.color = 0
        stack.append(w)
        while stack:
            u = stack.pop()
            uc = u.load.color
            assert uc >= 0
            for e in u.arcs:
                v = e.tip
                if v.load.color == -1:
                    v.load.color = 1 - uc
                    stack.append(v)
                elif v.load.color == uc:
                    logger.debug('odd cycle through vertices %d and %d', u.index, v.index)
                    return False
    return True
