from collections.abc import Callable
from itertools import combinations
import logging
import numpy as np
from .graph import Graph, Vertex

__all__ = ['vertex_2approx', 'all_subsets', 'vertex_cover_brute']

logger = logging.getLogger(__name__)


def vertex_2approx(graph: Graph) -> int:
    """
    Find a 2-approximation of a minimum vertex cover in a general graph.

    Both endpoints of the edges of a greedily constructed maximal matching
    are put into the cover (color 1); these edges are marked by color 2.
    Returns the size of the cover.
    """
    for u in graph:
        u.load.color = 0
    ncover = 0
    for u in graph:
        if u.load.color == 1:
            continue
        for e in u.arcs:
            if e.tip.load.color == 0:
                u.load.color = 1
                e.tip.load.color = 1
                e.load.color = 2
                e.sibling.load.color = 2
                # a self-loop selects a single vertex
                ncover += 1 if e.tip is u else 2
                break
    logger.debug('2-approximate vertex cover of size %d', ncover)
    return ncover


def all_subsets(n: int, k: int, callback: Callable[[np.ndarray], bool]) -> bool:
    """
    Enumerate all subsets of size 'k' out of 'n' elements as 0/1 masks,
    in reverse lexicographic order of the masks (starting with 1...10...0).

    Stops and returns True as soon as the callback returns True for a mask.
    """
    for c in combinations(range(n), k):
        mask = np.zeros(n, dtype=int)
        mask[list(c)] = 1
        if callback(mask):
            return True
    return False


def vertex_cover_brute(graph: Graph, k: int, classify: Callable[[Vertex], int]) -> bool:
    """
    Search for a vertex cover by brute force.

    Args:
        graph: graph with colorable vertices
        k: number of free vertices to select for the cover
        classify: maps a vertex to 1 (always in cover), 0 (never in cover)
                  or -1 (free, decided by the search)

    Returns:
        bool: whether a cover exists; if so, vertices in the cover obtain color 2
              and all other vertices color 0
    """
    assert k >= 0
    free = []
    forced = {}
    for u in graph:
        s = classify(u)
        assert s in (-1, 0, 1), f'invalid vertex classification {s}'
        if s == -1:
            free.append(u)
        else:
            forced[u.index] = s
    position = {u.index: p for p, u in enumerate(free)}

    # edges which are not covered by a vertex forced into the cover,
    # referencing free vertices by their position (None for vertices forced out)
    edges = []
    for u, v, _ in graph.edges():
        if forced.get(u.index) == 1 or forced.get(v.index) == 1:
            continue
        a = position.get(u.index)
        b = position.get(v.index)
        if a is None and b is None:
            # cannot be covered by any selection
            return False
        edges.append((a, b))

    selection = None

    def is_cover(mask: np.ndarray) -> bool:
        nonlocal selection
        for a, b in edges:
            if not ((a is not None and mask[a]) or (b is not None and mask[b])):
                return False
        selection = mask
        return True

    if not all_subsets(len(free), k, is_cover):
        logger.debug('no vertex cover with %d out of %d free vertices', k, len(free))
        return False

    for u in graph:
        if u.index in position:
            u.load.color = 2 if selection[position[u.index]] else 0
        else:
            u.load.color = 2 if forced[u.index] == 1 else 0
    return True
