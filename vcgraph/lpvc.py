"""
Linear programming (LP) relaxation of minimum vertex cover:

    minimize sum_v x_v  subject to  x_u + x_v >= 1 for each edge (u, v),  0 <= x_v <= 1

The relaxation always has a half-integral optimum (Nemhauser and Trotter),
which is obtained from a minimum vertex cover of the bipartite double of the graph.
"""

import logging
import numpy as np
from scipy import sparse
from scipy.optimize import linprog
from .graph import Graph
from .hopcroft_karp import hopcroft_karp
from .cover import matching_to_cover

__all__ = ['lpvc_half_integral', 'lp_relaxation']

logger = logging.getLogger(__name__)


def lpvc_half_integral(graph: Graph) -> int:
    """
    Find a half-integral optimum of the LP relaxation of vertex cover.

    Each vertex obtains color 0, 1 or 2, corresponding to x_v = color / 2.
    Returns the sum of the colors, i.e., twice the optimal value of the relaxation.

    The vertex load factory must produce color 0 by default,
    since newly created mirror vertices form the left partition.
    """
    if graph.nvertices == 0:
        return 0

    def mark_right(u):
        u.load.color = 1

    def merge_cover(u, mirror):
        u.load.color += mirror.load.color

    graph.duplicate_to_bipart(mark_right)
    matching = hopcroft_karp(graph)
    ncover = matching_to_cover(graph)
    assert ncover == matching
    graph.join_from_bipart(merge_cover)
    logger.debug('LP relaxation of vertex cover has optimal value %g', 0.5 * ncover)
    return ncover


def lp_relaxation(graph: Graph):
    """
    Solve the LP relaxation of vertex cover numerically.

    Returns:
        tuple: optimal value and solution vector (entries in order of vertex iteration)
    """
    col = {u.index: p for p, u in enumerate(graph)}
    n = len(col)
    rowind = []
    colind = []
    m = 0
    for u, v, _ in graph.edges():
        rowind.append(m)
        colind.append(col[u.index])
        if u is not v:
            rowind.append(m)
            colind.append(col[v.index])
        m += 1
    if m == 0:
        return 0.0, np.zeros(n)
    # edge-vertex incidence matrix
    incidence = sparse.csr_matrix((np.ones(len(rowind)), (rowind, colind)), shape=(m, n))
    res = linprog(np.ones(n), A_ub=-incidence, b_ub=-np.ones(m), bounds=(0, 1), method='highs')
    if not res.success:
        raise RuntimeError(f'LP solver failed: {res.message}')
    return res.fun, res.x
