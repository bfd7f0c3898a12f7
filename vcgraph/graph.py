"""
Mutable undirected graph with generic vertex and edge loads.

Each undirected connection is stored as two half-links ("arcs"),
one on each endpoint, which reference each other as siblings.
"""

from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar
import copy
import logging
import numpy as np
from .loads import NoLoad
from .formats import dot_string

__all__ = ['Vertex', 'Edge', 'Graph']

logger = logging.getLogger(__name__)

VL = TypeVar('VL')
EL = TypeVar('EL')


class Edge(Generic[EL]):
    """
    Half-link pointing to its 'tip' vertex, with a reference to the
    reverse half-link (sibling) stored on the tip vertex.
    """
    __slots__ = ('load', 'tip', 'sibling')

    def __init__(self, load: EL, tip: 'Vertex'):
        self.load = load
        self.tip = tip
        self.sibling: Optional['Edge'] = None

    @property
    def source(self) -> 'Vertex':
        """
        Vertex the half-link is attached to.
        """
        return self.sibling.tip


class Vertex(Generic[VL]):
    """
    Graph vertex owning a load and its incident half-links.
    """
    __slots__ = ('load', 'arcs', 'index')

    def __init__(self, load: VL, index: int):
        self.load = load
        self.arcs: list[Edge] = []
        # slot index within the owning graph
        self.index = index

    def link_to(self, v: 'Vertex', edge: Edge):
        """
        Attach a half-link pointing to 'v'.
        """
        assert edge.tip is v
        self.arcs.append(edge)

    def __repr__(self):
        return f'Vertex({self.index}, {self.load!r})'


class Graph(Generic[VL, EL]):
    """
    Mutable graph, storing vertices in insertion order.

    Vertices are addressed by stable slot indices; removing vertices leaves
    tombstones, such that indices of the remaining vertices never shift.
    """
    name = 'G'

    def __init__(self, vertex_load: Callable[[], VL] = NoLoad, edge_load: Callable[[], EL] = NoLoad):
        """
        Create an empty graph.

        Args:
            vertex_load: factory for default vertex loads
            edge_load: factory for default edge loads
        """
        self.vertex_load = vertex_load
        self.edge_load = edge_load
        # slot arena; removed vertices are represented by None
        self._slots: list[Optional[Vertex]] = []
        self._nalive = 0
        # bookkeeping of 'duplicate_to_bipart' for the inverse transformation
        self._doubled = None

    def __len__(self) -> int:
        return self._nalive

    @property
    def nvertices(self) -> int:
        """
        Number of vertices.
        """
        return self._nalive

    @property
    def nedges(self) -> int:
        """
        Number of undirected edges.
        """
        return sum(len(u.arcs) for u in self) // 2

    def __iter__(self) -> Iterator[Vertex]:
        for u in self._slots:
            if u is not None:
                yield u

    def __str__(self):
        return dot_string(self)

    def vertex(self, i: int) -> Vertex:
        """
        Vertex stored at slot index 'i'.
        """
        assert 0 <= i < len(self._slots), f'vertex index {i} out of range'
        u = self._slots[i]
        assert u is not None, f'vertex {i} has been removed'
        return u

    def index(self, u: Vertex) -> int:
        """
        Slot index of vertex 'u'.
        """
        return u.index

    def edges(self) -> Iterator[tuple[Vertex, Vertex, Edge]]:
        """
        Iterate over undirected edges, each reported once as (u, v, half-link u -> v)
        with index of 'u' not larger than index of 'v'.
        """
        for u in self:
            for e in u.arcs:
                v = e.tip
                if u.index < v.index:
                    yield u, v, e
                elif u is v and u.arcs.index(e) < u.arcs.index(e.sibling):
                    # self-loop
                    yield u, v, e

    def get_edge(self, u: Vertex, v: Vertex) -> Optional[Edge]:
        """
        Half-link from 'u' to 'v', or None if the vertices are not adjacent.
        """
        assert u is not None and v is not None
        for e in u.arcs:
            if e.tip is v:
                return e
        return None

    def get_sibling(self, e: Edge, u: Vertex) -> Edge:
        """
        Half-link on the tip side of 'e' pointing back to 'u'.
        """
        assert e is not None and u is not None, 'sibling of null edge'
        assert e.sibling is not None and e.sibling.tip is u
        return e.sibling

    def degree(self, u: Vertex) -> int:
        """
        Number of half-links attached to 'u'.
        """
        assert u is not None
        return len(u.arcs)

    def adjacency_matrix(self) -> np.ndarray:
        """
        Adjacency matrix indexed by slot indices; entries count parallel edges.
        """
        n = len(self._slots)
        adj = np.zeros((n, n), dtype=int)
        for u in self:
            for e in u.arcs:
                adj[u.index, e.tip.index] += 1
        return adj

    def _link(self, u: Vertex, v: Vertex, load: Optional[EL] = None):
        """
        Connect two vertices by a pair of sibling half-links.
        """
        assert u is not None and v is not None, 'linking to null vertex'
        if load is None:
            e_uv = Edge(self.edge_load(), v)
            e_vu = Edge(self.edge_load(), u)
        else:
            # each half-link owns its load
            e_uv = Edge(load, v)
            e_vu = Edge(copy.copy(load), u)
        e_uv.sibling = e_vu
        e_vu.sibling = e_uv
        u.link_to(v, e_uv)
        v.link_to(u, e_vu)

    def add_default_vertex(self) -> int:
        """
        Add an isolated vertex with default load, and return its index.
        """
        u = Vertex(self.vertex_load(), len(self._slots))
        self._slots.append(u)
        self._nalive += 1
        return u.index

    def add_link(self, i: int, j: int, load: Optional[EL] = None):
        """
        Link the vertices with indices 'i' and 'j'.
        """
        self._link(self.vertex(i), self.vertex(j), load)

    def add_isolated(self, n: int):
        """
        Add 'n' isolated vertices.
        """
        for _ in range(n):
            self.add_default_vertex()

    def add_path(self, n: int):
        """
        Add a path consisting of 'n' vertices.
        """
        ucurr = None
        for _ in range(n):
            unext = self.vertex(self.add_default_vertex())
            if ucurr is not None:
                self._link(ucurr, unext)
            ucurr = unext

    def add_cycle(self, n: int):
        """
        Add a cycle consisting of 'n' vertices.
        """
        if n <= 2:
            raise ValueError(f'a cycle requires at least 3 vertices, received {n}')
        start = len(self._slots)
        self.add_path(n)
        self.add_link(start, start + n - 1)

    def add_clique(self, n: int):
        """
        Add a complete graph on 'n' vertices.
        """
        if n <= 2:
            raise ValueError(f'a clique requires at least 3 vertices, received {n}')
        start = len(self._slots)
        self.add_path(n)
        # close all pairs not connected by the path
        for i in range(start, start + n):
            for j in range(i + 2, start + n):
                self.add_link(i, j)

    def add_full_bipart(self, n: int, m: int):
        """
        Add a complete bipartite graph with partitions of size 'n' and 'm'.
        """
        start = len(self._slots)
        self.add_isolated(n + m)
        for i in range(start, start + n):
            for j in range(start + n, start + n + m):
                self.add_link(i, j)

    def partial_cleanup(self, start: int, end: int):
        """
        Remove the vertices with indices in range [start, end),
        together with all incident edges.
        """
        assert 0 <= start < end <= len(self._slots)
        for i in range(start, end):
            u = self._slots[i]
            if u is None:
                continue
            for e in u.arcs:
                # release the sibling on the other endpoint as well
                if e.tip is not u:
                    e.tip.arcs.remove(e.sibling)
            u.arcs.clear()
            self._slots[i] = None
            self._nalive -= 1
        # compact trailing tombstones
        while self._slots and self._slots[-1] is None:
            self._slots.pop()

    def cleanup(self):
        """
        Remove all vertices and edges.
        """
        for u in self._slots:
            if u is not None:
                u.arcs.clear()
        self._slots.clear()
        self._nalive = 0
        self._doubled = None

    def duplicate_to_bipart(self, colors_callback: Callable[[Vertex], None]):
        """
        Transform the graph into a bipartite graph of twice the size.

        A mirror vertex is added for each vertex, and every half-link u -> v
        is redirected to u -> mirror(v), with a new sibling half-link mirror(v) -> u.
        The callback is invoked for each vertex of the original half,
        e.g. to set its initial partition color.
        """
        nhalf = len(self._slots)
        assert self._nalive > 0, 'duplicating an empty graph'
        assert self._doubled is None, 'graph is already duplicated'
        for u in self._slots[:nhalf]:
            if u is None:
                # keep the offset between vertex and mirror index
                self._slots.append(None)
            else:
                self.add_default_vertex()
        # record original sibling pairing for the inverse transformation
        arcs = [(u, e) for u in self._slots[:nhalf] if u is not None for e in u.arcs]
        pairs = [(e, e.sibling) for _, e in arcs]
        for u, e in arcs:
            mirror = self._slots[e.tip.index + nhalf]
            back = Edge(copy.copy(e.load), u)
            e.tip = mirror
            e.sibling = back
            back.sibling = e
            mirror.link_to(u, back)
        for u in self._slots[:nhalf]:
            if u is not None:
                colors_callback(u)
        self._doubled = (nhalf, pairs)
        logger.debug('duplicated graph to bipartite graph with %d vertices and %d edges',
                     self._nalive, len(pairs))

    def join_from_bipart(self, colors_callback: Callable[[Vertex, Vertex], None]):
        """
        Inverse of 'duplicate_to_bipart': restore the original edges, invoke the callback
        for each pair (vertex, mirror vertex) to merge their loads,
        and remove the mirror vertices.
        """
        assert self._doubled is not None, 'graph was not produced by duplicate_to_bipart'
        nhalf, pairs = self._doubled
        nall = len(self._slots)
        assert nall % 2 == 0 and nall == 2 * nhalf
        backs = {id(e.sibling) for e, _ in pairs}
        for e, s in pairs:
            assert e.tip.index >= nhalf
            e.tip = self._slots[e.tip.index - nhalf]
            e.sibling = s
        for i in range(nhalf):
            u = self._slots[i]
            if u is not None:
                mirror = self._slots[i + nhalf]
                colors_callback(u, mirror)
                # detach half-links added by the duplication
                mirror.arcs = [a for a in mirror.arcs if id(a) not in backs]
        self._doubled = None
        self.partial_cleanup(nhalf, nall)
        assert len(self._slots) <= nhalf
        logger.debug('joined bipartite graph back to %d vertices', self._nalive)
