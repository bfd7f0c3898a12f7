"""
Reading and writing graphs in text formats:

  - DOT (https://en.wikipedia.org/wiki/DOT_(graph_description_language)), for visualization
  - MPS (https://en.wikipedia.org/wiki/MPS_(format)), for the LP relaxation of vertex cover
  - plain edge lists "<left-id> <right-id>"
"""

import io
import logging

__all__ = ['write_dot', 'dot_string', 'write_mps', 'read_graph']

logger = logging.getLogger(__name__)

# display names of integer colors
_COLOR_NAMES = {
    1: 'red',
    2: 'blue',
    3: 'green',
}


def _render_load(load) -> str:
    """
    Render a vertex or edge load as DOT attribute list.
    """
    if hasattr(load, 'color'):
        return f'color="{_COLOR_NAMES.get(load.color, "black")}"'
    return ''


def write_dot(stream, graph):
    """
    Write a graph in DOT format to 'stream'.
    """
    stream.write(f'graph {graph.name}{{\n')
    nverts = 0
    for u in graph:
        stream.write(f'v{u.index}[{_render_load(u.load)}];\n')
        nverts += 1
    # zero or one vertices corner case
    if nverts < 2:
        stream.write('}\n')
        return
    for u, v, e in graph.edges():
        stream.write(f'v{u.index} -- v{v.index}[{_render_load(e.load)}]\n')
    stream.write('}\n')


def dot_string(graph) -> str:
    """
    DOT representation of a graph as string.
    """
    stream = io.StringIO()
    write_dot(stream, graph)
    return stream.getvalue()


def write_mps(stream, graph):
    """
    Write the LP relaxation of vertex cover for 'graph' in MPS format to 'stream':
    minimize the sum of vertex variables subject to x_u + x_v >= 1 for each edge.
    """
    rows = sorted({(u.index, v.index) for u, v, _ in graph.edges() if u is not v})
    stream.write(f'{"NAME":<14}BIPART\n')
    stream.write('ROWS\n')
    stream.write(f'{" N":<4}COST\n')
    for i, j in rows:
        stream.write(f'{" G":<4}V{i}V{j}\n')
    stream.write('COLUMNS\n')
    for u in graph:
        vname = f'V{u.index}'
        stream.write(f'{"":<4}{vname:<10}{"COST":<20}1\n')
        for e in u.arcs:
            i, j = sorted((u.index, e.tip.index))
            stream.write(f'{"":<4}{vname:<10}{f"V{i}V{j}":<20}1\n')
    stream.write('RHS\n')
    for i, j in rows:
        stream.write(f'{"":<4}{"RHS1":<10}{f"V{i}V{j}":<20}1\n')
    stream.write('BOUNDS\n')
    for u in graph:
        stream.write(f'{" LO":<4}{"BND1":<10}{f"V{u.index}":<20}0\n')
    stream.write('ENDATA\n')


def read_graph(stream, graph):
    """
    Read a graph from an edge list, one pair of whitespace-separated
    vertex identifiers per line. Any previous content of 'graph' is discarded.

    Identifiers are arbitrary tokens, enumerated in order of first appearance;
    repeated pairs (in either order) result in a single edge.
    """
    graph.cleanup()
    vertices = {}
    edges = {}
    for lineno, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        lhs, sep, rhs = line.partition(' ')
        if not sep:
            raise ValueError(f'line {lineno}: vertices must be separated by space(s), received "{line}"')
        lnum = vertices.setdefault(lhs, len(vertices))
        rnum = vertices.setdefault(rhs.strip(), len(vertices))
        if lnum > rnum:
            lnum, rnum = rnum, lnum
        edges.setdefault(lnum, set()).add(rnum)
    graph.add_isolated(len(vertices))
    for i in sorted(edges.keys()):
        for j in sorted(edges[i]):
            graph.add_link(i, j)
    logger.debug('read graph with %d vertices and %d edges', graph.nvertices, graph.nedges)
    return graph
