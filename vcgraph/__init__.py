"""
vcgraph
=======

Generic mutable graphs with vertex and edge loads, and exact and approximate
algorithms for the minimum vertex cover problem on undirected graphs.

"""

from .loads         import *
from .graph         import *
from .formats       import *
from .bipartite     import *
from .hopcroft_karp import *
from .cover         import *
from .approx        import *
from .lpvc          import *
