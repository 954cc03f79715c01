"""
Bilateral
=========

Minimum vertex cover of bipartite graphs via the Hopcroft-Karp algorithm
and Kőnig's theorem, applied to inviting a minimum number of employees
such that every bilateral project team is represented.

"""

from .bipartite_graph import *
from .hopcroft_karp   import *
from .vertex_cover    import *
from .projects        import *
