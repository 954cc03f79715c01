"""
Minimum vertex cover of a bipartite graph based on Kőnig's theorem,
see https://en.wikipedia.org/wiki/K%C5%91nig%27s_theorem_(graph_theory)
"""

from collections.abc import Callable, Iterable
from .bipartite_graph import NIL, SIDE_A, SIDE_B, BipartiteGraph
from .hopcroft_karp import Matching, HopcroftKarp

__all__ = ['alternating_reachable', 'konig_cover', 'minimum_vertex_cover', 'is_vertex_cover']


def alternating_reachable(graph: BipartiteGraph, matching: Matching, side: int = SIDE_A) -> set[int]:
    """
    Vertices which are either unmatched in 'side' or are connected to
    an unmatched vertex in 'side' by an alternating path, i.e., a path
    traversing unmatched edges away from 'side' and matched edges back to 'side'.
    """
    if side == SIDE_A:
        partner, partner_other = matching.partner_a, matching.partner_b
    elif side == SIDE_B:
        partner, partner_other = matching.partner_b, matching.partner_a
    else:
        raise ValueError(f'side = {side} invalid; must be SIDE_A (0) or SIDE_B (1).')
    reached = set()
    # explicit stack of pending vertices in 'side'
    pending = [u for u in graph.ordered_vertices(side) if partner(u) == NIL]
    while pending:
        u = pending.pop()
        if u in reached:
            continue
        reached.add(u)
        for v in graph.neighbors(u):
            # traverse only unmatched edges
            if partner(u) == v or v in reached:
                continue
            reached.add(v)
            # traverse only matched edges
            u_next = partner_other(v)
            if u_next != NIL and u_next not in reached:
                pending.append(u_next)
    return reached


def konig_cover(graph: BipartiteGraph, matching: Matching, side: int = SIDE_A) -> tuple[list[int], list[int]]:
    """
    Construct a vertex cover from a maximum-cardinality matching,
    exploring alternating paths from the unmatched vertices in 'side'.

    Matched vertices in 'side' enter the cover unless they are reachable,
    so the choice of 'side' decides which of the two sides is favored
    whenever several minimum vertex covers exist.

    Returns:
        tuple: tuple containing
          - a_cover:    sorted cover vertices in 'A'
          - b_cover:    sorted cover vertices in 'B'
    """
    reached = alternating_reachable(graph, matching, side)
    # isolated vertices never take part in a cover
    side_cover = [u for u in graph.vertices(side) if u not in reached and graph.neighbors(u)]
    other_cover = [v for v in graph.vertices(1 - side) if v in reached and graph.neighbors(v)]
    if side == SIDE_A:
        return sorted(side_cover), sorted(other_cover)
    return sorted(other_cover), sorted(side_cover)


def minimum_vertex_cover(graph: BipartiteGraph, key: Callable[[int], object] = None, side: int = SIDE_A):
    """
    Find a minimum vertex cover based on Kőnig's theorem.

    The optional 'key' is passed on to the Hopcroft-Karp algorithm and only
    selects which maximum matching is found. Which of several minimum covers
    is returned is determined by 'side': the cover favors vertices in 'side'
    (see `konig_cover`).
    """
    # maximum matching
    hk = HopcroftKarp(graph, key)
    matching = hk()
    a_cover, b_cover = konig_cover(graph, matching, side)
    # number of vertices in minimum vertex cover must agree with
    # maximum-cardinality matching according to Kőnig's theorem
    assert len(a_cover) + len(b_cover) == len(matching)
    return a_cover, b_cover


def is_vertex_cover(graph: BipartiteGraph, vertices: Iterable[int]) -> bool:
    """
    Whether 'vertices' touch every edge of the graph.
    """
    vertices = set(vertices)
    return all(a in vertices or b in vertices for (a, b) in graph.edges())
