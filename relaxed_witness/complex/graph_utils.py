from __future__ import annotations

from typing import Optional

import networkx as nx

from .combinatorics import canon_edge

__all__ = ["one_skeleton_graph", "n_components"]


def one_skeleton_graph(st, *, max_filtration: Optional[float] = None) -> nx.Graph:
    """
    Convert the 1-skeleton of a Gudhi SimplexTree to a NetworkX graph:
      - one node per vertex (attribute ``filtration``)
      - one edge per 1-simplex, with ``weight`` = its filtration value
    Simplices with filtration above ``max_filtration`` are left out.
    """
    G = nx.Graph()
    for s, f in st.get_skeleton(1):
        if max_filtration is not None and f > float(max_filtration):
            continue
        if len(s) == 1:
            G.add_node(int(s[0]), filtration=float(f))
        elif len(s) == 2:
            u, v = canon_edge(s[0], s[1])
            G.add_edge(u, v, weight=float(f))
    return G


def n_components(st, *, max_filtration: Optional[float] = None) -> int:
    """Number of connected components of the (filtered) 1-skeleton."""
    return nx.number_connected_components(one_skeleton_graph(st, max_filtration=max_filtration))
