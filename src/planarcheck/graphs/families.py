from __future__ import annotations
from typing import Any
import networkx as nx
from planarcheck.registry import GRAPH_FAMILIES

@GRAPH_FAMILIES.register("complete")
def complete(n: int, **_: Any) -> nx.Graph:
    return nx.complete_graph(n)

@GRAPH_FAMILIES.register("complete_bipartite")
def complete_bipartite(n: int, n1: int | None = None, **_: Any) -> nx.Graph:
    n1 = n // 2 if n1 is None else max(0, min(n1, n))
    return nx.complete_bipartite_graph(n1, n - n1)

@GRAPH_FAMILIES.register("cycle")
def cycle(n: int, **_: Any) -> nx.Graph:
    return nx.cycle_graph(n)

@GRAPH_FAMILIES.register("wheel")
def wheel(n: int, **_: Any) -> nx.Graph:
    return nx.wheel_graph(n)

@GRAPH_FAMILIES.register("grid")
def grid(n: int, cols: int = 4, **_: Any) -> nx.Graph:
    cols = max(1, cols)
    rows = max(1, n // cols)
    return nx.convert_node_labels_to_integers(nx.grid_2d_graph(rows, cols))

@GRAPH_FAMILIES.register("petersen")
def petersen(n: int = 10, **_: Any) -> nx.Graph:
    # fixed 10-node graph; contains a subdivided K3,3 but no K5/K3,3 subgraph
    return nx.petersen_graph()

@GRAPH_FAMILIES.register("erdos_renyi")
def erdos_renyi(n: int, p: float = 0.1, seed: int | None = None) -> nx.Graph:
    return nx.gnp_random_graph(n=n, p=p, seed=seed, directed=False)
