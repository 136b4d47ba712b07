from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple
import networkx as nx
import numpy as np

Edge = Tuple[str, str]

@dataclass
class BuildStats:
    kept: int = 0
    unknown_endpoint: int = 0
    self_loops: int = 0
    duplicates: int = 0

    @property
    def dropped(self) -> int:
        return self.unknown_endpoint + self.self_loops + self.duplicates

@dataclass
class CorridorGraph:
    """
    Simple undirected graph over an ordered id list.

    `adj` is an (n, n) boolean matrix indexed by position in `ids`;
    it is symmetric and its diagonal is all False.
    """
    ids: List[str]
    adj: np.ndarray
    stats: BuildStats = field(default_factory=BuildStats)

    def __post_init__(self):
        self.index: Dict[str, int] = {v: i for i, v in enumerate(self.ids)}

    @property
    def n(self) -> int:
        return len(self.ids)

    @property
    def edge_count(self) -> int:
        return int(np.triu(self.adj, k=1).sum())

    def adjacent(self, a: str, b: str) -> bool:
        return bool(self.adj[self.index[a], self.index[b]])

    def degree(self, node_id: str) -> int:
        return int(self.adj[self.index[node_id]].sum())

    def to_networkx(self) -> nx.Graph:
        g = nx.Graph()
        g.add_nodes_from(self.ids)
        rows, cols = np.nonzero(np.triu(self.adj, k=1))
        g.add_edges_from((self.ids[i], self.ids[j]) for i, j in zip(rows, cols))
        return g


def build_graph(ids: Sequence[str], edges: Iterable[Sequence[str]]) -> CorridorGraph:
    """
    Build the adjacency relation for `ids` from an edge list of id pairs.

    Edges with an endpoint missing from `ids`, self-loops and repeated
    unordered pairs are dropped and only counted in `stats`.
    Complexity: O(n^2 + m).
    """
    ids = list(ids)
    index: Dict[str, int] = {}
    for i, v in enumerate(ids):
        if v in index:
            raise ValueError(f"Duplicate node id: {v!r}")
        index[v] = i

    n = len(ids)
    adj = np.zeros((n, n), dtype=bool)
    stats = BuildStats()
    for e in edges:
        u, v = e[0], e[1]
        a = index.get(u)
        b = index.get(v)
        if a is None or b is None:
            stats.unknown_endpoint += 1
            continue
        if a == b:
            stats.self_loops += 1
            continue
        if adj[a, b]:
            stats.duplicates += 1
            continue
        adj[a, b] = True
        adj[b, a] = True
        stats.kept += 1
    return CorridorGraph(ids=ids, adj=adj, stats=stats)


def graph_from_networkx(g: nx.Graph) -> CorridorGraph:
    ids = [str(v) for v in g.nodes]
    edges: List[Edge] = [(str(u), str(v)) for u, v in g.edges]
    return build_graph(ids, edges)
