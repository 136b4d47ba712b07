from planarcheck.graphs import families  # noqa: F401  registers families
from planarcheck.graphs.builder import BuildStats, CorridorGraph, build_graph, graph_from_networkx
from planarcheck.graphs.components import connected_components, edge_count

__all__ = [
    "BuildStats",
    "CorridorGraph",
    "build_graph",
    "graph_from_networkx",
    "connected_components",
    "edge_count",
]
