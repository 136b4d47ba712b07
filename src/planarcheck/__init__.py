"""Per-component non-planarity witnesses for settlement/corridor graphs."""
from planarcheck.graphs import BuildStats, CorridorGraph, build_graph, graph_from_networkx
from planarcheck.analysis import AnalysisReport, ComponentReport, analyze

__all__ = [
    "AnalysisReport",
    "BuildStats",
    "ComponentReport",
    "CorridorGraph",
    "analyze",
    "build_graph",
    "graph_from_networkx",
]

__version__ = "0.1.0"
