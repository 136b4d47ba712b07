from __future__ import annotations
from typing import List, Sequence
import numpy as np


def connected_components(adj: np.ndarray) -> List[List[int]]:
    """
    Partition node indices 0..n-1 into connected components.

    Seeds are taken in increasing index order, so components come out
    ordered by their smallest member; each component is sorted.
    Complexity: O(n^2) on the dense adjacency matrix.
    """
    n = adj.shape[0]
    seen = np.zeros(n, dtype=bool)
    comps: List[List[int]] = []
    for s in range(n):
        if seen[s]:
            continue
        seen[s] = True
        stack = [s]
        comp = []
        while stack:
            u = stack.pop()
            comp.append(u)
            for w in np.flatnonzero(adj[u] & ~seen):
                seen[w] = True
                stack.append(int(w))
        comps.append(sorted(comp))
    return comps


def edge_count(adj: np.ndarray, comp: Sequence[int]) -> int:
    """Number of edges with both endpoints in `comp`, each counted once."""
    if len(comp) < 2:
        return 0
    sub = adj[np.ix_(comp, comp)]
    return int(np.triu(sub, k=1).sum())
