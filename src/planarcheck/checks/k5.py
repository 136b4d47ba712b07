from __future__ import annotations
from itertools import combinations
from typing import Optional, Sequence, Tuple
import numpy as np
from planarcheck.registry import CHECKS
from planarcheck.checks.base import K5_FOUND, K5Witness
from planarcheck.checks.search import first_combination

@CHECKS.register("k5")
class K5Check:
    """
    Exhaustive search for five mutually adjacent nodes.
    Complexity: O(C(n, 5)); meant for components of tens of nodes.
    """
    name = "k5"
    verdict = K5_FOUND
    min_nodes = 5

    def __init__(self, **_: object):
        pass

    def find(self, adj: np.ndarray, comp: Sequence[int], m: int) -> Optional[K5Witness]:
        if len(comp) < self.min_nodes:
            return None

        def is_clique(s: Tuple[int, ...]) -> bool:
            return all(adj[u, v] for u, v in combinations(s, 2))

        hit = first_combination(sorted(comp), 5, is_clique)
        return K5Witness(nodes=hit) if hit is not None else None
