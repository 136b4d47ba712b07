from __future__ import annotations
from typing import Optional, Sequence, Tuple
import numpy as np
from planarcheck.registry import CHECKS
from planarcheck.checks.base import K33_FOUND, K33Witness
from planarcheck.checks.search import first_combination, first_result

@CHECKS.register("k33")
class K33Check:
    """
    Exhaustive search for two disjoint triples A, B with every a-b pair
    adjacent. Edges inside A or inside B are ignored.

    Only exact K3,3 subgraphs are found, not subdivisions, so a component
    that passes is "possibly planar", never "planar".
    Complexity: O(C(n, 6) * C(6, 3)).
    """
    name = "k33"
    verdict = K33_FOUND
    min_nodes = 6

    def __init__(self, **_: object):
        pass

    def find(self, adj: np.ndarray, comp: Sequence[int], m: int) -> Optional[K33Witness]:
        if len(comp) < self.min_nodes:
            return None

        def split(six: Tuple[int, ...]) -> Optional[K33Witness]:
            # each unordered bipartition is tried twice (A/B swapped)
            def crossed(a: Tuple[int, ...]) -> bool:
                b = [v for v in six if v not in a]
                return bool(adj[np.ix_(list(a), b)].all())

            a = first_combination(six, 3, crossed)
            if a is None:
                return None
            b = tuple(v for v in six if v not in a)
            return K33Witness(a=a, b=b)

        return first_result(sorted(comp), 6, split)
