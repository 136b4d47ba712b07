from __future__ import annotations
from typing import Optional, Sequence
import numpy as np
from planarcheck.registry import CHECKS
from planarcheck.checks.base import BOUND_VIOLATION, BoundViolation

@CHECKS.register("density_bound")
class DensityBoundCheck:
    """
    Euler bound: a planar simple graph on n >= 3 nodes has m <= 3n - 6.
    A component above the bound is non-planar, no search needed.
    """
    name = "density_bound"
    verdict = BOUND_VIOLATION
    min_nodes = 3

    def __init__(self, **_: object):
        pass

    def find(self, adj: np.ndarray, comp: Sequence[int], m: int) -> Optional[BoundViolation]:
        n = len(comp)
        if n < self.min_nodes:
            return None
        if m > 3 * n - 6:
            return BoundViolation(n=n, m=m)
        return None
