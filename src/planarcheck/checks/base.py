from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Literal, Optional, Protocol, Sequence, Tuple, Union
import numpy as np

Verdict = Literal[
    "nonplanar (bound-violation)",
    "nonplanar (K5 found)",
    "nonplanar (K3,3 found)",
    "possibly-planar",
]

BOUND_VIOLATION: Verdict = "nonplanar (bound-violation)"
K5_FOUND: Verdict = "nonplanar (K5 found)"
K33_FOUND: Verdict = "nonplanar (K3,3 found)"
POSSIBLY_PLANAR: Verdict = "possibly-planar"

@dataclass(frozen=True)
class BoundViolation:
    n: int
    m: int

    @property
    def limit(self) -> int:
        return 3 * self.n - 6

@dataclass(frozen=True)
class K5Witness:
    nodes: Tuple[int, int, int, int, int]

    def holds(self, adj: np.ndarray) -> bool:
        s = list(self.nodes)
        sub = adj[np.ix_(s, s)]
        return bool(sub[~np.eye(5, dtype=bool)].all())

@dataclass(frozen=True)
class K33Witness:
    a: Tuple[int, int, int]
    b: Tuple[int, int, int]

    def holds(self, adj: np.ndarray) -> bool:
        return bool(adj[np.ix_(list(self.a), list(self.b))].all())

Evidence = Union[BoundViolation, K5Witness, K33Witness]

class ComponentCheck(Protocol):
    name: str
    verdict: Verdict
    min_nodes: int

    def find(self, adj: np.ndarray, comp: Sequence[int], m: int) -> Optional[Any]:
        ...
