from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

@dataclass
class Registry:
    """Name -> factory table filled in by the @register decorator at import time."""
    name: str
    items: Dict[str, Any]

    def register(self, key: str) -> Callable[[Any], Any]:
        def deco(obj: Any) -> Any:
            if key in self.items:
                raise KeyError(f"[{self.name}] '{key}' already registered")
            self.items[key] = obj
            return obj
        return deco

    def get(self, key: str) -> Any:
        if key not in self.items:
            raise KeyError(f"[{self.name}] Unknown key '{key}'. Available: {self.names()}")
        return self.items[key]

    def create(self, key: str, **params: Any) -> Any:
        return self.get(key)(**params)

    def names(self) -> List[str]:
        return sorted(self.items)

    def __contains__(self, key: object) -> bool:
        return key in self.items

# per-component non-planarity checks, see planarcheck.checks
CHECKS = Registry("checks", {})
# reference graph generators, see planarcheck.graphs.families
GRAPH_FAMILIES = Registry("graph_families", {})
