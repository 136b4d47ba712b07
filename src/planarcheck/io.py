"""
Loading and auditing of the settlement/corridor data files.

Node file: JSON list of objects carrying an id field (default "id").
Connection file: JSON object {"edges": [{"from", "to", "surface"?, "water"?}, ...]}.
"""
from __future__ import annotations
import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

LAND_SURFACES = ("road", "path")
MISSING = "<missing>"


def _read_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_node_ids(path: str, id_field: str = "id") -> List[str]:
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of nodes, got {type(data).__name__}")
    ids: List[str] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict) or id_field not in entry:
            raise ValueError(f"{path}: node #{i} has no '{id_field}' field")
        ids.append(str(entry[id_field]))
    logger.debug("Loaded %d nodes from %s", len(ids), path)
    return ids


def load_connections(path: str) -> List[Dict[str, Any]]:
    data = _read_json(path)
    edges = data.get("edges") if isinstance(data, dict) else None
    if not isinstance(edges, list):
        raise ValueError(f"{path}: expected an object with an 'edges' list")
    logger.debug("Loaded %d connections from %s", len(edges), path)
    return edges


def _endpoint(e: Dict[str, Any], key: str) -> Optional[str]:
    v = e.get(key)
    return None if v is None else str(v)


def edge_pairs(connections: Sequence[Dict[str, Any]]) -> List[Tuple[Optional[str], Optional[str]]]:
    # a missing endpoint stays None so the builder counts it as unknown
    return [(_endpoint(e, "from"), _endpoint(e, "to")) for e in connections]


def _pair_key(a: str, b: str) -> Tuple[str, str]:
    return (a, b) if a < b else (b, a)

@dataclass
class ConnectionAudit:
    unknown_endpoints: Dict[str, int] = field(default_factory=dict)
    land_conflicts: List[Tuple[str, str]] = field(default_factory=list)
    isolated: List[str] = field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        return sum(self.unknown_endpoints.values())

    @property
    def ok(self) -> bool:
        return not self.unknown_endpoints and not self.land_conflicts


def audit_connections(ids: Sequence[str], connections: Sequence[Dict[str, Any]]) -> ConnectionAudit:
    """
    Report connections pointing at unknown ids, unordered pairs listed as both
    road and path, and ids with no valid connection at all.

    A self-loop on a known id counts as a connection of that id. A missing
    "from" or "to" is reported as an unknown endpoint "<missing>".
    """
    known = set(ids)
    unknown: Counter = Counter()
    land_kinds: Dict[Tuple[str, str], set] = {}
    degree: Counter = Counter()

    for e in connections:
        a, b = _endpoint(e, "from"), _endpoint(e, "to")
        a_ok, b_ok = a in known, b in known
        if not (a_ok and b_ok):
            parts = []
            if not a_ok:
                parts.append(f"from:{MISSING if a is None else a}")
            if not b_ok:
                parts.append(f"to:{MISSING if b is None else b}")
            unknown[" ".join(parts)] += 1
        else:
            degree[a] += 1
            degree[b] += 1

        surface = e.get("surface")
        if surface in LAND_SURFACES and a is not None and b is not None:
            land_kinds.setdefault(_pair_key(a, b), set()).add(surface)

    conflicts = sorted(k for k, kinds in land_kinds.items() if len(kinds) == len(LAND_SURFACES))
    isolated = [v for v in ids if degree[v] == 0]
    return ConnectionAudit(unknown_endpoints=dict(unknown), land_conflicts=conflicts, isolated=isolated)
