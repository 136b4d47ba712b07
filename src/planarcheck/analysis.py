from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
import pandas as pd
from tqdm import tqdm

from planarcheck.registry import CHECKS
from planarcheck.checks import DEFAULT_CHECKS, POSSIBLY_PLANAR
from planarcheck.checks.base import ComponentCheck, Evidence, K5Witness, K33Witness, Verdict
from planarcheck.graphs.builder import CorridorGraph
from planarcheck.graphs.components import connected_components, edge_count

WitnessIds = Union[List[str], Tuple[List[str], List[str]]]

@dataclass
class ComponentReport:
    index: int
    members: List[str]
    nodes: List[int]
    edge_count: int
    verdict: Verdict
    evidence: Optional[Evidence] = None
    checks_run: List[str] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.members)

    @property
    def possibly_planar(self) -> bool:
        return self.verdict == POSSIBLY_PLANAR

    def witness_ids(self, ids: Sequence[str]) -> Optional[WitnessIds]:
        ev = self.evidence
        if isinstance(ev, K5Witness):
            return [ids[i] for i in ev.nodes]
        if isinstance(ev, K33Witness):
            return [ids[i] for i in ev.a], [ids[i] for i in ev.b]
        return None

@dataclass
class AnalysisReport:
    ids: List[str]
    components: List[ComponentReport]

    @property
    def all_possibly_planar(self) -> bool:
        return all(c.possibly_planar for c in self.components)

    @property
    def violations(self) -> List[ComponentReport]:
        return [c for c in self.components if not c.possibly_planar]

    def exit_code(self, nonplanar: int = 2) -> int:
        return 0 if self.all_possibly_planar else nonplanar

    def to_frame(self) -> pd.DataFrame:
        rows: List[Dict[str, Any]] = []
        for c in self.components:
            rows.append({
                "component": c.index,
                "nodes": c.node_count,
                "edges": c.edge_count,
                "verdict": c.verdict,
                "witness": c.witness_ids(self.ids),
                "members": c.members,
            })
        columns = ["component", "nodes", "edges", "verdict", "witness", "members"]
        return pd.DataFrame(rows, columns=columns)


def _instantiate_checks(names: Sequence[str]) -> List[ComponentCheck]:
    return [CHECKS.create(name) for name in names]


def analyze_component(
    graph: CorridorGraph,
    comp: List[int],
    checks: Sequence[ComponentCheck],
    index: int = 0,
) -> ComponentReport:
    """
    Run `checks` in order on one component and stop at the first hit.
    Singletons skip every check.
    """
    m = edge_count(graph.adj, comp)
    report = ComponentReport(
        index=index,
        members=[graph.ids[i] for i in comp],
        nodes=list(comp),
        edge_count=m,
        verdict=POSSIBLY_PLANAR,
    )
    if len(comp) == 1:
        return report

    for check in checks:
        if len(comp) < check.min_nodes:
            continue
        report.checks_run.append(check.name)
        evidence = check.find(graph.adj, comp, m)
        if evidence is not None:
            report.verdict = check.verdict
            report.evidence = evidence
            break
    return report


def analyze(
    graph: CorridorGraph,
    checks: Optional[Sequence[str]] = None,
    progress: bool = False,
) -> AnalysisReport:
    """
    Classify every connected component of `graph`.

    A component is non-planar once the density bound, the K5 search or
    the K3,3 search (in that order by default) produces evidence;
    otherwise it is "possibly-planar", meaning no violation was found.

    `checks` reorders the pipeline; since it stops at the first hit, a
    custom order such as ["k33", "k5"] can report a different witness
    (a K3,3 inside a component that also holds a K5).
    """
    instances = _instantiate_checks(list(checks) if checks is not None else DEFAULT_CHECKS)
    comps = connected_components(graph.adj)
    reports = [
        analyze_component(graph, comp, instances, index=i)
        for i, comp in enumerate(tqdm(comps, desc="Components", disable=not progress))
    ]
    return AnalysisReport(ids=list(graph.ids), components=reports)
