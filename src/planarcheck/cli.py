from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import yaml

from planarcheck.analysis import AnalysisReport, analyze
from planarcheck.graphs import build_graph, graph_from_networkx
from planarcheck.graphs.builder import CorridorGraph
from planarcheck.io import audit_connections, edge_pairs, load_connections, load_node_ids
from planarcheck.registry import GRAPH_FAMILIES
from planarcheck.utils.config import load_config
from planarcheck.utils.logging_config import setup_logging

logger = logging.getLogger("planarcheck.cli")


def _data_args(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, str]:
    data = dict(cfg.get("data") or {})
    if args.cities:
        data["cities"] = args.cities
    if args.connections:
        data["connections"] = args.connections
    if args.id_field:
        data["id_field"] = args.id_field
    return data


def _setup(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """Load config and configure logging; None (after logging the cause) on failure."""
    try:
        cfg = load_config(args.config)
        lcfg = cfg.get("logging") or {}
        setup_logging(args.log_level or lcfg.get("level", "INFO"), lcfg.get("file"))
    except (OSError, ValueError, yaml.YAMLError) as e:
        # package logging is not set up yet, report on stderr through the root logger
        logging.getLogger("planarcheck").handlers.clear()
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
        logger.error("Could not load config: %s", e)
        return None
    return cfg


def _load_graph(cfg: Dict[str, Any], args: argparse.Namespace) -> CorridorGraph:
    if args.family:
        fn = GRAPH_FAMILIES.get(args.family)
        g = fn(n=args.n)
        logger.info("Generated '%s' graph: n=%d, m=%d", args.family, g.number_of_nodes(), g.number_of_edges())
        return graph_from_networkx(g)

    data = _data_args(cfg, args)
    ids = load_node_ids(data["cities"], id_field=data.get("id_field", "id"))
    connections = load_connections(data["connections"])
    graph = build_graph(ids, edge_pairs(connections))
    logger.info("Loaded graph: %d nodes, %d edges", graph.n, graph.stats.kept)
    if graph.stats.dropped:
        logger.warning(
            "Dropped %d connections (unknown endpoint=%d, self-loop=%d, duplicate=%d)",
            graph.stats.dropped, graph.stats.unknown_endpoint, graph.stats.self_loops, graph.stats.duplicates,
        )
    return graph


def log_report(report: AnalysisReport) -> None:
    for c in report.components:
        if c.node_count == 1:
            continue
        witness = c.witness_ids(report.ids)
        if c.possibly_planar:
            logger.info("[possibly planar] component nodes=%d, edges=%d. nodes: %s", c.node_count, c.edge_count, c.members)
        elif witness is None:
            logger.info(
                "[nonplanar] component nodes=%d, edges=%d violates m <= 3n-6. nodes: %s",
                c.node_count, c.edge_count, c.members,
            )
        elif isinstance(witness, tuple):
            logger.info("[nonplanar] K3,3 subgraph found between A and B: %s %s", witness[0], witness[1])
        else:
            logger.info("[nonplanar] K5 subgraph found among: %s", witness)
    if report.all_possibly_planar:
        logger.info("Graph is possibly planar (no violations detected).")


def cmd_check(args: argparse.Namespace) -> int:
    cfg = _setup(args)
    if cfg is None:
        return 1
    acfg = cfg.get("analysis") or {}
    try:
        graph = _load_graph(cfg, args)
    except (OSError, KeyError, ValueError) as e:
        logger.error("Could not load graph: %s", e)
        return 1

    checks = args.checks or acfg.get("checks")
    progress = args.progress or bool(acfg.get("progress", False))
    try:
        report = analyze(graph, checks=checks, progress=progress)
    except KeyError as e:
        logger.error("%s", e)
        return 1
    log_report(report)

    if args.csv:
        report.to_frame().to_csv(args.csv, index=False)
        logger.info("Wrote component table to %s", args.csv)

    nonplanar = int((cfg.get("exit_codes") or {}).get("nonplanar", 2))
    return report.exit_code(nonplanar=nonplanar)


def cmd_audit(args: argparse.Namespace) -> int:
    cfg = _setup(args)
    if cfg is None:
        return 1
    data = _data_args(cfg, args)
    try:
        ids = load_node_ids(data["cities"], id_field=data.get("id_field", "id"))
        connections = load_connections(data["connections"])
    except (OSError, KeyError, ValueError) as e:
        logger.error("Could not load data: %s", e)
        return 1

    audit = audit_connections(ids, connections)
    if audit.unknown_endpoints:
        logger.info("Invalid connections: %d", audit.invalid_count)
        for key, cnt in list(audit.unknown_endpoints.items())[:10]:
            logger.info("- %s (%d)", key, cnt)
    else:
        logger.info("All connections reference existing ids.")
    if audit.isolated:
        logger.info("Unconnected nodes (%d): %s", len(audit.isolated), audit.isolated)
    if args.json:
        print(json.dumps({
            "unknown_endpoints": audit.unknown_endpoints,
            "land_conflicts": [list(p) for p in audit.land_conflicts],
            "isolated": audit.isolated,
        }, ensure_ascii=False, indent=2))
    if audit.land_conflicts:
        logger.info("Illegal road+path pairs: %d", len(audit.land_conflicts))
        for a, b in audit.land_conflicts:
            logger.info("- %s|%s", a, b)
        return 1
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="YAML config overlaid on the packaged defaults")
    p.add_argument("--cities", default=None, help="Node file (JSON list)")
    p.add_argument("--connections", default=None, help="Connection file (JSON object with 'edges')")
    p.add_argument("--id-field", default=None, help="Node id field name")
    p.add_argument("--log-level", default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="planarcheck")
    sub = parser.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("check", help="Classify each connected component as nonplanar or possibly planar")
    _add_common(pc)
    pc.add_argument("--checks", nargs="+", default=None, help="Check names, in order (default: density_bound k5 k33)")
    pc.add_argument("--csv", default=None, help="Write the per-component table to this CSV")
    pc.add_argument("--progress", action="store_true")
    pc.add_argument("--family", default=None, help="Analyze a generated graph family instead of data files")
    pc.add_argument("--n", type=int, default=6, help="Node count for --family")
    pc.set_defaults(func=cmd_check)

    pa = sub.add_parser("audit", help="Report connections with unknown endpoints or conflicting land kinds")
    _add_common(pa)
    pa.add_argument("--json", action="store_true", help="Also print the audit as JSON")
    pa.set_defaults(func=cmd_audit)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
