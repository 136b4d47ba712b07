from itertools import combinations

import pandas as pd

from planarcheck.cli import main


def _k5_edges(ids):
    return [{"from": a, "to": b} for a, b in combinations(ids, 2)]


def test_check_nonplanar_exit_code(write_data):
    cities, conns = write_data(list("ABCDE"), _k5_edges(list("ABCDE")))
    assert main(["check", "--cities", cities, "--connections", conns]) == 2


def test_check_planar_exit_code(write_data, capsys):
    cities, conns = write_data(list("ABCD"), _k5_edges(list("ABCD")) + [{"from": "A", "to": "Q"}])
    assert main(["check", "--cities", cities, "--connections", conns]) == 0
    out = capsys.readouterr().out
    assert "Dropped 1 connections" in out
    assert "Graph is possibly planar" in out


def test_check_writes_csv(write_data, tmp_path):
    cities, conns = write_data(list("ABCDE") + ["Z"], _k5_edges(list("ABCDE")))
    out = tmp_path / "report.csv"
    assert main(["check", "--cities", cities, "--connections", conns, "--csv", str(out)]) == 2
    df = pd.read_csv(out)
    assert list(df["nodes"]) == [5, 1]
    assert list(df["verdict"]) == ["nonplanar (bound-violation)", "possibly-planar"]


def test_check_exit_code_from_config(write_data, tmp_path):
    cities, conns = write_data(list("ABCDE"), _k5_edges(list("ABCDE")))
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("exit_codes:\n  nonplanar: 7\n", encoding="utf-8")
    assert main(["check", "--config", str(cfg), "--cities", cities, "--connections", conns]) == 7


def test_check_family():
    assert main(["check", "--family", "complete_bipartite", "--n", "6"]) == 2
    assert main(["check", "--family", "cycle", "--n", "7"]) == 0


def test_check_load_failure(tmp_path):
    missing = str(tmp_path / "nope.json")
    assert main(["check", "--cities", missing, "--connections", missing]) == 1


def test_check_unknown_check(write_data):
    cities, conns = write_data(["A"], [])
    assert main(["check", "--cities", cities, "--connections", conns, "--checks", "bogus"]) == 1


def test_audit_conflict(write_data):
    cities, conns = write_data(["A", "B"], [
        {"from": "A", "to": "B", "surface": "road"},
        {"from": "B", "to": "A", "surface": "path"},
    ])
    assert main(["audit", "--cities", cities, "--connections", conns]) == 1


def test_audit_clean_with_json(write_data, capsys):
    cities, conns = write_data(["A", "B", "C"], [{"from": "A", "to": "B"}, {"from": "A", "to": "X"}])
    assert main(["audit", "--cities", cities, "--connections", conns, "--json"]) == 0
    out = capsys.readouterr().out
    assert "Invalid connections: 1" in out
    assert '"isolated": [\n    "C"\n  ]' in out


def test_check_missing_config(write_data, tmp_path):
    cities, conns = write_data(["A"], [])
    missing = str(tmp_path / "nope.yaml")
    assert main(["check", "--config", missing, "--cities", cities, "--connections", conns]) == 1


def test_check_config_not_a_mapping(write_data, tmp_path):
    cities, conns = write_data(["A"], [])
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    assert main(["check", "--config", str(cfg), "--cities", cities, "--connections", conns]) == 1


def test_check_bad_log_level(write_data):
    cities, conns = write_data(["A"], [])
    assert main(["check", "--log-level", "LOUD", "--cities", cities, "--connections", conns]) == 1


def test_audit_config_without_data_section(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("data: null\n", encoding="utf-8")
    assert main(["audit", "--config", str(cfg)]) == 1


def test_audit_missing_config(tmp_path):
    assert main(["audit", "--config", str(tmp_path / "nope.yaml")]) == 1
