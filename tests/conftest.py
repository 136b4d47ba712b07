import json

import pytest

from planarcheck import build_graph


@pytest.fixture
def k33_graph():
    a = ["A1", "A2", "A3"]
    b = ["B1", "B2", "B3"]
    edges = [(x, y) for x in a for y in b]
    return build_graph(a + b, edges)


@pytest.fixture
def write_data(tmp_path):
    def _write(ids, edges):
        cities = tmp_path / "cities.json"
        conns = tmp_path / "connections.json"
        cities.write_text(json.dumps([{"id": i, "name_zh": i} for i in ids]), encoding="utf-8")
        conns.write_text(json.dumps({"edges": edges}), encoding="utf-8")
        return str(cities), str(conns)
    return _write
