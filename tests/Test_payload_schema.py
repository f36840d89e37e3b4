# tests/test_payload_schema.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app

client = TestClient(app)


def test_solve_endpoint(easy_grid, easy_solution):
    resp = client.post("/solve", json={"grid": easy_grid})
    assert resp.status_code == 200
    payload = resp.json()
    assert set(payload.keys()) == {"solved", "solution", "stats", "elapsed_ms"}
    assert payload["solved"] is True
    assert payload["solution"] == easy_solution


def test_solve_endpoint_no_solution(empty_grid):
    empty_grid[2][1] = 7
    empty_grid[8][1] = 7
    resp = client.post("/solve", json={"grid": empty_grid, "indexed": True})
    assert resp.status_code == 200
    assert resp.json()["solved"] is False
    assert resp.json()["solution"] is None


def test_solve_endpoint_rejects_bad_shape():
    resp = client.post("/solve", json={"grid": [[0] * 9] * 8})
    assert resp.status_code == 422
    resp = client.post("/solve", json={"grid": [[0] * 9] * 8 + [[10] + [0] * 8]})
    assert resp.status_code == 422


def test_candidates_and_sanity_endpoints(easy_grid):
    resp = client.post("/compute_candidates", json={"grid": easy_grid})
    assert resp.status_code == 200
    assert "r1c1" in resp.json()["candidates"]
    resp = client.post("/sanity_check", json={"original": easy_grid, "current": easy_grid})
    assert resp.json() == {"ok": True, "issues": []}
