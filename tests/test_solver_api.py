from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from cubesolve.cube import Cube
from cubesolve.models import solved_state
from cubesolve.moves import apply_moves
import scripts.solver_api as solver_api


def _build_client() -> TestClient:
    return TestClient(solver_api.app)


def _json_state(cube: Cube) -> dict[str, list[str]]:
    return {face.value: [color.value for color in stickers] for face, stickers in cube.get_state().items()}


def test_health() -> None:
    response = _build_client().get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_scramble_is_seeded() -> None:
    client = _build_client()
    first = client.get("/api/scramble", params={"length": 12, "seed": 3}).json()
    second = client.get("/api/scramble", params={"length": 12, "seed": 3}).json()
    assert first["ok"] is True
    assert first["data"] == second["data"]
    assert len(first["data"]["moves"]) == 12
    assert first["data"]["scramble"] == " ".join(first["data"]["moves"])


def test_scramble_rejects_negative_length() -> None:
    response = _build_client().get("/api/scramble", params={"length": -1})
    assert response.status_code == 422


def test_validate_reports_errors() -> None:
    client = _build_client()
    state = _json_state(Cube())
    assert client.post("/api/validate", json={"state": state}).json()["data"] == {"valid": True, "errors": []}

    state["D"][0] = "W"
    payload = client.post("/api/validate", json={"state": state}).json()
    assert payload["data"]["valid"] is False
    assert any("Color W" in error for error in payload["data"]["errors"])


def test_solve_from_scramble() -> None:
    response = _build_client().post("/api/solve", json={"scramble": "R U R' U' F2"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["scramble"] == "R U R' U' F2"

    cube = Cube()
    apply_moves(cube, data["scramble"].split() + data["moves"])
    assert cube.is_solved()
    assert data["total_moves"] == len(data["moves"])


def test_solve_from_state() -> None:
    cube = Cube()
    apply_moves(cube, ["L", "D2", "B'"])
    response = _build_client().post("/api/solve", json={"state": _json_state(cube)})
    assert response.status_code == 200
    apply_moves(cube, response.json()["data"]["moves"])
    assert cube.is_solved()


def test_solve_rejects_bad_notation_and_state() -> None:
    client = _build_client()

    bad_move = client.post("/api/solve", json={"scramble": "R U X"})
    assert bad_move.status_code == 400
    assert '"X"' in bad_move.json()["detail"]

    state = {face.value: [color.value for color in stickers] for face, stickers in solved_state().items()}
    state["U"] = state["U"][:5]
    bad_state = client.post("/api/solve", json={"state": state})
    assert bad_state.status_code == 400
    assert "missing stickers" in bad_state.json()["detail"]

    empty = client.post("/api/solve", json={})
    assert empty.status_code == 400


def test_malformed_state_is_reported_not_crashed() -> None:
    client = _build_client()
    state = {face.value: [[1]] * 9 for face in solved_state()}

    validated = client.post("/api/validate", json={"state": state})
    assert validated.status_code == 200
    assert validated.json()["data"] == {
        "valid": False,
        "errors": ["Cube state is incomplete - missing stickers"],
    }

    solved = client.post("/api/solve", json={"state": state})
    assert solved.status_code == 400
    assert "missing stickers" in solved.json()["detail"]

    scalar_face = client.post("/api/solve", json={"state": {"U": 5}})
    assert scalar_face.status_code == 400
