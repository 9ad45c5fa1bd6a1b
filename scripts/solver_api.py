#!/usr/bin/env python3
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cubesolve.cube import Cube
from cubesolve.moves import apply_moves, generate_scramble
from cubesolve.notation import format_moves, parse_notation
from cubesolve.solver import solve
from cubesolve.validation import validate

logger = logging.getLogger(__name__)


def _default_scramble_length() -> int:
    raw = os.environ.get("CUBESOLVE_SCRAMBLE_LENGTH", "").strip()
    if not raw:
        return 20
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer CUBESOLVE_SCRAMBLE_LENGTH=%r", raw)
        return 20


DEFAULT_SCRAMBLE_LENGTH = _default_scramble_length()

app = FastAPI(title="Cube Solver API", version="1.0.0")


class ValidateRequest(BaseModel):
    state: dict[str, Any]


class SolveRequest(BaseModel):
    scramble: str | None = None
    state: dict[str, Any] | None = None


def _cube_from_request(payload: SolveRequest) -> tuple[Cube, list[str]]:
    if payload.state is not None:
        return Cube(payload.state), []

    scramble = parse_notation(payload.scramble or "")
    cube = Cube()
    apply_moves(cube, scramble)
    return cube, scramble


@app.get("/health")
def health() -> dict:
    return {"ok": True}


@app.get("/api/scramble")
def api_scramble(
    length: int = Query(default=DEFAULT_SCRAMBLE_LENGTH, ge=0, le=200),
    seed: int | None = Query(default=None),
) -> dict:
    moves = generate_scramble(length, seed=seed)
    return {"ok": True, "data": {"scramble": format_moves(moves), "moves": moves}}


@app.post("/api/validate")
def api_validate(payload: ValidateRequest) -> dict:
    result = validate(payload.state)
    return {"ok": True, "data": {"valid": result.valid, "errors": list(result.errors)}}


@app.post("/api/solve")
def api_solve(payload: SolveRequest) -> dict:
    if payload.scramble is None and payload.state is None:
        raise HTTPException(status_code=400, detail="Provide either scramble or state")

    try:
        cube, scramble = _cube_from_request(payload)
    except (ValueError, IndexError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        solution = solve(cube)
    except Exception as exc:
        logger.exception("Solver failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    data = solution.to_dict()
    data["scramble"] = format_moves(scramble)
    return {"ok": True, "data": data}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=os.environ.get("CUBESOLVE_LOG_LEVEL", "INFO").strip().upper() or "INFO")
    uvicorn.run("scripts.solver_api:app", host="127.0.0.1", port=8008, reload=True)
