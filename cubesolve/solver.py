from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from functools import partial
from typing import Callable, Mapping, Sequence

from cubesolve.cube import Cube
from cubesolve.models import Color, Face, Move, Solution, SolutionStep, SolverStage
from cubesolve.moves import apply_moves, state_after_moves
from cubesolve.notation import parse_notation
from cubesolve.pieces import (
    SIDE_FACES,
    bottom_corner,
    bottom_edge,
    center,
    colors_at,
    find_corner,
    find_edge,
    is_home,
    left_of,
    middle_edge,
    opposite_of,
    relative_moves,
    right_of,
    top_corner,
    top_edge,
    u_turns,
    u_turns_between,
)
from cubesolve.presets import get_preset
from cubesolve.validation import is_solved

logger = logging.getLogger(__name__)

METHOD_NAME = "Beginner's Method"

State = Mapping[Face, Sequence[Color]]

STAGE_DESCRIPTIONS = {
    SolverStage.WHITE_CROSS: "Form a cross on the bottom face with every edge matching its side center",
    SolverStage.WHITE_CORNERS: "Insert the bottom corners to complete the first layer",
    SolverStage.MIDDLE_LAYER: "Insert the four middle layer edges",
    SolverStage.YELLOW_CROSS: "Form a cross on the top face",
    SolverStage.POSITION_YELLOW_CROSS: "Align the top cross edges with their side centers",
    SolverStage.POSITION_YELLOW_CORNERS: "Move the top corners into their home positions",
    SolverStage.ORIENT_YELLOW_CORNERS: "Twist the top corners in place to solve the cube",
}


@dataclass(frozen=True)
class SolverConfig:
    """Iteration caps per stage. Running out of iterations ends the stage, it is not an error."""

    white_cross_edge_cap: int = 50
    white_corner_cap: int = 50
    middle_layer_cap: int = 100
    yellow_cross_cap: int = 10
    position_yellow_cross_cap: int = 10
    position_yellow_corners_cap: int = 10
    orient_yellow_corners_cap: int = 50

    def __post_init__(self) -> None:
        for item in fields(self):
            if getattr(self, item.name) < 0:
                raise ValueError(f"{item.name} must be >= 0")


def _formula(name: str) -> str:
    return get_preset(name).formula


def _run_loop(
    cube: Cube,
    moves: list[Move],
    is_done: Callable[[State], bool],
    next_moves: Callable[[State], list[Move]],
    cap: int,
    label: str,
) -> None:
    iterations = 0
    state = cube.get_state()
    while not is_done(state) and iterations < cap:
        batch = next_moves(state)
        if not batch:
            break
        apply_moves(cube, batch)
        moves.extend(batch)
        iterations += 1
        state = cube.get_state()

    if not is_done(state):
        logger.warning("%s stopped after %d iterations without reaching its goal", label, iterations)


# White cross

def _cross_edge_done(side: Face, state: State) -> bool:
    return is_home(state, bottom_edge(side))


def _cross_edge_moves(side: Face, state: State) -> list[Move]:
    down = center(state, Face.D)
    location = find_edge(state, (down, center(state, side)))
    if location is None:
        return []

    layer, face = location
    if layer == "bottom":
        return [f"{face.value}2"]
    if layer == "middle":
        return relative_moves(_formula("EdgeLift"), face)
    if face != side:
        return u_turns(u_turns_between(face, side))

    top_color, _ = colors_at(state, top_edge(side))
    if top_color == down:
        return [f"{side.value}2"]
    return relative_moves(_formula("FlippedEdgeInsert"), side)


# White corners

def _bottom_corner_done(side: Face, state: State) -> bool:
    return is_home(state, bottom_corner(side))


def _bottom_corner_moves(side: Face, state: State) -> list[Move]:
    colors = (center(state, Face.D), center(state, side), center(state, right_of(side)))
    location = find_corner(state, colors)
    if location is None:
        return []

    layer, face = location
    if face == side:
        return relative_moves(_formula("Sexy"), side)
    if layer == "bottom":
        # Lift a corner parked in another bottom slot into the top layer.
        return relative_moves(_formula("Sexy"), face)
    return u_turns(u_turns_between(face, side))


# Middle layer

def _middle_layer_done(state: State) -> bool:
    return all(is_home(state, middle_edge(side)) for side in SIDE_FACES)


def _middle_layer_moves(state: State) -> list[Move]:
    up = center(state, Face.U)

    for source in SIDE_FACES:
        top_color, side_color = colors_at(state, top_edge(source))
        if up in (top_color, side_color):
            continue
        target = next((side for side in SIDE_FACES if center(state, side) == side_color), None)
        if target is None:
            continue
        align = u_turns(u_turns_between(source, target))
        if top_color == center(state, right_of(target)):
            return align + relative_moves(_formula("MiddleRight"), target)
        if top_color == center(state, left_of(target)):
            return align + relative_moves(_formula("MiddleLeft"), target)

    # Nothing insertable on top: pop a misplaced middle edge up into the top layer.
    for side in SIDE_FACES:
        if not is_home(state, middle_edge(side)):
            return relative_moves(_formula("MiddleRight"), side)
    return []


# Yellow cross

def _top_edges_up(state: State) -> set[Face]:
    up = center(state, Face.U)
    return {side for side in SIDE_FACES if colors_at(state, top_edge(side))[0] == up}


def _yellow_cross_done(state: State) -> bool:
    return len(_top_edges_up(state)) == len(SIDE_FACES)


def _yellow_cross_moves(state: State) -> list[Move]:
    algorithm = parse_notation(_formula("YellowCross"))
    if len(_top_edges_up(state)) < 2:
        return algorithm

    # Line runs left-right, or the L shape points at the back-left corner.
    for turns in range(4):
        rotated = _top_edges_up(state_after_moves(state, u_turns(turns)))
        if rotated in ({Face.L, Face.R}, {Face.B, Face.L}):
            return u_turns(turns) + algorithm
    return algorithm


# Position yellow cross

def _matched_top_edges(state: State) -> set[Face]:
    return {side for side in SIDE_FACES if colors_at(state, top_edge(side))[1] == center(state, side)}


def _yellow_cross_positioned(state: State) -> bool:
    return len(_matched_top_edges(state)) == len(SIDE_FACES)


def _position_yellow_cross_moves(state: State) -> list[Move]:
    best = max(range(4), key=lambda turns: len(_matched_top_edges(state_after_moves(state, u_turns(turns)))))
    align = u_turns(best)
    matched = _matched_top_edges(state_after_moves(state, align))
    if len(matched) == len(SIDE_FACES):
        return align

    # Keeps the back and right edges, swaps the front and left ones.
    front = next(
        (side for side in SIDE_FACES if opposite_of(side) in matched and right_of(side) in matched),
        Face.F,
    )
    return align + relative_moves(_formula("SuneSwap"), front)


# Position yellow corners

def _top_corner_positioned(side: Face, state: State) -> bool:
    wanted = (center(state, Face.U), center(state, side), center(state, right_of(side)))
    expected = sorted(color.value for color in wanted)
    found = sorted(color.value for color in colors_at(state, top_corner(side)))
    return found == expected


def _yellow_corners_positioned(state: State) -> bool:
    return all(_top_corner_positioned(side, state) for side in SIDE_FACES)


def _position_yellow_corners_moves(state: State) -> list[Move]:
    # The cycle leaves the top-front-right corner in place.
    front = next((side for side in SIDE_FACES if _top_corner_positioned(side, state)), Face.F)
    return relative_moves(_formula("CornerCycle"), front)


# Orient yellow corners

def _orient_yellow_corners_moves(state: State) -> list[Move]:
    up = center(state, Face.U)
    oriented = [colors_at(state, top_corner(side))[0] == up for side in SIDE_FACES]
    if all(oriented):
        return ["U"]
    if not oriented[SIDE_FACES.index(Face.F)]:
        return parse_notation(_formula("CornerTwist"))
    return ["U"]


class BeginnerSolver:
    """Layer-by-layer solver: seven fixed stages, each a capped trigger loop."""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    def solve(self, cube: Cube) -> Solution:
        if cube.is_solved():
            return Solution(moves=[], steps=[], method=METHOD_NAME)

        working = cube.clone()
        steps = [
            self._solve_white_cross(working),
            self._solve_white_corners(working),
            self._solve_middle_layer(working),
            self._solve_yellow_cross(working),
            self._position_yellow_cross(working),
            self._position_yellow_corners(working),
            self._orient_yellow_corners(working),
        ]
        moves = [move for step in steps for move in step.moves]

        if not working.is_solved():
            logger.warning("Solver finished without reaching the solved state after %d moves", len(moves))
        logger.info("Solved in %d moves", len(moves))

        return Solution(
            moves=moves,
            steps=[step for step in steps if step.moves],
            method=METHOD_NAME,
        )

    def _step(self, stage: SolverStage, cube: Cube, moves: list[Move]) -> SolutionStep:
        logger.debug("%s: %d moves", stage.value, len(moves))
        return SolutionStep(
            name=stage.value,
            description=STAGE_DESCRIPTIONS[stage],
            moves=moves,
            cube_state=cube.get_state(),
        )

    def _solve_white_cross(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        for side in SIDE_FACES:
            _run_loop(
                cube,
                moves,
                is_done=partial(_cross_edge_done, side),
                next_moves=partial(_cross_edge_moves, side),
                cap=self.config.white_cross_edge_cap,
                label=f"{SolverStage.WHITE_CROSS.value} ({side.value} edge)",
            )
        return self._step(SolverStage.WHITE_CROSS, cube, moves)

    def _solve_white_corners(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        for side in SIDE_FACES:
            _run_loop(
                cube,
                moves,
                is_done=partial(_bottom_corner_done, side),
                next_moves=partial(_bottom_corner_moves, side),
                cap=self.config.white_corner_cap,
                label=f"{SolverStage.WHITE_CORNERS.value} ({side.value} corner)",
            )
        return self._step(SolverStage.WHITE_CORNERS, cube, moves)

    def _solve_middle_layer(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        _run_loop(
            cube,
            moves,
            is_done=_middle_layer_done,
            next_moves=_middle_layer_moves,
            cap=self.config.middle_layer_cap,
            label=SolverStage.MIDDLE_LAYER.value,
        )
        return self._step(SolverStage.MIDDLE_LAYER, cube, moves)

    def _solve_yellow_cross(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        _run_loop(
            cube,
            moves,
            is_done=_yellow_cross_done,
            next_moves=_yellow_cross_moves,
            cap=self.config.yellow_cross_cap,
            label=SolverStage.YELLOW_CROSS.value,
        )
        return self._step(SolverStage.YELLOW_CROSS, cube, moves)

    def _position_yellow_cross(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        _run_loop(
            cube,
            moves,
            is_done=_yellow_cross_positioned,
            next_moves=_position_yellow_cross_moves,
            cap=self.config.position_yellow_cross_cap,
            label=SolverStage.POSITION_YELLOW_CROSS.value,
        )
        return self._step(SolverStage.POSITION_YELLOW_CROSS, cube, moves)

    def _position_yellow_corners(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        _run_loop(
            cube,
            moves,
            is_done=_yellow_corners_positioned,
            next_moves=_position_yellow_corners_moves,
            cap=self.config.position_yellow_corners_cap,
            label=SolverStage.POSITION_YELLOW_CORNERS.value,
        )
        return self._step(SolverStage.POSITION_YELLOW_CORNERS, cube, moves)

    def _orient_yellow_corners(self, cube: Cube) -> SolutionStep:
        moves: list[Move] = []
        _run_loop(
            cube,
            moves,
            is_done=is_solved,
            next_moves=_orient_yellow_corners_moves,
            cap=self.config.orient_yellow_corners_cap,
            label=SolverStage.ORIENT_YELLOW_CORNERS.value,
        )
        return self._step(SolverStage.ORIENT_YELLOW_CORNERS, cube, moves)


def solve(cube: Cube, config: SolverConfig | None = None) -> Solution:
    return BeginnerSolver(config).solve(cube)
