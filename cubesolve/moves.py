from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Mapping, Sequence

import numpy as np

from cubesolve.models import FACE_ORDER, STICKERS_PER_FACE, Color, CubeState, Face, Move
from cubesolve.notation import MODIFIERS, QUARTER_TURNS, split_move

if TYPE_CHECKING:
    from cubesolve.cube import Cube

# new[i] = old[FACE_ROTATION[i]] turns a face 90 degrees clockwise.
FACE_ROTATION = (6, 3, 0, 7, 4, 1, 8, 5, 2)

# Stickers on each entry move to the next entry (last wraps to first) when
# the keyed face turns clockwise. Index order inside a triplet is preserved.
ADJACENT_CYCLES: dict[Face, tuple[tuple[Face, tuple[int, int, int]], ...]] = {
    Face.U: (
        (Face.F, (0, 1, 2)),
        (Face.L, (0, 1, 2)),
        (Face.B, (0, 1, 2)),
        (Face.R, (0, 1, 2)),
    ),
    Face.D: (
        (Face.F, (6, 7, 8)),
        (Face.R, (6, 7, 8)),
        (Face.B, (6, 7, 8)),
        (Face.L, (6, 7, 8)),
    ),
    Face.R: (
        (Face.F, (2, 5, 8)),
        (Face.U, (2, 5, 8)),
        (Face.B, (6, 3, 0)),
        (Face.D, (2, 5, 8)),
    ),
    Face.L: (
        (Face.U, (0, 3, 6)),
        (Face.F, (0, 3, 6)),
        (Face.D, (0, 3, 6)),
        (Face.B, (8, 5, 2)),
    ),
    Face.F: (
        (Face.U, (6, 7, 8)),
        (Face.R, (0, 3, 6)),
        (Face.D, (2, 1, 0)),
        (Face.L, (8, 5, 2)),
    ),
    Face.B: (
        (Face.U, (0, 1, 2)),
        (Face.L, (6, 3, 0)),
        (Face.D, (8, 7, 6)),
        (Face.R, (2, 5, 8)),
    ),
}

_FACE_OFFSET = {face: position * STICKERS_PER_FACE for position, face in enumerate(FACE_ORDER)}


def _flat_index(face: Face, index: int) -> int:
    return _FACE_OFFSET[face] + index


@lru_cache(maxsize=None)
def _quarter_turn_permutation(face: Face) -> np.ndarray:
    perm = np.arange(len(FACE_ORDER) * STICKERS_PER_FACE)

    for index, source in enumerate(FACE_ROTATION):
        perm[_flat_index(face, index)] = _flat_index(face, source)

    cycle = ADJACENT_CYCLES[face]
    for position, (source_face, source_indices) in enumerate(cycle):
        target_face, target_indices = cycle[(position + 1) % len(cycle)]
        for source, target in zip(source_indices, target_indices, strict=True):
            perm[_flat_index(target_face, target)] = _flat_index(source_face, source)

    perm.setflags(write=False)
    return perm


@lru_cache(maxsize=None)
def move_permutation(move: Move) -> np.ndarray:
    """Index array such that ``flat_after = flat_before[perm]`` for ``move``."""
    face, modifier = split_move(move)
    quarter = _quarter_turn_permutation(face)
    perm = np.arange(quarter.size)
    for _ in range(QUARTER_TURNS[modifier]):
        perm = perm[quarter]
    perm.setflags(write=False)
    return perm


def _flatten(state: Mapping[Face, Sequence[Color]]) -> np.ndarray:
    return np.array([Color(sticker) for face in FACE_ORDER for sticker in state[face]], dtype=object)


def _unflatten(flat: np.ndarray) -> CubeState:
    stickers = flat.tolist()
    return {
        face: stickers[_FACE_OFFSET[face] : _FACE_OFFSET[face] + STICKERS_PER_FACE]
        for face in FACE_ORDER
    }


def turn_state(state: Mapping[Face, Sequence[Color]], move: Move) -> CubeState:
    return _unflatten(_flatten(state)[move_permutation(move)])


def state_after_moves(state: Mapping[Face, Sequence[Color]], moves: Sequence[Move]) -> CubeState:
    flat = _flatten(state)
    for move in moves:
        flat = flat[move_permutation(move)]
    return _unflatten(flat)


def apply_move(cube: Cube, move: Move) -> None:
    """Turn one face of ``cube`` in place.

    Turns are clockwise as seen looking straight at the turned face, so ``U``
    carries the front row to the Left face and ``D`` carries it to the Right face.
    """
    cube.set_state(turn_state(cube.get_state(), move))


def apply_moves(cube: Cube, moves: Sequence[Move]) -> None:
    for move in moves:
        apply_move(cube, move)


def generate_scramble(length: int = 20, seed: int | None = None) -> list[Move]:
    """Random face turns, never turning the same face twice in a row."""
    if length < 0:
        raise ValueError("length must be >= 0")

    rng = np.random.default_rng(seed)
    faces = [face.value for face in FACE_ORDER]
    scramble: list[Move] = []
    previous: str | None = None

    while len(scramble) < length:
        face = faces[int(rng.integers(len(faces)))]
        if face == previous:
            continue
        modifier = MODIFIERS[int(rng.integers(len(MODIFIERS)))]
        scramble.append(f"{face}{modifier}")
        previous = face

    return scramble
