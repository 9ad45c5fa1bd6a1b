from __future__ import annotations

from typing import Callable, Iterable, Literal, Mapping, Sequence

from cubesolve.models import CENTER_INDEX, Color, Face, Move
from cubesolve.notation import parse_notation, split_move

Layer = Literal["top", "middle", "bottom"]
Sticker = tuple[Face, int]

# Side faces in the order the front face visits them under repeated U turns.
SIDE_FACES: tuple[Face, ...] = (Face.F, Face.L, Face.B, Face.R)

_RIGHT_OF = {Face.F: Face.R, Face.R: Face.B, Face.B: Face.L, Face.L: Face.F}
_LEFT_OF = {right: face for face, right in _RIGHT_OF.items()}
_OPPOSITE = {Face.F: Face.B, Face.B: Face.F, Face.L: Face.R, Face.R: Face.L}

_TOP_EDGE_INDEX = {Face.F: 7, Face.R: 5, Face.B: 1, Face.L: 3}
_BOTTOM_EDGE_INDEX = {Face.F: 1, Face.R: 5, Face.B: 7, Face.L: 3}
_TOP_CORNER_INDEX = {Face.F: 8, Face.R: 2, Face.B: 0, Face.L: 6}
_BOTTOM_CORNER_INDEX = {Face.F: 2, Face.R: 8, Face.B: 6, Face.L: 0}

_U_TURNS: tuple[tuple[Move, ...], ...] = ((), ("U",), ("U2",), ("U'",))


def right_of(face: Face) -> Face:
    return _RIGHT_OF[face]


def left_of(face: Face) -> Face:
    return _LEFT_OF[face]


def opposite_of(face: Face) -> Face:
    return _OPPOSITE[face]


def top_edge(side: Face) -> tuple[Sticker, Sticker]:
    """U-layer edge above ``side``: (U sticker, side sticker)."""
    return (Face.U, _TOP_EDGE_INDEX[side]), (side, 1)


def bottom_edge(side: Face) -> tuple[Sticker, Sticker]:
    return (Face.D, _BOTTOM_EDGE_INDEX[side]), (side, 7)


def middle_edge(side: Face) -> tuple[Sticker, Sticker]:
    """Middle-layer edge between ``side`` and the face to its right."""
    return (side, 5), (right_of(side), 3)


def top_corner(side: Face) -> tuple[Sticker, Sticker, Sticker]:
    """U-layer corner at the top right of ``side``: (U, side, right side)."""
    return (Face.U, _TOP_CORNER_INDEX[side]), (side, 2), (right_of(side), 0)


def bottom_corner(side: Face) -> tuple[Sticker, Sticker, Sticker]:
    """D-layer corner at the bottom right of ``side``: (D, side, right side)."""
    return (Face.D, _BOTTOM_CORNER_INDEX[side]), (side, 8), (right_of(side), 6)


SlotFn = Callable[[Face], tuple[Sticker, ...]]

_EDGE_SLOTS: dict[Layer, SlotFn] = {
    "top": top_edge,
    "middle": middle_edge,
    "bottom": bottom_edge,
}
_CORNER_SLOTS: dict[Layer, SlotFn] = {
    "top": top_corner,
    "bottom": bottom_corner,
}


def colors_at(state: Mapping[Face, Sequence[Color]], stickers: Iterable[Sticker]) -> tuple[Color, ...]:
    return tuple(state[face][index] for face, index in stickers)


def center(state: Mapping[Face, Sequence[Color]], face: Face) -> Color:
    return state[face][CENTER_INDEX]


def _find(
    state: Mapping[Face, Sequence[Color]],
    slots: dict[Layer, SlotFn],
    colors: Iterable[Color],
) -> tuple[Layer, Face] | None:
    wanted = sorted(color.value for color in colors)
    for layer, slot in slots.items():
        for side in SIDE_FACES:
            found = sorted(color.value for color in colors_at(state, slot(side)))
            if found == wanted:
                return layer, side
    return None


def find_edge(state: Mapping[Face, Sequence[Color]], colors: Iterable[Color]) -> tuple[Layer, Face] | None:
    return _find(state, _EDGE_SLOTS, colors)


def find_corner(state: Mapping[Face, Sequence[Color]], colors: Iterable[Color]) -> tuple[Layer, Face] | None:
    return _find(state, _CORNER_SLOTS, colors)


def is_home(state: Mapping[Face, Sequence[Color]], stickers: Iterable[Sticker]) -> bool:
    """Every sticker matches the center of the face it sits on."""
    return all(state[face][index] == center(state, face) for face, index in stickers)


def u_turns(count: int) -> list[Move]:
    return list(_U_TURNS[count % 4])


def u_turns_between(source: Face, target: Face) -> int:
    """Number of U quarter turns that carry a U-layer slot above ``source`` above ``target``."""
    turns = 0
    face = source
    while face != target:
        face = left_of(face)
        turns += 1
    return turns


def relative_moves(formula: str, front: Face) -> list[Move]:
    """Rewrite an algorithm written for the F face so it runs against ``front``."""
    mapping = {
        Face.F: front,
        Face.R: right_of(front),
        Face.B: opposite_of(front),
        Face.L: left_of(front),
        Face.U: Face.U,
        Face.D: Face.D,
    }
    moves: list[Move] = []
    for move in parse_notation(formula):
        face, modifier = split_move(move)
        moves.append(f"{mapping[face].value}{modifier}")
    return moves
