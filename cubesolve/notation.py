from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from cubesolve.models import FACE_NAMES, FACE_ORDER, Face, Move

MODIFIERS = ("", "'", "2")
ALL_MOVES: tuple[Move, ...] = tuple(f"{face.value}{modifier}" for face in FACE_ORDER for modifier in MODIFIERS)

_MOVE_PATTERN = re.compile(r"[UDLRFB]['2]?")

# Clockwise quarter turns needed to realize each modifier.
QUARTER_TURNS = {"": 1, "2": 2, "'": 3}


class InvalidMove(ValueError):
    def __init__(self, token: str, position: int | None = None) -> None:
        message = f'Invalid move: "{token}". Must be one of [UDLRFB] optionally followed by \' or 2'
        if position is not None:
            message = f"{message} (at index {position})"
        super().__init__(message)
        self.token = token
        self.position = position


@dataclass(frozen=True)
class _Token:
    value: str
    start: int


def _tokenize(text: str) -> list[_Token]:
    return [_Token(value=match.group(), start=match.start()) for match in re.finditer(r"\S+", text)]


def is_valid_move(text: str) -> bool:
    return isinstance(text, str) and _MOVE_PATTERN.fullmatch(text) is not None


def split_move(move: Move) -> tuple[Face, str]:
    if not is_valid_move(move):
        raise InvalidMove(move)
    return Face(move[0]), move[1:]


def parse_notation(text: str) -> list[Move]:
    moves: list[Move] = []
    for token in _tokenize(text):
        if not is_valid_move(token.value):
            raise InvalidMove(token.value, token.start)
        moves.append(token.value)
    return moves


def invert_move(move: Move) -> Move:
    face, modifier = split_move(move)
    if modifier == "":
        return f"{face.value}'"
    if modifier == "'":
        return face.value
    return move


def invert_moves(moves: Sequence[Move]) -> list[Move]:
    return [invert_move(move) for move in reversed(moves)]


def describe_move(move: Move) -> str:
    face, modifier = split_move(move)
    name = FACE_NAMES[face]
    if modifier == "'":
        return f"{name} counter-clockwise"
    if modifier == "2":
        return f"{name} 180°"
    return f"{name} clockwise"


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(moves)
