from __future__ import annotations

import json
from typing import Any

from cubesolve.models import (
    CENTER_INDEX,
    FACE_ORDER,
    STICKERS_PER_FACE,
    Color,
    CubeState,
    Face,
    copy_state,
    solved_state,
)
from cubesolve.validation import is_solved, validate


class InvalidState(ValueError):
    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"Invalid cube state: {', '.join(errors)}")
        self.errors = list(errors)


class IndexOutOfRange(IndexError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid sticker index: {index}. Must be 0-{STICKERS_PER_FACE - 1}.")
        self.index = index


def _checked_copy(state: Any) -> CubeState:
    result = validate(state)
    if not result.valid:
        raise InvalidState(result.errors)
    return copy_state(state)


class Cube:
    """Owns one validated cube state; every read hands out an independent copy.

    Face turns follow standard notation seen from the turned face: after ``U``
    the Front face's top row holds what was the Right face's top row.
    """

    def __init__(self, state: CubeState | None = None) -> None:
        self._state = _checked_copy(state) if state is not None else solved_state()

    def get_state(self) -> CubeState:
        return copy_state(self._state)

    def set_state(self, state: CubeState) -> None:
        self._state = _checked_copy(state)

    def clone(self) -> Cube:
        return Cube(self._state)

    def reset(self) -> None:
        self._state = solved_state()

    def is_solved(self) -> bool:
        return is_solved(self._state)

    def get_sticker(self, face: Face | str, index: int) -> Color:
        if not 0 <= index < STICKERS_PER_FACE:
            raise IndexOutOfRange(index)
        return self._state[Face(face)][index]

    def get_face(self, face: Face | str) -> list[Color]:
        return list(self._state[Face(face)])

    def get_center_color(self, face: Face | str) -> Color:
        return self._state[Face(face)][CENTER_INDEX]

    def equals(self, other: Cube) -> bool:
        return all(self._state[face] == other._state[face] for face in FACE_ORDER)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def to_json(self) -> str:
        return json.dumps({face.value: [color.value for color in self._state[face]] for face in FACE_ORDER})

    @classmethod
    def from_json(cls, text: str) -> Cube:
        return cls(json.loads(text))

    def to_facelets(self) -> str:
        return "".join(color.value for face in FACE_ORDER for color in self._state[face])

    @classmethod
    def from_facelets(cls, text: str) -> Cube:
        compact = "".join(text.split())
        expected = len(FACE_ORDER) * STICKERS_PER_FACE
        if len(compact) != expected:
            raise InvalidState([f"Facelet string must contain exactly {expected} stickers, got {len(compact)}"])
        state = {
            face: list(compact[position * STICKERS_PER_FACE : (position + 1) * STICKERS_PER_FACE])
            for position, face in enumerate(FACE_ORDER)
        }
        return cls(state)

    def __str__(self) -> str:
        return "\n".join(
            f"{face.value}: [{', '.join(color.value for color in self._state[face])}]" for face in FACE_ORDER
        )

    def __repr__(self) -> str:
        return f"Cube({self.to_facelets()!r})"
