from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from cubesolve.models import CENTER_INDEX, COLOR_ORDER, FACE_ORDER, STICKERS_PER_FACE, ValidationResult

_VALID_COLORS = {color.value for color in COLOR_ORDER}


def _has_all_stickers(state: Any) -> bool:
    if not isinstance(state, Mapping):
        return False
    for face in FACE_ORDER:
        stickers = state.get(face)
        if not isinstance(stickers, Sequence) or isinstance(stickers, str):
            return False
        if len(stickers) != STICKERS_PER_FACE:
            return False
        # Stickers are counted by value, so each one must be hashable.
        if not all(isinstance(sticker, Hashable) for sticker in stickers):
            return False
    return True


def _color_count_errors(state: Mapping) -> list[str]:
    counts = Counter(sticker for face in FACE_ORDER for sticker in state[face])
    errors: list[str] = []
    for color in COLOR_ORDER:
        count = counts.get(color.value, 0)
        if count != STICKERS_PER_FACE:
            errors.append(f"Color {color.value} appears {count} times (expected {STICKERS_PER_FACE})")
    return errors


def _center_errors(state: Mapping) -> list[str]:
    centers = {state[face][CENTER_INDEX] for face in FACE_ORDER}
    if len(centers) != len(FACE_ORDER):
        return ["Centers must all be different colors"]
    return []


def _has_valid_parity(state: Mapping) -> bool:
    # Symbol well-formedness only. Corner/edge permutation and orientation
    # parity are not checked, so an unreachable arrangement can still pass.
    return all(sticker in _VALID_COLORS for face in FACE_ORDER for sticker in state[face])


def validate(state: Any) -> ValidationResult:
    if not _has_all_stickers(state):
        return ValidationResult(valid=False, errors=["Cube state is incomplete - missing stickers"])

    errors = _color_count_errors(state)
    errors.extend(_center_errors(state))

    if not errors and not _has_valid_parity(state):
        errors.append("Cube configuration is impossible (invalid parity)")

    return ValidationResult(valid=not errors, errors=errors)


def is_basic_valid(state: Any) -> bool:
    """Completeness and color counts only; skips center and parity checks."""
    return _has_all_stickers(state) and not _color_count_errors(state)


def is_solved(state: Mapping) -> bool:
    return all(
        all(sticker == state[face][CENTER_INDEX] for sticker in state[face])
        for face in FACE_ORDER
    )


def format_validation_errors(result: ValidationResult) -> str:
    if result.valid:
        return "Cube state is valid"
    lines = "\n".join(f"  - {error}" for error in result.errors)
    return f"Invalid cube state:\n{lines}"
