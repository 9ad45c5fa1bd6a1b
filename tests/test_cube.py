from __future__ import annotations

import json

import pytest

from cubesolve.cube import Cube, IndexOutOfRange, InvalidState
from cubesolve.models import Color, Face, solved_state
from cubesolve.moves import apply_moves
from cubesolve.notation import parse_notation


def test_new_cube_is_solved() -> None:
    cube = Cube()
    assert cube.is_solved()
    assert cube.get_state() == solved_state()


def test_invalid_state_is_rejected_with_errors() -> None:
    state = solved_state()
    state[Face.D][0] = Color.W
    with pytest.raises(InvalidState, match="Invalid cube state") as excinfo:
        Cube(state)
    assert any("Color W appears 10 times" in error for error in excinfo.value.errors)


def test_get_state_returns_independent_copy() -> None:
    cube = Cube()
    state = cube.get_state()
    state[Face.U][0] = Color.Y
    assert cube.get_sticker(Face.U, 0) == Color.W


def test_constructor_copies_input() -> None:
    state = solved_state()
    cube = Cube(state)
    state[Face.U][0], state[Face.D][0] = Color.Y, Color.W
    assert cube.is_solved()


def test_set_state_validates_and_keeps_previous_on_failure() -> None:
    cube = Cube()
    apply_moves(cube, ["R"])
    before = cube.get_state()
    with pytest.raises(InvalidState):
        cube.set_state({Face.U: [Color.W] * 9})
    assert cube.get_state() == before


def test_clone_is_independent() -> None:
    cube = Cube()
    copy = cube.clone()
    apply_moves(copy, parse_notation("R U"))
    assert cube.is_solved()
    assert not copy.is_solved()


def test_reset_restores_solved_state() -> None:
    cube = Cube()
    apply_moves(cube, parse_notation("F2 B L'"))
    cube.reset()
    assert cube.is_solved()


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_sticker_index_out_of_range(index: int) -> None:
    with pytest.raises(IndexOutOfRange, match="Must be 0-8"):
        Cube().get_sticker(Face.F, index)


def test_face_and_center_accessors_accept_strings() -> None:
    cube = Cube()
    assert cube.get_face("R") == [Color.R] * 9
    assert cube.get_center_color("F") == Color.G
    assert cube.get_sticker("B", 8) == Color.B


def test_equality_compares_stickers() -> None:
    first = Cube()
    second = Cube()
    assert first == second
    assert first.equals(second)
    apply_moves(second, ["U"])
    assert first != second
    apply_moves(second, ["U'"])
    assert first == second


def test_json_round_trip() -> None:
    cube = Cube()
    apply_moves(cube, parse_notation("R U R' U' F2 D"))
    text = cube.to_json()
    assert json.loads(text)["U"][4] == "W"
    assert Cube.from_json(text) == cube


def test_facelet_round_trip() -> None:
    cube = Cube()
    apply_moves(cube, parse_notation("L D' B2 R"))
    facelets = cube.to_facelets()
    assert len(facelets) == 54
    assert Cube.from_facelets(facelets) == cube
    assert Cube().to_facelets() == "W" * 9 + "Y" * 9 + "O" * 9 + "R" * 9 + "G" * 9 + "B" * 9


def test_from_facelets_rejects_wrong_length() -> None:
    with pytest.raises(InvalidState, match="exactly 54 stickers"):
        Cube.from_facelets("W" * 53)


def test_str_lists_faces() -> None:
    lines = str(Cube()).splitlines()
    assert len(lines) == 6
    assert lines[0] == "U: [W, W, W, W, W, W, W, W, W]"
    assert lines[1].startswith("D: [Y")


def test_up_turn_carries_front_row_to_the_left_face() -> None:
    cube = Cube()
    apply_moves(cube, ["U"])
    assert cube.get_face(Face.L)[:3] == [Color.G] * 3
    assert cube.get_face(Face.F)[:3] == [Color.R] * 3
    apply_moves(cube, ["U'", "D"])
    assert cube.get_face(Face.R)[6:] == [Color.G] * 3
