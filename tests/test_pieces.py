from __future__ import annotations

from cubesolve.models import Color, Face, solved_state
from cubesolve.moves import state_after_moves, turn_state
from cubesolve.pieces import (
    SIDE_FACES,
    bottom_edge,
    colors_at,
    find_corner,
    find_edge,
    is_home,
    left_of,
    relative_moves,
    right_of,
    top_corner,
    top_edge,
    u_turns,
    u_turns_between,
)


def test_neighbour_relations() -> None:
    for side in SIDE_FACES:
        assert left_of(right_of(side)) == side
    assert right_of(Face.F) == Face.R
    assert left_of(Face.F) == Face.L


def test_find_edge_in_solved_state() -> None:
    assert find_edge(solved_state(), (Color.Y, Color.G)) == ("bottom", Face.F)
    assert find_edge(solved_state(), (Color.W, Color.R)) == ("top", Face.R)
    assert find_edge(solved_state(), (Color.G, Color.R)) == ("middle", Face.F)


def test_find_corner_after_turn() -> None:
    state = turn_state(solved_state(), "R")
    # The down-front-right corner is lifted to the top-front-right slot.
    assert find_corner(state, (Color.Y, Color.G, Color.R)) == ("top", Face.F)


def test_u_turn_carries_slot_to_left_face() -> None:
    state = solved_state()
    colors = colors_at(state, top_edge(Face.F))
    for target in SIDE_FACES:
        turned = state_after_moves(state, u_turns(u_turns_between(Face.F, target)))
        assert colors_at(turned, top_edge(target)) == colors


def test_u_turns_normalizes_count() -> None:
    assert u_turns(0) == []
    assert u_turns(1) == ["U"]
    assert u_turns(2) == ["U2"]
    assert u_turns(3) == ["U'"]
    assert u_turns(5) == ["U"]


def test_relative_moves_relabels_side_faces() -> None:
    assert relative_moves("F R U R' U' F'", Face.F) == ["F", "R", "U", "R'", "U'", "F'"]
    assert relative_moves("F R U R' U' F'", Face.R) == ["R", "B", "U", "B'", "U'", "R'"]
    assert relative_moves("L' D B2", Face.L) == ["B'", "D", "R2"]


def test_is_home() -> None:
    state = turn_state(solved_state(), "U")
    assert is_home(state, bottom_edge(Face.F))
    assert not is_home(state, top_corner(Face.F))
