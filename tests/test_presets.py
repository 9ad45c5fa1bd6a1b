from __future__ import annotations

import pytest

from cubesolve.models import AlgorithmPreset, SolverStage, solved_state
from cubesolve.moves import state_after_moves
from cubesolve.notation import parse_notation
from cubesolve.presets import PRESET_LIST, get_preset


def test_preset_alias_resolves() -> None:
    assert get_preset("SexyMove").name == "Sexy"
    assert get_preset("  niklas ").name == "CornerCycle"


def test_unknown_preset_fails() -> None:
    with pytest.raises(KeyError, match="Unknown preset"):
        get_preset("NotExistingPreset")


@pytest.mark.parametrize("preset", PRESET_LIST, ids=lambda preset: preset.name)
def test_every_name_and_alias_resolves(preset: AlgorithmPreset) -> None:
    for key in (preset.name, *preset.aliases):
        assert get_preset(key.upper()) is preset


def test_every_stage_has_a_trigger() -> None:
    assert {preset.stage for preset in PRESET_LIST} == set(SolverStage)


@pytest.mark.parametrize("preset", PRESET_LIST, ids=lambda preset: preset.name)
def test_preset_formulas_parse(preset: AlgorithmPreset) -> None:
    assert parse_notation(preset.formula)


def test_corner_twist_has_order_six() -> None:
    moves = parse_notation(get_preset("CornerTwist").formula)
    assert state_after_moves(solved_state(), moves * 6) == solved_state()


def test_preset_requires_formula() -> None:
    with pytest.raises(ValueError):
        AlgorithmPreset(name="Empty", formula=" ", stage=SolverStage.WHITE_CROSS)
