from __future__ import annotations

from typing import Dict, Iterable

from cubesolve.models import AlgorithmPreset, SolverStage
from cubesolve.notation import parse_notation


PRESET_LIST = [
    AlgorithmPreset(
        name="Sexy",
        formula="R U R' U'",
        stage=SolverStage.WHITE_CORNERS,
        aliases=("SexyMove", "CornerInsert"),
    ),
    AlgorithmPreset(
        name="EdgeLift",
        formula="R U R'",
        stage=SolverStage.WHITE_CROSS,
    ),
    AlgorithmPreset(
        name="FlippedEdgeInsert",
        formula="U' R' F R",
        stage=SolverStage.WHITE_CROSS,
    ),
    AlgorithmPreset(
        name="MiddleRight",
        formula="U R U' R' U' F' U F",
        stage=SolverStage.MIDDLE_LAYER,
        aliases=("RightInsert",),
    ),
    AlgorithmPreset(
        name="MiddleLeft",
        formula="U' L' U L U F U' F'",
        stage=SolverStage.MIDDLE_LAYER,
        aliases=("LeftInsert",),
    ),
    AlgorithmPreset(
        name="YellowCross",
        formula="F R U R' U' F'",
        stage=SolverStage.YELLOW_CROSS,
    ),
    AlgorithmPreset(
        name="SuneSwap",
        formula="R U R' U R U2 R' U",
        stage=SolverStage.POSITION_YELLOW_CROSS,
        aliases=("Sune",),
    ),
    AlgorithmPreset(
        name="CornerCycle",
        formula="U R U' L' U R' U' L",
        stage=SolverStage.POSITION_YELLOW_CORNERS,
        aliases=("Niklas",),
    ),
    AlgorithmPreset(
        name="CornerTwist",
        formula="R' D' R D",
        stage=SolverStage.ORIENT_YELLOW_CORNERS,
    ),
]


def _lookup_keys(preset: AlgorithmPreset) -> list[str]:
    return [key.strip().lower() for key in (preset.name, *preset.aliases)]


def _index_presets(presets: Iterable[AlgorithmPreset]) -> Dict[str, AlgorithmPreset]:
    index: Dict[str, AlgorithmPreset] = {}
    for preset in presets:
        # Bad notation fails at import time, not mid-solve.
        parse_notation(preset.formula)
        for key in _lookup_keys(preset):
            owner = index.setdefault(key, preset)
            if owner is not preset:
                raise ValueError(f"Preset key {key!r} is claimed by both {owner.name} and {preset.name}")
    return index


_PRESETS_BY_KEY = _index_presets(PRESET_LIST)


def get_preset(name: str) -> AlgorithmPreset:
    """Look up a trigger by name or alias, ignoring case and surrounding spaces."""
    try:
        return _PRESETS_BY_KEY[name.strip().lower()]
    except KeyError:
        known = ", ".join(preset.name for preset in PRESET_LIST)
        raise KeyError(f"Unknown preset: {name}. Known presets: {known}") from None
