from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class Face(str, Enum):
    U = "U"
    D = "D"
    L = "L"
    R = "R"
    F = "F"
    B = "B"


class Color(str, Enum):
    W = "W"
    Y = "Y"
    R = "R"
    O = "O"
    B = "B"
    G = "G"


FACE_ORDER: tuple[Face, ...] = (Face.U, Face.D, Face.L, Face.R, Face.F, Face.B)
COLOR_ORDER: tuple[Color, ...] = (Color.W, Color.Y, Color.R, Color.O, Color.B, Color.G)

FACE_NAMES = {
    Face.U: "Up",
    Face.D: "Down",
    Face.L: "Left",
    Face.R: "Right",
    Face.F: "Front",
    Face.B: "Back",
}

COLOR_NAMES = {
    Color.W: "White",
    Color.Y: "Yellow",
    Color.R: "Red",
    Color.O: "Orange",
    Color.B: "Blue",
    Color.G: "Green",
}

STICKERS_PER_FACE = 9
CENTER_INDEX = 4

# Row-major per face, each face seen from outside:
#   0 1 2
#   3 4 5
#   6 7 8
CubeState = Dict[Face, List[Color]]

# Notation token such as "R", "U'" or "F2".
Move = str

# White opposite yellow, red opposite orange, blue opposite green.
_SOLVED_COLORS = {
    Face.U: Color.W,
    Face.D: Color.Y,
    Face.L: Color.O,
    Face.R: Color.R,
    Face.F: Color.G,
    Face.B: Color.B,
}


def solved_state() -> CubeState:
    return {face: [_SOLVED_COLORS[face]] * STICKERS_PER_FACE for face in FACE_ORDER}


def copy_state(state: CubeState) -> CubeState:
    return {Face(face): [Color(color) for color in state[face]] for face in FACE_ORDER}


class SolverStage(str, Enum):
    WHITE_CROSS = "White Cross"
    WHITE_CORNERS = "White Corners"
    MIDDLE_LAYER = "Middle Layer"
    YELLOW_CROSS = "Yellow Cross"
    POSITION_YELLOW_CROSS = "Position Yellow Cross"
    POSITION_YELLOW_CORNERS = "Position Yellow Corners"
    ORIENT_YELLOW_CORNERS = "Orient Yellow Corners"


@dataclass(frozen=True)
class AlgorithmPreset:
    name: str
    formula: str
    stage: SolverStage
    aliases: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Preset name must be non-empty")
        if not self.formula.strip():
            raise ValueError("Preset formula must be non-empty")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SolutionStep:
    name: str
    description: str
    moves: List[Move]
    cube_state: CubeState | None = None

    @property
    def move_count(self) -> int:
        return len(self.moves)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "moves": list(self.moves),
            "move_count": self.move_count,
        }


@dataclass(frozen=True)
class Solution:
    moves: List[Move]
    steps: List[SolutionStep]
    method: str
    optimized: bool = False

    @property
    def total_moves(self) -> int:
        return len(self.moves)

    def to_dict(self) -> dict[str, Any]:
        return {
            "moves": list(self.moves),
            "steps": [step.to_dict() for step in self.steps],
            "total_moves": self.total_moves,
            "method": self.method,
            "optimized": self.optimized,
        }
