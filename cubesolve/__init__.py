from cubesolve.cube import Cube, IndexOutOfRange, InvalidState
from cubesolve.models import (
    AlgorithmPreset,
    Color,
    CubeState,
    Face,
    Solution,
    SolutionStep,
    SolverStage,
    ValidationResult,
    solved_state,
)
from cubesolve.moves import apply_move, apply_moves, generate_scramble, state_after_moves, turn_state
from cubesolve.notation import (
    InvalidMove,
    describe_move,
    format_moves,
    invert_move,
    invert_moves,
    is_valid_move,
    parse_notation,
)
from cubesolve.presets import get_preset
from cubesolve.solver import BeginnerSolver, SolverConfig, solve
from cubesolve.validation import format_validation_errors, is_basic_valid, is_solved, validate

__all__ = [
    "AlgorithmPreset",
    "BeginnerSolver",
    "Color",
    "Cube",
    "CubeState",
    "Face",
    "IndexOutOfRange",
    "InvalidMove",
    "InvalidState",
    "Solution",
    "SolutionStep",
    "SolverConfig",
    "SolverStage",
    "ValidationResult",
    "apply_move",
    "apply_moves",
    "describe_move",
    "format_moves",
    "format_validation_errors",
    "generate_scramble",
    "get_preset",
    "invert_move",
    "invert_moves",
    "is_basic_valid",
    "is_solved",
    "is_valid_move",
    "parse_notation",
    "solve",
    "solved_state",
    "state_after_moves",
    "turn_state",
    "validate",
]
