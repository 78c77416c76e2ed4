"""Learner exercises built on graph matrix powers."""

from adjpower.exercise.checker import check_matrix_completion, mismatched_cells
from adjpower.exercise.session import (
    FIRST_LEVEL,
    Exercise,
    ExerciseError,
    ExerciseIncomplete,
    ExerciseSession,
)

__all__ = [
    "Exercise",
    "ExerciseError",
    "ExerciseIncomplete",
    "ExerciseSession",
    "FIRST_LEVEL",
    "check_matrix_completion",
    "mismatched_cells",
]
