"""Matrix-power exercises: answer snapshot, hidden working copy, level progression.

An Exercise clones the source graph twice. One clone is raised to the
requested power and becomes the answer; the other has every cell hidden and
is filled in by the learner. An ExerciseSession walks the learner
through the powers from a starting power (2 by default) up to max_power, one
level at a time.
"""

import logging

from adjpower.algebra.power import check_power, iter_powers
from adjpower.algebra.semiring import MultiplyType
from adjpower.exercise.checker import check_matrix_completion, mismatched_cells
from adjpower.graph.graph import Graph, HiddenCellsError

log = logging.getLogger(__name__)

FIRST_LEVEL = 2


class ExerciseError(Exception):
    """Base class for exercise workflow errors."""


class ExerciseIncomplete(ExerciseError):
    """Raised when advancing past a level whose answer is not yet correct."""


class Exercise:
    """One power to compute by hand.

    Attributes:
        operation: Multiplication type being practised.
        power: Exponent the learner must apply.
        answer: Graph holding the correct result.
        working: Learner's graph; starts fully hidden.
    """

    def __init__(
        self,
        graph: Graph,
        operation: MultiplyType | str,
        power: int,
        answer: Graph | None = None,
    ) -> None:
        check_power(power)
        self.operation = MultiplyType(operation)
        self.power = power
        if answer is None:
            answer = graph.copy()
            answer.multiply(power, self.operation)
        self.answer = answer
        self.working = graph.copy()
        self.working.hide_all()

    def reveal(self, i: int, j: int, value: int) -> bool:
        """Enter a value for one cell; returns whether it matches the answer."""
        self.working.change_edge(i, j, value)
        correct = int(self.answer.matrix[i, j]) == value
        log.debug(
            "Cell (%d, %d) = %d entered for %s power %d: %s",
            i,
            j,
            value,
            self.operation.value,
            self.power,
            "correct" if correct else "wrong",
        )
        return correct

    def remaining(self) -> int:
        """Number of cells still hidden."""
        return int(self.working.hidden.sum())

    def mistakes(self) -> list[tuple[int, int]]:
        return mismatched_cells(
            self.working.matrix, self.answer.matrix, self.working.hidden
        )

    def is_complete(self) -> bool:
        return check_matrix_completion(
            self.working.matrix, self.answer.matrix, self.working.hidden
        )


class ExerciseSession:
    """Level-by-level practice of one operation on one graph.

    Levels are the powers start_power..max_power, start_power defaulting to
    FIRST_LEVEL. Answers for all levels are computed up front by stepping
    through the powers once.
    """

    def __init__(
        self,
        graph: Graph,
        operation: MultiplyType | str,
        max_power: int,
        start_power: int = FIRST_LEVEL,
    ) -> None:
        check_power(start_power)
        check_power(max_power)
        if max_power < start_power:
            raise ValueError(
                f"max_power must be >= start_power {start_power}, got {max_power}"
            )
        if not graph.is_fully_revealed():
            raise HiddenCellsError("Exercise source graph has hidden cells")

        self.graph = graph.copy()
        self.operation = MultiplyType(operation)
        self.start_power = start_power
        self.max_power = max_power
        self._answers = {
            k: Graph.from_matrix(m)
            for k, m in iter_powers(self.graph.matrix, max_power, self.operation)
            if k >= start_power
        }
        self.current_level = start_power
        self.finished = False
        self.current = self._build(self.current_level)

    def _build(self, level: int) -> Exercise:
        return Exercise(
            self.graph, self.operation, level, answer=self._answers[level].copy()
        )

    def advance(self) -> Exercise | None:
        """Move to the next level once the current one is solved.

        Returns:
            The next Exercise, or None when the last level was just solved.

        Raises:
            ExerciseIncomplete: If the current exercise is not complete.
        """
        if not self.current.is_complete():
            raise ExerciseIncomplete(
                f"Level {self.current_level} has {self.current.remaining()} hidden "
                f"and {len(self.current.mistakes())} wrong cells"
            )
        if self.current_level >= self.max_power:
            self.finished = True
            log.info(
                "Finished %s session at power %d",
                self.operation.value,
                self.max_power,
            )
            return None

        self.current_level += 1
        self.current = self._build(self.current_level)
        log.info("Advanced to %s level %d", self.operation.value, self.current_level)
        return self.current
