"""Session configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

from adjpower.algebra.semiring import MultiplyType
from adjpower.graph.generation import (
    DEFAULT_MAX_RETRIES,
    parse_mode,
    validate_request,
)
from adjpower.graph.types import GenerationMode


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Random graph generation parameters."""

    size: int = 5  # number of vertices
    edge_number: int = 7  # logical edges to place
    mode: GenerationMode = GenerationMode.DEFAULT
    max_retries: int = DEFAULT_MAX_RETRIES  # connectivity retry budget

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        if self.edge_number < 0:
            raise ValueError(f"edge_number must be >= 0, got {self.edge_number}")
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {self.max_retries}")
        parse_mode(self.mode)
        errors = validate_request(self.size, self.edge_number, self.mode)
        if errors:
            raise ValueError("; ".join(errors))


@dataclass(frozen=True, slots=True)
class ExerciseConfig:
    """Which power operation to practise and how far."""

    operation: MultiplyType = MultiplyType.CLASSIC
    max_power: int = 4  # last level; levels start at power 2

    def __post_init__(self) -> None:
        if self.max_power < 2:
            raise ValueError(f"max_power must be >= 2, got {self.max_power}")


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Top-level configuration composing graph and exercise settings."""

    graph: GraphConfig = field(default_factory=GraphConfig)
    exercise: ExerciseConfig = field(default_factory=ExerciseConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()
