"""Session configuration system with frozen, serializable dataclasses."""

from adjpower.config.settings import (
    ExerciseConfig,
    GraphConfig,
    SessionConfig,
)
from adjpower.config.defaults import DEFAULT_CONFIG
from adjpower.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ExerciseConfig",
    "GraphConfig",
    "SessionConfig",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
