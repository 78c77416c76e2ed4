"""JSON serialization and deserialization for session configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from adjpower.algebra.semiring import MultiplyType
from adjpower.config.settings import SessionConfig
from adjpower.graph.types import GenerationMode

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, GenerationMode, MultiplyType],
    check_types=True,
    strict=True,
)


def config_to_json(config: SessionConfig) -> str:
    """Serialize a SessionConfig to a JSON string.

    Enum fields are written as their string values. Sorted keys and 2-space
    indent keep the output diffable.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> SessionConfig:
    """Deserialize a JSON string to a SessionConfig.

    Uses dacite with strict=True to reject unknown keys, and casts strings
    back to GenerationMode / MultiplyType and lists back to tuples.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: SessionConfig) -> dict[str, Any]:
    """Convert a SessionConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> SessionConfig:
    """Reconstruct a SessionConfig from a plain dictionary."""
    return from_dict(data_class=SessionConfig, data=d, config=_DACITE_CONFIG)
