"""Tests for the session configuration system."""

import json
from dataclasses import FrozenInstanceError, replace

import numpy as np
import pytest
from dacite import UnexpectedDataError

from adjpower.algebra import MultiplyType
from adjpower.config import (
    DEFAULT_CONFIG,
    ExerciseConfig,
    GraphConfig,
    SessionConfig,
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)
from adjpower.graph import GenerationMode
from adjpower.graph.factory import generate_graph


class TestDefaultConfig:
    """DEFAULT_CONFIG has the widget's out-of-the-box values."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.graph.size == 5
        assert DEFAULT_CONFIG.graph.edge_number == 7
        assert DEFAULT_CONFIG.graph.mode is GenerationMode.DEFAULT
        assert DEFAULT_CONFIG.exercise.operation is MultiplyType.CLASSIC
        assert DEFAULT_CONFIG.exercise.max_power == 4
        assert DEFAULT_CONFIG.seed == 42


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_graph_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.graph.size = 10  # type: ignore[misc]


class TestConfigValidation:
    """Cross-field checks in __post_init__."""

    def test_too_many_edges(self):
        with pytest.raises(ValueError, match="exceeds the maximum"):
            GraphConfig(size=3, edge_number=4, mode=GenerationMode.ASYMMETRICAL)

    def test_too_few_edges(self):
        with pytest.raises(ValueError, match="single component"):
            GraphConfig(size=6, edge_number=2)

    def test_negative_size(self):
        with pytest.raises(ValueError, match="size"):
            GraphConfig(size=-1, edge_number=0)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            GraphConfig(mode="SPARSE")  # type: ignore[arg-type]

    def test_max_retries_positive(self):
        with pytest.raises(ValueError, match="max_retries"):
            GraphConfig(max_retries=0)

    def test_max_power_at_least_two(self):
        with pytest.raises(ValueError, match="max_power"):
            ExerciseConfig(max_power=1)


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves values and enum types."""

    def test_round_trip_equal(self):
        cfg = SessionConfig(
            graph=GraphConfig(size=4, edge_number=5, mode=GenerationMode.SYMMETRICAL),
            exercise=ExerciseConfig(operation=MultiplyType.TROPICAL, max_power=3),
            seed=7,
            tags=("demo",),
        )
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg

    def test_enums_restored(self):
        cfg = replace(
            DEFAULT_CONFIG,
            graph=GraphConfig(size=4, edge_number=4, mode=GenerationMode.ANTISYMMETRICAL),
        )
        restored = config_from_json(config_to_json(cfg))
        assert restored.graph.mode is GenerationMode.ANTISYMMETRICAL
        assert restored.exercise.operation is MultiplyType.CLASSIC

    def test_json_uses_enum_values(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        assert data["graph"]["mode"] == "DEFAULT"
        assert data["exercise"]["operation"] == "classic"

    def test_tags_restored_as_tuple(self):
        cfg = replace(DEFAULT_CONFIG, tags=("a", "b"))
        restored = config_from_json(config_to_json(cfg))
        assert restored.tags == ("a", "b")

    def test_dict_round_trip(self):
        assert config_from_dict(config_to_dict(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_unknown_key_rejected(self):
        data = config_to_dict(DEFAULT_CONFIG)
        data["graph"]["density"] = 0.5
        with pytest.raises(UnexpectedDataError):
            config_from_dict(data)

    def test_invalid_values_rejected_on_load(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["graph"]["edge_number"] = 100
        with pytest.raises(ValueError):
            config_from_json(json.dumps(data))


class TestGenerateGraph:
    """Building the session graph from a config."""

    def test_graph_matches_config(self):
        cfg = SessionConfig(
            graph=GraphConfig(size=4, edge_number=5, mode=GenerationMode.SYMMETRICAL)
        )
        graph = generate_graph(cfg)
        assert graph.size == 4
        assert graph.count_edges() == 5
        assert graph.gen_type is GenerationMode.SYMMETRICAL
        assert graph.connected_components == 1

    def test_same_seed_same_graph(self):
        g1 = generate_graph(DEFAULT_CONFIG)
        g2 = generate_graph(DEFAULT_CONFIG)
        np.testing.assert_array_equal(g1.matrix, g2.matrix)

    def test_different_seed_different_graph(self):
        graphs = {
            generate_graph(replace(DEFAULT_CONFIG, seed=s)).matrix.tobytes()
            for s in range(5)
        }
        assert len(graphs) > 1
