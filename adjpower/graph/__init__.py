"""Adjacency-matrix graph model: generation, connectivity and classification."""

from adjpower.graph.classification import classify
from adjpower.graph.connectivity import (
    bfs,
    count_components,
    neighbors,
    strong_components,
    weak_components,
)
from adjpower.graph.generation import (
    DEFAULT_MAX_RETRIES,
    GraphGenerationError,
    InvalidGenerationMode,
    generate_adjacency,
    max_edges,
    min_edges,
    parse_mode,
    sample_adjacency,
    validate_request,
)
from adjpower.graph.graph import Graph, HiddenCellsError, count_edges, count_weights
from adjpower.graph.types import GenerationMode, GraphStats

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "GenerationMode",
    "Graph",
    "GraphGenerationError",
    "GraphStats",
    "HiddenCellsError",
    "InvalidGenerationMode",
    "bfs",
    "classify",
    "count_components",
    "count_edges",
    "count_weights",
    "generate_adjacency",
    "max_edges",
    "min_edges",
    "neighbors",
    "parse_mode",
    "sample_adjacency",
    "strong_components",
    "validate_request",
    "weak_components",
]
