"""Adjacency-matrix graph engine with classic, logical and tropical matrix powers."""

from adjpower.algebra import MultiplyType
from adjpower.graph import GenerationMode, Graph, GraphStats

__version__ = "0.1.0"

__all__ = [
    "GenerationMode",
    "Graph",
    "GraphStats",
    "MultiplyType",
]
