"""Build graphs from a SessionConfig.

Kept out of adjpower.graph's package exports because the config layer
itself depends on adjpower.graph.
"""

import numpy as np

from adjpower.config.settings import SessionConfig
from adjpower.graph.graph import Graph


def generate_graph(
    config: SessionConfig, rng: np.random.Generator | None = None
) -> Graph:
    """Generate the session graph.

    Without an explicit rng the Generator is seeded from config.seed, so the
    same config always produces the same matrix.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)
    return Graph(
        config.graph.size,
        config.graph.edge_number,
        config.graph.mode,
        rng=rng,
        max_retries=config.graph.max_retries,
    )
