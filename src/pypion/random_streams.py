"""Independent random streams for concurrent particle processing."""

from __future__ import annotations

import numpy as np


def spawn_rngs(seed: int | None, n: int) -> list[np.random.Generator]:
    """Return ``n`` statistically independent generators derived from ``seed``.

    ``numpy.random.Generator`` is not safe for concurrent draws; give each
    worker its own stream.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    children = np.random.SeedSequence(seed).spawn(int(n))
    return [np.random.default_rng(child) for child in children]
