"""Backend protocol for table interpolation kernels."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class InterpolationBackend(Protocol):
    name: str

    def interpolate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        ...

    def interpolate2d(self, x: float, y: float, xs: np.ndarray, ys: np.ndarray, zs: np.ndarray) -> float:
        ...
