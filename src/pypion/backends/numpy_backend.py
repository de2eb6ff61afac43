"""Default NumPy backend for interpolation kernels."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..interpolation import interpolate, interpolate2d


@dataclass(frozen=True)
class NumpyBackend:
    name: str = "numpy"

    def interpolate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        return interpolate(x, xs, ys)

    def interpolate2d(self, x: float, y: float, xs: np.ndarray, ys: np.ndarray, zs: np.ndarray) -> float:
        return interpolate2d(x, y, xs, ys, zs)


def build_numpy_backend():
    return NumpyBackend()
