"""Linear interpolation kernels on tabulated grids (NumPy reference path)."""

from __future__ import annotations

from typing import Tuple

import numpy as np


def _bracket(grid: np.ndarray, x: float) -> Tuple[int, int, float]:
    """Lower/upper indices and fractional position of ``x`` inside ``grid``."""
    n = len(grid)
    if n == 1:
        return 0, 0, 0.0
    i = int(np.searchsorted(grid, x, side="right")) - 1
    i = int(np.clip(i, 0, n - 2))
    x0, x1 = grid[i], grid[i + 1]
    t = 0.0 if x1 == x0 else (x - x0) / (x1 - x0)
    return i, i + 1, float(t)


def interpolate(x: float, xs: np.ndarray, ys: np.ndarray) -> float:
    """Linear interpolation clamped to the end values outside ``xs``."""
    if x <= xs[0]:
        return float(ys[0])
    if x >= xs[-1]:
        return float(ys[len(xs) - 1])
    i0, i1, t = _bracket(xs, x)
    return float(ys[i0] + (ys[i1] - ys[i0]) * t)


def interpolate2d(
    x: float,
    y: float,
    xs: np.ndarray,
    ys: np.ndarray,
    zs: np.ndarray,
) -> float:
    """Bilinear interpolation on a row-major grid ``zs[i * len(ys) + j]``.

    Returns 0 outside the grid.
    """
    if x < xs[0] or x > xs[-1] or y < ys[0] or y > ys[-1]:
        return 0.0
    ny = len(ys)
    i0, i1, tx = _bracket(xs, x)
    j0, j1, ty = _bracket(ys, y)
    q00 = zs[i0 * ny + j0]
    q01 = zs[i0 * ny + j1]
    q10 = zs[i1 * ny + j0]
    q11 = zs[i1 * ny + j1]
    return float(
        q00 * (1 - tx) * (1 - ty)
        + q10 * tx * (1 - ty)
        + q01 * (1 - tx) * ty
        + q11 * tx * ty
    )
