"""Numba-accelerated interpolation backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _bracket_numba(grid: np.ndarray, x: float) -> tuple[int, int, float]:
        n = len(grid)
        if n == 1:
            return 0, 0, 0.0
        # upper bound: first index with grid[k] > x
        lo = 0
        hi = n
        while lo < hi:
            mid = (lo + hi) // 2
            if grid[mid] > x:
                hi = mid
            else:
                lo = mid + 1
        i = lo - 1
        if i < 0:
            i = 0
        if i > n - 2:
            i = n - 2
        x0 = grid[i]
        x1 = grid[i + 1]
        t = 0.0
        if x1 != x0:
            t = (x - x0) / (x1 - x0)
        return i, i + 1, t

    @njit(cache=True)
    def _interpolate_numba(x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        if x <= xs[0]:
            return ys[0]
        if x >= xs[len(xs) - 1]:
            return ys[len(xs) - 1]
        i0, i1, t = _bracket_numba(xs, x)
        return ys[i0] + (ys[i1] - ys[i0]) * t

    @njit(cache=True)
    def _interpolate2d_numba(x: float, y: float, xs: np.ndarray, ys: np.ndarray, zs: np.ndarray) -> float:
        if x < xs[0] or x > xs[len(xs) - 1] or y < ys[0] or y > ys[len(ys) - 1]:
            return 0.0
        ny = len(ys)
        i0, i1, tx = _bracket_numba(xs, x)
        j0, j1, ty = _bracket_numba(ys, y)
        return (
            zs[i0 * ny + j0] * (1.0 - tx) * (1.0 - ty)
            + zs[i1 * ny + j0] * tx * (1.0 - ty)
            + zs[i0 * ny + j1] * (1.0 - tx) * ty
            + zs[i1 * ny + j1] * tx * ty
        )

    # Prime JIT cache once to avoid a latency spike on the first propagation step.
    _grid = np.array([0.0, 1.0], dtype=np.float64)
    _interpolate_numba(0.5, _grid, _grid)
    _interpolate2d_numba(0.5, 0.5, _grid, _grid, np.zeros(4, dtype=np.float64))


@dataclass(frozen=True)
class NumbaBackend:
    name: str = "numba"

    def interpolate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        return float(_interpolate_numba(float(x), xs, ys))

    def interpolate2d(self, x: float, y: float, xs: np.ndarray, ys: np.ndarray, zs: np.ndarray) -> float:
        return float(_interpolate2d_numba(float(x), float(y), xs, ys, zs))


def build_numba_backend():
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaBackend()
