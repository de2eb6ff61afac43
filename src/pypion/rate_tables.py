"""Immutable photo-pion interaction rate tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .constants import Mpc


@dataclass(frozen=True)
class RateTable:
    """Interaction rates [1/m] tabulated over nucleon Lorentz factor.

    For redshift-dependent fields the rate arrays hold one Lorentz-factor slice
    per redshift, flattened row-major (``rate[i_z * len(lorentz) + i_gamma]``).
    """

    redshifts: np.ndarray
    lorentz: np.ndarray
    proton_rate: np.ndarray
    neutron_rate: np.ndarray
    redshift_dependent: bool = False

    @property
    def shape(self) -> tuple[int, int, int, int]:
        return (
            len(self.redshifts),
            len(self.lorentz),
            len(self.proton_rate),
            len(self.neutron_rate),
        )

    @property
    def lorentz_range(self) -> tuple[float, float]:
        return float(self.lorentz[0]), float(self.lorentz[-1])

    def in_range(self, gamma: float) -> bool:
        """True if ``gamma`` lies strictly inside the tabulated Lorentz factors."""
        lo, hi = self.lorentz_range
        return lo < gamma < hi


def _parse_record(line: str, ncols: int) -> tuple[float, ...] | None:
    parts = line.split()
    if len(parts) < ncols:
        return None
    try:
        return tuple(float(p) for p in parts[:ncols])
    except ValueError:
        return None


def parse_rate_table(lines: Iterable[str], redshift_dependent: bool = False) -> RateTable:
    """Parse a plain-text rate table.

    Records are ``log10(gamma) proton_rate neutron_rate`` or, for
    redshift-dependent tables, ``z log10(gamma) proton_rate neutron_rate`` with
    rates in 1/Mpc. Lines starting with ``#`` and blank lines are skipped;
    parsing stops at the first record that cannot be read. Columns beyond the
    expected count are ignored, so annotated tables with trailing fields load.

    The Lorentz axis is only extended while the logged values do not decrease,
    so a grid repeated for every redshift slice is stored once.
    """
    ncols = 4 if redshift_dependent else 3
    redshifts: list[float] = []
    lorentz: list[float] = []
    proton: list[float] = []
    neutron: list[float] = []

    z_old = -1.0
    a_old = -1.0
    read_lorentz = True
    for raw in lines:
        if raw.startswith("#") or not raw.strip():
            continue
        record = _parse_record(raw, ncols)
        if record is None:
            break
        if redshift_dependent:
            z, a, b, c = record
            if z != z_old:
                redshifts.append(z)
            z_old = z
        else:
            a, b, c = record
        if a < a_old:
            read_lorentz = False
        if read_lorentz:
            lorentz.append(10.0**a)
        proton.append(b / Mpc)
        neutron.append(c / Mpc)
        a_old = a

    return RateTable(
        redshifts=np.asarray(redshifts, dtype=float),
        lorentz=np.asarray(lorentz, dtype=float),
        proton_rate=np.asarray(proton, dtype=float),
        neutron_rate=np.asarray(neutron, dtype=float),
        redshift_dependent=bool(redshift_dependent),
    )
