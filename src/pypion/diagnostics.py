"""Consistency checks for loaded rate tables."""

from __future__ import annotations

import numpy as np

from .rate_tables import RateTable


def _strictly_increasing(values: np.ndarray) -> bool:
    return bool(np.all(np.diff(values) > 0.0))


def table_diagnostics(table: RateTable) -> dict:
    nz, ngamma, nproton, nneutron = table.shape
    slices = nz if table.redshift_dependent else 1
    checks = {
        "lorentz_nonempty": ngamma > 0,
        "lorentz_increasing": _strictly_increasing(table.lorentz),
        "redshifts_increasing": _strictly_increasing(table.redshifts),
        "rates_finite": bool(np.all(np.isfinite(table.proton_rate)) and np.all(np.isfinite(table.neutron_rate))),
        "rates_nonnegative": bool(np.all(table.proton_rate >= 0.0) and np.all(table.neutron_rate >= 0.0)),
        "rates_consistent": nproton == nneutron == slices * ngamma,
    }
    return {
        "n_redshifts": nz,
        "n_lorentz": ngamma,
        "n_proton_rate": nproton,
        "n_neutron_rate": nneutron,
        "lorentz_min": float(table.lorentz[0]) if ngamma else float("nan"),
        "lorentz_max": float(table.lorentz[-1]) if ngamma else float("nan"),
        "checks": checks,
        "all_checks_pass": bool(all(checks.values())),
    }


def loss_length_curve(module, particle_id, *, redshift: float = 0.0, points: int = 100):
    """Loss lengths [m] on a log-spaced Lorentz-factor grid inside the table range.

    Returns ``(gammas, lengths)``; the grid ends are nudged inwards because the
    loss length is infinite on the table edges.
    """
    if points < 2:
        raise ValueError("points must be >= 2")
    lo, hi = module.table.lorentz_range
    gammas = np.logspace(np.log10(lo), np.log10(hi), int(points)) / (1.0 + redshift)
    gammas[0] *= 1.0 + 1.0e-9
    gammas[-1] *= 1.0 - 1.0e-9
    lengths = np.array([module.loss_length(particle_id, float(g), redshift) for g in gammas])
    return gammas, lengths
