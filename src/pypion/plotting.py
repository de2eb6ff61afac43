"""Plots of photo-pion energy-loss lengths."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from .constants import Mpc
from .diagnostics import loss_length_curve
from .particle_id import ParticleId


def create_loss_length_plot(
    module,
    particle_ids: list[ParticleId],
    output: str | Path,
    *,
    redshift: float = 0.0,
    points: int = 200,
) -> str:
    """Write a loss length vs. Lorentz factor plot for each species to ``output``.

    Returns the written file path.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("Plotting requires matplotlib") from exc

    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(7, 4))
    for pid in particle_ids:
        gammas, lengths = loss_length_curve(module, pid, redshift=redshift, points=points)
        finite = np.isfinite(lengths)
        ax.plot(gammas[finite], lengths[finite] / Mpc, lw=1.8, label=str(pid))
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Lorentz factor")
    ax.set_ylabel("Energy loss length [Mpc]")
    ax.set_title(f"{module.description} (z = {redshift:g})")
    ax.grid(alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return str(out)
