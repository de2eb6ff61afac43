"""Shared fixtures for the photo-pion tests."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from pathlib import Path

from pypion.candidate import Secondary
from pypion.event_generator import OutgoingParticle
from pypion.particle_id import ParticleId

# log10(gamma), proton rate, neutron rate [1/Mpc]
CMB_TABLE = """\
# photo-pion interaction rates on the CMB
# log10(gamma) proton neutron
10.0 0.0 0.0
10.5 0.1 0.2
11.0 1.0 2.0
11.5 2.0 4.0
12.0 4.0 8.0
"""

# redshift, log10(gamma), proton rate, neutron rate [1/Mpc]
IRBZ_TABLE = """\
# redshift-dependent IRB rates
0.0 10.0 0.0 0.0
0.0 11.0 1.0 2.0
0.0 12.0 2.0 4.0
1.0 10.0 0.0 0.0
1.0 11.0 3.0 6.0
1.0 12.0 6.0 12.0
"""


def write_tables(directory: str | Path) -> Path:
    path = Path(directory)
    (path / "ppp_CMB.txt").write_text(CMB_TABLE)
    (path / "ppp_IRBz_Kneiske04.txt").write_text(IRBZ_TABLE)
    (path / "ppp_IRB_Kneiske04.txt").write_text(CMB_TABLE)
    return path


class ScriptedRng:
    """Uniform deviate source replaying a fixed sequence."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        if not self.values:
            raise AssertionError("ran out of scripted deviates")
        self.calls += 1
        return self.values.pop(0)


class ScriptedGenerator:
    """Event generator returning a fixed product list and recording its calls."""

    def __init__(self, products):
        self.products = [OutgoingParticle(code, energy) for code, energy in products]
        self.calls = []

    def sample_event(self, nature, energy, redshift, background, max_redshift):
        self.calls.append((nature, energy, redshift, background, max_redshift))
        return list(self.products)


@dataclass
class FixedGammaState:
    """Particle state with a Lorentz factor that does not follow the energy."""

    particle_id: ParticleId
    energy: float
    lorentz_factor: float
    redshift: float = 0.0
    current_step: float = 0.0
    next_step: float = math.inf
    secondaries: list = field(default_factory=list)

    def limit_next_step(self, step: float) -> None:
        self.next_step = min(self.next_step, step)

    def add_secondary(self, particle_id: ParticleId, energy: float) -> None:
        self.secondaries.append(Secondary(particle_id, energy))
