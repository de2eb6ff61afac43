"""Propagated particle state consumed by the interaction module."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Protocol

from . import constants as C
from .particle_id import ParticleId, nuclear_mass


class ParticleState(Protocol):
    """Everything ``PhotoPionProduction`` reads from or writes to a particle."""

    particle_id: ParticleId
    energy: float
    redshift: float
    current_step: float

    @property
    def lorentz_factor(self) -> float:
        ...

    def limit_next_step(self, step: float) -> None:
        ...

    def add_secondary(self, particle_id: ParticleId, energy: float) -> None:
        ...


@dataclass
class Secondary:
    particle_id: ParticleId
    energy: float


@dataclass
class Candidate:
    """Mutable particle state for a single adaptive propagation step."""

    particle_id: ParticleId
    energy: float
    redshift: float = 0.0
    current_step: float = 0.0
    next_step: float = math.inf
    secondaries: list[Secondary] = field(default_factory=list)

    @property
    def mass(self) -> float:
        return nuclear_mass(self.particle_id)

    @property
    def lorentz_factor(self) -> float:
        return self.energy / (self.mass * C.c_light**2)

    @lorentz_factor.setter
    def lorentz_factor(self, gamma: float) -> None:
        self.energy = float(gamma) * self.mass * C.c_light**2

    def limit_next_step(self, step: float) -> None:
        self.next_step = min(self.next_step, float(step))

    def add_secondary(self, particle_id: ParticleId, energy: float) -> None:
        self.secondaries.append(Secondary(particle_id=particle_id, energy=float(energy)))
