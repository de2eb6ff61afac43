"""Photon-nucleon event generators.

The interaction module hands the energy per nucleon of the interacting
nucleon to a generator and receives a list of outgoing particles. Generators
only simulate matter-side interactions of a proton or neutron. Native event
generators keep global state, so every call from the interaction module is
made while holding ``GENERATOR_LOCK``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import threading
from typing import NamedTuple, Protocol, Sequence

import numpy as np

from . import constants as C

GENERATOR_LOCK = threading.Lock()

NATURE_PROTON = 0
NATURE_NEUTRON = 1


class OutgoingParticle(NamedTuple):
    code: int       # event-generator particle code
    energy: float   # GeV


class EventGenerator(Protocol):
    def sample_event(
        self,
        nature: int,
        energy: float,
        redshift: float,
        background: int,
        max_redshift: float,
    ) -> Sequence[OutgoingParticle]:
        ...


@dataclass
class ResonanceEventGenerator:
    """Single-pion production through the Delta(1232) resonance.

    A crude stand-in for a full photo-hadronic event generator. The nucleon
    keeps the fraction ``m_N / m_Delta`` of its energy and the pion carries the
    rest. Isospin branching follows the Clebsch-Gordan weights:
    ``p -> p pi0`` (2/3) or ``n pi+`` (1/3), ``n -> n pi0`` (2/3) or ``p pi-`` (1/3).
    Neutral pions decay into two photons sharing the pion energy; charged pions
    decay through the muon chain into four leptons with a quarter each.

    ``redshift``, ``background`` and ``max_redshift`` do not affect the
    kinematics here; they are accepted to satisfy the generator interface.
    """

    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    neutral_fraction: float = 2.0 / 3.0

    def sample_event(
        self,
        nature: int,
        energy: float,
        redshift: float,
        background: int,
        max_redshift: float,
    ) -> list[OutgoingParticle]:
        if nature not in (NATURE_PROTON, NATURE_NEUTRON):
            raise ValueError(f"nature must be 0 (proton) or 1 (neutron), got {nature}")
        e_nucleon = energy * C.NUCLEON_MASS_MEV / C.DELTA_MASS_MEV
        e_pion = energy - e_nucleon
        neutral = self.rng.random() < self.neutral_fraction

        if neutral:
            nucleon = C.GEN_PROTON if nature == NATURE_PROTON else C.GEN_NEUTRON
            return [
                OutgoingParticle(nucleon, e_nucleon),
                OutgoingParticle(C.GEN_PHOTON, 0.5 * e_pion),
                OutgoingParticle(C.GEN_PHOTON, 0.5 * e_pion),
            ]

        if nature == NATURE_PROTON:
            # pi+ -> mu+ nu_mu, mu+ -> e+ nu_e anti-nu_mu
            nucleon = C.GEN_NEUTRON
            leptons = (C.GEN_NU_MU, C.GEN_POSITRON, C.GEN_NU_E, C.GEN_ANTINU_MU)
        else:
            # pi- -> mu- anti-nu_mu, mu- -> e- anti-nu_e nu_mu
            nucleon = C.GEN_PROTON
            leptons = (C.GEN_ANTINU_MU, C.GEN_ELECTRON, C.GEN_ANTINU_E, C.GEN_NU_MU)
        out = [OutgoingParticle(nucleon, e_nucleon)]
        out.extend(OutgoingParticle(code, 0.25 * e_pion) for code in leptons)
        return out
