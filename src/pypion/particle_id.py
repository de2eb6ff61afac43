"""Particle identity value type.

Codes follow the PDG numbering scheme. Nuclei are encoded as
``1000000000 + 10000 * Z + 10 * A``; antiparticles carry a negative sign.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class ParticleId:
    """Immutable wrapper around a PDG particle code."""

    code: int

    @classmethod
    def nucleus(cls, mass_number: int, charge_number: int) -> "ParticleId":
        A = int(mass_number)
        Z = int(charge_number)
        if A < 1:
            raise ValueError(f"mass number must be >= 1, got {A}")
        if Z < 0 or Z > A:
            raise ValueError(f"charge number must be within [0, {A}], got {Z}")
        return cls(C.PDG_NUCLEUS_BASE + 10000 * Z + 10 * A)

    @property
    def is_nucleus(self) -> bool:
        code = abs(self.code)
        if not C.PDG_NUCLEUS_BASE < code < C.PDG_NUCLEUS_LIMIT:
            return False
        # bare nucleons count as A = 1 nuclei
        return (code // 10) % 1000 >= 1

    @property
    def mass_number(self) -> int:
        if not self.is_nucleus:
            return 0
        return (abs(self.code) // 10) % 1000

    @property
    def charge_number(self) -> int:
        if not self.is_nucleus:
            return 0
        return (abs(self.code) // 10000) % 1000

    @property
    def sign(self) -> int:
        return 1 if self.code > 0 else -1

    @property
    def is_antiparticle(self) -> bool:
        return self.code < 0

    def signed(self, sign: int) -> "ParticleId":
        """Return this id multiplied by ``sign`` (+1 keeps it, -1 conjugates it)."""
        return ParticleId(int(sign) * self.code)

    def __neg__(self) -> "ParticleId":
        return ParticleId(-self.code)

    def __int__(self) -> int:
        return self.code

    def __str__(self) -> str:
        if self.is_nucleus:
            bar = "anti-" if self.is_antiparticle else ""
            return f"{bar}nucleus(A={self.mass_number}, Z={self.charge_number})"
        return f"pdg({self.code})"


PROTON = ParticleId.nucleus(1, 1)
NEUTRON = ParticleId.nucleus(1, 0)
PHOTON = ParticleId(C.PDG_PHOTON)
ELECTRON = ParticleId(C.PDG_ELECTRON)
POSITRON = ParticleId(-C.PDG_ELECTRON)
NU_E = ParticleId(C.PDG_NU_E)
ANTINU_E = ParticleId(-C.PDG_NU_E)
NU_MU = ParticleId(C.PDG_NU_MU)
ANTINU_MU = ParticleId(-C.PDG_NU_MU)


def nuclear_mass(pid: ParticleId) -> float:
    """Rest mass in kg.

    Bare nucleons use the measured proton/neutron masses; heavier nuclei are
    approximated by ``A`` atomic mass units.
    """
    if pid.is_nucleus:
        A = pid.mass_number
        if A == 1:
            return C.mass_proton if pid.charge_number == 1 else C.mass_neutron
        return A * C.amu
    if abs(pid.code) == C.PDG_ELECTRON:
        return C.mass_electron
    if abs(pid.code) in (C.PDG_PHOTON, C.PDG_NU_E, C.PDG_NU_MU):
        return 0.0
    raise ValueError(f"No mass known for particle code {pid.code}")
