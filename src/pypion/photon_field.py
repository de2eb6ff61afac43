"""Photon background models and their cosmological density evolution."""

from __future__ import annotations

from enum import Enum

import numpy as np

from . import constants as C
from .interpolation import interpolate


class PhotonField(Enum):
    CMB = "CMB"
    IRB = "IRB"
    IRB_Kneiske04 = "IRB_Kneiske04"
    IRB_Kneiske10 = "IRB_Kneiske10"
    IRB_Stecker05 = "IRB_Stecker05"
    IRB_Franceschini08 = "IRB_Franceschini08"
    IRB_withRedshift_Kneiske04 = "IRB_withRedshift_Kneiske04"

    @classmethod
    def parse(cls, value: "PhotonField | str") -> "PhotonField":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        raise ValueError(f"PhotoPionProduction: unknown photon background {value!r}")

    @property
    def filename(self) -> str:
        return _FIELD_FILES[self][0]

    @property
    def description(self) -> str:
        return _FIELD_FILES[self][1]

    @property
    def redshift_dependent(self) -> bool:
        return self is PhotonField.IRB_withRedshift_Kneiske04

    @property
    def generator_code(self) -> int:
        return C.GEN_BACKGROUND_CMB if self is PhotonField.CMB else C.GEN_BACKGROUND_IRB


# IRB without a version tag is the Kneiske '04 model.
_FIELD_FILES: dict[PhotonField, tuple[str, str]] = {
    PhotonField.CMB: ("ppp_CMB.txt", "PhotoPionProduction: CMB"),
    PhotonField.IRB: ("ppp_IRB_Kneiske04.txt", "PhotoPionProduction: IRB Kneiske '04"),
    PhotonField.IRB_Kneiske04: ("ppp_IRB_Kneiske04.txt", "PhotoPionProduction: IRB Kneiske '04"),
    PhotonField.IRB_Kneiske10: (
        "ppp_IRB_Kneiske10.txt",
        "PhotoPionProduction: IRB Kneiske '10 (lower limit)",
    ),
    PhotonField.IRB_Stecker05: ("ppp_IRB_Stecker05.txt", "PhotoPionProduction: IRB Stecker '05"),
    PhotonField.IRB_Franceschini08: (
        "ppp_IRB_Franceschini08.txt",
        "PhotoPionProduction: IRB Franceschini '08",
    ),
    PhotonField.IRB_withRedshift_Kneiske04: (
        "ppp_IRBz_Kneiske04.txt",
        "PhotoPionProduction: IRB with redshift Kneiske '04",
    ),
}

# Overall comoving density evolution of the Kneiske et al. 2004 IRB (astro-ph/0309141).
_KNEISKE_REDSHIFTS = np.array([0.0, 0.2, 0.4, 0.6, 1.0, 2.0, 3.0, 4.0, 5.0])
_KNEISKE_SCALING = np.array([1.0, 1.6937, 2.5885, 3.6178, 5.1980, 7.3871, 8.5471, 7.8605, 0.0])


def photon_field_scaling(field: PhotonField, z: float) -> float:
    """Photon number density at redshift ``z`` relative to today (comoving)."""
    if field is PhotonField.CMB:
        return 1.0
    return interpolate(z, _KNEISKE_REDSHIFTS, _KNEISKE_SCALING)
