"""Configuration for the photo-pion production module."""

from __future__ import annotations

from dataclasses import dataclass
import math
from pathlib import Path

from .backends.factory import BACKENDS
from .constants import DEFAULT_LIMIT, DEFAULT_MAX_REDSHIFT
from .photon_field import PhotonField


@dataclass(frozen=True)
class ProcessConfig:
    """Snapshot of the user-controlled photo-pion parameters."""

    photon_field: PhotonField = PhotonField.CMB
    have_photons: bool = False
    have_neutrinos: bool = False
    have_antinucleons: bool = False
    limit: float = DEFAULT_LIMIT
    max_redshift: float = DEFAULT_MAX_REDSHIFT
    backend: str = "auto"
    data_dir: Path | None = None
    enable_table_cache: bool = False
    table_cache_dir: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "photon_field", PhotonField.parse(self.photon_field))
        for name in ("have_photons", "have_neutrinos", "have_antinucleons"):
            object.__setattr__(self, name, bool(getattr(self, name)))
        limit = float(self.limit)
        if not math.isfinite(limit) or limit <= 0.0:
            raise ValueError("limit must be finite and > 0")
        object.__setattr__(self, "limit", limit)
        if not float(self.max_redshift) > 0.0:
            raise ValueError("max_redshift must be > 0")
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: " + ", ".join(BACKENDS))
        if self.data_dir is not None and str(self.data_dir).strip() == "":
            raise ValueError("data_dir cannot be empty")
