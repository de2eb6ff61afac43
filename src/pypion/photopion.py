"""Photo-pion production of nucleons and nuclei on background photon fields.

Interaction distances are sampled per adaptive step from tabulated
interaction rates. For nuclei the single-nucleon rates of the proton and
neutron channel are scaled with :func:`~pypion.nuclear.nuclei_modification`
and an exponential free path is drawn for each channel; the shorter one wins.
Interactions are simulated by an external event generator that only knows
protons and neutrons. Antiparticles are handled through charge symmetry: all
products of an antimatter primary are conjugated.
"""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum
import logging
import math
from pathlib import Path
from typing import NamedTuple

import numpy as np

from . import constants as C
from .backends.factory import build_backend
from .candidate import ParticleState
from .config import ProcessConfig
from .event_generator import (
    GENERATOR_LOCK,
    NATURE_NEUTRON,
    NATURE_PROTON,
    EventGenerator,
    ResonanceEventGenerator,
)
from .io_routines import RateTableIO
from .nuclear import nuclei_modification
from .particle_id import ANTINU_E, ANTINU_MU, ELECTRON, NU_E, NU_MU, PHOTON, POSITRON, ParticleId
from .photon_field import PhotonField, photon_field_scaling
from .rate_tables import RateTable

logger = logging.getLogger(__name__)

_NEUTRINOS = {
    C.GEN_NU_E: NU_E,
    C.GEN_ANTINU_E: ANTINU_E,
    C.GEN_NU_MU: NU_MU,
    C.GEN_ANTINU_MU: ANTINU_MU,
}


class Channel(IntEnum):
    """Kind of target nucleon hit by the photon."""

    NEUTRON = 0
    PROTON = 1


class UnexpectedParticleError(RuntimeError):
    """The event generator returned a particle code this module cannot map."""


class ChannelDraw(NamedTuple):
    channel: Channel
    rate: float       # 1/m
    distance: float   # m


def _free_path(rate: float, u: float) -> float:
    if rate <= 0.0 or u <= 0.0:
        return math.inf
    return -math.log(u) / rate


class PhotoPionProduction:
    """Stochastic photo-pion production for a single propagation module.

    Parameters
    ----------
    photon_field : PhotonField or str
        Background photon model.
    have_photons, have_neutrinos, have_antinucleons : bool
        Emit electromagnetic, neutrino and antinucleon secondaries.
    limit : float
        Maximum fraction of the mean free path allowed as next step.
    data_dir : path, optional
        Directory holding the ``ppp_*.txt`` rate tables.
    generator : EventGenerator, optional
        Photon-nucleon event generator; defaults to
        :class:`~pypion.event_generator.ResonanceEventGenerator`.
    rng : numpy.random.Generator, optional
        Source of uniform deviates for free-path sampling.
    backend : {"auto", "numpy", "numba"}
        Interpolation kernels.
    io : RateTableIO, optional
        Table loader; built from ``data_dir`` and the cache options if omitted.

    Notes
    -----
    ``rng`` is shared by every ``process`` call that does not pass its own
    generator, and ``numpy.random.Generator`` is not safe for concurrent
    draws. Threaded callers should give each worker a generator from
    :func:`~pypion.random_streams.spawn_rngs` and pass it to ``process``.
    """

    def __init__(
        self,
        photon_field: PhotonField | str = PhotonField.CMB,
        have_photons: bool = False,
        have_neutrinos: bool = False,
        have_antinucleons: bool = False,
        limit: float = C.DEFAULT_LIMIT,
        *,
        data_dir: str | Path | None = None,
        generator: EventGenerator | None = None,
        rng: np.random.Generator | None = None,
        backend: str = "auto",
        io: RateTableIO | None = None,
        enable_table_cache: bool = False,
        table_cache_dir: str | Path | None = None,
    ) -> None:
        self._config = ProcessConfig(
            photon_field=photon_field,
            have_photons=have_photons,
            have_neutrinos=have_neutrinos,
            have_antinucleons=have_antinucleons,
            limit=limit,
            backend=backend,
            data_dir=Path(data_dir) if data_dir is not None else None,
            enable_table_cache=enable_table_cache,
            table_cache_dir=Path(table_cache_dir) if table_cache_dir is not None else None,
        )
        if io is None:
            io = RateTableIO(
                data_dir=self._config.data_dir,
                enable_table_cache=self._config.enable_table_cache,
                table_cache_dir=self._config.table_cache_dir,
            )
        self.io = io
        self.rng = rng if rng is not None else np.random.default_rng()
        self.generator = generator if generator is not None else ResonanceEventGenerator()
        self._kernels = build_backend(self._config.backend)
        self._table = self.io.load_rate_table(self._config.photon_field)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description!r} backend={self._kernels.name}>"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> ProcessConfig:
        return self._config

    @property
    def table(self) -> RateTable:
        return self._table

    @property
    def description(self) -> str:
        return self._config.photon_field.description

    @property
    def photon_field(self) -> PhotonField:
        return self._config.photon_field

    def set_photon_field(self, photon_field: PhotonField | str) -> None:
        """Switch the photon background; the new table is loaded before the swap."""
        config = replace(self._config, photon_field=photon_field)
        table = self.io.load_rate_table(config.photon_field)
        self._config, self._table = config, table
        logger.debug("Switched to %s", config.photon_field.description)

    def set_have_photons(self, flag: bool) -> None:
        self._config = replace(self._config, have_photons=flag)

    def set_have_neutrinos(self, flag: bool) -> None:
        self._config = replace(self._config, have_neutrinos=flag)

    def set_have_antinucleons(self, flag: bool) -> None:
        self._config = replace(self._config, have_antinucleons=flag)

    def set_limit(self, limit: float) -> None:
        self._config = replace(self._config, limit=limit)

    # ------------------------------------------------------------------
    # Rates
    # ------------------------------------------------------------------

    def channel_rates(
        self, particle_id: ParticleId, gamma: float, z: float
    ) -> list[tuple[Channel, float]]:
        """Interaction rates [1/m] of the open channels at boosted Lorentz factor ``gamma``.

        The proton channel comes first when both are open.
        """
        table = self._table
        kernels = self._kernels
        A = particle_id.mass_number
        Z = particle_id.charge_number
        N = A - Z

        # cosmological scaling of the comoving interaction rate
        scaling = (1.0 + z) ** 2 * photon_field_scaling(self._config.photon_field, z)

        def rate(tab: np.ndarray) -> float:
            if table.redshift_dependent:
                return kernels.interpolate2d(z, gamma, table.redshifts, table.lorentz, tab)
            return scaling * kernels.interpolate(gamma, table.lorentz, tab)

        rates = []
        if Z > 0:
            rates.append((Channel.PROTON, rate(table.proton_rate) * nuclei_modification(A, Z)))
        if N > 0:
            rates.append((Channel.NEUTRON, rate(table.neutron_rate) * nuclei_modification(A, N)))
        return rates

    @staticmethod
    def closest_interaction(draws: list[ChannelDraw]) -> ChannelDraw | None:
        """Draw with the shortest distance; on equal distances the later draw wins."""
        best = None
        for draw in draws:
            if best is None or draw.distance <= best.distance:
                best = draw
        return best

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def process(self, candidate: ParticleState, rng: np.random.Generator | None = None) -> None:
        """Sample and apply interactions within the candidate's current step.

        Runs at least once so the next step is always limited when no
        interaction happens.
        """
        rng = self.rng if rng is None else rng
        step = candidate.current_step
        while True:
            particle_id = candidate.particle_id
            if not particle_id.is_nucleus:
                return

            z = candidate.redshift
            gamma = (1.0 + z) * candidate.lorentz_factor
            if not self._table.in_range(gamma):
                return

            draws = [
                ChannelDraw(channel, rate, _free_path(rate, rng.random()))
                for channel, rate in self.channel_rates(particle_id, gamma, z)
            ]
            chosen = self.closest_interaction(draws)
            if chosen is None or math.isinf(chosen.distance) or step < chosen.distance:
                total_rate = sum(draw.rate for draw in draws)
                candidate.limit_next_step(
                    self._config.limit / total_rate if total_rate > 0.0 else math.inf
                )
                return

            self.perform_interaction(candidate, chosen.channel)
            step -= chosen.distance
            if step <= 0.0:
                return

    def perform_interaction(self, candidate: ParticleState, channel: Channel | int) -> None:
        """Run the event generator for one photon-nucleon collision and apply its output."""
        channel = Channel(channel)
        config = self._config
        particle_id = candidate.particle_id
        A = particle_id.mass_number
        Z = particle_id.charge_number
        E = candidate.energy
        EpA = E / A
        sign = particle_id.sign
        nature = NATURE_PROTON if channel is Channel.PROTON else NATURE_NEUTRON

        with GENERATOR_LOCK:
            products = list(
                self.generator.sample_event(
                    nature,
                    EpA / C.GeV,
                    candidate.redshift,
                    config.photon_field.generator_code,
                    config.max_redshift,
                )
            )

        for code, e_gev in products:
            e_out = e_gev * C.GeV
            if code in (C.GEN_PROTON, C.GEN_NEUTRON):
                nucleon = ParticleId.nucleus(1, int(code == C.GEN_PROTON)).signed(sign)
                if A == 1:
                    candidate.energy = e_out
                    candidate.particle_id = nucleon
                else:
                    # the interacting nucleon is knocked out of the nucleus
                    candidate.energy = E - EpA
                    candidate.particle_id = ParticleId.nucleus(A - 1, Z - int(channel)).signed(sign)
                    candidate.add_secondary(nucleon, e_out)
            elif code in (C.GEN_ANTIPROTON, C.GEN_ANTINEUTRON):
                if config.have_antinucleons:
                    antinucleon = ParticleId.nucleus(1, int(code == C.GEN_ANTIPROTON))
                    candidate.add_secondary(antinucleon.signed(-sign), e_out)
            elif code == C.GEN_PHOTON:
                if config.have_photons:
                    candidate.add_secondary(PHOTON, e_out)
            elif code == C.GEN_POSITRON:
                if config.have_photons:
                    candidate.add_secondary(POSITRON.signed(sign), e_out)
            elif code == C.GEN_ELECTRON:
                if config.have_photons:
                    candidate.add_secondary(ELECTRON.signed(sign), e_out)
            elif code in _NEUTRINOS:
                if config.have_neutrinos:
                    candidate.add_secondary(_NEUTRINOS[code].signed(sign), e_out)
            else:
                raise UnexpectedParticleError(f"PhotoPionProduction: unexpected particle {code}")

    def loss_length(self, particle_id: ParticleId | int, gamma: float, z: float = 0.0) -> float:
        """Mean energy-loss length [m]; ``math.inf`` outside the tabulated range."""
        if not isinstance(particle_id, ParticleId):
            particle_id = ParticleId(int(particle_id))
        if not particle_id.is_nucleus:
            return math.inf
        A = particle_id.mass_number
        Z = particle_id.charge_number
        N = A - Z
        table = self._table
        kernels = self._kernels

        gamma *= 1.0 + z
        if not table.in_range(gamma):
            return math.inf

        # NOTE: both terms are weighted with the proton-channel rate.
        loss_rate = 0.0
        if Z > 0:
            loss_rate += kernels.interpolate(gamma, table.lorentz, table.proton_rate) * nuclei_modification(A, Z)
        if N > 0:
            loss_rate += kernels.interpolate(gamma, table.lorentz, table.proton_rate) * nuclei_modification(A, N)

        # nucleons keep m_N / m_Delta of their energy, nuclei lose about one nucleon's share
        if A == 1:
            relative_energy_loss = 1.0 - C.NUCLEON_MASS_MEV / C.DELTA_MASS_MEV
        else:
            relative_energy_loss = 1.0 / A
        loss_rate *= relative_energy_loss

        loss_rate *= (1.0 + z) ** 3 * photon_field_scaling(self._config.photon_field, z)
        if loss_rate <= 0.0:
            return math.inf
        return 1.0 / loss_rate
