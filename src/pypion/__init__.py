"""Photo-pion production of cosmic-ray nucleons and nuclei on background photons."""

from . import constants
from .candidate import Candidate, ParticleState, Secondary
from .config import ProcessConfig
from .diagnostics import loss_length_curve, table_diagnostics
from .event_generator import GENERATOR_LOCK, EventGenerator, OutgoingParticle, ResonanceEventGenerator
from .io_routines import RateTableIO, RateTableNotFound
from .nuclear import nuclei_modification
from .particle_id import NEUTRON, PROTON, ParticleId, nuclear_mass
from .photon_field import PhotonField, photon_field_scaling
from .photopion import Channel, PhotoPionProduction, UnexpectedParticleError
from .plotting import create_loss_length_plot
from .random_streams import spawn_rngs
from .rate_tables import RateTable, parse_rate_table

__version__ = "0.1.0"

__all__ = [
    "constants",
    "Candidate",
    "ParticleState",
    "Secondary",
    "ProcessConfig",
    "loss_length_curve",
    "table_diagnostics",
    "GENERATOR_LOCK",
    "EventGenerator",
    "OutgoingParticle",
    "ResonanceEventGenerator",
    "RateTableIO",
    "RateTableNotFound",
    "nuclei_modification",
    "NEUTRON",
    "PROTON",
    "ParticleId",
    "nuclear_mass",
    "PhotonField",
    "photon_field_scaling",
    "Channel",
    "PhotoPionProduction",
    "UnexpectedParticleError",
    "create_loss_length_plot",
    "spawn_rngs",
    "RateTable",
    "parse_rate_table",
]
