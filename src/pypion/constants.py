"""Named constants for units, particle codes and process defaults.

All quantities are in SI units: energies in joule, lengths in meter,
masses in kilogram.
"""

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------
meter = 1.0
kilometer = 1000.0 * meter
c_light = 299792458.0 * meter          # speed of light (m/s)
eV = 1.602176487e-19                   # electron volt (J)
MeV = 1.0e6 * eV
GeV = 1.0e9 * eV
EeV = 1.0e18 * eV
parsec = 3.0856775807e16 * meter
kpc = 1.0e3 * parsec
Mpc = 1.0e6 * parsec

# ---------------------------------------------------------------------------
# Masses (kg)
# ---------------------------------------------------------------------------
mass_proton = 1.67262158e-27
mass_neutron = 1.67492735e-27
mass_electron = 9.10938291e-31
amu = 1.660538921e-27

# ---------------------------------------------------------------------------
# PDG particle codes (nuclei: 1000000000 + 10000 * Z + 10 * A)
# ---------------------------------------------------------------------------
PDG_ELECTRON = 11
PDG_NU_E = 12
PDG_NU_MU = 14
PDG_PHOTON = 22
PDG_NUCLEUS_BASE = 1000000000
PDG_NUCLEUS_LIMIT = 2000000000

# ---------------------------------------------------------------------------
# Event-generator particle codes
# ---------------------------------------------------------------------------
GEN_PHOTON = 1
GEN_POSITRON = 2
GEN_ELECTRON = 3
GEN_PROTON = 13
GEN_NEUTRON = 14
GEN_ANTIPROTON = -13
GEN_ANTINEUTRON = -14
GEN_NU_E = 15
GEN_ANTINU_E = 16
GEN_NU_MU = 17
GEN_ANTINU_MU = 18

GEN_BACKGROUND_CMB = 1
GEN_BACKGROUND_IRB = 2

# ---------------------------------------------------------------------------
# Process defaults
# ---------------------------------------------------------------------------
DEFAULT_LIMIT = 0.1            # fraction of the mean free path per step
DEFAULT_MAX_REDSHIFT = 100.0   # IR photon density is zero above this redshift
NUCLEON_MASS_MEV = 938.0
DELTA_MASS_MEV = 1232.0
NUCLEAR_SHADOWING = 0.85
LIGHT_NUCLEUS_MAX_A = 8
