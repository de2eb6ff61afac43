"""Nuclear modification of single-nucleon photo-pion rates."""

from .constants import LIGHT_NUCLEUS_MAX_A, NUCLEAR_SHADOWING


def nuclei_modification(A: int, X: int) -> float:
    """Scale a per-nucleon interaction rate to a per-nucleus rate.

    Parameters
    ----------
    A : int
        Mass number of the interacting nucleus.
    X : int
        Number of target nucleons of the interacting kind (``Z`` for the
        proton channel, ``A - Z`` for the neutron channel).

    Returns
    -------
    float
        1 for a bare nucleon, ``0.85 X^(2/3)`` for light nuclei (A <= 8),
        ``0.85 X`` otherwise. The factor accounts for shadowing of nucleons
        inside the nucleus.
    """
    if A == 1:
        return 1.0
    if A <= LIGHT_NUCLEUS_MAX_A:
        return NUCLEAR_SHADOWING * float(X) ** (2.0 / 3.0)
    return NUCLEAR_SHADOWING * float(X)
