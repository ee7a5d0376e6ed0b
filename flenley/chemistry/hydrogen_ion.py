"""Hydrogen ion concentration transforms for the acid-base nomogram.

The Flenley nomogram plots blood acidity as the hydrogen ion concentration
[H⁺] in nanomoles per litre rather than as pH. The two are related by the
definition of pH:

    pH = -log₁₀(a_H⁺ / mol dm⁻³)

so with [H⁺] expressed in nM (10⁻⁹ mol dm⁻³):

    [H⁺] / nM = 10^(9 - pH)

At the physiological mean pH of 7.40 this gives ≈ 39.8 nM, which is why the
normal band of the nomogram sits around 40 nM on the y-axis. Over the
clinically relevant range (pH 7.0-7.7) the relation is close to linear,
which is what makes a straight-line nomogram in [H⁺] space practical.
"""

from __future__ import annotations

import numpy as np

NANOMOLAR_EXPONENT = 9.0


def h_plus_from_ph(pH):
    """Convert blood pH to hydrogen ion concentration in nM.

    Args:
        pH (float or numpy.ndarray): Blood pH (dimensionless). Arrays are
            converted element-wise.

    Returns:
        float or numpy.ndarray: [H⁺] in nanomolar units, ``10 ** (9 - pH)``.
        A float is returned for scalar input.

    Note:
        No range checking happens here; callers are expected to pass values
        that already went through :func:`flenley.validation.validate_sample_input`.

    References:
        [H⁺] (nM) = 10^(-pH + 9), Flenley DC, Lancet 1971.
    """
    result = np.power(10.0, NANOMOLAR_EXPONENT - np.asarray(pH, dtype=float))
    if np.ndim(result) == 0:
        return float(result)
    return result


def ph_from_h_plus(h_plus_nm):
    """Convert hydrogen ion concentration in nM back to pH.

    Args:
        h_plus_nm (float or numpy.ndarray): [H⁺] in nanomolar units; must be
            positive.

    Returns:
        float or numpy.ndarray: pH, ``9 - log10([H⁺])``.

    Raises:
        ValueError: If any concentration is non-positive or non-finite.
    """
    values = np.asarray(h_plus_nm, dtype=float)
    if not np.all(np.isfinite(values)) or np.any(values <= 0):
        raise ValueError("[H+] must be positive and finite to convert to pH.")
    result = NANOMOLAR_EXPONENT - np.log10(values)
    if np.ndim(result) == 0:
        return float(result)
    return result
