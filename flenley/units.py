"""Centralized unit conversion utilities."""

from __future__ import annotations

KPA_PER_MMHG: float = 0.133322368


def kpa_to_mmhg(pressure_kpa: float) -> float:
    """Convert a partial pressure from kPa to mmHg.

    Args:
        pressure_kpa (float): Partial pressure in kilopascals. Blood gas
            analysers in SI laboratories report pCO2 this way (normal range
            roughly 4.7-6.0 kPa).

    Returns:
        float: Partial pressure in millimetres of mercury.

    Note:
        The nomogram axes are defined in mmHg, so kPa readings must be
        converted before they are plotted.

    References:
        Conventional relation 1 mmHg = 0.133322368 kPa.
    """
    return float(pressure_kpa) / KPA_PER_MMHG


def mmhg_to_kpa(pressure_mmhg: float) -> float:
    """Convert a partial pressure from mmHg to kPa."""
    return float(pressure_mmhg) * KPA_PER_MMHG
