"""Input defaulting and validation for a single blood gas sample.

The nomogram needs two measurements: blood pH and pCO2. Either may be
omitted, in which case the physiological mean of a normal sample is used
(pH 7.40, pCO2 40 mmHg). Supplied values must be real, finite, positive
scalars. Anything else raises :class:`flenley.errors.ValidationError` before
any plotting starts.
"""

from __future__ import annotations

import logging
import numbers
import warnings
from dataclasses import dataclass

import numpy as np

from .chemistry.hydrogen_ion import h_plus_from_ph
from .errors import ValidationError
from .units import kpa_to_mmhg

logger = logging.getLogger(__name__)

DEFAULT_PH = 7.40
DEFAULT_PCO2_MMHG = 40.0

# Range compatible with life; values outside are accepted but flagged.
PLAUSIBLE_PH = (6.8, 7.8)

PCO2_UNITS = ("mmHg", "kPa")


@dataclass(frozen=True)
class SamplePoint:
    """A validated blood gas sample.

    Attributes:
        ph: Blood pH (dimensionless).
        pco2: Blood pCO2 in mmHg.
    """

    ph: float = DEFAULT_PH
    pco2: float = DEFAULT_PCO2_MMHG

    @property
    def h_plus(self) -> float:
        """[H⁺] in nM, ``10 ** (9 - ph)``."""
        return h_plus_from_ph(self.ph)

    def as_xy(self) -> tuple[float, float]:
        """Return the nomogram coordinates ``(pco2, h_plus)``."""
        return self.pco2, self.h_plus


def _is_empty(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, np.ndarray):
        return value.size == 0
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _check_finite_positive(number: float, name: str) -> float:
    if not np.isfinite(number):
        raise ValidationError(f"{name} must be finite, got {number}.")
    if number <= 0:
        raise ValidationError(f"{name} must be positive, got {number}.")
    return number


def _coerce_scalar(value, name: str) -> float:
    """Return ``value`` as a positive finite float or raise ValidationError."""
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name} must be numeric, got a boolean ({value!r}).")
    if isinstance(value, str):
        raise ValidationError(f"{name} must be numeric, got a string ({value!r}).")
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a real number, got {value!r}.")

    if isinstance(value, numbers.Number):
        # Includes Decimal and numpy scalars.
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValidationError(
                f"{name} must convert to a float, got {value!r}."
            ) from exc
    elif isinstance(value, np.ndarray) and value.ndim == 0:
        if not np.issubdtype(value.dtype, np.integer) and not np.issubdtype(
            value.dtype, np.floating
        ):
            raise ValidationError(
                f"{name} must be a real number, got dtype {value.dtype}."
            )
        number = float(value)
    elif isinstance(value, (list, tuple, np.ndarray)):
        raise ValidationError(
            f"{name} must be a scalar, got a sequence of length {len(value)}."
        )
    else:
        raise ValidationError(
            f"{name} must be a real number, got {type(value).__name__}."
        )

    return _check_finite_positive(number, name)


def validate_sample_input(ph=None, pco2=None, *, pco2_unit: str = "mmHg") -> SamplePoint:
    """Apply defaults and validate one pH/pCO2 pair.

    Args:
        ph: Blood pH. ``None``, an empty string or an empty sequence selects
            the default of 7.40.
        pco2: Blood pCO2 in ``pco2_unit``. Empty values select the default of
            40 mmHg.
        pco2_unit (str): ``"mmHg"`` (default) or ``"kPa"``. kPa values are
            converted to mmHg; the default is always 40 mmHg.

    Returns:
        SamplePoint: The validated sample with pCO2 in mmHg.

    Raises:
        ValidationError: If a supplied value is non-numeric, non-scalar,
            non-finite or not positive, or if ``pco2_unit`` is unknown.

    Note:
        pH values outside 6.8-7.8 are accepted but trigger a ``UserWarning``,
        since they fall outside the range compatible with life and usually
        indicate a data entry error.
    """
    if pco2_unit not in PCO2_UNITS:
        raise ValidationError(
            f"Unsupported pCO2 unit '{pco2_unit}'. Expected one of {PCO2_UNITS}."
        )

    ph_value = DEFAULT_PH if _is_empty(ph) else _coerce_scalar(ph, "pH")
    if _is_empty(pco2):
        pco2_value = DEFAULT_PCO2_MMHG
    else:
        pco2_value = _coerce_scalar(pco2, "pCO2")
        if pco2_unit == "kPa":
            pco2_value = _check_finite_positive(kpa_to_mmhg(pco2_value), "pCO2")

    if not PLAUSIBLE_PH[0] <= ph_value <= PLAUSIBLE_PH[1]:
        warnings.warn(
            f"pH {ph_value:.2f} lies outside the physiological range "
            f"{PLAUSIBLE_PH[0]}-{PLAUSIBLE_PH[1]}; check the measurement.",
            UserWarning,
            stacklevel=2,
        )

    sample = SamplePoint(ph=ph_value, pco2=pco2_value)
    logger.debug(
        "Validated sample: pH=%.3f, pCO2=%.2f mmHg, [H+]=%.2f nM",
        sample.ph,
        sample.pco2,
        sample.h_plus,
    )
    return sample
