"""Region geometry for the Flenley acid-base nomogram.

The nomogram partitions the (pCO2, [H⁺]) plane into thirteen diagnostic
regions. Each region is a union of quadrilateral segments; a segment spans a
pCO2 interval and is bounded below and above by straight lines in [H⁺].

Experimental Context:
    The original Flenley bands were drawn from in vivo measurements of
    patients with "pure" acid-base disorders (Flenley DC, Lancet, 1971). The
    lines below are an analytical approximation of those bands, fitted
    independently per segment. Adjacent segments therefore meet at
    x-values 0.01 mmHg apart (e.g. 44.00 and 44.01) rather than at shared
    vertices, and their boundary values at a shared edge are close but not
    identical.

Boundary Ordering:
    Each segment stores its two boundary lines exactly as they were fitted.
    In four segments the fitted "upper" line drops below the "lower" line
    somewhere in the interval, either because the two lines cross or because
    they were listed in swapped order. Polygon vertices follow the stored
    lines, so those polygons wind clockwise or cross themselves. Point
    containment uses the pointwise envelope (min and max of the two lines),
    which is the area such a polygon fills.

All coordinates: pCO2 in mmHg (x), [H⁺] in nM (y).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

PCO2_DOMAIN: Tuple[float, float] = (9.0, 100.0)
H_PLUS_DOMAIN: Tuple[float, float] = (0.0, 100.0)


@dataclass(frozen=True)
class Boundary:
    """A straight boundary line ``y = slope * x + intercept``.

    Constant boundaries have ``slope == 0``.
    """

    slope: float
    intercept: float

    def __call__(self, x):
        values = self.slope * np.asarray(x, dtype=float) + self.intercept
        if np.ndim(values) == 0:
            return float(values)
        return values

    @property
    def is_constant(self) -> bool:
        return self.slope == 0.0


@dataclass(frozen=True)
class Segment:
    """One quadrilateral piece of a region.

    Attributes:
        x_lo: Lower pCO2 bound of the segment in mmHg.
        x_hi: Upper pCO2 bound of the segment in mmHg, ``x_hi > x_lo``.
        lower: Fitted lower boundary line in [H⁺] (nM).
        upper: Fitted upper boundary line in [H⁺] (nM).
    """

    x_lo: float
    x_hi: float
    lower: Boundary
    upper: Boundary

    def covers(self, x: float) -> bool:
        """Return whether pCO2 ``x`` lies inside the closed segment interval."""
        return self.x_lo <= float(x) <= self.x_hi

    def bounds_at(self, x):
        """Return the ``(low, high)`` [H⁺] envelope of the segment at ``x``.

        Args:
            x (float or numpy.ndarray): pCO2 value(s) in mmHg.

        Returns:
            tuple: Pointwise minimum and maximum of the two boundary lines.
            Scalars for scalar input, arrays otherwise.
        """
        a = self.lower(x)
        b = self.upper(x)
        low = np.minimum(a, b)
        high = np.maximum(a, b)
        if np.ndim(low) == 0:
            return float(low), float(high)
        return low, high

    def vertices(self) -> np.ndarray:
        """Return the 4 x 2 polygon vertices in drawing order.

        The order is ``(x_lo, lower)``, ``(x_hi, lower)``, ``(x_hi, upper)``,
        ``(x_lo, upper)`` using the fitted lines as stored. Where the lines
        cross inside the interval the quadrilateral self-intersects and fills
        the area between the two lines on each side of the crossing.
        """
        return np.array(
            [
                [self.x_lo, self.lower(self.x_lo)],
                [self.x_hi, self.lower(self.x_hi)],
                [self.x_hi, self.upper(self.x_hi)],
                [self.x_lo, self.upper(self.x_lo)],
            ],
            dtype=float,
        )

    def contains(self, x: float, y: float) -> bool:
        """Return whether the point ``(x, y)`` lies inside the segment.

        Boundaries are inclusive. The vertical extent is the envelope of the
        two fitted lines at ``x``.
        """
        if not self.covers(x):
            return False
        low, high = self.bounds_at(x)
        return low <= float(y) <= high

    def has_inverted_bounds(self) -> bool:
        """Return whether the fitted upper line falls below the lower one."""
        diff_lo = self.upper(self.x_lo) - self.lower(self.x_lo)
        diff_hi = self.upper(self.x_hi) - self.lower(self.x_hi)
        return min(diff_lo, diff_hi) < 0.0


@dataclass(frozen=True)
class Region:
    """A named diagnostic acid-base category.

    Attributes:
        key: Stable identifier (snake_case).
        label: Display label used in the chart legend.
        color: RGB triple with components in ``[0, 1]``.
        segments: Ordered segments making up the region's area.
    """

    key: str
    label: str
    color: Tuple[float, float, float]
    segments: Tuple[Segment, ...]

    def contains(self, x: float, y: float) -> bool:
        return any(seg.contains(x, y) for seg in self.segments)


def _const(value: float) -> Boundary:
    return Boundary(0.0, value)


def _line(slope: float, intercept: float) -> Boundary:
    return Boundary(slope, intercept)


# Fitted boundary lines shared between several regions.
_METAB_ACID_LOW = _line(-1.98855, 93.11307)
_METAB_ACID_HIGH = _line(-1.90016, 115.00586)
_ACUTE_RESP_ACID_LOW = _line(0.75036, 5.94429)
_ACUTE_RESP_ACID_HIGH = _line(0.77929, 10.41143)
_CHRONIC_RESP_ACID_LOW = _line(0.28482, 23.66786)
_CHRONIC_RESP_ACID_HIGH = _line(0.36827, 28.20287)
_METAB_ALK_LOW = _line(-0.37272, 42.93068)
_METAB_ALK_HIGH = _line(-0.25989, 50.25395)
_ACUTE_RESP_ALK_LOW = _line(0.77332, 6.8872)
_ACUTE_RESP_ALK_HIGH = _line(0.7068, 13.64852)
_CHRONIC_RESP_ALK_HIGH = _line(0.13015, 34.98438)

_REGIONS: Tuple[Region, ...] = (
    Region(
        "normal",
        "Normal",
        (0.39, 0.80, 0.36),
        (Segment(37.0, 44.0, _const(35.50), _const(44.70)),),
    ),
    Region(
        "metabolic_acidosis",
        "Metabolic Acidosis",
        (0.97, 0.45, 0.38),
        (
            Segment(9.0, 18.07, _METAB_ACID_LOW, _const(100.0)),
            Segment(18.08, 26.81, _METAB_ACID_LOW, _METAB_ACID_HIGH),
            Segment(26.82, 36.99, _METAB_ACID_HIGH, _const(39.8)),
        ),
    ),
    Region(
        "acute_respiratory_acidosis",
        "Acute Respiratory Acidosis",
        (0.90, 0.25, 0.25),
        (Segment(44.01, 100.0, _ACUTE_RESP_ACID_LOW, _ACUTE_RESP_ACID_HIGH),),
    ),
    Region(
        "chronic_respiratory_acidosis",
        "Chronic Respiratory Acidosis",
        (0.70, 0.18, 0.18),
        (
            Segment(44.01, 57.83, _CHRONIC_RESP_ACID_LOW, _line(0.76645, 5.17621)),
            Segment(57.84, 100.0, _CHRONIC_RESP_ACID_LOW, _CHRONIC_RESP_ACID_HIGH),
        ),
    ),
    Region(
        "metabolic_alkalosis",
        "Metabolic Alkalosis",
        (0.33, 0.70, 0.95),
        (
            Segment(37.0, 44.0, _METAB_ALK_LOW, _const(35.49)),
            Segment(44.01, 48.18, _METAB_ALK_LOW, _line(0.36516, 20.13317)),
            Segment(48.19, 51.80, _METAB_ALK_LOW, _METAB_ALK_HIGH),
            Segment(51.81, 62.35, _const(0.0), _METAB_ALK_HIGH),
        ),
    ),
    Region(
        "acute_respiratory_alkalosis",
        "Acute Respiratory Alkalosis",
        (0.14, 0.56, 0.85),
        (Segment(9.0, 36.99, _ACUTE_RESP_ALK_LOW, _ACUTE_RESP_ALK_HIGH),),
    ),
    Region(
        "chronic_respiratory_alkalosis",
        "Chronic Respiratory Alkalosis",
        (0.00, 0.47, 0.66),
        (
            Segment(9.0, 26.50, _line(0.44379, 20.70493), _CHRONIC_RESP_ALK_HIGH),
            Segment(26.51, 36.99, _line(0.69876, 13.94585), _CHRONIC_RESP_ALK_HIGH),
        ),
    ),
    Region(
        "mixed_metabolic_respiratory_acidosis",
        "Mixed Metabolic + Respiratory Acidosis",
        (0.98, 0.72, 0.25),
        (
            Segment(18.08, 36.99, _METAB_ACID_HIGH, _const(100.0)),
            Segment(37.0, 44.0, _const(44.71), _const(100.0)),
            Segment(44.01, 100.0, _ACUTE_RESP_ACID_HIGH, _const(100.0)),
        ),
    ),
    Region(
        "mixed_acute_chronic_respiratory_acidosis",
        "Mixed Acute + Chronic Respiratory Acidosis",
        (0.85, 0.55, 0.20),
        (Segment(57.84, 100.0, _ACUTE_RESP_ACID_LOW, _CHRONIC_RESP_ACID_HIGH),),
    ),
    Region(
        "mixed_metabolic_alkalosis_respiratory_acidosis",
        "Mixed Metabolic Alkalosis + Respiratory Acidosis",
        (0.68, 0.72, 0.54),
        (
            Segment(48.20, 62.35, _METAB_ALK_HIGH, _CHRONIC_RESP_ACID_LOW),
            Segment(62.36, 100.0, _const(0.0), _CHRONIC_RESP_ACID_LOW),
        ),
    ),
    Region(
        "mixed_metabolic_respiratory_alkalosis",
        "Mixed Metabolic + Respiratory Alkalosis",
        (0.55, 0.55, 0.85),
        (
            Segment(9.0, 36.99, _const(0.0), _ACUTE_RESP_ALK_LOW),
            Segment(37.0, 51.80, _const(0.0), _METAB_ALK_LOW),
        ),
    ),
    Region(
        "mixed_acute_chronic_respiratory_alkalosis",
        "Mixed Acute + Chronic Respiratory Alkalosis",
        (0.77, 0.45, 0.87),
        (Segment(9.0, 26.50, _ACUTE_RESP_ALK_HIGH, _line(0.4438, 20.70493)),),
    ),
    Region(
        "mixed_metabolic_acidosis_respiratory_alkalosis",
        "Mixed Metabolic Acidosis + Respiratory Alkalosis",
        (0.84, 0.60, 0.52),
        (
            Segment(9.0, 26.80, _CHRONIC_RESP_ALK_HIGH, _METAB_ACID_LOW),
            Segment(26.81, 36.99, _CHRONIC_RESP_ALK_HIGH, _const(39.7)),
        ),
    ),
)

_BY_NAME = {}
for _region in _REGIONS:
    _BY_NAME[_region.key] = _region
    _BY_NAME[_region.label.lower()] = _region


def all_regions() -> Tuple[Region, ...]:
    """Return the thirteen regions in fixed draw and legend order."""
    return _REGIONS


def get_region(name: str) -> Region:
    """Look up a region by key or display label (case-insensitive).

    Raises:
        KeyError: If no region matches ``name``.
    """
    found = _BY_NAME.get(str(name).strip().lower())
    if found is None:
        raise KeyError(
            f"Unknown region '{name}'. Expected one of "
            f"{[region.key for region in _REGIONS]}."
        )
    return found


def segments_for(region: Union[Region, str]) -> Tuple[Segment, ...]:
    """Return the ordered segments of a region given as object, key or label."""
    if isinstance(region, Region):
        return region.segments
    return get_region(region).segments


def display_domain() -> Tuple[float, float]:
    """Return the fixed pCO2 axis range in mmHg."""
    return PCO2_DOMAIN


def h_plus_range() -> Tuple[float, float]:
    """Return the fixed [H⁺] axis range in nM."""
    return H_PLUS_DOMAIN
