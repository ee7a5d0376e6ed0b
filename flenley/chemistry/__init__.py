"""
Acid-base chemistry and geometry models for the Flenley nomogram.

This subpackage holds the numeric content of the chart: the pH to [H⁺]
transform and the fixed table of region boundaries.

Modules:
    hydrogen_ion:
        Conversion between blood pH and [H⁺] in nM, [H⁺] = 10^(9 - pH).

    regions:
        The thirteen diagnostic regions as ordered quadrilateral segments,
        each bounded by fitted straight lines over a pCO2 interval.

    classification:
        Point-in-region lookup against the same segment table.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib.
    It provides pure geometry and chemistry that can be independently tested.
"""

from .classification import classify_point, describe_point
from .hydrogen_ion import h_plus_from_ph, ph_from_h_plus
from .regions import (
    Boundary,
    Region,
    Segment,
    all_regions,
    display_domain,
    get_region,
    h_plus_range,
    segments_for,
)

__all__ = [
    "Boundary",
    "Region",
    "Segment",
    "all_regions",
    "classify_point",
    "describe_point",
    "display_domain",
    "get_region",
    "h_plus_from_ph",
    "h_plus_range",
    "ph_from_h_plus",
    "segments_for",
]
