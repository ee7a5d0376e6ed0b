"""Point-in-region lookup over the nomogram geometry.

The rendered chart conveys acid-base status visually. This module answers the
same question programmatically for callers that need a label, using the
identical segment table the chart is drawn from.

Interpretation Guardrails:
    Region boundaries are an analytical approximation of the Flenley bands.
    Points near an edge, or in the 0.01 mmHg seams between independently
    fitted segments, may match zero or two regions. The result is a list so
    that those cases are visible to the caller rather than silently resolved.
"""

from __future__ import annotations

from typing import List

import numpy as np

from flenley.chemistry.regions import Region, all_regions


def classify_point(pco2: float, h_plus_nm: float) -> List[Region]:
    """Return every region whose area contains ``(pco2, h_plus_nm)``.

    Args:
        pco2 (float): Sample pCO2 in mmHg.
        h_plus_nm (float): Sample [H⁺] in nM.

    Returns:
        list[Region]: Matching regions in table order. Empty if the point lies
        outside every band (for example outside the plotted window).

    Raises:
        ValueError: If either coordinate is non-finite.
    """
    if not np.isfinite(pco2) or not np.isfinite(h_plus_nm):
        raise ValueError("Coordinates must be finite to classify a sample.")
    return [
        region for region in all_regions() if region.contains(pco2, h_plus_nm)
    ]


def describe_point(pco2: float, h_plus_nm: float) -> str:
    """Return a human-readable summary of the matching regions."""
    matches = classify_point(pco2, h_plus_nm)
    if not matches:
        return "outside the mapped bands"
    return " / ".join(region.label for region in matches)
