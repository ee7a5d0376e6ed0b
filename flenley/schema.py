"""Define standardized column names for the tabular geometry export."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentColumns:
    """Container for standardized column labels.

    These column names are used in the segment table produced by
    ``flenley.output.create_segments_dataframe`` and in its CSV export.

    Attributes:
        region: Region key (snake_case identifier).
        label: Region display label as shown in the chart legend.
        segment: Zero-based index of the segment within its region.
        x_lo, x_hi: pCO2 interval of the segment in mmHg.
        lower_slope, lower_intercept: Fitted lower boundary line, [H+] in nM.
        upper_slope, upper_intercept: Fitted upper boundary line, [H+] in nM.
        inverted: Whether the fitted upper line falls below the lower line
            somewhere in the interval.
    """

    region: str = "Region"
    label: str = "Label"
    segment: str = "Segment"
    x_lo: str = "pCO2 low (mmHg)"
    x_hi: str = "pCO2 high (mmHg)"
    lower_slope: str = "Lower slope"
    lower_intercept: str = "Lower intercept (nM)"
    upper_slope: str = "Upper slope"
    upper_intercept: str = "Upper intercept (nM)"
    inverted: str = "Inverted bounds"
