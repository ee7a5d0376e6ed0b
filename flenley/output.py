"""Export the nomogram geometry as tables and CSV files.

This module is the tabular boundary of the package: callers that need their
own point-in-region test, or want to audit the boundary lines, can work from
the exported table instead of the Python objects.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict
from typing import Iterable

import pandas as pd

from .chemistry.regions import Region, all_regions
from .schema import SegmentColumns

logger = logging.getLogger(__name__)

SEGMENTS_CSV = "nomogram_segments.csv"


def create_segments_dataframe(regions: Iterable[Region] | None = None) -> pd.DataFrame:
    """Flatten regions into one row per segment.

    Args:
        regions (Iterable[Region] | None): Regions to export; defaults to the
            full table in draw order.

    Returns:
        pandas.DataFrame: One row per segment with the columns defined in
        :class:`flenley.schema.SegmentColumns`, in draw order.
    """
    cols = SegmentColumns()
    rows = []
    for region in all_regions() if regions is None else regions:
        for idx, seg in enumerate(region.segments):
            rows.append(
                {
                    cols.region: region.key,
                    cols.label: region.label,
                    cols.segment: idx,
                    cols.x_lo: seg.x_lo,
                    cols.x_hi: seg.x_hi,
                    cols.lower_slope: seg.lower.slope,
                    cols.lower_intercept: seg.lower.intercept,
                    cols.upper_slope: seg.upper.slope,
                    cols.upper_intercept: seg.upper.intercept,
                    cols.inverted: seg.has_inverted_bounds(),
                }
            )
    return pd.DataFrame(rows, columns=list(asdict(cols).values()))


def save_segments_to_csv(output_dir: str = "output") -> str:
    """Write the segment table to ``output_dir`` and return the CSV path.

    Note:
        The directory is created if it does not exist.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, SEGMENTS_CSV)
    create_segments_dataframe().to_csv(path, index=False)
    logger.info("Wrote segment table to %s", path)
    return path
