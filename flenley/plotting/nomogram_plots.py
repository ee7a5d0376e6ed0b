"""Render the Flenley acid-base nomogram with one sample overlaid.

Each region segment is drawn as a filled, edgeless polygon in table order,
followed by a two-layer marker (solid disk plus white star) at the sample's
(pCO2, [H⁺]) position. Axes are fixed to pCO2 9-100 mmHg and [H⁺] 0-100 nM
with equal aspect: the boundary slopes were fitted in equal-unit space, so a
stretched aspect would distort which band a point visually falls into.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon

from ..chemistry.regions import Region, all_regions, display_domain, h_plus_range
from ..errors import RenderError, ValidationError
from ..validation import SamplePoint, validate_sample_input
from .style import (
    MATH_LABELS,
    OUTPUT_FORMATS,
    SAMPLE_MARKER,
    STYLE,
    clean_axis,
    fig_size,
    fmt_sample,
    place_label,
    sanitize_filename,
    save_figure,
    set_axis_labels,
    set_global_style,
    side_legend,
)

logger = logging.getLogger(__name__)


@dataclass
class NomogramChart:
    """Handles to one rendered nomogram.

    Attributes:
        figure: The figure that owns ``axes``.
        axes: The axes the nomogram was drawn on.
        sample: The sample shown by the marker.
        polygons: ``(region, patch)`` pairs in draw order, one per segment.
        markers: The disk and star marker artists.
    """

    figure: Figure
    axes: Axes
    sample: SamplePoint
    polygons: List[Tuple[Region, Polygon]] = field(default_factory=list)
    markers: List[Line2D] = field(default_factory=list)

    def vertex_sets(self) -> List[np.ndarray]:
        """Return the drawn 4 x 2 vertex arrays in draw order."""
        return [np.array(patch.get_xy()[:4], dtype=float) for _, patch in self.polygons]

    def save(
        self, path: str | Path, formats: Sequence[str] = OUTPUT_FORMATS
    ) -> str:
        """Save the chart under ``path`` (extension ignored) in each format."""
        base = Path(path)
        if base.suffix.lstrip(".") in OUTPUT_FORMATS:
            base = base.with_suffix("")
        saved = save_figure(self.figure, base, formats=formats)
        logger.info("Saved nomogram to %s", saved)
        return str(saved)

    def close(self) -> None:
        plt.close(self.figure)


def figure_stem(sample: SamplePoint) -> str:
    """Return a filesystem-safe default file stem for a sample's chart."""
    stem = f"nomogram_pH{sample.ph:.2f}_pCO2_{sample.pco2:.1f}".replace(".", "p")
    return sanitize_filename(stem)


def _check_sample(sample: SamplePoint) -> None:
    for name, value in (("pH", sample.ph), ("pCO2", sample.pco2)):
        try:
            usable = bool(np.isfinite(value)) and value > 0
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"{name} must be a real number, got {value!r}."
            ) from exc
        if not usable:
            raise ValidationError(f"{name} must be positive and finite, got {value}.")


def _new_axes() -> Tuple[Figure, Axes]:
    try:
        fig, ax = plt.subplots(figsize=fig_size("nomogram"))
    except Exception as exc:
        raise RenderError(f"Could not create a drawing surface: {exc}") from exc
    fig.subplots_adjust(left=0.08, right=0.62, bottom=0.09, top=0.92)
    return fig, ax


def draw_regions(ax: Axes) -> List[Tuple[Region, Polygon]]:
    """Fill every segment of every region on ``ax`` in table order.

    The first segment of each region carries the region label so the legend
    lists each region once.
    """
    polygons: List[Tuple[Region, Polygon]] = []
    for region in all_regions():
        for idx, segment in enumerate(region.segments):
            verts = segment.vertices()
            patches = ax.fill(
                verts[:, 0],
                verts[:, 1],
                facecolor=region.color,
                edgecolor="none",
                linewidth=0.0,
                alpha=STYLE.ALPHA_REGION,
                label=region.label if idx == 0 else "_nolegend_",
            )
            polygons.append((region, patches[0]))
    return polygons


def draw_sample_marker(ax: Axes, sample: SamplePoint) -> List[Line2D]:
    """Draw the two-layer sample marker and return its artists."""
    x, y = sample.as_xy()
    (disk,) = ax.plot(
        [x],
        [y],
        linestyle="none",
        marker="o",
        markersize=STYLE.MARKERSIZE_DISK,
        markerfacecolor=SAMPLE_MARKER["disk_face"],
        markeredgecolor=SAMPLE_MARKER["disk_edge"],
        label=MATH_LABELS["sample"],
        zorder=5,
    )
    (star,) = ax.plot(
        [x],
        [y],
        linestyle="none",
        marker="*",
        markersize=STYLE.MARKERSIZE_STAR,
        color=SAMPLE_MARKER["star"],
        label="_nolegend_",
        zorder=6,
    )
    return [disk, star]


def plot_nomogram(
    sample: SamplePoint | None = None,
    *,
    ax: Axes | None = None,
    annotate: bool = True,
    legend: bool = True,
) -> NomogramChart:
    """Render the nomogram and overlay one sample.

    Args:
        sample (SamplePoint | None): Validated sample; ``None`` uses the
            defaults (pH 7.40, pCO2 40 mmHg).
        ax (matplotlib.axes.Axes | None): Axes to draw on. A new figure is
            created when omitted.
        annotate (bool): Write the pH/pCO2 values next to the marker.
        legend (bool): Add the region legend to the right of the axes.

    Returns:
        NomogramChart: Handles to the figure, axes, polygons and markers. No
        region classification is returned.

    Raises:
        ValidationError: If the sample carries non-finite or non-positive
            values. Raised before any figure is created.
        RenderError: If the figure cannot be created.
    """
    sample = SamplePoint() if sample is None else sample
    _check_sample(sample)

    set_global_style()
    if ax is None:
        fig, ax = _new_axes()
    else:
        fig = ax.figure

    polygons = draw_regions(ax)
    markers = draw_sample_marker(ax, sample)

    x, y = sample.as_xy()
    x_min, x_max = display_domain()
    y_min, y_max = h_plus_range()
    if not (x_min <= x <= x_max and y_min <= y <= y_max):
        warnings.warn(
            f"Sample at pCO2={x:.1f} mmHg, [H+]={y:.1f} nM lies outside the "
            "plotted window and will not be visible.",
            UserWarning,
            stacklevel=2,
        )

    if annotate:
        place_label(ax, fmt_sample(sample.ph, sample.pco2), (x, y))

    ax.set_title(MATH_LABELS["title"])
    set_axis_labels(ax, x=MATH_LABELS["x_pco2"], y=MATH_LABELS["y_h_plus"])
    ax.set_xlim(x_min, x_max)
    ax.set_ylim(y_min, y_max)
    ax.set_aspect("equal", adjustable="box")
    clean_axis(ax)

    if legend:
        handles = [patch for region, patch in polygons if patch.get_label() == region.label]
        labels = [region.label for region in all_regions()]
        side_legend(ax, handles + [markers[0]], labels + [MATH_LABELS["sample"]])

    logger.info(
        "Rendered %d segments across %d regions; sample at pCO2=%.1f mmHg, [H+]=%.1f nM",
        len(polygons),
        len(all_regions()),
        x,
        y,
    )
    return NomogramChart(
        figure=fig, axes=ax, sample=sample, polygons=polygons, markers=markers
    )


def plot_sample(ph=None, pco2=None, *, pco2_unit: str = "mmHg", **kwargs) -> NomogramChart:
    """Validate raw pH/pCO2 values and render the nomogram for them.

    Keyword arguments other than ``pco2_unit`` are passed to
    :func:`plot_nomogram`.
    """
    sample = validate_sample_input(ph, pco2, pco2_unit=pco2_unit)
    return plot_nomogram(sample, **kwargs)
