"""Centralized plotting style, labels, legends, and save helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MultipleLocator

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 11.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 9.0
    ANNOTATION_FONTSIZE: float = 9.0
    LINEWIDTH_THIN: float = 1.0
    ALPHA_REGION: float = 0.72
    GRID_ALPHA: float = 0.25
    MARKERSIZE_DISK: float = 8.0
    MARKERSIZE_STAR: float = 6.0
    FIGSIZE_NOMOGRAM: tuple[float, float] = (9.6, 7.2)


STYLE = StyleConfig()

FIG_SIZES: dict[str, tuple[float, float]] = {
    "nomogram": STYLE.FIGSIZE_NOMOGRAM,
}

FONT_SIZES = {
    "base": STYLE.BASE_FONTSIZE,
    "title": STYLE.TITLE_FONTSIZE,
    "axis_label": STYLE.LABEL_FONTSIZE,
    "tick": STYLE.TICK_FONTSIZE,
    "legend": STYLE.LEGEND_FONTSIZE,
    "annotation": STYLE.ANNOTATION_FONTSIZE,
}

SAMPLE_MARKER = {
    "disk_face": (0.0, 0.2, 0.6),
    "disk_edge": (0.0, 0.1, 0.3),
    "star": "white",
}

AXIS_COLOR = (0.2, 0.2, 0.2)

MATH_LABELS = {
    "x_pco2": r"$p\mathrm{CO_2}$ (mmHg)",
    "y_h_plus": r"$[\mathrm{H^+}]$ (nM)",
    "title": r"Flenley Acid-Base Nomogram ($[\mathrm{H^+}]$ vs $p\mathrm{CO_2}$)",
    "sample": "Your data",
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.titleweight": "bold",
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.default": "regular",
            "axes.titlepad": 8,
            "axes.labelpad": 6,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.edgecolor": AXIS_COLOR,
            "xtick.color": AXIS_COLOR,
            "ytick.color": AXIS_COLOR,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "grid.linewidth": 0.7,
            "legend.frameon": False,
            "figure.facecolor": "white",
            "figure.dpi": 100,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def fig_size(kind: str = "nomogram") -> tuple[float, float]:
    """Return standardized figure size tuple for a named figure kind."""
    return FIG_SIZES.get(kind, FIG_SIZES["nomogram"])


def set_axis_labels(ax: Axes, x: str | None = None, y: str | None = None) -> None:
    """Apply standardized axis labels with project typography."""
    if x is not None:
        ax.set_xlabel(x, fontsize=FONT_SIZES["axis_label"], labelpad=6)
    if y is not None:
        ax.set_ylabel(y, fontsize=FONT_SIZES["axis_label"], labelpad=6)


def clean_axis(ax: Axes, *, major_step: float = 10.0) -> None:
    """Apply boxed spines, regular ticks and a light dotted grid."""
    ax.tick_params(axis="both", which="major", labelsize=FONT_SIZES["tick"], width=1.0)
    ax.xaxis.set_major_locator(MultipleLocator(major_step))
    ax.yaxis.set_major_locator(MultipleLocator(major_step))
    for side in ("left", "bottom", "top", "right"):
        ax.spines[side].set_visible(True)
        ax.spines[side].set_linewidth(STYLE.LINEWIDTH_THIN)
    ax.grid(True, axis="both", alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7)
    ax.set_axisbelow(False)


def place_label(
    ax: Axes,
    text: str,
    xy_data: tuple[float, float],
    *,
    dx_pts: float = 8,
    dy_pts: float = 0,
    ha: str = "left",
    va: str = "center",
    fontsize: float = FONT_SIZES["annotation"],
    color: str = "black",
    **kwargs,
):
    """Place an annotation in data coordinates with point offsets."""
    return ax.annotate(
        text,
        xy=xy_data,
        xytext=(dx_pts, dy_pts),
        textcoords="offset points",
        ha=ha,
        va=va,
        fontsize=fontsize,
        color=color,
        **kwargs,
    )


def side_legend(ax: Axes, handles: Sequence, labels: Sequence[str]):
    """Add a legend outside the axes on the right-hand side."""
    if not handles:
        return None
    return ax.legend(
        handles,
        labels,
        loc="center left",
        bbox_to_anchor=(1.02, 0.5),
        frameon=False,
        fontsize=FONT_SIZES["legend"],
        handlelength=1.6,
        handletextpad=0.6,
        borderaxespad=0.0,
    )


def fmt_sample(ph: float, pco2: float) -> str:
    """Return the mathtext annotation for one sample."""
    return rf"pH = {ph:.2f}, $p\mathrm{{CO_2}}$ = {pco2:.1f} mmHg"


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
    *,
    bbox_inches: str = "tight",
    pad_inches: float = 0.12,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    unknown = [ext for ext in formats if ext not in OUTPUT_FORMATS]
    if unknown:
        raise ValueError(
            f"Unsupported extension(s) {unknown}. Expected one of {OUTPUT_FORMATS}."
        )
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        target = base.with_suffix(f".{ext}")
        fig.savefig(
            str(target),
            dpi=dpi if ext == "png" else None,
            bbox_inches=bbox_inches,
            pad_inches=pad_inches,
        )
    return base.with_suffix(f".{formats[0]}")


def sanitize_filename(name: str) -> str:
    """Normalize a filename component into a stable, filesystem-safe token."""
    text = re.sub(r"\s+", "_", str(name).strip())
    text = re.sub(r"[^A-Za-z0-9._-]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("._")
    return text or "figure"
