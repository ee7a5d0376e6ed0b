"""
Plotting utilities for the Flenley acid-base nomogram.

All plotting functions accept precomputed geometry and validated samples and
do not perform chemistry calculations.

Modules:
    nomogram_plots:
        Filled region polygons in fixed table order, the two-layer sample
        marker, axis limits with equal aspect, and the region legend.

    style:
        Centralized rcParams, label text, marker colours and multi-format
        figure saving.

Design Principles:
    1. No chemistry calculations in plotting code. Region vertices come from
       flenley.chemistry.regions and [H⁺] from the validated sample.

    2. Equal aspect on fixed axes: one mmHg on x spans the same length as
       one nM on y.
"""

from .nomogram_plots import NomogramChart, plot_nomogram, plot_sample
from .style import set_global_style

__all__ = ["NomogramChart", "plot_nomogram", "plot_sample", "set_global_style"]
