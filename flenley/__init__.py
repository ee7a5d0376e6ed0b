"""
A Python package for plotting blood gas samples on the Flenley acid-base nomogram.

Maps a sample's pH and pCO2 onto the [H⁺] vs pCO2 plane, where thirteen
coloured bands mark normal, primary and mixed acid-base disturbances.

Modules:
    - chemistry: pH to [H⁺] transform, region geometry and point lookup.
    - validation: Defaults and validation for one pH/pCO2 sample.
    - plotting: Renders the nomogram with the sample marker overlaid.
    - output: Exports the region geometry as a table or CSV.
    - cli: Command-line entry point.

This package is intended for teaching and illustration. It must not be used
as a stand-alone diagnostic tool.
"""

__version__ = "1.0.0"

from .chemistry import (
    all_regions,
    classify_point,
    get_region,
    h_plus_from_ph,
    ph_from_h_plus,
    segments_for,
)
from .errors import RenderError, ValidationError
from .output import create_segments_dataframe, save_segments_to_csv
from .plotting import NomogramChart, plot_nomogram, plot_sample
from .validation import SamplePoint, validate_sample_input

__all__ = [
    # Geometry and chemistry
    "all_regions",
    "segments_for",
    "get_region",
    "classify_point",
    "h_plus_from_ph",
    "ph_from_h_plus",
    # Input handling
    "SamplePoint",
    "validate_sample_input",
    "ValidationError",
    "RenderError",
    # Plotting
    "NomogramChart",
    "plot_nomogram",
    "plot_sample",
    # Output
    "create_segments_dataframe",
    "save_segments_to_csv",
]
