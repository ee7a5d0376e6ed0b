"""Command-line entry point for plotting one blood gas sample."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

import matplotlib.pyplot as plt

from .chemistry.classification import describe_point
from .errors import RenderError, ValidationError
from .output import save_segments_to_csv
from .plotting.nomogram_plots import figure_stem, plot_nomogram
from .plotting.style import OUTPUT_FORMATS
from .validation import DEFAULT_PCO2_MMHG, DEFAULT_PH, validate_sample_input

EXIT_OK = 0
EXIT_RENDER_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for command-line use."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # basicConfig is a no-op when main.py already configured the root logger
    logging.getLogger().setLevel(level)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        prog="flenley",
        description="Plot a blood gas sample on the Flenley acid-base nomogram.",
    )
    parser.add_argument(
        "ph",
        nargs="?",
        default=None,
        help=f"Blood pH (default: {DEFAULT_PH:.2f}).",
    )
    parser.add_argument(
        "pco2",
        nargs="?",
        default=None,
        help=f"Blood pCO2 (default: {DEFAULT_PCO2_MMHG:.0f} mmHg).",
    )
    parser.add_argument(
        "--kpa",
        action="store_true",
        help="Interpret pCO2 in kPa instead of mmHg.",
    )
    parser.add_argument(
        "--save",
        default=None,
        metavar="PATH",
        help="Save the chart to PATH (a file stem or an existing directory).",
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        default=list(OUTPUT_FORMATS),
        choices=OUTPUT_FORMATS,
        help="Formats written by --save (default: png pdf svg).",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not open an interactive window.",
    )
    parser.add_argument(
        "--table",
        default=None,
        metavar="DIR",
        help="Also export the region segment table as CSV into DIR.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _parse_number(text: str | None, name: str) -> float | None:
    """Convert one positional argument; blank text means 'use the default'."""
    if text is None or text.strip() == "":
        return None
    try:
        return float(text)
    except ValueError as exc:
        raise ValidationError(f"{name} must be numeric, got {text!r}.") from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint: validate, render, and optionally save or show."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    start_time = time.time()
    try:
        sample = validate_sample_input(
            _parse_number(args.ph, "pH"),
            _parse_number(args.pco2, "pCO2"),
            pco2_unit="kPa" if args.kpa else "mmHg",
        )
    except ValidationError as exc:
        logging.error("Invalid input: %s", exc)
        return EXIT_VALIDATION_ERROR

    logging.info(
        "Sample: pH=%.2f, pCO2=%.1f mmHg, [H+]=%.1f nM",
        sample.ph,
        sample.pco2,
        sample.h_plus,
    )
    logging.info("Nomogram region: %s", describe_point(*sample.as_xy()))

    try:
        chart = plot_nomogram(sample)
    except RenderError as exc:
        logging.error("Rendering failed: %s", exc)
        return EXIT_RENDER_ERROR

    if args.save:
        target = args.save
        if os.path.isdir(target):
            target = os.path.join(target, figure_stem(sample))
        chart.save(target, formats=args.formats)

    if args.table:
        save_segments_to_csv(args.table)

    logging.info("Completed in %.2f seconds", time.time() - start_time)

    if not args.no_show:
        plt.show()
    chart.close()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
