#!/usr/bin/env python3
"""
Main script for plotting a blood gas sample on the Flenley nomogram.
"""

# Usage:
#   python main.py                 # default normal sample, pH 7.40 / pCO2 40 mmHg
#   python main.py 7.50 45         # metabolic alkalosis example
#   python main.py 7.30 8 --kpa    # pCO2 given in kPa
#   python main.py 7.25 60 --save output/figures --no-show

import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flenley.cli import main

if __name__ == "__main__":
    sys.exit(main())
