#!/usr/bin/env python3
"""Trace an image into an ordered pen-plotter SVG.

Thin wrapper around ``raster_plotter.cli.main`` for running from a checkout.

Usage::

    python scripts/trace_to_svg.py --image reef.png
    python scripts/trace_to_svg.py --image reef.png --threshold 0.35 \\
        --filename reef-42.svg --simplify
"""

import sys

from raster_plotter.cli import main

if __name__ == "__main__":
    sys.exit(main())
