"""Raster Plotter: raster image to pen-plotter SVG paths.

This package turns a captured RGBA pixel buffer into an ordered set of
straight-segment polylines and serialises them as SVG for a pen plotter.

Architecture layers (strict one-way dependency):
    scripts/ → raster_plotter/{trigger,export,capture}.py → raster_plotter/pipeline/ → raster_plotter/utils/

Key invariants:
    - Data flows strictly forward: mask → paths → ordered paths → SVG text
    - Pixel coordinates end-to-end (top-left origin, +Y down)
    - Every foreground pixel belongs to at most one path
    - YAML-only configs, validated with pydantic
"""

__version__ = "1.0.0"
