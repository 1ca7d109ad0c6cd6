"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Config validation (validators)
    - Atomic I/O (fs)
    - Pixel-space geometry: distances, path length, pen-up travel (geometry)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (pipeline, trigger, export).

Convenience imports:
    from raster_plotter.utils import fs, geometry, validators
    from raster_plotter.utils.logging_config import setup_logging, get_logger
"""

# Re-export commonly used modules for convenience
from . import fs
from . import geometry
from . import logging_config
from . import validators

# Common functions for direct import
from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'geometry',
    'logging_config',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
