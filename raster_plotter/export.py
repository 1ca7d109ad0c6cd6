"""Export sink: hand the finished SVG text to disk.

The pipeline only produces text; this module is the collaborator that offers
it as a file. Writes are atomic (tmp → fsync → rename) so a plotter front-end
watching ``out_dir`` never picks up a half-written document.
"""

import logging
from pathlib import Path
from typing import Union

from .utils import fs
from .utils.validators import ExportSection, InvalidInput

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "plotter-optimized.svg"


def export_svg(
    svg_text: str,
    out_dir: Union[str, Path],
    filename: str = DEFAULT_FILENAME
) -> Path:
    """Write SVG text to ``out_dir / filename`` atomically.

    Parameters
    ----------
    svg_text : str
        Serialized SVG document
    out_dir : Union[str, Path]
        Target directory, created if missing
    filename : str
        Suggested file name; must not contain directory parts

    Returns
    -------
    Path
        Path of the written file

    Raises
    ------
    InvalidInput
        If ``filename`` is empty or contains a directory component
    RuntimeError
        If the atomic write fails
    """
    if filename in ("", ".", "..") or "\\" in filename or Path(filename).name != filename:
        raise InvalidInput(f"Export filename must be a bare file name, got '{filename}'")

    target = fs.ensure_dir(out_dir) / filename
    fs.atomic_write_text(target, svg_text)
    logger.info(f"SVG exported to {target} ({len(svg_text)} bytes)")
    return target


def export_with_config(svg_text: str, export_cfg: ExportSection) -> Path:
    """Export using the ``export`` section of a raster_trace.v1 config."""
    return export_svg(svg_text, export_cfg.out_dir, export_cfg.filename)
