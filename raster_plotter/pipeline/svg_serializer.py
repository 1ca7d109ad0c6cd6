"""SVG serialization of ordered paths.

One stroke-only ``<path>`` element per polyline, drawn as ``M`` to the first
point followed by ``L`` to every subsequent point, in path-set order. The
document is sized in pixels with a matching viewBox so plotter software maps
one SVG unit to one source pixel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple
from xml.sax.saxutils import escape

from ..utils.geometry import Polyline

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


@dataclass(frozen=True, slots=True)
class VectorDocument:
    """Everything needed to render the SVG, serialised once.

    Parameters
    ----------
    width, height : int
        Document size in pixels (root ``width``/``height``/``viewBox``).
    paths : Sequence[Polyline]
        Ordered paths; stored as a tuple.
    stroke_color : str
        ``stroke`` attribute of every path.
    stroke_width : float
        ``stroke-width`` attribute; the pipeline always uses 1.
    """

    width: int
    height: int
    paths: Tuple[Polyline, ...] = ()
    stroke_color: str = "#000000"
    stroke_width: float = 1

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Document size must be non-negative, got {self.width}x{self.height}")
        object.__setattr__(self, "paths", tuple(self.paths))


def path_data(points: Sequence[Tuple[int, int]]) -> str:
    """Render a polyline as an SVG path ``d`` string: ``M x0 y0 L x1 y1 ...``."""
    x0, y0 = points[0]
    commands = [f"M {x0} {y0}"]
    commands.extend(f"L {x} {y}" for x, y in points[1:])
    return " ".join(commands)


def serialize(doc: VectorDocument) -> str:
    """Render a VectorDocument as SVG text.

    Parameters
    ----------
    doc : VectorDocument
        Document to render

    Returns
    -------
    svg : str
        Complete SVG document. An empty path set gives a root element with
        no children.

    Notes
    -----
    Paths with fewer than 2 points are skipped; the tracer never emits them
    but hand-built documents may contain them.
    """
    stroke = escape(doc.stroke_color, {'"': "&quot;"})
    stroke_width = f"{doc.stroke_width:g}"

    lines = [
        f'<svg xmlns="{SVG_NS}" width="{doc.width}" height="{doc.height}" '
        f'viewBox="0 0 {doc.width} {doc.height}">'
    ]
    skipped = 0
    for path in doc.paths:
        if len(path) < 2:
            skipped += 1
            continue
        lines.append(
            f'  <path d="{path_data(path)}" stroke="{stroke}" '
            f'stroke-width="{stroke_width}" fill="none" />'
        )
    lines.append("</svg>")

    if skipped:
        logger.warning(f"Skipped {skipped} paths with fewer than 2 points")
    logger.info(f"SVG generated with {len(doc.paths) - skipped} paths")
    return "\n".join(lines)
