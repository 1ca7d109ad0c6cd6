"""End-to-end pipeline: RGBA buffer → ordered SVG text.

Stages run synchronously in one pass:
    1. build_mask (threshold)
    2. trace (consumes the mask)
    3. simplify_paths (only when cfg.simplify.enabled)
    4. order
    5. serialize

Nothing here touches the filesystem; the caller hands ``result.svg`` to the
export sink. Large images block the calling thread for the whole run and
there is no cancellation.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..utils import validators
from ..utils.geometry import Polyline, polyline_length, travel_distance
from .path_orderer import order
from .path_tracer import trace
from .simplify import simplify_paths
from .svg_serializer import VectorDocument, serialize
from .threshold_mask import PixelBuffer, build_mask

logger = logging.getLogger(__name__)

# Fixed plotter pen width in SVG units
STROKE_WIDTH = 1


@dataclass(frozen=True)
class PipelineMetrics:
    """Counts, pen-up travel and pen-down length (pixels) for one run."""
    width: int
    height: int
    num_paths: int
    num_points: int
    travel_before_px: float
    travel_after_px: float
    drawn_length_px: float


@dataclass(frozen=True)
class PipelineResult:
    """Output of run_pipeline: ordered paths, rendered SVG and metrics."""
    paths: List[Polyline]
    svg: str
    metrics: PipelineMetrics


def run_pipeline(
    pixels: PixelBuffer,
    width: int,
    height: int,
    cfg: Optional[validators.RasterTraceV1] = None
) -> PipelineResult:
    """Threshold, trace, order and serialize an RGBA buffer.

    Parameters
    ----------
    pixels : PixelBuffer
        RGBA buffer, length width*height*4, 8-bit channels
    width, height : int
        Image size in pixels
    cfg : RasterTraceV1, optional
        Validated config; defaults (threshold 0.5, black lines) when None

    Returns
    -------
    PipelineResult
        Ordered paths, SVG text and metrics

    Raises
    ------
    InvalidInput
        If the buffer does not match the dimensions (raised before any work)
    """
    cfg = cfg or validators.RasterTraceV1()

    logger.info(f"Tracing {width}x{height} image (threshold={cfg.threshold})")

    mask = build_mask(pixels, width, height, cfg.threshold)
    paths = trace(mask)

    if cfg.simplify.enabled:
        paths = simplify_paths(paths, cfg.simplify.angle_threshold_deg)

    travel_before = travel_distance(paths)
    ordered = order(paths)
    travel_after = travel_distance(ordered)

    doc = VectorDocument(
        width=width,
        height=height,
        paths=ordered,
        stroke_color=cfg.line_color,
        stroke_width=STROKE_WIDTH,
    )
    svg = serialize(doc)

    metrics = PipelineMetrics(
        width=width,
        height=height,
        num_paths=len(ordered),
        num_points=sum(len(p) for p in ordered),
        travel_before_px=travel_before,
        travel_after_px=travel_after,
        drawn_length_px=sum(polyline_length(p) for p in ordered),
    )
    logger.info(
        f"Pen-up travel {travel_before:.1f} → {travel_after:.1f} px, "
        f"pen-down {metrics.drawn_length_px:.1f} px over {metrics.num_paths} paths"
    )
    return PipelineResult(paths=ordered, svg=svg, metrics=metrics)


def trace_to_svg(
    pixels: PixelBuffer,
    width: int,
    height: int,
    cfg: Optional[validators.RasterTraceV1] = None
) -> str:
    """Convenience wrapper around run_pipeline returning only the SVG text."""
    return run_pipeline(pixels, width, height, cfg).svg
