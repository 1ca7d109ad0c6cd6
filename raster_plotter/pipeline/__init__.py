"""Raster → ordered SVG polylines pipeline.

Modules:
    - threshold_mask: RGBA buffer → boolean foreground mask (luminance cutoff)
    - path_tracer: foreground mask → paths (greedy 12-offset walk, consumes mask)
    - simplify: optional direction-change point reduction
    - path_orderer: greedy nearest-endpoint reordering to cut pen-up travel
    - svg_serializer: ordered paths → SVG document text
    - runner: wires the stages together from a validated config

Workflow:
    1. Capture collaborator supplies RGBA bytes + width/height
    2. Threshold → mask
    3. Trace → path set (single-point paths dropped)
    4. (optional) Simplify
    5. Order → permuted path set
    6. Serialize → SVG text, handed to the export sink

Every stage is synchronous and deterministic; data flows strictly forward.
"""

from .path_orderer import order
from .path_tracer import trace
from .runner import PipelineMetrics, PipelineResult, run_pipeline, trace_to_svg
from .svg_serializer import VectorDocument, serialize
from .threshold_mask import build_mask

__all__ = [
    'build_mask',
    'trace',
    'order',
    'serialize',
    'VectorDocument',
    'run_pipeline',
    'trace_to_svg',
    'PipelineResult',
    'PipelineMetrics',
]
