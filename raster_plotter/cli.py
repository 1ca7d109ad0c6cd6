"""Command-line entry: image file → plotter SVG.

Runs the full pipeline from an image on disk to an exported SVG:
    1. Load and validate config (YAML, optional) and apply CLI overrides
    2. Capture the image as an RGBA buffer
    3. Threshold → trace → (simplify) → order → serialize
    4. Export atomically to <out_dir>/<filename>

Refactored architecture:
    - trace_main(image_path, cfg) → dict
        * Callable function (used by tests and other front-ends)
        * Returns: {svg_path, num_paths, num_points, travel_before_px,
                   travel_after_px, drawn_length_px}
    - main(argv) → exit code, wired to the ``raster-plotter`` console script

CLI:
    raster-plotter --image reef.png
    raster-plotter --image reef.png --config configs/raster_trace.v1.yaml \\
                   --threshold 0.35 --line-color "#1a1a1a" --simplify \\
                   --out-dir outputs/svg --filename reef-42.svg
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .capture import load_rgba
from .export import export_with_config
from .pipeline.runner import run_pipeline
from .utils import logging_config, validators

logger = logging.getLogger(__name__)


def trace_main(image_path: str, cfg: validators.RasterTraceV1) -> Dict[str, Any]:
    """Trace one image and export the SVG.

    Parameters
    ----------
    image_path : str
        Input image (any format Pillow reads)
    cfg : RasterTraceV1
        Validated config

    Returns
    -------
    dict
        svg_path, num_paths, num_points, travel_before_px, travel_after_px,
        drawn_length_px
    """
    pixels, width, height = load_rgba(image_path)
    result = run_pipeline(pixels, width, height, cfg)
    svg_path = export_with_config(result.svg, cfg.export)

    m = result.metrics
    return {
        'svg_path': str(svg_path),
        'num_paths': m.num_paths,
        'num_points': m.num_points,
        'travel_before_px': m.travel_before_px,
        'travel_after_px': m.travel_after_px,
        'drawn_length_px': m.drawn_length_px,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trace dark pixels of an image into an ordered pen-plotter SVG."
    )
    parser.add_argument("--image", required=True, help="Input image path")
    parser.add_argument("--config", default=None, help="raster_trace.v1 YAML config")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Luminance cutoff in [0, 1] (default 0.5)")
    parser.add_argument("--line-color", default=None, help="SVG stroke colour (default #000000)")
    parser.add_argument("--out-dir", default=None, help="Output directory")
    parser.add_argument("--filename", default=None, help="Output SVG file name")
    parser.add_argument("--simplify", action="store_true",
                        help="Drop points that do not change direction")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def resolve_config(args: argparse.Namespace) -> validators.RasterTraceV1:
    """Load the YAML config (or defaults) and apply command-line overrides.

    Raises
    ------
    ConfigError
        If the merged config fails validation
    """
    cfg = (validators.load_raster_trace_config(args.config)
           if args.config else validators.RasterTraceV1())

    data = cfg.model_dump(by_alias=True)
    if args.threshold is not None:
        data['threshold'] = args.threshold
    if args.line_color is not None:
        data['line_color'] = args.line_color
    if args.out_dir is not None:
        data['export']['out_dir'] = args.out_dir
    if args.filename is not None:
        data['export']['filename'] = args.filename
    if args.simplify:
        data['simplify']['enabled'] = True
    if args.log_level is not None:
        data['logging']['log_level'] = args.log_level

    try:
        return validators.RasterTraceV1(**data)
    except ValidationError as e:
        raise validators.ConfigError(f"Invalid command-line options: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Returns
    -------
    int
        0 on success, 1 when the image cannot be read or traced, 2 on a bad
        config or command-line option
    """
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(args)
    except (validators.ConfigError, FileNotFoundError) as e:
        logging_config.setup_logging(context={"app": "trace"})
        logger.error(str(e))
        logging_config.shutdown()
        return 2

    logging_config.setup_from_config(cfg.logging, context={"app": "trace"})
    logging_config.install_excepthook()
    logging_config.push_context(image=Path(args.image).name)

    try:
        summary = trace_main(args.image, cfg)
        logger.info(
            f"Wrote {summary['svg_path']}: {summary['num_paths']} paths, "
            f"{summary['num_points']} points"
        )
        return 0
    except (OSError, validators.InvalidInput) as e:
        logger.error(str(e))
        return 1
    finally:
        logging_config.pop_context(keys=["image"])
        logging_config.shutdown()
