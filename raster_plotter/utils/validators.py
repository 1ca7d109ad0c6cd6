"""YAML schema validation, config loading and input error types.

Provides centralized validation using pydantic:
    - Raster trace schema (raster_trace.v1.yaml): threshold, stroke colour,
      optional simplification, export target, logging

All entrypoints must load configs through these validators for fail-fast
error detection with actionable messages (offending key, expected range).

Errors:
    - InvalidInput: malformed pixel buffer or export request
    - ConfigError: config file fails schema validation

Usage:
    from raster_plotter.utils import validators

    cfg = validators.load_raster_trace_config("configs/raster_trace.v1.yaml")
    cfg = validators.RasterTraceV1(threshold=0.3)   # defaults elsewhere
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class InvalidInput(ValueError):
    """Raised when the pipeline is handed malformed input (buffer/dimension mismatch)."""


class ConfigError(ValueError):
    """Raised when configuration validation fails."""


# ============================================================================
# RASTER TRACE SCHEMA V1
# ============================================================================

class SimplifySection(BaseModel):
    """Optional direction-change point reduction after tracing."""
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(False, description="Drop points that do not change direction")
    angle_threshold_deg: float = Field(
        2.0, gt=0.0, le=180.0,
        description="Minimum direction change (degrees) for a point to be kept"
    )


class ExportSection(BaseModel):
    """Export sink settings (suggested filename and target directory)."""
    model_config = ConfigDict(extra="forbid")

    filename: str = Field("plotter-optimized.svg", description="Suggested SVG filename")
    out_dir: str = Field("outputs/svg", description="Directory the SVG is written to")

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v or '/' in v or '\\' in v:
            raise ValueError(f"filename must be a bare file name, got '{v}'")
        if not v.lower().endswith('.svg'):
            raise ValueError(f"filename must end with .svg, got '{v}'")
        return v


class RotateSection(BaseModel):
    """Log file rotation, by size or by time."""
    model_config = ConfigDict(extra="forbid")

    mode: str = Field("size", description="'size' or 'time'")
    max_bytes: int = Field(10_000_000, gt=0, description="Size mode: rotate above this many bytes")
    when: str = Field("D", description="Time mode: TimedRotatingFileHandler 'when' unit")
    interval: int = Field(1, gt=0, description="Time mode: units between rotations")
    backup_count: int = Field(3, ge=0, description="Rotated files kept")

    @field_validator('mode')
    @classmethod
    def validate_mode(cls, v: str) -> str:
        if v not in ("size", "time"):
            raise ValueError(f"rotate.mode must be 'size' or 'time', got '{v}'")
        return v


class LoggingSection(BaseModel):
    """Logging settings forwarded to logging_config.setup_logging."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    log_level: str = Field("INFO", description="Root log level")
    log_file: Optional[str] = Field(None, description="Log file path, null for console only")
    json_format: bool = Field(False, alias="json", description="JSON lines in the log file")
    rotate: Optional[RotateSection] = Field(None, description="File rotation, null for a plain file")
    tz: str = Field("UTC", description="Timestamp zone: 'UTC' or 'local'")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}, got '{v}'")
        return v.upper()

    @field_validator('tz')
    @classmethod
    def validate_tz(cls, v: str) -> str:
        if v not in ("UTC", "local"):
            raise ValueError(f"tz must be 'UTC' or 'local', got '{v}'")
        return v


class RasterTraceV1(BaseModel):
    """Raster trace schema v1 (luminance threshold → SVG polylines).

    Only ``threshold`` and ``line_color`` reach the core pipeline; the other
    sections configure the collaborators around it.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_version: str = Field("raster_trace.v1", alias="schema", description="Schema version")
    threshold: float = Field(0.5, ge=0.0, le=1.0, description="Luminance cutoff; darker pixels are traced")
    line_color: str = Field("#000000", description="SVG stroke colour")
    simplify: SimplifySection = Field(default_factory=SimplifySection)
    export: ExportSection = Field(default_factory=ExportSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "raster_trace.v1":
            raise ValueError(f"Expected schema 'raster_trace.v1', got '{v}'")
        return v

    @field_validator('line_color')
    @classmethod
    def validate_line_color(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("line_color must be non-empty")
        if any(ch in v for ch in '"<>'):
            raise ValueError(f"line_color must not contain quotes or angle brackets, got '{v}'")
        return v


# ============================================================================
# PUBLIC API
# ============================================================================

def load_raster_trace_config(path: Union[str, Path]) -> RasterTraceV1:
    """Load and validate a raster trace config from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to raster_trace.v1.yaml file

    Returns
    -------
    RasterTraceV1
        Validated configuration

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ConfigError
        If the YAML does not parse or validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Raster trace config not found: {path}")

    try:
        data = fs.load_yaml(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Raster trace config at {path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Raster trace config at {path} must be a mapping, got {type(data).__name__}")
    try:
        return RasterTraceV1(**data)
    except ValidationError as e:
        raise ConfigError(f"Raster trace config validation failed at {path}: {e}") from e
