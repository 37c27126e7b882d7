"""
Configuration schema for polyset.

This module defines the tunables of the geometric core (epsilon tolerance,
validity strictness) and of the rendering layer, plus the top-level config
loaded from YAML by the CLI.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml


@dataclass(frozen=True)
class GeometryConfig:
    """
    Numeric policy of the geometric core.

    Threaded explicitly into primitives and set operations so tolerance
    and strictness are overridable per call.

    Attributes:
        epsilon: Tolerance for collinearity and boundary decisions
        strict_validity: Reject self-intersecting contours in is_valid()
    """

    epsilon: float = 1e-10
    strict_validity: bool = True

    def __post_init__(self):
        """Validate geometry configuration."""
        if not isinstance(self.epsilon, (int, float)) or isinstance(self.epsilon, bool):
            raise ValueError(f"epsilon must be a number, got {type(self.epsilon).__name__}")

        if not math.isfinite(self.epsilon) or self.epsilon < 0:
            raise ValueError(f"epsilon must be finite and >= 0, got {self.epsilon}")

        if not isinstance(self.strict_validity, bool):
            raise ValueError(
                f"strict_validity must be a bool, got {type(self.strict_validity).__name__}"
            )


DEFAULT_GEOMETRY = GeometryConfig()


@dataclass(frozen=True)
class RenderConfig:
    """Rendering configuration (canvas and drawing style)."""

    canvas_wh: Tuple[int, int] = (800, 800)  # (width, height)
    margin: int = 40
    thickness: int = 2
    opacity: float = 0.3
    text_scale: float = 0.5

    def __post_init__(self):
        """Validate render configuration."""
        width, height = self.canvas_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas_wh must have positive dimensions, got {self.canvas_wh}"
            )
        if width > 4096 or height > 4096:
            raise ValueError(
                f"canvas_wh dimensions too large (max 4096x4096), got {self.canvas_wh}"
            )

        if self.margin < 0 or 2 * self.margin >= min(width, height):
            raise ValueError(
                f"margin must be >= 0 and leave room on the canvas, got {self.margin}"
            )

        if self.thickness < 1:
            raise ValueError(f"thickness must be >= 1, got {self.thickness}")

        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0.0, 1.0], got {self.opacity}")


@dataclass(frozen=True)
class PolysetConfig:
    """
    Top-level configuration for the polyset CLI.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    output_dir: Path = Path("./runs")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PolysetConfig":
        """
        Build configuration from a parsed mapping.

        Raises:
            ValueError: If the mapping has unknown keys or invalid values
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        try:
            geometry = GeometryConfig(**data.get("geometry", {}))

            render_data = dict(data.get("render", {}))
            if "canvas_wh" in render_data:
                render_data["canvas_wh"] = tuple(render_data["canvas_wh"])
            render = RenderConfig(**render_data)
        except TypeError as e:
            raise ValueError(f"Invalid config section: {e}")

        return cls(
            geometry=geometry,
            render=render,
            output_dir=Path(data.get("output_dir", "./runs")),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "PolysetConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            geometry:
              epsilon: 1.0e-10
              strict_validity: true

            render:
              canvas_wh: [800, 800]  # [width, height]
              margin: 40
              opacity: 0.3

            output_dir: "./runs"
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        return cls.from_dict(data)
