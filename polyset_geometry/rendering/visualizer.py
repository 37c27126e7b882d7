"""
Polygon Visualizer Module
=========================

Pure visualization layer for set operation operands and results.

Design:
- Stateless rendering (fit once, then draw)
- No geometry logic
- Configurable styles
- Uses supervision drawing utilities

Dependencies:
- supervision (draw utilities, Color, Point)
- numpy (arrays)
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import supervision as sv

from polyset_geometry.config import RenderConfig
from polyset_geometry.polygon import Polygon

DEFAULT_OPERAND_COLORS = (
    sv.Color(r=0, g=128, b=255),
    sv.Color(r=255, g=128, b=0),
    sv.Color(r=160, g=0, b=255),
    sv.Color(r=0, g=200, b=200),
)


@dataclass(frozen=True)
class ViewTransform:
    """
    World-to-pixel mapping.

    World y grows upward, pixel y grows downward.

    Attributes:
        scale: Pixels per world unit
        min_x: World x mapped to the left margin
        max_y: World y mapped to the top margin
        margin: Canvas margin in pixels
    """

    scale: float
    min_x: float
    max_y: float
    margin: int

    def to_pixels(self, vertices: np.ndarray) -> np.ndarray:
        """Map an Nx2 world array to Nx2 int pixel coordinates."""
        if len(vertices) == 0:
            return np.empty((0, 2), dtype=np.int32)

        px = (vertices[:, 0] - self.min_x) * self.scale + self.margin
        py = (self.max_y - vertices[:, 1]) * self.scale + self.margin
        return np.round(np.stack([px, py], axis=1)).astype(np.int32)


class PolygonVisualizer:
    """
    Stateless visualizer for polygon set operations.

    Usage:
        visualizer = PolygonVisualizer(RenderConfig(canvas_wh=(640, 480)))

        frame, _ = visualizer.render(operands=[a, b], result=compute_union(a, b))
        cv2.imwrite("union.png", frame)
    """

    def __init__(
        self,
        config: RenderConfig = RenderConfig(),
        operand_colors: Sequence[sv.Color] = DEFAULT_OPERAND_COLORS,
        result_color: sv.Color = sv.Color(r=0, g=255, b=0),
        text_color: sv.Color = sv.Color(r=255, g=255, b=255),
        background_color: sv.Color = sv.Color(r=0, g=0, b=0),
    ):
        """
        Initialize visualizer with style configuration.

        Args:
            config: Canvas size, margin, line thickness, fill opacity
            operand_colors: Colors cycled through for operands
            result_color: Color for the result polygon
            text_color: Color for labels
            background_color: Canvas and label background color
        """
        self.config = config
        self.operand_colors = tuple(operand_colors)
        self.result_color = result_color
        self.text_color = text_color
        self.background_color = background_color

    def blank_canvas(self) -> np.ndarray:
        width, height = self.config.canvas_wh
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:, :] = self.background_color.as_bgr()
        return frame

    def fit(self, polygons: Sequence[Polygon]) -> ViewTransform:
        """
        Compute a transform fitting all polygons inside the canvas margins.

        Aspect ratio is preserved. Empty inputs map the unit square.
        """
        arrays = [p.vertices for p in polygons if not p.is_empty]
        if arrays:
            stacked = np.vstack(arrays)
            min_x, min_y = stacked.min(axis=0)
            max_x, max_y = stacked.max(axis=0)
        else:
            min_x, min_y, max_x, max_y = 0.0, 0.0, 1.0, 1.0

        width, height = self.config.canvas_wh
        usable_w = width - 2 * self.config.margin
        usable_h = height - 2 * self.config.margin

        span_x = max(max_x - min_x, 1e-12)
        span_y = max(max_y - min_y, 1e-12)
        scale = min(usable_w / span_x, usable_h / span_y)

        return ViewTransform(
            scale=float(scale),
            min_x=float(min_x),
            max_y=float(max_y),
            margin=self.config.margin,
        )

    def draw_polygon(
        self,
        frame: np.ndarray,
        polygon: Polygon,
        transform: ViewTransform,
        color: sv.Color,
        label: Optional[str] = None,
        filled: bool = True,
    ) -> np.ndarray:
        """
        Draw a polygon on the frame.

        Args:
            frame: Image to draw on
            polygon: Polygon in world coordinates
            transform: World-to-pixel mapping from fit()
            color: Outline/fill color
            label: Optional text placed at the top-left of the bounding box
            filled: Fill with configured opacity before drawing the outline

        Returns:
            Frame with polygon drawn
        """
        if polygon.get_number_of_points() < 2:
            return frame

        pixels = transform.to_pixels(polygon.vertices)

        if filled and polygon.get_number_of_points() >= 3:
            frame = sv.draw_filled_polygon(
                scene=frame,
                polygon=pixels,
                color=color,
                opacity=self.config.opacity,
            )

        frame = sv.draw_polygon(
            scene=frame,
            polygon=pixels,
            color=color,
            thickness=self.config.thickness,
        )

        if label is not None:
            min_x = int(np.min(pixels[:, 0]))
            min_y = int(np.min(pixels[:, 1]))
            text_anchor = sv.Point(x=min_x, y=max(min_y - 10, 20))

            frame = sv.draw_text(
                scene=frame,
                text=label,
                text_anchor=text_anchor,
                text_color=self.text_color,
                text_scale=self.config.text_scale,
                text_thickness=1,
                text_padding=5,
                background_color=self.background_color,
            )

        return frame

    def render(
        self,
        operands: Sequence[Polygon],
        result: Optional[Polygon] = None,
        labels: Optional[Sequence[str]] = None,
    ) -> Tuple[np.ndarray, ViewTransform]:
        """
        Render operands (filled) and the result (outline) on a blank canvas.

        Args:
            operands: Input polygons
            result: Output polygon, drawn last
            labels: Optional operand labels (defaults to A, B, C...)

        Returns:
            Tuple of (frame, transform used)
        """
        transform = self.fit(list(operands) + ([result] if result is not None else []))
        frame = self.blank_canvas()

        if labels is None:
            labels = [chr(ord("A") + i) for i in range(len(operands))]

        for i, polygon in enumerate(operands):
            color = self.operand_colors[i % len(self.operand_colors)]
            frame = self.draw_polygon(frame, polygon, transform, color, label=labels[i])

        if result is not None:
            frame = self.draw_polygon(
                frame, result, transform, self.result_color, label=None, filled=False
            )

        return frame, transform
