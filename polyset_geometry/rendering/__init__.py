"""
Rendering Layer
===============

Bounded Context: Polygon visualization and drawing.

Responsibilities:
- Fit operands and results onto a canvas (world -> pixel transform)
- Draw polygons (filled operands, outlined result)
- Label operands
- Pure rendering - no logic, no state

Non-responsibilities:
- Set operations (handled by operations)
- File output (handled by the CLI)

Design:
- Stateless drawing functions
- Uses supervision.draw.utils
- Configurable styles (RenderConfig)
"""

from polyset_geometry.rendering.visualizer import PolygonVisualizer, ViewTransform

__all__ = [
    "PolygonVisualizer",
    "ViewTransform",
]
