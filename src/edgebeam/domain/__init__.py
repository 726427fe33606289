"""Domain models for edgebeam.

This module contains the value types passed into and out of the geometry
engine. All models are:

- Immutable (frozen dataclasses)
- Serializable to the plain mappings used by upstream detection and
  downstream rendering
- Free of any rendering or platform details

Key classes:
- Cutout: A detected screen cutout
- PathSpec: Beam path, mask, perimeter and canvas bounds
- Box: An axis-aligned rectangle
- Viewport: The usable screen size
"""

from edgebeam.domain.cutout import Cutout, CutoutType
from edgebeam.domain.geometry import Box, Viewport
from edgebeam.domain.path_spec import FillRule, PathSpec, ShapeFamily

__all__: list[str] = [
    # Enums
    "CutoutType",
    "FillRule",
    "ShapeFamily",
    # Core types
    "Box",
    "Cutout",
    "PathSpec",
    "Viewport",
]
