"""Core path-building algorithms for edgebeam.

This module contains the cutout geometry engine:

- Primitive outlines (circle, rounded rectangle) with exact perimeters
- The notch bar, an open line detouring around an edge-attached notch
- Padding and bleed sizing rules
- Directional glow masks
- Category dispatch from a Cutout to a finished PathSpec

All functions are:
- Stateless and deterministic
- Free of I/O, so results can be recomputed or memoized at will

Key functions:
- build_path_spec: Build the PathSpec for a cutout
- classify: Rendering family of a cutout category
- circle_path / rounded_rect_path: Primitive outlines
- build_notch_bar: Bar path around a notch
- dash_pattern / dash_offset / offset_keyframes: Values for the animation driver
- measure_path: Numerical length and extent of path data
"""

from edgebeam.core.beam import dash_offset, dash_pattern, default_loop_mode, offset_keyframes
from edgebeam.core.bounds import bleed_canvas, pad_box
from edgebeam.core.dispatcher import build_path_spec, cached_path_spec, classify
from edgebeam.core.mask import bar_mask, orbit_mask
from edgebeam.core.measure import (
    PathMeasurement,
    fits_canvas,
    measure_path,
    perimeter_matches,
)
from edgebeam.core.notch import BarPath, build_notch_bar, build_straight_bar
from edgebeam.core.pathdata import PathData, format_number, parse_path_data, path_points
from edgebeam.core.primitives import (
    circle_path,
    circle_perimeter,
    rounded_rect_path,
    rounded_rect_perimeter,
    safe_corner_radius,
)

__all__ = [
    # Results
    "BarPath",
    "PathData",
    "PathMeasurement",
    # Masks
    "bar_mask",
    # Sizing
    "bleed_canvas",
    # Dispatch
    "build_notch_bar",
    "build_path_spec",
    "build_straight_bar",
    "cached_path_spec",
    # Primitives
    "circle_path",
    "circle_perimeter",
    "classify",
    # Animation values
    "dash_offset",
    "dash_pattern",
    "default_loop_mode",
    # Measurement
    "fits_canvas",
    # Path data
    "format_number",
    "measure_path",
    "offset_keyframes",
    "orbit_mask",
    "pad_box",
    "parse_path_data",
    "path_points",
    "perimeter_matches",
    "rounded_rect_path",
    "rounded_rect_perimeter",
    "safe_corner_radius",
]
