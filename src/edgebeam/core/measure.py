"""Independent measurement of generated path data.

The engine computes perimeters in closed form. This module measures the
emitted path data numerically with svgpathtools, which is how the CLI
cross-checks a PathSpec before handing it to a renderer.
"""

import math
from dataclasses import dataclass

from svgpathtools import parse_path

from edgebeam.domain import Box, PathSpec


@dataclass(frozen=True, slots=True)
class PathMeasurement:
    """Measured properties of a path.

    Attributes:
        length: Numerically integrated arc length
        bbox: Exact extent, including arc bulges
    """

    length: float
    bbox: Box


def measure_path(path_d: str) -> PathMeasurement:
    """Measure arc length and extent of path data.

    Args:
        path_d: Path data in SVG grammar

    Returns:
        PathMeasurement
    """
    path = parse_path(path_d)
    xmin, xmax, ymin, ymax = path.bbox()
    return PathMeasurement(
        length=path.length(),
        bbox=Box(xmin, ymin, xmax - xmin, ymax - ymin),
    )


def perimeter_matches(spec: PathSpec, rel_tol: float = 1e-6) -> bool:
    """Whether the closed-form perimeter agrees with the measured length."""
    measured = measure_path(spec.path_d).length
    return math.isclose(spec.perimeter, measured, rel_tol=rel_tol, abs_tol=1e-6)


def fits_canvas(spec: PathSpec, tolerance: float = 1e-6) -> bool:
    """Whether the traced path stays inside its own canvas."""
    bbox = measure_path(spec.path_d).bbox
    return (
        bbox.x >= -tolerance
        and bbox.y >= -tolerance
        and bbox.right <= spec.svg_width + tolerance
        and bbox.bottom <= spec.svg_height + tolerance
    )
