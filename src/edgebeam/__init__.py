"""Edgebeam - Light-beam paths around screen cutouts.

Edgebeam computes the vector path an animated light beam follows around a
device's screen cutout: a notch, a pill-shaped island, a circular punch-hole
camera, or no cutout at all. Given a detected cutout and a padding value it
returns an SVG path, an optional directional-glow mask, the exact perimeter
used to size a seamless dash animation, and the canvas bounds to render into.

Example:
    >>> from edgebeam import Cutout, CutoutType, build_path_spec
    >>> spec = build_path_spec(Cutout(CutoutType.NONE), 0)
    >>> spec.path_d
    'M 0,0 L 360,0'
"""

from edgebeam.core import build_path_spec
from edgebeam.domain import Cutout, CutoutType, PathSpec

__version__ = "0.1.0"

__all__ = [
    "Cutout",
    "CutoutType",
    "PathSpec",
    "__version__",
    "build_path_spec",
]
