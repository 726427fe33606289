"""Directional glow masks.

The glow layer should read as radiating away from the cutout rather than
bleeding uniformly, so the renderer clips it with a mask region:

- Bar shapes: the region below the bar, closed at the canvas bottom,
  filled with the ``nonzero`` rule
- Orbit shapes: the canvas rectangle followed by the shape's own loop,
  filled with the ``evenodd`` rule so the shape is subtracted
"""

from edgebeam.core.notch import BarPath
from edgebeam.core.pathdata import PathData, format_number
from edgebeam.domain import FillRule


def bar_mask(bar: BarPath, canvas_height: float) -> tuple[str, FillRule]:
    """Mask admitting glow only below a bar.

    The bar is extended straight down from its end to the canvas bottom,
    back along the bottom to below its start, and closed.

    Args:
        bar: Bar path the mask is derived from
        canvas_height: Canvas height to extend down to

    Returns:
        Tuple of (mask path data, fill rule)
    """
    end_x, start_x = bar.end[0], bar.start[0]
    h = format_number(canvas_height)
    mask_d = f"{bar.path_d} L {format_number(end_x)},{h} L {format_number(start_x)},{h} Z"
    return mask_d, FillRule.NONZERO


def orbit_mask(path_d: str, canvas_width: float, canvas_height: float) -> tuple[str, FillRule]:
    """Mask admitting glow only outside a closed shape.

    Args:
        path_d: Closed shape path, in canvas-local coordinates
        canvas_width: Canvas width
        canvas_height: Canvas height

    Returns:
        Tuple of (mask path data, fill rule)
    """
    outer = (
        PathData()
        .move_to(0, 0)
        .line_to(canvas_width, 0)
        .line_to(canvas_width, canvas_height)
        .line_to(0, canvas_height)
        .close()
    )
    return f"{outer} {path_d}", FillRule.EVENODD
