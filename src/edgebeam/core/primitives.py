"""Closed primitive outlines and their exact perimeters.

Each builder is paired with a perimeter function evaluated from the same
clamped parameters, so the dash animation always matches the drawn outline.
"""

import math

from edgebeam.core.pathdata import PathData


def safe_corner_radius(r: float, w: float, h: float) -> float:
    """Clamp a corner radius so opposite arcs never overlap.

    Args:
        r: Requested radius
        w: Rectangle width
        h: Rectangle height

    Returns:
        ``min(r, w/2, h/2)``, never negative
    """
    return max(0.0, min(r, w / 2, h / 2))


def circle_data(cx: float, cy: float, r: float) -> PathData:
    """Build a circle as two semicircular arcs.

    A single arc command cannot describe a full circle, so the outline
    starts at the rightmost point, sweeps clockwise to the leftmost point,
    then clockwise back to the start.
    """
    return (
        PathData()
        .move_to(cx + r, cy)
        .arc_to(r, r, cx - r, cy, large_arc=True, sweep=True)
        .arc_to(r, r, cx + r, cy, large_arc=True, sweep=True)
        .close()
    )


def circle_path(cx: float, cy: float, r: float) -> str:
    """Circle outline as path data.

    Examples:
        >>> circle_path(10, 10, 5)
        'M 15,10 A 5,5 0 1,1 5,10 A 5,5 0 1,1 15,10 Z'
    """
    return str(circle_data(cx, cy, r))


def circle_perimeter(r: float) -> float:
    """Circumference of a circle of radius ``r``."""
    return 2 * math.pi * r


def rounded_rect_data(x: float, y: float, w: float, h: float, r: float) -> PathData:
    """Build a rounded rectangle traced clockwise.

    The outline starts where the top-left corner arc ends and runs: top edge,
    top-right arc, right edge, bottom-right arc, bottom edge, bottom-left arc,
    left edge, top-left arc.

    Args:
        x: Left edge
        y: Top edge
        w: Width
        h: Height
        r: Requested corner radius (clamped by :func:`safe_corner_radius`)

    Returns:
        Closed PathData
    """
    sr = safe_corner_radius(r, w, h)
    return (
        PathData()
        .move_to(x + sr, y)
        .line_to(x + w - sr, y)
        .arc_to(sr, sr, x + w, y + sr)
        .line_to(x + w, y + h - sr)
        .arc_to(sr, sr, x + w - sr, y + h)
        .line_to(x + sr, y + h)
        .arc_to(sr, sr, x, y + h - sr)
        .line_to(x, y + sr)
        .arc_to(sr, sr, x + sr, y)
        .close()
    )


def rounded_rect_path(x: float, y: float, w: float, h: float, r: float) -> str:
    """Rounded rectangle outline as path data."""
    return str(rounded_rect_data(x, y, w, h, r))


def rounded_rect_perimeter(w: float, h: float, r: float) -> float:
    """Perimeter of a rounded rectangle.

    Two pairs of straight edges plus four quarter arcs, which together make
    one full circle of the clamped radius.
    """
    sr = safe_corner_radius(r, w, h)
    return 2 * (w - 2 * sr) + 2 * (h - 2 * sr) + 2 * math.pi * sr
