"""Open bar paths for edge-attached cutouts.

A notch is merged with the top bezel, so its beam is a line sweeping the
screen edge rather than an orbit. The bar runs across the full width at a
resting height and detours down around the notch with rounded corners:
convex quarter turns into and out of the notch walls, concave quarter turns
at the bottom corners.

Key functions:
- build_notch_bar: Bar with a detour around a rectangular notch
- build_straight_bar: Bar for a screen without any cutout
"""

import math
from dataclasses import dataclass

from edgebeam.core.pathdata import PathData, Point2D


@dataclass(frozen=True, slots=True)
class BarPath:
    """An open bar path and the values derived with it.

    Attributes:
        path_d: Path data
        perimeter: Arc length of the path
        start: First point of the path
        end: Last point of the path
        bottom: Lowest y coordinate reached by the path
    """

    path_d: str
    perimeter: float
    start: Point2D
    end: Point2D
    bottom: float


def build_straight_bar(screen_width: float, base_y: float) -> BarPath:
    """Straight line across the full width at ``base_y``.

    Examples:
        >>> build_straight_bar(360, 0).path_d
        'M 0,0 L 360,0'
    """
    path = PathData().move_to(0, base_y).line_to(screen_width, base_y)
    return BarPath(
        path_d=str(path),
        perimeter=float(screen_width),
        start=(0.0, base_y),
        end=(screen_width, base_y),
        bottom=base_y,
    )


def build_notch_bar(
    screen_width: float,
    base_y: float,
    left: float,
    right: float,
    depth: float,
    radius: float,
) -> BarPath:
    """Bar that detours around a notch hanging below it.

    The path starts at the left screen edge, runs to the notch, turns down
    the left wall, along the bottom, up the right wall and out to the right
    screen edge. A wall closer to its screen edge than the corner radius gets
    a smaller transition arc that just fits. A wall at or beyond the left
    edge has no run-in and the path starts at the top of that wall; the right
    side is handled the same way.

    Args:
        screen_width: Full usable width; the bar's right end
        base_y: Resting height of the bar
        left: X of the detour's left wall
        right: X of the detour's right wall (swapped with ``left`` if smaller)
        depth: How far the detour's bottom lies below ``base_y``
        radius: Requested corner radius, clamped to half the detour's width and depth

    Returns:
        BarPath whose perimeter is computed from the same clamped values
    """
    if right < left:
        left, right = right, left
    depth = max(0.0, depth)
    width = right - left
    bottom = base_y + depth
    r = max(0.0, min(radius, width / 2, depth / 2))
    quarter = math.pi / 2 * r

    path = PathData()
    perimeter = 0.0

    if left > 0:
        # transition arc shrinks to fit the gap to the left edge
        r_in = min(r, left)
        start = (0.0, base_y)
        path.move_to(*start)
        if left - r_in > 0:
            path.line_to(left - r_in, base_y)
        path.arc_to(r_in, r_in, left, base_y + r_in, sweep=True)
        perimeter += (left - r_in) + math.pi / 2 * r_in
        wall_top = base_y + r_in
    else:
        start = (left, base_y)
        path.move_to(*start)
        wall_top = base_y

    # left wall, bottom-left corner
    path.line_to(left, bottom - r)
    path.arc_to(r, r, left + r, bottom, sweep=False)
    perimeter += (bottom - r - wall_top) + quarter

    # bottom edge, bottom-right corner
    path.line_to(right - r, bottom)
    path.arc_to(r, r, right, bottom - r, sweep=False)
    perimeter += (width - 2 * r) + quarter

    if right < screen_width:
        r_out = min(r, screen_width - right)
        path.line_to(right, base_y + r_out)
        path.arc_to(r_out, r_out, right + r_out, base_y, sweep=True)
        end = (screen_width, base_y)
        if right + r_out < screen_width:
            path.line_to(*end)
        perimeter += (
            (bottom - r - (base_y + r_out))
            + math.pi / 2 * r_out
            + (screen_width - (right + r_out))
        )
    else:
        end = (right, base_y)
        path.line_to(*end)
        perimeter += bottom - r - base_y

    return BarPath(
        path_d=str(path),
        perimeter=perimeter,
        start=start,
        end=end,
        bottom=bottom,
    )
