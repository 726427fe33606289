"""Padding and bleed sizing rules.

Padding moves the traced boundary relative to the physical cutout: positive
padding draws outside the cutout, in the display glass, and negative padding
draws inside it. Bleed never touches the traced boundary; it only grows the
canvas so blur and glow are not clipped at the canvas edge. Padding is always
applied first.
"""

from edgebeam.domain import Box


def pad_box(
    x: float,
    y: float,
    width: float,
    height: float,
    padding: float,
    min_extent: float,
) -> Box:
    """Grow or shrink a rectangle symmetrically by ``padding``.

    If a large negative padding makes opposite edges cross, the smaller
    coordinate is used as the left/top edge. The result is never narrower or
    shorter than ``min_extent``; a collapsed side is re-grown around its centre.

    Args:
        x: Left edge of the physical cutout
        y: Top edge of the physical cutout
        width: Physical width
        height: Physical height
        padding: Offset applied on every side
        min_extent: Smallest allowed width and height

    Returns:
        The padded box
    """
    left, right = _ordered(x - padding, x + width + padding)
    top, bottom = _ordered(y - padding, y + height + padding)
    left, right = _at_least(left, right, min_extent)
    top, bottom = _at_least(top, bottom, min_extent)
    return Box(left, top, right - left, bottom - top)


def bleed_canvas(box: Box, bleed: float) -> Box:
    """Canvas surrounding ``box`` with ``bleed`` margin on every side.

    The origin is clamped so it never goes negative, which keeps canvases
    of shapes near the screen's top-left corner on screen. Clamping moves
    the origin only; the size stays ``box`` plus twice the bleed.
    """
    return Box(
        max(0.0, box.x - bleed),
        max(0.0, box.y - bleed),
        box.width + 2 * bleed,
        box.height + 2 * bleed,
    )


def _ordered(a: float, b: float) -> tuple[float, float]:
    return (a, b) if a <= b else (b, a)


def _at_least(low: float, high: float, extent: float) -> tuple[float, float]:
    if high - low >= extent:
        return low, high
    centre = (low + high) / 2
    return centre - extent / 2, centre + extent / 2
