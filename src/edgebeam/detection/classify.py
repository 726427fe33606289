"""Classification of raw cutout bounding rectangles.

Platforms that expose cutouts report them as bounding rectangles in
physical pixels with no category. These helpers convert them to
device-independent units and guess the category from the shape.
"""

from collections.abc import Iterable
from enum import Enum

from edgebeam.domain import Cutout, CutoutType

# Rectangles whose top lies within this share of the screen count as top cutouts
TOP_GRAVITY_FRACTION = 0.15

# Floating cutouts wider than this many heights are islands
ISLAND_ASPECT_RATIO = 2.0

Rect = tuple[float, float, float, float]


class Gravity(str, Enum):
    """Screen edge a cutout is attached to."""

    TOP = "top"
    BOTTOM = "bottom"


def to_dip(px: float, density: float) -> float:
    """Convert physical pixels to device-independent units."""
    if density <= 0:
        raise ValueError(f"density must be positive, got {density}")
    return px / density


def gravity_of(rect_top: float, screen_height: float) -> Gravity:
    """Edge a cutout belongs to, judged by where its top lies."""
    if rect_top < screen_height * TOP_GRAVITY_FRACTION:
        return Gravity.TOP
    return Gravity.BOTTOM


def classify_bounding_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    density: float = 1.0,
) -> Cutout:
    """Build a Cutout from a bounding rectangle in physical pixels.

    A rectangle touching the top edge is merged with the bezel and is a
    notch. Floating rectangles more than twice as wide as they are tall are
    islands; the rest are punch holes.

    Args:
        x: Left edge in pixels
        y: Top edge in pixels
        width: Width in pixels
        height: Height in pixels
        density: Pixels per device-independent unit

    Returns:
        Cutout in device-independent units
    """
    w_dip = to_dip(width, density)
    h_dip = to_dip(height, density)

    if y == 0:
        cutout_type = CutoutType.NOTCH
    elif w_dip > h_dip * ISLAND_ASPECT_RATIO:
        cutout_type = CutoutType.ISLAND
    else:
        cutout_type = CutoutType.PUNCH_HOLE

    return Cutout(
        type=cutout_type,
        x=to_dip(x, density),
        y=to_dip(y, density),
        width=w_dip,
        height=h_dip,
    )


def first_cutout(rects: Iterable[Rect], density: float = 1.0) -> Cutout:
    """Classify the first reported rectangle.

    Args:
        rects: Bounding rectangles as (x, y, width, height) in pixels
        density: Pixels per device-independent unit

    Returns:
        Cutout for the first rectangle, or the "none" cutout if there is none
    """
    for x, y, width, height in rects:
        return classify_bounding_rect(x, y, width, height, density)
    return Cutout.none()
