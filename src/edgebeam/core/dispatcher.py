"""Category dispatch from a detected cutout to a finished PathSpec.

Cutout categories fall into two rendering families:

- Bar (``none``, ``notch``): attached to the top edge; an open line across
  the full usable width, detouring around the notch. The canvas origin is
  the screen origin, so path coordinates are absolute.
- Orbit (``punch_hole``, ``teardrop``, ``island``): a closed loop around an
  isolated shape. The canvas hugs the padded shape plus bleed and the path
  is translated into that local frame.

Two inputs produce no result instead of an error: an unrecognized category,
and a category other than ``none`` without both width and height. Callers
treat no result as "nothing to render".
"""

import functools

from edgebeam.config import GeometryConfig, ScreenConfig
from edgebeam.core.bounds import bleed_canvas, pad_box
from edgebeam.core.mask import bar_mask, orbit_mask
from edgebeam.core.notch import BarPath, build_notch_bar, build_straight_bar
from edgebeam.core.primitives import (
    circle_path,
    circle_perimeter,
    rounded_rect_path,
    rounded_rect_perimeter,
)
from edgebeam.domain import Box, Cutout, CutoutType, PathSpec, ShapeFamily, Viewport
from edgebeam.utils.logging import get_logger

logger = get_logger(__name__)

_FAMILIES: dict[CutoutType, ShapeFamily] = {
    CutoutType.NONE: ShapeFamily.BAR,
    CutoutType.NOTCH: ShapeFamily.BAR,
    CutoutType.PUNCH_HOLE: ShapeFamily.ORBIT,
    CutoutType.TEARDROP: ShapeFamily.ORBIT,
    CutoutType.ISLAND: ShapeFamily.ORBIT,
}


def classify(cutout_type: CutoutType | str) -> ShapeFamily | None:
    """Rendering family for a cutout category.

    Args:
        cutout_type: Category, as an enum member or its string value

    Returns:
        The family, or None for categories this package does not know
    """
    try:
        return _FAMILIES[CutoutType(cutout_type)]
    except ValueError:
        return None


def build_path_spec(
    cutout: Cutout,
    padding: float = 0.0,
    *,
    viewport: Viewport | None = None,
    config: GeometryConfig | None = None,
) -> PathSpec | None:
    """Build the beam path for a detected cutout.

    Pure and deterministic: the result depends only on the arguments, so it
    may be recomputed freely or memoized (see :func:`cached_path_spec`).

    Args:
        cutout: Detected cutout
        padding: Offset of the traced boundary from the physical cutout;
            positive draws outside it, negative inside it
        viewport: Usable screen size (defaults to ScreenConfig)
        config: Geometry settings (defaults to GeometryConfig)

    Returns:
        PathSpec, or None when there is nothing to render
    """
    config = config or GeometryConfig()
    viewport = viewport or ScreenConfig().to_viewport()

    if classify(cutout.type) is None:
        logger.debug("Unrecognized cutout type", cutout_type=str(cutout.type))
        return None

    cutout_type = CutoutType(cutout.type)
    if cutout_type is CutoutType.NONE:
        spec = _build_clear_bar(padding, viewport, config)
    elif cutout.width is None or cutout.height is None:
        logger.debug("Cutout missing dimensions", cutout_type=cutout_type.value)
        return None
    else:
        physical = Box(cutout.x or 0.0, cutout.y or 0.0, cutout.width, cutout.height)
        match cutout_type:
            case CutoutType.NOTCH:
                spec = _build_notch(physical, cutout.radius, padding, viewport, config)
            case CutoutType.PUNCH_HOLE | CutoutType.TEARDROP:
                spec = _build_dot(physical, padding, config)
            case _:
                spec = _build_island(physical, cutout.radius, padding, config)

    logger.debug(
        "Path spec built",
        cutout_type=cutout_type.value,
        family=spec.family.value,
        perimeter=round(spec.perimeter, 3),
        padding=padding,
    )
    return spec


@functools.lru_cache(maxsize=256)
def cached_path_spec(
    cutout: Cutout,
    padding: float = 0.0,
    viewport: Viewport | None = None,
) -> PathSpec | None:
    """Memoized :func:`build_path_spec` for the default geometry settings."""
    return build_path_spec(cutout, padding, viewport=viewport)


def _build_clear_bar(padding: float, viewport: Viewport, config: GeometryConfig) -> PathSpec:
    bar = build_straight_bar(viewport.width, padding)
    height = max(max(padding, 0.0) + config.bleed, config.min_extent)
    return _bar_spec(bar, viewport.width, height, config)


def _build_notch(
    physical: Box,
    radius: float | None,
    padding: float,
    viewport: Viewport,
    config: GeometryConfig,
) -> PathSpec:
    # The detour hangs from the bar with its walls pushed out by padding.
    # Walls never leave the screen. Depth is measured from the bar at
    # base_y = padding, so the bottom clears the notch by 2 * padding and the
    # perimeter grows strictly with padding.
    if radius is None:
        radius = config.notch_radius
    walls = pad_box(
        physical.x, physical.y, physical.width, physical.height, padding, config.min_extent
    )
    depth = max(physical.bottom + padding, config.min_extent)

    bar = build_notch_bar(
        screen_width=viewport.width,
        base_y=padding,
        left=max(walls.x, 0.0),
        right=min(walls.right, viewport.width),
        depth=depth,
        radius=radius + padding,
    )
    height = max(bar.bottom, 0.0) + config.bleed
    return _bar_spec(bar, viewport.width, height, config)


def _bar_spec(bar: BarPath, width: float, height: float, config: GeometryConfig) -> PathSpec:
    mask_d, fill_rule = bar_mask(bar, height) if config.directional_mask else (None, None)
    return PathSpec(
        path_d=bar.path_d,
        perimeter=bar.perimeter,
        svg_left=0.0,
        svg_top=0.0,
        svg_width=width,
        svg_height=height,
        family=ShapeFamily.BAR,
        mask_d=mask_d,
        mask_fill_rule=fill_rule,
    )


def _build_dot(physical: Box, padding: float, config: GeometryConfig) -> PathSpec:
    # Larger dimension as diameter, so oval readings are fully enclosed.
    r = max(max(physical.width, physical.height) / 2 + padding, config.min_extent / 2)
    cx = physical.x + physical.width / 2
    cy = physical.y + physical.height / 2

    canvas = bleed_canvas(Box(cx - r, cy - r, 2 * r, 2 * r), config.bleed)
    path_d = circle_path(cx - canvas.x, cy - canvas.y, r)
    return _orbit_spec(path_d, circle_perimeter(r), canvas, config)


def _build_island(
    physical: Box, radius: float | None, padding: float, config: GeometryConfig
) -> PathSpec:
    if radius is None:
        radius = config.island_radius
    shape = pad_box(
        physical.x, physical.y, physical.width, physical.height, padding, config.min_extent
    )
    canvas = bleed_canvas(shape, config.bleed)
    r = radius + padding
    path_d = rounded_rect_path(
        shape.x - canvas.x, shape.y - canvas.y, shape.width, shape.height, r
    )
    perimeter = rounded_rect_perimeter(shape.width, shape.height, r)
    return _orbit_spec(path_d, perimeter, canvas, config)


def _orbit_spec(path_d: str, perimeter: float, canvas: Box, config: GeometryConfig) -> PathSpec:
    if config.directional_mask:
        mask_d, fill_rule = orbit_mask(path_d, canvas.width, canvas.height)
    else:
        mask_d, fill_rule = None, None
    return PathSpec(
        path_d=path_d,
        perimeter=perimeter,
        svg_left=canvas.x,
        svg_top=canvas.y,
        svg_width=canvas.width,
        svg_height=canvas.height,
        family=ShapeFamily.ORBIT,
        mask_d=mask_d,
        mask_fill_rule=fill_rule,
    )
