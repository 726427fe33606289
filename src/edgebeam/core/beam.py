"""Dash values for the beam animation.

The animation driver owns timing; these helpers only turn a perimeter and a
progress value into the dash pattern and offset it applies to the stroke. A
dash cycle is exactly one perimeter long, so the lit arc travels once around
the path per loop with no jump at the seam.
"""

from edgebeam.config import LoopMode
from edgebeam.core.dispatcher import classify
from edgebeam.domain import CutoutType, ShapeFamily


def dash_pattern(perimeter: float, beam_length: float) -> tuple[float, float]:
    """Two-element dash pattern for the beam stroke.

    The values are used as the stroke's dash array as is: a lit dash
    followed by a gap, together exactly one perimeter long.

    Args:
        perimeter: Path perimeter
        beam_length: Fraction of the perimeter that is lit (0-1)

    Returns:
        Tuple of (visible arc length, gap length)

    Examples:
        >>> dash_pattern(200.0, 0.25)
        (50.0, 150.0)
    """
    fraction = min(max(beam_length, 0.0), 1.0)
    visible = fraction * perimeter
    return (visible, perimeter - visible)


def dash_offset(progress: float, perimeter: float) -> float:
    """Dash offset for an animation progress value.

    Decreases linearly from ``0`` at progress 0 to ``-perimeter`` at
    progress 1.
    """
    return -progress * perimeter


def offset_keyframes(
    perimeter: float, duration_ms: int, loop_mode: LoopMode
) -> tuple[list[float], int]:
    """Dash offset keyframes and cycle length for one animation loop.

    A restarting loop runs from ``0`` to ``-perimeter`` and jumps back. A
    continuous loop travels there and back, so its cycle lasts two traversals.

    Returns:
        Tuple of (offset keyframes, cycle duration in milliseconds)
    """
    end = dash_offset(1.0, perimeter)
    if loop_mode is LoopMode.CONTINUOUS:
        return [0.0, end, 0.0], 2 * duration_ms
    return [0.0, end], duration_ms


def default_loop_mode(cutout_type: CutoutType | str) -> LoopMode:
    """Loop mode that suits a cutout category.

    Bar shapes ping-pong along the edge; orbit shapes keep circling in one
    direction. Unknown categories get the orbit behaviour.
    """
    if classify(cutout_type) is ShapeFamily.BAR:
        return LoopMode.CONTINUOUS
    return LoopMode.RESTART
