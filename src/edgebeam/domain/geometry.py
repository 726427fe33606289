"""Plain geometric value types.

- Box: An axis-aligned rectangle
- Viewport: The usable screen area shapes are placed on
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Box:
    """An axis-aligned rectangle in device-independent units.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    def translated(self, dx: float, dy: float) -> "Box":
        """Return the same box moved by (dx, dy)."""
        return Box(self.x + dx, self.y + dy, self.width, self.height)


@dataclass(frozen=True, slots=True)
class Viewport:
    """Usable screen size.

    Attributes:
        width: Usable width, the span of edge-attached beams
        height: Usable height
    """

    width: float
    height: float
