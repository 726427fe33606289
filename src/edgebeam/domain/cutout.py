"""Cutout description consumed by the geometry engine.

This module defines the input side of the engine:
- CutoutType: Enum of the known cutout categories
- Cutout: The detected cutout, as reported by platform detection
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from edgebeam.exceptions import InvalidCutoutError

_NUMERIC_FIELDS = ("x", "y", "width", "height", "radius")


class CutoutType(str, Enum):
    """Hardware cutout category.

    - NONE: No cutout; the beam runs along the top edge
    - PUNCH_HOLE: Circular camera hole floating in the display
    - TEARDROP: Small drop-shaped cutout, traced as a circle
    - ISLAND: Pill-shaped floating cutout
    - NOTCH: Rectangular cutout merged with the top bezel
    """

    NONE = "none"
    PUNCH_HOLE = "punch_hole"
    TEARDROP = "teardrop"
    ISLAND = "island"
    NOTCH = "notch"


@dataclass(frozen=True, slots=True)
class Cutout:
    """A detected screen cutout.

    Positions and sizes are device-independent units. ``x`` and ``y`` are the
    top-left corner of the cutout's bounding rectangle. ``type`` keeps raw
    strings for categories this package does not know, so that the engine
    can report them as no-result.

    Attributes:
        type: Cutout category
        x: Left edge of the bounding rectangle
        y: Top edge of the bounding rectangle
        width: Bounding rectangle width
        height: Bounding rectangle height
        radius: Corner rounding for rectangular shapes
    """

    type: CutoutType | str
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    radius: float | None = None

    @classmethod
    def none(cls) -> "Cutout":
        """The degenerate cutout: nothing cut out of the screen."""
        return cls(CutoutType.NONE)

    @property
    def has_dimensions(self) -> bool:
        """Whether both width and height were reported."""
        return self.width is not None and self.height is not None

    def cache_key(self) -> tuple[Any, ...]:
        """Hashable key identifying this cutout's geometry."""
        return (self.type, self.x, self.y, self.width, self.height, self.radius)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the upstream mapping form.

        Returns:
            Dictionary with ``type`` and every reported numeric field
        """
        type_value = self.type.value if isinstance(self.type, CutoutType) else self.type
        data: dict[str, Any] = {"type": type_value}
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cutout":
        """Deserialize from the upstream mapping form.

        Args:
            data: Mapping with ``type`` and optional numeric fields

        Returns:
            Cutout instance

        Raises:
            InvalidCutoutError: If ``type`` is missing or a numeric field is not a
                finite number
        """
        if "type" not in data:
            raise InvalidCutoutError("type", "missing")

        raw_type = data["type"]
        try:
            cutout_type: CutoutType | str = CutoutType(raw_type)
        except ValueError:
            cutout_type = str(raw_type)

        values: dict[str, float | None] = {}
        for name in _NUMERIC_FIELDS:
            value = data.get(name)
            if value is None:
                values[name] = None
                continue
            if isinstance(value, bool):
                raise InvalidCutoutError(name, f"expected a number, got {value!r}")
            try:
                number = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidCutoutError(name, f"expected a number, got {value!r}") from e
            if not math.isfinite(number):
                raise InvalidCutoutError(name, f"expected a finite number, got {value!r}")
            values[name] = number

        return cls(type=cutout_type, **values)
