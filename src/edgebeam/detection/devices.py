"""Device identifier to cutout geometry lookup.

Some platforms do not report cutout geometry, only a hardware model
identifier. This table maps identifiers to the physical size of their
cutout. It is an ordinary value that can be extended or replaced, never a
global the engine consults on its own.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from edgebeam.domain import Cutout, CutoutType
from edgebeam.exceptions import InvalidCutoutError, UnknownDeviceError

# Distance from the top of the screen to the top of the cutout
DEFAULT_TOP_INSET = 11.0


@dataclass(frozen=True, slots=True)
class DeviceGeometry:
    """Physical cutout geometry of one device model.

    Attributes:
        type: Cutout category
        width: Cutout width
        height: Cutout height
        radius: Corner radius, if the cutout has rounded corners
    """

    type: CutoutType
    width: float
    height: float
    radius: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data: dict[str, Any] = {
            "type": self.type.value,
            "width": self.width,
            "height": self.height,
        }
        if self.radius is not None:
            data["radius"] = self.radius
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeviceGeometry":
        """Deserialize from dictionary.

        Raises:
            InvalidCutoutError: If the type is unknown or a size is missing
        """
        try:
            cutout_type = CutoutType(data.get("type"))
        except ValueError as e:
            raise InvalidCutoutError("type", f"unknown type {data.get('type')!r}") from e
        for name in ("width", "height"):
            if data.get(name) is None:
                raise InvalidCutoutError(name, "missing")
        radius = data.get("radius")
        return cls(
            type=cutout_type,
            width=float(data["width"]),
            height=float(data["height"]),
            radius=float(radius) if radius is not None else None,
        )


class DeviceTable(Mapping[str, DeviceGeometry]):
    """Immutable mapping from device identifier to cutout geometry.

    Example:
        table = DEFAULT_DEVICE_TABLE.merged_with({"Pixel9": pixel_geometry})
        cutout = table.resolve("iPhone15,2", screen_width=393)
    """

    def __init__(self, entries: Mapping[str, DeviceGeometry] | None = None) -> None:
        self._entries: dict[str, DeviceGeometry] = dict(entries or {})

    def __getitem__(self, model_id: str) -> DeviceGeometry:
        return self._entries[model_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, model_id: str) -> DeviceGeometry | None:
        """Geometry for ``model_id``, or None if unknown."""
        return self._entries.get(model_id)

    def require(self, model_id: str) -> DeviceGeometry:
        """Geometry for ``model_id``.

        Raises:
            UnknownDeviceError: If the identifier is not in the table
        """
        geometry = self.lookup(model_id)
        if geometry is None:
            raise UnknownDeviceError(model_id)
        return geometry

    def merged_with(self, overrides: Mapping[str, DeviceGeometry]) -> "DeviceTable":
        """New table with ``overrides`` added or replacing existing entries."""
        return DeviceTable({**self._entries, **overrides})

    def register(self, model_id: str, geometry: DeviceGeometry) -> "DeviceTable":
        """New table with one entry added or replaced."""
        return self.merged_with({model_id: geometry})

    def resolve(
        self,
        model_id: str,
        screen_width: float,
        top: float = DEFAULT_TOP_INSET,
    ) -> Cutout:
        """Cutout for a device, centred horizontally on the screen.

        Args:
            model_id: Hardware model identifier
            screen_width: Usable screen width
            top: Distance from the screen top to the cutout

        Returns:
            The placed Cutout, or the "none" cutout for unknown devices
        """
        geometry = self.lookup(model_id)
        if geometry is None:
            return Cutout.none()
        return Cutout(
            type=geometry.type,
            x=(screen_width - geometry.width) / 2,
            y=top,
            width=geometry.width,
            height=geometry.height,
            radius=geometry.radius,
        )

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Serialize to dictionary."""
        return {model_id: g.to_dict() for model_id, g in self._entries.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, dict[str, Any]]) -> "DeviceTable":
        """Deserialize from dictionary."""
        return cls({model_id: DeviceGeometry.from_dict(g) for model_id, g in data.items()})


_DYNAMIC_ISLAND = DeviceGeometry(CutoutType.ISLAND, width=126.0, height=37.0, radius=20.0)

DEFAULT_DEVICE_TABLE = DeviceTable(
    {
        "iPhone15,2": _DYNAMIC_ISLAND,  # 14 Pro
        "iPhone15,3": _DYNAMIC_ISLAND,  # 14 Pro Max
        "iPhone16,1": _DYNAMIC_ISLAND,  # 15 Pro
        "iPhone16,2": _DYNAMIC_ISLAND,  # 15 Pro Max
    }
)
