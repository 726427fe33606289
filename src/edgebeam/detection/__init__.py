"""Turning platform cutout reports into Cutout values.

Platform queries themselves live outside this package. This module only
transforms what they return:

- DeviceTable: Model identifier to cutout geometry, for platforms that only
  report a hardware model
- classify_bounding_rect: Category guess for a raw bounding rectangle
"""

from edgebeam.detection.classify import (
    Gravity,
    classify_bounding_rect,
    first_cutout,
    gravity_of,
    to_dip,
)
from edgebeam.detection.devices import (
    DEFAULT_DEVICE_TABLE,
    DeviceGeometry,
    DeviceTable,
)

__all__ = [
    "DEFAULT_DEVICE_TABLE",
    "DeviceGeometry",
    "DeviceTable",
    "Gravity",
    "classify_bounding_rect",
    "first_cutout",
    "gravity_of",
    "to_dip",
]
