"""Exception hierarchy for Edgebeam."""


class EdgebeamError(Exception):
    """Base exception for all Edgebeam errors."""

    pass


class CutoutError(EdgebeamError):
    """Errors related to cutout descriptions."""

    pass


class InvalidCutoutError(CutoutError):
    """A cutout mapping could not be interpreted."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid cutout field '{field}': {reason}")


class GeometryError(EdgebeamError):
    """Errors in geometric calculations."""

    pass


class PathDataError(GeometryError):
    """Malformed or unsupported path data."""

    def __init__(self, path_d: str, reason: str) -> None:
        self.path_d = path_d
        self.reason = reason
        super().__init__(f"Invalid path data '{path_d}': {reason}")


class DeviceError(EdgebeamError):
    """Errors related to device geometry lookup."""

    pass


class UnknownDeviceError(DeviceError):
    """Device identifier is not present in the device table."""

    def __init__(self, model_id: str) -> None:
        self.model_id = model_id
        super().__init__(f"Device '{model_id}' not found in device table")


class BatchInputError(EdgebeamError):
    """A batch file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read batch file '{path}': {reason}")


class ExportError(EdgebeamError):
    """Error writing a preview document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
