"""Errors raised by the device service."""


class DeviceAPIError(Exception):
    """Base exception for all device API errors."""


class InvalidDeviceIDError(DeviceAPIError):
    """Path device ID is not a signed 64-bit decimal integer."""

    def __init__(self, raw_id: str):
        self.raw_id = raw_id
        super().__init__("invalid device ID")


class DeviceNotFoundError(DeviceAPIError):
    """Referenced device ID has no stored record."""

    def __init__(self, device_id: int):
        self.device_id = device_id
        super().__init__(f"device not found with ID: {device_id}")


class ValidationFailedError(DeviceAPIError):
    """One or more request fields failed validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(f"validation failed for: {', '.join(sorted(self.errors))}")
