"""
Device type registry.

The closed set of device types a record may carry, plus the display metadata
shown to clients. The registry is built once at import time and never mutated.
"""

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class DeviceType(str, Enum):
    """Type of a smart home device."""

    CAMERA = "CAMERA"
    THERMOSTAT = "THERMOSTAT"
    SMOKE_DETECTOR = "SMOKE_DETECTOR"
    MOTION_SENSOR = "MOTION_SENSOR"
    LOCK = "LOCK"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


class DeviceTypeInfo(NamedTuple):
    """Display metadata for a device type."""
    id: str
    display_name: str
    description: str


# Insertion order is the registry order exposed to clients
_REGISTRY = MappingProxyType({
    DeviceType.CAMERA: DeviceTypeInfo("CAMERA", "Camera", "Smart security camera"),
    DeviceType.THERMOSTAT: DeviceTypeInfo("THERMOSTAT", "Thermostat", "Smart thermostat for controlling temperature"),
    DeviceType.SMOKE_DETECTOR: DeviceTypeInfo("SMOKE_DETECTOR", "Smoke Detector", "Detects smoke and fire hazards"),
    DeviceType.MOTION_SENSOR: DeviceTypeInfo("MOTION_SENSOR", "Motion Sensor", "Detects movement in monitored areas"),
    DeviceType.LOCK: DeviceTypeInfo("LOCK", "Lock", "Smart lock with remote access capabilities"),
    DeviceType.UNKNOWN: DeviceTypeInfo("UNKNOWN", "Unknown", "Unknown device type"),
})

_VALID_IDS = frozenset(member.value for member in DeviceType)


def is_valid(value) -> bool:
    """
    Check whether a value names one of the registered device types.

    Matching is exact and case-sensitive: "camera" or " CAMERA" are invalid.
    """
    if isinstance(value, DeviceType):
        return True
    return isinstance(value, str) and value in _VALID_IDS


def all_types() -> list[DeviceTypeInfo]:
    """Return metadata for every device type in registry order."""
    return list(_REGISTRY.values())


def type_ids() -> list[str]:
    """Return every device type identifier in registry order."""
    return [info.id for info in _REGISTRY.values()]
