"""
Device business logic.

Validation is the caller's job: the service merges and persists whatever it is
given, and only guards against operating on devices that do not exist.
"""

import logging
from datetime import datetime
from typing import Any

from .exceptions import DeviceNotFoundError
from .models import Device
from .repository import DeviceRepository
from .schemas import AlarmRequest, DeviceCreate, DeviceUpdate

logger = logging.getLogger(__name__)

# Fields a DeviceUpdate may change
MUTABLE_FIELDS = (
    "name",
    "description",
    "is_online",
    "owned_by",
    "device_type",
    "last_alarm_reason",
)


def apply_update(baseline, patch: DeviceUpdate) -> dict[str, Any]:
    """
    Merge a sparse patch over an existing device.

    Each mutable field takes the patch value when the patch carries one and
    keeps the baseline value otherwise. Values are replaced whole, never
    combined.

    Args:
        baseline: Current device (anything with the mutable field attributes)
        patch: Fields to change

    Returns:
        Effective value of every mutable field
    """
    changes = patch.changes()
    return {
        field: changes[field] if field in changes else getattr(baseline, field)
        for field in MUTABLE_FIELDS
    }


def format_alarm_reason(level: str, reason: str) -> str:
    """Stored alarm text, e.g. ``[CRITICAL] Smoke detected``."""
    return f"[{level}] {reason}"


class DeviceService:
    """Handles business logic for devices."""

    def __init__(self, repo: DeviceRepository):
        self.repo = repo

    def create_device(self, device: DeviceCreate) -> int:
        device_id = self.repo.create(
            name=device.name,
            description=device.description,
            device_type=device.device_type,
            owned_by=device.owned_by,
        )
        logger.info(f"Device created: id={device_id}, type={device.device_type}, owner={device.owned_by}")
        return device_id

    def get_device(self, device_id: int) -> Device:
        device = self.repo.get_by_id(device_id)
        if device is None:
            logger.warning(f"Device not found: id={device_id}")
            raise DeviceNotFoundError(device_id)
        return device

    def list_devices(self) -> list[Device]:
        return self.repo.get_all()

    def update_device(self, device_id: int, patch: DeviceUpdate) -> None:
        """Apply a sparse update to an existing device."""
        baseline = self.get_device(device_id)
        fields = apply_update(baseline, patch)
        self.repo.update(device_id, fields)
        logger.info(f"Device updated: id={device_id}, fields={sorted(patch.changes())}")

    def delete_device(self, device_id: int) -> None:
        self.get_device(device_id)
        self.repo.delete(device_id)
        logger.info(f"Device deleted: id={device_id}")

    def trigger_alarm(self, device_id: int, alarm: AlarmRequest) -> None:
        """
        Record an alarm on an existing device.

        The level is used as given; callers validate it beforehand.

        Raises:
            DeviceNotFoundError: If no device has this ID. Nothing is written.
        """
        self.get_device(device_id)
        reason = format_alarm_reason(alarm.level, alarm.reason)
        self.repo.set_alarm(device_id, reason, datetime.utcnow())
        logger.info(f"Alarm triggered: id={device_id}, reason={reason!r}")
