"""
Device record store backed by a SQLAlchemy session.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy.orm import Session

from .device_types import DeviceType
from .models import Device


class DeviceRepository:
    """Persists and retrieves devices by their integer ID."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, description: str, device_type: str, owned_by: str) -> int:
        """
        Insert a new device.

        Returns:
            ID of the new device
        """
        now = datetime.utcnow()
        device = Device(
            name=name,
            description=description,
            device_type=DeviceType(device_type),
            owned_by=owned_by,
            created_at=now,
            updated_at=now,
        )
        self.db.add(device)
        self.db.commit()
        self.db.refresh(device)
        return device.id

    def get_by_id(self, device_id: int) -> Optional[Device]:
        """Get a device by ID, or None if it does not exist."""
        return self.db.query(Device).filter(Device.id == device_id).first()

    def get_all(self) -> list[Device]:
        """List all devices, newest first."""
        return self.db.query(Device).order_by(Device.created_at.desc(), Device.id.desc()).all()

    def update(self, device_id: int, fields: dict[str, Any]) -> None:
        """
        Overwrite the given columns of a device and refresh updated_at.

        Args:
            device_id: ID of the device to update
            fields: Column name to new value
        """
        values = dict(fields)
        if "device_type" in values:
            values["device_type"] = DeviceType(values["device_type"])
        values["updated_at"] = datetime.utcnow()

        self.db.query(Device).filter(Device.id == device_id).update(values, synchronize_session="fetch")
        self.db.commit()

    def delete(self, device_id: int) -> None:
        self.db.query(Device).filter(Device.id == device_id).delete(synchronize_session="fetch")
        self.db.commit()

    def set_alarm(self, device_id: int, reason: str, now: datetime) -> None:
        """Record an alarm on a device."""
        self.db.query(Device).filter(Device.id == device_id).update(
            {
                "last_alarm_reason": reason,
                "last_alarm_time": now,
                "updated_at": now,
            },
            synchronize_session="fetch",
        )
        self.db.commit()
