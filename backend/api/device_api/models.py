"""
SQLAlchemy database models.
"""

from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, Text
from .database import Base
from .device_types import DeviceType


class Device(Base):
    """Smart home device record."""
    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")
    device_type = Column(
        Enum(DeviceType, native_enum=False, length=32, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    owned_by = Column(String(50), nullable=False)
    is_online = Column(Boolean, nullable=False, default=False)
    last_alarm_reason = Column(Text, nullable=False, default="")
    last_alarm_time = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Device {self.id} {self.name}>"
