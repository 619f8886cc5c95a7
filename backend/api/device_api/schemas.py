"""
Pydantic schemas for request/response validation.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field

from .device_types import DeviceType


# --- Device Schemas ---

class DeviceCreate(BaseModel):
    """Request body for POST /api/devices"""
    name: str
    description: str = ""
    # Plain string so unknown types reach the field validator
    device_type: str
    owned_by: str

    class Config:
        json_schema_extra = {
            "example": {
                "name": "FrontDoorCam",
                "description": "Camera above the front door",
                "device_type": "CAMERA",
                "owned_by": "user123"
            }
        }


class DeviceUpdate(BaseModel):
    """Request body for PUT /api/devices/{device_id}. Null and absent both mean unchanged."""
    name: Optional[str] = None
    description: Optional[str] = None
    is_online: Optional[bool] = None
    owned_by: Optional[str] = None
    device_type: Optional[str] = None
    last_alarm_reason: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Fields carried by this patch, keyed by name."""
        return self.model_dump(exclude_none=True)


class AlarmRequest(BaseModel):
    """Request body for POST /api/devices/{device_id}/alarm"""
    reason: str
    level: str = Field(..., description="INFO, WARNING or CRITICAL")

    class Config:
        json_schema_extra = {
            "example": {
                "reason": "Smoke detected",
                "level": "CRITICAL"
            }
        }


class DeviceCreatedResponse(BaseModel):
    """Response from POST /api/devices"""
    id: int


class DeviceResponse(BaseModel):
    """Full device response"""
    id: int
    owned_by: str
    device_type: DeviceType
    name: str
    description: str
    is_online: bool
    last_alarm_time: Optional[datetime] = None
    last_alarm_reason: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# --- Device Type Schemas ---

class DeviceTypeInfoResponse(BaseModel):
    """One entry of GET /api/device-types"""
    id: str
    display_name: str
    description: str
