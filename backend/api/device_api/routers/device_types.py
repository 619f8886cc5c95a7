"""
Device types API router.

Endpoints:
- GET /api/device-types - List every supported device type
"""

from fastapi import APIRouter

from ..device_types import all_types
from ..schemas import DeviceTypeInfoResponse

router = APIRouter(prefix="/api/device-types", tags=["device-types"])


@router.get("", response_model=list[DeviceTypeInfoResponse])
def list_device_types():
    """List all device types in registry order."""
    return [DeviceTypeInfoResponse(**info._asdict()) for info in all_types()]
