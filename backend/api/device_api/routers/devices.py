"""
Devices API router.

Endpoints:
- GET    /api/devices - List all devices
- GET    /api/devices/{device_id} - Get one device
- POST   /api/devices - Create a device
- PUT    /api/devices/{device_id} - Partially update a device
- DELETE /api/devices/{device_id} - Delete a device
- POST   /api/devices/{device_id}/alarm - Trigger an alarm on a device
"""

import re

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import InvalidDeviceIDError, ValidationFailedError
from ..repository import DeviceRepository
from ..schemas import AlarmRequest, DeviceCreate, DeviceCreatedResponse, DeviceResponse, DeviceUpdate
from ..service import DeviceService
from ..validation import validate_alarm_request, validate_device_create, validate_device_update

router = APIRouter(prefix="/api/devices", tags=["devices"])

# ASCII digits only; int() alone also takes "1_0" and non-ASCII digits
_DEVICE_ID = re.compile(r"[+-]?[0-9]+")
MIN_DEVICE_ID = -(2 ** 63)
MAX_DEVICE_ID = 2 ** 63 - 1


def get_device_service(db: Session = Depends(get_db)) -> DeviceService:
    """Dependency that provides a DeviceService bound to the request session."""
    return DeviceService(DeviceRepository(db))


def parse_device_id(device_id: str) -> int:
    """Parse a path ID as a signed 64-bit base-10 integer."""
    if _DEVICE_ID.fullmatch(device_id) is None:
        raise InvalidDeviceIDError(device_id)
    value = int(device_id)
    if not MIN_DEVICE_ID <= value <= MAX_DEVICE_ID:
        raise InvalidDeviceIDError(device_id)
    return value


@router.get("", response_model=list[DeviceResponse])
def list_devices(service: DeviceService = Depends(get_device_service)):
    """List all devices, newest first."""
    return service.list_devices()


@router.get("/{device_id}", response_model=DeviceResponse)
def get_device(
    device_id: str,
    service: DeviceService = Depends(get_device_service)
):
    """Get a device by ID."""
    return service.get_device(parse_device_id(device_id))


@router.post("", response_model=DeviceCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_device(
    request: DeviceCreate,
    service: DeviceService = Depends(get_device_service)
):
    """
    Register a new device.

    All fields are validated together; every failing field is reported.
    """
    ok, errors = validate_device_create(request)
    if not ok:
        raise ValidationFailedError(errors)

    device_id = service.create_device(request)
    return DeviceCreatedResponse(id=device_id)


@router.put("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_device(
    device_id: str,
    request: DeviceUpdate,
    service: DeviceService = Depends(get_device_service)
):
    """
    Update the fields present in the request body.

    Fields that are absent or null keep their stored value.
    """
    device_id = parse_device_id(device_id)

    ok, errors = validate_device_update(request)
    if not ok:
        raise ValidationFailedError(errors)

    service.update_device(device_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device(
    device_id: str,
    service: DeviceService = Depends(get_device_service)
):
    """Delete a device."""
    service.delete_device(parse_device_id(device_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{device_id}/alarm", status_code=status.HTTP_204_NO_CONTENT)
def trigger_alarm(
    device_id: str,
    request: AlarmRequest,
    service: DeviceService = Depends(get_device_service)
):
    """
    Trigger an alarm on a device.

    Stores the reason prefixed with its level, e.g. "[CRITICAL] Smoke detected".
    """
    device_id = parse_device_id(device_id)

    ok, errors = validate_alarm_request(request)
    if not ok:
        raise ValidationFailedError(errors)

    service.trigger_alarm(device_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
