from datetime import datetime
from unittest.mock import MagicMock

import pytest

from device_api.device_types import DeviceType
from device_api.exceptions import DeviceNotFoundError
from device_api.models import Device
from device_api.schemas import AlarmRequest, DeviceCreate, DeviceUpdate
from device_api.service import DeviceService, apply_update, format_alarm_reason


def make_device(**overrides):
    fields = dict(
        id=1,
        name="A",
        description="front door",
        device_type=DeviceType.CAMERA,
        owned_by="o1",
        is_online=False,
        last_alarm_reason="",
    )
    fields.update(overrides)
    return Device(**fields)


def test_apply_update_keeps_untouched_fields():
    merged = apply_update(make_device(), DeviceUpdate(is_online=True))
    assert merged == {
        "name": "A",
        "description": "front door",
        "is_online": True,
        "owned_by": "o1",
        "device_type": DeviceType.CAMERA,
        "last_alarm_reason": "",
    }


def test_apply_update_overrides_every_present_field():
    patch = DeviceUpdate(
        name="B",
        description="",
        is_online=True,
        owned_by="o2",
        device_type="LOCK",
        last_alarm_reason="cleared",
    )
    merged = apply_update(make_device(), patch)
    assert merged == {
        "name": "B",
        "description": "",
        "is_online": True,
        "owned_by": "o2",
        "device_type": "LOCK",
        "last_alarm_reason": "cleared",
    }


def test_apply_update_false_and_empty_count_as_present():
    merged = apply_update(make_device(is_online=True), DeviceUpdate(is_online=False, description=""))
    assert merged["is_online"] is False
    assert merged["description"] == ""


def test_apply_update_does_not_validate_or_mutate():
    baseline = make_device()
    merged = apply_update(baseline, DeviceUpdate(name="not valid!"))
    assert merged["name"] == "not valid!"
    assert baseline.name == "A"


def test_format_alarm_reason():
    assert format_alarm_reason("CRITICAL", "Smoke detected") == "[CRITICAL] Smoke detected"


def test_create_device():
    repo = MagicMock()
    repo.create.return_value = 7
    service = DeviceService(repo)

    device_id = service.create_device(
        DeviceCreate(name="Cam1", description="d", device_type="CAMERA", owned_by="o1")
    )

    assert device_id == 7
    repo.create.assert_called_once_with(name="Cam1", description="d", device_type="CAMERA", owned_by="o1")


def test_get_device_not_found():
    repo = MagicMock()
    repo.get_by_id.return_value = None

    with pytest.raises(DeviceNotFoundError) as exc_info:
        DeviceService(repo).get_device(99)

    assert exc_info.value.device_id == 99
    assert str(exc_info.value) == "device not found with ID: 99"


def test_update_device_persists_merged_fields():
    repo = MagicMock()
    repo.get_by_id.return_value = make_device()

    DeviceService(repo).update_device(1, DeviceUpdate(is_online=True))

    repo.update.assert_called_once()
    device_id, fields = repo.update.call_args.args
    assert device_id == 1
    assert fields["is_online"] is True
    assert fields["name"] == "A"
    assert fields["owned_by"] == "o1"


def test_update_device_not_found_writes_nothing():
    repo = MagicMock()
    repo.get_by_id.return_value = None

    with pytest.raises(DeviceNotFoundError):
        DeviceService(repo).update_device(99, DeviceUpdate(name="B"))

    repo.update.assert_not_called()


def test_delete_device_not_found_writes_nothing():
    repo = MagicMock()
    repo.get_by_id.return_value = None

    with pytest.raises(DeviceNotFoundError):
        DeviceService(repo).delete_device(99)

    repo.delete.assert_not_called()


def test_trigger_alarm_formats_reason():
    repo = MagicMock()
    repo.get_by_id.return_value = make_device()
    before = datetime.utcnow()

    DeviceService(repo).trigger_alarm(1, AlarmRequest(reason="Smoke detected", level="CRITICAL"))

    repo.get_by_id.assert_called_once_with(1)
    repo.set_alarm.assert_called_once()
    device_id, reason, now = repo.set_alarm.call_args.args
    assert device_id == 1
    assert reason == "[CRITICAL] Smoke detected"
    assert now >= before


def test_trigger_alarm_not_found_writes_nothing():
    repo = MagicMock()
    repo.get_by_id.return_value = None

    with pytest.raises(DeviceNotFoundError):
        DeviceService(repo).trigger_alarm(99, AlarmRequest(reason="Smoke detected", level="CRITICAL"))

    repo.set_alarm.assert_not_called()


def test_trigger_alarm_store_failure_propagates():
    repo = MagicMock()
    repo.get_by_id.side_effect = RuntimeError("database is locked")

    with pytest.raises(RuntimeError):
        DeviceService(repo).trigger_alarm(1, AlarmRequest(reason="Smoke detected", level="CRITICAL"))

    repo.set_alarm.assert_not_called()
