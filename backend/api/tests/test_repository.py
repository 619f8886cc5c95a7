from datetime import datetime

from device_api.device_types import DeviceType
from device_api.repository import DeviceRepository


def create(repo, name="Cam1", device_type="CAMERA"):
    return repo.create(name=name, description="d", device_type=device_type, owned_by="o1")


def test_create_and_get(db_session):
    repo = DeviceRepository(db_session)
    device_id = create(repo)

    device = repo.get_by_id(device_id)
    assert device.name == "Cam1"
    assert device.device_type is DeviceType.CAMERA
    assert device.is_online is False
    assert device.last_alarm_reason == ""
    assert device.last_alarm_time is None
    assert device.created_at is not None
    assert device.updated_at == device.created_at


def test_get_missing_returns_none(db_session):
    assert DeviceRepository(db_session).get_by_id(42) is None


def test_get_all_newest_first(db_session):
    repo = DeviceRepository(db_session)
    first = create(repo, name="First")
    second = create(repo, name="Second")

    assert [d.id for d in repo.get_all()] == [second, first]


def test_update_overwrites_fields(db_session):
    repo = DeviceRepository(db_session)
    device_id = create(repo)
    created_at = repo.get_by_id(device_id).created_at

    repo.update(device_id, {"name": "Lock1", "device_type": "LOCK", "is_online": True})

    device = repo.get_by_id(device_id)
    assert device.name == "Lock1"
    assert device.device_type is DeviceType.LOCK
    assert device.is_online is True
    assert device.owned_by == "o1"
    assert device.created_at == created_at
    assert device.updated_at >= created_at


def test_delete(db_session):
    repo = DeviceRepository(db_session)
    device_id = create(repo)

    repo.delete(device_id)

    assert repo.get_by_id(device_id) is None


def test_set_alarm(db_session):
    repo = DeviceRepository(db_session)
    device_id = create(repo)
    now = datetime(2024, 5, 1, 12, 30, 0)

    repo.set_alarm(device_id, "[INFO] Door opened", now)

    device = repo.get_by_id(device_id)
    assert device.last_alarm_reason == "[INFO] Door opened"
    assert device.last_alarm_time == now
    assert device.updated_at == now
