"""
Database initialization script.

Creates tables and optionally seeds a test device.
"""

import argparse
import logging

from device_api.config import settings
from device_api.database import SessionLocal, init_db
from device_api.device_types import DeviceType
from device_api.logging_config import configure_logging
from device_api.models import Device
from device_api.repository import DeviceRepository

logger = logging.getLogger("init_db")

TEST_DEVICE_NAME = "TestDevice"


def create_test_device():
    """Create a test device for development."""
    db = SessionLocal()
    try:
        # Check if device already exists
        existing = db.query(Device).filter(Device.name == TEST_DEVICE_NAME).first()
        if existing:
            logger.info(f"Test device already exists: {existing.id}")
            return existing.id

        device_id = DeviceRepository(db).create(
            name=TEST_DEVICE_NAME,
            description="Seeded by init_db",
            device_type=DeviceType.CAMERA,
            owned_by="test-user",
        )
        logger.info(f"Created test device: id={device_id}, name={TEST_DEVICE_NAME}")
        return device_id
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create device tables")
    parser.add_argument("--seed", action="store_true", help="Also create a test device")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    logger.info(f"Initializing database at {settings.database_url}")
    init_db()
    if args.seed:
        create_test_device()
    logger.info("Done")


if __name__ == "__main__":
    main()
