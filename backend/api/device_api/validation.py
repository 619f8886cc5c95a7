"""
Field validation for device requests.

Every check is a pure function. The aggregate validators collect all failing
fields into one ``ValidationErrors`` map instead of stopping at the first one.
"""

import re

from . import device_types

# Validation constants
MIN_DEVICE_NAME_LENGTH = 1
MAX_DEVICE_NAME_LENGTH = 100
MIN_OWNER_LENGTH = 1
MAX_OWNER_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 500
MAX_LAST_ALARM_REASON_LENGTH = 200
MIN_ALARM_REASON_LENGTH = 1

ALARM_LEVELS = ("INFO", "WARNING", "CRITICAL")

# ASCII letters and digits only; str.isalnum() would accept non-ASCII letters
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")

NAME_MESSAGE = (
    f"must be between {MIN_DEVICE_NAME_LENGTH}-{MAX_DEVICE_NAME_LENGTH} characters "
    "and contain only alphanumeric characters (A-Z, a-z, 0-9)"
)
OWNER_MESSAGE = f"must be between {MIN_OWNER_LENGTH}-{MAX_OWNER_LENGTH} characters"
DESCRIPTION_MESSAGE = f"must not exceed {MAX_DESCRIPTION_LENGTH} characters"
LAST_ALARM_REASON_MESSAGE = f"must not exceed {MAX_LAST_ALARM_REASON_LENGTH} characters"
EMPTY_REASON_MESSAGE = "reason cannot be empty"
LONG_REASON_MESSAGE = f"reason must not exceed {MAX_LAST_ALARM_REASON_LENGTH} characters"
LEVEL_MESSAGE = f"level must be one of: {', '.join(ALARM_LEVELS)}"

ValidationErrors = dict[str, str]


def device_type_message() -> str:
    """Error message listing every legal device type in registry order."""
    return f"must be one of: {', '.join(device_types.type_ids())}"


def is_valid_device_name(name: str) -> bool:
    """Check if the device name is 1-100 ASCII letters or digits."""
    if not MIN_DEVICE_NAME_LENGTH <= len(name) <= MAX_DEVICE_NAME_LENGTH:
        return False
    return _ALPHANUMERIC.fullmatch(name) is not None


def is_valid_owner(owner: str) -> bool:
    return MIN_OWNER_LENGTH <= len(owner) <= MAX_OWNER_LENGTH


def is_valid_description(description: str) -> bool:
    return len(description) <= MAX_DESCRIPTION_LENGTH


def is_valid_last_alarm_reason(reason: str) -> bool:
    return len(reason) <= MAX_LAST_ALARM_REASON_LENGTH


def is_valid_alarm_level(level: str) -> bool:
    return level in ALARM_LEVELS


def validate_device_create(device) -> tuple[bool, ValidationErrors]:
    """
    Validate a device creation request.

    Args:
        device: Object with ``name``, ``description``, ``device_type`` and
            ``owned_by`` attributes

    Returns:
        Tuple of (ok, errors); ok is True iff errors is empty
    """
    errors: ValidationErrors = {}

    if not is_valid_device_name(device.name):
        errors["name"] = NAME_MESSAGE

    if not device_types.is_valid(device.device_type):
        errors["device_type"] = device_type_message()

    if not is_valid_owner(device.owned_by):
        errors["owned_by"] = OWNER_MESSAGE

    if not is_valid_description(device.description):
        errors["description"] = DESCRIPTION_MESSAGE

    return not errors, errors


def validate_device_update(patch) -> tuple[bool, ValidationErrors]:
    """
    Validate the fields present in a sparse device update.

    Absent (None) fields are skipped and never reported.
    """
    errors: ValidationErrors = {}

    if patch.name is not None and not is_valid_device_name(patch.name):
        errors["name"] = NAME_MESSAGE

    if patch.owned_by is not None and not is_valid_owner(patch.owned_by):
        errors["owned_by"] = OWNER_MESSAGE

    if patch.description is not None and not is_valid_description(patch.description):
        errors["description"] = DESCRIPTION_MESSAGE

    if patch.last_alarm_reason is not None and not is_valid_last_alarm_reason(patch.last_alarm_reason):
        errors["last_alarm_reason"] = LAST_ALARM_REASON_MESSAGE

    if patch.device_type is not None and not device_types.is_valid(patch.device_type):
        errors["device_type"] = device_type_message()

    return not errors, errors


def validate_alarm_request(alarm) -> tuple[bool, ValidationErrors]:
    """Validate an alarm trigger request. Reason and level are always both checked."""
    errors: ValidationErrors = {}

    if len(alarm.reason) < MIN_ALARM_REASON_LENGTH:
        errors["reason"] = EMPTY_REASON_MESSAGE
    elif len(alarm.reason) > MAX_LAST_ALARM_REASON_LENGTH:
        errors["reason"] = LONG_REASON_MESSAGE

    if not is_valid_alarm_level(alarm.level):
        errors["level"] = LEVEL_MESSAGE

    return not errors, errors
