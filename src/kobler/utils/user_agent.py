"""User agent classification into OpenRTB device types."""

import re

from .constants import (
    DEVICE_TYPE_PERSONAL_COMPUTER,
    DEVICE_TYPE_PHONE,
    DEVICE_TYPE_TABLET,
)

# Checked first - some tablets also match the generic mobile pattern
TABLET_PATTERN: re.Pattern = re.compile(
    r"(tablet|ipad|playbook|silk|android 3.0|xoom|sch-i800|kindle)|(android(?!.*mobi))",
    re.I,
)

PHONE_PATTERN: re.Pattern = re.compile(
    r"(android|bb\d+|meego).+mobile|avantgo|bada\/|blackberry|blazer|compal|elaine"
    r"|fennec|hiptop|iemobile|ip(hone|od)|iris|kindle|lge |maemo|midp|mmp"
    r"|mobile.+firefox|netfront|opera m(ob|in)i|palm( os)?|phone|p(ixi|re)\/"
    r"|plucker|pocket|psp|series([46])0|symbian|treo|up\.(browser|link)"
    r"|vodafone|wap|windows ce|xda|xiino",
    re.I,
)


def is_tablet(ua_string: str) -> bool:
    """Check if user agent indicates a tablet device."""
    return bool(TABLET_PATTERN.search(ua_string.lower()))


def is_phone(ua_string: str) -> bool:
    """Check if user agent indicates a phone."""
    return bool(PHONE_PATTERN.search(ua_string.lower()))


def get_device_type(ua_string: str | None) -> int:
    """
    Classify a user agent string as an OpenRTB device type.

    Args:
        ua_string: The user agent string, may be empty

    Returns:
        5 for tablets, 4 for phones, 2 for everything else
    """
    if not ua_string:
        return DEVICE_TYPE_PERSONAL_COMPUTER

    if is_tablet(ua_string):
        return DEVICE_TYPE_TABLET
    if is_phone(ua_string):
        return DEVICE_TYPE_PHONE
    return DEVICE_TYPE_PERSONAL_COMPUTER
