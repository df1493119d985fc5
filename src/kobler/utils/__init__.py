"""Kobler adapter utilities."""

from .constants import (
    BIDDER_CODE,
    BIDDER_ENDPOINT,
    DEFAULT_CURRENCY,
    DEFAULT_TIMEOUT,
    TIME_TO_LIVE_IN_SECONDS,
)
from .user_agent import get_device_type, is_phone, is_tablet

__all__ = [
    'BIDDER_CODE',
    'BIDDER_ENDPOINT',
    'DEFAULT_CURRENCY',
    'DEFAULT_TIMEOUT',
    'TIME_TO_LIVE_IN_SECONDS',
    'get_device_type',
    'is_phone',
    'is_tablet',
]
