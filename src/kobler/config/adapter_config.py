"""
Adapter Configuration

Replaces the host framework's global configuration (bidder timeout,
ad server currency, debug mode) and the browser globals (page location,
user agent) with an explicit value passed to the request builder.

Loaded from, in increasing order of precedence:
- Dataclass defaults
- A YAML file
- KOBLER_* environment variables
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..logging import config_logger

logger = config_logger()

ENV_PREFIX = "KOBLER_"


@dataclass(frozen=True)
class AdapterConfig:
    """
    Host-level settings read while building a request.

    Attributes:
        bidder_timeout: Global bidder timeout in milliseconds
        ad_server_currency: ISO 4217 currency of the ad server
        debug: Host debug mode, forces test bids
        page_location: Current page URL, used when the auction has no referer
        user_agent: Browser user agent used for device classification
    """

    bidder_timeout: Optional[int] = None
    ad_server_currency: Optional[str] = None
    debug: bool = False
    page_location: Optional[str] = None
    user_agent: Optional[str] = None

    def __post_init__(self):
        """Validate timeout and currency."""
        if self.bidder_timeout is not None and self.bidder_timeout <= 0:
            raise ValueError(
                f"bidder_timeout must be positive, got {self.bidder_timeout}"
            )
        if self.ad_server_currency is not None and (
            len(self.ad_server_currency) != 3 or not self.ad_server_currency.isalpha()
        ):
            raise ValueError(
                f"ad_server_currency must be a 3-letter code, got {self.ad_server_currency!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result = {}
        for key, value in self.__dict__.items():
            if value is not None:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdapterConfig":
        """Create from dictionary."""
        timeout = data.get("bidder_timeout")
        return cls(
            bidder_timeout=int(timeout) if timeout is not None else None,
            ad_server_currency=data.get("ad_server_currency"),
            debug=bool(data.get("debug", False)),
            page_location=data.get("page_location"),
            user_agent=data.get("user_agent"),
        )


def _env_overrides() -> dict[str, Any]:
    """Collect KOBLER_* environment variables that are set."""
    overrides: dict[str, Any] = {}

    timeout = os.environ.get(f"{ENV_PREFIX}BIDDER_TIMEOUT")
    if timeout:
        overrides["bidder_timeout"] = int(timeout)

    currency = os.environ.get(f"{ENV_PREFIX}CURRENCY")
    if currency:
        overrides["ad_server_currency"] = currency.upper()

    debug = os.environ.get(f"{ENV_PREFIX}DEBUG")
    if debug:
        overrides["debug"] = debug.lower() in ("1", "true", "yes")

    page_location = os.environ.get(f"{ENV_PREFIX}PAGE_LOCATION")
    if page_location:
        overrides["page_location"] = page_location

    user_agent = os.environ.get(f"{ENV_PREFIX}USER_AGENT")
    if user_agent:
        overrides["user_agent"] = user_agent

    return overrides


def load_adapter_config(path: str | Path | None = None) -> AdapterConfig:
    """
    Load adapter configuration.

    Args:
        path: Optional YAML file. Defaults to $KOBLER_CONFIG_FILE when set.

    Returns:
        AdapterConfig with environment overrides applied
    """
    if path is None:
        path = os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")

    data: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded adapter config file", path=str(path))

    data.update(_env_overrides())
    return AdapterConfig.from_dict(data)


# Global instance
_adapter_config: AdapterConfig | None = None


def get_adapter_config() -> AdapterConfig:
    """Get the global adapter configuration, loading it on first use."""
    global _adapter_config
    if _adapter_config is None:
        _adapter_config = load_adapter_config()
    return _adapter_config


def reset_adapter_config() -> None:
    """Drop the cached global configuration."""
    global _adapter_config
    _adapter_config = None
