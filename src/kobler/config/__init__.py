"""
Adapter configuration.

Key components:
    - AdapterConfig: explicit replacement for host and browser globals
    - load_adapter_config(): YAML file plus KOBLER_* environment overrides
"""

from .adapter_config import (
    AdapterConfig,
    get_adapter_config,
    load_adapter_config,
    reset_adapter_config,
)

__all__ = [
    "AdapterConfig",
    "get_adapter_config",
    "load_adapter_config",
    "reset_adapter_config",
]
