"""
redfish_proxy Config - Configuration management.
"""

from redfish_proxy.config.loader import load_config
from redfish_proxy.config.models import Config, ConnectorConfig, ProxyConfig

__all__ = [
    "Config",
    "ConnectorConfig",
    "ProxyConfig",
    "load_config",
]
