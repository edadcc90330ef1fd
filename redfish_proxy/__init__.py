"""
redfish_proxy - lazy, cached navigation over linked REST resources.

Wraps JSON documents of Redfish-style management APIs so nested objects,
member collections and @odata.id links can be walked as one tree:

    >>> root = connect()
    >>> root.Systems[0].Status.Health.raw
    'OK'
"""
from redfish_proxy.client import connect
from redfish_proxy.config import Config, ConnectorConfig, ProxyConfig, load_config
from redfish_proxy.connectors import BaseConnector, HTTPConnector, StaticConnector
from redfish_proxy.core import (
    Connector,
    ConnectorError,
    IndexOutOfRangeError,
    KeyNotApplicableError,
    KeyNotFoundError,
    NoMemberError,
    NotIndexableError,
    ProxyError,
    ResourceKeyError,
)
from redfish_proxy.resource import Resource
from redfish_proxy.utils import get_session_logger, setup_logger

try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("redfish-proxy")
except PackageNotFoundError:
    # Package not installed
    __version__ = "0.1.0"

__all__ = [
    "BaseConnector",
    "Config",
    "Connector",
    "ConnectorConfig",
    "ConnectorError",
    "HTTPConnector",
    "IndexOutOfRangeError",
    "KeyNotApplicableError",
    "KeyNotFoundError",
    "NoMemberError",
    "NotIndexableError",
    "ProxyConfig",
    "ProxyError",
    "Resource",
    "ResourceKeyError",
    "StaticConnector",
    "connect",
    "get_session_logger",
    "load_config",
    "setup_logger",
]
