"""
redfish_proxy Core - Shared protocols and exceptions.
"""

from redfish_proxy.core.exceptions import (
    ConfigurationError,
    ConnectorError,
    IndexOutOfRangeError,
    KeyNotApplicableError,
    KeyNotFoundError,
    NoMemberError,
    NotIndexableError,
    ProxyError,
    ResourceKeyError,
)
from redfish_proxy.core.protocols import Connector, JSONValue

__all__ = [
    "ConfigurationError",
    "Connector",
    "ConnectorError",
    "IndexOutOfRangeError",
    "JSONValue",
    "KeyNotApplicableError",
    "KeyNotFoundError",
    "NoMemberError",
    "NotIndexableError",
    "ProxyError",
    "ResourceKeyError",
]
