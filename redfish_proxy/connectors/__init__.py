"""
Document connectors for the resource proxy.

Provides connectors for:
- REST management APIs (Redfish and similar)
- In-memory document sets
"""
from redfish_proxy.connectors.base import BaseConnector
from redfish_proxy.connectors.api import HTTPConnector
from redfish_proxy.connectors.static import StaticConnector
from redfish_proxy.core.exceptions import ConnectorError

__all__ = [
    "BaseConnector",
    "ConnectorError",
    "HTTPConnector",
    "StaticConnector",
]
