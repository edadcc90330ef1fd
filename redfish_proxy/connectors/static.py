"""
In-memory connector serving pre-loaded documents.

Useful for offline fixtures, recorded service dumps and tests.
"""
import copy
from collections import Counter
from typing import Dict, Mapping

from loguru import logger

from redfish_proxy.connectors.base import BaseConnector
from redfish_proxy.core.exceptions import ConnectorError
from redfish_proxy.core.protocols import JSONValue


class StaticConnector(BaseConnector):
    """Serves documents from an oid -> document mapping."""

    def __init__(self, documents: Mapping[str, JSONValue]):
        self._documents: Dict[str, JSONValue] = dict(documents)
        self.fetch_count: Counter = Counter()

    def get(self, oid: str) -> JSONValue:
        """Return a deep copy of the stored document, like a fresh response body."""
        self.fetch_count[oid] += 1
        if oid not in self._documents:
            logger.debug(f"No static document for {oid}")
            raise ConnectorError("Fetch failed: HTTP 404", oid=oid, status=404)
        return copy.deepcopy(self._documents[oid])
