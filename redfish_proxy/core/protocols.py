"""
Core Protocols - Interfaces the resource proxy depends on.

Resources depend on this abstraction, never on a concrete transport.
"""
from typing import Any, Protocol, runtime_checkable

# Decoded JSON: dict, list, str, int, float, bool or None
JSONValue = Any


# =============================================================================
# Connector Protocol
# =============================================================================

@runtime_checkable
class Connector(Protocol):
    """
    Protocol for document sources.

    A connector resolves an identifier (oid) into a decoded JSON document.
    Transport failures are raised to the caller unchanged.
    """

    def get(self, oid: str) -> JSONValue:
        """Fetch and decode the document at oid."""
        ...
