"""
Core Exceptions - Unified error hierarchy for redfish_proxy.

Lookup failures also derive from the matching builtin (KeyError, IndexError,
AttributeError) so callers can catch them the usual Python way.
"""


class ProxyError(Exception):
    """Base exception for all redfish_proxy errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


# =============================================================================
# Lookup Errors
# =============================================================================

class ResourceKeyError(ProxyError, KeyError):
    """A key or collection lookup cannot be performed on this resource."""
    pass


class KeyNotFoundError(ResourceKeyError):
    """Field is missing from the resource mapping."""

    def __init__(self, key: str, oid: str | None = None):
        super().__init__(
            f"Key '{key}' not found in resource",
            {"key": key, "oid": oid}
        )
        self.key = key
        self.oid = oid


class KeyNotApplicableError(ResourceKeyError):
    """Field access attempted on a value that is not a mapping."""

    def __init__(self, key: str, kind: str):
        super().__init__(
            f"Cannot look up '{key}' on a {kind} value",
            {"key": key, "kind": kind}
        )
        self.key = key
        self.kind = kind


class NotIndexableError(ResourceKeyError):
    """Index access attempted on a resource without a member collection."""

    def __init__(self, index: int, oid: str | None = None):
        super().__init__(
            f"Resource is not a collection, cannot index [{index}]",
            {"index": index, "oid": oid}
        )
        self.index = index
        self.oid = oid


class IndexOutOfRangeError(ProxyError, IndexError):
    """Index is outside the member collection bounds."""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"Index {index} out of range for collection of {size} members",
            {"index": index, "size": size}
        )
        self.index = index
        self.size = size


class NoMemberError(ProxyError, AttributeError):
    """Attribute-style access to a field the resource does not have."""

    def __init__(self, name: str, reason: str = ""):
        super().__init__(
            f"Resource has no member '{name}'",
            {"name": name, "reason": reason} if reason else None
        )
        self.name = name


# =============================================================================
# Connection Errors
# =============================================================================

class ConnectorError(ProxyError):
    """Fetching a document from the remote service failed."""

    def __init__(
        self,
        message: str,
        oid: str | None = None,
        url: str | None = None,
        status: int | None = None,
    ):
        details = {k: v for k, v in (("oid", oid), ("url", url), ("status", status)) if v is not None}
        super().__init__(message, details)
        self.oid = oid
        self.url = url
        self.status = status


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ProxyError):
    """Configuration error."""
    pass
