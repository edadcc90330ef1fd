"""
Resource proxy implementation.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterator, Mapping
from typing import Dict, Hashable, Optional, Tuple, Union

from loguru import logger

from redfish_proxy.config.constants import JSON_INDENT
from redfish_proxy.config.models import ProxyConfig
from redfish_proxy.core.exceptions import (
    IndexOutOfRangeError,
    KeyNotApplicableError,
    KeyNotFoundError,
    NoMemberError,
    NotIndexableError,
    ResourceKeyError,
)
from redfish_proxy.core.protocols import Connector, JSONValue

from .models import RawKind, ResolutionState, classify, is_reference_list, reference_target

# Marks "no inline content given"; JSON null is a legal content value
_NO_CONTENT = object()

CacheKey = Union[str, Tuple[Optional[str], int]]


class Resource:
    """
    Lazy proxy over one node of a linked JSON document graph.

    A resource wraps either inline content or an identifier (oid) that is
    fetched through the connector on first use. Navigation wraps each child
    value as another Resource and caches it, so the same key always yields
    the same instance until reset().

    Access:
    - get("Key") / resource["Key"] / resource.Key: field lookup
    - index(0) / resource[0]: member of a linked collection
    - has("Key") / "Key" in resource: field presence, no child built
    - raw / to_text(): backing document

    Thread-safe: resolution and cache fills happen under a per-resource lock,
    so a shared resource fetches at most once per successful resolution.
    """

    def __init__(
        self,
        connector: Connector,
        content: JSONValue = _NO_CONTENT,
        oid: Optional[str] = None,
        config: Optional[ProxyConfig] = None,
    ) -> None:
        """
        Initialize resource.

        Args:
            connector: Shared document source
            content: Inline JSON value (no fetch)
            oid: Identifier to fetch on first access

        Raises:
            ValueError: Unless exactly one of content and oid is given
        """
        has_content = content is not _NO_CONTENT
        if has_content == (oid is not None):
            raise ValueError("Resource needs exactly one of content or oid")

        self._connector = connector
        self._config = config or ProxyConfig()
        self._oid = oid
        self._raw: JSONValue = content if has_content else None
        self._state = ResolutionState.RESOLVED if has_content else ResolutionState.UNRESOLVED
        self._cache: Dict[CacheKey, Resource] = {}
        self._lock = threading.RLock()

    # -- Resolution ------------------------------------------------------

    def _resolve(self) -> JSONValue:
        """Fetch the body once; failed fetches leave the resource unresolved."""
        if self._state is ResolutionState.RESOLVED:
            return self._raw

        with self._lock:
            if self._state is ResolutionState.UNRESOLVED:
                logger.debug(f"Fetching resource {self._oid}")
                self._raw = self._connector.get(self._oid)
                self._state = ResolutionState.RESOLVED
        return self._raw

    @property
    def raw(self) -> JSONValue:
        """Backing JSON document (fetched if pending)."""
        return self._resolve()

    @property
    def oid(self) -> Optional[str]:
        """Identifier this resource was built from, None for inline content."""
        return self._oid

    @property
    def resolved(self) -> bool:
        """Whether the body is known, without fetching it."""
        return self._state is ResolutionState.RESOLVED

    # -- Navigation ------------------------------------------------------

    def _wrap(self, value: JSONValue) -> Resource:
        """Wrap a raw child value according to its kind."""
        if classify(value, self._config) is RawKind.REFERENCE:
            return Resource(self._connector, oid=reference_target(value, self._config), config=self._config)
        return Resource(self._connector, content=value, config=self._config)

    def _cached(self, key: CacheKey, build) -> Resource:
        """Return the cached child for key, building and storing it on miss."""
        with self._lock:
            child = self._cache.get(key)
            if child is None:
                child = build()
                self._cache[key] = child
            return child

    def get(self, key: str) -> Resource:
        """
        Get a field as a child resource.

        Args:
            key: Field name

        Returns:
            Cached child resource

        Raises:
            KeyNotApplicableError: If this resource is not a mapping
            KeyNotFoundError: If the field is missing
            ConnectorError: If fetching this resource fails
        """
        def build() -> Resource:
            raw = self._resolve()
            if not isinstance(raw, Mapping):
                raise KeyNotApplicableError(key, classify(raw, self._config).value)
            if key not in raw:
                raise KeyNotFoundError(key, self._oid)
            return self._wrap(raw[key])

        return self._cached(key, build)

    def _collection(self, i: int) -> Tuple[list, Optional[str]]:
        """Locate the member list and the field it lives under."""
        raw = self._resolve()
        members_field = self._config.members_field
        if isinstance(raw, Mapping) and isinstance(raw.get(members_field), list):
            return raw[members_field], members_field
        # A bare list of links, e.g. reached through get("Members")
        if is_reference_list(raw, self._config):
            return raw, None
        raise NotIndexableError(i, self._oid)

    def index(self, i: int) -> Resource:
        """
        Get a member of a linked collection.

        Args:
            i: Zero-based member position

        Returns:
            Cached member resource (fetched on first use)

        Raises:
            NotIndexableError: If this resource holds no member collection
            IndexOutOfRangeError: If i is outside the collection
            TypeError: If i is not an int
        """
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"Member index must be int, got {type(i).__name__}")

        with self._lock:
            members, field = self._collection(i)
            if not 0 <= i < len(members):
                raise IndexOutOfRangeError(i, len(members))
            return self._cached((field, i), lambda: self._wrap(members[i]))

    def has(self, key: str) -> bool:
        """Check whether get(key) would succeed, without building the child."""
        with self._lock:
            if key in self._cache:
                return True
            raw = self._resolve()
            return isinstance(raw, Mapping) and key in raw

    def dig(self, *path: Union[str, int]) -> Resource:
        """
        Follow a path of field names and member indexes.

        Example:
            >>> root.dig("Systems", 0, "Status", "Health").raw
            'OK'
        """
        node = self
        for step in path:
            node = node[step]
        return node

    # -- Cache -----------------------------------------------------------

    def reset(self) -> Dict[Hashable, Resource]:
        """
        Drop cached children of this resource.

        The resource body stays; children already handed out keep working
        with their own caches.

        Returns:
            Snapshot of the (now empty) cache
        """
        with self._lock:
            self._cache.clear()
            logger.debug(f"Cache reset for resource {self._oid or '<inline>'}")
            return dict(self._cache)

    # -- Serialization ---------------------------------------------------

    def to_text(self) -> str:
        """Render the backing document as JSON (fetched if pending)."""
        return json.dumps(self._resolve(), indent=JSON_INDENT)

    # -- Python protocol sugar -------------------------------------------

    def __getattr__(self, name: str) -> Resource:
        # Only reached for names not found normally; private names are never fields
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.get(name)
        except ResourceKeyError as e:
            raise NoMemberError(name, e.message) from e

    def __getitem__(self, key: Union[str, int]) -> Resource:
        if isinstance(key, int) and not isinstance(key, bool):
            return self.index(key)
        if isinstance(key, str):
            return self.get(key)
        raise TypeError(f"Resource keys must be str or int, got {type(key).__name__}")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[Resource]:
        """Iterate over collection members."""
        i = 0
        while True:
            try:
                yield self.index(i)
            except IndexOutOfRangeError:
                return
            i += 1

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        origin = f"oid={self._oid!r}" if self._oid is not None else "inline"
        return f"<Resource {origin} {self._state.value}>"

    def __dir__(self):
        # Expose fields for completion only when the body is already known
        names = set(super().__dir__())
        if self.resolved and isinstance(self._raw, Mapping):
            names.update(k for k in self._raw if isinstance(k, str) and k.isidentifier())
        return sorted(names)
