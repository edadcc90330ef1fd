"""
Resource models - raw value kinds and resolution state.

Classification happens once, when a raw JSON value is wrapped as a child.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from redfish_proxy.config.constants import ANNOTATION_PREFIX
from redfish_proxy.config.models import ProxyConfig


class ResolutionState(Enum):
    """Whether a resource body is known yet."""

    UNRESOLVED = "unresolved"  # Built from an oid, not fetched
    RESOLVED = "resolved"  # Body known; terminal


class RawKind(Enum):
    """Shape of a raw JSON value."""

    REFERENCE = "reference"  # Link marker, fetched on first use
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def reference_target(value: Any, config: ProxyConfig) -> str | None:
    """
    Return the identifier a link marker points to, or None.

    A mapping is a link marker when it holds a string under the reference
    field and every other key is an annotation ("@odata.type" and friends).
    Mappings with any other field carry embedded data and stay inline.
    """
    if not isinstance(value, Mapping):
        return None
    target = value.get(config.reference_field)
    if not isinstance(target, str):
        return None
    for key in value:
        if key != config.reference_field and not str(key).startswith(ANNOTATION_PREFIX):
            return None
    return target


def is_reference_list(value: Any, config: ProxyConfig) -> bool:
    """Check whether value is a list made only of link markers."""
    return isinstance(value, list) and all(
        reference_target(item, config) is not None for item in value
    )


def classify(value: Any, config: ProxyConfig) -> RawKind:
    """Map a raw JSON value to the kind of resource that wraps it."""
    if reference_target(value, config) is not None:
        return RawKind.REFERENCE
    if isinstance(value, Mapping):
        return RawKind.MAPPING
    if isinstance(value, list):
        return RawKind.SEQUENCE
    return RawKind.SCALAR
