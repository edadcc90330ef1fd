"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from redfish_proxy.connectors import StaticConnector
from redfish_proxy.resource import Resource


@pytest.fixture
def documents():
    """Small service tree: a root with one linked member."""
    return {
        "/": {
            "key": "value",
            "Members": [{"@odata.id": "/sub"}],
            "data": {"a": "b"},
        },
        "/sub": {"x": "y"},
    }


@pytest.fixture
def connector(documents):
    """In-memory connector over the sample documents."""
    return StaticConnector(documents)


@pytest.fixture
def root(connector):
    """Unresolved root resource at '/'."""
    return Resource(connector, oid="/")
