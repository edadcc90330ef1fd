"""Tests for the error hierarchy."""

import pytest

from redfish_proxy.core.exceptions import (
    ConnectorError,
    IndexOutOfRangeError,
    KeyNotApplicableError,
    KeyNotFoundError,
    NoMemberError,
    NotIndexableError,
    ProxyError,
    ResourceKeyError,
)


class TestHierarchy:
    """Tests for exception base classes."""

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (KeyNotFoundError("k"), KeyError),
            (KeyNotApplicableError("k", "scalar"), KeyError),
            (NotIndexableError(0), KeyError),
            (IndexOutOfRangeError(3, 1), IndexError),
            (NoMemberError("k"), AttributeError),
        ],
    )
    def test_builtin_bases(self, error, builtin):
        """Test lookup errors are catchable as builtins."""
        assert isinstance(error, builtin)
        assert isinstance(error, ProxyError)

    def test_lookup_kind(self):
        """Test field and index misuse share the lookup kind."""
        for error in (KeyNotFoundError("k"), KeyNotApplicableError("k", "scalar"), NotIndexableError(0)):
            assert isinstance(error, ResourceKeyError)
        assert not isinstance(IndexOutOfRangeError(3, 1), ResourceKeyError)


class TestMessages:
    """Tests for error text."""

    def test_plain_message(self):
        """Test str() uses the readable message, not KeyError's repr."""
        error = KeyNotFoundError("missing", oid="/")

        assert str(error) == "Key 'missing' not found in resource | {'key': 'missing', 'oid': '/'}"

    def test_no_member_without_reason(self):
        """Test NoMemberError keeps the member name."""
        error = NoMemberError("Status")

        assert str(error) == "Resource has no member 'Status'"
        assert error.name == "Status"

    def test_connector_error_details(self):
        """Test only known transport details are kept."""
        error = ConnectorError("Fetch failed: HTTP 500", oid="/x", status=500)

        assert error.details == {"oid": "/x", "status": 500}
        assert error.url is None
