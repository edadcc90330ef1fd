"""
Base connector for document sources.

Provides the abstract interface the resource proxy fetches documents through
(REST services, in-memory fixtures, etc.).
"""
from abc import ABC, abstractmethod

from redfish_proxy.core.protocols import JSONValue


class BaseConnector(ABC):
    """
    Abstract base class for document connectors.

    All connectors must implement:
    - get(): Fetch one document by identifier
    - close(): Clean up connection

    A connector is shared by every resource of one tree and is not
    modified by them after construction.
    """

    @abstractmethod
    def get(self, oid: str) -> JSONValue:
        """
        Fetch a document.

        Args:
            oid: Document identifier (e.g. "/redfish/v1/Systems/1")

        Returns:
            Decoded JSON document

        Raises:
            ConnectorError: On transport failure, bad status or bad body
        """
        pass

    def close(self) -> None:
        """Close connection and clean up resources."""
        pass

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
