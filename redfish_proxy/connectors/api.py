"""
REST connector for Redfish-style management APIs.

Read-only: documents are fetched with GET and decoded from JSON.
"""
from typing import Optional
from urllib.parse import urljoin, urlsplit

import requests
from loguru import logger

from redfish_proxy.config.constants import AUTH_TOKEN_HEADER, USER_AGENT
from redfish_proxy.config.models import ConnectorConfig
from redfish_proxy.connectors.base import BaseConnector
from redfish_proxy.core.exceptions import ConnectorError
from redfish_proxy.core.protocols import JSONValue


class HTTPConnector(BaseConnector):
    """
    REST API connector.

    Identifiers are server-absolute paths ("/redfish/v1/Systems"), so they
    replace the path of base_url. Relative identifiers are joined onto it.
    No retries: failures surface as ConnectorError.
    """

    def __init__(self, config: Optional[ConnectorConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize connector.

        Args:
            config: Connection settings (defaults if not provided)
            session: Pre-built requests session (mostly for tests)
        """
        self.config = config or ConnectorConfig()
        self.base_url = self.config.base_url.rstrip("/") + "/"
        self._session = session or self._build_session()

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        })
        session.headers.update(self.config.headers)
        if self.config.auth_token:
            session.headers[AUTH_TOKEN_HEADER] = self.config.auth_token
        elif self.config.username is not None:
            session.auth = (self.config.username, self.config.password or "")
        session.verify = self.config.verify_ssl
        return session

    def url_for(self, oid: str) -> str:
        """
        Build the full URL for an identifier.

        Raises:
            ConnectorError: If the identifier points off the configured service,
                since session credentials would travel with the request
        """
        url = urljoin(self.base_url, oid)
        target, base = urlsplit(url), urlsplit(self.base_url)
        if (target.scheme.lower(), target.netloc.lower()) != (base.scheme.lower(), base.netloc.lower()):
            logger.warning(f"Refusing off-service identifier {oid}")
            raise ConnectorError("Identifier points outside the configured service", oid=oid, url=url)
        return url

    def get(self, oid: str) -> JSONValue:
        """
        Fetch and decode a document.

        Args:
            oid: Document identifier

        Returns:
            Decoded JSON document
        """
        url = self.url_for(oid)
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(url, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Fetch failed for {oid}: {e}")
            raise ConnectorError(f"Fetch failed: {e}", oid=oid, url=url) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"Fetch failed for {oid}: HTTP {response.status_code}")
            raise ConnectorError(
                f"Fetch failed: HTTP {response.status_code}",
                oid=oid,
                url=url,
                status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON body for {oid}")
            raise ConnectorError(
                f"Invalid JSON body: {e}", oid=oid, url=url, status=response.status_code
            ) from e

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
