"""
Entry point helpers - open a resource tree on a live service.
"""

from __future__ import annotations

from loguru import logger

from redfish_proxy.config.constants import SERVICE_ROOT
from redfish_proxy.config.loader import load_config
from redfish_proxy.config.models import Config
from redfish_proxy.connectors.api import HTTPConnector
from redfish_proxy.resource import Resource
from redfish_proxy.utils.logger import setup_logger


def connect(
    config: Config | None = None,
    root: str = SERVICE_ROOT,
    verbose: bool = False,
    session_id: str | None = None,
) -> Resource:
    """
    Build the root resource of a service.

    Nothing is fetched until the returned resource is first used.

    Args:
        config: Full configuration (loaded from file/environment if not provided)
        root: Identifier of the service root document
        verbose: Configure logging with DEBUG console output
        session_id: Configure logging with this ID on every record

    Returns:
        Unresolved root Resource backed by an HTTPConnector
    """
    # Leave the host application's logging alone unless asked
    if verbose or session_id:
        setup_logger(verbose=verbose, session_id=session_id)

    if config is None:
        config = load_config()
    connector = HTTPConnector(config.connector)
    logger.info(f"Opening {config.connector.base_url}{root}")
    return Resource(connector, oid=root, config=config.proxy)
