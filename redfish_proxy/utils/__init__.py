"""
redfish_proxy Utils - Logging and security helpers.
"""

from redfish_proxy.utils.logger import get_session_logger, setup_logger
from redfish_proxy.utils.security import redact_sensitive_info

__all__ = ["get_session_logger", "redact_sensitive_info", "setup_logger"]
