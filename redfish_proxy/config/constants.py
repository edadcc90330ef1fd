"""
redfish_proxy Configuration Constants.

Centralized constants for wire-format field names, timeouts and paths.
"""
from pathlib import Path

# Wire format
DEFAULT_REFERENCE_FIELD = "@odata.id"
DEFAULT_MEMBERS_FIELD = "Members"
ANNOTATION_PREFIX = "@"  # Keys like "@odata.type" carry metadata, not data

# HTTP (seconds)
HTTP_DEFAULT_TIMEOUT = 30
HTTP_MAX_TIMEOUT = 600
AUTH_TOKEN_HEADER = "X-Auth-Token"
USER_AGENT = "redfish-proxy"

# Serialization
JSON_INDENT = 2

# Paths
DATA_DIR = Path.home() / ".redfish_proxy"
CONFIG_FILE = DATA_DIR / "config.json"
SERVICE_ROOT = "/redfish/v1"
