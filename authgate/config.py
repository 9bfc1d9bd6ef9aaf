"""Flask configuration for the authentication gate service."""

import os

AUTH_SERVER_URL = os.environ.get('AUTH_SERVER_URL')
"""Base URL of the authentication service, e.g. ``http://auth:8080``."""

_timeout = os.environ.get('AUTH_SERVER_TIMEOUT')
AUTH_SERVER_TIMEOUT = float(_timeout) if _timeout else None
"""Seconds to wait for the authentication service; ``None`` waits forever."""

LOGLEVEL = int(os.environ.get('LOGLEVEL', 20))
LOGFORMAT_JSON = os.environ.get('LOGFORMAT_JSON', '1') == '1'
