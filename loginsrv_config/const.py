"""
Application constants and configuration defaults.
"""

from datetime import timedelta

# Application info
APP_NAME = "loginsrv-config"
APP_VERSION = "0.1.0"

# Top-level block names (current and legacy)
BLOCK_NAMES = ("login", "loginsrv")

# Default values
DEFAULT_JWT_ALGO = "HS512"
DEFAULT_JWT_EXPIRY = timedelta(hours=24)
DEFAULT_JWT_REFRESHES = 0
DEFAULT_SUCCESS_URL = "/"
DEFAULT_REDIRECT_QUERY_PARAMETER = "backTo"
DEFAULT_LOGIN_PATH = "/login"
DEFAULT_COOKIE_NAME = "jwt_token"
DEFAULT_GRACE_PERIOD = timedelta(seconds=5)

# Length in bytes of the generated secret when none is configured
DEFAULT_SECRET_BYTES = 32
