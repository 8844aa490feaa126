"""
Tests for constants.
"""

from datetime import timedelta

from loginsrv_config import __version__
from loginsrv_config.const import APP_NAME, APP_VERSION, DEFAULT_GRACE_PERIOD, DEFAULT_JWT_EXPIRY


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "loginsrv-config"
    assert APP_VERSION == __version__
    assert DEFAULT_JWT_EXPIRY == timedelta(hours=24)
    assert DEFAULT_GRACE_PERIOD == timedelta(seconds=5)
