"""
Tests for constants.
"""

import lnxconfig
from lnxconfig.const import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS,
    DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS,
    DEFAULT_TCP_RTO_MAX_US,
    DEFAULT_TCP_RTO_MIN_US,
)


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "lnxconfig"
    assert APP_VERSION == "0.1.0"
    assert lnxconfig.__version__ == APP_VERSION


def test_timing_defaults():
    assert DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS == 5000
    assert DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS == 12000
    assert DEFAULT_TCP_RTO_MIN_US == 1000
    assert DEFAULT_TCP_RTO_MAX_US == 5000000
