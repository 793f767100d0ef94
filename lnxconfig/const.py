"""
Application constants and metadata.
"""

# Application info
APP_NAME = "lnxconfig"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Reader for lnx virtual network configuration files"

# Default timing values
DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS = 5000
DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS = 12000
DEFAULT_TCP_RTO_MIN_US = 1000
DEFAULT_TCP_RTO_MAX_US = 5000000

# Limits
MAX_UDP_PORT = 65535
MAX_PREFIX_LEN = 32
