"""
lnxconfig - reader for lnx virtual network configuration files.
"""

from .const import APP_VERSION
from .config import (
    ConfigLoader,
    ConfigParser,
    ErrorKind,
    Interface,
    Neighbor,
    ParseError,
    ParsedConfig,
    RIPNeighbor,
    RoutingMode,
    StaticRoute,
    load_config,
    parse_config,
)

__version__ = APP_VERSION

__all__ = [
    "__version__",
    "ConfigLoader",
    "ConfigParser",
    "ErrorKind",
    "Interface",
    "Neighbor",
    "ParseError",
    "ParsedConfig",
    "RIPNeighbor",
    "RoutingMode",
    "StaticRoute",
    "load_config",
    "parse_config",
]
