"""
Parsing of lnx configuration files.
"""

from .lexer import FieldType, ScanPattern, Token, iter_directive_lines
from .loader import ConfigLoader, load_config, parse_config
from .parser import ConfigParser, ErrorKind, ParseError
from .schema import (
    Interface,
    Neighbor,
    ParsedConfig,
    RIPNeighbor,
    RoutingMode,
    StaticRoute,
)

__all__ = [
    "FieldType",
    "ScanPattern",
    "Token",
    "iter_directive_lines",
    "ConfigLoader",
    "load_config",
    "parse_config",
    "ConfigParser",
    "ErrorKind",
    "ParseError",
    "Interface",
    "Neighbor",
    "ParsedConfig",
    "RIPNeighbor",
    "RoutingMode",
    "StaticRoute",
]
