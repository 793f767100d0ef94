"""
Directive parser for the lnx configuration format.

Reads lines in order, dispatches each on its leading keyword, scans the
directive's fixed set of fields and appends the resulting record to a
ParsedConfig. The first malformed line aborts the whole parse.

Supported grammar:
    interface <name> <ip>/<prefix> <udp-ip>:<udp-port>
    neighbor <ip> at <udp-ip>:<udp-port> via <ifname>
    routing static|rip
    route <ip>/<prefix> via <next-hop-ip>
    rip advertise-to <ip>
    rip periodic-update-rate <ms>
    rip route-timeout-threshold <ms>
    tcp rto-min <us>
    tcp rto-max <us>

Lines starting with '#' are comments. Unknown keywords are skipped.
"""

import io
from enum import Enum
from ipaddress import AddressValueError, IPv4Address
from pathlib import Path
from typing import Callable, Iterable

from ..const import MAX_UDP_PORT
from ..logging import get_logger
from .lexer import DirectiveLine, FieldType, ScanPattern, Token, field, iter_directive_lines
from .schema import Interface, Neighbor, ParsedConfig, RIPNeighbor, RoutingMode, StaticRoute


logger = get_logger("config.parser")


class ErrorKind(Enum):
    """Categories of parse failures."""
    FILE_OPEN = "file_open"                      # file missing or unreadable
    TOKEN_COUNT = "token_count"                  # wrong number of fields
    ADDRESS_FORMAT = "address_format"            # malformed IPv4 literal
    UNRECOGNIZED_VALUE = "unrecognized_value"    # unknown mode or sub-directive
    VALUE_RANGE = "value_range"                  # number out of range (ports)


class ParseError(Exception):
    """Exception raised for any failure while reading an lnx file."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        line: int = 0,
        text: str = "",
        filename: str = "<string>",
    ):
        self.kind = kind
        self.message = message
        self.line = line
        self.text = text
        self.filename = filename
        if line:
            super().__init__(f"{filename}, line {line}: {message}")
        else:
            super().__init__(f"{filename}: {message}")

    def __reduce__(self):
        return (
            self.__class__,
            (self.kind, self.message, self.line, self.text, self.filename),
        )


# Directive patterns
INTERFACE = ScanPattern("interface", (
    field(FieldType.WORD),
    field(FieldType.ADDRESS, stop="/"), "/", field(FieldType.PREFIX),
    field(FieldType.ADDRESS, stop=":"), ":", field(FieldType.INTEGER),
))
NEIGHBOR = ScanPattern("neighbor", (
    field(FieldType.ADDRESS),
    "at", field(FieldType.ADDRESS, stop=":"), ":", field(FieldType.INTEGER),
    "via", field(FieldType.IFNAME),
))
ROUTING = ScanPattern("routing", (field(FieldType.WORD),))
ROUTE = ScanPattern("route", (
    field(FieldType.ADDRESS, stop="/"), "/", field(FieldType.PREFIX),
    "via", field(FieldType.ADDRESS),
))
RIP = ScanPattern("rip", (field(FieldType.WORD),))
RIP_ADVERTISE_TO = ScanPattern("rip advertise-to", (field(FieldType.ADDRESS),))
TCP = ScanPattern("tcp", (field(FieldType.WORD),))

# Sub-directives that set a single numeric ParsedConfig attribute
RIP_TIMERS = {
    "periodic-update-rate": (
        ScanPattern("rip periodic-update-rate", (field(FieldType.INTEGER),)),
        "rip_periodic_update_rate_ms",
    ),
    "route-timeout-threshold": (
        ScanPattern("rip route-timeout-threshold", (field(FieldType.INTEGER),)),
        "rip_route_timeout_threshold_ms",
    ),
}
TCP_TIMERS = {
    "rto-min": (
        ScanPattern("tcp rto-min", (field(FieldType.INTEGER),)),
        "tcp_rto_min_us",
    ),
    "rto-max": (
        ScanPattern("tcp rto-max", (field(FieldType.INTEGER),)),
        "tcp_rto_max_us",
    ),
}


class ConfigParser:
    """
    Parser for lnx configuration text.

    Usage:
        with open("r1.lnx") as f:
            config = ConfigParser(f, "r1.lnx").parse()
    """

    def __init__(self, source: str | Iterable[str], filename: str = "<string>"):
        if isinstance(source, str):
            # Same line breaks as a file opened in text mode
            source = io.StringIO(source, newline=None)
        self.source = source
        self.filename = filename

        self._handlers: dict[str, Callable[[DirectiveLine, ParsedConfig], None]] = {
            "interface": self._parse_interface,
            "neighbor": self._parse_neighbor,
            "routing": self._parse_routing,
            "route": self._parse_route,
            "rip": self._parse_rip,
            "tcp": self._parse_tcp,
        }

    def parse(self) -> ParsedConfig:
        """Parse all lines into a new ParsedConfig."""
        config = ParsedConfig()

        for line in iter_directive_lines(self.source):
            handler = self._handlers.get(line.keyword)
            if handler is None:
                logger.debug(f"Line {line.number}: skipping unknown directive '{line.keyword}'")
                continue
            handler(line, config)
            logger.debug(f"Line {line.number}: {line.keyword} directive accepted")

        return config

    def _error(self, kind: ErrorKind, message: str, line: DirectiveLine) -> ParseError:
        return ParseError(kind, message, line.number, line.text, self.filename)

    def _scan(self, pattern: ScanPattern, line: DirectiveLine) -> tuple[Token, ...]:
        """Scan a line, requiring every field of the pattern."""
        tokens = pattern.scan(line.text, line.number)
        if len(tokens) != pattern.arity:
            raise self._error(
                ErrorKind.TOKEN_COUNT,
                f"Did not find enough tokens: expected {pattern.arity}, found {len(tokens)}",
                line,
            )
        return tokens

    def _address(self, token: Token, line: DirectiveLine) -> IPv4Address:
        try:
            return IPv4Address(token.value)
        except AddressValueError:
            raise self._error(
                ErrorKind.ADDRESS_FORMAT,
                f"Failed to parse IP address: {token.value!r}",
                line,
            )

    def _port(self, token: Token, line: DirectiveLine) -> int:
        port = int(token.value)
        if port > MAX_UDP_PORT:
            raise self._error(
                ErrorKind.VALUE_RANGE,
                f"UDP port out of range: {port} (max {MAX_UDP_PORT})",
                line,
            )
        return port

    def _parse_interface(self, line: DirectiveLine, config: ParsedConfig) -> None:
        name, ip, prefix, udp_addr, udp_port = self._scan(INTERFACE, line)
        config.interfaces.append(Interface(
            name=name.value,
            assigned_ip=self._address(ip, line),
            prefix_len=int(prefix.value),
            udp_addr=self._address(udp_addr, line),
            udp_port=self._port(udp_port, line),
        ))

    def _parse_neighbor(self, line: DirectiveLine, config: ParsedConfig) -> None:
        dest, udp_addr, udp_port, ifname = self._scan(NEIGHBOR, line)
        config.neighbors.append(Neighbor(
            dest_addr=self._address(dest, line),
            udp_addr=self._address(udp_addr, line),
            udp_port=self._port(udp_port, line),
            interface_name=ifname.value,
        ))

    def _parse_routing(self, line: DirectiveLine, config: ParsedConfig) -> None:
        (mode,) = self._scan(ROUTING, line)
        try:
            config.routing_mode = RoutingMode(mode.value)
        except ValueError:
            raise self._error(
                ErrorKind.UNRECOGNIZED_VALUE,
                f"Unrecognized routing mode: {mode.value!r}",
                line,
            )

    def _parse_route(self, line: DirectiveLine, config: ParsedConfig) -> None:
        network, prefix, next_hop = self._scan(ROUTE, line)
        config.static_routes.append(StaticRoute(
            network_addr=self._address(network, line),
            prefix_len=int(prefix.value),
            next_hop=self._address(next_hop, line),
        ))

    def _parse_rip(self, line: DirectiveLine, config: ParsedConfig) -> None:
        (command,) = self._scan(RIP, line)

        if command.value == "advertise-to":
            (dest,) = self._scan(RIP_ADVERTISE_TO, line)
            config.rip_neighbors.append(RIPNeighbor(dest=self._address(dest, line)))
        elif command.value in RIP_TIMERS:
            pattern, attr = RIP_TIMERS[command.value]
            self._set_number(pattern, attr, line, config)
        else:
            raise self._error(
                ErrorKind.UNRECOGNIZED_VALUE,
                f"Unexpected RIP directive: {command.value!r}",
                line,
            )

    def _parse_tcp(self, line: DirectiveLine, config: ParsedConfig) -> None:
        (command,) = self._scan(TCP, line)

        if command.value not in TCP_TIMERS:
            raise self._error(
                ErrorKind.UNRECOGNIZED_VALUE,
                f"Unrecognized TCP directive: {command.value!r}",
                line,
            )

        pattern, attr = TCP_TIMERS[command.value]
        self._set_number(pattern, attr, line, config)

    def _set_number(
        self,
        pattern: ScanPattern,
        attr: str,
        line: DirectiveLine,
        config: ParsedConfig,
    ) -> None:
        (value,) = self._scan(pattern, line)
        setattr(config, attr, int(value.value))


def parse_config_file(path: str | Path) -> ParsedConfig:
    """
    Parse an lnx file.

    The file is read line by line and closed on every exit path.

    Args:
        path: Path to the lnx file

    Returns:
        Parsed configuration

    Raises:
        ParseError: If the file cannot be read or a line is malformed
    """
    path = Path(path)

    try:
        with path.open(encoding="utf-8") as f:
            return ConfigParser(f, str(path)).parse()
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(
            ErrorKind.FILE_OPEN,
            f"Failed to open file: {e}",
            filename=str(path),
        ) from e
