"""
Configuration loader with file reading and advisory validation.
"""

from collections import Counter
from pathlib import Path

from ..const import MAX_PREFIX_LEN
from ..logging import get_logger
from .parser import ConfigParser, ErrorKind, ParseError, parse_config_file
from .schema import ParsedConfig, RoutingMode


logger = get_logger("config.loader")


class ConfigLoader:
    """
    Loads lnx configuration from files or strings.

    Usage:
        loader = ConfigLoader()
        config = loader.load_file("r1.lnx")
        # or
        config = loader.load_string(lnx_text)

        for warning in loader.validate(config):
            print(warning)
    """

    def __init__(self):
        self.last_config: ParsedConfig | None = None

    def load_file(self, path: str | Path) -> ParsedConfig:
        """
        Load configuration from a file.

        Args:
            path: Path to the lnx file

        Returns:
            Parsed configuration

        Raises:
            ParseError: If the file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ParseError(ErrorKind.FILE_OPEN, "File not found", filename=str(path))

        if not path.is_file():
            raise ParseError(ErrorKind.FILE_OPEN, "Not a file", filename=str(path))

        logger.info(f"Loading configuration from {path}")
        config = parse_config_file(path)
        self._loaded(config)
        return config

    def load_string(self, source: str, filename: str = "<string>") -> ParsedConfig:
        """
        Load configuration from a string.

        Args:
            source: lnx source text
            filename: Filename for error messages

        Returns:
            Parsed configuration

        Raises:
            ParseError: If a line is malformed
        """
        config = ConfigParser(source, filename).parse()
        self._loaded(config)
        return config

    def _loaded(self, config: ParsedConfig) -> None:
        self.last_config = config
        logger.debug(
            f"Parsed {len(config.interfaces)} interfaces, {len(config.neighbors)} neighbors, "
            f"{len(config.static_routes)} static routes, {len(config.rip_neighbors)} RIP neighbors "
            f"(routing {config.routing_mode.value})"
        )

    def validate(self, config: ParsedConfig) -> list[str]:
        """
        Check cross-references and value ranges the parser does not enforce.

        Args:
            config: Configuration to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        # Duplicate interface names
        names = Counter(iface.name for iface in config.interfaces)
        for name, count in names.items():
            if count > 1:
                warnings.append(f"Interface name '{name}' is used {count} times")

        for iface in config.interfaces:
            if iface.prefix_len > MAX_PREFIX_LEN:
                warnings.append(
                    f"Interface '{iface.name}' has prefix length {iface.prefix_len} "
                    f"(max {MAX_PREFIX_LEN})"
                )

        for route in config.static_routes:
            if route.prefix_len > MAX_PREFIX_LEN:
                warnings.append(
                    f"Route to {route.network_addr} has prefix length {route.prefix_len} "
                    f"(max {MAX_PREFIX_LEN})"
                )

        # Neighbors must be reached through a known interface
        for neighbor in config.neighbors:
            if config.get_interface(neighbor.interface_name) is None:
                warnings.append(
                    f"Neighbor {neighbor.dest_addr} references unknown interface "
                    f"'{neighbor.interface_name}'"
                )

        # RIP peers should be neighbors
        for rip in config.rip_neighbors:
            if config.get_neighbor(rip.dest) is None:
                warnings.append(f"RIP neighbor {rip.dest} is not a configured neighbor")

        if config.rip_neighbors and config.routing_mode == RoutingMode.STATIC:
            warnings.append("RIP neighbors are configured but routing mode is static")

        if config.tcp_rto_min_us > config.tcp_rto_max_us:
            warnings.append(
                f"TCP rto-min ({config.tcp_rto_min_us} us) is greater than "
                f"rto-max ({config.tcp_rto_max_us} us)"
            )

        if config.rip_route_timeout_threshold_ms <= config.rip_periodic_update_rate_ms:
            warnings.append(
                f"RIP route-timeout-threshold ({config.rip_route_timeout_threshold_ms} ms) "
                f"should be greater than periodic-update-rate "
                f"({config.rip_periodic_update_rate_ms} ms)"
            )

        return warnings


def load_config(path: str | Path) -> ParsedConfig:
    """
    Convenience function to load configuration from a file.

    Args:
        path: Path to the lnx file

    Returns:
        Parsed configuration
    """
    loader = ConfigLoader()
    return loader.load_file(path)


def parse_config(source: str, filename: str = "<string>") -> ParsedConfig:
    """Convenience function to parse configuration text."""
    return ConfigLoader().load_string(source, filename)
