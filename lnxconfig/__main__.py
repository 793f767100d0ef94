"""
Entry point for lnxconfig.

Usage:
    python -m lnxconfig /path/to/node.lnx
    python -m lnxconfig --validate /path/to/node.lnx
    python -m lnxconfig --help
"""

import argparse
import sys

from . import __version__
from .config.loader import ConfigLoader
from .config.parser import ParseError
from .config.schema import ParsedConfig
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def print_summary(config: ParsedConfig) -> None:
    print("Configuration summary:")
    print(f"  Routing mode: {config.routing_mode.value}")
    print(f"  Interfaces: {len(config.interfaces)}")
    for iface in config.interfaces:
        print(f"    {iface.name}: {iface.assigned_ip}/{iface.prefix_len} (udp {iface.udp_addr}:{iface.udp_port})")
    print(f"  Neighbors: {len(config.neighbors)}")
    print(f"  Static routes: {len(config.static_routes)}")
    print(f"  RIP neighbors: {len(config.rip_neighbors)}")
    print(
        f"  RIP timers: update {config.rip_periodic_update_rate_ms} ms, "
        f"timeout {config.rip_route_timeout_threshold_ms} ms"
    )
    print(f"  TCP RTO: {config.tcp_rto_min_us}-{config.tcp_rto_max_us} us")


def validate_config(config_path: str) -> int:
    """Validate configuration file and print warnings."""
    loader = ConfigLoader()
    config = loader.load_file(config_path)

    warnings = loader.validate(config)

    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")
        print()

    print_summary(config)
    print("\nConfiguration is valid!")
    return 0


def dump_config(config_path: str) -> int:
    """Parse configuration file and print it back as directives."""
    config = ConfigLoader().load_file(config_path)
    sys.stdout.write(config.to_lnx())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="lnxconfig",
        description="Read an lnx network configuration file and print what was parsed",
    )

    parser.add_argument(
        "config",
        help="Path to lnx configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check configuration, print warnings and a summary",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    try:
        if args.validate:
            return validate_config(args.config)
        return dump_config(args.config)
    except ParseError as e:
        logger.debug(f"Parse failed ({e.kind.value}): {e.text!r}")
        print(f"Parse error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
