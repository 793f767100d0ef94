"""
Configuration schema with dataclasses for type safety.

Defines the records produced by the parser, the routing mode, and the
ParsedConfig aggregate with its defaults.

The to_lnx() helpers render records back as directive lines. They are
meant for display and debugging; the parser is the only consumer of the
format that matters.
"""

from dataclasses import dataclass, field
from enum import Enum
from ipaddress import IPv4Address, IPv4Interface, IPv4Network

from ..const import (
    DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS,
    DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS,
    DEFAULT_TCP_RTO_MAX_US,
    DEFAULT_TCP_RTO_MIN_US,
    MAX_PREFIX_LEN,
)


class RoutingMode(Enum):
    """How a node learns routes."""
    STATIC = "static"          # Local and manually-specified routes only (hosts)
    RIP = "rip"                # Advertise and learn routes via RIP (routers)


@dataclass(frozen=True)
class Interface:
    """
    A virtual interface.

    Example:
        interface if0 10.0.0.2/24 127.0.0.1:5001
    """
    name: str
    assigned_ip: IPv4Address
    prefix_len: int
    udp_addr: IPv4Address
    udp_port: int

    @property
    def assigned_prefix(self) -> IPv4Interface | None:
        """Assigned address with its prefix length (10.0.0.2/24), None if the prefix is invalid."""
        if self.prefix_len > MAX_PREFIX_LEN:
            return None
        return IPv4Interface((self.assigned_ip, self.prefix_len))

    @property
    def network(self) -> IPv4Network | None:
        """Network the interface is attached to (10.0.0.0/24)."""
        prefix = self.assigned_prefix
        return prefix.network if prefix else None

    def to_lnx(self) -> str:
        return (
            f"interface {self.name} {self.assigned_ip}/{self.prefix_len} "
            f"{self.udp_addr}:{self.udp_port}"
        )


@dataclass(frozen=True)
class Neighbor:
    """
    A node reachable on the same link as one of our interfaces.

    `interface_name` refers to Interface.name; it is not checked against
    the interface list while parsing.
    """
    dest_addr: IPv4Address
    udp_addr: IPv4Address
    udp_port: int
    interface_name: str

    def to_lnx(self) -> str:
        return (
            f"neighbor {self.dest_addr} at {self.udp_addr}:{self.udp_port} "
            f"via {self.interface_name}"
        )


@dataclass(frozen=True)
class RIPNeighbor:
    """A router that should receive our RIP messages."""
    dest: IPv4Address

    def to_lnx(self) -> str:
        return f"rip advertise-to {self.dest}"


@dataclass(frozen=True)
class StaticRoute:
    """A manually configured route."""
    network_addr: IPv4Address
    prefix_len: int
    next_hop: IPv4Address

    @property
    def network(self) -> IPv4Network | None:
        """Destination network; host bits of network_addr are dropped. None if the prefix is invalid."""
        if self.prefix_len > MAX_PREFIX_LEN:
            return None
        return IPv4Network((self.network_addr, self.prefix_len), strict=False)

    def to_lnx(self) -> str:
        return f"route {self.network_addr}/{self.prefix_len} via {self.next_hop}"


@dataclass
class ParsedConfig:
    """
    Everything read from one lnx file.

    Collections keep file order and duplicates. Scalar settings keep the
    value of their last directive, or the default when absent.
    """
    interfaces: list[Interface] = field(default_factory=list)
    neighbors: list[Neighbor] = field(default_factory=list)
    rip_neighbors: list[RIPNeighbor] = field(default_factory=list)
    static_routes: list[StaticRoute] = field(default_factory=list)

    routing_mode: RoutingMode = RoutingMode.STATIC

    # RIP timing parameters (routers only)
    rip_periodic_update_rate_ms: int = DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS
    rip_route_timeout_threshold_ms: int = DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS

    # TCP timing parameters (hosts only)
    tcp_rto_min_us: int = DEFAULT_TCP_RTO_MIN_US
    tcp_rto_max_us: int = DEFAULT_TCP_RTO_MAX_US

    @property
    def is_router(self) -> bool:
        return self.routing_mode == RoutingMode.RIP

    def get_interface(self, name: str) -> Interface | None:
        """Get first interface with given name."""
        for iface in self.interfaces:
            if iface.name == name:
                return iface
        return None

    def get_neighbor(self, dest_addr: IPv4Address | str) -> Neighbor | None:
        """Get first neighbor with given destination address."""
        dest_addr = IPv4Address(dest_addr)
        for neighbor in self.neighbors:
            if neighbor.dest_addr == dest_addr:
                return neighbor
        return None

    def get_neighbors_via(self, interface_name: str) -> list[Neighbor]:
        """Get all neighbors reached through given interface."""
        return [n for n in self.neighbors if n.interface_name == interface_name]

    def to_lnx(self) -> str:
        """
        Render the configuration as lnx directives.

        Order follows the demo output: interfaces, neighbors, routing mode,
        static routes, RIP neighbors, then timing parameters.
        """
        lines = [iface.to_lnx() for iface in self.interfaces]
        lines.extend(neighbor.to_lnx() for neighbor in self.neighbors)
        lines.append(f"routing {self.routing_mode.value}")
        lines.extend(route.to_lnx() for route in self.static_routes)
        lines.extend(rip.to_lnx() for rip in self.rip_neighbors)
        lines.append(f"rip periodic-update-rate {self.rip_periodic_update_rate_ms}")
        lines.append(f"rip route-timeout-threshold {self.rip_route_timeout_threshold_ms}")
        lines.append(f"tcp rto-min {self.tcp_rto_min_us}")
        lines.append(f"tcp rto-max {self.tcp_rto_max_us}")
        return "\n".join(lines) + "\n"
