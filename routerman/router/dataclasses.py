"""
Router data structures for routerman.

These mirror what the router's management gateway reports: bandwidth control
entries, address reservations, ARP bindings, client statistics and the LAN
and DHCP settings used to derive free address ranges.
"""

from dataclasses import dataclass, fields
from typing import Optional

from routerman.common.errors import InvalidInputError, RouterError
from routerman.config.validation import (
    int_to_ip,
    ip_to_int,
    normalize_mac,
    validate_ipv4,
    validate_mac,
)


def from_dict(cls, data: dict):
    """
    Build a dataclass from a dict, ignoring keys it does not declare.

    Raises:
        RouterError: The payload is not a mapping or lacks a required field
    """
    if not isinstance(data, dict):
        raise RouterError(f"Malformed {cls.__name__} from router: {data!r}")
    names = {f.name for f in fields(cls)}
    try:
        return cls(**{k: v for k, v in data.items() if k in names})
    except TypeError as e:
        raise RouterError(f"Malformed {cls.__name__} from router: {e}") from e


@dataclass
class BandwidthControlEntry:
    """A rate-limit rule applied to a contiguous range of LAN addresses."""
    start_ip: str
    end_ip: str
    up_min: int
    up_max: int
    down_min: int
    down_max: int
    enabled: bool = True
    id: Optional[int] = None  # Assigned by the router


@dataclass
class AvailableSlot:
    """A free address range where a new bandwidth control entry fits."""
    min_address: str
    max_address: str

    def capacity(self, start_ip: Optional[str] = None) -> int:
        """Number of addresses from ``start_ip`` (default: the minimum) to the maximum."""
        start = ip_to_int(start_ip or self.min_address)
        return ip_to_int(self.max_address) - start + 1

    def contains(self, ip: str) -> bool:
        return ip_to_int(self.min_address) <= ip_to_int(ip) <= ip_to_int(self.max_address)

    def max_ip(self, start_ip: str, count: int) -> str:
        """
        Last address of a block of ``count`` addresses starting at ``start_ip``.

        Raises:
            InvalidInputError: The block does not fit inside this slot
        """
        if not self.contains(start_ip):
            raise InvalidInputError(f"{start_ip} is outside {self.min_address} - {self.max_address}")
        if count < 1 or count > self.capacity(start_ip):
            raise InvalidInputError(f"{count} addresses do not fit from {start_ip}")
        return int_to_ip(ip_to_int(start_ip) + count - 1)


@dataclass
class ClientReservation:
    """A MAC to IP mapping (DHCP reservation or ARP binding)."""
    mac: str
    ip: str
    enabled: bool = True

    def ip_as_int(self) -> int:
        return ip_to_int(self.ip)


@dataclass
class ClientStatistic:
    """Traffic counters for a currently connected client."""
    ip: str
    mac: str
    total_packets: int = 0
    total_bytes: int = 0


@dataclass
class Client:
    """A device address pair to reserve on the router."""
    ip: str
    mac: str


def new_client(ip: str, mac: str) -> Client:
    """
    Validate and build a Client with a normalized MAC.

    Raises:
        InvalidInputError: Either address is malformed
    """
    if not validate_ipv4(ip):
        raise InvalidInputError(f"invalid IPv4 address '{ip}'")
    if not validate_mac(mac):
        raise InvalidInputError(f"invalid mac address '{mac}'")
    return Client(ip=ip, mac=normalize_mac(mac))


@dataclass
class LanSettings:
    """Router LAN interface address."""
    ip: str
    netmask: str


@dataclass
class DhcpSettings:
    """Router DHCP pool bounds."""
    start_ip: str
    end_ip: str
    enabled: bool = True
