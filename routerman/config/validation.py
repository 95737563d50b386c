"""
Validation functions for routerman.

IPv4 and MAC address validation utilities.
"""

import ipaddress
import re

MAC_PATTERN = re.compile(r'^[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}$')


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        ipaddress.IPv4Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_mac(mac: str) -> bool:
    """Validate a MAC address written with ':' or '-' separators."""
    return bool(MAC_PATTERN.match(mac))


def normalize_mac(mac: str) -> str:
    """Return the canonical upper-case, dash separated form of a MAC address."""
    return mac.strip().upper().replace(":", "-")


def ip_to_int(ip: str) -> int:
    """Convert a dotted IPv4 address to its integer value."""
    return int(ipaddress.IPv4Address(ip))


def int_to_ip(value: int) -> str:
    """Convert an integer to a dotted IPv4 address."""
    return str(ipaddress.IPv4Address(value))
