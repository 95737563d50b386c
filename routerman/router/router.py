"""
Router facade used by the REPL screens.

Wraps the gateway client with the derived operations the screens need:
free address ranges for new bandwidth slots, the next unused address inside
a slot, and idempotent block/unblock.
"""

import ipaddress
from typing import Iterable

from routerman.config.validation import int_to_ip, ip_to_int, normalize_mac

from .client import RouterError
from .dataclasses import (
    AvailableSlot,
    BandwidthControlEntry,
    Client,
    ClientReservation,
    ClientStatistic,
)


def free_ranges(low: int, high: int, occupied: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """
    Return the gaps of [low, high] not covered by any occupied range.

    Args:
        low: First usable address (inclusive)
        high: Last usable address (inclusive)
        occupied: (start, end) pairs, inclusive, in any order

    Returns:
        Ordered list of free (start, end) pairs
    """
    gaps = []
    cursor = low
    for start, end in sorted(occupied):
        if end < cursor:
            continue
        if start > high:
            break
        if start > cursor:
            gaps.append((cursor, start - 1))
        cursor = max(cursor, end + 1)
    if cursor <= high:
        gaps.append((cursor, high))
    return gaps


class Router:
    """High level router operations on top of a gateway client."""

    def __init__(self, service):
        self.service = service

    # Bandwidth control

    def list_bandwidth_control_entries(self, ids: Iterable[int]) -> list[BandwidthControlEntry]:
        """Entries with the given ids, in the order of ``ids``; unknown ids are skipped."""
        entries = {entry.id: entry for entry in self.service.get_bandwidth_control_entries()}
        return [entries[i] for i in ids if i in entries]

    def list_available_bandwidth_slots(self, use_dhcp_bounds: bool) -> list[AvailableSlot]:
        """
        Address ranges not yet covered by a bandwidth control entry.

        Args:
            use_dhcp_bounds: Search inside the DHCP pool instead of the whole LAN
        """
        occupied = []
        if use_dhcp_bounds:
            dhcp = self.service.get_dhcp_settings()
            low, high = ip_to_int(dhcp.start_ip), ip_to_int(dhcp.end_ip)
        else:
            lan = self.service.get_lan_settings()
            try:
                network = ipaddress.IPv4Network(f"{lan.ip}/{lan.netmask}", strict=False)
            except ValueError as e:
                raise RouterError(f"Router reported an invalid LAN address: {e}") from e
            low = int(network.network_address) + 1
            high = int(network.broadcast_address) - 1
            router_ip = ip_to_int(lan.ip)
            occupied.append((router_ip, router_ip))

        for entry in self.service.get_bandwidth_control_entries():
            occupied.append((ip_to_int(entry.start_ip), ip_to_int(entry.end_ip)))

        return [
            AvailableSlot(min_address=int_to_ip(start), max_address=int_to_ip(end))
            for start, end in free_ranges(low, high, occupied)
        ]

    def add_bandwidth_control_entry(self, entry: BandwidthControlEntry) -> int:
        return self.service.add_bandwidth_control_entry(entry)

    def delete_bandwidth_control_entry(self, remote_id: int) -> None:
        self.service.delete_bandwidth_control_entry(remote_id)

    def get_unused_ip_address(self, remote_id: int) -> str:
        """
        First address of a bandwidth entry's range with no DHCP reservation.

        Raises:
            RouterError: The entry is gone or its range is fully reserved
        """
        entry = next(
            (e for e in self.service.get_bandwidth_control_entries() if e.id == remote_id), None
        )
        if entry is None:
            raise RouterError(f"Bandwidth control entry {remote_id} not found on router")

        reserved = {r.ip_as_int() for r in self.service.get_address_reservations()}
        for value in range(ip_to_int(entry.start_ip), ip_to_int(entry.end_ip) + 1):
            if value not in reserved:
                return int_to_ip(value)
        raise RouterError(f"No unused IP address in {entry.start_ip} - {entry.end_ip}")

    # DHCP reservations / ARP

    def reserve_address(self, client: Client) -> None:
        self.service.make_ip_address_reservation(client)

    def delete_reservation(self, mac: str) -> None:
        self.service.delete_ip_address_reservation(normalize_mac(mac))

    def address_reservations(self) -> list[ClientReservation]:
        return self.service.get_address_reservations()

    def ip_mac_bindings(self) -> list[ClientReservation]:
        return self.service.get_ip_mac_bindings()

    def connection_statistics(self) -> list[ClientStatistic]:
        return self.service.get_statistics()

    # Access control

    def list_blocked_devices(self) -> list[str]:
        return [normalize_mac(mac) for mac in self.service.get_blocked_devices()]

    def block(self, mac: str) -> bool:
        """Block a device; returns False if it was already blocked."""
        mac = normalize_mac(mac)
        if mac in self.list_blocked_devices():
            return False
        self.service.block_device(mac)
        return True

    def unblock(self, mac: str) -> bool:
        """Unblock a device; returns False if it was not blocked."""
        mac = normalize_mac(mac)
        if mac not in self.list_blocked_devices():
            return False
        self.service.unblock_device(mac)
        return True
