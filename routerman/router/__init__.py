"""
routerman.router - Router management client for routerman.

This package contains:
- dataclasses: Bandwidth entries, reservations, statistics, LAN/DHCP settings
- client: RouterApiClient JSON/HTTP gateway client
- router: Router facade with free-range and unused-address computations
"""

from .dataclasses import (
    BandwidthControlEntry,
    AvailableSlot,
    ClientReservation,
    ClientStatistic,
    Client,
    LanSettings,
    DhcpSettings,
    new_client,
)

from .client import RouterError, RouterApiClient

from .router import Router, free_ranges

__all__ = [
    # Dataclasses
    'BandwidthControlEntry',
    'AvailableSlot',
    'ClientReservation',
    'ClientStatistic',
    'Client',
    'LanSettings',
    'DhcpSettings',
    'new_client',
    # Client
    'RouterError',
    'RouterApiClient',
    # Facade
    'Router',
    'free_ranges',
]
