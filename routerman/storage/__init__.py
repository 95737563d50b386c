"""
routerman.storage - Local record store for routerman.

This package contains:
- dataclasses: User, Device and BandwidthSlot records
- store: SQLite-backed stores and the Database that owns them
"""

from .dataclasses import User, Device, BandwidthSlot

from .store import (
    StoreError,
    NotFoundError,
    RecordStore,
    UserStore,
    DeviceStore,
    BandwidthSlotStore,
    Database,
    open_database,
)

__all__ = [
    # Records
    'User',
    'Device',
    'BandwidthSlot',
    # Stores
    'StoreError',
    'NotFoundError',
    'RecordStore',
    'UserStore',
    'DeviceStore',
    'BandwidthSlotStore',
    'Database',
    'open_database',
]
