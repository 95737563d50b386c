"""
Record dataclasses for the routerman store.

These define the rows kept in the local database: operators' users, their
devices and the bandwidth slots assigned to them on the router.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A person whose devices and bandwidth are managed."""
    name: str
    id: Optional[int] = None


@dataclass
class Device:
    """A registered device, identified on the router by its MAC address."""
    user_id: int
    mac: str
    alias: str = ""
    id: Optional[int] = None

    def get_user(self, user_store) -> User:
        """Look up the owning user (raises NotFoundError when gone)."""
        return user_store.read(self.user_id)


@dataclass
class BandwidthSlot:
    """Link between a user and a bandwidth control entry on the router."""
    user_id: int
    remote_id: int  # Bandwidth control entry id on the router
    id: Optional[int] = None
