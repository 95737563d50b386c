"""
HTTP client for the router management gateway.

This module provides the low-level API used by the ``Router`` facade. Every
call is a JSON request over a shared requests session authenticated with the
router's admin credentials.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from routerman.common.errors import RouterError

from .dataclasses import (
    BandwidthControlEntry,
    Client,
    ClientReservation,
    ClientStatistic,
    DhcpSettings,
    LanSettings,
    from_dict,
)

logger = logging.getLogger(__name__)


class RouterApiClient:
    """JSON API client for the router's management gateway."""

    def __init__(
        self,
        base_url: str,
        username: str = "admin",
        password: str = "",
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        if not self.base_url.startswith("http"):
            self.base_url = f"http://{self.base_url}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({"Accept": "application/json"})

    def _request(self, method: str, endpoint: str, payload: Optional[dict] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise RouterError(f"Timeout: {method} {url}") from None
        except requests.exceptions.ConnectionError as e:
            raise RouterError(f"Connection failed: {e}") from e
        except requests.exceptions.HTTPError as e:
            raise RouterError(f"HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            raise RouterError(f"Request failed: {method} {url}: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RouterError(f"Invalid JSON from {url}") from e

    def close(self) -> None:
        self.session.close()

    # -------------------------------------------------------------------------
    # Bandwidth control
    # -------------------------------------------------------------------------

    def get_bandwidth_control_entries(self) -> list[BandwidthControlEntry]:
        data = self._request("GET", "/api/bandwidth/entries") or []
        return [from_dict(BandwidthControlEntry, item) for item in data]

    def add_bandwidth_control_entry(self, entry: BandwidthControlEntry) -> int:
        """Create an entry and return the id the router assigned."""
        payload = {
            "start_ip": entry.start_ip,
            "end_ip": entry.end_ip,
            "up_min": entry.up_min,
            "up_max": entry.up_max,
            "down_min": entry.down_min,
            "down_max": entry.down_max,
            "enabled": entry.enabled,
        }
        data = self._request("POST", "/api/bandwidth/entries", payload)
        if not isinstance(data, dict) or "id" not in data:
            raise RouterError("Router did not return an id for the new bandwidth entry")
        logger.info("added bandwidth entry id=%s %s-%s", data["id"], entry.start_ip, entry.end_ip)
        return int(data["id"])

    def delete_bandwidth_control_entry(self, entry_id: int) -> None:
        self._request("DELETE", f"/api/bandwidth/entries/{entry_id}")
        logger.info("deleted bandwidth entry id=%s", entry_id)

    # -------------------------------------------------------------------------
    # LAN / DHCP
    # -------------------------------------------------------------------------

    def get_lan_settings(self) -> LanSettings:
        return from_dict(LanSettings, self._request("GET", "/api/lan") or {})

    def get_dhcp_settings(self) -> DhcpSettings:
        return from_dict(DhcpSettings, self._request("GET", "/api/dhcp") or {})

    def get_address_reservations(self) -> list[ClientReservation]:
        data = self._request("GET", "/api/dhcp/reservations") or []
        return [from_dict(ClientReservation, item) for item in data]

    def make_ip_address_reservation(self, client: Client) -> None:
        self._request("POST", "/api/dhcp/reservations", {"mac": client.mac, "ip": client.ip})
        logger.info("reserved %s for %s", client.ip, client.mac)

    def delete_ip_address_reservation(self, mac: str) -> None:
        self._request("DELETE", f"/api/dhcp/reservations/{quote(mac)}")
        logger.info("deleted reservation for %s", mac)

    # -------------------------------------------------------------------------
    # ARP / statistics
    # -------------------------------------------------------------------------

    def get_ip_mac_bindings(self) -> list[ClientReservation]:
        data = self._request("GET", "/api/arp/bindings") or []
        return [from_dict(ClientReservation, item) for item in data]

    def get_statistics(self) -> list[ClientStatistic]:
        data = self._request("GET", "/api/statistics") or []
        return [from_dict(ClientStatistic, item) for item in data]

    # -------------------------------------------------------------------------
    # Access control
    # -------------------------------------------------------------------------

    def get_blocked_devices(self) -> list[str]:
        """Return MAC addresses on the access control blacklist."""
        data = self._request("GET", "/api/access/blocked") or []
        return [item["mac"] if isinstance(item, dict) else str(item) for item in data]

    def block_device(self, mac: str) -> None:
        self._request("POST", "/api/access/blocked", {"mac": mac})
        logger.info("blocked %s", mac)

    def unblock_device(self, mac: str) -> None:
        self._request("DELETE", f"/api/access/blocked/{quote(mac)}")
        logger.info("unblocked %s", mac)
