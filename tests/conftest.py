from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pytest
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from routerman.common.prompts import Terminal  # noqa: E402
from routerman.config.settings import Settings  # noqa: E402
from routerman.repl.context import Session  # noqa: E402
from routerman.repl.menu import build_action_tree  # noqa: E402
from routerman.router import (  # noqa: E402
    BandwidthControlEntry,
    ClientReservation,
    ClientStatistic,
    DhcpSettings,
    LanSettings,
    Router,
)
from routerman.storage import Database  # noqa: E402


class ScriptedReader:
    """Feeds canned answers to the terminal and records every prompt shown."""

    def __init__(self, answers: Optional[Iterable[str]] = None) -> None:
        self.answers: List[str] = list(answers or [])
        self.prompts: List[str] = []

    def feed(self, *answers: str) -> None:
        self.answers.extend(answers)

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)


class ScriptedTerminal(Terminal):
    def __init__(self) -> None:
        self.reader = ScriptedReader()
        self.buffer = io.StringIO()
        super().__init__(
            reader=self.reader,
            console=Console(file=self.buffer, width=200, color_system=None, highlight=False),
        )

    def feed(self, *answers: str) -> None:
        self.reader.feed(*answers)

    @property
    def prompts(self) -> List[str]:
        return self.reader.prompts

    @property
    def tables(self) -> str:
        return self.buffer.getvalue()


class FakeRouterService:
    """In-memory stand-in for RouterApiClient."""

    def __init__(self) -> None:
        self.lan = LanSettings(ip="192.168.0.1", netmask="255.255.255.0")
        self.dhcp = DhcpSettings(start_ip="192.168.0.100", end_ip="192.168.0.199")
        self.entries: List[BandwidthControlEntry] = []
        self.reservations: List[ClientReservation] = []
        self.bindings: List[ClientReservation] = []
        self.statistics: List[ClientStatistic] = []
        self.blocked: List[str] = []
        self.calls: List[tuple] = []
        self._next_id = 1

    def get_bandwidth_control_entries(self):
        self.calls.append(("get_bandwidth_control_entries",))
        return list(self.entries)

    def add_bandwidth_control_entry(self, entry):
        self.calls.append(("add_bandwidth_control_entry", entry.start_ip, entry.end_ip))
        entry.id = self._next_id
        self._next_id += 1
        self.entries.append(entry)
        return entry.id

    def delete_bandwidth_control_entry(self, entry_id):
        self.calls.append(("delete_bandwidth_control_entry", entry_id))
        self.entries = [e for e in self.entries if e.id != entry_id]

    def get_lan_settings(self):
        return self.lan

    def get_dhcp_settings(self):
        return self.dhcp

    def get_address_reservations(self):
        return list(self.reservations)

    def make_ip_address_reservation(self, client):
        self.calls.append(("make_ip_address_reservation", client.ip, client.mac))
        self.reservations.append(ClientReservation(mac=client.mac, ip=client.ip))

    def delete_ip_address_reservation(self, mac):
        self.calls.append(("delete_ip_address_reservation", mac))
        self.reservations = [r for r in self.reservations if r.mac != mac]

    def get_ip_mac_bindings(self):
        return list(self.bindings)

    def get_statistics(self):
        return list(self.statistics)

    def get_blocked_devices(self):
        return list(self.blocked)

    def block_device(self, mac):
        self.calls.append(("block_device", mac))
        self.blocked.append(mac)

    def unblock_device(self, mac):
        self.calls.append(("unblock_device", mac))
        self.blocked.remove(mac)

    def add_entry(self, start_ip: str, end_ip: str) -> int:
        return self.add_bandwidth_control_entry(
            BandwidthControlEntry(start_ip, end_ip, up_min=50, up_max=1000, down_min=50, down_max=1000)
        )


@pytest.fixture()
def terminal() -> ScriptedTerminal:
    return ScriptedTerminal()


@pytest.fixture()
def db():
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture()
def router_service() -> FakeRouterService:
    return FakeRouterService()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database=tmp_path / "routerman.db",
        history_file=tmp_path / "history",
        log_file=tmp_path / "routerman.log",
    )


@pytest.fixture()
def session(terminal, db, router_service, settings) -> Session:
    return Session(
        terminal=terminal,
        db=db,
        router=Router(router_service),
        tree=build_action_tree(),
        settings=settings,
    )


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path
