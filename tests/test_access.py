"""Tests for the internet access screens."""

from __future__ import annotations

from routerman.repl.actions import Navigation
from routerman.repl.commands import block_device, list_blocked_devices, unblock_device
from routerman.storage import Device, User


def test_block_device_normalizes_mac(session, terminal, router_service) -> None:
    terminal.feed("aa:bb:cc:dd:ee:ff")

    assert block_device(session) is Navigation.NEXT
    assert router_service.blocked == ["AA-BB-CC-DD-EE-FF"]


def test_block_device_already_blocked(session, terminal, router_service, capsys) -> None:
    router_service.blocked = ["AA-BB-CC-DD-EE-FF"]
    terminal.feed("AA-BB-CC-DD-EE-FF")

    assert block_device(session) is Navigation.NEXT
    assert ("block_device", "AA-BB-CC-DD-EE-FF") not in router_service.calls
    assert "already blocked" in capsys.readouterr().out


def test_block_device_rejects_bad_mac(session, terminal, router_service, capsys) -> None:
    terminal.feed("zz")

    assert block_device(session) is Navigation.REPEAT
    assert router_service.blocked == []
    assert "invalid mac address" in capsys.readouterr().out


def test_unblock_device(session, terminal, router_service) -> None:
    router_service.blocked = ["AA-BB-CC-DD-EE-FF"]
    terminal.feed("aa-bb-cc-dd-ee-ff")

    assert unblock_device(session) is Navigation.NEXT
    assert router_service.blocked == []


def test_unblock_device_not_blocked(session, terminal, router_service, capsys) -> None:
    terminal.feed("AA-BB-CC-DD-EE-FF")

    assert unblock_device(session) is Navigation.NEXT
    assert "is not blocked" in capsys.readouterr().out


def test_list_blocked_devices(session, terminal, db, router_service) -> None:
    alice = User(name="alice")
    db.users.create(alice)
    db.devices.create(Device(user_id=alice.id, mac="AA-BB-CC-DD-EE-01", alias="tablet"))
    router_service.blocked = ["aa:bb:cc:dd:ee:01", "AA-BB-CC-DD-EE-02"]

    assert list_blocked_devices(session) is Navigation.NEXT

    assert "tablet" in terminal.tables
    assert "alice" in terminal.tables
    assert "Unknown" in terminal.tables


def test_list_blocked_devices_empty(session, capsys) -> None:
    assert list_blocked_devices(session) is Navigation.NEXT
    assert "no blocked devices found" in capsys.readouterr().out


def test_list_blocked_devices_shows_alias_with_brackets(session, terminal, db, router_service) -> None:
    alice = User(name="alice")
    db.users.create(alice)
    db.devices.create(Device(user_id=alice.id, mac="AA-BB-CC-DD-EE-01", alias="tv[/i]"))
    router_service.blocked = ["AA-BB-CC-DD-EE-01"]

    assert list_blocked_devices(session) is Navigation.NEXT
    assert "tv[/i]" in terminal.tables
