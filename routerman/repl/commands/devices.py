"""
Device screens.

This module contains:
- list/register/deregister devices (DHCP reservation + local record)
- show connected devices from the router's statistics
- export ARP bindings and DHCP reservations as CSV
"""

from typing import Sequence

from routerman.common.colors import heading, info, log, warn
from routerman.common.prompts import Terminal
from routerman.config.constants import DEVICE_ID, SLOT_ID, USER_ID
from routerman.config.validation import normalize_mac, validate_mac
from routerman.router import ClientReservation, new_client
from routerman.storage import Device, NotFoundError

from ..actions import Navigation
from ..context import Session
from ..pagination import PageOutcome, page_of, paginate

BINDINGS_FILE = "bindings.csv"
RESERVATIONS_FILE = "reservations.csv"
CSV_HEADER = ["Mac", "IP", "Enabled"]


def describe_device(session: Session, device: Device) -> list[str]:
    """Alias and owner name of a device; the owner is blank if it is gone."""
    try:
        owner = device.get_user(session.db.users).name
    except NotFoundError:
        owner = ""
    return [device.alias, owner]


def list_devices(session: Session) -> Navigation:
    """
    Page through devices; selecting one binds ``deviceId``.

    Only the selected user's devices are listed when ``userId`` is bound.
    """
    terminal = session.terminal
    db = session.db
    user_id = session.ctx.get(USER_ID)

    if user_id is not None:
        def fetch(page_size, page_number):
            return db.devices.read_many_by_user_id(user_id, page_size, page_number)
    else:
        fetch = db.devices.read_many

    def render(devices):
        terminal.print_table([[device.mac] + describe_device(session, device) for device in devices])

    result = paginate(
        terminal,
        fetch,
        render,
        noun="devices",
        page_size=session.page_size,
        prompt="Select device by number or scroll with n(ext)/p(revious)/q(uit): ",
    )
    if result.outcome is PageOutcome.EMPTY:
        return Navigation.NEXT
    if result.outcome is PageOutcome.QUIT:
        return Navigation.REPEAT

    device = db.devices.read(result.item.id)
    session.ctx.set(DEVICE_ID, device.id)
    return Navigation.NEXT


def register_device(session: Session) -> Navigation:
    """Reserve an unused address of the selected slot for a device and record it."""
    user_id = session.ctx.require(USER_ID)
    slot_id = session.ctx.require(SLOT_ID)
    terminal = session.terminal
    db = session.db

    while True:
        mac = terminal.read_line("Enter device mac address: ")
        if validate_mac(mac):
            break
        warn("invalid mac address. Try again")
    alias = terminal.read_line("Enter device alias: ")

    db.users.read(user_id)
    slot = db.bandwidth_slots.read(slot_id)
    ip = session.router.get_unused_ip_address(slot.remote_id)
    client = new_client(ip, mac)
    session.router.reserve_address(client)
    log(f"address '{client.ip}' reserved for '{client.mac}'")

    if db.devices.read_many_by_mac([client.mac]):
        info(f"device '{client.mac}' already registered")
    else:
        db.devices.create(Device(user_id=user_id, mac=client.mac, alias=alias))
        log("device registered")
    return Navigation.NEXT


def deregister_device(session: Session) -> Navigation:
    """Drop the selected device's reservation on the router, then its record."""
    device_id = session.ctx.require(DEVICE_ID)
    device = session.db.devices.read(device_id)

    session.router.delete_reservation(device.mac)
    session.db.devices.delete(device_id)

    session.ctx.unbind(DEVICE_ID)
    log(f"device '{device.mac}' deregistered")
    return Navigation.BACK


def show_connected_devices(session: Session) -> Navigation:
    """List the devices the router currently sees, with owner details where known."""
    terminal = session.terminal
    statistics = session.router.connection_statistics()
    known = {
        device.mac: device
        for device in session.db.devices.read_many_by_mac(normalize_mac(s.mac) for s in statistics)
    }

    def render(page):
        rows = []
        for stat in page:
            device = known.get(normalize_mac(stat.mac))
            details = describe_device(session, device) if device else ["Unknown", ""]
            rows.append([stat.ip, stat.mac] + details)
        terminal.print_table(rows)

    heading("Connected devices")
    paginate(
        terminal,
        lambda page_size, page_number: page_of(statistics, page_size, page_number),
        render,
        noun="connected devices",
        page_size=session.page_size,
        prompt="Scroll with n(ext)/p(revious)/q(uit): ",
        selectable=False,
    )
    return Navigation.NEXT


def export_bindings(terminal: Terminal, bindings: Sequence[ClientReservation], filename: str):
    """Write address bindings to CSV, sorted by IP, with y/n in the Enabled column."""
    ordered = sorted(bindings, key=lambda binding: binding.ip_as_int())
    rows = [CSV_HEADER]
    rows.extend([b.mac, b.ip, "y" if b.enabled else "n"] for b in ordered)
    path = terminal.write_csv(filename, rows)
    log(f"{len(ordered)} entries saved to '{path}'")
    return path


def export_arp_bindings(session: Session) -> Navigation:
    bindings = session.router.ip_mac_bindings()
    if not bindings:
        info("No bindings found")
        return Navigation.NEXT
    export_bindings(session.terminal, bindings, BINDINGS_FILE)
    return Navigation.NEXT


def export_dhcp_reservations(session: Session) -> Navigation:
    reservations = session.router.address_reservations()
    if not reservations:
        info("No reservations found")
        return Navigation.NEXT
    export_bindings(session.terminal, reservations, RESERVATIONS_FILE)
    return Navigation.NEXT
