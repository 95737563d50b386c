"""
Internet access screens: blocked device list, block and unblock.
"""

from routerman.common.colors import heading, info, log, warn
from routerman.config.validation import normalize_mac, validate_mac

from ..actions import Navigation
from ..context import Session
from .devices import describe_device


def list_blocked_devices(session: Session) -> Navigation:
    blocked = session.router.list_blocked_devices()
    if not blocked:
        info("no blocked devices found")
        return Navigation.NEXT

    known = {device.mac: device for device in session.db.devices.read_many_by_mac(blocked)}
    rows = []
    for mac in blocked:
        device = known.get(mac)
        rows.append([mac] + (describe_device(session, device) if device else ["Unknown", ""]))

    heading("Blocked devices")
    session.terminal.print_table(rows)
    return Navigation.NEXT


def _read_mac(session: Session):
    mac = session.terminal.read_line("Enter device mac address: ")
    if not validate_mac(mac):
        warn("invalid mac address")
        return None
    return normalize_mac(mac)


def block_device(session: Session) -> Navigation:
    """Cut a device's internet access by MAC address."""
    mac = _read_mac(session)
    if mac is None:
        return Navigation.REPEAT

    if session.router.block(mac):
        log(f"device '{mac}' blocked")
    else:
        info(f"device '{mac}' is already blocked")
    return Navigation.NEXT


def unblock_device(session: Session) -> Navigation:
    """Restore a blocked device's internet access."""
    mac = _read_mac(session)
    if mac is None:
        return Navigation.REPEAT

    if session.router.unblock(mac):
        log(f"device '{mac}' unblocked")
    else:
        info(f"device '{mac}' is not blocked")
    return Navigation.NEXT
