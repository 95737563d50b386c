"""
Bandwidth slot screens.

A bandwidth slot is a bandwidth control entry on the router (an address
range with upload/download limits) linked to a user in the local store.
"""

from routerman.common.colors import heading, log, warn
from routerman.common.errors import InvalidChoiceError, InvalidInputError
from routerman.config.constants import SLOT_ID, USER_ID
from routerman.config.validation import ip_to_int, validate_ipv4
from routerman.router import BandwidthControlEntry
from routerman.storage import BandwidthSlot

from ..actions import Navigation
from ..context import Session
from ..pagination import PageOutcome, page_of, paginate

SLOT_PROMPT = "Select slot by number or scroll with n(ext)/p(revious)/q(uit): "
SCROLL_PROMPT = "Scroll with n(ext)/p(revious)/q(uit): "


def _slot_rows(slots) -> list[list[str]]:
    return [[f"{slot.min_address} - {slot.max_address}", f"[{slot.capacity()}]"] for slot in slots]


def list_user_slots(session: Session) -> Navigation:
    """Page through the selected user's slots; selecting one binds ``slotId``."""
    user_id = session.ctx.require(USER_ID)
    terminal = session.terminal
    db = session.db

    def fetch(page_size, page_number):
        return db.bandwidth_slots.read_many_by_user_id(user_id, page_size, page_number)

    def render(slots):
        entries = {
            entry.id: entry
            for entry in session.router.list_bandwidth_control_entries([s.remote_id for s in slots])
        }
        rows = []
        for slot in slots:
            entry = entries.get(slot.remote_id)
            if entry is None:
                rows.append([f"entry {slot.remote_id}", "missing on router", ""])
                continue
            rows.append([
                f"{entry.start_ip} - {entry.end_ip}",
                f"Up:{entry.up_min}/{entry.up_max} Down:{entry.down_min}/{entry.down_max}",
                "enabled" if entry.enabled else "disabled",
            ])
        terminal.print_table(rows)

    heading("Listing user slots")
    result = paginate(terminal, fetch, render, "slots", session.page_size, SLOT_PROMPT)
    if result.outcome is PageOutcome.EMPTY:
        return Navigation.NEXT
    if result.outcome is PageOutcome.QUIT:
        return Navigation.REPEAT

    slot = db.bandwidth_slots.read(result.item.id)
    session.ctx.set(SLOT_ID, slot.id)
    return Navigation.NEXT


def _ask_use_dhcp_bounds(session: Session) -> bool:
    while True:
        try:
            answer = session.terminal.read_char_choice("Use DHCP IP bounds (y/n): ", ("y", "n"))
        except InvalidChoiceError:
            warn("Invalid choice. Try again")
            continue
        return answer == "y"


def assign_slot(session: Session) -> Navigation:
    """Carve a new bandwidth control entry out of a free range for the selected user."""
    user_id = session.ctx.require(USER_ID)
    terminal = session.terminal
    settings = session.settings

    use_dhcp_bounds = _ask_use_dhcp_bounds(session)
    available = session.router.list_available_bandwidth_slots(use_dhcp_bounds)

    result = paginate(
        terminal,
        lambda page_size, page_number: page_of(available, page_size, page_number),
        lambda slots: terminal.print_table(_slot_rows(slots)),
        noun="slots",
        page_size=session.page_size,
        prompt=SLOT_PROMPT,
    )
    if result.outcome is PageOutcome.EMPTY:
        return Navigation.BACK
    if result.outcome is PageOutcome.QUIT:
        return Navigation.REPEAT
    slot = result.item

    start_text = terminal.read_line(f"Enter start IP [{slot.min_address}]: ")
    if not start_text:
        start_ip = slot.min_address
    else:
        if not validate_ipv4(start_text):
            warn("invalid IPv4 address")
            return Navigation.REPEAT
        if ip_to_int(start_text) < ip_to_int(slot.min_address):
            warn("Given start IP is below range. Try again")
            return Navigation.REPEAT
        if ip_to_int(start_text) > ip_to_int(slot.max_address):
            warn("Given start IP is above range. Try again")
            return Navigation.REPEAT
        start_ip = start_text

    capacity = slot.capacity(start_ip)
    try:
        count = terminal.read_int(f"Enter number of devices [Default {capacity}]: ", capacity)
        if count < 1 or count > capacity:
            raise InvalidInputError("invalid number")
        end_ip = slot.max_ip(start_ip, count)

        max_down = terminal.read_int(
            f"Enter max download speed (kbps) [Default {settings.default_max_rate_kbps}]: ",
            settings.default_max_rate_kbps,
        )
        max_up = terminal.read_int(
            f"Enter max upload speed (kbps) [Default {settings.default_max_rate_kbps}]: ",
            settings.default_max_rate_kbps,
        )
        if min(max_down, max_up) < settings.min_rate_kbps:
            raise InvalidInputError(f"speeds must be at least {settings.min_rate_kbps} kbps")
    except InvalidInputError as e:
        warn(f"{e}. Try again")
        return Navigation.REPEAT

    entry = BandwidthControlEntry(
        start_ip=start_ip,
        end_ip=end_ip,
        up_min=settings.min_rate_kbps,
        up_max=max_up,
        down_min=settings.min_rate_kbps,
        down_max=max_down,
        enabled=True,
    )
    remote_id = session.router.add_bandwidth_control_entry(entry)
    session.db.bandwidth_slots.create(BandwidthSlot(user_id=user_id, remote_id=remote_id))
    log(f"Entry created successfully ({start_ip} - {end_ip})")
    return Navigation.NEXT


def delete_slot(session: Session) -> Navigation:
    """Remove the selected slot from the router, then from the store."""
    slot_id = session.ctx.require(SLOT_ID)
    slot = session.db.bandwidth_slots.read(slot_id)

    session.router.delete_bandwidth_control_entry(slot.remote_id)
    session.db.bandwidth_slots.delete(slot_id)

    session.ctx.unbind(SLOT_ID)
    log("slot deleted successfully")
    return Navigation.BACK


def list_available_slots(session: Session) -> Navigation:
    """Show the free address ranges inside the DHCP pool."""
    terminal = session.terminal
    available = session.router.list_available_bandwidth_slots(True)

    paginate(
        terminal,
        lambda page_size, page_number: page_of(available, page_size, page_number),
        lambda slots: terminal.print_table(_slot_rows(slots)),
        noun="slots",
        page_size=session.page_size,
        prompt=SCROLL_PROMPT,
        selectable=False,
    )
    return Navigation.NEXT
