"""
User screens: register, list/select and deregister users.
"""

from routerman.common.colors import log, warn
from routerman.config.constants import USER_ID
from routerman.storage import User

from ..actions import Navigation
from ..context import Session
from ..pagination import PageOutcome, paginate


def register_user(session: Session) -> Navigation:
    """Create a user record from an operator-supplied name."""
    name = session.terminal.read_line("Name: ")
    if not name:
        warn("Name is required")
        return Navigation.REPEAT

    user = User(name=name)
    session.db.users.create(user)
    log(f"user '{user.name}' created (id {user.id})")
    return Navigation.NEXT


def list_users(session: Session) -> Navigation:
    """Page through users; selecting one binds ``userId`` and opens its menu."""
    terminal = session.terminal
    db = session.db

    def render(users):
        terminal.print_table([[user.name] for user in users])

    result = paginate(
        terminal,
        db.users.read_many,
        render,
        noun="users",
        page_size=session.page_size,
        prompt="Select user by number or scroll with n(ext)/p(revious)/q(uit): ",
    )
    if result.outcome is not PageOutcome.SELECTED:
        return Navigation.REPEAT

    user = db.users.read(result.item.id)
    print(f"Selected user '{user.name}'")
    session.ctx.set(USER_ID, user.id)
    return Navigation.NEXT


def deregister_user(session: Session) -> Navigation:
    """
    Delete the selected user with its bandwidth slots and devices.

    Dependent records go first. A failing step propagates and leaves the
    earlier deletes committed; the user stays selected in that case.
    """
    user_id = session.ctx.require(USER_ID)
    db = session.db

    steps = [
        db.bandwidth_slots.delete_by_user_id,
        db.devices.delete_by_user_id,
        db.users.delete,
    ]
    for step in steps:
        step(user_id)

    log("user deleted")
    session.ctx.unbind(USER_ID)
    return Navigation.BACK
