"""
Session state for the routerman REPL.

This module contains:
- Context: key -> id selections shared by every menu level of a session
- Session: everything a menu behavior needs, passed by reference
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from routerman.common.errors import RoutermanError
from routerman.common.prompts import Terminal
from routerman.config.constants import QUIT
from routerman.config.settings import Settings


class ContextError(RoutermanError):
    """Raised when a behavior runs without a selection it depends on."""
    pass


class Context(dict):
    """
    Selections bound while drilling into the menu (``userId``, ``slotId``...).

    A key is present only while the operator is inside the branch that bound
    it; absence means "not selected yet". The ``quit`` key is the session-wide
    quit flag.
    """

    def set(self, key: str, value: int) -> None:
        self[key] = value

    def require(self, key: str) -> int:
        """Return a bound selection or raise ContextError."""
        if key not in self:
            raise ContextError(f"{key} not provided")
        return self[key]

    def unbind(self, key: str) -> None:
        self.pop(key, None)

    @property
    def quit_requested(self) -> bool:
        return self.get(QUIT, 0) > 0

    def request_quit(self) -> None:
        self[QUIT] = 1

    def snapshot(self) -> frozenset:
        """Keys bound right now, for a later ``release``."""
        return frozenset(self)

    def release(self, snapshot: frozenset) -> None:
        """Drop every key bound since ``snapshot`` (the quit flag is kept)."""
        for key in list(self):
            if key not in snapshot and key != QUIT:
                del self[key]


@dataclass
class Session:
    """State of one menu session, shared by every interpreter frame."""
    terminal: Terminal
    db: Any  # routerman.storage.Database
    router: Any  # routerman.router.Router
    tree: Optional[Any] = None  # routerman.repl.actions.ActionTree
    ctx: Context = field(default_factory=Context)
    settings: Settings = field(default_factory=Settings)

    @property
    def page_size(self) -> int:
        return self.settings.page_size
