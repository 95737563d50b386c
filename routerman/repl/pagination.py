"""
Paginated list selection shared by every list screen.

A screen supplies how to fetch a page and how to render its rows; the loop
handles n(ext)/p(revious)/q(uit) scrolling and row selection. Pages are only
fetched when the page number actually changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from routerman.common.colors import info, warn
from routerman.common.errors import InvalidChoiceError
from routerman.common.prompts import Terminal

from .inputs import get_choice

Fetch = Callable[[int, int], Sequence[Any]]  # (page_size, page_number) -> rows
Render = Callable[[Sequence[Any]], None]


class PageOutcome(Enum):
    EMPTY = "empty"        # Nothing to list at all
    QUIT = "quit"          # Operator left the screen
    SELECTED = "selected"  # Operator picked a row


@dataclass
class PageResult:
    outcome: PageOutcome
    item: Optional[Any] = None
    page_number: int = 1


def page_of(items: Sequence[Any], page_size: int, page_number: int) -> list:
    """Slice one 1-based page out of an in-memory list."""
    start = (page_number - 1) * page_size
    return list(items[start:start + page_size])


def paginate(
    terminal: Terminal,
    fetch: Fetch,
    render: Render,
    noun: str,
    page_size: int,
    prompt: str,
    selectable: bool = True,
) -> PageResult:
    """
    Run the fetch/render/scroll/select loop for one list screen.

    Args:
        terminal: Operator terminal
        fetch: Returns the rows of a page
        render: Prints the rows of the current page
        noun: Plural used in "no <noun> found" messages
        page_size: Rows per page
        prompt: Text shown when asking for n/p/q or a row number
        selectable: Whether a row number is an accepted answer

    Returns:
        PageResult with the outcome and, when SELECTED, the chosen row
    """
    page_number = 1
    show_list = True
    at_end = False
    no_more = False
    rows: Sequence[Any] = []

    while True:
        if show_list:
            fetched = fetch(page_size, page_number)
            if not fetched:
                if page_number == 1:
                    info(f"no {noun} found")
                    return PageResult(PageOutcome.EMPTY, page_number=page_number)
                # Past the last page: stay on the previous one
                info(f"no more {noun} found")
                page_number -= 1
                at_end = True
            else:
                rows = fetched
                render(rows)
            show_list = False
        elif no_more:
            info(f"no more {noun} found")
        no_more = False

        choice = terminal.read_line(f"\n{prompt}").lower()

        if choice == "n":
            if len(rows) == page_size and not at_end:
                page_number += 1
                show_list = True
            else:
                no_more = True
        elif choice == "p":
            if page_number > 1:
                page_number -= 1
                at_end = False
                show_list = True
            else:
                no_more = True
        elif choice == "q":
            return PageResult(PageOutcome.QUIT, page_number=page_number)
        elif not selectable:
            warn("Invalid input")
        else:
            try:
                position = get_choice(choice, len(rows))
            except InvalidChoiceError:
                warn("invalid choice. try again")
                continue
            return PageResult(PageOutcome.SELECTED, item=rows[position], page_number=page_number)
