"""
Parsing of operator choices for menus and list pages.
"""

from typing import Union

from routerman.common.errors import InvalidChoiceError, InvalidInputError

EXIT_CHOICE = "back"
QUIT_CHOICE = "quit"

MenuChoice = Union[int, str]


def get_choice(text: str, size: int) -> int:
    """
    Convert a 1-based row number into a 0-based index.

    Raises:
        InvalidChoiceError: Not a number, or outside 1..size
    """
    try:
        number = int(text.strip())
    except ValueError:
        raise InvalidChoiceError() from None
    if number < 1 or number > size:
        raise InvalidChoiceError()
    return number - 1


def parse_menu_choice(text: str, size: int, allow_back: bool = True) -> MenuChoice:
    """
    Parse a menu answer into an index, EXIT_CHOICE or QUIT_CHOICE.

    Args:
        text: Raw operator input
        size: Number of numbered options
        allow_back: Whether 'b' (leave this level) is offered

    Raises:
        InvalidInputError: Input is neither a number nor an offered letter
        InvalidChoiceError: Number outside 1..size
    """
    answer = text.strip().lower()
    if answer == "q":
        return QUIT_CHOICE
    if answer == "b" and allow_back:
        return EXIT_CHOICE
    if not answer.lstrip("-").isdigit():
        raise InvalidInputError()
    return get_choice(answer, size)


__all__ = [
    'EXIT_CHOICE',
    'QUIT_CHOICE',
    'InvalidChoiceError',
    'InvalidInputError',
    'get_choice',
    'parse_menu_choice',
]
