"""
Base exception types shared across routerman packages.
"""


class RoutermanError(Exception):
    """Base class for every error raised by routerman."""
    pass


class ConfigError(RoutermanError):
    """Raised when settings cannot be loaded or are invalid."""
    pass


class InvalidChoiceError(RoutermanError):
    """Operator input does not map to a menu entry or page row."""

    def __init__(self, msg: str = "invalid choice"):
        super().__init__(msg)


class InvalidInputError(RoutermanError):
    """Operator input is malformed (bad number, MAC, IP, empty name)."""

    def __init__(self, msg: str = "invalid input"):
        super().__init__(msg)


class RouterError(RoutermanError):
    """Raised when the router cannot be reached or rejects a request."""
    pass
