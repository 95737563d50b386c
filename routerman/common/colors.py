"""
ANSI color codes and operator messages for the routerman REPL.
"""


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def log(msg: str) -> None:
    """Report a completed operation in green."""
    print(f"{Colors.GREEN}[+]{Colors.NC} {msg}")


def warn(msg: str) -> None:
    """Report a recoverable problem in yellow."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}")


def error(msg: str) -> None:
    """Report a failure in red."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}")


def info(msg: str) -> None:
    """Print an informational message in cyan."""
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}")


def heading(title: str) -> None:
    """Print a bold section heading."""
    print()
    print(f"{Colors.BOLD}{title}{Colors.NC}")
