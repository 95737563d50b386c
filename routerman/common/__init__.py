"""
routerman.common - Shared utilities for routerman

This module provides:
- colors: ANSI color codes and operator message helpers
- errors: Base exception hierarchy
- logbook: Rotating diagnostic log file
- prompts: Terminal input, table rendering and CSV export
"""

from .colors import Colors, log, warn, error, info, heading
from .errors import RoutermanError, ConfigError, InvalidChoiceError, InvalidInputError, RouterError
from .logbook import configure_logging
from .prompts import Terminal

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'heading',
    'RoutermanError', 'ConfigError', 'InvalidChoiceError', 'InvalidInputError', 'RouterError',
    'configure_logging',
    'Terminal',
]
