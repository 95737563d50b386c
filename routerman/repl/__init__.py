"""
routerman.repl - Menu engine for routerman

This package contains the components of the interactive menu:
- actions: ActionNode/ActionTree model and the Navigation signal
- context: Context selections and the Session state object
- inputs: Menu and row choice parsing
- pagination: Paginated list selection shared by list screens
- navigation: Recursive menu interpreter
- menu: Action tree definition
- commands/: Screen behaviors
"""

from .actions import ActionNode, ActionTree, Navigation
from .context import Context, ContextError, Session
from .inputs import (
    EXIT_CHOICE,
    QUIT_CHOICE,
    InvalidChoiceError,
    InvalidInputError,
    get_choice,
    parse_menu_choice,
)
from .pagination import PageOutcome, PageResult, page_of, paginate
from .navigation import format_options, quit_program, run_menu_actions
from .menu import build_action_tree

__all__ = [
    # Tree
    'ActionNode',
    'ActionTree',
    'Navigation',
    # State
    'Context',
    'ContextError',
    'Session',
    # Input
    'EXIT_CHOICE',
    'QUIT_CHOICE',
    'InvalidChoiceError',
    'InvalidInputError',
    'get_choice',
    'parse_menu_choice',
    # Pagination
    'PageOutcome',
    'PageResult',
    'page_of',
    'paginate',
    # Interpreter
    'format_options',
    'quit_program',
    'run_menu_actions',
    'build_action_tree',
]
