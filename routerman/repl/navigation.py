"""
Menu interpreter for the routerman REPL.

``run_menu_actions`` renders one level of the action tree, runs the chosen
action and recurses into the children the current context makes available.
The quit flag in the context unwinds every level without further prompts.
"""

from routerman.common.colors import warn
from routerman.common.errors import InvalidChoiceError, InvalidInputError

from .actions import ActionNode, Navigation
from .context import Context, Session
from .inputs import EXIT_CHOICE, QUIT_CHOICE, parse_menu_choice


def quit_program(ctx: Context) -> bool:
    """True once the operator asked to quit the session."""
    return ctx.quit_requested


def format_options(session: Session, actions: list[ActionNode]) -> tuple[str, bool]:
    """
    Build the option list for one menu level.

    Returns:
        (rendered options, whether the level contains the quit action)
    """
    lines = []
    contains_quit = False
    for position, action in enumerate(actions, 1):
        label = str(position)
        if session.tree.is_quit(action):
            contains_quit = True
            label = "Q"
        lines.append(f"{label}: {action.name}")
    if not contains_quit:
        lines.append("B: Back")
        lines.append("Q: Quit")
    return "\n".join(lines), contains_quit


def run_menu_actions(session: Session, actions: list[ActionNode]) -> Navigation:
    """
    Run one menu level until the operator leaves it.

    Args:
        session: Shared session state
        actions: Candidate actions at this level (already filtered by context)

    Returns:
        Navigation.BACK when the session was already quitting, else NEXT.
        Errors raised by actions propagate unchanged.
    """
    ctx = session.ctx
    if quit_program(ctx):
        return Navigation.BACK

    options, contains_quit = format_options(session, actions)

    while True:
        print(f"\nChoose an action: \n{options}\n")
        answer = session.terminal.read_line("Choice: ")
        try:
            choice = parse_menu_choice(answer, len(actions), allow_back=not contains_quit)
        except (InvalidChoiceError, InvalidInputError) as e:
            warn(f"{e}, try again")
            continue

        if choice == EXIT_CHOICE:
            break

        if choice == QUIT_CHOICE:
            ctx.request_quit()
            break

        action = actions[choice]
        if session.tree.is_quit(action):
            ctx.request_quit()
            break

        bound = ctx.snapshot()

        if action.behavior is not None:
            try:
                navigation = action.behavior(session)
            except (InvalidChoiceError, InvalidInputError) as e:
                warn(f"{e}, try again")
                ctx.release(bound)
                continue

            if navigation is Navigation.BACK:
                ctx.release(bound)
                break

            if navigation is Navigation.REPEAT:
                ctx.release(bound)
                continue

        children = session.tree.get_valid_children(action.key, ctx)
        if children:
            navigation = run_menu_actions(session, children)
            if quit_program(ctx):
                break

            ctx.release(bound)
            if navigation is Navigation.BACK:
                break
        else:
            ctx.release(bound)

    return Navigation.NEXT
