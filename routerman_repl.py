#!/usr/bin/env python3
"""
routerman_repl.py - Interactive menu for router user, device and bandwidth management

This module wires the settings, the local store, the router client and the
menu engine together and runs the root menu until the operator quits.
"""

import argparse
import logging
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from routerman import __version__
from routerman.common import Colors, RoutermanError, Terminal, configure_logging, error, info
from routerman.config import Settings, load_settings
from routerman.repl import Session, build_action_tree, run_menu_actions
from routerman.router import Router, RouterApiClient
from routerman.storage import Database

logger = logging.getLogger("routerman")


# =============================================================================
# Colors and Styling
# =============================================================================

ROUTERMAN_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    '': '#ffffff',
})


# =============================================================================
# Session Setup
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage router users, devices and bandwidth")
    parser.add_argument("--config", help="Settings file (default: ~/.config/routerman/routerman.yaml)")
    parser.add_argument("--router-url", help="Router management gateway URL")
    parser.add_argument("--username", help="Router admin username")
    parser.add_argument("--password", help="Router admin password")
    parser.add_argument("--database", help="Local database file")
    parser.add_argument("--page-size", type=int, help="Rows per list page")
    parser.add_argument("--debug", action="store_true", help="Write debug details to the log file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings(
        args.config,
        router_url=args.router_url,
        router_username=args.username,
        router_password=args.password,
        database=args.database,
        page_size=args.page_size,
    )


def make_terminal(settings: Settings) -> Terminal:
    """Terminal reading through a prompt_toolkit session with persistent history."""
    settings.history_file.parent.mkdir(parents=True, exist_ok=True)
    prompt_session = PromptSession(
        history=FileHistory(str(settings.history_file)),
        style=ROUTERMAN_STYLE,
    )
    return Terminal(reader=prompt_session.prompt)


def show_banner(settings: Settings) -> None:
    print()
    print(f"{Colors.BOLD}Router Manager {__version__}{Colors.NC}")
    print(f"Router: {settings.router_url}")
    print()


# =============================================================================
# Main REPL Loop
# =============================================================================

def run_repl(settings: Settings, terminal: Optional[Terminal] = None) -> int:
    """Run the root menu; returns the process exit status."""
    terminal = terminal or make_terminal(settings)
    show_banner(settings)

    client = RouterApiClient(
        settings.router_url,
        username=settings.router_username,
        password=settings.router_password,
        timeout=settings.request_timeout,
    )
    try:
        with Database(settings.database) as db:
            tree = build_action_tree()
            session = Session(
                terminal=terminal,
                db=db,
                router=Router(client),
                tree=tree,
                settings=settings,
            )
            info(f"Using database {settings.database}")
            run_menu_actions(session, tree.children(tree.root_key))
    except RoutermanError as e:
        error(str(e))
        logger.exception("session aborted")
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        client.close()

    print("Goodbye!")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except RoutermanError as e:
        error(str(e))
        return 1

    configure_logging(settings.log_file, debug=args.debug)
    logger.info("session started against %s", settings.router_url)
    return run_repl(settings)


if __name__ == "__main__":
    sys.exit(main())
