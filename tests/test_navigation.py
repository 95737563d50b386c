"""Tests for the recursive menu interpreter."""

from __future__ import annotations

import pytest

from routerman.config.constants import QUIT, USER_ID
from routerman.repl.actions import ActionNode, ActionTree, Navigation
from routerman.repl.inputs import InvalidInputError
from routerman.repl.navigation import format_options, run_menu_actions
from routerman.router import RouterError
from routerman.storage import User


def _run(session):
    return run_menu_actions(session, session.tree.children(session.tree.root_key))


def _custom_tree(session, nodes) -> ActionTree:
    tree = ActionTree(nodes + [ActionNode("quit", "Quit")])
    session.tree = tree
    return tree


def test_quit_flag_short_circuits_without_io(session, terminal, capsys) -> None:
    session.ctx.request_quit()

    assert _run(session) is Navigation.BACK
    assert terminal.prompts == []
    assert capsys.readouterr().out == ""


def test_quit_letter_sets_flag(session, terminal) -> None:
    terminal.feed("q")

    assert _run(session) is Navigation.NEXT
    assert session.ctx.quit_requested
    assert terminal.prompts == ["Choice: "]


def test_quit_node_sets_flag(session, terminal) -> None:
    terminal.feed("4")
    _run(session)
    assert session.ctx[QUIT] > 0


def test_root_lists_quit_as_q_without_back(session, capsys) -> None:
    options, contains_quit = format_options(session, session.tree.children("root"))

    assert contains_quit
    assert options.splitlines() == [
        "1: Manage users",
        "2: Manage devices",
        "3: Manage internet access",
        "Q: Quit",
    ]


def test_submenu_offers_back_and_quit(session) -> None:
    options, contains_quit = format_options(session, session.tree.children("manage-users"))

    assert not contains_quit
    assert options.splitlines()[-2:] == ["B: Back", "Q: Quit"]


def test_back_returns_to_parent_level(session, terminal) -> None:
    terminal.feed("1", "b", "4")

    _run(session)

    assert terminal.prompts == ["Choice: ", "Choice: ", "Choice: "]
    assert session.ctx.quit_requested


def test_back_is_invalid_where_not_offered(session, terminal, capsys) -> None:
    terminal.feed("b", "q")

    _run(session)

    assert "invalid input, try again" in capsys.readouterr().out
    assert len(terminal.prompts) == 2


def test_out_of_range_choice_reprompts(session, terminal, capsys) -> None:
    terminal.feed("9", "q")

    _run(session)

    assert "invalid choice, try again" in capsys.readouterr().out


def test_quit_unwinds_every_level_without_more_prompts(session, terminal) -> None:
    terminal.feed("1", "q", "this answer is never read")

    _run(session)

    assert terminal.prompts == ["Choice: ", "Choice: "]
    assert terminal.reader.answers == ["this answer is never read"]


def test_repeat_rerenders_same_level(session, terminal, db) -> None:
    terminal.feed("1", "1", "", "q")

    _run(session)

    assert terminal.prompts == ["Choice: ", "Choice: ", "Name: ", "Choice: "]
    assert db.users.read_many(5, 1) == []


def test_selection_binds_key_and_offers_valid_children(session, terminal, db, capsys) -> None:
    users = [User(name=f"user{i}") for i in range(1, 6)]
    for user in users:
        db.users.create(user)
    terminal.feed("1", "2", "2", "q")

    _run(session)

    assert session.ctx[USER_ID] == users[1].id
    out = capsys.readouterr().out
    submenu = out.split("Choose an action:")[-1]
    assert "1: List user bandwidth slots" in submenu
    assert "2: Deregister user" in submenu
    assert "3: List devices" in submenu
    assert "Register a device" not in submenu


def test_leaving_branch_releases_bound_keys(session, terminal, db) -> None:
    db.users.create(User(name="alice"))
    terminal.feed("1", "2", "1", "b", "b", "4")

    _run(session)

    assert USER_ID not in session.ctx
    assert session.ctx.quit_requested


def test_behavior_back_leaves_level(session, terminal) -> None:
    calls = []

    def leave(s):
        calls.append("leave")
        s.ctx.set("slotId", 3)
        return Navigation.BACK

    _custom_tree(session, [
        ActionNode("root", "Root", children=("menu", "quit")),
        ActionNode("menu", "Menu", children=("leaf",)),
        ActionNode("leaf", "Leaf", behavior=leave),
    ])
    terminal.feed("1", "1", "q")

    _run(session)

    assert calls == ["leave"]
    assert terminal.prompts == ["Choice: ", "Choice: ", "Choice: "]
    assert "slotId" not in session.ctx


def test_behavior_errors_propagate(session, terminal) -> None:
    def boom(_):
        raise RouterError("router unreachable")

    _custom_tree(session, [
        ActionNode("root", "Root", children=("boom", "quit")),
        ActionNode("boom", "Boom", behavior=boom),
    ])
    terminal.feed("1", "q")

    with pytest.raises(RouterError):
        _run(session)
    assert terminal.reader.answers == ["q"]


def test_invalid_input_from_behavior_is_reported(session, terminal, capsys) -> None:
    def picky(_):
        raise InvalidInputError("bad value")

    _custom_tree(session, [
        ActionNode("root", "Root", children=("picky", "quit")),
        ActionNode("picky", "Picky", behavior=picky),
    ])
    terminal.feed("1", "q")

    _run(session)

    assert "bad value, try again" in capsys.readouterr().out
    assert session.ctx.quit_requested


def test_children_gated_by_context_are_skipped(session, terminal) -> None:
    _custom_tree(session, [
        ActionNode("root", "Root", children=("menu", "quit")),
        ActionNode("menu", "Menu", children=("gated",)),
        ActionNode("gated", "Gated", requires_context=(USER_ID,)),
    ])
    terminal.feed("1", "q")

    _run(session)

    # "menu" has no valid children, so the root prompt comes straight back
    assert terminal.prompts == ["Choice: ", "Choice: "]
