"""Tests for the action tree model and the shipped menu tree."""

from __future__ import annotations

import pytest

from routerman.config.constants import DEVICE_ID, QUIT, SLOT_ID, USER_ID
from routerman.repl.actions import ActionNode, ActionTree, Navigation
from routerman.repl.menu import build_action_tree


def _keys(nodes) -> list[str]:
    return [node.key for node in nodes]


def test_valid_children_filters_by_context_and_keeps_order() -> None:
    tree = build_action_tree()

    assert _keys(tree.get_valid_children("list-users", {})) == ["list-devices"]
    assert _keys(tree.get_valid_children("list-users", {USER_ID: 1})) == [
        "list-user-slots",
        "deregister-user",
        "list-devices",
    ]
    assert _keys(tree.get_valid_children("list-user-slots", {USER_ID: 1})) == ["assign-slot"]
    assert _keys(tree.get_valid_children("list-user-slots", {USER_ID: 1, SLOT_ID: 4})) == [
        "register-device",
        "assign-slot",
        "delete-slot",
    ]


def test_valid_children_is_monotonic_in_bound_keys() -> None:
    tree = build_action_tree()
    contexts = [{}, {USER_ID: 1}, {USER_ID: 1, SLOT_ID: 2}, {USER_ID: 1, SLOT_ID: 2, DEVICE_ID: 3}]

    for key in ("root", "list-users", "list-user-slots", "list-devices", "manage-devices"):
        previous: set[str] = set()
        for ctx in contexts:
            current = set(_keys(tree.get_valid_children(key, ctx)))
            assert previous <= current
            previous = current


def test_valid_children_has_no_side_effects() -> None:
    tree = build_action_tree()
    ctx = {USER_ID: 7}
    tree.get_valid_children("list-user-slots", ctx)
    assert ctx == {USER_ID: 7}


def test_root_offers_quit_node_last() -> None:
    tree = build_action_tree()
    children = tree.children(tree.root_key)

    assert _keys(children) == ["manage-users", "manage-devices", "manage-internet-access", "quit"]
    assert tree.is_quit(children[-1])
    assert tree.quit_key == QUIT


def test_every_leaf_has_a_behavior() -> None:
    tree = build_action_tree()
    for key in ("register-user", "assign-slot", "delete-slot", "register-device",
                "deregister-user", "deregister-device", "block-device", "unblock-device",
                "list-blocked-devices", "export-arp-bindings", "export-dhcp-reservations"):
        node = tree[key]
        assert node.behavior is not None
        assert node.children == ()


def test_nodes_are_immutable() -> None:
    node = ActionNode("a", "A", children=["b"])
    assert node.children == ("b",)
    with pytest.raises(Exception):
        node.name = "other"  # type: ignore[misc]


def test_tree_rejects_unknown_child() -> None:
    with pytest.raises(ValueError, match="unknown child"):
        ActionTree([ActionNode("root", "Root", children=("missing",))])


def test_tree_rejects_cycles() -> None:
    nodes = [
        ActionNode("root", "Root", children=("a",)),
        ActionNode("a", "A", children=("b",)),
        ActionNode("b", "B", children=("a",)),
    ]
    with pytest.raises(ValueError, match="cycle"):
        ActionTree(nodes)


def test_tree_rejects_duplicate_keys_and_missing_root() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        ActionTree([ActionNode("root", "Root"), ActionNode("root", "Again")])
    with pytest.raises(ValueError, match="Root action"):
        ActionTree([ActionNode("main", "Main")])


def test_shared_children_are_allowed() -> None:
    tree = build_action_tree()
    assert "show-connected-devices" in _keys(tree.children("manage-devices"))
    assert "show-connected-devices" in _keys(tree.children("manage-internet-access"))


def test_navigation_values_are_distinct() -> None:
    assert len({Navigation.NEXT, Navigation.BACK, Navigation.REPEAT}) == 3
