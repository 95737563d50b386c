"""
Menu tree definition for the routerman REPL.

This module contains the action tree that defines the available screens and
the selections each of them needs before it is offered.
"""

from routerman.config.constants import DEVICE_ID, SLOT_ID, USER_ID

from . import commands
from .actions import ActionNode, ActionTree


def build_action_tree() -> ActionTree:
    """Build the hierarchical menu structure."""
    nodes = [
        ActionNode(
            "root", "Main menu",
            children=("manage-users", "manage-devices", "manage-internet-access", "quit"),
        ),
        ActionNode("quit", "Quit"),

        # Users
        ActionNode(
            "manage-users", "Manage users",
            children=("register-user", "list-users", "list-available-slots"),
        ),
        ActionNode("register-user", "Register a user", behavior=commands.register_user),
        ActionNode(
            "list-users", "List users",
            children=("list-user-slots", "deregister-user", "list-devices"),
            behavior=commands.list_users,
        ),
        ActionNode(
            "list-user-slots", "List user bandwidth slots",
            children=("register-device", "assign-slot", "delete-slot"),
            requires_context=(USER_ID,),
            behavior=commands.list_user_slots,
        ),
        ActionNode(
            "register-device", "Register a device",
            requires_context=(USER_ID, SLOT_ID),
            behavior=commands.register_device,
        ),
        ActionNode(
            "assign-slot", "Assign a bandwidth slot",
            requires_context=(USER_ID,),
            behavior=commands.assign_slot,
        ),
        ActionNode(
            "delete-slot", "Delete bandwidth slot",
            requires_context=(SLOT_ID,),
            behavior=commands.delete_slot,
        ),
        ActionNode(
            "deregister-user", "Deregister user",
            requires_context=(USER_ID,),
            behavior=commands.deregister_user,
        ),
        ActionNode(
            "list-available-slots", "List available bandwidth slots",
            behavior=commands.list_available_slots,
        ),

        # Devices
        ActionNode(
            "manage-devices", "Manage devices",
            children=(
                "list-devices",
                "show-connected-devices",
                "export-arp-bindings",
                "export-dhcp-reservations",
            ),
        ),
        ActionNode(
            "list-devices", "List devices",
            children=("deregister-device",),
            behavior=commands.list_devices,
        ),
        ActionNode(
            "deregister-device", "Deregister device",
            requires_context=(DEVICE_ID,),
            behavior=commands.deregister_device,
        ),
        ActionNode(
            "show-connected-devices", "Show connected devices",
            behavior=commands.show_connected_devices,
        ),
        ActionNode(
            "export-arp-bindings", "Export ARP bindings",
            behavior=commands.export_arp_bindings,
        ),
        ActionNode(
            "export-dhcp-reservations", "Export DHCP reservations",
            behavior=commands.export_dhcp_reservations,
        ),

        # Internet access
        ActionNode(
            "manage-internet-access", "Manage internet access",
            children=(
                "show-connected-devices",
                "list-blocked-devices",
                "block-device",
                "unblock-device",
            ),
        ),
        ActionNode(
            "list-blocked-devices", "List blocked devices",
            behavior=commands.list_blocked_devices,
        ),
        ActionNode("block-device", "Block device", behavior=commands.block_device),
        ActionNode("unblock-device", "Unblock device", behavior=commands.unblock_device),
    ]
    return ActionTree(nodes, root="root", quit_key="quit")
