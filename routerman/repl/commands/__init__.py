"""
routerman.repl.commands - Menu behaviors

This package contains the screen behaviors organized by feature area:
- users: Register, list/select and deregister users
- slots: Bandwidth slot listing, assignment and deletion
- devices: Device registration, connected devices, CSV exports
- access: Blocked devices, block and unblock
"""

# Users
from .users import (
    register_user,
    list_users,
    deregister_user,
)

# Bandwidth slots
from .slots import (
    list_user_slots,
    assign_slot,
    delete_slot,
    list_available_slots,
)

# Devices
from .devices import (
    BINDINGS_FILE,
    RESERVATIONS_FILE,
    describe_device,
    list_devices,
    register_device,
    deregister_device,
    show_connected_devices,
    export_bindings,
    export_arp_bindings,
    export_dhcp_reservations,
)

# Internet access
from .access import (
    list_blocked_devices,
    block_device,
    unblock_device,
)

__all__ = [
    # Users
    'register_user',
    'list_users',
    'deregister_user',
    # Bandwidth slots
    'list_user_slots',
    'assign_slot',
    'delete_slot',
    'list_available_slots',
    # Devices
    'BINDINGS_FILE',
    'RESERVATIONS_FILE',
    'describe_device',
    'list_devices',
    'register_device',
    'deregister_device',
    'show_connected_devices',
    'export_bindings',
    'export_arp_bindings',
    'export_dhcp_reservations',
    # Internet access
    'list_blocked_devices',
    'block_device',
    'unblock_device',
]
