"""
routerman - Interactive administration menu for home and small-office routers

This package contains the components of the routerman REPL: the action tree
interpreter, the record store for users/devices/bandwidth slots and the
router management client.
"""

__version__ = "1.0.0"
