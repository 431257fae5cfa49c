# FavSync Output Module
# Rich console output for reports and journals

from favsync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
