"""CLI command groups.

Modules:
    outline - show, status, sweep, clean, init
"""

from outliner.interfaces.cli.commands import outline

__all__ = ["outline"]
