"""User-facing interfaces: text rendering and the typer CLI.

The terminal UI lives in ``outliner.tui``.
"""
