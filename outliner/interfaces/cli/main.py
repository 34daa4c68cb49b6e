"""Entry point for the outliner CLI.

Usage:
    python -m outliner.interfaces.cli.main

Or via installed entry point:
    outliner <command>
"""

from outliner.interfaces.cli import app


def main() -> None:
    """Run the outliner CLI application."""
    app()


if __name__ == "__main__":
    main()
