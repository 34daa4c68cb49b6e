"""Screens for the outliner TUI."""

from outliner.tui.screens.prompt import HelpModal, PromptScreen

__all__ = ["HelpModal", "PromptScreen"]
