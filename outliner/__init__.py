"""Outliner - a collapsible outline of groups and todos for the terminal."""

__version__ = "0.1.0"
