"""Terminal user interface for the outliner (textual)."""
