"""Domain layer for the outliner.

Pure code only - no I/O, no clock, no terminal. The current time and the
terminal height are passed in by callers.

Subpackages:
    shared - Result monad
    outline - Tree model and traversal
    cursor - Index-path cursor
"""
