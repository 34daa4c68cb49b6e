"""Shared domain utilities for the outliner.

Example usage:
    >>> from outliner.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def first_group(outline: Outline) -> Result[Group, str]:
    ...     if not outline.groups:
    ...         return Err("Outline has no groups")
    ...     return Ok(outline.groups[0])
"""

from outliner.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
]
