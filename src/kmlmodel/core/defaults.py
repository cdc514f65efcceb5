"""
Null-to-empty defaulting for list-valued fields.

Every extension list on a composite goes through ``or_empty`` before it is
stored, so accessors always return an iterable sequence.
"""

from typing import Any, Iterable, Optional, Tuple

# Shared by every defaulted field; immutable, so aliasing is safe.
EMPTY: Tuple[Any, ...] = ()


def or_empty(items: Optional[Iterable[Any]]) -> Tuple[Any, ...]:
    """
    Normalize an optional sequence.

    Args:
        items: Sequence of values, or None

    Returns:
        The shared EMPTY tuple when ``items`` is None or empty,
        otherwise the items as a tuple in their original order
    """
    if items is None:
        return EMPTY
    result = tuple(items)
    return result if result else EMPTY
