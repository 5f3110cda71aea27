"""Small helpers for working with sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def uniq_append(items: Iterable[T], item: T) -> list[T]:
    """Return the items as a list with ``item`` appended unless already present."""
    result = list(items)
    if item not in result:
        result.append(item)
    return result