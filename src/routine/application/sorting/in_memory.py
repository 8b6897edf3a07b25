"""In-memory sorting of plain sequences by a sort tuple."""
from __future__ import annotations

from operator import attrgetter
from typing import Iterable, Sequence, TypeVar

from routine.application.pagination.sort import Sort

T = TypeVar("T")


def sort_items(items: Iterable[T], sorts: Sequence[Sort]) -> list[T]:
    """Return *items* ordered by *sorts* (first entry is the primary key).

    Items are read by attribute. With no sorts the input order is kept.
    Items whose sort attribute is ``None`` go after all others, whatever the
    direction of that key.
    """
    result = list(items)
    # stable sort: apply the least significant key first
    for sort in reversed(sorts):
        getter = attrgetter(sort.field)
        present = [item for item in result if getter(item) is not None]
        missing = [item for item in result if getter(item) is None]
        present.sort(key=getter, reverse=sort.descending)
        result = present + missing
    return result


__all__ = ["sort_items"]
