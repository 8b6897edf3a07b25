"""Application pagination – PagedList and page sources.

A :class:`PagedList` is one window of a filtered, ordered query together
with the size of the whole filtered result::

    source = SqlAlchemyPageSource(session, select(Company).where(...))
    page = await PagedList.create(source, page_number=2, page_size=10)
    page.total_count, page.total_pages, page.has_next

``total_pages`` is derived from ``total_count`` and ``page_size`` on every
access, so the two can never disagree.
"""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Iterator, Protocol, Sequence, TypeVar, runtime_checkable

from routine.kernel.errors import InvalidArgumentError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PageSource(Protocol[T_co]):
    """Port: one filtered, ordered query that can be counted and windowed.

    ``count`` and ``fetch`` must observe the same filter.
    """

    async def count(self) -> int: ...

    async def fetch(self, offset: int, limit: int) -> Sequence[T_co]: ...


class SequencePageSource(Generic[T]):
    """In-memory :class:`PageSource` over an already filtered and ordered sequence."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = list(items)

    async def count(self) -> int:
        return len(self._items)

    async def fetch(self, offset: int, limit: int) -> list[T]:
        return self._items[offset:offset + limit]


def _check_window(page_number: int, page_size: int) -> None:
    if page_size < 1:
        raise InvalidArgumentError("page_size", "page_size must be >= 1")
    if page_number < 1:
        raise InvalidArgumentError("page_number", "page_number must be >= 1")


@dataclasses.dataclass(frozen=True)
class PagedList(Generic[T]):
    """One page of items plus pagination metadata."""

    items: list[T]
    current_page: int
    page_size: int
    total_count: int

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise InvalidArgumentError("current_page", "current_page must be >= 1")
        if self.page_size < 1:
            raise InvalidArgumentError("page_size", "page_size must be >= 1")
        if self.total_count < 0:
            raise InvalidArgumentError("total_count", "total_count must be >= 0")

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def map(self, fn: Callable[[T], Any]) -> "PagedList[Any]":
        """Return a new :class:`PagedList` with each item transformed by *fn*."""
        return PagedList(
            items=[fn(item) for item in self.items],
            current_page=self.current_page,
            page_size=self.page_size,
            total_count=self.total_count,
        )

    def metadata(self) -> dict[str, int]:
        """Pagination metadata without the items (e.g. for a response header)."""
        return {
            "total_count": self.total_count,
            "page_size": self.page_size,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
        }

    @classmethod
    def of(cls, all_items: Sequence[T], page_number: int, page_size: int) -> "PagedList[T]":
        """Build a :class:`PagedList` by slicing an in-memory sequence."""
        _check_window(page_number, page_size)
        start = page_size * (page_number - 1)
        return cls(
            items=list(all_items[start:start + page_size]),
            current_page=page_number,
            page_size=page_size,
            total_count=len(all_items),
        )

    @classmethod
    async def create(cls, source: PageSource[T], page_number: int, page_size: int) -> "PagedList[T]":
        """Count *source*, then fetch the requested window from it.

        A page past the end yields no items; the metadata still describes
        the whole filtered result.
        """
        _check_window(page_number, page_size)
        total_count = await source.count()
        items = await source.fetch(page_size * (page_number - 1), page_size)
        return cls(
            items=list(items),
            current_page=page_number,
            page_size=page_size,
            total_count=total_count,
        )


__all__ = ["PageSource", "PagedList", "SequencePageSource"]
