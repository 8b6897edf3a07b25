"""Application pagination – paged lists, page sources and sort primitives."""
from routine.application.pagination.page import PagedList, PageSource, SequencePageSource
from routine.application.pagination.sort import Sort, SortDirection

__all__ = ["PageSource", "PagedList", "SequencePageSource", "Sort", "SortDirection"]
