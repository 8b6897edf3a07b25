"""Application pagination – Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    def reversed(self) -> "SortDirection":
        return SortDirection.ASC if self is SortDirection.DESC else SortDirection.DESC

    @classmethod
    def parse(cls, token: str | None) -> "SortDirection":
        """``desc`` (any case) is descending; anything else, including ``None``, is ascending."""
        if token is not None and token.strip().lower() == "desc":
            return cls.DESC
        return cls.ASC


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion over an internal entity field."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


__all__ = ["Sort", "SortDirection"]
