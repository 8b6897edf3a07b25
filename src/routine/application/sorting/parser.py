"""Order-by parsing – turns ``"name desc, age"`` into an explicit sort tuple.

Each comma-separated clause is ``<key>[ <direction>]``. The key is looked up
case-insensitively in a property mapping table and expands to one or more
internal fields; ``desc`` (any case) sorts descending, any other direction
token (or none) ascending. A field mapped with ``invert`` gets the opposite
direction. Keys the table does not know are skipped unless ``strict`` is set.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING

from routine.application.pagination.sort import Sort, SortDirection
from routine.kernel.errors import InvalidSortFieldError
from routine.observability.logging import get_logger

if TYPE_CHECKING:
    from routine.application.mapping.property_mapping import PropertyMapping

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


def split_order_by(order_by: str | None) -> list[tuple[str, str | None]]:
    """Split *order_by* into ``(key, direction_token)`` pairs, blanks dropped."""
    if order_by is None or not order_by.strip():
        return []
    clauses: list[tuple[str, str | None]] = []
    for clause in order_by.split(","):
        clause = clause.strip()
        if not clause:
            continue
        parts = _WHITESPACE.split(clause, maxsplit=1)
        clauses.append((parts[0], parts[1] if len(parts) > 1 else None))
    return clauses


def parse_order_by(
    order_by: str | None,
    mapping: "PropertyMapping",
    *,
    strict: bool = False,
) -> tuple[Sort, ...]:
    """Expand *order_by* through *mapping* into sort keys, primary key first."""
    sorts: list[Sort] = []
    for key, direction_token in split_order_by(order_by):
        if key not in mapping:
            if strict:
                raise InvalidSortFieldError(key)
            logger.debug("sort_key_skipped", key=key)
            continue
        direction = SortDirection.parse(direction_token)
        for field in mapping[key].fields:
            sorts.append(Sort(field.name, direction.reversed() if field.invert else direction))
    return tuple(sorts)


__all__ = ["parse_order_by", "split_order_by"]
