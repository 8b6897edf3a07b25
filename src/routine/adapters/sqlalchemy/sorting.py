"""SQLAlchemy adapter – apply an order-by string to a ``Select``."""
from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import Select
from sqlalchemy.orm import QueryableAttribute

from routine.application.mapping import PropertyMapping
from routine.application.pagination import Sort
from routine.application.sorting import parse_order_by
from routine.config.validation import ConfigError


def order_by_columns(model: type, sorts: Sequence[Sort]) -> list[Any]:
    """Resolve *sorts* to ``asc()``/``desc()`` column expressions on *model*.

    A field that is not a mapped attribute of *model* means the mapping
    table was written against another entity, which is a :class:`ConfigError`.
    """
    columns: list[Any] = []
    for sort in sorts:
        attr = getattr(model, sort.field, None)
        if not isinstance(attr, QueryableAttribute):
            raise ConfigError(
                f"{model.__name__} has no mapped attribute '{sort.field}'",
                detail={"entity": model.__name__, "field": sort.field},
            )
        columns.append(attr.desc() if sort.descending else attr.asc())
    return columns


def apply_sort(
    statement: Select[Any],
    order_by: str | None,
    mapping: PropertyMapping,
    model: type,
    *,
    strict: bool = False,
) -> Select[Any]:
    """Return *statement* ordered by *order_by*, or unchanged when no key matches.

    Existing ``ORDER BY`` terms on *statement* stay ahead of the new ones.
    """
    sorts = parse_order_by(order_by, mapping, strict=strict)
    if not sorts:
        return statement
    return statement.order_by(*order_by_columns(model, sorts))


__all__ = ["apply_sort", "order_by_columns"]
