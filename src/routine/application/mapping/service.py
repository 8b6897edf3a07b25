"""PropertyMappingService – registry of mapping tables per (shape, entity)."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable

from routine.application.mapping.errors import PropertyMappingNotFoundError
from routine.application.mapping.property_mapping import PropertyMapping
from routine.application.sorting.parser import split_order_by
from routine.config.validation import ConfigError
from routine.domain.shapes import Shape
from routine.observability.logging import get_logger

logger = get_logger(__name__)

Registration = tuple[Shape, type, PropertyMapping]


class PropertyMappingService:
    """Resolves the mapping table for an exposed shape and an entity type.

    All tables are supplied to the constructor; the registry cannot be
    changed afterwards, so a single instance can be shared freely.
    """

    def __init__(self, registrations: Iterable[Registration] = ()) -> None:
        tables: dict[tuple[Shape, type], PropertyMapping] = {}
        for shape, entity, mapping in registrations:
            key = (shape, entity)
            if key in tables:
                raise ConfigError(
                    f"Property mapping for <{shape}, {entity.__name__}> registered twice"
                )
            tables[key] = mapping
        self._tables = MappingProxyType(tables)

    @property
    def registered_pairs(self) -> frozenset[tuple[Shape, type]]:
        return frozenset(self._tables)

    def get_property_mapping(self, shape: Shape, entity: type) -> PropertyMapping:
        try:
            return self._tables[(shape, entity)]
        except KeyError:
            logger.warning("property_mapping_missing", shape=str(shape), entity=entity.__name__)
            raise PropertyMappingNotFoundError(shape, entity) from None

    def valid_mapping_exists_for(self, shape: Shape, entity: type, order_by: str | None) -> bool:
        """Return ``True`` when every clause of *order_by* names a mapped key.

        An empty or blank *order_by* is valid.
        """
        mapping = self.get_property_mapping(shape, entity)
        return all(key in mapping for key, _ in split_order_by(order_by))


__all__ = ["PropertyMappingService", "Registration"]
