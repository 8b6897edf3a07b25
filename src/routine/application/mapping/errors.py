"""Property mapping errors."""
from __future__ import annotations

from typing import Any

from routine.config.validation import ConfigError


class PropertyMappingNotFoundError(ConfigError):
    """No mapping table is registered for a (shape, entity) pair.

    A wiring fault, not bad user input: do not catch and retry.
    """

    default_code = "property_mapping_not_found"

    def __init__(self, shape: Any, entity: type, **kwargs: Any) -> None:
        super().__init__(
            f"No property mapping registered for <{shape}, {entity.__name__}>",
            detail={"shape": str(shape), "entity": entity.__name__},
            **kwargs,
        )
        self.shape = shape
        self.entity = entity


__all__ = ["PropertyMappingNotFoundError"]
