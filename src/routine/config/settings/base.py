"""Base class for settings read from ``<PREFIX>_<FIELD>`` environment variables.

Subclasses such as :class:`~routine.config.settings.PagingSettings` set
``_prefix`` and override ``_validate`` to check their fields together.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings; ``__post_init__`` runs :meth:`_validate`."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
