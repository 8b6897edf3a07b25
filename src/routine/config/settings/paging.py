"""Config settings – PagingSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from routine.config.settings.base import Settings
from routine.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class PagingSettings(Settings):
    """Default and maximum page size for listing queries.

    Loaded from ``ROUTINE_PAGING_DEFAULT_PAGE_SIZE`` and
    ``ROUTINE_PAGING_MAX_PAGE_SIZE`` by :class:`EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "ROUTINE_PAGING"

    default_page_size: int = 5
    max_page_size: int = 20

    def _validate(self) -> None:
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and max_page_size ({self.max_page_size})",
            )

    def clamp_page_size(self, size: int | None) -> int:
        """Return *size* bounded to ``[1, max_page_size]``; ``None`` or < 1 gives the default."""
        if size is None or size < 1:
            return self.default_page_size
        return min(size, self.max_page_size)

    @staticmethod
    def clamp_page_number(number: int | None) -> int:
        if number is None or number < 1:
            return 1
        return number


__all__ = ["PagingSettings"]
