"""Domain errors raised on bad caller input."""

from __future__ import annotations

from typing import Any

from routine.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError):
    """A required argument is missing or empty.

    Raised at the start of an operation, before the store is touched.
    """

    default_code = "invalid_argument"

    def __init__(self, argument: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Argument '{argument}' must not be empty",
            errors=[{"field": argument, "error": "required"}],
            **kwargs,
        )
        self.argument = argument


class InvalidSortFieldError(ValidationError):
    """An order-by clause names a key the mapping table does not know."""

    default_code = "invalid_sort_field"

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot sort by unknown field '{field}'",
            errors=[{"field": field, "error": "unknown_sort_field"}],
            **kwargs,
        )
        self.field = field


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "InvalidSortFieldError",
    "ValidationError",
]
