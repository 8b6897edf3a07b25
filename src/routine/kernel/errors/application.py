"""Application-layer errors — wiring and configuration faults."""

from __future__ import annotations

from routine.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
