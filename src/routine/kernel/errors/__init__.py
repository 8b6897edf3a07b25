"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       ├── InvalidArgumentError
    │       └── InvalidSortFieldError
    └── ApplicationError     (application.py)
        └── ConfigError      (routine.config.validation)
"""

from routine.kernel.errors.application import ApplicationError
from routine.kernel.errors.base import BaseError
from routine.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    InvalidSortFieldError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidSortFieldError",
    "ValidationError",
]
