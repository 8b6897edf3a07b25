"""Externally exposed shapes – the source half of a property-mapping key."""
from __future__ import annotations

from enum import Enum


class Shape(str, Enum):
    COMPANY = "company"
    EMPLOYEE = "employee"


__all__ = ["Shape"]
