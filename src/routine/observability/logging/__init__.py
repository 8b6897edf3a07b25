"""Observability – structured logging helpers."""
from routine.observability.logging.factory import JsonLoggerFactory
from routine.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
