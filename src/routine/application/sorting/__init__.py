"""Application sorting – order-by parsing and in-memory ordering."""
from routine.application.sorting.in_memory import sort_items
from routine.application.sorting.parser import parse_order_by, split_order_by

__all__ = ["parse_order_by", "sort_items", "split_order_by"]
