"""Garbage collection of unreferenced custom styles."""
from layout_styles.collection.garbage_collector import (
    cleanup_unused,
    find_unused,
    referenced_style_ids,
)

__all__ = ["cleanup_unused", "find_unused", "referenced_style_ids"]
