"""Explicit mark-and-sweep of unreferenced custom styles.

Nothing here runs on its own: callers decide when to sweep. Deleting a
style mid-edit would surprise the user, so there is no background or
automatic collection.
"""

from typing import Dict, Iterable, List, Optional, Set

from layout_styles.elements.models import Element
from layout_styles.logger import Logger
from layout_styles.styles.categories import StyleCategory
from layout_styles.styles.registry import StyleRegistry


def referenced_style_ids(elements: Iterable[Element]) -> Set[str]:
    """Every style id referenced by any binding of any element (mark phase)."""
    referenced: Set[str] = set()
    for element in elements:
        referenced.update(element.linked_styles().values())
    return referenced


def find_unused(
    registry: StyleRegistry, elements: Iterable[Element]
) -> Dict[StyleCategory, List[str]]:
    """Ids ``cleanup_unused`` would delete, per category, without deleting anything."""
    referenced = referenced_style_ids(elements)
    return {
        category: [
            style_id
            for style_id in registry.namespace(category).custom_ids()
            if style_id not in referenced
        ]
        for category in StyleCategory
    }


def cleanup_unused(
    registry: StyleRegistry,
    elements: Iterable[Element],
    logger: Optional[Logger] = None,
) -> int:
    """
    Delete every custom style no element references.

    Predefined styles are never collected.

    Args:
        registry: Registry to sweep
        elements: Every element of the document
        logger: Logger instance

    Returns:
        Total number of styles deleted
    """
    logger = logger or registry.logger
    deleted = 0
    for category, style_ids in find_unused(registry, elements).items():
        for style_id in style_ids:
            if registry.delete(category, style_id):
                deleted += 1

    logger.info("Unused style cleanup completed", deleted=deleted)
    return deleted
