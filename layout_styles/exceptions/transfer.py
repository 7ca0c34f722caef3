"""Snapshot import exceptions."""

from typing import Any, Dict, List, Optional

from layout_styles.exceptions.base import ValidationError


class StyleImportError(ValidationError):
    """Raised when a style snapshot cannot be imported.

    The import is all-or-nothing: when this is raised nothing has been
    written to the registry.
    """

    def __init__(self, message: str, problems: Optional[List[Dict[str, Any]]] = None):
        super().__init__(
            code="STYLE_IMPORT_FAILED",
            message=message,
            details={"problems": problems or []},
        )
        self.problems = problems or []
