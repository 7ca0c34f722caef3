"""Edit modes and the values the edit protocol reports back."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel

from layout_styles.exceptions import UnknownEditModeError
from layout_styles.styles.categories import StyleCategory


class EditMode(str, Enum):
    """How an edit that hits a linked style is resolved."""

    SILENT = "silent"
    AUTO_UNLINK = "auto_unlink"
    INTERACTIVE = "interactive"
    UPDATE_SHARED = "update_shared"

    @classmethod
    def parse(cls, value: Union["EditMode", str]) -> "EditMode":
        """Accept an enum member, ``"auto_unlink"``, ``"autoUnlink"`` or ``"auto-unlink"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().replace("-", "").replace("_", "").lower()
            for member in cls:
                if member.value.replace("_", "") == name:
                    return member
        raise UnknownEditModeError(value, [member.value for member in cls])


class EditAction(str, Enum):
    DIRECT = "direct"                        # category-free attribute written
    LOCAL_OVERRIDE = "local_override"        # unlinked binding, override written
    CONFLICT_DETECTED = "conflict_detected"  # silent mode, nothing written
    AUTO_UNLINK = "auto_unlink"
    USER_UNLINK = "user_unlink"              # interactive, user accepted
    STYLE_UPDATED = "style_updated"          # shared definition rewritten
    CANCELLED = "cancelled"                  # interactive, user refused
    STYLE_NOT_FOUND = "style_not_found"      # update_shared on a dangling id


class ConflictInfo(BaseModel):
    """Describes the linked style an edit would touch."""

    category: StyleCategory
    style_id: str
    style_name: Optional[str] = None  # None when the id no longer resolves
    is_custom: Optional[bool] = None


class EditOutcome(BaseModel):
    action: EditAction
    property_name: str
    value: Any = None
    conflict: Optional[ConflictInfo] = None

    @property
    def success(self) -> bool:
        """True when the edit was applied somewhere."""
        return self.action in (
            EditAction.DIRECT,
            EditAction.LOCAL_OVERRIDE,
            EditAction.AUTO_UNLINK,
            EditAction.USER_UNLINK,
            EditAction.STYLE_UPDATED,
        )

    @property
    def cancelled(self) -> bool:
        return self.action == EditAction.CANCELLED


class EditingMode(str, Enum):
    """Advice for the properties panel, derived from an element's links."""

    MANUAL = "manual"        # nothing linked
    SMART = "smart"          # at least one linked custom style
    PROTECTED = "protected"  # only predefined styles linked
