"""Style categories: one namespace and one property schema each."""

from enum import Enum
from typing import Union

from layout_styles.exceptions import UnknownCategoryError


class StyleCategory(str, Enum):
    TEXT = "text"
    PARAGRAPH = "paragraph"
    BORDER = "border"
    FILL = "fill"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def export_key(self) -> str:
        """Key of this category's section in a style snapshot."""
        return f"{self.value}Styles"

    @classmethod
    def parse(cls, value: Union["StyleCategory", str]) -> "StyleCategory":
        """Accept an enum member, ``"text"``, ``"Text"`` or ``"textStyle"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name.endswith("style"):
                name = name[: -len("style")]
            for member in cls:
                if member.value == name:
                    return member
        raise UnknownCategoryError(value, [member.value for member in cls])


CategoryLike = Union[StyleCategory, str]
