"""Per-category property schemas and built-in defaults.

Each category has a pydantic model whose fields are all optional, so the
same model validates a full property map, a partial update or a local
override. Keys are camelCase, matching what the editor writes. Keys that a
schema does not declare are kept untouched.
"""

from copy import deepcopy
from typing import Any, Dict, List, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from layout_styles.exceptions import PropertyValidationError
from layout_styles.styles.categories import CategoryLike, StyleCategory
from layout_styles.styles.colors import validate_color

Number = Union[int, float]

BORDER_SIDES = ("top", "right", "bottom", "left")


def _check_color(value: Optional[str]) -> Optional[str]:
    if value is not None and not validate_color(value):
        raise ValueError(f"invalid color '{value}'")
    return value


def _check_non_negative(value: Optional[Number]) -> Optional[Number]:
    if value is not None and value < 0:
        raise ValueError("must be >= 0")
    return value


class _PropertySchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class TextProperties(_PropertySchema):
    """Text style: typeface, size, color and decorations."""

    font_family: Optional[str] = None
    font_size: Optional[Number] = None
    color: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    strikethrough: Optional[bool] = None
    link: Optional[str] = None

    @field_validator("font_size")
    @classmethod
    def check_font_size(cls, value: Optional[Number]) -> Optional[Number]:
        if value is not None and value <= 0:
            raise ValueError("must be > 0")
        return value

    @field_validator("color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        return _check_color(value)


class ParagraphProperties(_PropertySchema):
    """Paragraph style: alignment, spacing and wrapping."""

    alignment: Optional[Literal["left", "center", "right", "justify"]] = None
    vertical_align: Optional[str] = None
    line_height: Optional[Number] = None
    letter_spacing: Optional[Number] = None
    indent: Optional[Number] = None
    space_before: Optional[Number] = None
    space_after: Optional[Number] = None
    left_spacing: Optional[Number] = None
    right_spacing: Optional[Number] = None
    first_line_indent: Optional[Number] = None
    word_wrap: Optional[bool] = None
    word_break: Optional[str] = None

    @field_validator("line_height")
    @classmethod
    def check_line_height(cls, value: Optional[Number]) -> Optional[Number]:
        if value is not None and value <= 0:
            raise ValueError("must be > 0")
        return value

    @field_validator("indent", "space_before", "space_after", "left_spacing", "right_spacing")
    @classmethod
    def check_spacing(cls, value: Optional[Number]) -> Optional[Number]:
        return _check_non_negative(value)


class BorderProperties(_PropertySchema):
    """Border style. ``sides`` lists which edges are drawn."""

    width: Optional[Number] = None
    style: Optional[str] = None
    color: Optional[str] = None
    radius: Optional[Number] = None
    radius_type: Optional[Literal["all", "individual"]] = None
    top_left_radius: Optional[Number] = None
    top_right_radius: Optional[Number] = None
    bottom_left_radius: Optional[Number] = None
    bottom_right_radius: Optional[Number] = None
    sides: Optional[List[Literal["top", "right", "bottom", "left"]]] = None

    @field_validator("color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        return _check_color(value)

    @field_validator(
        "width",
        "radius",
        "top_left_radius",
        "top_right_radius",
        "bottom_left_radius",
        "bottom_right_radius",
    )
    @classmethod
    def check_sizes(cls, value: Optional[Number]) -> Optional[Number]:
        return _check_non_negative(value)


class GradientStop(_PropertySchema):
    color: str
    position: Number

    @field_validator("color")
    @classmethod
    def check_color(cls, value: str) -> str:
        return _check_color(value)


class Shadow(_PropertySchema):
    enabled: bool = False
    offset_x: Number = 2
    offset_y: Number = 2
    blur: Number = 4
    spread: Number = 0
    color: str = "#00000040"
    inset: bool = False

    @field_validator("color")
    @classmethod
    def check_color(cls, value: str) -> str:
        return _check_color(value)


class FillProperties(_PropertySchema):
    """Fill style: background, opacity, gradient and shadow."""

    background_color: Optional[str] = None
    opacity: Optional[Number] = None
    gradient: Optional[Any] = None
    gradient_enabled: Optional[bool] = None
    gradient_type: Optional[Literal["linear", "radial", "conic"]] = None
    gradient_direction: Optional[str] = None
    gradient_stops: Optional[List[GradientStop]] = None
    pattern: Optional[str] = None
    shadow: Optional[Shadow] = None

    @field_validator("background_color")
    @classmethod
    def check_background_color(cls, value: Optional[str]) -> Optional[str]:
        return _check_color(value)

    @field_validator("opacity")
    @classmethod
    def check_opacity(cls, value: Optional[Number]) -> Optional[Number]:
        if value is not None and not 0 <= value <= 1:
            raise ValueError("must be between 0 and 1")
        return value


PROPERTY_SCHEMAS: Dict[StyleCategory, Type[_PropertySchema]] = {
    StyleCategory.TEXT: TextProperties,
    StyleCategory.PARAGRAPH: ParagraphProperties,
    StyleCategory.BORDER: BorderProperties,
    StyleCategory.FILL: FillProperties,
}

BUILT_IN_DEFAULTS: Dict[StyleCategory, Dict[str, Any]] = {
    StyleCategory.TEXT: {
        "fontFamily": "Arial, sans-serif",
        "fontSize": 14,
        "color": "#000000",
        "bold": False,
        "italic": False,
        "underline": False,
        "strikethrough": False,
    },
    StyleCategory.PARAGRAPH: {
        "alignment": "left",
        "lineHeight": 1.4,
        "letterSpacing": 0,
        "indent": 0,
        "spaceBefore": 0,
        "spaceAfter": 0,
        "leftSpacing": 0,
        "rightSpacing": 0,
        "firstLineIndent": 0,
        "wordWrap": True,
    },
    StyleCategory.BORDER: {
        "width": 1,
        "style": "solid",
        "color": "#000000",
        "radius": 0,
        "sides": list(BORDER_SIDES),
    },
    StyleCategory.FILL: {
        "backgroundColor": "transparent",
        "opacity": 1,
        "gradientEnabled": False,
        "gradientType": "linear",
        "gradientDirection": "180deg",
        "pattern": "none",
    },
}


def built_in_defaults(category: CategoryLike) -> Dict[str, Any]:
    """Return a fresh copy of the built-in defaults for a category."""
    return deepcopy(BUILT_IN_DEFAULTS[StyleCategory.parse(category)])


def schema_keys(category: CategoryLike) -> List[str]:
    """camelCase keys declared by a category's schema."""
    model = PROPERTY_SCHEMAS[StyleCategory.parse(category)]
    return [field.alias or name for name, field in model.model_fields.items()]


def validate_properties(category: CategoryLike, properties: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a (possibly partial) property map against its category schema.

    Returns a new dict with the same keys, except that snake_case field names
    (``font_size``) are stored under their camelCase key (``fontSize``).
    Declared keys carry the validated value, undeclared keys are passed through.

    Raises:
        PropertyValidationError: If a declared property has an invalid value
    """
    category = StyleCategory.parse(category)
    model = PROPERTY_SCHEMAS[category]
    try:
        parsed = model.model_validate(dict(properties))
    except ValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
                "received_value": error.get("input"),
            }
            for error in exc.errors()
        ]
        raise PropertyValidationError(category.value, errors) from exc

    dumped = parsed.model_dump(by_alias=True)
    aliases = {name: field.alias or name for name, field in model.model_fields.items()}
    result: Dict[str, Any] = {}
    for key, value in properties.items():
        key = aliases.get(key, key)
        result[key] = dumped.get(key, value)
    return result
