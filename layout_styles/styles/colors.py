"""Color validation for style properties.

Accepts the color notations the editor produces: ``transparent``, hex codes
(``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``), ``rgb()``/``rgba()`` and a set of
basic named colors.
"""

import re
from typing import Optional

NAMED_COLORS = {
    "transparent",
    "black",
    "white",
    "red",
    "green",
    "blue",
    "yellow",
    "orange",
    "purple",
    "pink",
    "brown",
    "gray",
    "grey",
    "cyan",
    "magenta",
    "currentcolor",
}

_HEX_PATTERN = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGB_PATTERN = re.compile(
    r"^rgba?\(\s*\d{1,3}\s*,\s*\d{1,3}\s*,\s*\d{1,3}\s*(,\s*(0|1|0?\.\d+)\s*)?\)$",
    re.IGNORECASE,
)


def validate_hex_color(color: str) -> bool:
    """Validate that color is a hex color code (e.g. "#FF0000", "#F00", "#00000040")."""
    if not color:
        return False
    return bool(_HEX_PATTERN.match(color.strip()))


def validate_color(color: Optional[str]) -> bool:
    """Validate a color value.

    Args:
        color: Color value (named color, hex code or rgb()/rgba())

    Returns:
        True if valid, False otherwise
    """
    if color is None:
        return True
    if not isinstance(color, str) or not color.strip():
        return False

    value = color.strip()
    if value.lower() in NAMED_COLORS:
        return True
    if value.startswith("#"):
        return validate_hex_color(value)
    return bool(_RGB_PATTERN.match(value))
