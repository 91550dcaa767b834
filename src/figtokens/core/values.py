"""
Token value conversion.

Maps a typed token value to a CSS literal, or for typography tokens to a
mapping of CSS property -> value. Composite values are classified into a
ValueKind first and handed to one converter per kind; any shape that
matches nothing is rendered as compact JSON. No input raises.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .ir import PIXEL_TYPES, TokenType, ValueKind
from .references import resolve_references

# =============================================================================
# Composite value models
# =============================================================================


class ShadowLayer(BaseModel):
    """One box-shadow layer as exported by Figma token plugins."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    x: Any = None
    y: Any = None
    blur: Any = None
    spread: Any = None
    color: Any = None
    type: Any = None


class BorderValue(BaseModel):
    """Composite border token value."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    width: Any = 1
    style: Any = "solid"
    color: Any = "#000"


class TypographyValue(BaseModel):
    """Composite typography token value (camelCase keys as exported)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    font_family: Any = Field(default=None, alias="fontFamily")
    font_size: Any = Field(default=None, alias="fontSize")
    font_weight: Any = Field(default=None, alias="fontWeight")
    line_height: Any = Field(default=None, alias="lineHeight")
    letter_spacing: Any = Field(default=None, alias="letterSpacing")


# =============================================================================
# Scalars
# =============================================================================


def format_scalar(value: Any) -> str:
    """Render a JSON scalar the way it should appear in CSS."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _px(value: Any) -> str:
    """Append px to numbers and numeric strings; resolve references in other strings."""
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return resolve_references(value)
    return f"{format_scalar(value)}px"


def _field(value: Any, default: str) -> str:
    """Falsy fields fall back to *default*; strings get reference resolution."""
    if not value:
        return default
    if isinstance(value, str):
        return resolve_references(value)
    return format_scalar(value)


# =============================================================================
# Classification
# =============================================================================


def _token_fields(value: dict[str, Any]) -> tuple[Any, Any] | None:
    """(type, value) if *value* is itself a token wrapper, else None."""
    for value_key, type_key in (("$value", "$type"), ("value", "type")):
        if value.get(value_key) is not None:
            return value.get(type_key), value[value_key]
    return None


def is_box_shadow(value: Any) -> bool:
    """Shape test for shadow layers: has x and y, or a shadow layer type."""
    if not isinstance(value, dict):
        return False
    if "x" in value and "y" in value:
        return True
    return value.get("type") in (TokenType.DROP_SHADOW, TokenType.INNER_SHADOW)


def classify_value(value: dict[str, Any] | list[Any], token_type: str | None) -> ValueKind:
    """Pick the converter for a composite value."""
    if token_type == TokenType.BOX_SHADOW or is_box_shadow(value):
        return ValueKind.SHADOW
    if isinstance(value, dict):
        if token_type == TokenType.BORDER:
            return ValueKind.BORDER
        if token_type == TokenType.TYPOGRAPHY:
            return ValueKind.TYPOGRAPHY
    return ValueKind.OBJECT


# =============================================================================
# Converters
# =============================================================================


def convert_shadow_layer(layer: ShadowLayer) -> str:
    """Render one shadow layer: "[inset ]Xpx Ypx BLURpx SPREADpx COLOR"."""
    inset = "inset " if layer.type == TokenType.INNER_SHADOW else ""
    x = format_scalar(layer.x or 0)
    y = format_scalar(layer.y or 0)
    blur = format_scalar(layer.blur or 0)
    spread = format_scalar(layer.spread or 0)
    color = layer.color or "#000"
    if isinstance(color, str):
        color = resolve_references(color)
    return f"{inset}{x}px {y}px {blur}px {spread}px {color}"


def convert_shadow(value: dict[str, Any] | list[Any]) -> str:
    """Render a shadow or a list of shadow layers joined by ", "."""
    layers = value if isinstance(value, list) else [value]
    return ", ".join(
        convert_shadow_layer(ShadowLayer.model_validate(layer if isinstance(layer, dict) else {}))
        for layer in layers
    )


def convert_border(value: dict[str, Any]) -> str:
    """Render "WIDTHpx STYLE COLOR"."""
    border = BorderValue.model_validate(value)
    color = border.color
    if isinstance(color, str):
        color = resolve_references(color)
    return f"{format_scalar(border.width)}px {format_scalar(border.style)} {format_scalar(color)}"


def convert_typography(value: dict[str, Any]) -> dict[str, str]:
    """Render a typography token as CSS property -> value."""
    typography = TypographyValue.model_validate(value)
    return {
        "font-family": _field(typography.font_family, "inherit"),
        "font-size": _px(typography.font_size) if typography.font_size else "inherit",
        "font-weight": _field(typography.font_weight, "inherit"),
        "line-height": _field(typography.line_height, "inherit"),
        "letter-spacing": (
            _px(typography.letter_spacing) if typography.letter_spacing else "normal"
        ),
    }


def convert_object(value: Any) -> str:
    """Fallback for unrecognized shapes: compact JSON."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


# =============================================================================
# Entry point
# =============================================================================


def convert_value(value: Any, token_type: str | None = None) -> str | dict[str, str]:
    """
    Convert a token value into CSS.

    Args:
        value: Raw token value (scalar, string with references, or composite)
        token_type: Token type, e.g. "color", "dimension", "typography"

    Returns:
        A CSS string, or a property mapping for typography tokens
    """
    if isinstance(value, dict | list):
        if isinstance(value, dict):
            nested = _token_fields(value)
            if nested is not None:
                return convert_value(nested[1], nested[0])

        kind = classify_value(value, token_type)
        if kind is ValueKind.SHADOW:
            return convert_shadow(value)
        if kind is ValueKind.BORDER:
            return convert_border(value)  # type: ignore[arg-type]
        if kind is ValueKind.TYPOGRAPHY:
            return convert_typography(value)  # type: ignore[arg-type]
        return convert_object(value)

    if _is_number(value):
        if isinstance(token_type, str) and token_type in PIXEL_TYPES:
            return f"{format_scalar(value)}px"
        return format_scalar(value)

    if isinstance(value, str):
        if "var(--" in value:
            return value
        return resolve_references(value, token_type)

    return format_scalar(value)
