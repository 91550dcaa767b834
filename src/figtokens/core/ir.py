"""
Intermediate types shared by the token conversion pipeline.

The category accumulator is an insertion-ordered mapping; output line
order and file order both follow the order in which tokens are flattened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """Token types with dedicated conversion rules."""

    COLOR = "color"
    DIMENSION = "dimension"
    SPACING = "spacing"
    BORDER_RADIUS = "borderRadius"
    BORDER = "border"
    BOX_SHADOW = "boxShadow"
    TYPOGRAPHY = "typography"
    DROP_SHADOW = "dropShadow"
    INNER_SHADOW = "innerShadow"


# Numeric values of these types are rendered in px
PIXEL_TYPES: frozenset[str] = frozenset(
    {TokenType.DIMENSION, TokenType.SPACING, TokenType.BORDER_RADIUS}
)


class ValueKind(StrEnum):
    """Discriminant for composite (mapping or list) token values."""

    SHADOW = "shadow"
    BORDER = "border"
    TYPOGRAPHY = "typography"
    OBJECT = "object"


class ThemeBucket(StrEnum):
    """Theme a category is routed to."""

    BASE = "base"
    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# Category accumulator
# =============================================================================


@dataclass
class TokenCategory:
    """Declarations accumulated for one category."""

    name: str
    variables: list[str] = field(default_factory=list)
    mixins: list[str] = field(default_factory=list)


class CategoryMap(dict[str, TokenCategory]):
    """Insertion-ordered mapping of category key to accumulated declarations."""

    def get_or_create(self, name: str) -> TokenCategory:
        """Return the category for *name*, appending an empty one if missing."""
        category = self.get(name)
        if category is None:
            category = TokenCategory(name=name)
            self[name] = category
        return category

    def all_variables(self) -> list[str]:
        """Every variable declaration across categories, in order."""
        return [variable for category in self.values() for variable in category.variables]


@dataclass
class PartitionedCategories:
    """Categories split into theme buckets."""

    base: CategoryMap = field(default_factory=CategoryMap)
    light: CategoryMap = field(default_factory=CategoryMap)
    dark: CategoryMap = field(default_factory=CategoryMap)

    def bucket(self, theme: ThemeBucket) -> CategoryMap:
        """Return the category map for *theme*."""
        return getattr(self, theme.value)

    def themes(self) -> dict[ThemeBucket, CategoryMap]:
        """Non-base buckets that received at least one category."""
        return {
            theme: self.bucket(theme)
            for theme in (ThemeBucket.LIGHT, ThemeBucket.DARK)
            if self.bucket(theme)
        }
