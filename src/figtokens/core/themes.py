"""
Theme partitioning.

Categories are routed to a theme by name: a category whose name contains
"light" goes to the light theme, otherwise "dark" goes to the dark theme,
everything else is theme-independent. "light" wins when both match.
"""

from __future__ import annotations

import re

from .ir import CategoryMap, PartitionedCategories, ThemeBucket

_THEME_WORD = re.compile(r"light|dark", re.IGNORECASE)
_THEME_SUFFIX = re.compile(r"(-light|-dark)(?=:)")


def theme_for_category(name: str) -> ThemeBucket:
    """Theme bucket for a category name."""
    lowered = name.lower()
    if ThemeBucket.LIGHT in lowered:
        return ThemeBucket.LIGHT
    if ThemeBucket.DARK in lowered:
        return ThemeBucket.DARK
    return ThemeBucket.BASE


def partition_categories(categories: CategoryMap) -> PartitionedCategories:
    """Split categories into base, light and dark buckets, keeping order."""
    partitioned = PartitionedCategories()
    for name, category in categories.items():
        partitioned.bucket(theme_for_category(name))[name] = category
    return partitioned


def strip_theme_name(name: str) -> str:
    """Remove "light"/"dark" from a category name for use as a heading."""
    return _THEME_WORD.sub("", name).strip()


def strip_theme_suffix(declaration: str) -> str:
    """Drop a -light/-dark suffix right before the colon of a declaration.

    "--surface-dark: #111;" -> "--surface: #111;"
    """
    return _THEME_SUFFIX.sub("", declaration, count=1)
