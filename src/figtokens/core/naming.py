"""
Token name normalization.

Turns arbitrary token keys ("primaryColor", "Font Size", "Heading/Large")
into lower-case, hyphen-separated CSS custom-property segments.
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_UPPER = re.compile(r"[A-Z]")
_WHITESPACE = re.compile(r"\s+")
_INVALID = re.compile(r"[^a-z0-9-]")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def normalize_token_name(name: str) -> str:
    """Normalize a token key into a CSS identifier segment.

    Never raises. Input made only of invalid characters yields "".

    >>> normalize_token_name("primaryColor")
    'primary--color'
    >>> normalize_token_name("Font Size")
    'font--size'
    """
    result = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    result = _UPPER.sub(lambda m: f"-{m.group(0).lower()}", result)
    result = _WHITESPACE.sub("-", result)
    result = _INVALID.sub("", result)
    result = _EDGE_HYPHENS.sub("", result)
    return result.lower()


def normalize_reference_path(ref_path: str) -> str:
    """Normalize a dotted reference path ("color.brand.primary") to "color-brand-primary"."""
    return "-".join(normalize_token_name(part) for part in ref_path.split("."))


def category_key(name: str) -> str:
    """Category identifier: path separators become hyphens, lower-cased."""
    return re.sub(r"[\\/]", "-", name).lower()


def capitalize(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]
