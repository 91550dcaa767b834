"""
figtokens - Figma design tokens to SCSS custom properties.

Converts a nested design-token document into theme-aware SCSS
stylesheets with derived utility classes.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.emitter import generate_stylesheets
from .core.errors import (
    DanglingReferenceError,
    FigTokensError,
    ManifestError,
    OutputError,
    TokenSourceError,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("figtokens")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "generate_stylesheets",
    "FigTokensError",
    "TokenSourceError",
    "ManifestError",
    "OutputError",
    "DanglingReferenceError",
]
