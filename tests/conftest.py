"""Shared pytest fixtures for figtokens tests."""

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def heading_typography() -> dict[str, Any]:
    """Return a complete typography token value."""
    return {
        "fontFamily": "Arial",
        "fontSize": 16,
        "fontWeight": 700,
        "lineHeight": 1.5,
        "letterSpacing": 2,
    }


@pytest.fixture
def token_document(heading_typography: dict[str, Any]) -> dict[str, Any]:
    """Return a Tokens Studio style document with global, light, dark and component sets."""
    return {
        "$themes": [],
        "$metadata": {"tokenSetOrder": ["global", "light", "dark", "button"]},
        "global": {
            "color": {
                "primary": {"$type": "color", "$value": "#0055ff"},
                "gray": {"100": {"$type": "color", "$value": "#f5f5f5"}},
                "accent": {"$type": "color", "$value": "{color.primary}"},
            },
            "spacing": {
                "sm": {"$type": "dimension", "$value": 8},
                "md": {"$type": "spacing", "$value": "{spacing.sm} * 2"},
            },
            "borderRadius": {"base": {"$type": "borderRadius", "$value": 4}},
            "shadow": {
                "card": {
                    "$type": "boxShadow",
                    "$value": {
                        "x": 0,
                        "y": 2,
                        "blur": 4,
                        "spread": 0,
                        "color": "rgba(0,0,0,0.2)",
                        "type": "dropShadow",
                    },
                }
            },
            "typography": {
                "headingLarge": {"$type": "typography", "$value": heading_typography},
            },
        },
        "light": {"surface": {"background": {"$type": "color", "$value": "#ffffff"}}},
        "dark": {"surface": {"background": {"$type": "color", "$value": "#111111"}}},
        "button": {
            "background": {"type": "color", "value": "{color.primary}"},
            "backgroundHover": {"type": "color", "value": "#0044cc"},
            "borderRadius": {"type": "borderRadius", "value": 6},
        },
    }


@pytest.fixture
def tokens_file(tmp_path: Path, token_document: dict[str, Any]) -> Path:
    """Write the token document to tokens.json and return its path."""
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(token_document), encoding="utf-8")
    return path
