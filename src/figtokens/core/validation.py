"""
Dangling reference detection.

References are resolved lexically, so `{color.missing}` happily becomes
`var(--color-missing)` even when no such token exists. This pass compares
the variables used across the generated stylesheets against the ones they
declare.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_DECLARED = re.compile(r"^\s*--([a-z0-9-]+)\s*:", re.MULTILINE)
_USED = re.compile(r"var\(--([a-z0-9-]+)")


class DanglingReference(BaseModel):
    """A variable used by a stylesheet but declared by none."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str


def declared_variables(documents: dict[str, str]) -> set[str]:
    """Every custom property declared in any document."""
    declared: set[str] = set()
    for content in documents.values():
        declared.update(_DECLARED.findall(content))
    return declared


def find_dangling_references(documents: dict[str, str]) -> list[DanglingReference]:
    """
    Find var() uses with no matching declaration.

    Args:
        documents: Output mapping of relative path -> content

    Returns:
        One entry per missing variable, pointing at the first document
        (in mapping order) that uses it
    """
    declared = declared_variables(documents)
    dangling: dict[str, DanglingReference] = {}
    for path, content in documents.items():
        for name in _USED.findall(content):
            if name not in declared and name not in dangling:
                dangling[name] = DanglingReference(name=name, path=path)

    if dangling:
        logger.debug("Found %d dangling reference(s)", len(dangling))
    return list(dangling.values())
