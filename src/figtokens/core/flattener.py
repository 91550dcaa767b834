"""
Token tree flattening.

Walks a nested token document and accumulates one CSS custom-property
declaration per leaf token (several for typography tokens, which also
produce a mixin) into insertion-ordered categories.
"""

from __future__ import annotations

import logging
from typing import Any

from .ir import CategoryMap, TokenType
from .naming import category_key, normalize_token_name
from .references import resolve_references
from .values import convert_value

logger = logging.getLogger(__name__)


def _leaf_type(node: dict[str, Any]) -> Any:
    return node.get("$type") or node.get("type")


def _leaf_value(node: dict[str, Any]) -> Any:
    value = node.get("$value")
    if value is None:
        value = node.get("value")
    return value


def _typography_mixin(token_name: str, properties: dict[str, str]) -> str:
    body = "".join(f"  {prop}: {value};\n" for prop, value in properties.items())
    return f"@mixin {token_name} {{\n{body}}}"


def flatten_tokens(
    node: dict[str, Any],
    category_base: str,
    categories: CategoryMap,
    prefix: str = "",
) -> CategoryMap:
    """
    Flatten a token subtree into *categories*.

    Args:
        node: Group mapping to walk
        category_base: Name of the top-level category the subtree belongs to
        categories: Accumulator, mutated in place
        prefix: Normalized path of *node* from the category root

    Returns:
        The same accumulator, for chaining
    """
    for key, value in node.items():
        if not key or key.startswith("$"):
            continue

        current_path = normalize_token_name(key)
        if prefix:
            current_path = f"{prefix}-{current_path}"

        if isinstance(value, dict) and _leaf_type(value):
            category = categories.get_or_create(category_key(category_base))
            token_type = _leaf_type(value)
            token_value = _leaf_value(value)

            if token_value is None:
                logger.debug("Skipping token %s: no value", current_path)
                continue

            converted = convert_value(token_value, token_type)
            if isinstance(converted, str) and "var(--" not in converted:
                converted = resolve_references(converted, token_type)

            if token_type == TokenType.TYPOGRAPHY and isinstance(converted, dict):
                category.mixins.append(_typography_mixin(current_path, converted))
                for prop, prop_value in converted.items():
                    suffix = prop.replace("font-", "", 1)
                    category.variables.append(f"--{current_path}-{suffix}: {prop_value};")
            else:
                category.variables.append(f"--{current_path}: {converted};")

        elif isinstance(value, dict):
            flatten_tokens(value, category_base, categories, current_path)

    return categories


def build_categories(document: dict[str, Any]) -> CategoryMap:
    """Flatten every top-level category of a token document.

    Top-level keys starting with "$" or "_" (token set metadata, themes
    configuration) are skipped.
    """
    categories = CategoryMap()
    for name, subtree in document.items():
        if name.startswith("$") or name.startswith("_"):
            continue
        if not isinstance(subtree, dict):
            logger.debug("Skipping top-level %r: not a token group", name)
            continue
        flatten_tokens(subtree, name, categories)
    logger.debug(
        "Flattened %d categories, %d variables",
        len(categories),
        len(categories.all_variables()),
    )
    return categories
