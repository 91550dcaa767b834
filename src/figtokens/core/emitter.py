"""
SCSS stylesheet emitter.

Renders partitioned categories into stylesheet documents. Everything here
is pure: generate_stylesheets() returns a mapping of relative path to file
content and writing it is left to figtokens.core.writer.

Output layout:
    base/_variables.scss      theme-independent variables in :root
    base/_light.scss          light overrides in :root (if any)
    base/_dark.scss           dark overrides in .dark (if any)
    components/_<name>.scss   mixins and utility classes per category
    index.scss                imports everything
"""

from __future__ import annotations

from typing import Any

from .flattener import build_categories
from .ir import CategoryMap, ThemeBucket, TokenCategory
from .naming import capitalize, category_key
from .references import fix_references
from .themes import partition_categories, strip_theme_name, strip_theme_suffix, theme_for_category
from .utilities import generate_utilities

GENERATED_BY = "// Automatically generated from Figma tokens"

VARIABLES_PATH = "base/_variables.scss"
INDEX_PATH = "index.scss"


def theme_path(theme: str) -> str:
    return f"base/_{theme}.scss"


def component_path(category_name: str) -> str:
    return f"components/_{category_key(category_name)}.scss"


def _declaration_block(categories: CategoryMap, themed: bool = False) -> list[str]:
    lines: list[str] = []
    for name, category in categories.items():
        if not category.variables:
            continue
        title = capitalize(strip_theme_name(name) if themed else name)
        lines.append("")
        lines.append(f"  // {title} tokens")
        for variable in category.variables:
            lines.append(f"  {strip_theme_suffix(variable) if themed else variable}")
    return lines


def generate_variables_file(categories: CategoryMap) -> str:
    """Base variables document: every theme-independent variable in one :root block."""
    lines = [
        "// Design Tokens - Base CSS Variables",
        GENERATED_BY,
        "// Theme-independent tokens",
        "",
        ":root {",
        *_declaration_block(categories),
        "}",
        "",
    ]
    return fix_references("\n".join(lines))


def generate_theme_file(theme: str, categories: CategoryMap) -> str:
    """Theme override document.

    The light theme applies to :root, any other theme to a class of the
    same name, so `<body class="dark">` switches themes.
    """
    selector = ":root" if theme == ThemeBucket.LIGHT else f".{theme}"
    lines = [
        f"// Design Tokens - {capitalize(theme)} Theme",
        GENERATED_BY,
        "",
        "@import 'variables';",
        "",
        f"{selector} {{",
        *_declaration_block(categories, themed=True),
        "}",
        "",
    ]
    return fix_references("\n".join(lines))


def generate_category_file(category_name: str, category: TokenCategory) -> str:
    """Component document with mixins and utility classes for one category."""
    content = f"// {capitalize(category_name)} Tokens\n{GENERATED_BY}\n\n"
    content += "@import '../base/variables';\n\n"

    variables = category.variables
    theme = theme_for_category(category_name)
    if theme is not ThemeBucket.BASE:
        content += f"@import '../base/{theme}';\n\n"
        # The theme file declares these without their -light/-dark suffix
        variables = [strip_theme_suffix(variable) for variable in variables]

    if category.mixins:
        content += "// Mixins\n"
        for mixin in category.mixins:
            content += f"{mixin}\n\n"

    content += "// Utility Classes\n"
    content += generate_utilities(category_name, variables, category.mixins)
    return fix_references(content)


def generate_index_file(category_names: list[str]) -> str:
    """Index document importing base, theme and component files."""
    lines = [
        "// Design Tokens - Main Index",
        GENERATED_BY,
        "",
        "// Base files",
        "@import 'base/variables';",
        "@import 'base/light';",
        "@import 'base/dark';",
        "",
        "// Component files",
    ]
    lines.extend(f"@import 'components/{category_key(name)}';" for name in category_names)
    lines.extend(
        [
            "",
            "// Theme Usage:",
            '// Add class="dark" to your <html> or <body> element for dark theme',
            "// Light theme is the default (applies to :root)",
            '// Example: <body class="dark">',
            "//",
            "// For Tailwind CSS compatibility:",
            "// This works seamlessly with Tailwind's dark mode class strategy",
            "",
        ]
    )
    return "\n".join(lines)


def render_stylesheets(categories: CategoryMap) -> dict[str, str]:
    """Render already-flattened categories into the output file mapping."""
    partitioned = partition_categories(categories)

    documents: dict[str, str] = {VARIABLES_PATH: generate_variables_file(partitioned.base)}
    for theme, theme_categories in partitioned.themes().items():
        documents[theme_path(theme)] = generate_theme_file(theme, theme_categories)

    for name, category in categories.items():
        documents[component_path(name)] = generate_category_file(name, category)

    documents[INDEX_PATH] = generate_index_file(list(categories))
    return documents


def generate_stylesheets(document: dict[str, Any]) -> dict[str, str]:
    """
    Convert a token document into stylesheets.

    Args:
        document: Parsed token document (category name -> token tree)

    Returns:
        Mapping of relative output path to file content
    """
    return render_stylesheets(build_categories(document))
