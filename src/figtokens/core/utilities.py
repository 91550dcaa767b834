"""
Utility class generation for component stylesheets.

Classes are derived from variable names by substring heuristics:
color-like names get text/bg/border helpers, spacing-like names get
margin/padding helpers, and component state tokens get a component rule
plus one rule per pseudo-state.
"""

from __future__ import annotations

import re

_DECLARATION_NAME = re.compile(r"--([^:]+):")
_NUMBERED_DECLARATION = re.compile(r"--[^:]*-\d+:")
_TRAILING_DIGITS = re.compile(r"\d+$")

COLOR_MARKERS = ("color", "background")
SPACING_MARKERS = ("spacing", "padding", "margin")
COMPONENT_MARKERS = (
    "background",
    "border",
    "hover",
    "active",
    "focus",
    "disabled",
    "checked",
    "selected",
)
STATES = ("hover", "active", "focus", "disabled", "checked", "selected")

# Checked in order; first substring match wins
_PROPERTY_MAP: list[tuple[str, str]] = [
    ("background", "background"),
    ("border-color", "border-color"),
    ("color", "color"),
    ("border-radius", "border-radius"),
    ("padding", "padding"),
    ("margin", "margin"),
    ("font-size", "font-size"),
    ("font-weight", "font-weight"),
    ("line-height", "line-height"),
]


def variable_name(declaration: str) -> str | None:
    """Name without the leading "--" of a "--name: value;" declaration."""
    match = _DECLARATION_NAME.search(declaration)
    return match.group(1) if match else None


def map_token_to_property(token_name: str) -> str | None:
    """CSS property a component token drives, or None if unrecognized."""
    for marker, prop in _PROPERTY_MAP:
        if marker in token_name:
            return prop
    return None


def has_color_tokens(variables: list[str]) -> bool:
    return any(
        any(marker in variable for marker in COLOR_MARKERS)
        or _NUMBERED_DECLARATION.search(variable)
        for variable in variables
    )


def has_spacing_tokens(variables: list[str]) -> bool:
    return any(
        any(marker in variable for marker in (*SPACING_MARKERS, "gap")) for variable in variables
    )


def is_component_tokens(variables: list[str]) -> bool:
    return any(
        any(marker in variable for marker in COMPONENT_MARKERS) for variable in variables
    )


def generate_mixin_utilities(mixins: list[str]) -> str:
    """One `.name { @include name; }` class per mixin."""
    styles = ""
    for mixin in mixins:
        match = re.match(r"@mixin ([^{]+)", mixin)
        if match:
            name = match.group(1).strip()
            styles += f".{name} {{ @include {name}; }}\n"
    return styles


def generate_color_utilities(variables: list[str]) -> str:
    styles = ""
    for variable in variables:
        name = variable_name(variable)
        if name is None:
            continue
        if any(marker in name for marker in COLOR_MARKERS) or _TRAILING_DIGITS.search(name):
            styles += f".text-{name} {{ color: var(--{name}); }}\n"
            styles += f".bg-{name} {{ background-color: var(--{name}); }}\n"
            styles += f".border-{name} {{ border-color: var(--{name}); }}\n"
    return styles


def generate_spacing_utilities(variables: list[str]) -> str:
    styles = ""
    for variable in variables:
        name = variable_name(variable)
        if name is None:
            continue
        if any(marker in name for marker in SPACING_MARKERS):
            styles += f".m-{name} {{ margin: var(--{name}); }}\n"
            styles += f".p-{name} {{ padding: var(--{name}); }}\n"
    return styles


def _state_of(token_name: str) -> str | None:
    segments = token_name.split("-")
    for state in STATES:
        if state in segments:
            return state
    return None


def group_by_state(variables: list[str]) -> dict[str, list[str]]:
    """Bucket declarations into "base" and one list per pseudo-state."""
    groups: dict[str, list[str]] = {"base": [], **{state: [] for state in STATES}}
    for variable in variables:
        name = variable_name(variable)
        if name is None:
            continue
        groups[_state_of(name) or "base"].append(name)
    return groups


def generate_component_utilities(category_name: str, variables: list[str]) -> str:
    """Component rule for base tokens plus `:state` rules for state tokens."""
    groups = group_by_state(variables)

    styles = f"// {category_name} component utilities\n"
    styles += f".{category_name} {{\n"
    styles += "  // Base styles using tokens\n"
    for name in groups["base"]:
        prop = map_token_to_property(name)
        if prop:
            styles += f"  {prop}: var(--{name});\n"
    styles += "}\n\n"

    for state in STATES:
        names = groups[state]
        if not names:
            continue
        styles += f".{category_name}:{state} {{\n"
        for name in names:
            prop = map_token_to_property(name.replace(f"-{state}", "", 1))
            if prop:
                styles += f"  {prop}: var(--{name});\n"
        styles += "}\n\n"

    return styles


def generate_utilities(category_name: str, variables: list[str], mixins: list[str]) -> str:
    """All utility classes for one category file."""
    utilities = generate_mixin_utilities(mixins)

    if "color" in category_name or has_color_tokens(variables):
        utilities += generate_color_utilities(variables)

    if "spacing" in category_name or has_spacing_tokens(variables):
        utilities += generate_spacing_utilities(variables)

    if is_component_tokens(variables):
        utilities += generate_component_utilities(category_name, variables)

    return utilities or f"// No utilities generated for {category_name}\n"
