"""
Reference resolution for token values.

Rewrites `{path.to.token}` placeholders into `var(--path-to-token)` calls.
Resolution is purely lexical: the referenced token is never looked up, so
a reference to a missing token becomes a dangling `var()`.
"""

from __future__ import annotations

import re

from .naming import normalize_reference_path

_PLACEHOLDER = re.compile(r"\{([^}]+)\}")

# Document sweep only touches placeholders that cannot be a rule body
_SWEEP_PLACEHOLDER = re.compile(r"\{([^{}:;]+)\}")

_VAR_CALL = re.compile(r"var\(--[^)]*\)")
_OPERATOR = re.compile(r"[+\-*/]")


def _to_var(match: re.Match[str]) -> str:
    return f"var(--{normalize_reference_path(match.group(1).strip())})"


def needs_calc(text: str) -> bool:
    """Whether *text* mixes variables and arithmetic and should be wrapped in calc().

    Operators are looked for in the literal text around the var() calls,
    so hyphens inside variable names do not count. Hyphens in literals
    (e.g. a font name) still do.
    """
    if "var(--" not in text or text.startswith("calc("):
        return False
    # A lone reference must stay a plain var(--a-b)
    return bool(_OPERATOR.search(_VAR_CALL.sub("", text)))


def resolve_references(text: str, token_type: str | None = None) -> str:
    """Replace every `{a.b}` placeholder with `var(--a-b)`, adding calc() for expressions.

    Args:
        text: Raw token value
        token_type: Token type (accepted for symmetry with convert_value;
            resolution does not depend on it)

    Returns:
        Resolved string
    """
    resolved = _PLACEHOLDER.sub(_to_var, text)
    if needs_calc(resolved):
        return f"calc({resolved})"
    return resolved


def fix_references(content: str) -> str:
    """Final sweep over a generated document for leftover placeholders.

    Declaration lines (`--...`), comments and blank lines are left alone
    since declarations were already resolved during flattening.
    """
    lines = []
    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("--") or stripped.startswith("//"):
            lines.append(line)
            continue
        lines.append(_SWEEP_PLACEHOLDER.sub(_to_var, line))
    return "\n".join(lines)
