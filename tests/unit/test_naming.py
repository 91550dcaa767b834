"""Tests for token name normalization and reference resolution."""

from __future__ import annotations

import pytest

from figtokens.core.naming import (
    capitalize,
    category_key,
    normalize_reference_path,
    normalize_token_name,
)
from figtokens.core.references import fix_references, needs_calc, resolve_references

# =============================================================================
# Name normalization
# =============================================================================


class TestNormalizeTokenName:
    """Test normalize_token_name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("primary", "primary"),
            ("primaryColor", "primary--color"),
            ("borderRadius", "border--radius"),
            ("headingLarge", "heading--large"),
            ("XL", "x-l"),
            ("100", "100"),
            ("font size", "font-size"),
            ("  padded  ", "padded"),
            ("with_underscore", "withunderscore"),
            ("emoji 🎨 name", "emoji--name"),
        ],
    )
    def test_normalize(self, name: str, expected: str):
        assert normalize_token_name(name) == expected

    def test_invalid_only_yields_empty(self):
        assert normalize_token_name("$$$") == ""
        assert normalize_token_name("") == ""

    @pytest.mark.parametrize(
        "name",
        ["primaryColor", "Font Size", "XLarge", "a.b", "--edge--", "Heading/Large", "ÄÖÜ"],
    )
    def test_idempotent(self, name: str):
        once = normalize_token_name(name)
        assert normalize_token_name(once) == once

    def test_reference_path(self):
        assert normalize_reference_path("color.brandPrimary.500") == "color-brand--primary-500"

    def test_category_key(self):
        assert category_key("Components/Button") == "components-button"
        assert category_key("Color Light") == "color light"
        assert category_key("a\\b") == "a-b"

    def test_capitalize(self):
        assert capitalize("color light") == "Color light"
        assert capitalize("") == ""


# =============================================================================
# Reference resolution
# =============================================================================


class TestResolveReferences:
    """Test resolve_references and needs_calc."""

    def test_plain_reference(self):
        assert resolve_references("{color.primary}") == "var(--color-primary)"

    def test_reference_with_whitespace(self):
        assert resolve_references("{ color.primary }") == "var(--color-primary)"

    def test_camel_case_segments(self):
        assert resolve_references("{borderRadius.small}") == "var(--border--radius-small)"

    @pytest.mark.parametrize(
        "template",
        ["{a.b}", "solid {a.b}", "1px solid {a.b}", "{a.b} !important"],
    )
    def test_reference_in_any_context(self, template: str):
        assert "var(--a-b)" in resolve_references(template)

    def test_expression_wrapped_in_calc(self):
        assert resolve_references("{spacing.sm} + 4", "spacing") == "calc(var(--spacing-sm) + 4)"

    def test_multiplication_with_two_refs(self):
        assert (
            resolve_references("{spacing.sm} * {scale.factor}")
            == "calc(var(--spacing-sm) * var(--scale-factor))"
        )

    def test_already_calc_is_not_wrapped_again(self):
        assert (
            resolve_references("calc({spacing.sm} + 4px)") == "calc(var(--spacing-sm) + 4px)"
        )

    def test_no_reference_no_calc(self):
        assert resolve_references("10 - 2") == "10 - 2"
        assert resolve_references("#fff") == "#fff"

    def test_hyphenated_variable_alone_is_not_an_expression(self):
        assert not needs_calc("var(--color-brand-primary)")

    def test_literal_hyphen_next_to_variable_misfires(self):
        # Textual heuristic: a hyphen in a literal counts as an operator
        assert needs_calc("Inter-Bold var(--font-fallback)")

    def test_idempotent_on_resolved_text(self):
        once = resolve_references("{spacing.sm} + 4")
        assert resolve_references(once) == once


class TestFixReferences:
    """Test the document-level placeholder sweep."""

    def test_rewrites_rule_lines(self):
        content = "@mixin x {\n  font-family: {font.body};\n}"
        assert "font-family: var(--font-body);" in fix_references(content)

    def test_skips_declarations_and_comments(self):
        content = "  --raw: {left.alone};\n  // {comment.ref}\n\n"
        assert fix_references(content) == content

    def test_keeps_single_line_rule_bodies(self):
        line = ".text-x { color: var(--x); }"
        assert fix_references(line) == line
