"""
Token conversion core.

Pure functions from a parsed token document to stylesheet text, plus the
loader and writer that sit at its I/O boundaries.

Usage:
    from figtokens.core import generate_stylesheets

    documents = generate_stylesheets(tokens)
    # {"base/_variables.scss": "...", "index.scss": "...", ...}
"""

from figtokens.core.emitter import (
    generate_category_file,
    generate_index_file,
    generate_stylesheets,
    generate_theme_file,
    generate_variables_file,
    render_stylesheets,
)
from figtokens.core.flattener import build_categories, flatten_tokens
from figtokens.core.ir import (
    CategoryMap,
    PartitionedCategories,
    ThemeBucket,
    TokenCategory,
    TokenType,
    ValueKind,
)
from figtokens.core.naming import normalize_reference_path, normalize_token_name
from figtokens.core.references import fix_references, needs_calc, resolve_references
from figtokens.core.themes import partition_categories, theme_for_category
from figtokens.core.utilities import generate_utilities
from figtokens.core.validation import DanglingReference, find_dangling_references
from figtokens.core.values import classify_value, convert_value

__all__ = [
    # Types
    "CategoryMap",
    "TokenCategory",
    "PartitionedCategories",
    "ThemeBucket",
    "TokenType",
    "ValueKind",
    "DanglingReference",
    # Naming and references
    "normalize_token_name",
    "normalize_reference_path",
    "resolve_references",
    "needs_calc",
    "fix_references",
    # Conversion
    "classify_value",
    "convert_value",
    "flatten_tokens",
    "build_categories",
    "partition_categories",
    "theme_for_category",
    "generate_utilities",
    # Emission
    "generate_variables_file",
    "generate_theme_file",
    "generate_category_file",
    "generate_index_file",
    "render_stylesheets",
    "generate_stylesheets",
    "find_dangling_references",
]
