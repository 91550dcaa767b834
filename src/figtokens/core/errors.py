"""
Error types for token loading, configuration, and stylesheet output.

The conversion core never raises for data-shape issues; these errors are
raised by the I/O collaborators around it.
"""

from dataclasses import dataclass
from typing import Optional


class FigTokensError(Exception):
    """Base exception for all figtokens errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenSourceError(FigTokensError):
    """
    Raised when a token document cannot be retrieved or parsed.

    Examples:
    - Local file or directory does not exist
    - Git clone fails
    - HTTP request fails
    - Malformed JSON/YAML
    - Document root is not a mapping
    """

    pass


class ManifestError(FigTokensError):
    """Raised when figtokens.toml cannot be parsed."""

    pass


class OutputError(FigTokensError):
    """Raised when generated stylesheets cannot be written."""

    pass


class DanglingReferenceError(FigTokensError):
    """
    Raised in strict mode when a stylesheet uses a variable that no
    generated stylesheet declares.
    """

    def __init__(self, missing: list[str], context: Optional["ErrorContext"] = None):
        self.missing = missing
        preview = ", ".join(f"--{name}" for name in missing[:5])
        if len(missing) > 5:
            preview += f" (+{len(missing) - 5} more)"
        super().__init__(f"{len(missing)} dangling reference(s): {preview}", context)


@dataclass
class ErrorContext:
    """
    Where an error happened.

    Attributes:
        source: Token source, file, or output path involved
        detail: Optional underlying cause (e.g. git stderr)
    """

    source: str
    detail: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens.json: Expecting value: line 1"
        """
        if self.detail:
            return f"{self.source}: {self.detail}"
        return self.source
