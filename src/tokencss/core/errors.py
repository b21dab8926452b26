"""
Error types for token loading, configuration, and reference resolution.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenError(Exception):
    """Base exception for all tokencss errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class TokenLoadError(TokenError):
    """
    Raised when a token document cannot be loaded.

    Examples:
    - Missing input file
    - Invalid JSON or YAML
    - Top-level value that is not a mapping
    """

    pass


class ManifestError(TokenError):
    """
    Raised when tokens.toml is invalid.

    Examples:
    - Malformed TOML
    - Unknown reference policy
    - Default theme not declared in [tokens.themes]
    """

    pass


class UnresolvedReferenceError(TokenError):
    """Raised for a reference that names no token, under the ``fail`` policy."""

    def __init__(
        self,
        reference: str,
        context: Optional["ErrorContext"] = None,
        message: str | None = None,
    ):
        self.reference = reference
        super().__init__(message or f"Unresolved token reference {{{reference}}}", context)


class CircularReferenceError(UnresolvedReferenceError):
    """Raised when a reference chain revisits a path it is already resolving."""

    def __init__(self, chain: list[str], context: Optional["ErrorContext"] = None):
        self.chain = chain
        super().__init__(
            chain[-1],
            context,
            message="Circular token reference: " + " -> ".join(chain),
        )


@dataclass
class ErrorContext:
    """
    Where an error occurred.

    Attributes:
        file: Token document or manifest the error relates to
        path: Optional dotted token path inside that document
    """

    file: Path | None = None
    path: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "themes/soft.json at color.accent"
        """
        location = str(self.file) if self.file else "<tokens>"
        if self.path:
            location += f" at {self.path}"
        return location


def make_load_error(message: str, file: Path, cause: Exception | None = None) -> TokenLoadError:
    """
    Helper to create a TokenLoadError for a document.

    Args:
        message: Error description
        file: Document path
        cause: Underlying parser or I/O error, appended to the message

    Returns:
        TokenLoadError with file context attached
    """
    if cause is not None:
        message = f"{message}: {cause}"
    return TokenLoadError(message, ErrorContext(file=file))
