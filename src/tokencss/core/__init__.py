"""Core token pipeline: IR, loading, flattening, references, units, configuration."""

from . import ir
from .errors import (
    CircularReferenceError,
    ErrorContext,
    ManifestError,
    TokenError,
    TokenLoadError,
    UnresolvedReferenceError,
)
from .flatten import flatten_tokens
from .references import ReferencePolicy, ReferenceResolver, lookup_path
from .units import annotate_unit

__all__ = [
    "ir",
    "TokenError",
    "TokenLoadError",
    "ManifestError",
    "UnresolvedReferenceError",
    "CircularReferenceError",
    "ErrorContext",
    "flatten_tokens",
    "ReferencePolicy",
    "ReferenceResolver",
    "lookup_path",
    "annotate_unit",
]
