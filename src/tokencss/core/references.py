"""
Token reference resolution.

A value such as ``"{space.4}"`` is an alias for the token at ``space.4``.
References are looked up in the combined primitives + semantics tree; theme
documents are never part of that namespace.

By default resolution is a single pass: if the target is itself a reference
string, that string is returned as-is. Raising ``max_depth`` follows chains
up to that many hops, and a chain that revisits a path is a cycle.

What happens to a reference that names no token is decided by the
``ReferencePolicy``.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from .errors import CircularReferenceError, ErrorContext, UnresolvedReferenceError
from .ir.tokens import TokenGroup, TokenLeaf, TokenValue

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(r"\{([^}]+)\}")

ResolvedValue = TokenValue | TokenGroup


class ReferencePolicy(StrEnum):
    """What to emit for a reference that cannot be resolved."""

    FAIL = "fail"
    EMPTY = "empty"
    KEEP = "keep"
    FALLBACK = "fallback"


class _Missing:
    """Marker for a path that does not exist in the lookup tree."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()


def find_reference(value: object) -> str | None:
    """Return the path of the first ``{...}`` reference in a string value."""
    if not isinstance(value, str):
        return None
    match = REFERENCE_PATTERN.search(value)
    return match.group(1) if match else None


def lookup_path(path: str, tokens: TokenGroup) -> ResolvedValue | _Missing:
    """
    Walk a dotted path through a token tree.

    Returns:
        The leaf value if the walk ends on a leaf, the group itself if it
        ends on a group, or ``MISSING`` if any key is absent.
    """
    current: TokenLeaf | TokenGroup = tokens
    for part in path.split("."):
        if not isinstance(current, TokenGroup):
            return MISSING
        child = current.get(part)
        if child is None:
            return MISSING
        current = child

    if isinstance(current, TokenLeaf):
        return current.value
    return current


class ReferenceResolver:
    """
    Resolves reference values against a fixed lookup tree.

    Example:
        resolver = ReferenceResolver(lookup, policy=ReferencePolicy.KEEP)
        resolver.resolve("{space.4}")  # -> 16
    """

    def __init__(
        self,
        lookup: TokenGroup,
        policy: ReferencePolicy = ReferencePolicy.EMPTY,
        fallback: str = "unset",
        max_depth: int = 1,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.lookup = lookup
        self.policy = ReferencePolicy(policy)
        self.fallback = fallback
        self.max_depth = max_depth

    def resolve(self, value: TokenValue, path: str | None = None) -> ResolvedValue:
        """
        Resolve a raw token value.

        Args:
            value: Raw leaf value.
            path: Path of the token being resolved, used in diagnostics.

        Returns:
            The value to emit. Non-reference values are returned unchanged.

        Raises:
            UnresolvedReferenceError: Under ``ReferencePolicy.FAIL``.
        """
        reference = find_reference(value)
        if reference is None:
            return value

        chain: list[str] = []
        current: ResolvedValue = value
        for _ in range(self.max_depth):
            reference = find_reference(current)
            if reference is None:
                break
            if reference in chain:
                chain.append(reference)
                return self._unresolved(value, reference, path, chain=chain)
            chain.append(reference)

            target = lookup_path(reference, self.lookup)
            if target is MISSING:
                return self._unresolved(value, reference, path)
            current = target

        return current

    def _unresolved(
        self,
        original: TokenValue,
        reference: str,
        path: str | None,
        chain: list[str] | None = None,
    ) -> ResolvedValue:
        context = ErrorContext(path=path) if path else None
        if self.policy is ReferencePolicy.FAIL:
            if chain:
                raise CircularReferenceError(chain, context)
            raise UnresolvedReferenceError(reference, context)

        if chain:
            logger.warning("Circular reference %s", " -> ".join(chain))
        else:
            logger.warning(
                "Unresolved reference {%s} in %s (policy=%s)",
                reference,
                path or "<value>",
                self.policy.value,
            )

        if self.policy is ReferencePolicy.KEEP:
            return original
        if self.policy is ReferencePolicy.FALLBACK:
            return self.fallback
        return None
