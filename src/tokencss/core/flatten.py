"""
Token tree flattening.

Turns a parsed token tree into a flat table keyed by dotted path, e.g.
``{"space": {"4": {"value": 16}}}`` becomes ``{"space.4": 16}``.
"""

from __future__ import annotations

from .ir.tokens import TokenGroup, TokenLeaf, TokenValue


def join_path(prefix: str, key: str) -> str:
    """Append a key to a dotted path."""
    return f"{prefix}.{key}" if prefix else key


def flatten_tokens(group: TokenGroup, prefix: str = "") -> dict[str, TokenValue]:
    """
    Flatten a token group into a dotted-path table.

    Entries keep document traversal order.

    Args:
        group: Parsed token tree.
        prefix: Path prepended to every key.

    Returns:
        Fresh mapping of token path to raw leaf value.
    """
    result: dict[str, TokenValue] = {}
    _flatten_into(group, prefix, result)
    return result


def _flatten_into(group: TokenGroup, prefix: str, result: dict[str, TokenValue]) -> None:
    for key, node in group.children.items():
        path = join_path(prefix, key)
        if isinstance(node, TokenLeaf):
            result[path] = node.value
        else:
            _flatten_into(node, path, result)
