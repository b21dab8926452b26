"""Intermediate representation for parsed token documents."""

from .tokens import (
    LEAF_VALUE_KEYS,
    TokenContext,
    TokenGroup,
    TokenLeaf,
    TokenNode,
    TokenScalar,
    TokenValue,
    is_leaf_mapping,
    merge_groups,
    parse_token_document,
    parse_token_leaf,
)

__all__ = [
    "LEAF_VALUE_KEYS",
    "TokenContext",
    "TokenGroup",
    "TokenLeaf",
    "TokenNode",
    "TokenScalar",
    "TokenValue",
    "is_leaf_mapping",
    "merge_groups",
    "parse_token_document",
    "parse_token_leaf",
]
