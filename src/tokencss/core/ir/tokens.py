"""
Token tree IR types.

A token document is parsed once, at load time, into a tagged tree:
every node is either a ``TokenLeaf`` carrying a value or a ``TokenGroup``
carrying named children. Nothing downstream inspects raw mappings.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

TokenScalar = str | int | float | bool | None

# Lists hold multi-part values such as font stacks.
TokenValue = TokenScalar | list[TokenScalar]

# Keys that mark a raw mapping as a leaf. ``$value`` is the DTCG spelling.
LEAF_VALUE_KEYS = ("value", "$value")


# =============================================================================
# Nodes
# =============================================================================


class TokenLeaf(BaseModel):
    """
    A single design value.

    Example:
        TokenLeaf(value=16, metadata={"type": "dimension"})
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    value: TokenValue = Field(description="Raw value (string, number, or list of them)")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Other leaf fields, ignored by the compiler"
    )


class TokenGroup(BaseModel):
    """
    A named collection of leaves and nested groups.

    Children keep document order.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    children: dict[str, TokenNode] = Field(default_factory=dict)

    def get(self, key: str) -> TokenNode | None:
        return self.children.get(key)


TokenNode = Annotated[TokenLeaf | TokenGroup, Field(discriminator="kind")]

TokenGroup.model_rebuild()


# =============================================================================
# Context
# =============================================================================


class TokenContext(BaseModel):
    """
    Everything one compilation needs, passed explicitly through the pipeline.

    Themes are ordered as declared; ``default_theme`` names the one merged
    into the base block.
    """

    model_config = ConfigDict(frozen=True)

    primitives: TokenGroup = Field(default_factory=TokenGroup)
    semantics: TokenGroup = Field(default_factory=TokenGroup)
    themes: dict[str, TokenGroup] = Field(default_factory=dict)
    default_theme: str = "default"

    @property
    def named_themes(self) -> list[str]:
        """Themes that get their own scoped block."""
        return [name for name in self.themes if name != self.default_theme]


# =============================================================================
# Parsing
# =============================================================================


def is_leaf_mapping(data: Any) -> bool:
    """Check whether a raw mapping is a token leaf."""
    return isinstance(data, dict) and any(key in data for key in LEAF_VALUE_KEYS)


def parse_token_leaf(data: dict[str, Any]) -> TokenLeaf:
    value_key = "value" if "value" in data else "$value"
    metadata = {k: v for k, v in data.items() if k not in LEAF_VALUE_KEYS}
    return TokenLeaf(value=data[value_key], metadata=metadata)


def parse_token_document(data: dict[str, Any]) -> TokenGroup:
    """
    Parse a raw nested mapping into a TokenGroup.

    Mappings with a ``value`` (or ``$value``) key become leaves, other
    mappings become groups. Scalars and lists that are neither are dropped.

    Args:
        data: Raw document as loaded from JSON or YAML.

    Returns:
        Root group of the document.
    """
    children: dict[str, TokenLeaf | TokenGroup] = {}
    for key, raw in data.items():
        if is_leaf_mapping(raw):
            children[str(key)] = parse_token_leaf(raw)
        elif isinstance(raw, dict) and raw:
            children[str(key)] = parse_token_document(raw)
    return TokenGroup(children=children)


def merge_groups(*groups: TokenGroup) -> TokenGroup:
    """
    Shallow top-level union of groups; later groups win on key collisions.
    """
    children: dict[str, TokenLeaf | TokenGroup] = {}
    for group in groups:
        children.update(group.children)
    return TokenGroup(children=children)
