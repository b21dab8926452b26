"""
Stylesheet assembly for design tokens.

Builds the final stylesheet from a TokenContext:
1. Base block under ``:root``: primitives, then semantics, then the
   default theme (later entries win on the same path)
2. One ``[data-theme="<name>"]`` block per remaining theme, holding only
   that theme's entries, in declaration order

References in every block resolve against primitives + semantics only.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tokencss.core.flatten import flatten_tokens
from tokencss.core.ir.tokens import TokenContext, TokenGroup, TokenValue, merge_groups
from tokencss.core.manifest import DEFAULT_HEADER, TokensManifest
from tokencss.core.references import ReferencePolicy, ReferenceResolver
from tokencss.core.token_loader import load_context

from .css_generator import ROOT_SELECTOR, generate_css_block, theme_selector

logger = logging.getLogger(__name__)


def combined_lookup(context: TokenContext) -> TokenGroup:
    """Reference namespace: primitives and semantics, semantics winning."""
    return merge_groups(context.primitives, context.semantics)


def base_tokens(context: TokenContext) -> dict[str, TokenValue]:
    """
    Flat table for the ``:root`` block.

    Precedence: default theme > semantics > primitives
    """
    tokens = flatten_tokens(context.primitives)
    tokens.update(flatten_tokens(context.semantics))
    default = context.themes.get(context.default_theme)
    if default is not None:
        tokens.update(flatten_tokens(default))
    return tokens


def _theme_title(name: str) -> str:
    return name.replace("-", " ").replace("_", " ").title()


def build_stylesheet(
    context: TokenContext,
    *,
    policy: ReferencePolicy = ReferencePolicy.EMPTY,
    fallback: str = "unset",
    max_depth: int = 1,
    header: str = DEFAULT_HEADER,
) -> str:
    """
    Build the complete stylesheet text.

    Args:
        context: Loaded token documents
        policy: What to emit for unresolved references
        fallback: Value used by ``ReferencePolicy.FALLBACK``
        max_depth: Reference hops to follow (1 = single pass)
        header: Text of the leading comment

    Returns:
        CSS document text
    """
    resolver = ReferenceResolver(
        combined_lookup(context),
        policy=policy,
        fallback=fallback,
        max_depth=max_depth,
    )

    base = base_tokens(context)
    logger.debug("Base block: %d tokens", len(base))

    parts = [f"/* {header} */\n\n", "/* Base Tokens */\n"]
    parts.append(generate_css_block(base, resolver, ROOT_SELECTOR))

    for name in context.named_themes:
        theme = flatten_tokens(context.themes[name])
        logger.debug("Theme %s: %d tokens", name, len(theme))
        parts.append(f"\n/* Theme: {_theme_title(name)} */\n")
        parts.append(generate_css_block(theme, resolver, theme_selector(name)))

    return "".join(parts)


def write_stylesheet(css: str, output_path: Path) -> Path:
    """
    Write the stylesheet, creating missing parent directories.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(css, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", output_path, len(css.encode("utf-8")))
    return output_path


def compile_tokens(manifest: TokensManifest, output_path: Path | None = None) -> Path:
    """
    Load, build and write in one pass.

    Args:
        manifest: Build configuration
        output_path: Overrides ``manifest.output`` when given

    Returns:
        Path to the written stylesheet.
    """
    context = load_context(manifest)
    css = build_stylesheet(
        context,
        policy=manifest.resolve.policy,
        fallback=manifest.resolve.fallback,
        max_depth=manifest.resolve.max_depth,
        header=manifest.header,
    )
    return write_stylesheet(css, output_path or manifest.output)
