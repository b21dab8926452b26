"""
CSS generator for design tokens.

Renders flat token tables as CSS custom-property blocks. Each entry is
resolved and unit-annotated as it is emitted, so the table handed in can
hold raw values straight from the flattener.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from tokencss.core.flatten import flatten_tokens
from tokencss.core.ir.tokens import TokenGroup, TokenValue
from tokencss.core.references import ReferenceResolver
from tokencss.core.units import annotate_unit, format_number, is_number

ROOT_SELECTOR = ":root"


def css_var_name(path: str) -> str:
    """
    Convert a token path to a CSS custom property name.

    Example:
        css_var_name("color.surface.primary")  # "--color-surface-primary"
    """
    return "--" + path.replace(".", "-")


def theme_selector(theme_name: str) -> str:
    """
    Get the CSS selector that scopes a theme's overrides.

    Args:
        theme_name: Theme name (e.g., "soft"); quotes and backslashes are escaped

    Returns:
        CSS selector string
    """
    escaped = theme_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'[data-theme="{escaped}"]'


def format_css_value(value: Any) -> str:
    """Render a resolved value as CSS declaration text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, list):
        return ",".join(format_css_value(item) for item in value)
    if isinstance(value, TokenGroup):
        return json.dumps(flatten_tokens(value), separators=(",", ":"))
    return str(value)


def generate_css_block(
    tokens: Mapping[str, TokenValue],
    resolver: ReferenceResolver,
    selector: str = ROOT_SELECTOR,
) -> str:
    """
    Generate one CSS rule block from a flat token table.

    Args:
        tokens: Token path -> raw value, in output order
        resolver: Resolver for ``{path}`` references
        selector: Rule selector, ``:root`` by default

    Returns:
        CSS string ending in a newline
    """
    lines = [f"{selector} {{\n"]
    for path, raw in tokens.items():
        resolved = resolver.resolve(raw, path)
        value = annotate_unit(resolved, path)
        lines.append(f"  {css_var_name(path)}: {format_css_value(value)};\n")
    lines.append("}\n")
    return "".join(lines)
