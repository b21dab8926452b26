"""CSS generation and stylesheet assembly."""

from .assembler import (
    base_tokens,
    build_stylesheet,
    combined_lookup,
    compile_tokens,
    write_stylesheet,
)
from .css_generator import (
    ROOT_SELECTOR,
    css_var_name,
    format_css_value,
    generate_css_block,
    theme_selector,
)

__all__ = [
    "ROOT_SELECTOR",
    "base_tokens",
    "build_stylesheet",
    "combined_lookup",
    "compile_tokens",
    "css_var_name",
    "format_css_value",
    "generate_css_block",
    "theme_selector",
    "write_stylesheet",
]
