"""
tokencss - compile design tokens into CSS custom properties.

Usage:
    from tokencss import compile_tokens, find_manifest

    manifest = find_manifest(Path("."))
    compile_tokens(manifest)  # -> dist/tokens.css
"""

from tokencss.core.manifest import TokensManifest, find_manifest, load_manifest
from tokencss.core.references import ReferencePolicy
from tokencss.themes.assembler import build_stylesheet, compile_tokens, write_stylesheet

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "TokensManifest",
    "ReferencePolicy",
    "find_manifest",
    "load_manifest",
    "build_stylesheet",
    "compile_tokens",
    "write_stylesheet",
]
