"""
Token document loading.

Reads the primitives, semantics and theme documents named by a
TokensManifest and parses them into the token IR. JSON is the usual
format; ``.yaml``/``.yml`` documents are read with PyYAML.

Any missing or unparsable document is fatal. Everything is loaded before
the caller produces output, so a failed load never leaves a partial
stylesheet behind.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import make_load_error
from .ir.tokens import TokenContext, TokenGroup, parse_token_document
from .manifest import TokensManifest

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


# =============================================================================
# Raw documents
# =============================================================================


def read_document(path: Path) -> dict[str, Any]:
    """
    Read one raw token document.

    Args:
        path: JSON or YAML file.

    Returns:
        The top-level mapping.

    Raises:
        TokenLoadError: If the file is missing, unreadable, unparsable, or
            not a mapping at the top level.
    """
    if not path.exists():
        raise make_load_error("Token document not found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise make_load_error("Cannot read token document", path, e) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except json.JSONDecodeError as e:
        raise make_load_error("Invalid JSON", path, e) from e
    except yaml.YAMLError as e:
        raise make_load_error("Invalid YAML", path, e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise make_load_error(
            f"Expected a mapping at the top level, got {type(data).__name__}", path
        )
    return data


def load_document(path: Path) -> TokenGroup:
    """Read and parse one token document."""
    data = read_document(path)
    try:
        group = parse_token_document(data)
    except ValidationError as e:
        raise make_load_error("Unsupported token value", path, e) from e
    logger.debug("Loaded %s (%d top-level entries)", path, len(group.children))
    return group


# =============================================================================
# Context
# =============================================================================


def load_context(manifest: TokensManifest) -> TokenContext:
    """
    Load every document named by the manifest into a TokenContext.

    Themes keep the order in which the manifest declares them.
    """
    primitives = load_document(manifest.primitives)
    semantics = load_document(manifest.semantics)
    themes = {name: load_document(path) for name, path in manifest.themes.items()}

    return TokenContext(
        primitives=primitives,
        semantics=semantics,
        themes=themes,
        default_theme=manifest.default_theme,
    )
