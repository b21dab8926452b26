"""Shared pytest fixtures for tokencss tests."""

import json
from pathlib import Path

import pytest

from tokencss.core.ir.tokens import TokenContext, parse_token_document

PRIMITIVES = {
    "color": {
        "blue": {"500": {"value": "#3b82f6", "type": "color"}},
        "gray": {"50": {"value": "#f9fafb"}, "900": {"value": "#111827"}},
    },
    "space": {"1": {"value": 4}, "4": {"value": 16}},
    "animation": {"duration": {"base": {"value": 200}}},
    "opacity": {"high": {"value": 1.5}},
}

SEMANTICS = {
    "surface": {
        "primary": {"value": "{color.gray.50}"},
        "inverse": {"value": "{color.gray.900}"},
    },
    "gap": {"md": {"value": "{space.4}"}},
}

THEME_DEFAULT = {
    "accent": {"value": "{color.blue.500}"},
}

THEME_SOFT = {
    "accent": {"value": "#a78bfa"},
    "surface": {"primary": {"value": "#fdf4ff"}},
}

THEME_NOIR = {
    "accent": {"value": "{color.gray.50}"},
    "surface": {"primary": {"value": "{color.gray.900}"}},
}


def write_json(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def token_project(tmp_path: Path) -> Path:
    """Create a project with the conventional token layout."""
    write_json(tmp_path / "primitives.json", PRIMITIVES)
    write_json(tmp_path / "semantics.json", SEMANTICS)
    write_json(tmp_path / "themes" / "default.json", THEME_DEFAULT)
    write_json(tmp_path / "themes" / "soft.json", THEME_SOFT)
    write_json(tmp_path / "themes" / "noir.json", THEME_NOIR)
    return tmp_path


@pytest.fixture
def token_context() -> TokenContext:
    """Return the sample documents as an in-memory TokenContext."""
    return TokenContext(
        primitives=parse_token_document(PRIMITIVES),
        semantics=parse_token_document(SEMANTICS),
        themes={
            "default": parse_token_document(THEME_DEFAULT),
            "soft": parse_token_document(THEME_SOFT),
            "noir": parse_token_document(THEME_NOIR),
        },
        default_theme="default",
    )
