"""
Unit tests for token document loading.
"""

import json
from pathlib import Path

import pytest

from tokencss.core.errors import TokenLoadError
from tokencss.core.ir.tokens import TokenLeaf
from tokencss.core.manifest import default_manifest
from tokencss.core.token_loader import load_context, load_document, read_document


class TestReadDocument:
    """Tests for read_document."""

    def test_json(self, tmp_path: Path):
        path = tmp_path / "primitives.json"
        path.write_text(json.dumps({"space": {"4": {"value": 16}}}))
        assert read_document(path) == {"space": {"4": {"value": 16}}}

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "primitives.yaml"
        path.write_text("space:\n  '4':\n    value: 16\n")
        assert read_document(path) == {"space": {"4": {"value": 16}}}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(TokenLoadError) as exc_info:
            read_document(tmp_path / "nope.json")
        assert "not found" in str(exc_info.value)
        assert "nope.json" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(TokenLoadError, match="Invalid JSON"):
            read_document(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yml"
        path.write_text("space: [unclosed\n")
        with pytest.raises(TokenLoadError, match="Invalid YAML"):
            read_document(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(TokenLoadError, match="mapping"):
            read_document(path)

    def test_empty_yaml_is_empty_document(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert read_document(path) == {}


class TestLoadDocument:
    """Tests for load_document."""

    def test_parses_tree(self, tmp_path: Path):
        path = tmp_path / "semantics.json"
        path.write_text(json.dumps({"surface": {"primary": {"value": "{color.gray.50}"}}}))
        group = load_document(path)
        leaf = group.children["surface"].children["primary"]
        assert isinstance(leaf, TokenLeaf)
        assert leaf.value == "{color.gray.50}"

    def test_unsupported_value(self, tmp_path: Path):
        path = tmp_path / "shadows.json"
        path.write_text(json.dumps({"shadow": {"value": {"x": 1, "y": 2}}}))
        with pytest.raises(TokenLoadError, match="Unsupported token value"):
            load_document(path)


class TestLoadContext:
    """Tests for load_context."""

    def test_loads_all_documents(self, token_project: Path):
        context = load_context(default_manifest(token_project))
        assert "space" in context.primitives.children
        assert "surface" in context.semantics.children
        assert list(context.themes) == ["default", "soft", "noir"]
        assert context.default_theme == "default"

    def test_missing_theme_is_fatal(self, token_project: Path):
        (token_project / "themes" / "noir.json").unlink()
        with pytest.raises(TokenLoadError, match="noir.json"):
            load_context(default_manifest(token_project))
