"""
tokens.toml manifest.

Describes where token documents live, the theme order, the default theme,
where the stylesheet goes and how references are resolved. Every section
is optional; without a manifest the conventional project layout is used.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ErrorContext, ManifestError
from .references import ReferencePolicy

MANIFEST_FILE = "tokens.toml"

DEFAULT_HEADER = "Design Tokens - Auto-generated"


def _default_themes() -> dict[str, str]:
    return {
        "default": "themes/default.json",
        "soft": "themes/soft.json",
        "noir": "themes/noir.json",
    }


@dataclass
class ResolveConfig:
    """Reference resolution settings."""

    policy: ReferencePolicy = ReferencePolicy.EMPTY
    fallback: str = "unset"
    max_depth: int = 1


@dataclass
class TokensManifest:
    """Resolved build configuration. Paths are absolute after loading."""

    project_root: Path
    primitives: Path
    semantics: Path
    themes: dict[str, Path]
    default_theme: str = "default"
    output: Path = field(default_factory=lambda: Path("dist/tokens.css"))
    header: str = DEFAULT_HEADER
    resolve: ResolveConfig = field(default_factory=ResolveConfig)

    @property
    def documents(self) -> dict[str, Path]:
        """All input documents by logical name, themes in declared order."""
        docs = {"primitives": self.primitives, "semantics": self.semantics}
        for name, path in self.themes.items():
            docs[f"themes/{name}"] = path
        return docs


def default_manifest(project_root: Path) -> TokensManifest:
    """Manifest for the conventional layout under ``project_root``."""
    return manifest_from_dict({}, project_root)


def _section(data: dict, name: str, context: ErrorContext | None) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ManifestError(f"[{name}] must be a table, got {type(section).__name__}", context)
    return section


def _string(value: object, key: str, context: ErrorContext | None) -> str:
    if not isinstance(value, str):
        raise ManifestError(f"{key} must be a string, got {value!r}", context)
    return value


def manifest_from_dict(
    data: dict, project_root: Path, source: Path | None = None
) -> TokensManifest:
    """
    Build a TokensManifest from parsed TOML data.

    Raises:
        ManifestError: On non-table sections, non-string paths, unknown
            policies, bad depths, or a default theme that is not declared.
    """
    context = ErrorContext(file=source) if source else None
    tokens = _section(data, "tokens", context)
    output = _section(data, "output", context)
    resolve = _section(data, "resolve", context)

    themes_data = tokens.get("themes", _default_themes())
    if not isinstance(themes_data, dict):
        raise ManifestError("[tokens.themes] must be a table of name = path", context)

    default_theme = _string(tokens.get("default_theme", "default"), "default_theme", context)
    if default_theme not in themes_data:
        raise ManifestError(
            f"default_theme '{default_theme}' is not declared in [tokens.themes]", context
        )

    policy_name = resolve.get("policy", ReferencePolicy.EMPTY.value)
    try:
        policy = ReferencePolicy(policy_name)
    except ValueError:
        choices = ", ".join(p.value for p in ReferencePolicy)
        raise ManifestError(
            f"Unknown reference policy '{policy_name}' (expected one of: {choices})", context
        ) from None

    max_depth = resolve.get("max_depth", 1)
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise ManifestError(f"max_depth must be a positive integer, got {max_depth!r}", context)

    def _path(value: object, key: str) -> Path:
        return (project_root / _string(value, key, context)).resolve()

    return TokensManifest(
        project_root=project_root,
        primitives=_path(tokens.get("primitives", "primitives.json"), "tokens.primitives"),
        semantics=_path(tokens.get("semantics", "semantics.json"), "tokens.semantics"),
        themes={
            name: _path(path, f"tokens.themes.{name}") for name, path in themes_data.items()
        },
        default_theme=default_theme,
        output=_path(output.get("path", "dist/tokens.css"), "output.path"),
        header=_string(output.get("header", DEFAULT_HEADER), "output.header", context),
        resolve=ResolveConfig(
            policy=policy,
            fallback=str(resolve.get("fallback", "unset")),
            max_depth=max_depth,
        ),
    )


def load_manifest(path: Path) -> TokensManifest:
    if not path.exists():
        raise ManifestError("Manifest not found", ErrorContext(file=path))
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e

    return manifest_from_dict(data, path.parent.resolve(), source=path)


def find_manifest(project_root: Path) -> TokensManifest:
    """Load ``tokens.toml`` from the project root, or fall back to defaults."""
    manifest_path = project_root / MANIFEST_FILE
    if manifest_path.exists():
        return load_manifest(manifest_path)
    return default_manifest(project_root.resolve())
