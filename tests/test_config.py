"""Tests for loading ``content-build.yaml`` into a :class:`BuildConfig`."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from content_build.config import BuildConfig, BuildConfigError, load_build_config


def _write(path: Path, text: str) -> Path:
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def test_missing_file_yields_defaults_anchored_at_parent(tmp_path: Path) -> None:
    config = load_build_config(tmp_path / "content-build.yaml")
    assert config == BuildConfig.for_root(tmp_path)
    assert config.sections_dir == tmp_path / "content" / "sections"
    assert config.site_file == tmp_path / "content" / "site.json"
    assert config.output_manifest == tmp_path / "src" / "generated" / "site-data.json"
    assert config.public_dir == tmp_path / "public" / "content"
    assert config.url_prefix == "/content"
    assert config.strict is False


def test_overrides_resolve_relative_to_config_dir(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "content-build.yaml",
        """
        build:
          content_dir: data
          output_manifest: build/manifest.json
          public_dir: dist/assets
          url_prefix: assets/
          meta_filename: section.json
          strict: true
        """,
    )

    config = load_build_config(path)

    assert config.content_dir == tmp_path / "data"
    assert config.sections_dir == tmp_path / "data" / "sections"
    assert config.site_file == tmp_path / "data" / "site.json"
    assert config.output_manifest == tmp_path / "build" / "manifest.json"
    assert config.public_dir == tmp_path / "dist" / "assets"
    assert config.url_prefix == "/assets"
    assert config.meta_filename == "section.json"
    assert config.strict is True


def test_explicit_root_overrides_config_parent(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "build:\n  sections_dir: pages\n")
    root = tmp_path / "checkout"

    config = load_build_config(path, root=root)

    assert config.sections_dir == root / "pages"
    assert config.content_dir == root / "content"


def test_absolute_paths_are_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "site.json"
    path = _write(tmp_path / "cfg.yaml", f"build:\n  site_file: {target}\n")
    assert load_build_config(path).site_file == target


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "# nothing configured\n")
    assert load_build_config(path) == BuildConfig.for_root(tmp_path)


def test_build_block_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "build:\n  - content\n")
    with pytest.raises(BuildConfigError):
        load_build_config(path)


def test_strict_must_be_boolean(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "build:\n  strict: sometimes\n")
    with pytest.raises(BuildConfigError, match="strict"):
        load_build_config(path)


def test_meta_filename_must_be_bare(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "build:\n  meta_filename: nested/meta.json\n")
    with pytest.raises(BuildConfigError):
        load_build_config(path)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("/content", "/content"), ("content", "/content"), ("/a/b/", "/a/b"), ("/", "")],
)
def test_url_prefix_normalization(tmp_path: Path, raw: str, expected: str) -> None:
    path = _write(tmp_path / "cfg.yaml", f'build:\n  url_prefix: "{raw}"\n')
    assert load_build_config(path).url_prefix == expected
