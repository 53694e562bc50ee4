"""Typed dataclasses describing content build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from content_build._constants import (
    DEFAULT_CONTENT_DIR,
    DEFAULT_META_FILENAME,
    DEFAULT_OUTPUT_MANIFEST,
    DEFAULT_PUBLIC_DIR,
    DEFAULT_SECTIONS_DIRNAME,
    DEFAULT_SITE_FILENAME,
    DEFAULT_URL_PREFIX,
)


class BuildConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BuildConfig:
    """Filesystem locations and policy flags for one pipeline run.

    Attributes
    ----------
    content_dir : Path
        Root of the authored content tree.
    sections_dir : Path
        Directory whose immediate subdirectories are content sections.
    site_file : Path
        Global site descriptor passed through to the manifest unchanged.
    meta_filename : str
        Name of the per-section metadata document.
    output_manifest : Path
        Destination of the generated JSON manifest.
    public_dir : Path
        Root of the mirrored public asset tree.
    url_prefix : str
        URL path under which ``public_dir`` is served.
    strict : bool
        Promote missing papers/images and id collisions to fatal errors.
    force : bool
        Rebuild even when the freshness check reports no changes.
    """

    content_dir: Path = Path(DEFAULT_CONTENT_DIR)
    sections_dir: Path = Path(DEFAULT_CONTENT_DIR) / DEFAULT_SECTIONS_DIRNAME
    site_file: Path = Path(DEFAULT_CONTENT_DIR) / DEFAULT_SITE_FILENAME
    meta_filename: str = DEFAULT_META_FILENAME
    output_manifest: Path = Path(DEFAULT_OUTPUT_MANIFEST)
    public_dir: Path = Path(DEFAULT_PUBLIC_DIR)
    url_prefix: str = DEFAULT_URL_PREFIX
    strict: bool = False
    force: bool = False

    @classmethod
    def for_root(cls, root: Path, **overrides: object) -> BuildConfig:
        """Return a config with every default path anchored at ``root``."""
        content_dir = root / DEFAULT_CONTENT_DIR
        config = cls(
            content_dir=content_dir,
            sections_dir=content_dir / DEFAULT_SECTIONS_DIRNAME,
            site_file=content_dir / DEFAULT_SITE_FILENAME,
            output_manifest=root / DEFAULT_OUTPUT_MANIFEST,
            public_dir=root / DEFAULT_PUBLIC_DIR,
        )
        return dc.replace(config, **overrides)


__all__ = ["BuildConfig", "BuildConfigError"]
