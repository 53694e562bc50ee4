"""Load the optional build configuration YAML into a typed dataclass."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from content_build._constants import (
    DEFAULT_CONTENT_DIR,
    DEFAULT_META_FILENAME,
    DEFAULT_OUTPUT_MANIFEST,
    DEFAULT_PUBLIC_DIR,
    DEFAULT_SECTIONS_DIRNAME,
    DEFAULT_SITE_FILENAME,
    DEFAULT_URL_PREFIX,
)

from .helpers import _coerce_bool, _normalize_url_prefix, _optional_str, _resolve_path
from .models import BuildConfig, BuildConfigError


def load_build_config(path: Path, *, root: Path | None = None) -> BuildConfig:
    """Load the YAML configuration describing where content lives and lands.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``content-build.yaml``). The file is optional; when it does not exist
        every option takes its default value.
    root : Path, optional
        Directory that relative paths are resolved against. Defaults to the
        directory containing ``path``.

    Returns
    -------
    BuildConfig
        Fully resolved configuration with absolute or ``root``-anchored paths.

    Raises
    ------
    TypeError
        If the top-level YAML structure is not a mapping.
    BuildConfigError
        If the ``build`` block is not a mapping or a flag is not a boolean.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from content_build.config import load_build_config
    >>> config = load_build_config(Path("content-build.yaml"))  # doctest: +SKIP
    >>> config.url_prefix  # doctest: +SKIP
    '/content'
    """
    base = root if root is not None else path.parent
    raw: dict[str, typ.Any] = {}
    if path.exists():
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
        if not isinstance(loaded, dict):  # pragma: no cover - config error guard
            msg = "Top-level YAML structure must be a mapping."
            raise TypeError(msg)
        raw = dict(loaded)

    build_raw = raw.get("build") or {}
    if not isinstance(build_raw, dict):
        msg = f"The 'build' block in '{path}' must be a mapping."
        raise BuildConfigError(msg)

    content_dir = _resolve_path(
        build_raw.get("content_dir"), base, base / DEFAULT_CONTENT_DIR
    )
    sections_dir = _resolve_path(
        build_raw.get("sections_dir"), base, content_dir / DEFAULT_SECTIONS_DIRNAME
    )
    site_file = _resolve_path(
        build_raw.get("site_file"), base, content_dir / DEFAULT_SITE_FILENAME
    )
    output_manifest = _resolve_path(
        build_raw.get("output_manifest"), base, base / DEFAULT_OUTPUT_MANIFEST
    )
    public_dir = _resolve_path(
        build_raw.get("public_dir"), base, base / DEFAULT_PUBLIC_DIR
    )
    meta_filename = _optional_str(build_raw.get("meta_filename")) or DEFAULT_META_FILENAME
    if "/" in meta_filename or "\\" in meta_filename:
        msg = f"meta_filename must be a bare filename, got '{meta_filename}'."
        raise BuildConfigError(msg)

    return BuildConfig(
        content_dir=content_dir,
        sections_dir=sections_dir,
        site_file=site_file,
        meta_filename=meta_filename,
        output_manifest=output_manifest,
        public_dir=public_dir,
        url_prefix=_normalize_url_prefix(
            build_raw.get("url_prefix"), DEFAULT_URL_PREFIX
        ),
        strict=_coerce_bool("strict", build_raw.get("strict"), default=False),
        force=_coerce_bool("force", build_raw.get("force"), default=False),
    )


__all__ = ["load_build_config"]
