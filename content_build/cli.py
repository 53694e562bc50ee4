"""Cyclopts CLI entrypoint for building the site content manifest.

The ``build-content`` console script reads ``content/``, writes
``src/generated/site-data.json``, and mirrors referenced papers and images into
``public/content/``. It needs no flags; an optional ``content-build.yaml``
relocates any of those paths, and ``--strict`` turns missing assets and id
collisions into errors.

Examples
--------
Build using the defaults relative to the current directory:

>>> from content_build.cli import main
>>> main([])  # doctest: +SKIP

Force a strict rebuild of another checkout:

>>> main(["--root", "../site", "--strict", "--force"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_build_config
from .models import ContentBuildError
from .pipeline import ContentBuilder

DEFAULT_CONFIG = Path("content-build.yaml")

app = App(name="build-content", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Project root for relative paths", env_var="INPUT_ROOT"),
    ] = None,
    strict: typ.Annotated[
        bool,
        Parameter(help="Fail on missing assets or duplicate ids"),
    ] = False,
    force: typ.Annotated[
        bool,
        Parameter(help="Rebuild even when content is unchanged"),
    ] = False,
) -> None:
    """Build the site manifest and public asset tree.

    Parameters
    ----------
    config : Path, optional
        Path to the optional YAML build configuration; resolved under
        ``root`` when relative and a root is given.
    root : Path or None, optional
        Directory that relative content and output paths are anchored at;
        defaults to the configuration file's directory.
    strict : bool, optional
        Promote missing papers, missing images, and duplicate ids to errors.
    force : bool, optional
        Skip the freshness check.

    Raises
    ------
    ContentBuildError
        Propagated from the pipeline on fatal conditions.
    """
    config_path = config if root is None or config.is_absolute() else root / config
    build_config = load_build_config(config_path, root=root)
    if strict or force:
        build_config = dc.replace(
            build_config,
            strict=build_config.strict or strict,
            force=build_config.force or force,
        )
    result = ContentBuilder(build_config).run()
    if not result.skipped:
        print(f"wrote {_format_path(result.manifest_path)}")


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application behind the ``build-content`` command.

    Fatal build errors are printed to stderr and converted into exit status 1.
    """
    try:
        app(argv)
    except ContentBuildError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
