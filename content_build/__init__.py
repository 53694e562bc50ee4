"""Aggregate a section-based content tree into a site manifest.

This package exposes the CLI entry point used by ``build-content`` together
with the pipeline class it drives. A build reads ``content/site.json`` and
every ``content/sections/*/meta.json``, mirrors referenced papers and images
into ``public/content/``, and writes ``src/generated/site-data.json``.

Exports
-------
- ``app``: Cyclopts application for the ``build-content`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``ContentBuilder``: Pipeline entry point taking a ``BuildConfig``.

Examples
--------
>>> from content_build import main
>>> main([])  # doctest: +SKIP
>>> from content_build import app
>>> app.name  # doctest: +SKIP
('build-content',)
"""

from __future__ import annotations

from .cli import app, main
from .config import BuildConfig, load_build_config
from .pipeline import BuildResult, ContentBuilder

__all__ = [
    "BuildConfig",
    "BuildResult",
    "ContentBuilder",
    "app",
    "load_build_config",
    "main",
]
