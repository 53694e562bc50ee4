"""Load and validate the content build configuration.

This subpackage parses the optional ``content-build.yaml`` file, anchors every
relative path at the project root, and produces a :class:`BuildConfig` that the
pipeline consumes. Nothing in the pipeline reads module-level path constants;
the configuration object is the only source of locations and policy flags.

Examples
--------
>>> from pathlib import Path
>>> from content_build.config import load_build_config
>>> config = load_build_config(Path("content-build.yaml"))  # doctest: +SKIP
>>> config.output_manifest  # doctest: +SKIP
PosixPath('src/generated/site-data.json')
"""

from .loader import load_build_config
from .models import BuildConfig, BuildConfigError

__all__ = ["BuildConfig", "BuildConfigError", "load_build_config"]
