"""Decide whether the content tree changed since the last manifest was built.

The check fingerprints the inputs instead of comparing modification times:
a SHA-256 digest over the relative path and bytes of ``site.json`` and of every
file directly inside each section folder, together with the settings that
change the output (URL prefix, metadata filename, strict mode). Nested subfolders of a section are
not part of the fingerprint. After a successful build the digest is stored in a
stamp file beside the manifest (``.site-data.stamp.json``); the next run skips
the build only when the manifest exists and the stored digest still matches.

Example
-------
>>> from content_build.config import BuildConfig
>>> checker = FreshnessChecker(BuildConfig())  # doctest: +SKIP
>>> status = checker.check()  # doctest: +SKIP
>>> status.fresh  # doctest: +SKIP
False
"""

from __future__ import annotations

import dataclasses as dc
import hashlib
import os
import typing as typ
from pathlib import Path

import msgspec
import msgspec.json as msgspec_json

from ._constants import STAMP_TEMPLATE

if typ.TYPE_CHECKING:
    from .config import BuildConfig

_CHUNK_SIZE = 1 << 16


@dc.dataclass(slots=True)
class FreshnessStatus:
    """Outcome of a freshness check."""

    fresh: bool
    fingerprint: str | None


class FreshnessChecker:
    """Fingerprint content inputs and compare against the recorded stamp."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def stamp_path(self) -> Path:
        """Return the stamp file that sits beside the output manifest."""
        manifest = self.config.output_manifest
        return manifest.parent / STAMP_TEMPLATE.format(stem=manifest.stem)

    def collect_inputs(self) -> list[Path]:
        """Return ``site.json`` plus every file one level inside each section."""
        inputs = [self.config.site_file]
        sections_dir = self.config.sections_dir
        if sections_dir.is_dir():
            for folder in sorted(sections_dir.iterdir(), key=lambda p: p.name):
                if not folder.is_dir():
                    continue
                inputs.extend(
                    sorted(
                        (entry for entry in folder.iterdir() if entry.is_file()),
                        key=lambda p: p.name,
                    )
                )
        return inputs

    def fingerprint(self) -> str | None:
        """Return the hex digest of all inputs, or None if any input is missing."""
        digest = hashlib.sha256()
        for setting in self._settings():
            digest.update(setting.encode("utf-8"))
            digest.update(b"\0")
        for path in self.collect_inputs():
            if not path.is_file():
                return None
            digest.update(self._label(path).encode("utf-8"))
            digest.update(b"\0")
            with path.open("rb") as handle:
                while chunk := handle.read(_CHUNK_SIZE):
                    digest.update(chunk)
            digest.update(b"\0")
        return digest.hexdigest()

    def check(self) -> FreshnessStatus:
        """Fingerprint the inputs and compare them with the stored stamp."""
        current = self.fingerprint()
        if current is None or not self.config.output_manifest.is_file():
            return FreshnessStatus(fresh=False, fingerprint=current)
        return FreshnessStatus(
            fresh=self._read_stamp() == current, fingerprint=current
        )

    def is_fresh(self) -> bool:
        """Return True when the build can be skipped."""
        return self.check().fresh

    def record(self, fingerprint: str | None = None) -> Path:
        """Persist ``fingerprint`` (or a freshly computed one) to the stamp file."""
        value = fingerprint or self.fingerprint()
        path = self.stamp_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(msgspec_json.encode({"fingerprint": value}))
        return path

    def _read_stamp(self) -> str | None:
        path = self.stamp_path
        if not path.is_file():
            return None
        try:
            payload = msgspec_json.decode(path.read_bytes())
        except (OSError, msgspec.DecodeError):  # pragma: no cover - IO guard
            return None
        if not isinstance(payload, dict):
            return None
        value = payload.get("fingerprint")
        return value if isinstance(value, str) else None

    def _settings(self) -> list[str]:
        """Return the configuration values that change the build outcome."""
        config = self.config
        return [
            f"url_prefix={config.url_prefix}",
            f"meta_filename={config.meta_filename}",
            f"strict={config.strict}",
        ]

    def _label(self, path: Path) -> str:
        """Return ``path`` relative to the content root for hashing."""
        try:
            return Path(os.path.relpath(path, start=self.config.content_dir)).as_posix()
        except ValueError:  # pragma: no cover - different drives
            return path.as_posix()


__all__ = ["FreshnessChecker", "FreshnessStatus"]
