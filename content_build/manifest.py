"""Assemble and persist the site manifest consumed by the front end."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

from .models import Manifest

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import Section
    from .reporting import BuildReporter


class ManifestAssembler:
    """Merge site metadata with loaded sections and write the JSON document."""

    def __init__(self, output_path: Path, *, reporter: BuildReporter) -> None:
        self.output_path = output_path
        self.reporter = reporter

    def assemble(
        self, site: typ.Mapping[str, typ.Any], sections: list[Section]
    ) -> Manifest:
        """Return the manifest for ``site`` and the ordered ``sections``."""
        return Manifest(site=dict(site), sections=list(sections))

    def write(self, manifest: Manifest) -> Path:
        """Serialize ``manifest`` as indented JSON and report totals.

        The write is not atomic; an interrupted build can leave a truncated
        file, which the next run replaces because no stamp was recorded.
        """
        payload = msgspec_json.format(msgspec_json.encode(manifest), indent=2)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_bytes(payload + b"\n")
        self.reporter.info(
            f"{len(manifest.sections)} sections, {manifest.piece_count} pieces"
        )
        return self.output_path


__all__ = ["ManifestAssembler"]
