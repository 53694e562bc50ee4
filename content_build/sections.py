"""Load the global site descriptor and enumerate content sections.

Each immediate subdirectory of the sections root is one section. Folders may
carry a numeric ordering prefix (``03-geometry``); the prefix drives ordering
and is stripped to form the section id.

>>> derive_section_id("07-topology")
'topology'
>>> derive_section_id("patterns")
'patterns'
>>> derive_piece_id("topology", "klein-bottle.svg")
'topology--klein-bottle'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

import msgspec
import msgspec.json as msgspec_json

from ._constants import PIECE_ID_SEPARATOR
from .models import (
    ContentMetadataError,
    SectionsRootMissingError,
    SiteMetadataMissingError,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .reporting import BuildReporter

ORDER_PREFIX_PATTERN = re.compile(r"^\d+-")
EXTENSION_PATTERN = re.compile(r"\.[^.]+$")


def derive_section_id(folder: str) -> str:
    """Strip a leading ``<digits>-`` ordering prefix from a folder name."""
    return ORDER_PREFIX_PATTERN.sub("", folder, count=1)


def derive_piece_id(section_id: str, image: str) -> str:
    """Compose a piece id from its section id and image name minus extension."""
    stem = EXTENSION_PATTERN.sub("", image, count=1)
    return f"{section_id}{PIECE_ID_SEPARATOR}{stem}"


def read_json_document(path: Path) -> dict[str, typ.Any]:
    """Decode a JSON object from ``path``.

    Raises
    ------
    ContentMetadataError
        If the file is not valid JSON or its top level is not an object.
    """
    try:
        payload = msgspec_json.decode(path.read_bytes())
    except msgspec.DecodeError as exc:
        msg = f"Invalid JSON in '{path}': {exc}"
        raise ContentMetadataError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Expected a JSON object in '{path}'."
        raise ContentMetadataError(msg)
    return payload


def load_site_metadata(path: Path) -> dict[str, typ.Any]:
    """Load the required global site descriptor.

    Parameters
    ----------
    path : Path
        Location of ``site.json``.

    Returns
    -------
    dict[str, Any]
        The decoded descriptor, passed through to the manifest unchanged.

    Raises
    ------
    SiteMetadataMissingError
        If ``path`` does not exist.
    ContentMetadataError
        If the document is not a JSON object.
    """
    if not path.is_file():
        msg = f"Missing site descriptor '{path}'."
        raise SiteMetadataMissingError(msg)
    return read_json_document(path)


@dc.dataclass(slots=True)
class SectionSource:
    """A section folder together with its decoded metadata document."""

    folder: str
    path: Path
    meta: dict[str, typ.Any]

    @property
    def section_id(self) -> str:
        """Return the id derived from the folder name."""
        return derive_section_id(self.folder)


class SectionLoader:
    """Enumerate section folders and load their metadata documents."""

    def __init__(
        self, sections_dir: Path, meta_filename: str, *, reporter: BuildReporter
    ) -> None:
        self.sections_dir = sections_dir
        self.meta_filename = meta_filename
        self.reporter = reporter

    def discover(self) -> list[Path]:
        """Return immediate subdirectories of the sections root, sorted by name.

        Raises
        ------
        SectionsRootMissingError
            If the sections root directory does not exist.
        """
        if not self.sections_dir.is_dir():
            msg = f"Missing sections directory '{self.sections_dir}'."
            raise SectionsRootMissingError(msg)
        folders = [entry for entry in self.sections_dir.iterdir() if entry.is_dir()]
        return sorted(folders, key=lambda entry: entry.name)

    def load(self) -> list[SectionSource]:
        """Load every section that carries a metadata document.

        Folders without one are skipped with a warning; the build continues.
        """
        sources: list[SectionSource] = []
        for folder_path in self.discover():
            meta_path = folder_path / self.meta_filename
            if not meta_path.is_file():
                self.reporter.warn(
                    f"skipping {folder_path.name}/ (no {self.meta_filename})"
                )
                continue
            meta = read_json_document(meta_path)
            if meta.get("title") is None:
                self.reporter.warn(
                    f"{folder_path.name}: {self.meta_filename} has no title"
                )
            sources.append(
                SectionSource(folder=folder_path.name, path=folder_path, meta=meta)
            )
        return sources


__all__ = [
    "SectionLoader",
    "SectionSource",
    "derive_piece_id",
    "derive_section_id",
    "load_site_metadata",
    "read_json_document",
]
