"""Typed dataclasses describing the generated site manifest.

The manifest written by :class:`~content_build.manifest.ManifestAssembler` is a
direct serialization of these dataclasses, so field order here is the field
order of the JSON document consumed by the front end.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class ContentBuildError(RuntimeError):
    """Base class for failures that abort a content build."""


class SiteMetadataMissingError(ContentBuildError):
    """Raised when the global ``site.json`` document does not exist."""


class SectionsRootMissingError(ContentBuildError):
    """Raised when the sections root directory does not exist."""


class ContentMetadataError(ContentBuildError):
    """Raised when a metadata document cannot be parsed into a mapping."""


class MissingAssetError(ContentBuildError):
    """Raised in strict mode when a declared paper or image is absent."""


class AssetOptimizationError(ContentBuildError):
    """Raised when an SVG asset cannot be parsed by the optimizer."""


class DuplicateIdError(ContentBuildError):
    """Raised in strict mode when section or piece ids collide."""


@dc.dataclass(slots=True)
class Paper:
    """Downloadable document attached to a section."""

    title: str | None
    year: typ.Any
    url: str


@dc.dataclass(slots=True)
class Piece:
    """A single displayed image belonging to a section."""

    id: str
    title: str | None
    image: str


@dc.dataclass(slots=True)
class Section:
    """A content grouping sourced from one section folder."""

    id: str
    title: str | None
    subtitle: str | None
    description: str
    paper: Paper | None
    pieces: list[Piece] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Manifest:
    """Root document combining site metadata and ordered sections."""

    site: dict[str, typ.Any]
    sections: list[Section] = dc.field(default_factory=list)

    @property
    def piece_count(self) -> int:
        """Return the total number of pieces across all sections."""
        return sum(len(section.pieces) for section in self.sections)


__all__ = [
    "AssetOptimizationError",
    "ContentBuildError",
    "ContentMetadataError",
    "DuplicateIdError",
    "Manifest",
    "MissingAssetError",
    "Paper",
    "Piece",
    "Section",
    "SectionsRootMissingError",
    "SiteMetadataMissingError",
]
