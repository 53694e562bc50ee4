"""Publish section papers and piece images into the public asset tree.

Every referenced file is copied to ``<public_dir>/<section-folder>/<name>``.
SVG images are minified through scour on the way; all other files are copied
byte-for-byte. Destinations are overwritten unconditionally.

Missing sources degrade the output instead of failing the build: a missing
paper is omitted from its section, a missing image still yields a piece whose
URL points at a file that will not exist. With ``strict=True`` both conditions
raise :class:`~content_build.models.MissingAssetError`.

>>> from pathlib import Path
>>> from content_build.reporting import BuildReporter
>>> publisher = AssetPublisher(
...     Path("public/content"), "/content", reporter=BuildReporter()
... )
>>> publisher.public_url("01-fractals", "mandelbrot.png")
'/content/01-fractals/mandelbrot.png'
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path
from xml.parsers.expat import ExpatError

from scour import scour

from ._constants import SVG_SUFFIX
from .models import (
    AssetOptimizationError,
    ContentMetadataError,
    MissingAssetError,
    Paper,
    Piece,
)
from .sections import derive_piece_id

if typ.TYPE_CHECKING:
    from .reporting import BuildReporter
    from .sections import SectionSource


class SvgOptimizer:
    """Minify SVG markup with scour while keeping it semantically equivalent."""

    def __init__(self, *, precision: int = 5) -> None:
        options = scour.sanitizeOptions()
        options.digits = precision
        options.strip_comments = True
        options.remove_metadata = True
        options.strip_xml_prolog = True
        options.indent_type = "none"
        options.newlines = False
        options.quiet = True
        self.options = options

    def optimize(self, markup: str) -> str:
        """Return optimized markup for ``markup``.

        Raises
        ------
        ExpatError
            If ``markup`` is not well-formed XML.
        """
        return scour.scourString(markup, self.options)

    def optimize_file(self, src: Path, dest: Path) -> None:
        """Write the optimized form of ``src`` to ``dest``."""
        markup = src.read_text(encoding="utf-8")
        try:
            optimized = self.optimize(markup)
        except ExpatError as exc:
            msg = f"Unable to optimize SVG '{src}': {exc}"
            raise AssetOptimizationError(msg) from exc
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(optimized, encoding="utf-8")


class AssetPublisher:
    """Copy declared section assets and build their manifest descriptors."""

    def __init__(
        self,
        public_dir: Path,
        url_prefix: str,
        *,
        reporter: BuildReporter,
        strict: bool = False,
        optimizer: SvgOptimizer | None = None,
    ) -> None:
        """Initialize the publisher.

        Parameters
        ----------
        public_dir : Path
            Root of the mirrored public asset tree.
        url_prefix : str
            URL path under which ``public_dir`` is served (``/content``).
        reporter : BuildReporter
            Receives warnings for missing sources.
        strict : bool, optional
            Raise instead of warning when a declared source is missing.
        optimizer : SvgOptimizer, optional
            Optimizer applied to ``.svg`` images; a default one is created
            when omitted.
        """
        self.public_dir = public_dir
        self.url_prefix = url_prefix
        self.reporter = reporter
        self.strict = strict
        self.optimizer = optimizer or SvgOptimizer()

    def public_url(self, folder: str, filename: str) -> str:
        """Return the served URL for ``filename`` in section ``folder``."""
        return f"{self.url_prefix}/{folder}/{filename}"

    def destination(self, folder: str, filename: str) -> Path:
        """Return the public path for ``filename`` in section ``folder``."""
        return self.public_dir / folder / filename

    def publish_paper(self, source: SectionSource) -> Paper | None:
        """Copy the section paper, returning its descriptor when published."""
        declared = source.meta.get("paper")
        if not isinstance(declared, dict) or not declared.get("file"):
            return None
        filename = str(declared["file"])
        src = source.path / filename
        if not src.is_file():
            self._missing(f"{source.folder}: paper '{filename}' not found")
            return None
        _copy_file(src, self.destination(source.folder, filename))
        return Paper(
            title=declared.get("title"),
            year=declared.get("year") or None,
            url=self.public_url(source.folder, filename),
        )

    def publish_pieces(self, source: SectionSource) -> list[Piece]:
        """Copy each piece image and return the piece descriptors in order.

        A piece is emitted even when its image is missing.
        """
        pieces: list[Piece] = []
        for declared in source.meta.get("pieces") or []:
            if not isinstance(declared, dict) or not declared.get("image"):
                msg = f"{source.folder}: every piece needs an 'image' entry"
                raise ContentMetadataError(msg)
            image = str(declared["image"])
            src = source.path / image
            if src.is_file():
                self.publish_image(src, self.destination(source.folder, image))
            else:
                self._missing(
                    f"{source.folder}: image '{image}' not found (placeholder)"
                )
            pieces.append(
                Piece(
                    id=derive_piece_id(source.section_id, image),
                    title=declared.get("title"),
                    image=self.public_url(source.folder, image),
                )
            )
        return pieces

    def publish_image(self, src: Path, dest: Path) -> None:
        """Write ``src`` to ``dest``, optimizing SVG documents."""
        if src.suffix.lower() == SVG_SUFFIX:
            self.optimizer.optimize_file(src, dest)
        else:
            _copy_file(src, dest)

    def _missing(self, message: str) -> None:
        if self.strict:
            raise MissingAssetError(message)
        self.reporter.warn(message)


def _copy_file(src: Path, dest: Path) -> None:
    """Copy ``src`` to ``dest`` byte-for-byte, creating parent directories."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest)


__all__ = ["AssetPublisher", "SvgOptimizer"]
