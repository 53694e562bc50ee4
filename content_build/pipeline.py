"""High-level orchestration of one content build.

:class:`ContentBuilder` runs the stages in a fixed order: freshness check,
site descriptor, section enumeration, per-section asset publishing, and the
manifest write. It reads every location from the :class:`BuildConfig` it is
given, so a build is a function of its configuration and the filesystem.

Example
-------
>>> from pathlib import Path
>>> from content_build.config import BuildConfig
>>> from content_build.pipeline import ContentBuilder
>>> result = ContentBuilder(BuildConfig.for_root(Path("."))).run()  # doctest: +SKIP
>>> result.section_count, result.piece_count  # doctest: +SKIP
(3, 17)
"""

from __future__ import annotations

import collections
import dataclasses as dc
import typing as typ

from .assets import AssetPublisher, SvgOptimizer
from .freshness import FreshnessChecker
from .manifest import ManifestAssembler
from .models import DuplicateIdError, Manifest, Section
from .reporting import BuildReporter
from .sections import SectionLoader, SectionSource, load_site_metadata

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import BuildConfig


@dc.dataclass(slots=True)
class BuildResult:
    """Summary of a pipeline run."""

    skipped: bool
    manifest_path: Path
    manifest: Manifest | None = None
    warnings: list[str] = dc.field(default_factory=list)

    @property
    def section_count(self) -> int:
        """Return the number of sections written, zero when skipped."""
        return len(self.manifest.sections) if self.manifest else 0

    @property
    def piece_count(self) -> int:
        """Return the number of pieces written, zero when skipped."""
        return self.manifest.piece_count if self.manifest else 0


class ContentBuilder:
    """Turn a content tree into a manifest plus a public asset tree."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        reporter: BuildReporter | None = None,
        optimizer: SvgOptimizer | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : BuildConfig
            Locations and policy flags for this run.
        reporter : BuildReporter, optional
            Destination for progress lines and warnings.
        optimizer : SvgOptimizer, optional
            SVG optimizer used by the asset publisher.
        """
        self.config = config
        self.reporter = reporter or BuildReporter()
        self.freshness = FreshnessChecker(config)
        self.loader = SectionLoader(
            config.sections_dir, config.meta_filename, reporter=self.reporter
        )
        self.publisher = AssetPublisher(
            config.public_dir,
            config.url_prefix,
            reporter=self.reporter,
            strict=config.strict,
            optimizer=optimizer,
        )
        self.assembler = ManifestAssembler(
            config.output_manifest, reporter=self.reporter
        )

    def run(self) -> BuildResult:
        """Run the pipeline, or skip it when the inputs are unchanged.

        Returns
        -------
        BuildResult
            ``skipped`` is True when the freshness check short-circuited;
            otherwise ``manifest`` holds the document that was written.

        Raises
        ------
        ContentBuildError
            On a missing site descriptor or sections root, unparsable
            metadata, and (in strict mode) missing assets or duplicate ids.
        """
        status = self.freshness.check()
        if status.fresh and not self.config.force:
            self.reporter.info("content up to date, skipping build")
            return BuildResult(
                skipped=True,
                manifest_path=self.config.output_manifest,
                warnings=list(self.reporter.warnings),
            )

        self.reporter.info(f"building site data from {self.config.content_dir}")
        site = load_site_metadata(self.config.site_file)
        self.reporter.info(f'  {self.config.site_file.name} -> "{site.get("name")}"')

        sections = [self._build_section(source) for source in self.loader.load()]
        self._check_unique_ids(sections)

        manifest = self.assembler.assemble(site, sections)
        path = self.assembler.write(manifest)
        self.freshness.record(status.fingerprint)
        return BuildResult(
            skipped=False,
            manifest_path=path,
            manifest=manifest,
            warnings=list(self.reporter.warnings),
        )

    def _build_section(self, source: SectionSource) -> Section:
        """Publish a section's assets and normalize its metadata."""
        meta = source.meta
        paper = self.publisher.publish_paper(source)
        pieces = self.publisher.publish_pieces(source)
        section = Section(
            id=source.section_id,
            title=meta.get("title"),
            subtitle=meta.get("subtitle") or None,
            description=meta.get("description") or "",
            paper=paper,
            pieces=pieces,
        )
        paper_label = "+paper" if paper else "no paper"
        self.reporter.info(
            f'  {source.folder}/ -> "{section.title}" '
            f"({len(pieces)} pieces, {paper_label})"
        )
        return section

    def _check_unique_ids(self, sections: list[Section]) -> None:
        """Report section or piece ids that occur more than once."""
        section_ids = collections.Counter(section.id for section in sections)
        piece_ids = collections.Counter(
            piece.id for section in sections for piece in section.pieces
        )
        duplicates = sorted(
            key
            for counter in (section_ids, piece_ids)
            for key, count in counter.items()
            if count > 1
        )
        if not duplicates:
            return
        message = f"duplicate ids in manifest: {', '.join(duplicates)}"
        if self.config.strict:
            raise DuplicateIdError(message)
        self.reporter.warn(message)


__all__ = ["BuildResult", "ContentBuilder"]
