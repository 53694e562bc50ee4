"""Shared fixtures for building throwaway content trees.

Every test gets a project root under ``tmp_path`` laid out the way a real
checkout is: ``content/site.json``, ``content/sections/<folder>/meta.json``,
and empty ``src/`` / ``public/`` output locations. Helpers write JSON and
binary fixtures so tests only describe the content they care about.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from content_build.config import BuildConfig
from content_build.reporting import BuildReporter

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256))
PDF_BYTES = b"%PDF-1.4\n%fixture\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"
SVG_SOURCE = """<?xml version="1.0" encoding="UTF-8"?>
<!-- exported from a drawing tool -->
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
     width="100" height="100">
  <metadata>
    <rdf:RDF>
      <rdf:Description about="fixture"/>
    </rdf:RDF>
  </metadata>
  <g>
    <circle cx="50.000000" cy="50.000000" r="40.000000" fill="#ff0000"/>
  </g>
</svg>
"""


def write_json(path: Path, payload: typ.Any) -> Path:
    """Write ``payload`` as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(msgspec_json.format(msgspec_json.encode(payload), indent=2))
    return path


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a project root containing an empty sections directory."""
    root = tmp_path / "site"
    (root / "content" / "sections").mkdir(parents=True)
    return root


@pytest.fixture
def build_config(project_root: Path) -> BuildConfig:
    """Return a default configuration anchored at ``project_root``."""
    return BuildConfig.for_root(project_root)


@pytest.fixture
def reporter() -> BuildReporter:
    """Return a reporter whose warnings tests can inspect."""
    return BuildReporter()


@pytest.fixture
def fractals_tree(project_root: Path) -> Path:
    """Write the single-section ``Math Art`` tree with a real PNG present."""
    content = project_root / "content"
    write_json(content / "site.json", {"name": "Math Art"})
    folder = content / "sections" / "01-fractals"
    write_json(
        folder / "meta.json",
        {
            "title": "Fractals",
            "pieces": [{"image": "mandelbrot.png", "title": "Mandelbrot Set"}],
        },
    )
    (folder / "mandelbrot.png").write_bytes(PNG_BYTES)
    return project_root


EXPECTED_FRACTALS_MANIFEST: dict[str, typ.Any] = {
    "site": {"name": "Math Art"},
    "sections": [
        {
            "id": "fractals",
            "title": "Fractals",
            "subtitle": None,
            "description": "",
            "paper": None,
            "pieces": [
                {
                    "id": "fractals--mandelbrot",
                    "title": "Mandelbrot Set",
                    "image": "/content/01-fractals/mandelbrot.png",
                }
            ],
        }
    ],
}
