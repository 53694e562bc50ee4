"""Behaviour tests for the content build pipeline using pytest-bdd.

These scenarios run :class:`~content_build.pipeline.ContentBuilder` against a
temporary ``Math Art`` content tree and check the manifest, the public asset
tree, and the warnings collected on the build result.

Usage
-----
Run ``pytest tests/bdd/test_content_build.py -v``. The feature file lives at
``features/content_build.feature``.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from conftest import EXPECTED_FRACTALS_MANIFEST, PNG_BYTES
from content_build.config import BuildConfig
from content_build.pipeline import ContentBuilder

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "content_build.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a content tree with one fractals section")
def given_fractals_tree(fractals_tree: Path, scenario_state: ScenarioState) -> None:
    scenario_state["root"] = fractals_tree
    scenario_state["config"] = BuildConfig.for_root(fractals_tree)


@given("the mandelbrot image has been removed")
def given_image_removed(scenario_state: ScenarioState) -> None:
    root: Path = scenario_state["root"]
    (root / "content" / "sections" / "01-fractals" / "mandelbrot.png").unlink()


@when("I run the content build")
def when_run_build(scenario_state: ScenarioState) -> None:
    config: BuildConfig = scenario_state["config"]
    scenario_state["result"] = ContentBuilder(config).run()
    scenario_state["manifest_bytes"] = config.output_manifest.read_bytes()


@when("I run the content build again")
def when_run_build_again(scenario_state: ScenarioState) -> None:
    scenario_state["second_result"] = ContentBuilder(scenario_state["config"]).run()


@then("the manifest lists the mandelbrot piece")
def then_manifest_lists_piece(scenario_state: ScenarioState) -> None:
    config: BuildConfig = scenario_state["config"]
    manifest = json.loads(config.output_manifest.read_text(encoding="utf-8"))
    assert manifest == EXPECTED_FRACTALS_MANIFEST


@then("the published image matches the source bytes")
def then_image_matches(scenario_state: ScenarioState) -> None:
    config: BuildConfig = scenario_state["config"]
    published = config.public_dir / "01-fractals" / "mandelbrot.png"
    assert published.read_bytes() == PNG_BYTES


@then("no warnings are reported")
def then_no_warnings(scenario_state: ScenarioState) -> None:
    assert scenario_state["result"].warnings == []


@then("a missing image warning is reported")
def then_missing_warning(scenario_state: ScenarioState) -> None:
    warnings = scenario_state["result"].warnings
    assert len(warnings) == 1
    assert "mandelbrot.png" in warnings[0]


@then("no image is published")
def then_no_image(scenario_state: ScenarioState) -> None:
    config: BuildConfig = scenario_state["config"]
    assert not (config.public_dir / "01-fractals" / "mandelbrot.png").exists()


@then("the second build is skipped")
def then_second_skipped(scenario_state: ScenarioState) -> None:
    assert scenario_state["second_result"].skipped is True


@then("the manifest bytes are unchanged")
def then_manifest_unchanged(scenario_state: ScenarioState) -> None:
    config: BuildConfig = scenario_state["config"]
    assert config.output_manifest.read_bytes() == scenario_state["manifest_bytes"]
