"""Shared fixtures: a small glassmorphism widget set."""

from __future__ import annotations

import pytest

from dartweave.graph.presets import FLUTTER_DEPENDENCIES, dependencies_for
from dartweave.graph.store import GraphStore
from dartweave.models.artifact import GeneratedArtifact

HEADER = "// GENERATED CODE - DO NOT MODIFY BY HAND\n\n"

LEAF_PATHS = [
    "lib/widgets/noise_overlay.dart",
    "lib/theme/app_shadows.dart",
    "lib/theme/app_theme_extensions.dart",
    "lib/theme/app_text_shadows.dart",
]


def make_artifact(path: str, *dependencies: str, content: str | None = None) -> GeneratedArtifact:
    if content is None:
        name = path.rsplit("/", 1)[-1].removesuffix(".dart")
        content = f"{HEADER}class {name} {{}}\n"
    return GeneratedArtifact(path=path, content=content, dependencies=dependencies)


@pytest.fixture
def flutter_artifacts() -> list[GeneratedArtifact]:
    """Every preset widget plus the leaves they depend on."""
    artifacts = [make_artifact(path) for path in LEAF_PATHS]
    artifacts += [make_artifact(path, *dependencies_for(path)) for path in FLUTTER_DEPENDENCIES]
    return artifacts


@pytest.fixture
def flutter_store(flutter_artifacts) -> GraphStore:
    store = GraphStore()
    for artifact in flutter_artifacts:
        store.add_artifact(artifact)
    return store
