"""Pydantic v2 data models for generated artifacts and graph nodes."""

from dartweave.models.artifact import (
    GeneratedArtifact,
    GraphNode,
    MissingDependency,
)

__all__ = [
    "GeneratedArtifact",
    "GraphNode",
    "MissingDependency",
]
