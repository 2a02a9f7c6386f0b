"""Data models for generated artifacts and their graph nodes.

:class:`GeneratedArtifact` is the record handed over by the template
layer.  It is frozen once built so the graph can hold it without
defensive copies.  :class:`GraphNode` is the store's internal wrapper
that carries the deduplicated edge sets.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeneratedArtifact(BaseModel):
    """A single generated source file.

    Attributes:
        path: Unique ``/``-separated location, e.g.
            ``lib/widgets/glass_container.dart``.
        content: The rendered source text.
        dependencies: Paths of other artifacts this one requires.
            Duplicates are tolerated.
        exports: Symbol names the artifact makes available.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Unique hierarchical artifact path.")
    content: str = Field("", description="Rendered source text.")
    dependencies: tuple[str, ...] = Field(
        default_factory=tuple, description="Paths of required artifacts."
    )
    exports: tuple[str, ...] = Field(
        default_factory=tuple, description="Exported symbol names (informational)."
    )

    @field_validator("path")
    @classmethod
    def _no_trailing_separator(cls, value: str) -> str:
        if value.endswith("/"):
            raise ValueError(f"artifact path must name a file, got directory: {value}")
        return value


class GraphNode(BaseModel):
    """Store entry for one artifact.

    Attributes:
        artifact: The wrapped artifact.
        depends_on: Deduplicated view of ``artifact.dependencies``.
        depended_by: Paths of artifacts that declared a dependency on
            this one.
    """

    artifact: GeneratedArtifact
    depends_on: set[str] = Field(default_factory=set)
    depended_by: set[str] = Field(default_factory=set)

    @property
    def path(self) -> str:
        return self.artifact.path


class MissingDependency(BaseModel):
    """A declared dependency whose target was never ingested."""

    model_config = ConfigDict(frozen=True)

    artifact_path: str = Field(..., description="Artifact declaring the dependency.")
    missing_dependency_path: str = Field(..., description="Path that has no node.")
