"""Generation-run orchestrator.

Ties the dependency graph and the writer together: ingest every rendered
artifact, resolve a safe order, report missing dependencies, assemble the
final text and optionally persist it.
"""

from __future__ import annotations

import pathlib
import uuid
from typing import Iterable

import structlog
from pydantic import BaseModel, Field

from dartweave.core.writer import write_assembled
from dartweave.graph.dependency_graph import DependencyGraph
from dartweave.models.artifact import GeneratedArtifact, MissingDependency

logger = structlog.get_logger(__name__)


class GenerationResult(BaseModel):
    """Outcome of :func:`generate_project`.

    Attributes:
        run_id: Identifier bound as ``generation_run`` on every log event
            of the run.
        order: Artifact paths with dependencies before dependents.
        missing: Unresolved dependencies (empty for a complete run).
        files: Assembled text keyed by path, in generation order.
        written: Files persisted to disk (empty without an output root).
    """

    run_id: str
    order: list[str] = Field(default_factory=list)
    missing: list[MissingDependency] = Field(default_factory=list)
    files: dict[str, str] = Field(default_factory=dict)
    written: list[str] = Field(default_factory=list)


def generate_project(
    artifacts: Iterable[GeneratedArtifact],
    output_root: str | pathlib.Path | None = None,
    *,
    strict: bool | None = None,
) -> GenerationResult:
    """Assemble a batch of rendered artifacts and optionally write them.

    Args:
        artifacts: Rendered artifacts with their declared dependencies.
        output_root: Directory to write the assembled files to.  ``None``
            keeps everything in memory.
        strict: Override for strict dependency checking.

    Returns:
        A :class:`GenerationResult`.

    Raises:
        CyclicDependencyError: If the artifacts depend on each other in
            a cycle.
        MissingDependencyError: In strict mode, if a dependency is
            unresolved.
    """
    run_id = uuid.uuid4().hex
    with structlog.contextvars.bound_contextvars(generation_run=run_id):
        graph = DependencyGraph(strict=strict)
        graph.add_artifacts(artifacts)

        logger.info("generation_started", artifacts=len(graph), strict=graph.strict)

        missing = graph.find_missing_dependencies()
        files = graph.assemble_all()
        order = list(files)

        written: list[str] = []
        if output_root is not None:
            written = [str(p) for p in write_assembled(output_root, files)]

        logger.info(
            "generation_finished",
            artifacts=len(order),
            missing=len(missing),
            written=len(written),
        )

    return GenerationResult(
        run_id=run_id, order=order, missing=missing, files=files, written=written
    )
