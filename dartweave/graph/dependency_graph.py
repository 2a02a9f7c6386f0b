"""Facade bundling the store, order resolver and assembler.

:class:`DependencyGraph` is what the generation engine holds for one
run: artifacts go in through :meth:`DependencyGraph.add_artifact`, and
the order, diagnostics and assembled text come out of the other methods.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from dartweave.config import settings
from dartweave.errors import MissingDependencyError
from dartweave.graph.assembler import Assembler
from dartweave.graph.ordering import get_generation_order
from dartweave.graph.store import GraphStore
from dartweave.models.artifact import GeneratedArtifact, MissingDependency

logger = structlog.get_logger(__name__)


class DependencyGraph:
    """Dependency graph of the artifacts produced by one generation run.

    Usage::

        graph = create_dependency_graph()
        graph.add_artifacts(rendered)
        for path in graph.get_generation_order():
            write(path, graph.assemble(path))

    Args:
        strict: Default strictness for unresolved dependencies; ``None``
            falls back to :pyattr:`dartweave.config.Settings.strict_dependencies`.
        import_template: Passed to :class:`Assembler`.
        comment_prefix: Passed to :class:`Assembler`.
    """

    def __init__(
        self,
        *,
        strict: bool | None = None,
        import_template: str | None = None,
        comment_prefix: str | None = None,
    ) -> None:
        self.strict = settings.strict_dependencies if strict is None else strict
        self.store = GraphStore()
        self.assembler = Assembler(
            self.store,
            import_template=import_template,
            comment_prefix=comment_prefix,
        )

    def add_artifact(self, artifact: GeneratedArtifact) -> None:
        self.store.add_artifact(artifact)

    def add_artifacts(self, artifacts: Iterable[GeneratedArtifact]) -> None:
        for artifact in artifacts:
            self.store.add_artifact(artifact)

    def get_generation_order(self, *, strict: bool | None = None) -> list[str]:
        """See :func:`dartweave.graph.ordering.get_generation_order`."""
        return get_generation_order(
            self.store, strict=self.strict if strict is None else strict
        )

    def find_missing_dependencies(self) -> list[MissingDependency]:
        return self.assembler.find_missing_dependencies()

    def generate_imports(self, path: str) -> str:
        return self.assembler.generate_import_block(path)

    def assemble(self, path: str) -> str:
        return self.assembler.assemble(path)

    def assemble_all(self, *, strict: bool | None = None) -> dict[str, str]:
        """Assemble every artifact, keyed by path in generation order.

        Raises:
            CyclicDependencyError: If the edges contain a cycle.
            MissingDependencyError: In strict mode, if any dependency is
                unresolved.
        """
        strict = self.strict if strict is None else strict
        if strict:
            missing = self.store.unresolved_dependencies()
            if missing:
                raise MissingDependencyError(missing)

        order = get_generation_order(self.store, strict=False)
        assembled = {path: self.assembler.assemble(path) for path in order}
        logger.info("artifacts_assembled", count=len(assembled))
        return assembled

    def get_all_artifacts(self) -> list[GeneratedArtifact]:
        return self.store.get_all_artifacts()

    def clear(self) -> None:
        self.store.clear()

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, path: object) -> bool:
        return path in self.store


def create_dependency_graph(**kwargs) -> DependencyGraph:
    """Return an empty :class:`DependencyGraph`."""
    return DependencyGraph(**kwargs)
