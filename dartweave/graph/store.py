"""In-memory store of generated artifacts and their dependency edges.

Each artifact gets one :class:`GraphNode` keyed by its path.  Forward
edges (``depends_on``) come straight from the artifact; reverse edges
(``depended_by``) are only recorded between nodes that are both present,
so a dependency on a path that was never ingested stays a dangling
forward edge and surfaces later as a missing dependency.
"""

from __future__ import annotations

from typing import Iterator

import structlog

from dartweave.models.artifact import GeneratedArtifact, GraphNode, MissingDependency

logger = structlog.get_logger(__name__)


class GraphStore:
    """Path-keyed collection of :class:`GraphNode` objects.

    The store is owned by a single generation run and is not thread-safe.

    Usage::

        store = GraphStore()
        store.add_artifact(GeneratedArtifact(path="lib/a.dart", dependencies=("lib/b.dart",)))
        store.add_artifact(GeneratedArtifact(path="lib/b.dart"))
        store.get_node("lib/b.dart").depended_by  # {"lib/a.dart"}
    """

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_artifact(self, artifact: GeneratedArtifact) -> None:
        """Insert *artifact*, replacing any node already stored at its path.

        Reverse edges recorded by other nodes are kept across a
        replacement.  Dependencies that do not resolve to a node are
        accepted without error.

        Unlike a plain forward-only insert, the new node's own
        ``depended_by`` is rebuilt from artifacts ingested before it, so
        the reverse sets always mirror ``depends_on`` among present nodes
        regardless of insertion order.

        Args:
            artifact: The artifact to ingest.
        """
        path = artifact.path
        previous = self._nodes.get(path)
        depends_on = set(artifact.dependencies)

        if previous is not None:
            # Withdraw reverse edges for targets the new version dropped.
            for dropped in previous.depends_on - depends_on:
                target = self._nodes.get(dropped)
                if target is not None:
                    target.depended_by.discard(path)

        node = GraphNode(
            artifact=artifact,
            depends_on=depends_on,
            depended_by=self._collect_dependents(path),
        )
        self._nodes[path] = node

        for dep in depends_on:
            target = self._nodes.get(dep)
            if target is not None:
                target.depended_by.add(path)

        logger.debug(
            "artifact_added",
            path=path,
            dependencies=len(depends_on),
            dependents=len(node.depended_by),
            replaced=previous is not None,
        )

    def clear(self) -> None:
        """Remove every node and edge."""
        count = len(self._nodes)
        self._nodes.clear()
        logger.debug("graph_store_cleared", removed=count)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_node(self, path: str) -> GraphNode | None:
        """Return the node stored at *path*, or ``None``."""
        return self._nodes.get(path)

    def get_artifact(self, path: str) -> GeneratedArtifact | None:
        """Return the artifact stored at *path*, or ``None``."""
        node = self._nodes.get(path)
        return node.artifact if node is not None else None

    def has(self, path: str) -> bool:
        return path in self._nodes

    def get_all_artifacts(self) -> list[GeneratedArtifact]:
        """Return every ingested artifact (no ordering guarantee)."""
        return [node.artifact for node in self._nodes.values()]

    def dependents_of(self, path: str) -> set[str]:
        """Return the paths that depend on *path* (empty if unknown)."""
        node = self._nodes.get(path)
        return set(node.depended_by) if node is not None else set()

    def unresolved_dependencies(self) -> list[MissingDependency]:
        """Return every forward edge whose target has no node.

        Sorted by ``(artifact_path, missing_dependency_path)``.  Does not
        modify the store.
        """
        return [
            MissingDependency(artifact_path=path, missing_dependency_path=dep)
            for path in sorted(self._nodes)
            for dep in sorted(self._nodes[path].depends_on)
            if dep not in self._nodes
        ]

    def paths(self) -> list[str]:
        return list(self._nodes)

    def nodes(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())

    def __contains__(self, path: object) -> bool:
        return path in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collect_dependents(self, path: str) -> set[str]:
        """Rebuild the reverse edge set of *path* from other nodes' forward edges."""
        return {
            other_path
            for other_path, other in self._nodes.items()
            if other_path != path and path in other.depends_on
        }
