"""Exception hierarchy for the dependency graph.

Missing dependencies are normally reported as data; only strict mode
turns them into :class:`MissingDependencyError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from dartweave.models.artifact import MissingDependency


class DartweaveError(Exception):
    """Base class for all dartweave errors."""


class NotFoundError(DartweaveError, KeyError):
    """Raised when an operation targets a path that was never ingested.

    Attributes:
        path: The unknown artifact path.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Artifact not found: {path}")

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes.
        return self.args[0]


class CyclicDependencyError(DartweaveError):
    """Raised when the dependency edges contain a cycle.

    Attributes:
        cycle: Paths forming the cycle; the first path is repeated at the
            end, e.g. ``["a", "b", "c", "a"]``.
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"Cyclic dependency detected: {' -> '.join(self.cycle)}")


class MissingDependencyError(DartweaveError):
    """Raised in strict mode when declared dependencies were never ingested.

    Attributes:
        missing: Every unresolved ``(artifact, dependency)`` pair.
    """

    def __init__(self, missing: Sequence[MissingDependency]) -> None:
        self.missing = list(missing)
        pairs = ", ".join(
            f"{m.artifact_path} -> {m.missing_dependency_path}" for m in self.missing
        )
        super().__init__(f"Unresolved dependencies: {pairs}")
