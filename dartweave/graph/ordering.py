"""Generation-order resolution over a :class:`GraphStore`.

Produces a linear order in which every artifact comes after all of the
present artifacts it depends on.  The traversal is a depth-first
post-order driven by an explicit stack; a three-state colour map turns
a revisit of an in-progress node into a :class:`CyclicDependencyError`.
"""

from __future__ import annotations

import enum
from typing import Iterator

import structlog

from dartweave.config import settings
from dartweave.errors import CyclicDependencyError, MissingDependencyError
from dartweave.graph.store import GraphStore

logger = structlog.get_logger(__name__)


class _Colour(enum.Enum):
    IN_PROGRESS = 1
    DONE = 2


def get_generation_order(store: GraphStore, *, strict: bool | None = None) -> list[str]:
    """Return the artifact paths with dependencies before dependents.

    Dependencies that have no node in *store* are skipped unless strict
    mode is on.  Unrelated artifacts may appear in any relative order,
    though for a given store the result is deterministic.

    Args:
        store: The populated graph store.  It is never modified.
        strict: Raise on unresolved dependencies instead of skipping
            them.  ``None`` falls back to
            :pyattr:`dartweave.config.Settings.strict_dependencies`.

    Returns:
        Every path in *store*, each exactly once.

    Raises:
        CyclicDependencyError: If the edges contain a cycle.
        MissingDependencyError: In strict mode, if any dependency is
            unresolved.
    """
    if strict is None:
        strict = settings.strict_dependencies

    if strict:
        missing = store.unresolved_dependencies()
        if missing:
            logger.error("strict_missing_dependencies", count=len(missing))
            raise MissingDependencyError(missing)

    colours: dict[str, _Colour] = {}
    order: list[str] = []

    for root in store.paths():
        if root in colours:
            continue

        colours[root] = _Colour.IN_PROGRESS
        trail: list[str] = [root]
        stack: list[Iterator[str]] = [_present_dependencies(store, root)]

        while stack:
            descended = False
            for dep in stack[-1]:
                colour = colours.get(dep)
                if colour is _Colour.DONE:
                    continue
                if colour is _Colour.IN_PROGRESS:
                    cycle = trail[trail.index(dep):] + [dep]
                    logger.error("cyclic_dependency_detected", cycle=cycle)
                    raise CyclicDependencyError(cycle)
                colours[dep] = _Colour.IN_PROGRESS
                trail.append(dep)
                stack.append(_present_dependencies(store, dep))
                descended = True
                break

            if not descended:
                stack.pop()
                finished = trail.pop()
                colours[finished] = _Colour.DONE
                order.append(finished)

    logger.debug("generation_order_resolved", artifacts=len(order))
    return order


def _present_dependencies(store: GraphStore, path: str) -> Iterator[str]:
    """Yield the sorted dependencies of *path* that have a node."""
    node = store.get_node(path)
    if node is None:
        return iter(())
    return iter([dep for dep in sorted(node.depends_on) if dep in store])
