"""FastAPI route definitions for the dependency graph.

Provides:

- ``POST /graph/plan``: ingest a batch of artifacts and return the
  generation order plus missing dependencies.
- ``POST /graph/assemble``: same input, returns the import-augmented
  text of every artifact in generation order.
- ``GET /health``: liveness probe.

Every request builds its own :class:`DependencyGraph`; nothing is shared
between requests.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fastapi import APIRouter, HTTPException, status

from dartweave import __version__
from dartweave.config import settings
from dartweave.errors import CyclicDependencyError, MissingDependencyError
from dartweave.graph.dependency_graph import DependencyGraph
from dartweave.models.artifact import GeneratedArtifact, MissingDependency

router = APIRouter()
graph_router = APIRouter(prefix="/graph")


# ------------------------------------------------------------------
# Request / Response schemas
# ------------------------------------------------------------------


class GraphRequest(BaseModel):
    """Payload shared by ``/graph/plan`` and ``/graph/assemble``.

    Attributes:
        artifacts: Rendered artifacts with their declared dependencies.
        strict: Fail on unresolved dependencies.  ``None`` uses the
            server default.
    """

    artifacts: list[GeneratedArtifact] = Field(..., description="Rendered artifacts.")
    strict: bool | None = Field(None, description="Fail on unresolved dependencies.")


class PlanResponse(BaseModel):
    """Response from ``POST /graph/plan``."""

    status: str = Field("success")
    total_artifacts: int = Field(..., description="Number of distinct artifacts ingested.")
    order: list[str] = Field(..., description="Paths with dependencies first.")
    missing: list[MissingDependency] = Field(default_factory=list)


class AssembledFile(BaseModel):
    """One assembled artifact."""

    path: str
    content: str


class AssembleResponse(BaseModel):
    """Response from ``POST /graph/assemble``."""

    status: str = Field("success")
    total_artifacts: int = Field(..., description="Number of distinct artifacts ingested.")
    files: list[AssembledFile] = Field(..., description="Assembled files in generation order.")
    missing: list[MissingDependency] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _build_graph(request: GraphRequest) -> DependencyGraph:
    """Ingest the request's artifacts into a fresh graph.

    Raises:
        HTTPException: 400 if the batch exceeds the configured limit.
    """
    if len(request.artifacts) > settings.max_artifacts_per_request:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Too many artifacts: {len(request.artifacts)} "
                f"(limit {settings.max_artifacts_per_request})"
            ),
        )
    graph = DependencyGraph(strict=request.strict)
    graph.add_artifacts(request.artifacts)
    return graph


def _conflict(exc: CyclicDependencyError | MissingDependencyError) -> HTTPException:
    """Translate a graph error into a 409 with a structured detail."""
    if isinstance(exc, CyclicDependencyError):
        detail = {"error": "cyclic_dependency", "message": str(exc), "cycle": exc.cycle}
    else:
        detail = {
            "error": "missing_dependency",
            "message": str(exc),
            "missing": [m.model_dump() for m in exc.missing],
        }
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health() -> HealthResponse:
    return HealthResponse()


@graph_router.post(
    "/plan",
    response_model=PlanResponse,
    status_code=status.HTTP_200_OK,
    summary="Resolve generation order",
    description=(
        "Ingest a batch of rendered artifacts and return an order in which "
        "every artifact follows its dependencies, plus any dependencies "
        "that were declared but never produced."
    ),
)
async def plan(request: GraphRequest) -> PlanResponse:
    """Return the generation order for the submitted artifacts.

    Raises:
        HTTPException: 409 on a dependency cycle or, in strict mode, on
            unresolved dependencies.
    """
    graph = _build_graph(request)
    try:
        order = graph.get_generation_order()
    except (CyclicDependencyError, MissingDependencyError) as exc:
        raise _conflict(exc)

    return PlanResponse(
        total_artifacts=len(graph),
        order=order,
        missing=graph.find_missing_dependencies(),
    )


@graph_router.post(
    "/assemble",
    response_model=AssembleResponse,
    status_code=status.HTTP_200_OK,
    summary="Assemble artifacts with imports",
    description=(
        "Ingest a batch of rendered artifacts and return each one's content "
        "with relative import directives injected after its comment header."
    ),
)
async def assemble(request: GraphRequest) -> AssembleResponse:
    """Return the assembled text of every submitted artifact.

    Raises:
        HTTPException: 409 on a dependency cycle or, in strict mode, on
            unresolved dependencies.
    """
    graph = _build_graph(request)
    try:
        assembled = graph.assemble_all()
    except (CyclicDependencyError, MissingDependencyError) as exc:
        raise _conflict(exc)

    return AssembleResponse(
        total_artifacts=len(graph),
        files=[AssembledFile(path=path, content=text) for path, text in assembled.items()],
        missing=graph.find_missing_dependencies(),
    )
