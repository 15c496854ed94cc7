"""Trace API routes."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query
from pydantic import BaseModel

from ...app import ITraceApplication
from ...errors import InvalidStatusError, NotFoundError, ParseError, PipetraceError
from ...logging_config import get_logger
from ...models import TraceEvent
from ...sources import parse_pipelinerun

logger = get_logger(__name__)


class TraceEventResponse(BaseModel):
    """Response model for a trace event."""

    name: str
    cat: str
    ph: str
    pid: int
    tid: int
    ts: int


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def _http_error(e: PipetraceError) -> HTTPException:
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ParseError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, InvalidStatusError):
        return HTTPException(status_code=422, detail=str(e))
    logger.error("Trace request failed: %s", e)
    return HTTPException(status_code=500, detail=str(e))


def _to_response(events: list[TraceEvent]) -> list[dict]:
    return [e.to_dict() for e in events]


def create_trace_router(app: ITraceApplication) -> APIRouter:
    """Create trace router."""
    router = APIRouter(prefix="/api", tags=["trace"])

    @router.get("/health", response_model=StatusResponse)
    async def health() -> dict:
        """Liveness check."""
        return {"status": "ok"}

    @router.post("/trace", response_model=list[TraceEventResponse])
    async def trace_document(
        document: dict[str, Any] = Body(..., description="PipelineRun or PipelineRunList JSON"),
        name: str | None = Query(None, description="PipelineRun to pick from a list"),
        padding: int | None = Query(None, ge=0),
        offset_start_time: bool | None = Query(None),
        include_pod_events: bool | None = Query(None),
        include_containers: bool | None = Query(None),
        enrich: bool = Query(False, description="Fetch pod telemetry from the cluster"),
    ) -> list[dict]:
        """Trace a posted PipelineRun document."""
        try:
            config = app.config.with_overrides(
                padding=padding,
                offset_start_time=offset_start_time,
                include_pod_events=include_pod_events,
                include_containers=include_containers,
            )
            pipelinerun = parse_pipelinerun(document, name)
            events = await app.trace_pipelinerun(pipelinerun, config, enrich=enrich)
            return _to_response(events)
        except PipetraceError as e:
            raise _http_error(e)

    @router.get("/pipelineruns", response_model=list[str])
    async def list_pipelineruns() -> list[str]:
        """List PipelineRun names in the configured namespace."""
        try:
            return await app.list_pipelineruns()
        except PipetraceError as e:
            raise _http_error(e)

    @router.get("/pipelineruns/{name}/trace", response_model=list[TraceEventResponse])
    async def trace_pipelinerun(
        name: str,
        padding: int | None = Query(None, ge=0),
        offset_start_time: bool | None = Query(None),
        include_pod_events: bool | None = Query(None),
        include_containers: bool | None = Query(None),
    ) -> list[dict]:
        """Fetch a PipelineRun from the cluster and trace it."""
        try:
            config = app.config.with_overrides(
                padding=padding,
                offset_start_time=offset_start_time,
                include_pod_events=include_pod_events,
                include_containers=include_containers,
            )
            events = await app.trace_named(name, config)
            return _to_response(events)
        except PipetraceError as e:
            raise _http_error(e)

    return router
