"""FastAPI application setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import ITraceApplication, TraceApplication
from .routes import create_trace_router


def create_fastapi_app(application: ITraceApplication | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    fastapi_app = FastAPI(
        title="pipetrace API",
        description="Tekton PipelineRun to trace-viewer timeline conversion",
        version="0.1.0",
    )

    # Trace viewers load JSON straight from the browser
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_trace_router(application or TraceApplication()))

    return fastapi_app
