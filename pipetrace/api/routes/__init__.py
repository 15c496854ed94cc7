"""API routes."""

from .trace import create_trace_router

__all__ = ["create_trace_router"]
