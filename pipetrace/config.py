"""Trace and cluster configuration."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

DEFAULT_PADDING = 1_000_000  # trace units (microseconds)
DEFAULT_NAMESPACE = "kubeflow"
DEFAULT_TEKTON_GROUP = "tekton.dev"
DEFAULT_TEKTON_VERSION = "v1beta1"


PathLike = Union[str, Path]


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class TraceConfig:
    """Settings for one tree walk."""

    padding: int = DEFAULT_PADDING
    offset_start_time: bool = False  # relative to the PipelineRun start instead of epoch
    include_pod_events: bool = False
    include_containers: bool = False
    fetch_concurrency: int = 1

    def __post_init__(self) -> None:
        if self.padding < 0:
            raise ValueError("padding must be >= 0")
        if self.fetch_concurrency < 1:
            raise ValueError("fetch_concurrency must be >= 1")

    @classmethod
    def from_env(cls) -> "TraceConfig":
        """Build config from PIPETRACE_* environment variables."""
        return cls(
            padding=_env_int("PIPETRACE_PADDING", DEFAULT_PADDING),
            offset_start_time=_env_bool("PIPETRACE_OFFSET_START_TIME", False),
            include_pod_events=_env_bool("PIPETRACE_INCLUDE_POD_EVENTS", False),
            include_containers=_env_bool("PIPETRACE_INCLUDE_CONTAINERS", False),
            fetch_concurrency=_env_int("PIPETRACE_FETCH_CONCURRENCY", 1),
        )

    def with_overrides(self, **overrides) -> "TraceConfig":
        """Return a copy with non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


@dataclass(frozen=True)
class ClusterSettings:
    """Where to find PipelineRuns and their pods."""

    namespace: str = DEFAULT_NAMESPACE
    group: str = DEFAULT_TEKTON_GROUP
    version: str = DEFAULT_TEKTON_VERSION
    context: str | None = None  # kubeconfig context
    request_timeout: int | None = None  # seconds

    @classmethod
    def from_env(cls) -> "ClusterSettings":
        """Build settings from PIPETRACE_* environment variables."""
        timeout = os.getenv("PIPETRACE_REQUEST_TIMEOUT")
        return cls(
            namespace=os.getenv("PIPETRACE_NAMESPACE", DEFAULT_NAMESPACE),
            version=os.getenv("PIPETRACE_TEKTON_VERSION", DEFAULT_TEKTON_VERSION),
            context=os.getenv("PIPETRACE_KUBE_CONTEXT") or None,
            request_timeout=int(timeout) if timeout else None,
        )

    def with_overrides(self, **overrides) -> "ClusterSettings":
        """Return a copy with non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


def load_environment(env_file: PathLike | None = None) -> None:
    """Load a .env file (default: ./.env) without overriding existing vars."""
    path = Path(env_file) if env_file else Path.cwd() / ".env"
    load_dotenv(path)
