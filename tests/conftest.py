"""Pytest configuration and fixtures."""

import sys
from datetime import timedelta
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add project root and this directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from builders import T0, pipelinerun_doc, run_doc, step_doc, taskrun_doc  # noqa: E402


@pytest.fixture
def sample_doc():
    """PipelineRun with one custom-task run and two task-runs."""
    return pipelinerun_doc(
        runs={
            "wait-run-abc": run_doc("wait", T0 + timedelta(seconds=1), T0 + timedelta(seconds=11)),
        },
        task_runs={
            "build-pipeline-run-x7k2p-fetch": taskrun_doc(
                "fetch",
                T0 + timedelta(seconds=2),
                T0 + timedelta(seconds=30),
                steps=[
                    step_doc("clone", T0 + timedelta(seconds=5), T0 + timedelta(seconds=20)),
                    step_doc("report", T0 + timedelta(seconds=21), T0 + timedelta(seconds=21)),
                ],
            ),
            "build-pipeline-run-x7k2p-build": taskrun_doc(
                "build",
                T0 + timedelta(seconds=31),
                T0 + timedelta(seconds=200),
                steps=[step_doc("compile", T0 + timedelta(seconds=40), T0 + timedelta(seconds=190))],
            ),
        },
    )


@pytest.fixture
def sample_pipelinerun(sample_doc):
    """Parsed sample PipelineRun."""
    from pipetrace.models import PipelineRun

    return PipelineRun.model_validate(sample_doc)


@pytest.fixture
def mock_pod_source():
    """Pod event and pod status source returning nothing."""
    source = Mock()
    source.list_pod_events = AsyncMock(return_value=[])
    source.read_pod_status = AsyncMock(return_value=None)
    return source
