"""PipelineRun document builders shared by the tests."""

from datetime import datetime, timedelta, timezone

T0 = datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def iso(point: datetime) -> str:
    """Format like the Tekton API does."""
    return point.strftime("%Y-%m-%dT%H:%M:%SZ")


def step_doc(name: str, start: datetime, end: datetime) -> dict:
    return {
        "name": name,
        "container": f"step-{name}",
        "imageID": "docker.io/library/alpine@sha256:abc",
        "terminated": {
            "containerID": "containerd://123",
            "exitCode": 0,
            "reason": "Completed",
            "startedAt": iso(start),
            "finishedAt": iso(end),
        },
    }


def taskrun_doc(
    task: str,
    start: datetime,
    end: datetime,
    steps: list[dict] | None = None,
    pod: str | None = None,
) -> dict:
    return {
        "pipelineTaskName": task,
        "status": {
            "startTime": iso(start),
            "completionTime": iso(end),
            "conditions": [{"type": "Succeeded", "status": "True", "reason": "Succeeded"}],
            "podName": pod or f"{task}-pod",
            "steps": steps or [],
        },
    }


def run_doc(task: str, start: datetime, end: datetime) -> dict:
    return {
        "pipelineTaskName": task,
        "status": {"startTime": iso(start), "completionTime": iso(end)},
    }


def pipelinerun_doc(
    start: datetime = T0,
    end: datetime = T0 + timedelta(minutes=5),
    runs: dict | None = None,
    task_runs: dict | None = None,
    name: str = "build-pipeline-run-x7k2p",
) -> dict:
    return {
        "apiVersion": "tekton.dev/v1beta1",
        "kind": "PipelineRun",
        "metadata": {"name": name, "namespace": "kubeflow"},
        "spec": {"pipelineRef": {"name": "build-pipeline"}},
        "status": {
            "startTime": iso(start),
            "completionTime": iso(end),
            "conditions": [{"type": "Succeeded", "status": "True"}],
            "runs": runs or {},
            "taskRuns": task_runs or {},
        },
    }


def pairs(events) -> list[tuple]:
    """Group a flat event list into (begin, end) pairs by lane and name."""
    open_events = {}
    result = []
    for event in events:
        key = (event.tid, event.name, event.cat)
        if event.ph == "B":
            open_events[key] = event
        else:
            result.append((open_events.pop(key), event))
    return result
