"""Command-line entry point for pipetrace.

Usage:
    pipetrace --pipelinerun NAME [--namespace NS] [--padding N]
    pipetrace --filename pipelinerun.json [--offline]
    pipetrace --list
    pipetrace --serve
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

from .app import TraceApplication, serialize_events
from .config import ClusterSettings, TraceConfig, load_environment
from .errors import PipetraceError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipetrace",
        description="Convert a Tekton PipelineRun into a trace-viewer timeline (chrome://tracing).",
    )
    source = parser.add_argument_group("source")
    source.add_argument("--pipelinerun", help="pipelinerun name")
    source.add_argument("--filename", help="pipelinerun json file")
    source.add_argument("--list", action="store_true", help="list pipelineruns in the namespace")
    source.add_argument("--serve", action="store_true", help="run the HTTP API instead")

    parser.add_argument(
        "--padding",
        type=int,
        help="microseconds added to events whose start and end times are equal (default 1000000)",
    )
    parser.add_argument("--namespace", help="namespace for the pipelinerun")
    parser.add_argument("--context", help="kubeconfig context")
    parser.add_argument(
        "--offset-start-time",
        action="store_true",
        default=None,
        help="timestamps relative to the pipelinerun start instead of epoch",
    )
    parser.add_argument(
        "--include-pod-events",
        action="store_true",
        default=None,
        help="add kubernetes events of each taskrun pod",
    )
    parser.add_argument(
        "--include-containers",
        action="store_true",
        default=None,
        help="add step container statuses besides init containers",
    )
    parser.add_argument(
        "--fetch-concurrency",
        type=int,
        help="pods queried concurrently during enrichment (default 1)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="do not contact the cluster (file input only, no enrichment)",
    )
    parser.add_argument("-o", "--output", help="write trace JSON to this file instead of stdout")
    parser.add_argument("--log-level", help="log level (default WARNING)")
    return parser


def _write_output(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Trace written to %s", output)
    else:
        sys.stdout.write(text + "\n")


async def run(args: argparse.Namespace, application: TraceApplication) -> None:
    """Execute the requested command."""
    if args.list:
        names = await application.list_pipelineruns()
        _write_output("\n".join(names), args.output)
        return

    if args.filename is not None:
        events = await application.trace_file(args.filename)
    else:
        events = await application.trace_named(args.pipelinerun)

    _write_output(serialize_events(events), args.output)


def serve(application: TraceApplication) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from .api import create_fastapi_app

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))

    uvicorn.run(
        create_fastapi_app(application),
        host=api_host,
        port=api_port,
        log_level="info",
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    load_environment()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.filename or args.pipelinerun or args.list or args.serve):
        parser.print_help()
        return 0

    if args.offline and (args.pipelinerun or args.list):
        parser.error("--offline cannot be combined with --pipelinerun or --list")

    setup_logging(args.log_level, default_level="INFO" if args.serve else "WARNING")

    try:
        config = TraceConfig.from_env().with_overrides(
            padding=args.padding,
            offset_start_time=args.offset_start_time,
            include_pod_events=args.include_pod_events,
            include_containers=args.include_containers,
            fetch_concurrency=args.fetch_concurrency,
        )
        settings = ClusterSettings.from_env().with_overrides(
            namespace=args.namespace,
            context=args.context,
        )
    except ValueError as e:
        parser.error(str(e))

    application = TraceApplication(config, settings, offline=args.offline)

    if args.serve:
        serve(application)
        return 0

    try:
        asyncio.run(run(args, application))
    except PipetraceError as e:
        logger.error("pipetrace failed: %s", e)
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
