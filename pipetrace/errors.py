"""Exception types raised by pipetrace."""


class PipetraceError(Exception):
    """Base class for all pipetrace errors."""


class InvalidStatusError(PipetraceError):
    """PipelineRun status is missing or lacks a field the projection needs."""


class NotFoundError(PipetraceError):
    """Requested resource (file, PipelineRun) does not exist."""


class ParseError(PipetraceError):
    """Status document could not be parsed."""


class ClusterError(PipetraceError):
    """Kubernetes API call failed for a reason other than 404."""
