"""PipelineRun documents read from local JSON files."""

import asyncio
import json
from pathlib import Path

from pydantic import ValidationError

from ..config import PathLike
from ..errors import NotFoundError, ParseError
from ..logging_config import get_logger
from ..models import PipelineRun

logger = get_logger(__name__)


def parse_pipelinerun(document: dict, name: str | None = None) -> PipelineRun:
    """Validate a PipelineRun, or pick one out of a PipelineRunList.

    A list with more than one item needs ``name`` to choose from.
    """
    if not isinstance(document, dict):
        raise ParseError("PipelineRun document must be a JSON object")

    if "items" in document:
        items = document.get("items") or []
        if name is not None:
            matches = [i for i in items if (i.get("metadata") or {}).get("name") == name]
            if not matches:
                raise NotFoundError(f"PipelineRun {name} not in list")
            document = matches[0]
        elif len(items) == 1:
            document = items[0]
        else:
            raise ParseError(f"PipelineRunList holds {len(items)} items; a name is required")

    try:
        return PipelineRun.model_validate(document)
    except ValidationError as e:
        raise ParseError(f"Invalid PipelineRun: {e}") from e


class FileStatusSource:
    """Reads a PipelineRun (or PipelineRunList) from a JSON file."""

    def __init__(self, path: PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def get_pipelinerun(self, name: str | None = None) -> PipelineRun:
        """Load and parse the file."""
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError(f"File not found: {self._path}") from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"{self._path}: {e}") from e

        logger.debug("Loaded PipelineRun document from %s", self._path)
        return parse_pipelinerun(document, name)
