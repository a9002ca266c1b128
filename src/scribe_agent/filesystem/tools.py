"""File system tools for writing markdown documents."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Annotated, Any, Dict

from pydantic import Field

from scribe_agent.config import AgentConfig
from scribe_agent.models import InvalidInput, MarkdownFileRequest, MarkdownWriteResult, parse_request

logger = logging.getLogger(__name__)


class MarkdownFileError(Exception):
    """Raised when a markdown write is refused before touching the target."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class InvalidMarkdownPathError(MarkdownFileError):
    """Raised when the target does not have a .md extension."""


class MarkdownFileExistsError(MarkdownFileError):
    """Raised when the target exists and overwriting was not requested."""


def resolve_path(file_path: str) -> Path:
    """Resolve a path against the current working directory, normalising '..' segments."""
    return Path(os.path.abspath(file_path))


def write_markdown_file(file_path: str, content: str = "", overwrite: bool = False) -> MarkdownWriteResult:
    """
    Write markdown content to a .md file.

    Missing parent directories are created. Nothing is written when the
    extension check or the overwrite check fails.

    Args:
        file_path: Absolute or relative path to the .md file
        content: Markdown content
        overwrite: Replace the file if it already exists

    Returns:
        MarkdownWriteResult with the resolved path and UTF-8 byte count

    Raises:
        InvalidMarkdownPathError: If the path does not end in .md
        MarkdownFileExistsError: If the file exists and overwrite is False
    """
    resolved = resolve_path(file_path)
    if not str(resolved).lower().endswith(".md"):
        raise InvalidMarkdownPathError(resolved, "Target file must have a .md extension")

    resolved.parent.mkdir(parents=True, exist_ok=True)

    if resolved.exists() and not overwrite:
        raise MarkdownFileExistsError(resolved, f"File already exists: {resolved}")

    encoded = content.encode("utf-8")
    with open(resolved, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)

    logger.debug(f"Wrote {len(encoded)} bytes to {resolved}")
    return MarkdownWriteResult(file_path=str(resolved), bytes_written=len(encoded))


class FileSystemTools:
    """Tools for creating documents on the local file system."""

    def __init__(self, config: AgentConfig):
        """
        Initialize file system tools.

        Args:
            config: Agent configuration
        """
        self.config = config

    async def create_markdown_file(
        self,
        file_path: Annotated[
            str,
            Field(description="Absolute or relative path to .md file", min_length=1),
        ],
        content: Annotated[
            str,
            Field(description="Markdown content to write"),
        ] = "",
        overwrite: Annotated[
            bool,
            Field(description="Overwrite if file exists"),
        ] = False,
    ) -> Dict[str, Any]:
        """
        Create or overwrite a markdown (.md) file with provided content.

        Relative paths are resolved against the current working directory.

        Args:
            file_path: Target .md file
            content: Markdown content (default: empty)
            overwrite: Replace an existing file (default: False)

        Returns:
            {"filePath": resolved path, "bytesWritten": UTF-8 byte count}
        """
        request = parse_request(
            "create_markdown_file",
            MarkdownFileRequest,
            {"file_path": file_path, "content": content, "overwrite": overwrite},
        )
        if isinstance(request, InvalidInput):
            return request.model_dump()

        result = await asyncio.to_thread(
            write_markdown_file, request.file_path, request.content, request.overwrite
        )
        logger.info(f"Created markdown file {result.file_path}")
        return result.model_dump(by_alias=True)
