"""File system tools package for writing documents."""

from typing import List

from scribe_agent.config import AgentConfig
from scribe_agent.filesystem.tools import (
    FileSystemTools,
    InvalidMarkdownPathError,
    MarkdownFileError,
    MarkdownFileExistsError,
    write_markdown_file,
)


def create_filesystem_tools(config: AgentConfig) -> List:
    """
    Create file system tool functions for the agent.

    Args:
        config: Agent configuration

    Returns:
        List of bound tool methods for file system operations
    """
    tools = FileSystemTools(config)

    return [
        tools.create_markdown_file,
    ]


__all__ = [
    "FileSystemTools",
    "InvalidMarkdownPathError",
    "MarkdownFileError",
    "MarkdownFileExistsError",
    "create_filesystem_tools",
    "write_markdown_file",
]
