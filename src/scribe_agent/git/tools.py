"""Git tools for inspecting working tree changes and drafting commit messages."""

import asyncio
import logging
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import Field

from scribe_agent.config import AgentConfig
from scribe_agent.git.backend import GitBackend
from scribe_agent.git.commit_message import build_commit_message
from scribe_agent.models import (
    DEFAULT_COMMIT_TYPE,
    DEFAULT_MAX_SUBJECT_LENGTH,
    CommitMessageRequest,
    CommitType,
    FileChangesRequest,
    FileDiff,
    InvalidInput,
    parse_request,
)

logger = logging.getLogger(__name__)


class GitRepositoryTools:
    """
    Read-only tools over a local git working tree.

    Each call opens its own repository handle; nothing is cached between calls.
    Repository failures raise RepositoryError and are left to the caller.
    """

    def __init__(self, config: AgentConfig):
        """
        Initialize git repository tools.

        Args:
            config: Agent configuration
        """
        self.config = config
        logger.debug(f"Git tools initialized, excluding: {', '.join(self.config.excluded_files)}")

    async def get_file_changes_in_directory(
        self,
        root_dir: Annotated[
            str,
            Field(description="The root directory", min_length=1),
        ],
    ) -> Union[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Gets the code changes made in given directory.

        Files on the exclusion list (build output, lock files) are skipped.

        Args:
            root_dir: Directory inside the git working tree

        Returns:
            List of {file, diff} entries in diff summary order, or an
            InvalidInput dict ({tool, errors}) when the arguments fail validation
        """
        request = parse_request(
            "get_file_changes_in_directory", FileChangesRequest, {"root_dir": root_dir}
        )
        if isinstance(request, InvalidInput):
            return request.model_dump()

        backend = await asyncio.to_thread(GitBackend, request.root_dir)
        try:
            summary = await asyncio.to_thread(backend.diff_summary)
            changes = []
            for entry in summary.files:
                if self.config.is_excluded(entry.file):
                    logger.debug(f"Skipping excluded file: {entry.file}")
                    continue
                diff = await asyncio.to_thread(backend.diff, entry.paths)
                changes.append(FileDiff(file=entry.file, diff=diff))
        finally:
            backend.close()

        logger.info(f"Collected diffs for {len(changes)} of {summary.changed} changed file(s)")
        return [change.model_dump() for change in changes]

    async def generate_commit_message(
        self,
        root_dir: Annotated[
            str,
            Field(description="Repository root directory", min_length=1),
        ],
        type: Annotated[
            CommitType,
            Field(description="Conventional commit type"),
        ] = DEFAULT_COMMIT_TYPE,
        scope: Annotated[
            Optional[str],
            Field(description="Optional scope for the commit"),
        ] = None,
        max_subject_length: Annotated[
            int,
            Field(description="Max subject length", gt=0),
        ] = DEFAULT_MAX_SUBJECT_LENGTH,
    ) -> Dict[str, Any]:
        """
        Generate a conventional commit message from current git changes.

        When no scope is given, the most frequently changed top-level
        directory is used.

        Args:
            root_dir: Directory inside the git working tree
            type: Conventional commit type (default: chore)
            scope: Optional commit scope
            max_subject_length: Subject lines longer than this are truncated with an ellipsis

        Returns:
            {"message": commit message}, or an InvalidInput dict ({tool, errors})
            when the arguments fail validation
        """
        request = parse_request(
            "generate_commit_message",
            CommitMessageRequest,
            {
                "root_dir": root_dir,
                "type": type,
                "scope": scope,
                "max_subject_length": max_subject_length,
            },
        )
        if isinstance(request, InvalidInput):
            return request.model_dump()

        backend = await asyncio.to_thread(GitBackend, request.root_dir)
        try:
            status = await asyncio.to_thread(backend.status)
            summary = await asyncio.to_thread(backend.diff_summary)
        finally:
            backend.close()

        commit = build_commit_message(
            status,
            summary,
            commit_type=request.type,
            scope=request.scope,
            max_subject_length=request.max_subject_length,
            file_limit=self.config.summary_file_limit,
        )
        logger.info(f"Generated commit subject: {commit.subject}")
        return {"message": commit.message}
