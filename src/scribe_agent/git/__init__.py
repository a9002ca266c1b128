"""Git repository tools package."""

from typing import List

from scribe_agent.config import AgentConfig
from scribe_agent.git.backend import GitBackend, RepositoryError
from scribe_agent.git.tools import GitRepositoryTools


def create_git_tools(config: AgentConfig) -> List:
    """
    Create git repository tool functions for the agent.

    Args:
        config: Agent configuration

    Returns:
        List of bound tool methods for git repository operations
    """
    tools = GitRepositoryTools(config)

    return [
        tools.get_file_changes_in_directory,
        tools.generate_commit_message,
    ]


__all__ = [
    "GitBackend",
    "GitRepositoryTools",
    "RepositoryError",
    "create_git_tools",
]
