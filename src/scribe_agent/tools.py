"""Combined tool set handed to a host agent."""

from typing import List, Optional

from scribe_agent.config import AgentConfig
from scribe_agent.filesystem import create_filesystem_tools
from scribe_agent.git import create_git_tools


def create_scribe_tools(config: Optional[AgentConfig] = None) -> List:
    """
    Create every Scribe Agent tool.

    Args:
        config: Agent configuration. If None, uses defaults from environment.

    Returns:
        Bound tool methods: change lister, commit message composer, markdown writer
    """
    config = config or AgentConfig()
    return create_git_tools(config) + create_filesystem_tools(config)
