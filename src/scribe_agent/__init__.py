"""Scribe Agent - function-calling tools for reviewing git changes and writing markdown."""

from scribe_agent.config import AgentConfig, configure_logging
from scribe_agent.tools import create_scribe_tools

__version__ = "0.1.0"
__all__ = ["AgentConfig", "configure_logging", "create_scribe_tools"]
