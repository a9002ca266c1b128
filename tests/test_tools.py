"""Tests for the combined tool set."""

import inspect

import pytest

from scribe_agent import AgentConfig, create_scribe_tools


def test_create_scribe_tools_order(test_config: AgentConfig):
    """Test all three tools are returned in order."""
    tools = create_scribe_tools(test_config)

    assert [tool.__name__ for tool in tools] == [
        "get_file_changes_in_directory",
        "generate_commit_message",
        "create_markdown_file",
    ]


def test_create_scribe_tools_default_config(monkeypatch: pytest.MonkeyPatch):
    """Test tools can be created from environment configuration."""
    monkeypatch.setenv("SCRIBE_AGENT_EXCLUDED_FILES", "out")

    tools = create_scribe_tools()

    assert tools[0].__self__.config.excluded_files == ["out"]


def test_tools_are_coroutines(test_config: AgentConfig):
    """Test every tool is awaitable by the host runtime."""
    for tool in create_scribe_tools(test_config):
        assert inspect.iscoroutinefunction(tool)


def test_tool_descriptions(test_config: AgentConfig):
    """Test the first docstring line of each tool describes it."""
    descriptions = {
        tool.__name__: inspect.getdoc(tool).splitlines()[0] for tool in create_scribe_tools(test_config)
    }

    assert descriptions == {
        "get_file_changes_in_directory": "Gets the code changes made in given directory.",
        "generate_commit_message": "Generate a conventional commit message from current git changes.",
        "create_markdown_file": "Create or overwrite a markdown (.md) file with provided content.",
    }
