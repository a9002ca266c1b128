"""Tests for request validation and result models."""

from scribe_agent.models import (
    CommitMessage,
    CommitMessageRequest,
    FileChangesRequest,
    InvalidInput,
    MarkdownFileRequest,
    MarkdownWriteResult,
    parse_request,
)


def test_commit_request_defaults():
    """Test defaults for optional commit arguments."""
    request = parse_request("generate_commit_message", CommitMessageRequest, {"root_dir": "."})

    assert isinstance(request, CommitMessageRequest)
    assert request.type == "chore"
    assert request.scope is None
    assert request.max_subject_length == 72


def test_camel_case_aliases_accepted():
    """Test the camelCase argument names are accepted."""
    request = parse_request(
        "generate_commit_message",
        CommitMessageRequest,
        {"rootDir": "/repo", "type": "fix", "maxSubjectLength": 50},
    )

    assert request.root_dir == "/repo"
    assert request.max_subject_length == 50

    markdown = parse_request("create_markdown_file", MarkdownFileRequest, {"filePath": "a.md"})
    assert markdown.file_path == "a.md"
    assert markdown.content == ""
    assert markdown.overwrite is False


def test_missing_required_field():
    """Test a missing root directory is reported."""
    result = parse_request("get_file_changes_in_directory", FileChangesRequest, {})

    assert isinstance(result, InvalidInput)
    assert result.tool == "get_file_changes_in_directory"
    assert result.errors[0].field in ("root_dir", "rootDir")


def test_multiple_errors_reported():
    """Test every failing field is listed."""
    result = parse_request(
        "generate_commit_message",
        CommitMessageRequest,
        {"root_dir": "", "type": "wip", "max_subject_length": -3},
    )

    assert isinstance(result, InvalidInput)
    assert len(result.errors) == 3


def test_unknown_argument_rejected():
    """Test unexpected arguments are refused."""
    result = parse_request("get_file_changes_in_directory", FileChangesRequest, {"root_dir": ".", "depth": 2})

    assert isinstance(result, InvalidInput)


def test_commit_message_joins_lines():
    """Test the message property."""
    commit = CommitMessage(subject="feat: 1 update", body=["", "Summary of changes:"])

    assert commit.message == "feat: 1 update\n\nSummary of changes:"


def test_markdown_result_serialization():
    """Test results serialise with camelCase keys."""
    result = MarkdownWriteResult(file_path="/tmp/a.md", bytes_written=3)

    assert result.model_dump(by_alias=True) == {"filePath": "/tmp/a.md", "bytesWritten": 3}
