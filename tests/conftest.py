"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Dict, Iterator, List, Optional
from unittest.mock import Mock

import pytest
from git import Repo

from scribe_agent.config import AgentConfig
from scribe_agent.models import DiffSummary, DiffSummaryEntry, RenamedFile, RepositoryStatus

INITIAL_FILES: Dict[str, str] = {
    "api/a.ts": "export const a = 1;\n",
    "api/b.ts": "export const b = 2;\n",
    "web/c.ts": "export const c = 3;\n",
    "README.md": "# Project\n",
    "bun.lock": "lockfile v1\n",
}


@pytest.fixture
def test_config() -> AgentConfig:
    """Provide test configuration."""
    return AgentConfig(
        excluded_files=["dist", "bun.lock"],
        summary_file_limit=50,
        log_level="DEBUG",
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> Iterator[Repo]:
    """Create a git repository with one commit of INITIAL_FILES."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    repo = Repo.init(repo_dir)

    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    for relative_path, content in INITIAL_FILES.items():
        write_file(repo_dir, relative_path, content)

    repo.git.add(A=True)
    repo.git.commit("-m", "Initial commit")

    yield repo
    repo.close()


def write_file(root: Path, relative_path: str, content: str) -> Path:
    """Write a file below root, creating parent directories."""
    path = Path(root) / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def make_summary(*files: str, binary: Optional[List[str]] = None) -> DiffSummary:
    """Build a diff summary with one insertion per text file."""
    entries = [DiffSummaryEntry(file=name, insertions=1, deletions=0) for name in files]
    entries.extend(DiffSummaryEntry(file=name, binary=True) for name in binary or [])
    return DiffSummary(files=entries)


def make_status(
    created: int = 0, modified: int = 0, deleted: int = 0, renamed: Optional[List[tuple]] = None
) -> RepositoryStatus:
    """Build a status snapshot with the given bucket sizes."""
    return RepositoryStatus(
        created=[f"new_{i}.py" for i in range(created)],
        modified=[f"mod_{i}.py" for i in range(modified)],
        deleted=[f"del_{i}.py" for i in range(deleted)],
        renamed=[RenamedFile(from_path=old, to_path=new) for old, new in renamed or []],
    )


@pytest.fixture
def mock_backend() -> Mock:
    """Create a mock git backend with an empty working tree."""
    backend = Mock()
    backend.status.return_value = RepositoryStatus()
    backend.diff_summary.return_value = DiffSummary()
    backend.diff.side_effect = lambda paths: f"diff --git a/{paths[0]} b/{paths[0]}"
    return backend


@pytest.fixture
def mock_git_backend(monkeypatch: pytest.MonkeyPatch, mock_backend: Mock) -> Mock:
    """Replace the GitBackend class used by the git tools."""
    backend_class = Mock(return_value=mock_backend)
    monkeypatch.setattr("scribe_agent.git.tools.GitBackend", backend_class)
    return backend_class
