"""Read-only git queries backing the repository tools."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import git
from git import Repo

from scribe_agent.models import DiffSummary, DiffSummaryEntry, RenamedFile, RepositoryStatus

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Raised when a git query fails (missing path, not a work tree, command error)."""

    def __init__(self, root_dir: Union[str, Path], message: str):
        super().__init__(f"{message}: {root_dir}")
        self.root_dir = str(root_dir)


def parse_numstat(output: str) -> DiffSummary:
    """
    Parse `git diff --numstat -z` output into a diff summary.

    Records are NUL terminated "added<TAB>removed<TAB>path". A rename leaves
    the path empty and is followed by two records, the old and the new path.
    Binary files are reported by git as "-" for both counts.

    Args:
        output: Raw numstat output

    Returns:
        DiffSummary in git's output order
    """
    entries = []
    records = output.split("\0")
    index = 0

    while index < len(records):
        record = records[index]
        index += 1
        if not record.strip():
            continue

        parts = record.split("\t", 2)
        if len(parts) != 3:
            logger.debug(f"Skipping unparseable numstat record: {record!r}")
            continue

        added, removed, path = parts
        from_file: Optional[str] = None
        if not path:
            if index + 1 >= len(records):
                logger.debug(f"Skipping truncated numstat rename record: {record!r}")
                break
            from_file, path = records[index], records[index + 1]
            index += 2

        if added == "-" and removed == "-":
            entries.append(DiffSummaryEntry(file=path, from_file=from_file, binary=True))
        else:
            entries.append(
                DiffSummaryEntry(
                    file=path,
                    from_file=from_file,
                    insertions=int(added),
                    deletions=int(removed),
                )
            )

    return DiffSummary(files=entries)


def parse_porcelain(output: str) -> RepositoryStatus:
    """
    Parse `git status --porcelain -z` output into status buckets.

    Records are NUL separated as "XY path"; renames and copies are followed
    by an extra record holding the original path.

    Args:
        output: Raw porcelain output

    Returns:
        RepositoryStatus with created, modified, deleted, renamed and untracked files
    """
    status = RepositoryStatus()
    records = output.split("\0")
    index = 0

    while index < len(records):
        record = records[index]
        index += 1
        if len(record) < 4:
            continue

        status_code = record[:2]
        file_path = record[3:]

        if status_code == "??":
            status.not_added.append(file_path)
            continue

        original_path: Optional[str] = None
        if status_code[0] in ("R", "C"):
            if index < len(records):
                original_path = records[index]
            index += 1

        if status_code[0] == "A":
            status.created.append(file_path)
        if "M" in status_code:
            status.modified.append(file_path)
        if "D" in status_code:
            status.deleted.append(file_path)
        if status_code[0] == "R" and original_path is not None:
            status.renamed.append(RenamedFile(from_path=original_path, to_path=file_path))

    return status


class GitBackend:
    """
    Narrow query interface over a git working tree.

    Every GitPython failure surfaces as RepositoryError. Paths reported and
    accepted by the queries are relative to the top level of the work tree.
    """

    def __init__(self, root_dir: Union[str, Path]):
        """
        Open the repository containing a directory.

        Args:
            root_dir: Directory inside a git working tree

        Raises:
            RepositoryError: If the directory is missing or not inside a work tree
        """
        self.root_dir = str(root_dir)
        try:
            self.repo = Repo(self.root_dir, search_parent_directories=True)
        except git.exc.NoSuchPathError as e:
            logger.error(f"Repository path does not exist: {self.root_dir}")
            raise RepositoryError(self.root_dir, "Directory does not exist") from e
        except git.exc.InvalidGitRepositoryError as e:
            logger.error(f"Not a git repository: {self.root_dir}")
            raise RepositoryError(self.root_dir, "Not a git repository") from e

        if self.repo.bare:
            self.repo.close()
            raise RepositoryError(self.root_dir, "Repository has no working tree")

        logger.debug(f"Opened repository {self.repo.working_tree_dir} for {self.root_dir}")

    def __enter__(self) -> "GitBackend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.repo.close()

    def _execute_git_command(self, command: str, *args: str) -> str:
        """
        Run a git subcommand in the work tree and return its stdout.

        Args:
            command: Git subcommand (e.g. 'diff', 'status')
            *args: Arguments for the subcommand

        Returns:
            Command output

        Raises:
            RepositoryError: If git exits non-zero
        """
        logger.debug(f"Executing git command in {self.repo.working_tree_dir}: git {command} {' '.join(args)}")
        try:
            return getattr(self.repo.git, command)(*args)
        except git.exc.GitCommandError as e:
            logger.error(f"git {command} failed in {self.root_dir}: {e.stderr.strip() if e.stderr else e}")
            raise RepositoryError(self.root_dir, f"git {command} failed") from e

    def status(self) -> RepositoryStatus:
        """Read the working tree status."""
        return parse_porcelain(self._execute_git_command("status", "--porcelain", "-z"))

    def diff_summary(self) -> DiffSummary:
        """Summarise unstaged changes with per-file line counts."""
        return parse_numstat(self._execute_git_command("diff", "--numstat", "-z"))

    def diff(self, paths: Optional[List[str]] = None) -> str:
        """
        Get the textual diff of the working tree.

        Args:
            paths: Restrict the diff to these paths (default: all changes)

        Returns:
            Unified diff text
        """
        args = ["--", *paths] if paths else []
        return self._execute_git_command("diff", *args)
