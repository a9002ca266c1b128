"""Conventional commit message composition from working tree summaries."""

from typing import Dict, List, Optional

from scribe_agent.models import CommitMessage, DiffSummary, RepositoryStatus

ROOT_AREA = "root"
ELLIPSIS = "…"


def top_level_area(path: str) -> str:
    """Return the leading path segment, or the root area for top-level files."""
    head, separator, _ = path.partition("/")
    if not separator or not head:
        return ROOT_AREA
    return head


def derive_scope(summary: DiffSummary) -> Optional[str]:
    """
    Pick the most frequently changed top-level area as the commit scope.

    Ties go to the area encountered first. Top-level files count towards the
    root area, which never becomes a scope.

    Args:
        summary: Diff summary of the working tree

    Returns:
        Scope name, or None when no area qualifies
    """
    counts: Dict[str, int] = {}
    for entry in summary.files:
        area = top_level_area(entry.file)
        counts[area] = counts.get(area, 0) + 1

    scope = None
    highest = 0
    for area, count in counts.items():
        if count > highest:
            highest = count
            scope = None if area == ROOT_AREA else area

    return scope


def _pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count > 1 else ''}"


def describe_changes(status: RepositoryStatus) -> str:
    """Summarise status buckets as e.g. '1 new file, 2 updates'."""
    parts = []
    if status.created:
        parts.append(_pluralize(len(status.created), "new file"))
    if status.modified:
        parts.append(_pluralize(len(status.modified), "update"))
    if status.deleted:
        parts.append(_pluralize(len(status.deleted), "deletion"))
    if status.renamed:
        parts.append(_pluralize(len(status.renamed), "rename"))

    return ", ".join(parts) or "update files"


def compose_subject(
    commit_type: str, scope: Optional[str], description: str, max_length: int
) -> str:
    """
    Build the subject line, truncating with an ellipsis past max_length.

    Args:
        commit_type: Conventional commit type
        scope: Optional scope, omitted when empty
        description: Change description
        max_length: Maximum subject length (positive)

    Returns:
        Subject line no longer than max_length
    """
    scope_part = f"({scope})" if scope else ""
    subject = f"{commit_type}{scope_part}: {description}".strip()
    if len(subject) > max_length:
        subject = subject[: max_length - 1] + ELLIPSIS
    return subject


def compose_body(
    status: RepositoryStatus, summary: DiffSummary, file_limit: int = 50
) -> List[str]:
    """
    Build body lines: a per-file change summary and the list of renames.

    The first line is always blank, separating the body from the subject.

    Args:
        status: Working tree status
        summary: Diff summary
        file_limit: Maximum number of files listed individually

    Returns:
        Body lines
    """
    lines = [""]

    if summary.files:
        lines.append("Summary of changes:")
        for entry in summary.files[:file_limit]:
            lines.append(f"- {entry.file} (+{entry.insertion_count}/-{entry.deletion_count})")
        if summary.changed > file_limit:
            lines.append(f"- {ELLIPSIS}and {summary.changed - file_limit} more files")

    if status.renamed:
        lines.append("")
        lines.append("Renamed files:")
        for rename in status.renamed:
            lines.append(f"- {rename.from_path} → {rename.to_path}")

    return lines


def build_commit_message(
    status: RepositoryStatus,
    summary: DiffSummary,
    commit_type: str = "chore",
    scope: Optional[str] = None,
    max_subject_length: int = 72,
    file_limit: int = 50,
) -> CommitMessage:
    """
    Compose a conventional commit message for the working tree.

    Args:
        status: Working tree status
        summary: Diff summary
        commit_type: Conventional commit type
        scope: Explicit scope; derived from the changed paths when empty
        max_subject_length: Maximum subject length
        file_limit: Maximum number of files listed in the body

    Returns:
        CommitMessage
    """
    if not scope and summary.files:
        scope = derive_scope(summary)

    subject = compose_subject(commit_type, scope, describe_changes(status), max_subject_length)
    return CommitMessage(subject=subject, body=compose_body(status, summary, file_limit))
