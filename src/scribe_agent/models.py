"""Data models for tool requests, git summaries and tool results."""

from typing import Any, List, Literal, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CommitType = Literal[
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
]

DEFAULT_COMMIT_TYPE = "chore"
DEFAULT_MAX_SUBJECT_LENGTH = 72


class FileDiff(BaseModel):
    """Diff text for a single changed file."""

    file: str
    diff: str


class DiffSummaryEntry(BaseModel):
    """One file from a diff summary.

    Binary files carry no line statistics, so both counts are optional.
    Renames keep the previous path in from_file.
    """

    file: str
    from_file: Optional[str] = None
    insertions: Optional[int] = None
    deletions: Optional[int] = None
    binary: bool = False

    @property
    def paths(self) -> List[str]:
        """Paths to restrict a diff to; both sides for a rename."""
        return [self.from_file, self.file] if self.from_file else [self.file]

    @property
    def insertion_count(self) -> int:
        return self.insertions or 0

    @property
    def deletion_count(self) -> int:
        return self.deletions or 0


class DiffSummary(BaseModel):
    """Files changed in the working tree, in git's output order."""

    files: List[DiffSummaryEntry] = Field(default_factory=list)

    @property
    def changed(self) -> int:
        return len(self.files)


class RenamedFile(BaseModel):
    """A rename recorded in the working tree status."""

    from_path: str
    to_path: str


class RepositoryStatus(BaseModel):
    """Snapshot of the working tree status, bucketed by change kind."""

    created: List[str] = Field(default_factory=list)
    modified: List[str] = Field(default_factory=list)
    deleted: List[str] = Field(default_factory=list)
    renamed: List[RenamedFile] = Field(default_factory=list)
    not_added: List[str] = Field(default_factory=list)


class CommitMessage(BaseModel):
    """Conventional commit message split into subject and body lines."""

    subject: str
    body: List[str] = Field(default_factory=list)

    @property
    def message(self) -> str:
        return "\n".join([self.subject, *self.body])


class FileChangesRequest(BaseModel):
    """Arguments for listing file changes."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    root_dir: str = Field(alias="rootDir", min_length=1, description="The root directory")


class CommitMessageRequest(BaseModel):
    """Arguments for composing a conventional commit message."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    root_dir: str = Field(alias="rootDir", min_length=1, description="Repository root directory")
    type: CommitType = Field(default=DEFAULT_COMMIT_TYPE, description="Conventional commit type")
    scope: Optional[str] = Field(default=None, description="Optional scope for the commit")
    max_subject_length: int = Field(
        default=DEFAULT_MAX_SUBJECT_LENGTH,
        alias="maxSubjectLength",
        gt=0,
        description="Max subject length",
    )


class MarkdownFileRequest(BaseModel):
    """Arguments for writing a markdown file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    file_path: str = Field(
        alias="filePath", min_length=1, description="Absolute or relative path to .md file"
    )
    content: str = Field(default="", description="Markdown content to write")
    overwrite: bool = Field(default=False, description="Overwrite if file exists")


class MarkdownWriteResult(BaseModel):
    """Outcome of a markdown write."""

    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath")
    bytes_written: int = Field(alias="bytesWritten")


class InputErrorDetail(BaseModel):
    """A single argument that failed validation."""

    field: str
    message: str


class InvalidInput(BaseModel):
    """Structured validation failure returned instead of running a tool."""

    tool: str
    errors: List[InputErrorDetail]

    @classmethod
    def from_validation_error(cls, tool: str, error: ValidationError) -> "InvalidInput":
        details = [
            InputErrorDetail(
                field=".".join(str(part) for part in item["loc"]) or "<input>",
                message=item["msg"],
            )
            for item in error.errors()
        ]
        return cls(tool=tool, errors=details)


RequestT = TypeVar("RequestT", bound=BaseModel)


def parse_request(
    tool: str, model: Type[RequestT], arguments: Mapping[str, Any]
) -> Union[RequestT, InvalidInput]:
    """
    Validate tool arguments into a request model.

    Args:
        tool: Tool name, reported back on failure
        model: Request model class
        arguments: Raw arguments keyed by field name or alias

    Returns:
        The validated request, or an InvalidInput describing every failing field
    """
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as e:
        return InvalidInput.from_validation_error(tool, e)
