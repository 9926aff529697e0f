"""Data models for parsed git log history."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LogMode(Enum):
    """Which kind of history query produced the text."""

    FILE = "file"  # History of a single path (may follow renames)
    REPO = "repo"  # History of the whole repository


@dataclass(frozen=True)
class FileStatus:
    """A path touched by a commit and how it was changed."""

    status: str  # Single character: A, M, D, R, C, ...
    file_name: str


@dataclass
class ParseRecord:
    """Fields collected for one commit while scanning raw log text.

    Transient: records are discarded once the commit graph is built.
    """

    sha: str  # Full 40-character identifier
    author: str = ""
    author_date: str | None = None  # e.g. 2016-10-05T12:34:56+0200, not yet parsed
    summary: str = ""
    file_name: str = ""  # Single path, or comma-joined label of all touched paths
    status: str | None = None  # Single-path mode only
    file_statuses: list[FileStatus] | None = None  # Whole-history mode only


@dataclass(frozen=True)
class CommitLine:
    """A single changed line attributed to a commit."""

    sha: str
    line: int


@dataclass
class Commit:
    """A commit in the history chain, keyed by its short identifier."""

    repo_path: str
    sha: str
    file_name: str
    author: str
    date: datetime | None
    message: str
    type: LogMode
    status: str | None = None
    file_statuses: list[FileStatus] | None = None
    original_file_name: str | None = None
    previous_sha: str | None = None
    previous_file_name: str | None = None
    lines: list[CommitLine] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        """Number of changed lines attributed to this commit."""
        return len(self.lines)

    @property
    def is_renamed(self) -> bool:
        """Check if the subject had a different path in this commit."""
        return self.original_file_name is not None


@dataclass
class Author:
    """An author and the number of lines attributed to them."""

    name: str
    line_count: int = 0


@dataclass
class LogResult:
    """Complete parsed history: ranked authors and commits in input order."""

    repo_path: str
    authors: dict[str, Author]
    commits: dict[str, Commit]

    @property
    def is_empty(self) -> bool:
        """Check if the history contains no commits."""
        return len(self.commits) == 0
