"""Parse git log output into a graph of commits and authors."""

from .enricher import parse_log
from .models import Author, Commit, CommitLine, FileStatus, LogMode, LogResult, ParseRecord

__all__ = [
    "Author",
    "Commit",
    "CommitLine",
    "FileStatus",
    "LogMode",
    "LogResult",
    "ParseRecord",
    "parse_log",
]
