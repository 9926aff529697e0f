"""LogResult serialization utilities."""

import json
from pathlib import Path

from .models import Commit, LogResult


def commit_to_dict(commit: Commit) -> dict:
    """Convert a commit to a JSON-ready dict."""
    return {
        "sha": commit.sha,
        "author": commit.author,
        "date": commit.date.isoformat() if commit.date else None,
        "message": commit.message,
        "type": commit.type.value,
        "repo_path": commit.repo_path,
        "file_name": commit.file_name,
        "original_file_name": commit.original_file_name,
        "status": commit.status,
        "file_statuses": (
            [{"status": s.status, "file_name": s.file_name} for s in commit.file_statuses]
            if commit.file_statuses is not None
            else None
        ),
        "previous_sha": commit.previous_sha,
        "previous_file_name": commit.previous_file_name,
        "line_count": commit.line_count,
    }


def result_to_dict(result: LogResult | None) -> dict:
    """
    Convert a LogResult to a JSON-ready dict.

    Authors keep their ranked order and commits their input order, since
    both are emitted as lists. An empty history (None) becomes an object
    with no authors or commits.
    """
    if result is None:
        return {"repo_path": None, "authors": [], "commits": []}
    return {
        "repo_path": result.repo_path,
        "authors": [
            {"name": author.name, "line_count": author.line_count}
            for author in result.authors.values()
        ],
        "commits": [commit_to_dict(commit) for commit in result.commits.values()],
    }


def write_result_file(file_path: Path, result: LogResult | None) -> None:
    """
    Write a LogResult as pretty-printed JSON.

    Args:
        file_path: Path to write the file
        result: Parsed history, or None for an empty history
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(result_to_dict(result), f, indent=2, ensure_ascii=False)
