"""Repository root and relative subject path resolution."""

import os

from .models import LogMode


def repo_path_from_file(file_name: str, relative_file_name: str) -> str:
    """
    Derive the repository root by removing the subject's relative path.

    e.g. ('/repo/src/a.ts', 'src/a.ts') -> '/repo'

    Args:
        file_name: Path the history was queried for
        relative_file_name: The subject's path as recorded by the newest commit

    Returns:
        Repository root (empty when file_name is itself the relative path)
    """
    needle = f"/{relative_file_name}" if file_name.startswith("/") else relative_file_name
    return file_name.replace(needle, "", 1)


def relative_to_repo(repo_path: str, file_name: str) -> str:
    """Relative path from repo_path to file_name, always with forward slashes."""
    return os.path.relpath(file_name, repo_path or os.curdir).replace("\\", "/")


def resolve_paths(
    mode: LogMode,
    file_name_or_repo_path: str,
    record_file_name: str,
) -> tuple[str, str]:
    """
    Resolve the repository root and the subject path relative to it.

    Args:
        mode: Query mode the history was produced with
        file_name_or_repo_path: Queried file path (FILE) or repository root (REPO)
        record_file_name: Path recorded by the record being resolved

    Returns:
        Tuple of (repo_path, relative_file_name)
    """
    if mode is LogMode.REPO:
        return file_name_or_repo_path, record_file_name

    repo_path = repo_path_from_file(file_name_or_repo_path, record_file_name)
    return repo_path, relative_to_repo(repo_path, file_name_or_repo_path)
