"""Environment configuration interface for git-log-graph.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def git_binary() -> str:
        """Get the git executable used for history queries.

        Returns:
            Executable name or path, defaults to 'git'
        """
        return os.getenv("GIT_BINARY", "git")

    @staticmethod
    def git_log_timeout() -> int:
        """Get the timeout for a single git log invocation.

        Returns:
            Timeout in seconds, defaults to 300
        """
        return int(os.getenv("GIT_LOG_TIMEOUT", "300"))

    @staticmethod
    def git_log_max_count() -> int | None:
        """Get the maximum number of commits to request from git log.

        Returns:
            Commit limit, or None when unset (no limit)
        """
        value = os.getenv("GIT_LOG_MAX_COUNT")
        if not value:
            return None
        return int(value)


# Singleton instance for convenient access
env = Environment()
