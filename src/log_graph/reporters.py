"""Log result reporters."""

import json

from rich.markup import escape

from common.logger import get_logger

from .log_io import result_to_dict
from .models import LogResult

logger = get_logger(__name__)


class LogReporter:
    """Format and display parsed history."""

    def __init__(self, show_commits: bool = True):
        """Initialize the reporter.

        Args:
            show_commits: Whether to list every commit after the authors
        """
        self.show_commits = show_commits

    def report_console(self, result: LogResult | None) -> int:
        """Print the ranked authors and the commit chain to the console.

        Args:
            result: Parsed history, or None for an empty history

        Returns:
            Exit code (always 0; an empty history is not an error)
        """
        if result is None or result.is_empty:
            logger.info("No commits found")
            return 0

        logger.info(f"Repository: [bold]{escape(result.repo_path)}[/bold]")
        logger.info("\nAuthors:")
        for author in result.authors.values():
            logger.info(f"  {escape(author.name)} ([bold]{author.line_count}[/bold] lines)")

        if self.show_commits:
            logger.info("\nCommits:")
            for commit in result.commits.values():
                date = commit.date.strftime("%Y-%m-%d") if commit.date else "?"
                logger.info(f"  [bold]{commit.sha}[/bold] {date} {escape(commit.author)}: {escape(commit.message)}")
                if commit.is_renamed:
                    logger.info(f"      as {escape(commit.original_file_name)}")
                if commit.previous_sha:
                    previous = commit.previous_sha
                    if commit.previous_file_name:
                        previous += f" ({escape(commit.previous_file_name)})"
                    logger.info(f"      previous: {previous}")

        logger.info("\n" + "=" * 60)
        logger.info(
            f"Total: [bold]{len(result.commits)}[/bold] commits, [bold]{len(result.authors)}[/bold] authors"
        )
        return 0

    def report_json(self, result: LogResult | None) -> str:
        """Format the result as JSON.

        Args:
            result: Parsed history, or None for an empty history

        Returns:
            JSON string; an empty history is an object with no authors or commits
        """
        return json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)
