"""Author ranking by attributed line count."""

from .models import Author, Commit


def count_lines(authors: dict[str, Author], commits: dict[str, Commit]) -> None:
    """Add every commit's line-change count to its author's total."""
    for commit in commits.values():
        authors[commit.author].line_count += commit.line_count


def rank_authors(authors: dict[str, Author]) -> list[tuple[str, Author]]:
    """
    Order authors by descending line count.

    The sort is stable, so authors with equal counts keep the order in
    which they were first seen. The input mapping is left untouched.

    Returns:
        List of (name, author) pairs, largest contributor first
    """
    return sorted(authors.items(), key=lambda item: item[1].line_count, reverse=True)
