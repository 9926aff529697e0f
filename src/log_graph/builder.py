"""Build the commit and author graph from parse records."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from functools import reduce

from common.constants import SHORT_SHA_LENGTH
from common.logger import get_logger

from .dates import parse_author_date
from .models import Author, Commit, CommitLine, LogMode, LogResult, ParseRecord
from .paths import resolve_paths
from .ranking import count_lines, rank_authors

logger = get_logger(__name__)

LinesProvider = Callable[[str, str], list[CommitLine]]
DateParser = Callable[[str | None], datetime | None]


@dataclass(frozen=True)
class GraphState:
    """Accumulator threaded through the fold over parse records."""

    commits: dict[str, Commit] = field(default_factory=dict)
    authors: dict[str, Author] = field(default_factory=dict)
    repo_path: str = ""
    relative_file_name: str = ""
    recent: Commit | None = None


def _build_commit(
    state: GraphState,
    record: ParseRecord,
    mode: LogMode,
    parse_date: DateParser,
    lines_for: LinesProvider | None,
) -> Commit:
    if record.author not in state.authors:
        state.authors[record.author] = Author(name=record.author)

    sha = record.sha[:SHORT_SHA_LENGTH]
    commit = Commit(
        repo_path=state.repo_path,
        sha=sha,
        file_name=state.relative_file_name,
        author=record.author,
        date=parse_date(record.author_date),
        message=record.summary,
        type=mode,
        status=record.status,
        file_statuses=record.file_statuses,
    )

    # Subject was known under another path in this commit
    if state.relative_file_name != record.file_name:
        commit.original_file_name = record.file_name

    if lines_for is not None:
        commit.lines = lines_for(sha, record.file_name)
    return commit


def _link(recent: Commit | None, commit: Commit, mode: LogMode) -> None:
    if recent is None or recent is commit:
        return
    recent.previous_sha = commit.sha
    if mode is LogMode.FILE:
        recent.previous_file_name = commit.original_file_name or commit.file_name


def build_graph(
    records: Iterable[ParseRecord],
    mode: LogMode,
    file_name_or_repo_path: str,
    parse_date: DateParser = parse_author_date,
    lines_for: LinesProvider | None = None,
) -> LogResult:
    """
    Fold parse records (newest first) into a linked commit graph.

    Each commit is linked to the next record's commit as its predecessor;
    in FILE mode the predecessor's path is carried along so renames can be
    followed backward. A repeated identifier reuses the first commit built
    for it.

    Args:
        records: Parse records in input order
        mode: Query mode the records were produced with
        file_name_or_repo_path: Queried file path (FILE) or repository root (REPO)
        parse_date: Turns a record's raw author date into a datetime
        lines_for: Optional provider of changed lines for (short sha, path)

    Returns:
        LogResult with the resolved repository root
    """
    if mode is LogMode.REPO:
        initial = GraphState(repo_path=file_name_or_repo_path)
    else:
        initial = GraphState()

    def step(state: GraphState, indexed: tuple[int, ParseRecord]) -> GraphState:
        index, record = indexed

        if index == 0 or mode is LogMode.REPO:
            repo_path, relative_file_name = resolve_paths(
                mode, file_name_or_repo_path, record.file_name
            )
            state = replace(state, repo_path=repo_path, relative_file_name=relative_file_name)

        commit = state.commits.get(record.sha[:SHORT_SHA_LENGTH])
        if commit is None:
            commit = _build_commit(state, record, mode, parse_date, lines_for)
            state.commits[commit.sha] = commit

        _link(state.recent, commit, mode)
        return replace(state, recent=commit)

    final = reduce(step, enumerate(records), initial)

    count_lines(final.authors, final.commits)
    authors = dict(rank_authors(final.authors))

    logger.debug(f"Built {len(final.commits)} commits by {len(authors)} authors")
    return LogResult(repo_path=final.repo_path, authors=authors, commits=final.commits)
