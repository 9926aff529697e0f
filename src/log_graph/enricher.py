"""Turn captured git log text into a LogResult."""

from collections.abc import Callable

from common.constants import is_uncommitted as is_uncommitted_sha
from common.logger import get_logger

from .builder import DateParser, LinesProvider, build_graph
from .dates import parse_author_date
from .layouts import layout_for
from .models import LogMode, LogResult
from .scanner import parse_records

logger = get_logger(__name__)


def parse_log(
    data: str,
    mode: LogMode,
    file_name_or_repo_path: str,
    is_uncommitted: Callable[[str], bool] = is_uncommitted_sha,
    parse_date: DateParser = parse_author_date,
    lines_for: LinesProvider | None = None,
) -> LogResult | None:
    """
    Parse the output of a history query into commits and ranked authors.

    Args:
        data: Complete captured output, formatted per common.constants.LOG_FORMAT
        mode: FILE for a single-path history, REPO for a whole-repository history
        file_name_or_repo_path: Absolute path of the queried file (FILE) or
            the repository root (REPO)
        is_uncommitted: Recognizes the uncommitted pseudo-identifier
        parse_date: Turns a raw author date into a datetime
        lines_for: Optional provider of changed lines per commit

    Returns:
        LogResult, or None when the text holds no commits (empty history)
    """
    records = parse_records(data, layout_for(mode), is_uncommitted=is_uncommitted)
    if not records:
        logger.debug("No commit records found; treating history as empty")
        return None

    return build_graph(
        records,
        mode,
        file_name_or_repo_path,
        parse_date=parse_date,
        lines_for=lines_for,
    )
