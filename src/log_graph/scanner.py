"""Segment raw git log text into per-commit parse records."""

from collections.abc import Callable

from common.constants import (
    KEYWORD_AUTHOR,
    KEYWORD_AUTHOR_DATE,
    KEYWORD_FILENAME,
    KEYWORD_SUMMARY,
    UNCOMMITTED_AUTHOR,
    is_sha,
    is_uncommitted as is_uncommitted_sha,
)
from common.logger import get_logger

from .layouts import Layout, LineCursor, split_fields
from .models import ParseRecord

logger = get_logger(__name__)


def parse_records(
    data: str,
    layout: Layout,
    is_uncommitted: Callable[[str], bool] = is_uncommitted_sha,
) -> list[ParseRecord] | None:
    """
    Scan log text and return one record per commit, in input order.

    A record opens on a line whose first field is a full 40-character
    identifier and closes on its ``filename`` line, after the layout has
    consumed the trailing block of touched paths. Lines with fewer than
    two fields, and unknown keywords, are ignored.

    Args:
        data: Complete captured output of the history query
        layout: Trailing-block grammar matching the query mode
        is_uncommitted: Recognizes the uncommitted pseudo-identifier

    Returns:
        Records in input order, or None if the text holds no records
    """
    if not data:
        return None

    cursor = LineCursor([line.rstrip("\r") for line in data.split("\n")])
    records: list[ParseRecord] = []
    record: ParseRecord | None = None

    for line in cursor:
        fields = split_fields(line)
        if len(fields) < 2:
            continue

        if record is None:
            if is_sha(fields[0]):
                record = ParseRecord(sha=fields[0])
            continue

        keyword = fields[0]
        if keyword == KEYWORD_AUTHOR:
            if is_uncommitted(record.sha):
                record.author = UNCOMMITTED_AUTHOR
            else:
                record.author = " ".join(fields[1:]).strip()

        elif keyword == KEYWORD_AUTHOR_DATE:
            if len(fields) >= 4:
                record.author_date = f"{fields[1]}T{fields[2]}{fields[3]}"

        elif keyword == KEYWORD_SUMMARY:
            record.summary = " ".join(fields[1:]).strip()

        elif keyword == KEYWORD_FILENAME:
            statuses = layout.consume(cursor)
            if statuses is None:
                logger.warning(
                    f"Dropping commit {record.sha[:8]}: trailing file block is malformed"
                )
            else:
                layout.fill(record, statuses)
                records.append(record)
            record = None

    logger.debug(f"Scanned {len(records)} commit records")
    return records or None
