"""Author date construction."""

from datetime import datetime

from common.logger import get_logger

logger = get_logger(__name__)

AUTHOR_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def parse_author_date(raw: str | None) -> datetime | None:
    """
    Turn a concatenated author-date string into a timezone-aware datetime.

    Accepts the ``<date>T<time><offset>`` string the scanner builds from
    ``author-date 2016-10-05 12:34:56 +0200``.

    Args:
        raw: Concatenated date string, or None when the record had none

    Returns:
        Parsed datetime, or None if the string is missing or unparsable
    """
    if not raw:
        return None
    try:
        return datetime.strptime(raw, AUTHOR_DATE_FORMAT)
    except ValueError:
        logger.debug(f"Unparsable author date: {raw!r}")
        return None
