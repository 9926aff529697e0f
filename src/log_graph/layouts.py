"""Trailing-block grammars for the two git log record layouts.

Every record ends with a ``filename`` line followed by a block that lists
the paths the commit touched. The shape of that block depends on whether
the query targeted the whole repository or a single path, so each shape
is a separate layout object with the same ``consume`` contract.
"""

import re

from common.constants import is_sha

from .models import FileStatus, LogMode, ParseRecord


class LineCursor:
    """Forward cursor over log lines with one line of lookahead."""

    def __init__(self, lines: list[str]):
        self._lines = lines
        self._position = -1

    def __iter__(self):
        return self

    def __next__(self) -> str:
        self._position += 1
        if self._position >= len(self._lines):
            self._position = len(self._lines)
            raise StopIteration
        return self._lines[self._position]

    def peek(self) -> str | None:
        """Return the next line without consuming it, or None at the end."""
        if self._position + 1 >= len(self._lines):
            return None
        return self._lines[self._position + 1]

    def skip(self, count: int = 1) -> None:
        """Consume up to ``count`` lines without looking at them."""
        self._position = min(self._position + count, len(self._lines))

    def at_record_boundary(self) -> bool:
        """Check if the next line opens a new commit record."""
        line = self.peek()
        return line is not None and starts_record(line)


def split_fields(line: str) -> list[str]:
    """Split a log line into fields.

    Fields are separated by single spaces only; a tab stays inside its
    field, which is how name-status lines (``M\\tpath``) stay one field.
    """
    return line.split(" ")


def starts_record(line: str) -> bool:
    """Check if a line's first field is a full commit identifier."""
    return is_sha(split_fields(line)[0])


NAME_STATUS_PATTERN = re.compile(r"^[A-Z][0-9]*\t")


def is_name_status_line(line: str) -> bool:
    """Check if a line is a git name-status entry (``M\\tpath``, ``R100\\told\\tnew``)."""
    return bool(NAME_STATUS_PATTERN.match(line))


def parse_status_field(value: str) -> FileStatus:
    """Decode a ``<kind><sep><path>`` field into a FileStatus.

    The kind is the first character and the path starts at offset 2.
    Rename and copy entries (``R100\\told\\tnew``) resolve to the new path.
    """
    file_name = value[2:]
    if "\t" in file_name:
        file_name = file_name.rsplit("\t", 1)[-1]
    return FileStatus(status=value[:1], file_name=file_name)


class WholeHistoryLayout:
    """Variable-length block: one name-status line per touched path.

    The block runs until the next line that opens a record; that line is
    left unconsumed for the scanner. Blank lines inside the block are skipped.
    """

    mode = LogMode.REPO

    def consume(self, cursor: LineCursor) -> list[FileStatus]:
        """Consume the block after ``filename`` and return its entries.

        Name-status lines are taken whole, so paths may contain spaces.

        Returns:
            The touched paths; empty for a commit that changed nothing
        """
        statuses: list[FileStatus] = []
        while cursor.peek() is not None and not cursor.at_record_boundary():
            line = next(cursor)
            if is_name_status_line(line):
                statuses.append(parse_status_field(line))
                continue
            field = split_fields(line)[0]
            if field:
                statuses.append(parse_status_field(field))

        return statuses

    def fill(self, record: ParseRecord, statuses: list[FileStatus]) -> None:
        """Store every touched path and the comma-joined path label."""
        record.file_statuses = statuses
        record.file_name = ", ".join(s.file_name for s in statuses if s.file_name)


class SinglePathLayout:
    """Fixed-offset block: the subject's status sits two lines below ``filename``.

    Two shapes are accepted. A name-status line (or any single-field line)
    is a direct entry, taken whole so the path may contain spaces. A wider
    line carries the kind and path in its fourth field, after two numeric
    change-magnitude columns, and is followed by four more lines belonging
    to the record.
    """

    mode = LogMode.FILE

    WIDE_FIELD_INDEX = 3
    WIDE_TRAILING_LINES = 4

    def consume(self, cursor: LineCursor) -> list[FileStatus] | None:
        """Consume the block after ``filename`` and return the subject's entry.

        Returns:
            A one-element list, or None when the block is malformed
        """
        cursor.skip(1)
        line = next(cursor, None)
        if line is None:
            return None

        fields = split_fields(line)
        if is_name_status_line(line) or len(fields) == 1:
            entry = parse_status_field(line)
        elif len(fields) > self.WIDE_FIELD_INDEX:
            entry = parse_status_field(fields[self.WIDE_FIELD_INDEX])
            cursor.skip(self.WIDE_TRAILING_LINES)
        else:
            return None

        if not entry.file_name:
            return None
        return [entry]

    def fill(self, record: ParseRecord, statuses: list[FileStatus]) -> None:
        record.status = statuses[0].status
        record.file_name = statuses[0].file_name


Layout = WholeHistoryLayout | SinglePathLayout


def layout_for(mode: LogMode) -> Layout:
    """Pick the trailing-block layout for a query mode."""
    if mode is LogMode.REPO:
        return WholeHistoryLayout()
    return SinglePathLayout()
