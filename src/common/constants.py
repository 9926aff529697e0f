"""Shared constants for git-log-graph.

For environment-based configuration (git binary, timeouts, etc.), use the env module:
    from common.env import env
    timeout = env.git_log_timeout()
"""

import re

# Full commit identifier; the only anchor that opens a record
SHA_PATTERN = re.compile(r"^[a-f0-9]{40}$")

# Git reports working-tree changes under an all-zero identifier
UNCOMMITTED_PATTERN = re.compile(r"^0+$")
UNCOMMITTED_AUTHOR = "Uncommitted"

SHORT_SHA_LENGTH = 8

# Record format consumed by log_graph.scanner (see log_graph.history_query)
LOG_FORMAT = "%H -%nauthor %an%nauthor-date %ai%nsummary %s%nfilename ?"

# Leading keywords recognized while a record is open
KEYWORD_AUTHOR = "author"
KEYWORD_AUTHOR_DATE = "author-date"
KEYWORD_SUMMARY = "summary"
KEYWORD_FILENAME = "filename"


def is_sha(value: str) -> bool:
    """Check whether a field is a full 40-character commit identifier."""
    return bool(SHA_PATTERN.match(value))


def is_uncommitted(sha: str) -> bool:
    """Check whether an identifier denotes the uncommitted pseudo-commit."""
    return bool(UNCOMMITTED_PATTERN.match(sha))
