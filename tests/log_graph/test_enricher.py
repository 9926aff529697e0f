"""End-to-end tests for parse_log."""

from log_graph import LogMode, parse_log
from log_graph.models import CommitLine

SHA_1 = "1111111122222222333333334444444455555555"
SHA_2 = "aaaaaaaabbbbbbbbccccccccddddddddeeeeeeee"
SHA_3 = "0123456789abcdef0123456789abcdef01234567"
UNCOMMITTED = "0" * 40


def log_record(sha, author, summary, *status_lines, date="2016-10-05 12:34:56 +0200"):
    lines = [
        f"{sha} -",
        f"author {author}",
        f"author-date {date}",
        f"summary {summary}",
        "filename ?",
        "",
        *status_lines,
    ]
    return "\n".join(lines) + "\n"


class TestEmptyHistory:
    """No records means no result, not an error."""

    def test_empty_text(self):
        assert parse_log("", LogMode.REPO, "/repo") is None

    def test_text_without_records(self):
        assert parse_log("fatal: not a git repository\n", LogMode.FILE, "/repo/a.ts") is None


class TestScenarios:
    """Typical histories."""

    def test_whole_history_two_commits(self):
        data = log_record(SHA_1, "Alice", "Second", "M\tsrc/a.ts") + log_record(
            SHA_2, "Bob", "First", "M\tsrc/b.ts"
        )
        result = parse_log(data, LogMode.REPO, "/repo")

        assert result.repo_path == "/repo"
        assert list(result.commits) == ["11111111", "aaaaaaaa"]
        assert set(result.authors) == {"Alice", "Bob"}
        assert [c.author for c in result.commits.values()] == ["Alice", "Bob"]

    def test_single_path_commit(self):
        data = log_record(SHA_1, "Alice", "Add a", "A\tsrc/a.ts")
        result = parse_log(data, LogMode.FILE, "/repo/src/a.ts")
        commit = result.commits["11111111"]

        assert result.repo_path == "/repo"
        assert commit.file_name == "src/a.ts"
        assert commit.original_file_name is None
        assert commit.status == "A"
        assert commit.type is LogMode.FILE

    def test_uncommitted_first_record(self):
        data = log_record(UNCOMMITTED, "Not Committed Yet", "Uncommitted changes", "M\tsrc/a.ts")
        data += log_record(SHA_1, "Alice", "Add a", "A\tsrc/a.ts")
        result = parse_log(data, LogMode.FILE, "/repo/src/a.ts")

        assert result.commits["00000000"].author == "Uncommitted"
        assert "Uncommitted" in result.authors
        assert result.commits["00000000"].previous_sha == "11111111"


class TestProperties:
    """Invariants that hold for any parsed history."""

    def history(self):
        return (
            log_record(SHA_1, "Alice", "Edit", "M\tsrc/a.ts")
            + log_record(SHA_2, "Bob", "Move", "R100\tlib/a.ts\tsrc/a.ts")
            + log_record(SHA_3, "Alice", "Create", "A\tlib/a.ts")
            + log_record(SHA_1, "Alice", "Edit", "M\tsrc/a.ts")
        )

    def test_identifiers_unique(self):
        result = parse_log(self.history(), LogMode.FILE, "/repo/src/a.ts")
        shas = [c.sha for c in result.commits.values()]
        assert len(shas) == len(set(shas)) == 3

    def test_predecessor_chain_follows_renames(self):
        result = parse_log(self.history(), LogMode.FILE, "/repo/src/a.ts")
        edit, move, create = (result.commits[k] for k in ("11111111", "aaaaaaaa", "01234567"))

        assert create.original_file_name == "lib/a.ts"
        assert edit.previous_sha == move.sha
        assert edit.previous_file_name == "src/a.ts"
        assert move.previous_sha == create.sha
        assert move.previous_file_name == "lib/a.ts"

    def test_author_counts_match_commits(self):
        counts = {"11111111": 2, "aaaaaaaa": 7, "01234567": 4}
        result = parse_log(
            self.history(),
            LogMode.FILE,
            "/repo/src/a.ts",
            lines_for=lambda sha, _: [CommitLine(sha, i) for i in range(counts[sha])],
        )

        for author in result.authors.values():
            expected = sum(c.line_count for c in result.commits.values() if c.author == author.name)
            assert author.line_count == expected

        ranked = [a.line_count for a in result.authors.values()]
        assert ranked == sorted(ranked, reverse=True)
        assert list(result.authors) == ["Bob", "Alice"]
