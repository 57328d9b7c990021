"""Unit tests - diff parser (pure functions, zero I/O)."""

from domain_guard.core.application.services.diff_parser import (
    build_file_diff,
    parse_diff,
    parse_pr_diff,
)


class TestParseDiff:
    def test_splits_blocks_in_header_order(self, sample_diff: str) -> None:
        file_diffs = parse_diff(sample_diff)

        assert list(file_diffs) == ["app.py", "services/billing/invoice.py", "docs/readme.md"]

    def test_extracts_added_and_deleted_lines(self, sample_diff: str) -> None:
        app = parse_diff(sample_diff)["app.py"]

        assert app.added_lines == ('print("new")', "# TODO fix")
        assert app.deleted_lines == ('print("old")',)
        assert app.changed_lines == ('print("new")', "# TODO fix", 'print("old")')

    def test_raw_diff_spans_header_to_next_header(self, sample_diff: str) -> None:
        invoice = parse_diff(sample_diff)["services/billing/invoice.py"]

        assert invoice.raw_diff.startswith("diff --git a/services/billing/invoice.py")
        assert "diff --git a/docs/readme.md" not in invoice.raw_diff
        assert invoice.raw_diff.endswith("+    total = compute()")

    def test_last_block_keeps_trailing_newline(self, sample_diff: str) -> None:
        readme = parse_diff(sample_diff)["docs/readme.md"]

        assert readme.raw_diff.endswith("+Hello world\n")

    def test_empty_input_yields_empty_mapping(self) -> None:
        assert parse_diff("") == {}

    def test_text_before_first_header_is_ignored(self) -> None:
        assert parse_diff("From: someone\n+not a file\n-still not") == {}

    def test_header_without_body_is_dropped(self) -> None:
        raw = "diff --git a/x.py b/x.py\ndiff --git a/y.py b/y.py\n+added"

        file_diffs = parse_diff(raw)

        assert list(file_diffs) == ["y.py"]
        assert file_diffs["y.py"].added_lines == ("added",)

    def test_header_at_end_of_input_is_dropped(self) -> None:
        raw = "diff --git a/x.py b/x.py\n+a\ndiff --git a/y.py b/y.py"

        assert list(parse_diff(raw)) == ["x.py"]

    def test_renamed_file_is_keyed_by_new_path(self) -> None:
        raw = (
            "diff --git a/old_name.py b/new_name.py\n"
            "similarity index 90%\n"
            "rename from old_name.py\n"
            "rename to new_name.py\n"
        )

        assert list(parse_diff(raw)) == ["new_name.py"]

    def test_repeated_path_keeps_last_block(self) -> None:
        raw = "diff --git a/x.py b/x.py\n+first\ndiff --git a/x.py b/x.py\n+second"

        file_diffs = parse_diff(raw)

        assert len(file_diffs) == 1
        assert file_diffs["x.py"].added_lines == ("second",)


class TestBuildFileDiff:
    def test_file_headers_never_reach_line_lists(self) -> None:
        raw = "--- a/f.txt\n+++ b/f.txt\n@@ -1 +1 @@\n-gone\n+here"

        file_diff = build_file_diff("f.txt", raw)

        assert file_diff.added_lines == ("here",)
        assert file_diff.deleted_lines == ("gone",)
        assert all(not line.startswith(("++", "--")) for line in file_diff.changed_lines)

    def test_only_single_marker_is_stripped(self) -> None:
        file_diff = build_file_diff("f.txt", "++plus\n-- dashes")

        assert file_diff.added_lines == ("+plus",)
        assert file_diff.deleted_lines == ("- dashes",)

    def test_changed_count_is_sum_of_added_and_deleted(self, sample_diff: str) -> None:
        for file_diff in parse_diff(sample_diff).values():
            assert len(file_diff.changed_lines) == (
                len(file_diff.added_lines) + len(file_diff.deleted_lines)
            )
            assert file_diff.changed_lines == file_diff.added_lines + file_diff.deleted_lines


class TestParsePrDiff:
    def test_keeps_full_text_and_totals(self, sample_diff: str) -> None:
        pr_diff = parse_pr_diff(sample_diff)

        assert pr_diff.full_diff == sample_diff
        assert pr_diff.file_paths() == ["app.py", "services/billing/invoice.py", "docs/readme.md"]
        assert pr_diff.total_added_count() == 4
        assert pr_diff.total_deleted_count() == 3
        assert pr_diff.total_changed_count() == 7

    def test_summary_lists_each_file(self, sample_diff: str) -> None:
        summary = parse_pr_diff(sample_diff).summary()

        assert summary["file_count"] == 3
        assert summary["files"][0] == {
            "file_path": "app.py",
            "added_count": 2,
            "deleted_count": 1,
            "changed_count": 3,
        }

    def test_get_file_diff_returns_none_for_unknown_path(self, sample_diff: str) -> None:
        pr_diff = parse_pr_diff(sample_diff)

        assert pr_diff.get_file_diff("missing.py") is None
        assert pr_diff.get_file_diff("app.py") is not None
