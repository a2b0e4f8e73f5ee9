"""Tests for matching-line previews and their highlighting."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from findword.ansi import strip_ansi
from findword.highlight import highlight_lines, normalize_style, sanitize_terminal_text
from findword.preview import HitLine, find_hit_lines, render_file_preview, render_previews
from findword.search import FileRecord, SearchResult
from findword.ui_theme import DEFAULT_THEME


class FindHitLinesTests(unittest.TestCase):
    def test_lists_each_line_with_first_column(self) -> None:
        source = "alpha\nxx hello hello\n\nhello\n"
        hits = find_hit_lines(source, Path("a.txt"), "hello")
        self.assertEqual(
            hits,
            [
                HitLine(Path("a.txt"), 2, 4, "xx hello hello"),
                HitLine(Path("a.txt"), 4, 1, "hello"),
            ],
        )

    def test_line_numbers_count_newlines_only(self) -> None:
        source = "x = 1\x0c\nkeyword = 2\u2028tail\r\nother = 3\n"
        hits = find_hit_lines(source, Path("a.py"), "keyword")
        self.assertEqual(hits, [HitLine(Path("a.py"), 2, 1, "keyword = 2\u2028tail")])

    def test_respects_line_limit_and_empty_term(self) -> None:
        source = "hit\n" * 10
        self.assertEqual(len(find_hit_lines(source, Path("a.txt"), "hit", max_lines=3)), 3)
        self.assertEqual(find_hit_lines(source, Path("a.txt"), ""), [])

    def test_long_lines_are_truncated(self) -> None:
        line = "hit" + "x" * 400
        hit = find_hit_lines(line, Path("a.txt"), "hit")[0]
        self.assertEqual(len(hit.preview), 220)
        self.assertTrue(hit.preview.endswith("..."))


class RenderPreviewTests(unittest.TestCase):
    def test_plain_rows_use_location_prefix(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.md"
            target.write_text("intro\nthe hello line\x07\n", encoding="utf-8")

            rows = render_file_preview(target, "hello")

            self.assertEqual(rows, [f"{target}:2:5: the hello line\\x07"])

    def test_colored_rows_strip_back_to_plain_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "demo.py"
            target.write_text("import os\nvalue = 'hello'\n", encoding="utf-8")

            rows = render_file_preview(target, "hello", theme=DEFAULT_THEME)

            self.assertEqual(len(rows), 1)
            self.assertIn("\033[", rows[0])
            self.assertEqual(strip_ansi(rows[0]), f"{target}:2:10: value = 'hello'")

    def test_form_feed_before_hit_keeps_line_number_and_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a.py"
            target.write_text("x = 1\x0c\nkeyword = 2\nother = 3\n", encoding="utf-8")

            plain_rows = render_file_preview(target, "keyword")
            colored_rows = render_file_preview(target, "keyword", theme=DEFAULT_THEME)

            self.assertEqual(plain_rows, [f"{target}:2:1: keyword = 2"])
            self.assertEqual([strip_ansi(row) for row in colored_rows], [f"{target}:2:1: keyword = 2"])

    def test_rows_are_clipped_to_width(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a.txt"
            target.write_text("hello " * 40, encoding="utf-8")
            rows = render_file_preview(target, "hello", width=30)
            self.assertEqual(len(rows[0]), 30)

    def test_unreadable_files_render_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(render_file_preview(Path(tmp) / "missing.txt", "hello"), [])

    def test_render_previews_follows_result_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            first = Path(tmp) / "b.txt"
            second = Path(tmp) / "a.txt"
            first.write_text("hello", encoding="utf-8")
            second.write_text("hello", encoding="utf-8")
            result = SearchResult(files=(FileRecord(first, 1), FileRecord(second, 1)))

            text = render_previews(result, "hello")

            self.assertEqual(text.split("\n"), [f"{first}:1:1: hello", f"{second}:1:1: hello"])


class HighlightTests(unittest.TestCase):
    def test_sanitize_escapes_control_bytes_but_keeps_whitespace(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\nc\x07d\x1be"), "a\tb\nc\\x07d\\x1be")

    def test_highlight_lines_keeps_line_count(self) -> None:
        source = "\n\ndef f():\n    return 'x'\n"
        lines = highlight_lines(source, Path("m.py"))
        self.assertEqual(len(lines), 4)
        self.assertEqual([strip_ansi(line) for line in lines], source.splitlines())

    def test_highlight_lines_do_not_break_on_form_feeds(self) -> None:
        lines = highlight_lines("a = 1\x0c\nb = 2\n", Path("m.py"))
        self.assertEqual([strip_ansi(line) for line in lines], ["a = 1\\x0c", "b = 2"])

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("no-such-style"), "monokai")
        self.assertEqual(normalize_style("default"), "default")


if __name__ == "__main__":
    unittest.main()
