import os
import tempfile
import unittest
from pathlib import Path

from file_mcp.tools.file_manage import (
    FileManager,
    FileNotFoundInWorkspaceError,
    InvalidLineNumberError,
    LineEdit,
    WorkspaceViolationError,
    apply_line_edits,
)


class TestApplyLineEdits(unittest.TestCase):
    def test_single_edit_replaces_only_that_line(self):
        self.assertEqual(apply_line_edits("a\nb\nc", [LineEdit(2, "B")]), "a\nB\nc")

    def test_later_edit_wins_on_same_line(self):
        updated = apply_line_edits("a\nb", [LineEdit(1, "x"), LineEdit(1, "y")])
        self.assertEqual(updated, "y\nb")

    def test_trailing_newline_counts_as_empty_last_line(self):
        self.assertEqual(apply_line_edits("a\n", [LineEdit(2, "tail")]), "a\ntail")

    def test_out_of_range_reports_line_count(self):
        with self.assertRaises(InvalidLineNumberError) as ctx:
            apply_line_edits("a\nb", [LineEdit(3, "x")])
        self.assertEqual(str(ctx.exception), "Invalid line number: 3. File has 2 lines.")

    def test_zero_is_rejected(self):
        with self.assertRaises(InvalidLineNumberError):
            apply_line_edits("a", [LineEdit(0, "x")])


class TestFileManager(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "workspace"
        self.fm = FileManager(self.root)

    def tearDown(self):
        self._tmp.cleanup()

    def test_creates_missing_root(self):
        self.assertTrue(self.root.is_dir())

    def test_write_then_read_is_verbatim(self):
        content = "first\r\nsecond\n\nünïcode"
        self.fm.write_file("notes.txt", content)
        self.assertEqual(self.fm.read_file("notes.txt"), content)

    def test_write_truncates_existing(self):
        self.fm.write_file("a.txt", "long content here")
        self.fm.write_file("a.txt", "short")
        self.assertEqual(self.fm.read_file("a.txt"), "short")

    def test_list_is_flat_and_includes_directories(self):
        self.fm.write_file("a.txt", "x")
        (self.root / "sub").mkdir()
        (self.root / "sub" / "nested.txt").write_text("y", encoding="utf-8")
        self.assertEqual(self.fm.list_files(), ["a.txt", "sub"])

    def test_read_missing_file(self):
        with self.assertRaises(FileNotFoundInWorkspaceError) as ctx:
            self.fm.read_file("nope.txt")
        self.assertEqual(str(ctx.exception), "File not found: nope.txt")

    def test_delete_removes_file(self):
        self.fm.write_file("gone.txt", "x")
        self.assertEqual(self.fm.delete_file("gone.txt"), "gone.txt")
        self.assertFalse((self.root / "gone.txt").exists())

    def test_delete_missing_file(self):
        with self.assertRaises(FileNotFoundInWorkspaceError):
            self.fm.delete_file("nope.txt")

    def test_edit_reports_applied_count(self):
        self.fm.write_file("e.txt", "1\n2\n3")
        outcome = self.fm.edit_file("e.txt", [LineEdit(1, "A"), LineEdit(3, "B")])
        self.assertEqual(outcome.applied, 2)
        self.assertTrue(outcome.changed)
        self.assertEqual(self.fm.read_file("e.txt"), "A\n2\nB")

    def test_failed_edit_leaves_file_untouched(self):
        self.fm.write_file("e.txt", "1\n2")
        with self.assertRaises(InvalidLineNumberError):
            self.fm.edit_file("e.txt", [LineEdit(1, "changed"), LineEdit(5, "bad")])
        self.assertEqual(self.fm.read_file("e.txt"), "1\n2")

    def test_edit_missing_file(self):
        with self.assertRaises(FileNotFoundInWorkspaceError):
            self.fm.edit_file("nope.txt", [LineEdit(1, "x")])

    def test_read_replaces_invalid_utf8(self):
        (self.root / "bin.txt").write_bytes(b"ok\xff\xfeend")
        self.assertEqual(self.fm.read_file("bin.txt"), "ok\ufffd\ufffdend")

    def test_edit_file_with_invalid_utf8(self):
        (self.root / "bin.txt").write_bytes(b"first\nbad\xff")
        self.fm.edit_file("bin.txt", [LineEdit(1, "FIRST")])
        self.assertEqual(self.fm.read_file("bin.txt"), "FIRST\nbad\ufffd")

    def test_parent_segments_are_rejected(self):
        with self.assertRaises(WorkspaceViolationError):
            self.fm.write_file("../escaped.txt", "x")
        self.assertFalse((self.root.parent / "escaped.txt").exists())

    def test_absolute_path_outside_is_rejected(self):
        outside = Path(self._tmp.name) / "outside.txt"
        outside.write_text("secret", encoding="utf-8")
        with self.assertRaises(WorkspaceViolationError):
            self.fm.read_file(str(outside))

    @unittest.skipIf(os.name == "nt", "symlinks need privileges on Windows")
    def test_symlink_escape_is_rejected(self):
        outside = Path(self._tmp.name) / "outside.txt"
        outside.write_text("secret", encoding="utf-8")
        (self.root / "link.txt").symlink_to(outside)
        with self.assertRaises(WorkspaceViolationError):
            self.fm.read_file("link.txt")

    @unittest.skipIf(os.name == "nt", "symlinks need privileges on Windows")
    def test_delete_symlink_removes_link_not_target(self):
        self.fm.write_file("real.txt", "keep me")
        (self.root / "link.txt").symlink_to(self.root / "real.txt")
        self.assertEqual(self.fm.delete_file("link.txt"), "link.txt")
        self.assertFalse(os.path.lexists(self.root / "link.txt"))
        self.assertEqual(self.fm.read_file("real.txt"), "keep me")


if __name__ == "__main__":
    unittest.main()
