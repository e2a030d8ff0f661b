"""Tests for file staging and retrieval."""

import os

import pytest

from catbash.errors import CatbashError, FileIOError, FileRetrievalError
from catbash.files import delete_file, retrieve_file, stage_file


class TestStageFile:
    """Tests for stage_file function."""

    def test_creates_missing_file(self, tmp_path):
        dest = tmp_path / "run.sh"

        stage_file("echo hi", str(dest))

        assert dest.read_text() == "echo hi"

    def test_overwrites_without_residue(self, tmp_path):
        """A shorter second write must not leave the tail of the first."""
        dest = tmp_path / "run.sh"

        stage_file("echo a much longer first command", str(dest))
        stage_file("ls", str(dest))

        assert dest.read_text() == "ls"

    def test_staging_twice_keeps_second_content(self, tmp_path):
        dest = str(tmp_path / "run.sh")

        stage_file("echo one", dest)
        stage_file("echo two", dest)

        assert retrieve_file(dest) == "echo two"

    def test_empty_content_truncates(self, tmp_path):
        dest = tmp_path / "run.sh"
        dest.write_text("old content")

        stage_file("", str(dest))

        assert dest.read_text() == ""

    def test_newlines_written_verbatim(self, tmp_path):
        dest = tmp_path / "out.txt"

        stage_file("a\r\nb\n", str(dest))

        assert dest.read_bytes() == b"a\r\nb\n"

    def test_missing_directory_raises_io_error(self, tmp_path):
        dest = tmp_path / "missing" / "run.sh"

        with pytest.raises(FileIOError) as exc_info:
            stage_file("echo hi", str(dest))

        assert str(dest) in str(exc_info.value)


class TestRetrieveFile:
    """Tests for retrieve_file function."""

    def test_round_trip(self, tmp_path):
        path = str(tmp_path / "cmd.txt")
        text = "grep -v 'x' | sort\nünïcode\n"

        stage_file(text, path)

        assert retrieve_file(path) == text

    def test_missing_file_raises_not_found(self, tmp_path):
        path = str(tmp_path / "nope.txt")

        with pytest.raises(FileRetrievalError) as exc_info:
            retrieve_file(path)

        assert exc_info.value.path == path
        assert "File not found" in str(exc_info.value)

    def test_not_found_is_catbash_error(self, tmp_path):
        with pytest.raises(CatbashError):
            retrieve_file(str(tmp_path / "nope.txt"))

    def test_invalid_utf8_is_replaced(self, tmp_path):
        path = tmp_path / "bin.txt"
        path.write_bytes(b"ok \xff\xfe end")

        result = retrieve_file(str(path))

        assert result.startswith("ok ")
        assert result.endswith(" end")
        assert "�" in result

    def test_directory_raises_io_error(self, tmp_path):
        with pytest.raises(FileIOError):
            retrieve_file(str(tmp_path))


class TestDeleteFile:
    """Tests for delete_file function."""

    def test_removes_file(self, tmp_path):
        path = tmp_path / "temp.txt"
        path.write_text("echo hi")

        delete_file(str(path))

        assert not path.exists()

    def test_missing_file_raises_io_error(self, tmp_path):
        with pytest.raises(FileIOError):
            delete_file(str(tmp_path / "temp.txt"))

    def test_does_not_touch_other_files(self, tmp_path):
        keep = tmp_path / "keep.txt"
        keep.write_text("x")
        gone = tmp_path / "gone.txt"
        gone.write_text("y")

        delete_file(str(gone))

        assert os.listdir(tmp_path) == ["keep.txt"]
