"""Unit tests for responsibility extraction."""

from unittest.mock import mock_open, patch

import pytest

from resptree.responsibility import NO_RESPONSIBILITY, get_responsibility


@pytest.fixture
def write_file(tmp_path):
    def _write(content, name="sample.txt", mode="w"):
        path = tmp_path / name
        if mode == "wb":
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.mark.parametrize(
    "content, expected",
    [
        ("// does X\n", "does X"),
        ("# does Y\n", "does Y"),
        ("\n\n   \ndoes Z\n", NO_RESPONSIBILITY),
        ("", NO_RESPONSIBILITY),
        ("\n\n\t\n", NO_RESPONSIBILITY),
        ("   //   indented comment   \ncode\n", "indented comment"),
        ("\n\n# after blank lines\n", "after blank lines"),
        ("//// TODO tidy up\n", "TODO tidy up"),
        ("#!/usr/bin/env python\n", "!/usr/bin/env python"),
        ("## #/ mixed markers\n", "mixed markers"),
        ("#\n# second line\n", ""),
        ("/* block comment */\n", NO_RESPONSIBILITY),
        ("code first\n# comment later\n", NO_RESPONSIBILITY),
        ("// no trailing newline", "no trailing newline"),
        ("\r\n// windows line endings\r\n", "windows line endings"),
        ("// keeps # and // inside\n", "keeps # and // inside"),
    ],
)
def test_get_responsibility(write_file, content, expected):
    assert get_responsibility(write_file(content)) == expected


def test_non_ascii_comment(write_file):
    assert get_responsibility(write_file("// ファイル階層を表示する\n")) == "ファイル階層を表示する"


def test_undecodable_bytes_do_not_fail(write_file):
    path = write_file(b"\xff\xfe\x00binary\x00data", name="blob.bin", mode="wb")
    assert get_responsibility(path) == NO_RESPONSIBILITY


def test_undecodable_line_before_comment_is_skipped(write_file):
    path = write_file(b"\xff\xfe\n// desc\n", name="mixed.rs", mode="wb")
    assert get_responsibility(path) == "desc"


def test_scan_stops_at_first_decodable_non_comment_line(write_file):
    path = write_file(b"\n\x80\x81 junk\n\ncode\n# too late\n", name="code.py", mode="wb")
    assert get_responsibility(path) == NO_RESPONSIBILITY


def test_missing_file(tmp_path):
    assert get_responsibility(tmp_path / "missing.txt") == NO_RESPONSIBILITY


def test_directory_path(tmp_path):
    assert get_responsibility(tmp_path) == NO_RESPONSIBILITY


def test_permission_error_yields_fallback(tmp_path):
    with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
        assert get_responsibility(tmp_path / "locked.txt") == NO_RESPONSIBILITY


def test_stops_at_first_non_blank_line(tmp_path):
    handle = mock_open(read_data=b"\n// first\n// second\n")
    with patch("builtins.open", handle):
        assert get_responsibility(tmp_path / "any.txt") == "first"
    handle.return_value.__exit__.assert_called_once()


def test_accepts_str_path(write_file):
    assert get_responsibility(str(write_file("# as string\n"))) == "as string"
