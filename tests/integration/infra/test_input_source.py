from __future__ import annotations

"""
Integration tests for input acquisition from files and the clipboard.

The clipboard is always mocked; tests never touch the real one.
"""

from pathlib import Path
from unittest.mock import patch

import pyperclip
import pytest

from treeforge.core.pipeline.engine import run_build
from treeforge.domain.errors import InputSourceError
from treeforge.domain.tree_models import Platform
from treeforge.infra.input_source import read_clipboard_lines, read_file_lines

PASTE = "treeforge.infra.input_source.pyperclip.paste"


def test_read_file_lines(tmp_path: Path) -> None:
    path = tmp_path / "tree.txt"
    path.write_text("root/\r\n├── a.txt\r\n", encoding="utf-8")

    lines, label = read_file_lines(str(path))

    assert lines == ["root/", "├── a.txt"]
    assert label == f"file '{path}'"


def test_read_file_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.txt"
    path.write_bytes("\ufeffroot/\n".encode("utf-8"))

    lines, _ = read_file_lines(str(path))
    assert lines == ["root/"]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(InputSourceError, match="Failed to read"):
        read_file_lines(str(tmp_path / "absent.txt"))


def test_undecodable_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "bin.dat"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(InputSourceError):
        read_file_lines(str(path))


def test_clipboard_tree(project_tree_lines) -> None:
    with patch(PASTE, return_value="\n".join(project_tree_lines)):
        lines, label = read_clipboard_lines()

    assert lines == project_tree_lines
    assert label == "clipboard"


@pytest.mark.parametrize("content", ["", "  \n  "])
def test_empty_clipboard(content: str) -> None:
    with patch(PASTE, return_value=content):
        with pytest.raises(InputSourceError, match="Clipboard is empty"):
            read_clipboard_lines()


def test_clipboard_not_a_tree() -> None:
    with patch(PASTE, return_value="some copied sentence"):
        with pytest.raises(InputSourceError, match="doesn't look like tree"):
            read_clipboard_lines()


def test_clipboard_unavailable() -> None:
    with patch(PASTE, side_effect=pyperclip.PyperclipException("no mechanism")):
        with pytest.raises(InputSourceError, match="Failed to read clipboard"):
            read_clipboard_lines()


def test_unicode_separators_stay_inside_names(tmp_path: Path) -> None:
    path = tmp_path / "tree.txt"
    path.write_text("root/\n├── notes\u2028draft.txt\n└── end.txt\n", encoding="utf-8")

    lines, _ = read_file_lines(str(path))

    assert lines == ["root/", "├── notes\u2028draft.txt", "└── end.txt"]


def test_unicode_separators_do_not_flatten_the_tree(tmp_path: Path) -> None:
    path = tmp_path / "tree.txt"
    path.write_text("root/\n├── notes\u2028draft.txt\n└── end.txt\n", encoding="utf-8")
    lines, _ = read_file_lines(str(path))

    result = run_build(lines, platform=Platform.POSIX, base_dir=str(tmp_path), dry_run=True)

    assert result.ok
    assert result.created_paths == [
        str(tmp_path / "root"),
        str(tmp_path / "root" / "notes\u2028draft.txt"),
        str(tmp_path / "root" / "end.txt"),
    ]


def test_clipboard_keeps_form_feed_inside_line() -> None:
    content = "root/\n├── a\x0cb.txt\r\n└── c.txt"
    with patch(PASTE, return_value=content):
        lines, _ = read_clipboard_lines()

    assert lines == ["root/", "├── a\x0cb.txt", "└── c.txt"]
