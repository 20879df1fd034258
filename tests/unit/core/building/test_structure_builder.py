from __future__ import annotations

"""
Unit tests for the Path-Stack Structure Builder.

Verifies stack maintenance across depth changes, conjunction handling,
the depth-overflow tolerance, dry-run planning and fatal creation errors.
"""

import logging
from pathlib import Path
from typing import Tuple
from unittest.mock import patch

import pytest

from treeforge.core.building.structure_builder import PathStack, StructureBuilder
from treeforge.domain.errors import BuildIoError
from treeforge.domain.tree_models import TreeNode


def _node(depth: int, names: Tuple[str, ...], is_dir: bool, line: int = 1) -> TreeNode:
    return TreeNode(depth=depth, names=names, is_directory=is_dir, source_line=line)


# -----------------------------------------------------------------------------
# PATH STACK
# -----------------------------------------------------------------------------

def test_path_stack_operations(tmp_path: Path) -> None:
    stack = PathStack()
    stack.push("a")
    stack.push("b")
    stack.push("c")

    assert len(stack) == 3
    assert stack.resolve(tmp_path, "x") == tmp_path / "a" / "b" / "c" / "x"

    stack.truncate(1)
    assert stack.entries == ("a",)

    stack.truncate(5)
    assert stack.entries == ("a",)

    stack.clear()
    assert len(stack) == 0
    assert stack.resolve(tmp_path, "x") == tmp_path / "x"


# -----------------------------------------------------------------------------
# REPLAY
# -----------------------------------------------------------------------------

def test_builds_nested_tree(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("project",), True, 1),
        _node(1, ("src",), True, 2),
        _node(2, ("main.ext",), False, 3),
        _node(2, ("lib.ext",), False, 4),
        _node(1, ("README.md",), False, 5),
    ]
    builder = StructureBuilder(tmp_path)

    assert builder.build(nodes) == 5

    assert (tmp_path / "project" / "src").is_dir()
    assert (tmp_path / "project" / "src" / "main.ext").is_file()
    assert (tmp_path / "project" / "src" / "lib.ext").is_file()
    assert (tmp_path / "project" / "README.md").is_file()
    assert not (tmp_path / "project" / "src" / "README.md").exists()
    assert builder.warnings == []


def test_stack_is_truncated_on_return_to_shallower_depth(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("root",), True),
        _node(1, ("a",), True),
        _node(2, ("b",), True),
        _node(3, ("deep.txt",), False),
        _node(1, ("c",), True),
        _node(2, ("d.txt",), False),
    ]
    builder = StructureBuilder(tmp_path)
    builder.build(nodes)

    assert (tmp_path / "root" / "a" / "b" / "deep.txt").is_file()
    assert (tmp_path / "root" / "c" / "d.txt").is_file()
    assert builder.stack.entries == ("root", "c")


def test_multiple_depth_zero_entries_are_siblings(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("first",), True),
        _node(1, ("inner.txt",), False),
        _node(0, ("second",), True),
        _node(1, ("other.txt",), False),
    ]
    StructureBuilder(tmp_path).build(nodes)

    assert (tmp_path / "first" / "inner.txt").is_file()
    assert (tmp_path / "second" / "other.txt").is_file()
    assert not (tmp_path / "first" / "second").exists()


def test_conjunction_files_at_root(tmp_path: Path) -> None:
    builder = StructureBuilder(tmp_path)
    builder.build([_node(0, ("a.txt", "b.txt"), False)])

    assert (tmp_path / "a.txt").is_file()
    assert (tmp_path / "b.txt").is_file()
    assert len(builder.stack) == 0
    assert builder.nodes_created == 1


def test_conjunction_directories_push_first_name_only(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("x", "y"), True),
        _node(1, ("child.txt",), False),
    ]
    StructureBuilder(tmp_path).build(nodes)

    assert (tmp_path / "x").is_dir()
    assert (tmp_path / "y").is_dir()
    assert (tmp_path / "x" / "child.txt").is_file()
    assert not (tmp_path / "y" / "child.txt").exists()


def test_file_nodes_never_become_parents(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("root",), True),
        _node(1, ("note.txt",), False),
        _node(1, ("sibling.txt",), False),
    ]
    StructureBuilder(tmp_path).build(nodes)

    assert (tmp_path / "root" / "sibling.txt").is_file()


def test_depth_overflow_attaches_to_deepest_ancestor(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("top",), True, 1),
        _node(3, ("deep.txt",), False, 2),
    ]
    builder = StructureBuilder(tmp_path)
    builder.build(nodes)

    assert (tmp_path / "top" / "deep.txt").is_file()
    assert len(builder.warnings) == 1
    assert "Line 2: depth 3 exceeds the 1 known ancestor(s)" in builder.warnings[0]


def test_depth_overflow_with_empty_stack(tmp_path: Path) -> None:
    builder = StructureBuilder(tmp_path)
    builder.build([_node(2, ("orphan.txt",), False)])

    assert (tmp_path / "orphan.txt").is_file()
    assert "<base>" in builder.warnings[0]


def test_overflow_is_logged_as_warning_only_in_debug(tmp_path: Path, caplog) -> None:
    logger_name = "treeforge.core.building.structure_builder"
    nodes = [_node(0, ("top",), True), _node(2, ("x.txt",), False)]

    with caplog.at_level(logging.DEBUG, logger=logger_name):
        StructureBuilder(tmp_path / "quiet").build(nodes)
    assert not [r for r in caplog.records if r.levelno == logging.WARNING]

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger=logger_name):
        StructureBuilder(tmp_path / "loud", debug=True).build(nodes)
    assert [r for r in caplog.records if r.levelno == logging.WARNING]


def test_existing_file_is_truncated(tmp_path: Path) -> None:
    target = tmp_path / "keep.txt"
    target.write_text("old content", encoding="utf-8")

    StructureBuilder(tmp_path).build([_node(0, ("keep.txt",), False)])

    assert target.read_text(encoding="utf-8") == ""


def test_existing_directory_is_reused(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "old.txt").write_text("x", encoding="utf-8")

    StructureBuilder(tmp_path).build([_node(0, ("src",), True), _node(1, ("new.txt",), False)])

    assert (tmp_path / "src" / "old.txt").read_text(encoding="utf-8") == "x"
    assert (tmp_path / "src" / "new.txt").is_file()

# -----------------------------------------------------------------------------
# DRY RUN AND FAILURES
# -----------------------------------------------------------------------------

def test_dry_run_plans_without_touching_disk(tmp_path: Path) -> None:
    nodes = [_node(0, ("pkg",), True), _node(1, ("mod.py",), False)]
    builder = StructureBuilder(tmp_path, dry_run=True)

    assert builder.build(nodes) == 2
    assert builder.created_paths == [str(tmp_path / "pkg"), str(tmp_path / "pkg" / "mod.py")]
    assert list(tmp_path.iterdir()) == []


def test_creation_failure_is_fatal(tmp_path: Path) -> None:
    nodes = [
        _node(0, ("ok",), True),
        _node(1, ("blocked.txt",), False),
        _node(1, ("never.txt",), False),
    ]
    builder = StructureBuilder(tmp_path)

    with patch(
        "treeforge.core.building.structure_builder.fs.create_empty_file",
        side_effect=PermissionError("denied"),
    ):
        with pytest.raises(BuildIoError) as exc:
            builder.build(nodes)

    assert exc.value.path == str(tmp_path / "ok" / "blocked.txt")
    assert isinstance(exc.value.cause, PermissionError)
    assert builder.nodes_created == 1
    assert builder.created_paths == [str(tmp_path / "ok")]
    # No rollback
    assert (tmp_path / "ok").is_dir()
