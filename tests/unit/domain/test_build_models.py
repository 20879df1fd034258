from __future__ import annotations

"""
Unit tests for the build result models and their factories.
"""

from treeforge.domain.build_models import (
    ParseReport,
    create_error_result,
    create_success_result,
)
from treeforge.domain.tree_models import TreeNode


def _report() -> ParseReport:
    report = ParseReport(root_path="/srv/app/", parse_failures=2, discarded=1)
    report.nodes.append(TreeNode(depth=0, names=("app",), is_directory=True, source_line=1))
    report.skip_reasons["empty_line"] = 2
    return report


def test_success_result_copies_report() -> None:
    report = _report()
    paths = ["/srv/app"]
    result = create_success_result(report, "clipboard", "/srv", 1, paths, [])

    assert result.ok
    assert result.error == ""
    assert result.root_path == "/srv/app/"
    assert result.nodes_parsed == 1
    assert result.parse_failures == 2
    assert result.discarded == 1
    assert result.skip_reasons == {"empty_line": 2}

    # The result must not alias caller-owned containers
    paths.append("/other")
    report.skip_reasons["no_name_found"] = 1
    assert result.created_paths == ["/srv/app"]
    assert result.skip_reasons == {"empty_line": 2}


def test_error_result_defaults() -> None:
    result = create_error_result("boom", ParseReport(), "file 'x.txt'")

    assert not result.ok
    assert result.error == "boom"
    assert result.root_path == ""
    assert result.base_dir == ""
    assert result.created_paths == []
    assert result.warnings == []
    assert result.failed_path == ""
    assert not result.dry_run
