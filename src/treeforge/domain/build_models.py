from __future__ import annotations

"""
Build Domain Data Models.

Defines the result objects and factory functions used to communicate the
outcome of a parse-and-build run between the engine and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from treeforge.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass
class ParseReport:
    """
    Aggregated output of the parse pass over a whole input.

    Attributes:
        nodes: Successfully parsed nodes, in line order.
        root_path: Absolute path spelled by the first parsed node, if any.
        parse_failures: Number of skipped lines.
        discarded: Number of lines reduced to an empty conjunction.
        skip_reasons: Failure count per reason code.
    """
    nodes: List[TreeNode] = field(default_factory=list)
    root_path: Optional[str] = None
    parse_failures: int = 0
    discarded: int = 0
    skip_reasons: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class BuildResult:
    """
    Unified result object of a complete parse-and-build run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        source_label: Human-readable origin of the input text.
        base_dir: Directory the hierarchy was replayed under.
        root_path: Absolute path detected on the first line, if any.
        nodes_parsed: Number of lines that became a TreeNode.
        nodes_created: Number of nodes fully replayed on disk.
        parse_failures: Number of lines skipped by the parser.
        discarded: Number of empty conjunction lines dropped.
        skip_reasons: Parse failure count per reason code.
        created_paths: Every path created (or planned, in dry-run mode).
        warnings: Non-fatal structural anomalies.
        failed_path: Target whose creation aborted the run.
        dry_run: Whether the filesystem was left untouched.
    """
    ok: bool
    error: str

    source_label: str
    base_dir: str
    root_path: str = ""

    nodes_parsed: int = 0
    nodes_created: int = 0
    parse_failures: int = 0
    discarded: int = 0
    skip_reasons: Dict[str, int] = field(default_factory=dict)

    created_paths: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failed_path: str = ""

    dry_run: bool = False

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        report: ParseReport,
        source_label: str,
        base_dir: str = "",
        nodes_created: int = 0,
        created_paths: Optional[List[str]] = None,
        warnings: Optional[List[str]] = None,
        failed_path: str = "",
        dry_run: bool = False,
) -> BuildResult:
    """
    Create a failed build result instance.

    Args:
        error: Detailed error description.
        report: Parse pass that preceded the failure.
        source_label: Origin of the input text.
        base_dir: Resolved base directory, if resolution happened.
        nodes_created: Nodes replayed before the failure.
        created_paths: Paths left on disk by the aborted run.
        warnings: Structural anomalies seen before the failure.
        failed_path: Target whose creation failed.
        dry_run: Whether the run was a simulation.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        source_label=source_label,
        base_dir=base_dir,
        root_path=report.root_path or "",
        nodes_parsed=len(report.nodes),
        nodes_created=nodes_created,
        parse_failures=report.parse_failures,
        discarded=report.discarded,
        skip_reasons=dict(report.skip_reasons),
        created_paths=list(created_paths or []),
        warnings=list(warnings or []),
        failed_path=failed_path,
        dry_run=dry_run,
    )


def create_success_result(
        report: ParseReport,
        source_label: str,
        base_dir: str,
        nodes_created: int,
        created_paths: List[str],
        warnings: List[str],
        dry_run: bool = False,
) -> BuildResult:
    """
    Create a successful build result instance.

    Args:
        report: Parse pass feeding the build.
        source_label: Origin of the input text.
        base_dir: Directory the hierarchy was replayed under.
        nodes_created: Nodes replayed on disk.
        created_paths: Paths created (or planned).
        warnings: Non-fatal structural anomalies.
        dry_run: Whether the run was a simulation.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        source_label=source_label,
        base_dir=base_dir,
        root_path=report.root_path or "",
        nodes_parsed=len(report.nodes),
        nodes_created=nodes_created,
        parse_failures=report.parse_failures,
        discarded=report.discarded,
        skip_reasons=dict(report.skip_reasons),
        created_paths=list(created_paths),
        warnings=list(warnings),
        dry_run=dry_run,
    )
