from __future__ import annotations

"""
Parse-and-Build Orchestration.

Coordinates one complete run:
1. Parses every line, skipping and counting recoverable failures.
2. Stops with a terminal result when no node could be parsed.
3. Resolves the base directory once, from the first node's root hint.
4. Replays the nodes through the structure builder, aborting on the first
   filesystem failure.
"""

import logging
from typing import Iterable, Optional

from treeforge.core.building.root_resolver import resolve_base_dir
from treeforge.core.building.structure_builder import StructureBuilder
from treeforge.core.parsing.line_parser import parse_lines
from treeforge.domain.build_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from treeforge.domain.errors import BuildIoError
from treeforge.domain.tree_models import Platform

logger = logging.getLogger(__name__)

NO_STRUCTURE_ERROR = "No valid tree structure found"


def run_build(
        lines: Iterable[str],
        *,
        platform: Optional[Platform] = None,
        debug: bool = False,
        base_dir: Optional[str] = None,
        dry_run: bool = False,
        source_label: str = "input",
) -> BuildResult:
    """
    Parse tree text and create the depicted hierarchy on disk.

    Args:
        lines: Ordered input lines.
        platform: Filename ruleset; defaults to the running system's.
        debug: Emit per-line traces and surface structural warnings.
        base_dir: Base used when the first line holds no absolute path;
            defaults to the current working directory.
        dry_run: Plan the paths without touching the filesystem.
        source_label: Origin of the text, for diagnostics.

    Returns:
        BuildResult: Status, counters and created paths.
    """
    platform = platform or Platform.current()
    logger.debug(f"Build started from {source_label} (platform={platform.value}).")

    # -------------------------------------------------------------------------
    # 1) Parse
    # -------------------------------------------------------------------------
    report = parse_lines(lines, platform, debug=debug)

    if debug:
        logger.debug(f"Parsed {len(report.nodes)} nodes ({report.parse_failures} errors)")

    if not report.nodes:
        msg = NO_STRUCTURE_ERROR
        if report.parse_failures:
            msg += f" ({report.parse_failures} lines failed to parse)"
        logger.error(msg)
        return create_error_result(msg, report, source_label, dry_run=dry_run)

    # -------------------------------------------------------------------------
    # 2) Resolve the base directory (exactly once)
    # -------------------------------------------------------------------------
    try:
        base = resolve_base_dir(report.root_path, base_dir, dry_run=dry_run)
    except BuildIoError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), report, source_label, failed_path=e.path, dry_run=dry_run
        )

    logger.info(f"Creating structure in: {base}")

    # -------------------------------------------------------------------------
    # 3) Replay
    # -------------------------------------------------------------------------
    builder = StructureBuilder(base, dry_run=dry_run, debug=debug)
    try:
        builder.build(report.nodes)
    except BuildIoError as e:
        logger.error(str(e))
        return create_error_result(
            str(e),
            report,
            source_label,
            base_dir=str(base),
            nodes_created=builder.nodes_created,
            created_paths=builder.created_paths,
            warnings=builder.warnings,
            failed_path=e.path,
            dry_run=dry_run,
        )

    logger.info(f"Successfully created {builder.nodes_created} items")
    return create_success_result(
        report,
        source_label,
        base_dir=str(base),
        nodes_created=builder.nodes_created,
        created_paths=builder.created_paths,
        warnings=builder.warnings,
        dry_run=dry_run,
    )
