from __future__ import annotations

"""
Tree Line Parser.

Chains the normalizer, indent calculator, name extractor and filename
validator into the single per-line parse step, and aggregates a whole input
into a ParseReport. Failures stay local to their line.
"""

import logging
from typing import Iterable

from treeforge.core.parsing.extractor import extract_name, finalize_names
from treeforge.core.parsing.filename_validator import validate_filename
from treeforge.core.parsing.indent import calculate_depth
from treeforge.core.parsing.normalizer import normalize_line
from treeforge.domain.build_models import ParseReport
from treeforge.domain.errors import TreeParseError
from treeforge.domain.tree_models import ParseOutcome, Platform, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_line(raw: str, line_number: int, platform: Platform) -> ParseOutcome:
    """
    Parse one raw line of tree text.

    Args:
        raw: Line content without its newline.
        line_number: 1-based position in the input.
        platform: Filename ruleset for the run.

    Returns:
        ParseOutcome: A node (with optional root hint), a classified error,
        or an empty outcome for a discarded conjunction.
    """
    try:
        line = normalize_line(raw)
        # Depth first: extraction strips the prefix it is measured from
        depth = calculate_depth(line)
        candidate, root_path = extract_name(line)
        names, is_directory = finalize_names(candidate)
        for name in names:
            validate_filename(name, platform)
    except TreeParseError as e:
        return ParseOutcome(line_number=line_number, error=e.kind)

    if not names:
        return ParseOutcome(line_number=line_number)

    node = TreeNode(
        depth=depth,
        names=names,
        is_directory=is_directory,
        source_line=line_number,
    )
    return ParseOutcome(line_number=line_number, node=node, root_path=root_path)


def parse_lines(lines: Iterable[str], platform: Platform, debug: bool = False) -> ParseReport:
    """
    Parse a whole input in line order.

    The root hint is taken from the first successfully parsed node only.

    Args:
        lines: Ordered input lines.
        platform: Filename ruleset for the run.
        debug: Emit a trace for every skipped or parsed line.

    Returns:
        ParseReport: Nodes, root hint and diagnostic counters.
    """
    report = ParseReport()

    for idx, raw in enumerate(lines, start=1):
        outcome = parse_line(raw, idx, platform)

        if outcome.error is not None:
            report.parse_failures += 1
            reason = outcome.error.value
            report.skip_reasons[reason] = report.skip_reasons.get(reason, 0) + 1
            if debug:
                logger.debug(f"Skipped line {idx}: {reason}")
            continue

        if outcome.node is None:
            report.discarded += 1
            if debug:
                logger.debug(f"Discarded line {idx}: empty conjunction")
            continue

        if not report.nodes and outcome.root_path:
            report.root_path = outcome.root_path

        report.nodes.append(outcome.node)
        if debug:
            node = outcome.node
            logger.debug(
                f"Line {idx}: depth={node.depth}, names={list(node.names)}, "
                f"is_dir={node.is_directory}"
            )

    return report
