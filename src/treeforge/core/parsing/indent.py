from __future__ import annotations

"""
Indent Calculator.

Derives the nesting depth of a normalized line from its drawing prefix.

Box-drawn lines are measured by counting connectors: every glyph with a
vertical stroke (│, ├, └) stands for exactly one ancestor level, however
wide the surrounding padding is. The only whitespace that counts is a
blank ancestor column, the four-space column drawn below a last branch:

    project/
    └── src/
        └── main.py     <- one blank column + one corner = depth 2

Lines without any connector fall back to the plain-indentation heuristic,
leading width divided by the unit width. On such lines both strategies
agree, so one run never mixes two incompatible depth scales.
"""

from typing import Optional

from treeforge.domain.constants import (
    INDENT_UNIT_WIDTH,
    PIPE_CONNECTOR,
    TREE_PREFIX_CHARS,
    VERTICAL_CONNECTORS,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def calculate_depth(line: str) -> int:
    """
    Compute the depth of a normalized line.

    Must be called before any leading glyph is stripped from the line.

    Args:
        line: A line returned by normalize_line().

    Returns:
        int: Non-negative nesting level.
    """
    prefix = leading_prefix(line)
    if any(ch in VERTICAL_CONNECTORS for ch in prefix):
        return _connector_depth(prefix)
    return _width_depth(prefix)


def leading_prefix(line: str) -> str:
    """Return the run of drawing characters and whitespace before the name."""
    end = 0
    while end < len(line) and line[end] in TREE_PREFIX_CHARS:
        end += 1
    return line[:end]

# -----------------------------------------------------------------------------
# STRATEGIES
# -----------------------------------------------------------------------------

def _connector_depth(prefix: str) -> int:
    """Count vertical connectors plus blank ancestor columns."""
    depth = 0
    gap = 0
    # None before the first glyph, then whether the last glyph was a bar
    after_bar: Optional[bool] = None

    for ch in prefix:
        if ch == " ":
            gap += 1
            continue
        if ch == "\t":
            gap += INDENT_UNIT_WIDTH
            continue

        depth += _blank_columns(gap, after_bar)
        gap = 0
        if ch in VERTICAL_CONNECTORS:
            depth += 1
            after_bar = ch == PIPE_CONNECTOR
        else:
            after_bar = False

    return depth + _blank_columns(gap, after_bar)


def _blank_columns(gap: int, after_bar: Optional[bool]) -> int:
    """Number of empty ancestor columns hidden in a whitespace run."""
    if after_bar is None:
        return gap // INDENT_UNIT_WIDTH
    if after_bar:
        # A bar column already owns its own padding ("│   ")
        return max(0, (gap + 1) // INDENT_UNIT_WIDTH - 1)
    return 0


def _width_depth(prefix: str) -> int:
    """Leading whitespace width divided by the unit width."""
    width = 0
    for ch in prefix:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += INDENT_UNIT_WIDTH
        else:
            break
    return width // INDENT_UNIT_WIDTH
