from __future__ import annotations

"""
Line Normalizer.

Strips trailing whitespace and trailing comments from one raw line of tree
text. Leading content is never touched here: indentation and connector
glyphs are still needed by the indent calculator.
"""

import re
from typing import List

from treeforge.domain.constants import COMMENT_MARKERS
from treeforge.domain.errors import TreeParseError
from treeforge.domain.tree_models import ParseErrorKind


_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> List[str]:
    """
    Split a text blob on real line breaks only.

    Unlike str.splitlines(), separators such as U+2028 or form feeds stay
    inside the line, so a name containing one is never cut in two. A
    trailing line break does not produce a final empty line.
    """
    lines = _NEWLINE_RE.split(content)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def strip_comment(line: str) -> str:
    """Cut the line at the earliest comment marker and trim the tail."""
    for i, ch in enumerate(line):
        if ch in COMMENT_MARKERS:
            return line[:i].rstrip()
    return line.rstrip()


def normalize_line(raw: str) -> str:
    """
    Normalize one raw line.

    Args:
        raw: The line as read from the source, without its newline.

    Returns:
        str: The line with trailing whitespace and comments removed.

    Raises:
        TreeParseError: EMPTY_LINE for blank lines, EMPTY_AFTER_COMMENT for
            lines holding nothing but a comment.
    """
    line = raw.rstrip()
    if not line:
        raise TreeParseError(ParseErrorKind.EMPTY_LINE)

    line = strip_comment(line)
    if not line:
        raise TreeParseError(ParseErrorKind.EMPTY_AFTER_COMMENT)
    return line
