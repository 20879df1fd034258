from __future__ import annotations

"""
Tree-Likeness Detector.

Coarse admissibility gate run on a whole text blob before committing to a
parse, so that unrelated clipboard content is rejected early. False
positives are acceptable; real tool-generated tree dumps must pass.
"""

from treeforge.core.parsing.normalizer import split_lines
from treeforge.domain.constants import BOX_DRAWING_GLYPHS


def looks_like_tree(content: str) -> bool:
    """
    Decide whether a text blob plausibly depicts a file tree.

    Args:
        content: The complete input text.

    Returns:
        bool: True for box-drawn text of two or more lines, or for text
        with at least two indented lines after the first one.
    """
    lines = split_lines(content)

    if any(glyph in content for glyph in BOX_DRAWING_GLYPHS):
        return len(lines) >= 2

    if len(lines) < 2:
        return False

    indented = 0
    for line in lines[1:]:
        body = line.lstrip()
        if body and len(line) > len(body):
            indented += 1
    return indented >= 2
