from __future__ import annotations

"""
Input Acquisition Layer.

Reads the tree text either from a file or from the system clipboard and
hands it over as an ordered list of lines plus a human-readable label.
"""

import logging
from typing import List, Tuple

import pyperclip

from treeforge.core.parsing.detector import looks_like_tree
from treeforge.core.parsing.normalizer import split_lines
from treeforge.domain.errors import InputSourceError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_file_lines(path: str) -> Tuple[List[str], str]:
    """
    Read the tree text from a file.

    Args:
        path: Path to a UTF-8 text file (a leading BOM is tolerated).

    Returns:
        Tuple[List[str], str]: The lines and the source label.

    Raises:
        InputSourceError: If the file cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputSourceError(f"Failed to read '{path}': {e}") from e

    logger.debug(f"Read {len(content)} characters from {path}")
    return split_lines(content), f"file '{path}'"


def read_clipboard_lines() -> Tuple[List[str], str]:
    """
    Read the tree text from the system clipboard.

    Clipboard content is gated by the tree-likeness heuristic so that an
    unrelated copy is never replayed onto the filesystem.

    Returns:
        Tuple[List[str], str]: The lines and the source label.

    Raises:
        InputSourceError: If the clipboard is unavailable, empty, or does
            not look like a tree.
    """
    try:
        content = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise InputSourceError(f"Failed to read clipboard: {e}") from e

    if not content or not content.strip():
        raise InputSourceError("Clipboard is empty")

    if not looks_like_tree(content):
        raise InputSourceError("Clipboard doesn't look like tree structure")

    return split_lines(content), "clipboard"
