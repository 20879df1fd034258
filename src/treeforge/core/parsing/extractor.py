from __future__ import annotations

"""
Name Extractor.

Locates the entry name inside a normalized line, preferring explicit tree
connector markers and falling back to stripping the drawing prefix. Also
performs the post-processing that turns a raw candidate into one or more
entry names: icon removal, size annotation removal, directory detection and
conjunction splitting.
"""

import re
from typing import Optional, Tuple

from treeforge.domain.constants import (
    CONJUNCTION_DELIMITER,
    DECORATIVE_ICONS,
    SIZE_UNITS,
    TREE_MARKERS,
    TREE_PREFIX_CHARS,
)
from treeforge.domain.errors import TreeParseError
from treeforge.domain.tree_models import ParseErrorKind
from treeforge.infra.fs import is_absolute_path, path_base_name

_SIZE_SUFFIX_RE = re.compile(
    r"\s*\(\s*\d+(?:[.,]\d+)?\s*(?:" + "|".join(SIZE_UNITS) + r")\)$"
)

# -----------------------------------------------------------------------------
# EXTRACTION
# -----------------------------------------------------------------------------

def extract_name(line: str) -> Tuple[str, Optional[str]]:
    """
    Extract the candidate name from a normalized line.

    Args:
        line: A line returned by normalize_line().

    Returns:
        Tuple[str, Optional[str]]: The candidate and, when the line spelled
        an absolute path, that full path (the root hint).

    Raises:
        TreeParseError: NO_NAME_FOUND when nothing is left after stripping.
    """
    for marker in TREE_MARKERS:
        pos = line.find(marker)
        if pos >= 0:
            candidate = line[pos + len(marker):].lstrip(TREE_PREFIX_CHARS).strip()
            if not candidate:
                raise TreeParseError(ParseErrorKind.NO_NAME_FOUND)
            return candidate, None

    cleaned = strip_icons(line.strip().lstrip(TREE_PREFIX_CHARS))
    if not cleaned:
        raise TreeParseError(ParseErrorKind.NO_NAME_FOUND)

    if is_absolute_path(cleaned):
        base = path_base_name(cleaned)
        if base:
            if cleaned.endswith(("/", "\\")):
                base += "/"
            return base, cleaned

    return cleaned, None


def strip_icons(text: str) -> str:
    """Remove leading decorative icons and whitespace."""
    start = 0
    while start < len(text) and (text[start] in DECORATIVE_ICONS or text[start].isspace()):
        start += 1
    return text[start:].strip()


def strip_size_annotation(name: str) -> str:
    """Remove a trailing "(1.2 KB)" style size annotation."""
    return _SIZE_SUFFIX_RE.sub("", name).strip()

# -----------------------------------------------------------------------------
# POST-PROCESSING
# -----------------------------------------------------------------------------

def finalize_names(candidate: str) -> Tuple[Tuple[str, ...], bool]:
    """
    Turn a raw candidate into entry names and an entry kind.

    Args:
        candidate: Output of extract_name().

    Returns:
        Tuple[Tuple[str, ...], bool]: The names (possibly empty when the
        candidate was a bare conjunction) and whether they are directories.

    Raises:
        TreeParseError: INVALID_FILENAME when nothing but a directory
            marker or an annotation was left.
    """
    name = strip_size_annotation(strip_icons(candidate))

    is_directory = name.endswith("/")
    if is_directory:
        name = name[:-1].strip()

    if CONJUNCTION_DELIMITER not in name and not name:
        raise TreeParseError(ParseErrorKind.INVALID_FILENAME)

    names = []
    for fragment in name.split(CONJUNCTION_DELIMITER):
        fragment = fragment.strip()
        if is_directory:
            fragment = fragment.rstrip("/").strip()
        if fragment:
            names.append(fragment)

    return tuple(names), is_directory
