from __future__ import annotations

"""
Tree Text Data Models.

Provides the value objects exchanged between the parser and the structure
builder: the target platform, the parsed entry (TreeNode) and the per-line
parse outcome.
"""

import enum
import os
from dataclasses import dataclass
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# PLATFORM
# -----------------------------------------------------------------------------

class Platform(enum.Enum):
    """Filename-legality ruleset applied to a whole run."""

    WINDOWS = "windows"
    POSIX = "posix"

    @classmethod
    def current(cls) -> "Platform":
        """Return the ruleset matching the running interpreter."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX


# -----------------------------------------------------------------------------
# PARSE ERRORS
# -----------------------------------------------------------------------------

class ParseErrorKind(enum.Enum):
    """Reason codes for lines that could not become a TreeNode."""

    EMPTY_LINE = "empty_line"
    EMPTY_AFTER_COMMENT = "empty_after_comment"
    NO_NAME_FOUND = "no_name_found"
    INVALID_FILENAME = "invalid_filename"


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    One parsed entry of the tree text.

    Attributes:
        depth: Nesting level relative to the root (0 = top level).
        names: Sibling entry names sharing this depth and kind.
        is_directory: Whether the names denote directories.
        source_line: 1-based line number, for diagnostics only.
    """
    depth: int
    names: Tuple[str, ...]
    is_directory: bool
    source_line: int

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")
        if not self.names:
            raise ValueError("a TreeNode needs at least one name")
        if self.source_line < 1:
            raise ValueError(f"source_line must be >= 1, got {self.source_line}")

    @property
    def primary_name(self) -> str:
        """The only name that may become a structural parent."""
        return self.names[0]


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of parsing one raw line.

    Holds a node (plus the absolute root hint when the line spelled one),
    a classified error, or neither when the line was an empty conjunction.
    """
    line_number: int
    node: Optional[TreeNode] = None
    root_path: Optional[str] = None
    error: Optional[ParseErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.node is not None

    @property
    def discarded(self) -> bool:
        return self.node is None and self.error is None
