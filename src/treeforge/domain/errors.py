from __future__ import annotations

"""
Domain Exceptions.

Parse failures are local to one line and recoverable; build failures abort
the run. Input failures belong to the collaborators that acquire the text.
"""

from typing import Optional

from treeforge.domain.tree_models import ParseErrorKind


class TreeforgeError(Exception):
    """Base class for every error raised by treeforge."""


class TreeParseError(TreeforgeError):
    """A single line could not be turned into a TreeNode."""

    def __init__(self, kind: ParseErrorKind, line_number: Optional[int] = None):
        self.kind = kind
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{kind.value}")


class BuildIoError(TreeforgeError):
    """
    A filesystem creation call failed while replaying the tree.

    Attributes:
        path: Target path whose creation failed.
        cause: Underlying OS error.
    """

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create '{path}': {cause}")


class InputSourceError(TreeforgeError):
    """The tree text could not be acquired from its source."""
