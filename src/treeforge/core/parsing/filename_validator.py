from __future__ import annotations

"""
Filename Validator.

Decides whether a single extracted name is a legal directory entry on the
target platform. The platform is an explicit argument, so Windows rules can
be applied (and tested) on any host.
"""

import unicodedata

from treeforge.domain.constants import (
    MAX_FILENAME_LENGTH,
    POSIX_FORBIDDEN_CHARS,
    WINDOWS_FORBIDDEN_CHARS,
    WINDOWS_RESERVED_NAMES,
)
from treeforge.domain.errors import TreeParseError
from treeforge.domain.tree_models import ParseErrorKind, Platform


def is_valid_filename(name: str, platform: Platform) -> bool:
    """
    Check a name against the common and platform-specific rules.

    Pure predicate: the same name and platform always give the same answer.

    Args:
        name: One entry name, already split from its conjunction siblings.
        platform: Ruleset to apply.

    Returns:
        bool: True if the name can be created as-is.
    """
    trimmed = name.strip()
    if not trimmed or "\0" in name:
        return False
    # Would address the current or the parent directory
    if trimmed in (".", ".."):
        return False
    # Filesystems cap names in bytes, not characters
    if len(trimmed.encode("utf-8")) > MAX_FILENAME_LENGTH:
        return False

    if any(unicodedata.category(c) == "Cc" and c != "\t" for c in name):
        return False

    if platform is Platform.WINDOWS:
        base = trimmed.upper().split(".", 1)[0]
        if base in WINDOWS_RESERVED_NAMES:
            return False
        if any(c in WINDOWS_FORBIDDEN_CHARS for c in name):
            return False
        if name.endswith((" ", ".")) or trimmed.endswith("."):
            return False
        return True

    return not any(c in POSIX_FORBIDDEN_CHARS for c in name)


def validate_filename(name: str, platform: Platform) -> str:
    """
    Return the name unchanged, or raise if it is not a legal entry name.

    Raises:
        TreeParseError: INVALID_FILENAME.
    """
    if not is_valid_filename(name, platform):
        raise TreeParseError(ParseErrorKind.INVALID_FILENAME)
    return name
