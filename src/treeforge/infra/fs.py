from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and the two primitive creation
calls the structure builder replays: recursive directory creation and empty
file creation. Also recognizes and splits absolute path spellings of both
Windows and Unix-like systems, independently of the running OS.
"""

import os
import re
from pathlib import Path
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "treeforge"
UNIX_APP_DIR_NAME = ".treeforge"

_DRIVE_RE = re.compile(r"^[A-Za-z]:[\\/]")
_SEPARATORS = "/\\"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/treeforge
    - Linux/Mac: ~/.treeforge

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# ABSOLUTE PATH SPELLINGS
# -----------------------------------------------------------------------------

def is_absolute_path(text: str) -> bool:
    """
    Check whether a string is spelled as an absolute path.

    Recognizes drive letters (C:\\ or C:/), UNC shares (\\\\server or
    //server) and Unix roots (/home).
    """
    s = text.strip()
    if _DRIVE_RE.match(s):
        return True
    if s.startswith("\\\\") or s.startswith("//"):
        return True
    return s.startswith("/")


def path_base_name(text: str) -> Optional[str]:
    """Final segment of a path spelling, or None when there is none."""
    trimmed = text.strip().rstrip(_SEPARATORS)
    name = re.split(r"[\\/]", trimmed)[-1] if trimmed else ""
    if not name or _DRIVE_RE.match(name + "/"):
        return None
    return name


def path_parent(text: str) -> Optional[str]:
    """
    Parent directory of a path spelling, keeping the original separators.

    Returns None when the path has no parent segment.
    """
    trimmed = text.strip().rstrip(_SEPARATORS)
    cut = max(trimmed.rfind("/"), trimmed.rfind("\\"))
    if cut < 0:
        return None
    parent = trimmed[:cut]
    if not parent.strip(_SEPARATORS):
        # The root itself: "/" or "\\"
        return trimmed[:cut + 1]
    if re.fullmatch(r"[A-Za-z]:", parent):
        return parent + trimmed[cut]
    return parent

# -----------------------------------------------------------------------------
# CREATION PRIMITIVES
# -----------------------------------------------------------------------------

def make_dirs(path: Path) -> None:
    """Create a directory and every missing ancestor."""
    path.mkdir(parents=True, exist_ok=True)


def create_empty_file(path: Path) -> None:
    """
    Create an empty file, creating its parent directories first.

    An existing file of the same name is truncated.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb"):
        pass
