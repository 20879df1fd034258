from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the glyph tables of the informal tree-text grammar: connector
markers, comment terminators, decorative icons and the platform-specific
filename rules.
"""

from typing import FrozenSet, Tuple

APP_NAME = "treeforge"
APP_VERSION = "1.2.0"

# -----------------------------------------------------------------------------
# TREE GRAMMAR
# -----------------------------------------------------------------------------

# Longest markers first so "├── " wins over "├─"
TREE_MARKERS: Tuple[str, ...] = ("├── ", "└── ", "├─ ", "└─ ", "├─", "└─")

# Glyphs carrying a vertical stroke: one per ancestor level
VERTICAL_CONNECTORS: FrozenSet[str] = frozenset("│├└")
PIPE_CONNECTOR = "│"

# Everything that may appear in the drawing prefix of a line
TREE_PREFIX_CHARS = "│├└─┬┼ \t"

# Any of these anywhere in a blob marks it as tree-drawn text
BOX_DRAWING_GLYPHS: Tuple[str, ...] = ("├", "└", "─", "│", "┬", "┼")

# Width of one indentation column in plain-indented input
INDENT_UNIT_WIDTH = 4

COMMENT_MARKERS: FrozenSet[str] = frozenset("#✅❌←→")

DECORATIVE_ICONS: FrozenSet[str] = frozenset(
    "📄📁📂📃📋📝🗂🗃📑📊📈📉✅❌⚠🔴🟢🟡"
    # Emoji variation selector, often glued to the pictographs above
    "\ufe0f"
)

CONJUNCTION_DELIMITER = "&"

SIZE_UNITS: Tuple[str, ...] = ("B", "KB", "MB")

# -----------------------------------------------------------------------------
# FILENAME RULES
# -----------------------------------------------------------------------------

MAX_FILENAME_LENGTH = 255

WINDOWS_RESERVED_NAMES: FrozenSet[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

WINDOWS_FORBIDDEN_CHARS = '<>:"/\\|?*'
POSIX_FORBIDDEN_CHARS = "/"
