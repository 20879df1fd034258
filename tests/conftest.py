from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree-text samples used across unit and e2e tests.
3. Isolation of the user data directory from the real home folder.
"""

import os
import sys
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
PROJECT_TREE = """\
project/
├── src/
│   ├── main.ext
│   └── lib.ext
└── README.md
"""


@pytest.fixture
def project_tree_lines() -> List[str]:
    """The canonical box-drawn sample, split into lines."""
    return PROJECT_TREE.splitlines()


@pytest.fixture
def user_data_dir(tmp_path: Path):
    """
    Redirect the application data directory to a temporary folder.

    Prevents tests from reading or writing the real user configuration.
    """
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    with patch("treeforge.domain.config.get_user_data_dir", return_value=str(data_dir)):
        yield data_dir
