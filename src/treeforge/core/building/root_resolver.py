from __future__ import annotations

"""
Root Resolver.

Chooses, once per run, the directory the hierarchy is replayed under. When
the first parsed line spelled an absolute path such as /home/user/app/, the
tree is rebuilt next to it, under /home/user/; otherwise the configured base
directory (or the working directory) is used.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from treeforge.domain.errors import BuildIoError
from treeforge.infra import fs

logger = logging.getLogger(__name__)


def resolve_base_dir(
        root_path: Optional[str],
        default_base: Optional[str] = None,
        *,
        dry_run: bool = False,
) -> Path:
    """
    Resolve the base directory for the whole build.

    Args:
        root_path: Absolute path hint of the first parsed node, if any.
        default_base: Base used when there is no hint; defaults to the
            current working directory.
        dry_run: Skip creating a missing parent directory.

    Returns:
        Path: The base directory.

    Raises:
        BuildIoError: If the parent directory of the hint cannot be created.
    """
    fallback = fs.normalize_path(default_base, os.getcwd())

    if not root_path:
        return Path(fallback)

    parent = fs.path_parent(root_path)
    if not parent:
        logger.debug(f"No parent directory in '{root_path}'; using {fallback}")
        return Path(fallback)
    if not Path(parent).is_absolute():
        # e.g. a drive-letter path read on a POSIX host
        logger.warning(f"'{root_path}' is not absolute on this system; using {fallback}")
        return Path(fallback)

    base = Path(parent)
    logger.info(f"Detected absolute path: {root_path}")
    if not dry_run and not base.exists():
        try:
            fs.make_dirs(base)
        except OSError as e:
            raise BuildIoError(str(base), e) from e
        logger.debug(f"Created parent: {base}")
    return base
