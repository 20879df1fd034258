from __future__ import annotations

"""
Path-Stack Structure Builder.

Replays parsed TreeNodes as filesystem creation calls. Depth alone does not
name a location; the full path is rebuilt from a stack holding exactly one
open ancestor directory per depth level:

* a depth-0 node clears the stack (several depth-0 entries are siblings at
  the base directory);
* a node at depth d closes every ancestor at depth >= d by truncating the
  stack to d entries;
* a node deeper than the stack is tolerated and attached to the deepest
  known ancestor, with a warning;
* a directory node pushes its first name only, conjunction siblings listed
  after it never become parents.

Line order is the only hierarchy signal, so nodes are processed strictly in
the order given. Creation failures are fatal and nothing is rolled back.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from treeforge.domain.errors import BuildIoError
from treeforge.domain.tree_models import TreeNode
from treeforge.infra import fs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH STACK
# -----------------------------------------------------------------------------

class PathStack:
    """Ancestor directory names; index 0 is a direct child of the base."""

    def __init__(self) -> None:
        self._entries: List[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def truncate(self, depth: int) -> None:
        del self._entries[depth:]

    def push(self, name: str) -> None:
        self._entries.append(name)

    def resolve(self, base_dir: Path, name: str) -> Path:
        """Compose base + every open ancestor + name."""
        return base_dir.joinpath(*self._entries, name)

# -----------------------------------------------------------------------------
# BUILDER
# -----------------------------------------------------------------------------

class StructureBuilder:
    """
    Owns the path stack for one build run.

    Args:
        base_dir: Directory the hierarchy is replayed under.
        dry_run: Record the planned paths without touching the filesystem.
        debug: Emit per-node traces and log depth anomalies as warnings.
    """

    def __init__(self, base_dir: Path, *, dry_run: bool = False, debug: bool = False):
        self.base_dir = Path(base_dir)
        self.dry_run = dry_run
        self.debug = debug

        self.stack = PathStack()
        self.created_paths: List[str] = []
        self.warnings: List[str] = []
        self.nodes_created = 0

    def build(self, nodes: Iterable[TreeNode]) -> int:
        """
        Replay every node in order.

        Args:
            nodes: Parsed nodes in ascending line order.

        Returns:
            int: Number of nodes replayed.

        Raises:
            BuildIoError: On the first failing creation call.
        """
        for node in nodes:
            self.apply(node)
        return self.nodes_created

    def apply(self, node: TreeNode) -> List[Path]:
        """
        Replay a single node and update the stack.

        Returns:
            List[Path]: The paths created for this node.
        """
        if self.debug:
            logger.debug(
                f"Line {node.source_line}: depth={node.depth} names={list(node.names)} "
                f"stack={list(self.stack.entries)}"
            )

        self._adjust_stack(node)

        targets = [self.stack.resolve(self.base_dir, name) for name in node.names]
        for target in targets:
            self._create(target, node.is_directory)

        if node.is_directory:
            self.stack.push(node.primary_name)

        self.nodes_created += 1
        return targets

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _adjust_stack(self, node: TreeNode) -> None:
        if node.depth == 0:
            self.stack.clear()
            return

        if node.depth > len(self.stack):
            parent = self.stack.entries[-1] if len(self.stack) else "<base>"
            msg = (
                f"Line {node.source_line}: depth {node.depth} exceeds the "
                f"{len(self.stack)} known ancestor(s); attaching to '{parent}'"
            )
            self.warnings.append(msg)
            if self.debug:
                logger.warning(msg)
            else:
                logger.debug(msg)
            return

        self.stack.truncate(node.depth)

    def _create(self, target: Path, is_directory: bool) -> None:
        if not self.dry_run:
            try:
                if is_directory:
                    fs.make_dirs(target)
                else:
                    fs.create_empty_file(target)
            except OSError as e:
                raise BuildIoError(str(target), e) from e

        self.created_paths.append(str(target))
        if self.debug:
            kind = "dir " if is_directory else "file"
            logger.debug(f"{'planned' if self.dry_run else 'created'} {kind} {target}")
