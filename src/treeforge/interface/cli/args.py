from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from treeforge.domain.config import PLATFORM_CHOICES
from treeforge.domain.constants import APP_NAME, APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeforge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Create directory structures from tree-like text.",
        epilog="Examples:\n  treeforge tree.txt\n  treeforge --debug",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Input and Target ---
    p.add_argument(
        "input_file",
        nargs="?",
        default=None,
        metavar="FILE",
        help="Read the tree from FILE (default: read from the clipboard).",
    )
    p.add_argument(
        "-o", "--output-base",
        dest="output_base_dir",
        default=None,
        help="Directory to build under when the first line is not an absolute path.",
    )
    p.add_argument(
        "--platform",
        choices=PLATFORM_CHOICES,
        default=None,
        help="Filename rules to enforce (default: auto, the running system).",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without touching the filesystem.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for future runs.",
    )
    p.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Trace every parsed line and report structural warnings.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write the run log to this file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the build result as JSON.",
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags that were not given are left out so that saved values survive.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.output_base_dir is not None:
        overrides["output_base_dir"] = args.output_base_dir
    if args.platform is not None:
        overrides["platform"] = args.platform
    if args.log_file is not None:
        overrides["log_file"] = args.log_file

    if args.dry_run:
        overrides["dry_run"] = True
    if args.debug:
        overrides["debug"] = True
    if args.json_output:
        overrides["json_output"] = True

    return overrides
