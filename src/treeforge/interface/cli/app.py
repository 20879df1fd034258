from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, saved state, CLI overrides), input acquisition from a file or the
clipboard, the parse-and-build run and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treeforge.core.pipeline.config_validator import resolve_platform, validate_config
from treeforge.core.pipeline.engine import run_build
from treeforge.domain.build_models import BuildResult
from treeforge.domain.config import get_default_config, load_config, save_config
from treeforge.domain.errors import InputSourceError
from treeforge.infra.input_source import read_clipboard_lines, read_file_lines
from treeforge.infra.logging import LoggingConfig, configure_logging, get_logger
from treeforge.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults or saved state, then CLI overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console stderr, optional file)
    logging_conf = LoggingConfig(
        level="DEBUG" if conf["debug"] else "INFO",
        console=True,
        log_file=conf["log_file"] or None,
    )
    configure_logging(logging_conf)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config and not save_config(conf):
        print("ERROR: Could not save configuration.", file=sys.stderr)
        return EXIT_FAILURE

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Input acquisition
    try:
        if args.input_file:
            lines, source = read_file_lines(args.input_file)
        else:
            lines, source = read_clipboard_lines()
    except InputSourceError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if not conf["json_output"]:
        print(f"Read from {source} ({len(lines)} lines)")

    # 5. Build phase
    try:
        result = run_build(
            lines,
            platform=resolve_platform(conf["platform"]),
            debug=conf["debug"],
            base_dir=conf["output_base_dir"] or None,
            dry_run=conf["dry_run"],
            source_label=source,
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 6. Output rendering phase
    if conf["json_output"]:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged, so stray overrides never reach the engine.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Format and print the build result to the standard output.

    Args:
        result: The build result to render.
    """
    if result.parse_failures:
        reasons = ", ".join(f"{k}={v}" for k, v in sorted(result.skip_reasons.items()))
        print(f"Skipped lines: {result.parse_failures} ({reasons})")

    for w in result.warnings:
        print(f"WARNING: {w}")

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        if result.nodes_created:
            print(
                f"{result.nodes_created} items were created before the failure "
                f"and have been left in place.",
                file=sys.stderr,
            )
        return

    if result.dry_run:
        print(f"Dry run: would create {len(result.created_paths)} entries in {result.base_dir}")
        for path in result.created_paths:
            print(f"  - {path}")
        return

    print(f"Done! Successfully created {result.nodes_created} items in {result.base_dir}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
