"""CLI orchestration module; coordinates config, probe, and output steps."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import (
    load_config,
    resolve_config_path,
    resolve_output_path,
    write_default_config,
    write_json_file,
)
from .logging_utils import configure_logging
from .probe import run_probe


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for probe execution."""
    parser = argparse.ArgumentParser(
        description="Print filesystem diagnostics for an Android SDK installation."
    )
    parser.add_argument(
        "--config",
        default=None,
        help=(
            "Path to JSON configuration file. "
            "If omitted, the probe looks in current directory and executable folder, "
            "then falls back to built-in defaults."
        ),
    )
    parser.add_argument(
        "--init-config",
        metavar="PATH",
        help="Create a starter config file and exit.",
    )
    parser.add_argument(
        "--sdk-root",
        help="Override sdk.root from config; the fixed layout is checked beneath it.",
    )
    parser.add_argument(
        "--output",
        help="Also write the JSON report to this path (overrides output.path).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log verbosity (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run probe CLI workflow as the process entrypoint."""
    args = parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("STEP_START: cli")

    if args.init_config:
        config_target = Path(args.init_config).expanduser()
        if config_target.exists():
            print(f"Config already exists: {config_target}")
            return 1
        write_default_config(config_target)
        logger.info("STEP_DONE: init_config")
        print(f"Created starter config: {config_target}")
        return 0

    logger.info("STEP_START: load_config")
    config_path = resolve_config_path(args.config)
    try:
        config = load_config(config_path, required=bool(args.config))
    except (OSError, ValueError) as exc:
        logger.error("STEP_FAILED: load_config")
        print(f"Failed to load config: {exc}", file=sys.stderr)
        return 1
    logger.info("STEP_DONE: load_config source=%s", config_path or "defaults")

    if args.sdk_root:
        config["sdk"]["root"] = args.sdk_root
    if args.output:
        config["output"]["path"] = args.output

    output_path = resolve_output_path(str(config["output"].get("path") or ""))

    logger.info("STEP_START: run_probe")
    try:
        report = run_probe(config, logger)
    except KeyboardInterrupt:
        logger.warning("STEP_ABORTED: run_probe")
        print("Probe interrupted by user.", file=sys.stderr)
        return 130
    logger.info("STEP_DONE: run_probe")

    if output_path is not None:
        try:
            write_json_file(output_path, report, pretty=bool(config["output"].get("pretty", True)))
        except OSError as exc:
            logger.error("STEP_FAILED: write_report", exc_info=True)
            print(f"\nFailed to write report: {exc}")
        else:
            print(f"\nOutput JSON: {output_path.resolve()}")

    logger.info("STEP_DONE: cli")
    return 0
