"""Core probe workflow."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from .discovery import build_probe_paths, candidate_sdk_roots, check_sdk_root
from .environment import read_sdk_environment, render_environment
from .inspector import check_joined_path, check_temp_write, inspect_path
from .reporting import (
    render_joined_path,
    render_path_report,
    render_sdk_root,
    render_temp_check,
)
from .utils import utc_now


def _emit(lines: Sequence[str]) -> None:
    for line in lines:
        print(line, flush=True)


def _is_fault(record: Dict[str, Any]) -> bool:
    return "error" in record or "list_error" in record


def run_probe(config: Dict[str, Any], logger: logging.Logger) -> Dict[str, Any]:
    """Print every diagnostic section in order and return the report payload."""
    sdk_cfg = config["sdk"]
    sdk_root = str(sdk_cfg.get("root", "C:\\Android"))
    started_at = utc_now()

    logger.info("STEP_START: environment")
    environment = read_sdk_environment(config["environment"].get("variables", []))
    _emit(render_environment(environment))
    logger.info("STEP_DONE: environment")

    logger.info("STEP_START: sdk_roots")
    sdk_roots: List[Dict[str, Any]] = []
    for root in candidate_sdk_roots(environment, sdk_root):
        result = check_sdk_root(root, str(sdk_cfg.get("adb_executable", "adb.exe")))
        _emit(render_sdk_root(result))
        sdk_roots.append(result)
    logger.info("STEP_DONE: sdk_roots count=%d", len(sdk_roots))

    logger.info("STEP_START: inspect_paths")
    path_records: List[Dict[str, Any]] = []
    for path in build_probe_paths(sdk_root, sdk_cfg.get("layout", [])):
        record = inspect_path(path)
        _emit(render_path_report(record))
        path_records.append(record)
    logger.info("STEP_DONE: inspect_paths count=%d", len(path_records))

    logger.info("STEP_START: deep_inspection")
    deep_records: List[Dict[str, Any]] = []
    for raw_path in config["deep_inspection"].get("paths", []):
        path = raw_path or sdk_root
        record = inspect_path(path, list_children=True)
        _emit(render_path_report(record))
        deep_records.append(record)
    logger.info("STEP_DONE: deep_inspection count=%d", len(deep_records))

    temp_check = None
    if config["checks"].get("temp_write", True):
        logger.info("STEP_START: temp_write")
        temp_check = check_temp_write()
        _emit(render_temp_check(temp_check))
        logger.info("STEP_DONE: temp_write ok=%s", temp_check["ok"])

    joined_path = None
    joined_parts = config["checks"].get("joined_path")
    if joined_parts:
        logger.info("STEP_START: joined_path")
        joined_path = check_joined_path([str(part) for part in joined_parts])
        _emit(render_joined_path(joined_path))
        logger.info("STEP_DONE: joined_path ok=%s", joined_path["ok"])

    all_records = path_records + deep_records
    return {
        "probe": {
            "name": "sdk-path-probe",
            "version": "1.0.0",
        },
        "started_at": started_at,
        "completed_at": utc_now(),
        "sdk_root": sdk_root,
        "environment": environment,
        "sdk_roots": sdk_roots,
        "paths": path_records,
        "deep_inspection": deep_records,
        "temp_check": temp_check,
        "joined_path": joined_path,
        "stats": {
            "paths_inspected": len(all_records),
            "paths_missing": sum(1 for record in all_records if not record["exists"]),
            "faults": sum(1 for record in all_records if _is_fault(record)),
        },
    }
