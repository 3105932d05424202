"""Per-path filesystem metadata inspection."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

TEMP_CHECK_FILENAME = "test-android-sdk-check.tmp"

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def canonical_path(path: PathLike) -> Tuple[Optional[str], Optional[str]]:
    """Return (resolved_path, None) or (None, error_message)."""
    try:
        return str(Path(path).resolve()), None
    except (OSError, RuntimeError) as exc:
        logger.error("Canonical path resolution failed for %s", path, exc_info=True)
        return None, str(exc)


def list_directory(path: PathLike) -> Tuple[Optional[List[str]], Optional[str]]:
    """Return (sorted child names, None) or (None, error_message)."""
    try:
        return sorted(os.listdir(path)), None
    except OSError as exc:
        logger.error("Directory listing failed for %s", path, exc_info=True)
        return None, str(exc)


def inspect_path(path: PathLike, list_children: bool = False) -> Dict[str, Any]:
    """
    Collect metadata for one path.

    A missing path yields only the existence flag. For directories the child
    count is recorded, and with list_children each child's canonical path too.
    Filesystem faults are recorded on the result, never raised.
    """
    target = Path(path)
    record: Dict[str, Any] = {"path": str(path), "exists": False}

    try:
        record["exists"] = target.exists()
        if not record["exists"]:
            return record
        record["is_dir"] = target.is_dir()
        record["is_file"] = target.is_file()
        record["readable"] = os.access(target, os.R_OK)
        record["writable"] = os.access(target, os.W_OK)
        record["executable"] = os.access(target, os.X_OK)
    except OSError as exc:
        logger.error("Error accessing path %s", path, exc_info=True)
        record["error"] = str(exc)
        return record

    if not record["is_dir"]:
        return record

    names, list_error = list_directory(target)
    if names is None:
        record["list_error"] = list_error
        return record

    record["child_count"] = len(names)
    if list_children:
        children: List[Dict[str, Optional[str]]] = []
        for name in names:
            resolved, error = canonical_path(target / name)
            children.append({"name": name, "canonical_path": resolved, "error": error})
        record["children"] = children
    return record


def check_temp_write(filename: str = TEMP_CHECK_FILENAME) -> Dict[str, Any]:
    """Create, write and delete a scratch file in the system temp directory."""
    target = Path(tempfile.gettempdir()) / filename
    result: Dict[str, Any] = {"path": str(target.absolute()), "ok": False}
    try:
        target.write_text("Test", encoding="utf-8")
        target.unlink()
    except OSError as exc:
        logger.error("Temp file check failed for %s", target, exc_info=True)
        result["error"] = str(exc)
        return result
    result["ok"] = True
    return result


def check_joined_path(parts: Sequence[str]) -> Dict[str, Any]:
    """
    Check the directory built by joining parts, e.g. ("C:", "Android").

    On Windows that join is drive-relative (C:Android), which differs from the
    rooted C:\\Android probed elsewhere.
    """
    target = Path(*parts) if parts else Path()
    result: Dict[str, Any] = {"parts": list(parts), "path": str(target), "ok": False}
    try:
        result["ok"] = target.exists() and target.is_dir()
    except OSError as exc:
        logger.error("Joined path check failed for %s", target, exc_info=True)
        result["error"] = str(exc)
    return result
