"""SDK root candidate selection and layout checks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .inspector import list_directory

logger = logging.getLogger(__name__)


def build_probe_paths(sdk_root: str, layout: Iterable[str]) -> List[str]:
    """Return the root followed by each layout entry joined onto it."""
    root = Path(sdk_root)
    paths = [sdk_root]
    for relative in layout:
        parts = [part for part in relative.replace("\\", "/").split("/") if part]
        paths.append(str(root.joinpath(*parts)))
    return paths


def candidate_sdk_roots(
    environment: Mapping[str, Optional[str]],
    default_root: str,
) -> List[str]:
    """Collect set environment values and the default root, de-duplicated in order."""
    seen = set()
    roots: List[str] = []
    for value in [*environment.values(), default_root]:
        if value is None or value in seen:
            continue
        seen.add(value)
        roots.append(value)
    return roots


def check_sdk_root(sdk_root: str, adb_name: str = "adb.exe") -> Dict[str, Any]:
    """Report whether a directory has the platform-tools/adb/build-tools/platforms layout."""
    result: Dict[str, Any] = {"root": sdk_root, "is_directory": False}
    # Path("") is the working directory; a blank setting names no directory.
    if not sdk_root.strip():
        return result

    root = Path(sdk_root)
    try:
        result["is_directory"] = root.exists() and root.is_dir()
        if not result["is_directory"]:
            return result

        platform_tools = root / "platform-tools"
        markers = {
            "platform-tools": platform_tools.exists(),
            "adb": (platform_tools / adb_name).exists(),
            "build-tools": (root / "build-tools").exists(),
            "platforms": (root / "platforms").exists(),
        }
    except OSError as exc:
        logger.error("Error accessing SDK root %s", sdk_root, exc_info=True)
        result["error"] = str(exc)
        return result

    result["markers"] = markers
    result["looks_like_sdk"] = all(markers.values())
    if not result["looks_like_sdk"]:
        return result

    names, list_error = list_directory(root)
    if names is None:
        result["list_error"] = list_error
        return result

    entries: List[Dict[str, Any]] = []
    for name in names:
        try:
            is_dir = (root / name).is_dir()
        except OSError:
            logger.error("Error accessing %s", root / name, exc_info=True)
            is_dir = False
        entries.append({"name": name, "is_dir": is_dir})
    result["entries"] = entries
    return result
