"""Human-readable rendering of probe results."""

from __future__ import annotations

from typing import Any, Dict, List

from .utils import format_bool


def render_path_report(record: Dict[str, Any]) -> List[str]:
    """Render one inspect_path record as output lines, including the leading blank line."""
    lines = ["", f"Testing path: {record['path']}"]
    lines.append(f"Exists: {format_bool(record.get('exists'))}")
    if "error" in record:
        lines.append(f"Error accessing path: {record['error']}")
        return lines
    if not record.get("exists"):
        return lines

    lines.append(f"Is directory: {format_bool(record.get('is_dir'))}")
    lines.append(f"Is file: {format_bool(record.get('is_file'))}")
    lines.append(f"Can read: {format_bool(record.get('readable'))}")
    lines.append(f"Can write: {format_bool(record.get('writable'))}")
    lines.append(f"Can execute: {format_bool(record.get('executable'))}")

    if "list_error" in record:
        lines.append(f"Cannot list directory contents: {record['list_error']}")
    elif "child_count" in record:
        lines.append(f"Number of children: {record['child_count']}")

    for child in record.get("children", []):
        lines.append("")
        lines.append(f"  {child['name']}")
        if child.get("error"):
            lines.append(f"    Error getting canonical path: {child['error']}")
        else:
            lines.append(f"    Path: {child['canonical_path']}")
    return lines


def render_sdk_root(result: Dict[str, Any]) -> List[str]:
    lines = ["", f"Testing SDK path: '{result['root']}'"]
    if "error" in result:
        lines.append(f"  Error accessing path: {result['error']}")
        return lines
    if not result.get("is_directory"):
        lines.append("  Directory does not exist or is not a directory")
        return lines

    lines.append("  Directory exists")
    markers = result.get("markers", {})
    for name in ("platform-tools", "adb", "build-tools", "platforms"):
        lines.append(f"  {name} exists: {format_bool(markers.get(name))}")

    if not result.get("looks_like_sdk"):
        lines.append("  Doesn't look like a valid Android SDK directory")
        return lines

    lines.append("  Looks like a valid Android SDK directory")
    if "list_error" in result:
        lines.append(f"  Error listing contents: {result['list_error']}")
    for entry in result.get("entries", []):
        suffix = " (dir)" if entry["is_dir"] else ""
        lines.append(f"  - {entry['name']}{suffix}")
    return lines


def render_temp_check(result: Dict[str, Any]) -> List[str]:
    if result.get("ok"):
        return ["", f"Temp file created successfully: {result['path']}"]
    return ["", f"Error creating temp file: {result.get('error')}"]


def render_joined_path(result: Dict[str, Any]) -> List[str]:
    if "error" in result:
        return ["", f"Joined path check failed for {result['path']}: {result['error']}"]
    if result.get("ok"):
        return ["", f"Joined path check passed: {result['path']}"]
    return ["", f"Joined path check: {result['path']} is not an existing directory"]
