"""Configuration loading and resolution utilities for the probe."""

from __future__ import annotations

import json
import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional


CONFIG_FILENAME = "sdk_probe_config.json"
DEFAULT_REPORT_FILENAME = "sdk_probe_report.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "environment": {
        "variables": ["ANDROID_HOME", "ANDROID_SDK_ROOT"],
    },
    "sdk": {
        "root": "C:\\Android",
        "layout": [
            "platform-tools",
            "platform-tools/adb.exe",
            "build-tools",
            "build-tools/34.0.0",
            "platforms",
            "platforms/android-34",
            "tools",
            "tools/bin",
        ],
        "adb_executable": "adb.exe",
    },
    "deep_inspection": {
        # Empty string stands for sdk.root; the second entry is the root with a
        # space after the drive letter.
        "paths": ["", "C: \\Android"],
    },
    "checks": {
        "temp_write": True,
        "joined_path": ["C:", "Android"],
    },
    "output": {
        "path": "",
        "pretty": True,
    },
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, with override values taking precedence."""
    merged = deepcopy(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_env_values(obj: Any) -> Any:
    """Expand environment variables (e.g. ${ANDROID_HOME}) in string values."""
    if isinstance(obj, dict):
        return {key: expand_env_values(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [expand_env_values(item) for item in obj]
    if isinstance(obj, str):
        return os.path.expandvars(obj)
    return obj


def read_json_file(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def write_json_file(path: Path, data: Dict[str, Any], pretty: bool = True) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        if pretty:
            json.dump(data, handle, indent=2, ensure_ascii=False)
        else:
            json.dump(data, handle, ensure_ascii=False)


def write_default_config(config_path: Path) -> None:
    """Write a starter config file to disk."""
    write_json_file(config_path, DEFAULT_CONFIG, pretty=True)


def load_config(config_path: Optional[Path], required: bool = False) -> Dict[str, Any]:
    """
    Load a JSON config file merged with defaults.

    A missing file yields the defaults unless the caller asked for that file
    explicitly (required=True).
    """
    if config_path is None or not config_path.exists():
        if required:
            raise FileNotFoundError(
                f"Config file not found: {config_path}. "
                "Use --init-config to create a starter config file."
            )
        return deepcopy(DEFAULT_CONFIG)
    user_config = read_json_file(config_path)
    if not isinstance(user_config, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")
    return deep_merge(DEFAULT_CONFIG, expand_env_values(user_config))


def resolve_config_path(cli_config: Optional[str]) -> Optional[Path]:
    """
    Resolve configuration path with the following precedence:
    1) --config path passed by user
    2) sdk_probe_config.json in current working directory
    3) sdk_probe_config.json or <executable>_config.json next to executable/script

    Returns None when no config file is found.
    """
    if cli_config:
        return Path(cli_config).expanduser()

    candidate_names: List[str] = [CONFIG_FILENAME]
    executable_stem = Path(sys.argv[0]).stem
    if executable_stem:
        candidate_names.append(f"{executable_stem}_config.json")

    search_dirs: List[Path] = [Path.cwd()]
    if getattr(sys, "frozen", False):
        search_dirs.append(Path(sys.argv[0]).resolve().parent)
    else:
        search_dirs.append(Path(__file__).resolve().parents[2])
        search_dirs.append(Path(sys.argv[0]).resolve().parent)

    seen = set()
    deduped_dirs: List[Path] = []
    for directory in search_dirs:
        key = str(directory)
        if key in seen:
            continue
        seen.add(key)
        deduped_dirs.append(directory)

    for directory in deduped_dirs:
        for name in candidate_names:
            candidate = directory / name
            if candidate.exists():
                return candidate

    return None


def resolve_output_path(
    output_value: str,
    default_filename: str = DEFAULT_REPORT_FILENAME,
) -> Optional[Path]:
    """
    Resolve the JSON report destination, or None when no report was requested.

    If output_value points to a directory (existing, explicitly ending with a path
    separator, or having no file extension), place the report inside that directory
    using default_filename.
    """
    raw_value = (output_value or "").strip()
    if not raw_value:
        return None

    output_path = Path(raw_value).expanduser()

    if output_path.exists() and output_path.is_dir():
        return output_path / default_filename

    if raw_value.endswith("/") or raw_value.endswith("\\"):
        return output_path / default_filename

    if not output_path.exists() and output_path.suffix == "":
        return output_path / default_filename

    return output_path
