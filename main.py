#!/usr/bin/env python3
"""Application starter; wires project root execution to modular src package."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

MIN_SUPPORTED_PYTHON = (3, 9)


def _ensure_src_on_path() -> None:
    """Ensure src/ is importable when running from repository root."""
    root = Path(__file__).resolve().parent
    src_path = root / "src"
    src_str = str(src_path)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


def _is_supported_python() -> bool:
    current = (sys.version_info.major, sys.version_info.minor)
    return current >= MIN_SUPPORTED_PYTHON


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Invoke probe CLI main function."""
    if not _is_supported_python():
        current = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        print(
            f"Unsupported Python runtime: {current}. "
            f"Use Python {MIN_SUPPORTED_PYTHON[0]}.{MIN_SUPPORTED_PYTHON[1]} or newer.",
            file=sys.stderr,
        )
        return 1

    _ensure_src_on_path()
    from sdk_probe.cli import main as cli_main

    return cli_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
