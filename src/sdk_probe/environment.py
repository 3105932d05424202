"""Environment variable probe for SDK root settings."""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Mapping, Optional

ABSENT_MARKER = "<unset>"


def read_sdk_environment(
    names: Iterable[str],
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Optional[str]]:
    """Return raw values for each variable name, None when unset."""
    source = os.environ if environ is None else environ
    return {name: source.get(name) for name in names}


def render_environment(values: Mapping[str, Optional[str]]) -> List[str]:
    lines: List[str] = []
    for name, value in values.items():
        if value is None:
            lines.append(f"{name}: {ABSENT_MARKER}")
        else:
            lines.append(f"{name}: '{value}'")
    return lines
