"""
Pytest configuration file
Puts src/ on sys.path and provides a fake SDK tree.
"""

import logging
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def sdk_tree(tmp_path):
    """Build a minimal Android SDK layout under tmp_path/Android."""
    root = tmp_path / "Android"
    (root / "platform-tools").mkdir(parents=True)
    (root / "platform-tools" / "adb.exe").write_text("adb", encoding="utf-8")
    (root / "build-tools" / "34.0.0").mkdir(parents=True)
    (root / "platforms" / "android-34").mkdir(parents=True)
    (root / "tools" / "bin").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def reset_probe_logger():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("sdk_probe")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
