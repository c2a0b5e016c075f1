"""
L3 Detection — Installed binary status.

Read-only check used by the delegate before spawning and by
``ptp-host status``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

BinaryStatus = Literal["present", "missing", "not_executable"]


def check_binary(path: Path) -> BinaryStatus:
    """Report whether ``path`` is an executable regular file."""
    if not path.is_file():
        return "missing"
    if not os.access(path, os.X_OK):
        return "not_executable"
    return "present"


def binary_info(path: Path) -> dict:
    """Status plus size, for reporting.

    Returns::

        {"path": "...", "status": "present", "size_bytes": 1234}
    """
    status = check_binary(path)
    info: dict = {"path": str(path), "status": status}
    if status != "missing":
        info["size_bytes"] = path.stat().st_size
    return info
