"""
Test helpers shared across modules (fixtures live in conftest.py).
"""

import io
import os
import stat
from pathlib import Path

import pytest

posix_only = pytest.mark.skipif(os.name != "posix", reason="needs a POSIX shell")


def write_script(path: Path, body: str, mode: int = 0o755) -> Path:
    """Write a ``/bin/sh`` script and set its mode."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(mode)
    return path


def is_executable(path: Path) -> bool:
    return bool(path.stat().st_mode & stat.S_IXUSR) and os.access(path, os.X_OK)


class FakeResponse:
    """Minimal stand-in for the object ``urllib.request.urlopen`` returns."""

    def __init__(self, body: bytes, status: int = 200):
        self._buf = io.BytesIO(body)
        self._status = status
        self.request = None

    def read(self, size: int = -1) -> bytes:
        return self._buf.read(size)

    def getcode(self) -> int:
        return self._status

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False
