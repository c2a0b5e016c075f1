"""
Shared test fixtures and configuration.
"""

import io
import logging
import tarfile
from pathlib import Path

import pytest

from ptp_launcher.core.config.settings import LauncherConfig
from tests.helpers import write_script


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Directory the binary is installed into (not created up front)."""
    return tmp_path / "vendor" / "ptp_launcher" / "bin"


@pytest.fixture
def config(install_root: Path) -> LauncherConfig:
    return LauncherConfig(install_root=install_root)


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Private temp dir so tests can assert that nothing is left behind."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    return scratch


@pytest.fixture
def make_archive(tmp_path: Path):
    """Build a gzip tarball from ``{member_name: bytes}``."""

    def _make(members: dict[str, bytes], name: str = "release.tar.gz") -> Path:
        path = tmp_path / name
        with tarfile.open(path, "w:gz") as tf:
            for member_name, data in members.items():
                info = tarfile.TarInfo(member_name)
                info.size = len(data)
                info.mode = 0o755
                tf.addfile(info, io.BytesIO(data))
        return path

    return _make


@pytest.fixture
def fake_binary(config: LauncherConfig):
    """Install a shell script at the configured binary path."""

    def _install(body: str, mode: int = 0o755) -> Path:
        return write_script(config.binary_path, body, mode)

    return _install


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Entrypoints reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    saved_level = root.level
    saved = root.handlers[:]
    yield
    for handler in root.handlers[:]:
        if handler not in saved:
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    root.setLevel(saved_level)
