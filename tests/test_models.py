"""
Tests for configuration and domain models.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ptp_launcher.core.config.settings import (
    BINARY_NAME,
    RELEASE_BASE_URL,
    LauncherConfig,
)
from ptp_launcher.core.models import (
    FALLBACK_EXIT_CODE,
    AssetDescriptor,
    ExecutionRequest,
    ExecutionResult,
    ReleaseLocation,
)


class TestLauncherConfig:
    def test_binary_path(self, tmp_path: Path):
        cfg = LauncherConfig(install_root=tmp_path)
        assert cfg.binary_path == tmp_path / BINARY_NAME

    def test_defaults(self, tmp_path: Path):
        cfg = LauncherConfig(install_root=tmp_path)
        assert cfg.release_base_url == RELEASE_BASE_URL
        assert cfg.release_base_url.endswith("/releases/latest/download")
        assert cfg.user_agent

    def test_frozen(self, tmp_path: Path):
        cfg = LauncherConfig(install_root=tmp_path)
        with pytest.raises(ValidationError):
            cfg.binary_name = "other"

    def test_for_package_lives_beside_package(self):
        import ptp_launcher

        cfg = LauncherConfig.for_package()
        package_dir = Path(ptp_launcher.__file__).resolve().parent
        assert cfg.binary_path == package_dir / "bin" / BINARY_NAME

    def test_both_forms_same_file(self):
        import ptp_launcher

        site_dir = Path(ptp_launcher.__file__).resolve().parent.parent
        assert (
            LauncherConfig.for_vendor_dir(site_dir).binary_path
            == LauncherConfig.for_package().binary_path
        )

    def test_for_vendor_dir(self, tmp_path: Path):
        cfg = LauncherConfig.for_vendor_dir(str(tmp_path))
        assert cfg.install_root == tmp_path / "ptp_launcher" / "bin"


class TestExecutionResult:
    @pytest.mark.parametrize("code", [0, 1, 7, 255])
    def test_numeric_status_verbatim(self, code):
        result = ExecutionResult.from_returncode(code)
        assert result.exit_code == code
        assert not result.indeterminate

    def test_none_falls_back(self):
        result = ExecutionResult.from_returncode(None)
        assert result.exit_code == FALLBACK_EXIT_CODE == 1
        assert result.indeterminate

    def test_signal_falls_back(self):
        result = ExecutionResult.from_returncode(-9)
        assert result.exit_code == 1
        assert result.raw_status == -9


class TestExecutionRequest:
    def test_command(self, tmp_path: Path):
        req = ExecutionRequest(executable_path=tmp_path / "bin", argv=["run", "a b"])
        assert req.command == [str(tmp_path / "bin"), "run", "a b"]
        assert req.argv == ("run", "a b")

    def test_empty_argv(self, tmp_path: Path):
        req = ExecutionRequest(executable_path=tmp_path / "bin")
        assert req.command == [str(tmp_path / "bin")]


class TestAssetModels:
    def test_descriptor_frozen(self):
        d = AssetDescriptor(os_family="Linux", arch="amd64")
        with pytest.raises(ValidationError):
            d.arch = "arm64"

    def test_descriptor_rejects_unknown_family(self):
        with pytest.raises(ValidationError):
            AssetDescriptor(os_family="Plan9", arch="amd64")

    def test_release_archive_name(self):
        loc = ReleaseLocation(artifact_name="ptp-linux-amd64", download_url="https://x")
        assert loc.archive_name == "ptp-linux-amd64.tar.gz"
