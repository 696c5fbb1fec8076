"""Tests for package manager detection and installation."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rds_ui.core.package_manager import (
    RealPackageInstaller,
    detect_package_manager,
    get_install_command,
)
from tests.fakes.user_feedback import FakeUserFeedback


@pytest.mark.parametrize(
    ("lockfile", "expected"),
    [
        ("pnpm-lock.yaml", "pnpm"),
        ("yarn.lock", "yarn"),
        ("bun.lockb", "bun"),
        ("package-lock.json", "npm"),
    ],
)
def test_detects_manager_from_lockfile(tmp_path: Path, lockfile: str, expected: str) -> None:
    (tmp_path / lockfile).write_text("", encoding="utf-8")

    assert detect_package_manager(tmp_path) == expected


def test_defaults_to_npm_without_lockfile(tmp_path: Path) -> None:
    assert detect_package_manager(tmp_path) == "npm"


def test_first_matching_lockfile_wins(tmp_path: Path) -> None:
    for lockfile in ("package-lock.json", "yarn.lock", "pnpm-lock.yaml"):
        (tmp_path / lockfile).write_text("", encoding="utf-8")

    assert detect_package_manager(tmp_path) == "pnpm"


def test_yarn_beats_bun_and_npm(tmp_path: Path) -> None:
    for lockfile in ("bun.lockb", "package-lock.json", "yarn.lock"):
        (tmp_path / lockfile).write_text("", encoding="utf-8")

    assert detect_package_manager(tmp_path) == "yarn"


@pytest.mark.parametrize(
    ("pm", "dev", "expected"),
    [
        ("pnpm", False, ["pnpm", "add", "reka-ui", "clsx"]),
        ("yarn", False, ["yarn", "add", "reka-ui", "clsx"]),
        ("bun", False, ["bun", "add", "reka-ui", "clsx"]),
        ("npm", False, ["npm", "install", "reka-ui", "clsx"]),
        ("pnpm", True, ["pnpm", "add", "-D", "reka-ui", "clsx"]),
        ("npm", True, ["npm", "install", "--save-dev", "reka-ui", "clsx"]),
    ],
)
def test_install_command(pm, dev: bool, expected: list[str]) -> None:
    assert get_install_command(pm, ["reka-ui", "clsx"], dev=dev) == expected


def test_install_with_no_deps_does_nothing(tmp_path: Path) -> None:
    installer = RealPackageInstaller(FakeUserFeedback())

    with patch("rds_ui.core.subprocess.subprocess.run") as mock_run:
        assert installer.install(tmp_path, []) is True

    mock_run.assert_not_called()


def test_install_runs_detected_manager_in_project_root(tmp_path: Path) -> None:
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")
    feedback = FakeUserFeedback()
    installer = RealPackageInstaller(feedback)

    with patch("rds_ui.core.subprocess.subprocess.run") as mock_run:
        assert installer.install(tmp_path, ["reka-ui", "clsx"]) is True

    mock_run.assert_called_once_with(
        ["pnpm", "add", "reka-ui", "clsx"],
        cwd=tmp_path,
        capture_output=False,
        text=True,
        encoding="utf-8",
        check=True,
    )
    assert "$ pnpm add reka-ui clsx\n" in feedback.texts("detail")


def test_install_failure_is_reported_not_raised(tmp_path: Path) -> None:
    feedback = FakeUserFeedback()
    installer = RealPackageInstaller(feedback)
    error = subprocess.CalledProcessError(returncode=1, cmd=["npm", "install", "some-pkg"])

    with patch("rds_ui.core.subprocess.subprocess.run", side_effect=error):
        assert installer.install(tmp_path, ["some-pkg"]) is False

    assert feedback.texts("error") == ["\n❌ Failed to install dependencies"]
    assert "Run manually: npm install some-pkg" in feedback.texts("detail")


def test_missing_package_manager_binary_is_reported(tmp_path: Path) -> None:
    (tmp_path / "bun.lockb").write_text("", encoding="utf-8")
    feedback = FakeUserFeedback()
    installer = RealPackageInstaller(feedback)

    with patch("rds_ui.core.subprocess.subprocess.run", side_effect=FileNotFoundError("bun")):
        assert installer.install(tmp_path, ["reka-ui"]) is False

    assert "Run manually: bun add reka-ui" in feedback.texts("detail")
