"""Tests for package manager detection and invocation."""

import subprocess
from pathlib import Path

import pytest

from clipmotion.errors import PackageInstallError
from clipmotion.integrations.package_installer.real import (
    RealPackageInstaller,
    build_install_command,
    detect_package_manager,
)


@pytest.mark.parametrize(
    ("lockfile", "expected"),
    [
        ("bun.lockb", "bun"),
        ("pnpm-lock.yaml", "pnpm"),
        ("yarn.lock", "yarn"),
        ("package-lock.json", "npm"),
    ],
)
def test_detect_package_manager(tmp_path: Path, lockfile: str, expected: str) -> None:
    (tmp_path / lockfile).write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) == expected


def test_detect_defaults_to_npm(tmp_path: Path) -> None:
    assert detect_package_manager(tmp_path) == "npm"


def test_build_install_command() -> None:
    assert build_install_command("npm", ["clsx"], dev=False) == ["npm", "install", "clsx"]
    assert build_install_command("npm", ["vitest"], dev=True) == [
        "npm",
        "install",
        "vitest",
        "--save-dev",
    ]
    assert build_install_command("pnpm", ["a", "b"], dev=True) == [
        "pnpm",
        "add",
        "a",
        "b",
        "--save-dev",
    ]
    assert build_install_command("yarn", ["a"], dev=True) == ["yarn", "add", "a", "--dev"]
    assert build_install_command("bun", ["a"], dev=False) == ["bun", "add", "a"]


def test_install_runs_detected_manager(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
    calls: list[tuple[list[str], Path]] = []

    def fake_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess[str]:
        calls.append((cmd, kwargs["cwd"]))
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    RealPackageInstaller(tmp_path).install(["clsx", "tailwind-merge"])

    assert calls == [(["yarn", "add", "clsx", "tailwind-merge"], tmp_path)]


def test_install_with_no_packages_does_nothing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail_run(*args, **kwargs):
        raise AssertionError("subprocess.run should not be called")

    monkeypatch.setattr(subprocess, "run", fail_run)

    RealPackageInstaller(tmp_path).install([])


def test_install_failure_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="E404 not found")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(PackageInstallError, match="E404 not found"):
        RealPackageInstaller(tmp_path, silent=True).install(["nope"])


def test_missing_package_manager_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess[str]:
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(PackageInstallError, match="Package manager not found: npm"):
        RealPackageInstaller(tmp_path).install(["clsx"])
