"""Package manager detection and dependency installation.

Detection is a pure function of the project directory. Installation goes
through the PackageInstaller abstraction so commands can be tested without
spawning pnpm/yarn/bun/npm.
"""

import logging
import shlex
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal

from rds_ui.core.subprocess import run_subprocess_with_context
from rds_ui.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

PackageManager = Literal["pnpm", "yarn", "bun", "npm"]

# First match wins.
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("package-lock.json", "npm"),
)


def detect_package_manager(project_dir: Path) -> PackageManager:
    """Detect the project's package manager from its lockfile, defaulting to npm."""
    for lockfile, manager in LOCKFILES:
        if (project_dir / lockfile).exists():
            return manager
    return "npm"


def get_install_command(pm: PackageManager, deps: list[str], dev: bool = False) -> list[str]:
    """Build the "add dependency" invocation for a package manager.

    Examples:
        >>> get_install_command("pnpm", ["reka-ui"])
        ['pnpm', 'add', 'reka-ui']
        >>> get_install_command("npm", ["vitest"], dev=True)
        ['npm', 'install', '--save-dev', 'vitest']
    """
    match pm:
        case "pnpm" | "yarn" | "bun":
            cmd = [pm, "add"]
            dev_flag = "-D"
        case _:
            cmd = ["npm", "install"]
            dev_flag = "--save-dev"
    if dev:
        cmd.append(dev_flag)
    return [*cmd, *deps]


def format_command(cmd: list[str]) -> str:
    return shlex.join(cmd)


class PackageInstaller(ABC):
    """Abstract dependency installation for a consumer project."""

    @abstractmethod
    def detect(self, project_dir: Path) -> PackageManager:
        """Return the package manager used by the project."""
        ...

    @abstractmethod
    def install(self, project_dir: Path, deps: list[str], dev: bool = False) -> bool:
        """Install deps with the project's package manager.

        Best-effort: failures are reported to the user and signalled by
        returning False, never raised. An empty deps list is a no-op that
        returns True.
        """
        ...


class RealPackageInstaller(PackageInstaller):
    """Runs the detected package manager as a subprocess."""

    def __init__(self, feedback: UserFeedback) -> None:
        self._feedback = feedback

    def detect(self, project_dir: Path) -> PackageManager:
        return detect_package_manager(project_dir)

    def install(self, project_dir: Path, deps: list[str], dev: bool = False) -> bool:
        if not deps:
            return True

        pm = self.detect(project_dir)
        cmd = get_install_command(pm, deps, dev=dev)
        command_str = format_command(cmd)

        self._feedback.detail(f"\nInstalling dependencies with {pm}...")
        self._feedback.detail(f"$ {command_str}\n")

        try:
            run_subprocess_with_context(
                cmd,
                operation_context=f"install dependencies with {pm}",
                cwd=project_dir,
                capture_output=False,
            )
        except RuntimeError as e:
            logger.debug("Dependency installation failed: %s", e)
            self._feedback.error("\n❌ Failed to install dependencies")
            self._feedback.detail(f"Run manually: {command_str}")
            return False
        return True
