"""Fake PackageInstaller for testing.

Records install() invocations instead of running a package manager.
"""

from pathlib import Path

from rds_ui.core.package_manager import (
    PackageInstaller,
    PackageManager,
    detect_package_manager,
)


class FakePackageInstaller(PackageInstaller):
    """In-memory installer.

    Constructor Injection:
    - package_manager: value returned by detect(); None uses real lockfile
      detection against the given directory
    - succeed: value returned by install() for non-empty dependency lists
    """

    def __init__(
        self, *, package_manager: PackageManager | None = None, succeed: bool = True
    ) -> None:
        self._package_manager = package_manager
        self._succeed = succeed
        self._install_calls: list[tuple[Path, list[str], bool]] = []

    @property
    def install_calls(self) -> list[tuple[Path, list[str], bool]]:
        """(project_dir, deps, dev) for every install() call that had deps to install."""
        return self._install_calls

    def detect(self, project_dir: Path) -> PackageManager:
        if self._package_manager is not None:
            return self._package_manager
        return detect_package_manager(project_dir)

    def install(self, project_dir: Path, deps: list[str], dev: bool = False) -> bool:
        if not deps:
            return True
        self._install_calls.append((project_dir, list(deps), dev))
        return self._succeed
