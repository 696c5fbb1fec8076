"""Project configuration data structures and loading.

Provides the immutable RdsConfig persisted as rds-ui.json in the consumer
project root. Its presence is what marks a project as initialized.
"""

import json
import posixpath
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

from rds_ui.core.errors import ConfigError

CONFIG_FILE = "rds-ui.json"
REQUIRED_KEYS = ("alias", "srcDir", "componentsDir", "libDir", "stylesDir")


def _escapes_project(directory: str) -> bool:
    if PureWindowsPath(directory).drive:
        return True
    normalized = posixpath.normpath(directory.replace("\\", "/"))
    return normalized.startswith("/") or normalized == ".." or normalized.startswith("../")


@dataclass(frozen=True)
class RdsConfig:
    """Immutable consumer project configuration.

    Created by `init`, read by every `add`. All directories are relative to
    the project root.
    """

    alias: str
    src_dir: str
    components_dir: str
    components_alias: str
    lib_dir: str
    styles_dir: str

    def __post_init__(self) -> None:
        if not self.alias:
            raise ConfigError("Config 'alias' must be a non-empty string")
        for field, directory in (
            ("srcDir", self.src_dir),
            ("componentsDir", self.components_dir),
            ("libDir", self.lib_dir),
            ("stylesDir", self.styles_dir),
        ):
            if _escapes_project(directory):
                raise ConfigError(
                    f"Config '{field}' must be relative to the project root, got {directory!r}"
                )

    def relative_to_src(self, directory: str) -> str:
        """Strip the leading srcDir segment from a project-relative directory.

        "src/components/ui" becomes "components/ui" when srcDir is "src".
        Directories outside srcDir are returned unchanged.
        """
        prefix = f"{self.src_dir}/"
        if directory.startswith(prefix):
            return directory[len(prefix) :]
        return directory


def default_config() -> RdsConfig:
    return RdsConfig(
        alias="@",
        src_dir="src",
        components_dir="src/components/ui",
        components_alias="",
        lib_dir="src/lib",
        styles_dir="src/styles",
    )


def config_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILE


def config_exists(project_dir: Path) -> bool:
    return config_path(project_dir).exists()


def load_config(project_dir: Path) -> RdsConfig:
    """Load rds-ui.json from the project directory.

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or lacks a
            required field
    """
    path = config_path(project_dir)
    if not path.exists():
        raise ConfigError(f"{CONFIG_FILE} not found. Run `adms-rds-ui init` first.")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ConfigError(f"Missing {', '.join(repr(k) for k in missing)} in {path}")

    return RdsConfig(
        alias=str(data["alias"]),
        src_dir=str(data["srcDir"]),
        components_dir=str(data["componentsDir"]),
        components_alias=str(data.get("componentsAlias") or ""),
        lib_dir=str(data["libDir"]),
        styles_dir=str(data["stylesDir"]),
    )


def save_config(project_dir: Path, config: RdsConfig) -> None:
    """Write rds-ui.json with two-space indentation and camelCase keys."""
    data = {
        "alias": config.alias,
        "srcDir": config.src_dir,
        "componentsDir": config.components_dir,
        "componentsAlias": config.components_alias,
        "libDir": config.lib_dir,
        "stylesDir": config.styles_dir,
    }
    config_path(project_dir).write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
