"""CLI error handling utilities with styled output.

The Ensure class asserts command preconditions with consistent, user-friendly
error messages. All errors use a red "Error:" prefix and exit with status 1.
"""

from pathlib import Path
from typing import TypeVar

import click

from rds_ui.cli.output import user_output
from rds_ui.core.config import CONFIG_FILE, config_exists

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Narrows `T | None` to `T` for the type checker.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def project_manifest(project_dir: Path) -> None:
        """Ensure the directory is a JS project root (has package.json)."""
        Ensure.invariant(
            (project_dir / "package.json").exists(),
            "No package.json found. Run this in a project root.",
        )

    @staticmethod
    def initialized(project_dir: Path) -> None:
        """Ensure `init` has been run (rds-ui.json exists)."""
        Ensure.invariant(
            config_exists(project_dir),
            f"{CONFIG_FILE} not found. Run `adms-rds-ui init` first.",
        )
