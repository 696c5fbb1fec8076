"""Write registry component files into the consumer project.

Each file lands at {componentsDir}/{entry.name}/{basename}. Existing files go
through the conflict policy: overwrite replaces them, assume-yes skips them,
and interactive mode asks per file.
"""

import logging
import posixpath
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rds_ui.core.config import RdsConfig
from rds_ui.core.context import RdsContext
from rds_ui.core.errors import RegistryError
from rds_ui.core.registry import ComponentEntry
from rds_ui.core.transformer import transform_imports

logger = logging.getLogger(__name__)


class FileStatus(Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ConflictPolicy:
    """How to treat destination files that already exist.

    Attributes:
        assume_yes: Never prompt; existing files are skipped unless overwrite is set
        overwrite: Replace existing files without prompting
    """

    assume_yes: bool = False
    overwrite: bool = False

    def non_interactive(self) -> "ConflictPolicy":
        """Same overwrite behaviour with prompts suppressed (used for dependencies)."""
        return ConflictPolicy(assume_yes=True, overwrite=self.overwrite)


@dataclass(frozen=True)
class FileOutcome:
    destination: str
    status: FileStatus


def destination_for(config: RdsConfig, entry: ComponentEntry, registry_path: str) -> str:
    """Project-relative destination: {componentsDir}/{entry.name}/{basename}."""
    return posixpath.join(config.components_dir, entry.name, posixpath.basename(registry_path))


def project_path(project_dir: Path, relative: str) -> Path:
    """Resolve a project-relative destination, refusing anything outside the project.

    Raises:
        RegistryError: If the destination resolves outside project_dir (an
            absolute component name, or one that climbs out with "..")
    """
    root = project_dir.resolve()
    dest_path = (root / relative).resolve()
    if not dest_path.is_relative_to(root):
        raise RegistryError(f"Refusing to write {relative}: outside the project root {root}")
    return dest_path


def _should_write(ctx: RdsContext, dest_path: Path, relative: str, policy: ConflictPolicy) -> bool:
    if not dest_path.exists() or policy.overwrite:
        return True

    if policy.assume_yes:
        ctx.feedback.detail(f"  Skipped {relative} (use --overwrite)")
        return False

    if ctx.prompter.confirm(f"{dest_path.name} already exists. Overwrite?", default=False):
        return True

    ctx.feedback.detail(f"  Skipped {relative}")
    return False


def materialize_component(
    ctx: RdsContext,
    config: RdsConfig,
    entry: ComponentEntry,
    policy: ConflictPolicy,
    handled: set[str] | None = None,
) -> list[FileOutcome]:
    """Fetch, transform and write each of a component's files, in declared order.

    Files that end up skipped are never fetched.

    Args:
        handled: Destinations already written or skipped earlier in the same
            run. A repeated destination is skipped with a warning instead of
            going through the conflict policy. Updated in place.

    Raises:
        RegistryError: If a file to be written cannot be fetched, or its
            destination falls outside the project
    """
    seen = handled if handled is not None else set()
    outcomes: list[FileOutcome] = []

    for registry_path in entry.files:
        relative = destination_for(config, entry, registry_path)
        dest_path = project_path(ctx.cwd, relative)

        if relative in seen:
            ctx.feedback.warning(
                f"  ⚠ Skipped {registry_path}: {relative} was already added in this run"
            )
            outcomes.append(FileOutcome(relative, FileStatus.SKIPPED))
            continue
        seen.add(relative)

        if not _should_write(ctx, dest_path, relative, policy):
            outcomes.append(FileOutcome(relative, FileStatus.SKIPPED))
            continue

        content = transform_imports(ctx.registry.fetch_file(registry_path), config)

        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes) from %s", dest_path, len(content), registry_path)

        ctx.feedback.success(f"✓ Created {relative}")
        outcomes.append(FileOutcome(relative, FileStatus.WRITTEN))

    return outcomes
