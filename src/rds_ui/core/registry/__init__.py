"""Component registry access.

select_registry_source() looks for a local registry first and falls back to
the published HTTPS registry.
"""

import logging
import os
from pathlib import Path

from rds_ui.core.registry.abc import RegistrySource
from rds_ui.core.registry.local import LocalRegistrySource
from rds_ui.core.registry.models import (
    ComponentEntry,
    FileBundle,
    RegistryIndex,
    is_lib_key,
    lib_name,
)
from rds_ui.core.registry.remote import REGISTRY_BASE_URL, HttpRegistrySource

logger = logging.getLogger(__name__)

REGISTRY_ENV_VAR = "RDS_UI_REGISTRY"


def _repo_local_registry() -> Path:
    # src/rds_ui/core/registry/__init__.py -> <repo>/registry
    return Path(__file__).resolve().parents[4] / "registry"


def select_registry_source(
    env: dict[str, str] | None = None,
    local_path: Path | None = None,
) -> RegistrySource:
    """Pick the registry source for this invocation.

    Order: $RDS_UI_REGISTRY (a directory or an http(s) base URL), then a
    repo-local registry/ directory when running from a checkout, then the
    published registry.

    Args:
        env: Environment mapping (defaults to os.environ)
        local_path: Repo-local registry directory to check (defaults to the
            registry/ directory next to the source tree)
    """
    environ = env if env is not None else dict(os.environ)
    override = environ.get(REGISTRY_ENV_VAR)
    if override:
        if override.startswith(("http://", "https://")):
            logger.debug("Using registry URL from $%s: %s", REGISTRY_ENV_VAR, override)
            return HttpRegistrySource(override)
        logger.debug("Using registry directory from $%s: %s", REGISTRY_ENV_VAR, override)
        return LocalRegistrySource(Path(override).expanduser())

    candidate = local_path if local_path is not None else _repo_local_registry()
    if (candidate / "index.json").exists():
        logger.debug("Using repo-local registry: %s", candidate)
        return LocalRegistrySource(candidate)

    logger.debug("Using remote registry: %s", REGISTRY_BASE_URL)
    return HttpRegistrySource()


__all__ = [
    "REGISTRY_BASE_URL",
    "REGISTRY_ENV_VAR",
    "ComponentEntry",
    "FileBundle",
    "HttpRegistrySource",
    "LocalRegistrySource",
    "RegistryIndex",
    "RegistrySource",
    "is_lib_key",
    "lib_name",
    "select_registry_source",
]
