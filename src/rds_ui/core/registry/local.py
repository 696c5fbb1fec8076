"""Registry source backed by a local directory."""

import logging
from pathlib import Path

from rds_ui.core.errors import RegistryError
from rds_ui.core.registry.abc import RegistrySource
from rds_ui.core.registry.models import RegistryIndex, parse_registry_index

logger = logging.getLogger(__name__)


class LocalRegistrySource(RegistrySource):
    """Read index.json and component files from a registry checkout on disk."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def fetch_index(self) -> RegistryIndex:
        index_path = self._root / "index.json"
        if not index_path.exists():
            raise RegistryError(f"Registry index not found at {index_path}")

        logger.debug("Reading registry index: %s", index_path)
        return parse_registry_index(index_path.read_text(encoding="utf-8"), str(index_path))

    def fetch_file(self, relative_path: str) -> str:
        file_path = self._root / relative_path
        if not file_path.is_file():
            raise RegistryError(f"Failed to fetch {relative_path}: not found in {self._root}")

        logger.debug("Reading registry file: %s", file_path)
        return file_path.read_text(encoding="utf-8")

    def describe(self) -> str:
        return str(self._root)
