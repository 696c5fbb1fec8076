"""Fake registry source for testing.

FakeRegistrySource serves an in-memory index and file map and records which
files were fetched, so tests can assert on fetch order and on files that were
never fetched (skipped conflicts).
"""

from rds_ui.core.errors import RegistryError
from rds_ui.core.registry.abc import RegistrySource
from rds_ui.core.registry.models import RegistryIndex


class FakeRegistrySource(RegistrySource):
    """In-memory registry.

    This class has NO public setup methods. All state is provided via the
    constructor or captured during execution.
    """

    def __init__(
        self,
        index: RegistryIndex | None = None,
        *,
        files: dict[str, str] | None = None,
    ) -> None:
        """Create a fake registry.

        Args:
            index: Index returned by fetch_index(). None makes fetch_index() raise
                RegistryError, simulating a missing manifest.
            files: Mapping of registry-relative path to content. Files listed in
                the index but absent here raise RegistryError when fetched.
        """
        self._index = index
        self._files = files if files is not None else {}
        self._fetched_files: list[str] = []
        self._closed = False

    @property
    def fetched_files(self) -> list[str]:
        """Paths passed to fetch_file(), in call order.

        This property is for test assertions only.
        """
        return self._fetched_files

    @property
    def closed(self) -> bool:
        """Whether close() was called. For test assertions only."""
        return self._closed

    def fetch_index(self) -> RegistryIndex:
        if self._index is None:
            raise RegistryError("Registry index not found at fake://registry/index.json")
        return self._index

    def fetch_file(self, relative_path: str) -> str:
        self._fetched_files.append(relative_path)
        if relative_path not in self._files:
            raise RegistryError(f"Failed to fetch {relative_path}: not found in fake registry")
        return self._files[relative_path]

    def describe(self) -> str:
        return "fake://registry"

    def close(self) -> None:
        self._closed = True
