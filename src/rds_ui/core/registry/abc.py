"""Registry source abstraction.

A registry can live on the local filesystem (repo-local development) or be
served over HTTPS. Both implement the same two reads, so callers never branch
on where the registry comes from.
"""

from abc import ABC, abstractmethod

from rds_ui.core.registry.models import RegistryIndex


class RegistrySource(ABC):
    """Abstract read-only access to a component registry."""

    @abstractmethod
    def fetch_index(self) -> RegistryIndex:
        """Fetch and parse the registry index.json.

        Raises:
            RegistryError: If the index is missing, unreachable or malformed
        """
        ...

    @abstractmethod
    def fetch_file(self, relative_path: str) -> str:
        """Fetch a registry file's content.

        Args:
            relative_path: Path relative to the registry root, as listed in the index

        Raises:
            RegistryError: If the file cannot be read
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location, used in debug output."""
        ...

    def close(self) -> None:
        """Release any connection held by the source. Safe to call more than once."""
