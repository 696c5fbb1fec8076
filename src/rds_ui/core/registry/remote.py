"""Registry source served over HTTPS."""

import logging

import httpx

from rds_ui.core.errors import RegistryError
from rds_ui.core.registry.abc import RegistrySource
from rds_ui.core.registry.models import RegistryIndex, parse_registry_index

logger = logging.getLogger(__name__)

REGISTRY_BASE_URL = "https://raw.githubusercontent.com/banavasi/adms-ui-registry/main/registry"
DEFAULT_TIMEOUT = 30.0


class HttpRegistrySource(RegistrySource):
    """Fetch index.json and raw files under a fixed base URL.

    An httpx.Client may be injected (e.g. one built on httpx.MockTransport);
    otherwise a client is created lazily and reused for the whole invocation.
    """

    def __init__(
        self,
        base_url: str = REGISTRY_BASE_URL,
        *,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    def fetch_index(self) -> RegistryIndex:
        url = f"{self._base_url}/index.json"
        text = self._get(url, "Failed to fetch registry")
        return parse_registry_index(text, url)

    def fetch_file(self, relative_path: str) -> str:
        url = f"{self._base_url}/{relative_path.lstrip('/')}"
        return self._get(url, f"Failed to fetch {relative_path}")

    def describe(self) -> str:
        return self._base_url

    def close(self) -> None:
        # Injected clients belong to the caller.
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def _get(self, url: str, failure: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = self._http().get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = f"{e.response.status_code} {e.response.reason_phrase}"
            raise RegistryError(f"{failure}: {status}") from e
        except httpx.HTTPError as e:
            raise RegistryError(f"{failure}: {e}") from e
        return response.text

    def _http(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout, follow_redirects=True)
        return self._client
