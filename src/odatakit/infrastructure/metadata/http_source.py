"""HTTP metadata source - fetches $metadata from a live service."""

import logging

import httpx

from odatakit.domain.exceptions import MetadataError

logger = logging.getLogger(__name__)


class HttpMetadataSource:
    """Metadata source reading ``{service_url}/{metadata_path}`` over HTTP."""

    def __init__(
        self,
        service_url: str,
        metadata_path: str = "$metadata",
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = f"{service_url.rstrip('/')}/{metadata_path.lstrip('/')}"
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> bytes:
        """Return the raw metadata document. Raises MetadataError on any HTTP failure."""
        logger.info("Fetching metadata from %s", self._url)
        async with httpx.AsyncClient(
            timeout=self._timeout,
            verify=self._verify_ssl,
            transport=self._transport,
        ) as client:
            try:
                r = await client.get(self._url, headers={"Accept": "application/xml"})
                r.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise MetadataError(
                    f"Metadata request failed with {e.response.status_code}: {self._url}"
                ) from e
            except httpx.HTTPError as e:
                raise MetadataError(f"Metadata request failed: {e}") from e
        return r.content
