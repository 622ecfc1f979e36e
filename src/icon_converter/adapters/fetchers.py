"""SVG markup retrieval from URLs and local files."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from types import TracebackType

import httpx

from icon_converter.errors import FetchError
from icon_converter.sources import is_url


class CachingContentFetcher:
    """Fetch markup once per distinct source string for the life of a run.

    Parameters
    ----------
    client : httpx.AsyncClient | None, default=None
        HTTP client used for URL sources. A client is created lazily, and
        closed by :meth:`aclose`, when none is injected.
    logger : logging.Logger | None, default=None
        Debug sink; the module logger when omitted.

    Notes
    -----
    The cache is an unbounded ``dict``. Concurrent first accesses to the same
    source may both hit the network; the second write stores identical text.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._logger = logger or logging.getLogger(__name__)
        self.cache: dict[str, str] = {}

    async def __aenter__(self) -> CachingContentFetcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, source: str, use_cache: bool = True) -> str:
        """Return the markup stored at ``source``.

        Parameters
        ----------
        source : str
            Absolute URL or local filesystem path.
        use_cache : bool, default=True
            Serve and store results in the run cache.

        Raises
        ------
        FetchError
            On a non-2xx HTTP response, a missing local file or any I/O error.
        """
        if use_cache and source in self.cache:
            self._logger.debug("Cache hit for: %s", source)
            return self.cache[source]

        try:
            if is_url(source):
                content = await self._fetch_url(source)
            else:
                content = await self._read_file(source)
        except FetchError as exc:
            raise FetchError(f"Failed to fetch SVG from {source}: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL, OSError, UnicodeDecodeError) as exc:
            raise FetchError(f"Failed to fetch SVG from {source}: {exc}") from exc

        if use_cache:
            self.cache[source] = content
        return content

    async def _fetch_url(self, url: str) -> str:
        self._logger.debug("Fetching from URL: %s", url)
        if self._client is None:
            self._client = httpx.AsyncClient(follow_redirects=True)
        response = await self._client.get(url)
        if not response.is_success:
            raise FetchError(f"HTTP {response.status_code}: {response.reason_phrase}")
        return response.text

    async def _read_file(self, source: str) -> str:
        self._logger.debug("Reading local file: %s", source)
        path = Path(source)
        if not path.is_file():
            raise FetchError(f"File not found: {source}")
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
