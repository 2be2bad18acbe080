"""Eastmoney quote API client."""
import logging
from typing import Dict, Optional

import httpx

from stock_api.config import upstream_config
from stock_api.domain.entities import Quote
from stock_api.domain.errors import UpstreamUnavailableError
from stock_api.domain.interfaces import QuoteProvider
from stock_api.infrastructure.quote_decoder import FIELD_NAME, FIELD_PRICE, decode_quote

logger = logging.getLogger(__name__)


class EastmoneyQuoteClient(QuoteProvider):
    """Fetches current price and display name from push2.eastmoney.com."""

    def __init__(
        self,
        url: str = None,
        ut: str = None,
        timeout: float = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._url = url or upstream_config.URL
        self._ut = ut or upstream_config.UT
        self._timeout = timeout if timeout is not None else upstream_config.TIMEOUT
        self._headers = {
            "User-Agent": upstream_config.USER_AGENT,
            "Referer": upstream_config.REFERER,
        }
        self._client = client

    async def connect(self) -> None:
        """Create the shared HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            logger.info(f"Quote client ready for {self._url} (timeout {self._timeout}s)")

    async def close(self) -> None:
        """Close the shared HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Quote client closed")

    def build_params(self, secid: str) -> Dict[str, str]:
        """Query parameters selecting price and name for a security."""
        return {
            "ut": self._ut,
            "invt": "2",
            "fltt": "2",
            "fields": f"{FIELD_PRICE},{FIELD_NAME}",
            "secid": secid,
        }

    async def fetch_quote(self, secid: str) -> Quote:
        """Fetch and decode the quote for a security identifier."""
        if self._client is None:
            raise RuntimeError("Quote client not connected")

        try:
            response = await self._client.get(
                self._url,
                params=self.build_params(secid),
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Quote request for {secid} timed out: {e!r}")
            raise UpstreamUnavailableError("API请求超时") from e
        except httpx.HTTPError as e:
            logger.error(f"Quote request for {secid} failed: {e!r}")
            raise UpstreamUnavailableError() from e

        if response.is_error:
            logger.error(f"Quote request for {secid} returned HTTP {response.status_code}")
            raise UpstreamUnavailableError()

        return decode_quote(response.content)
