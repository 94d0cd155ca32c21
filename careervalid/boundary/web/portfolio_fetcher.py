"""
Portfolio page fetcher.

Downloads a portfolio page and extracts the metadata the analysis needs.

Dependencies: httpx, tenacity, bs4, careervalid.configs
System role: Portfolio website boundary client
"""

import logging
import re
from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from careervalid.configs.portfolio import PortfolioSettings
from careervalid.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DESCRIPTION_NAME = re.compile(r"^description$", re.IGNORECASE)


@dataclass(frozen=True)
class PortfolioPage:
    """Fetched portfolio page with extracted metadata."""

    url: str
    title: str
    description: str
    content_preview: str


def extract_page_metadata(page: str) -> tuple[str, str]:
    """
    Read the title and meta description of an HTML page.

    Args:
        page: Raw HTML

    Returns:
        tuple: (title, description), empty strings when absent
    """
    soup = BeautifulSoup(page or "", "html.parser")
    title = soup.title.get_text(" ", strip=True) if soup.title else ""

    meta = soup.find("meta", attrs={"name": DESCRIPTION_NAME})
    content = meta.get("content") if meta is not None else None
    description = content.strip() if isinstance(content, str) else ""
    return title, description


class PortfolioFetcher:
    """Fetch portfolio pages over HTTP."""

    def __init__(
        self,
        settings: PortfolioSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def fetch(self, url: str) -> PortfolioPage:
        """
        Fetch a portfolio page.

        Args:
            url: Absolute http(s) URL

        Returns:
            PortfolioPage: Title, meta description and HTML preview

        Raises:
            UpstreamError: On network failure or non-2xx response
        """
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": self._settings.user_agent},
                timeout=self._settings.timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async for attempt in AsyncRetrying(
                    retry=retry_if_exception_type(httpx.TransportError),
                    stop=stop_after_attempt(self._settings.max_attempts),
                    wait=wait_exponential_jitter(initial=0.5, max=8, jitter=1),
                    reraise=True,
                ):
                    with attempt:
                        response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Portfolio site returned {e.response.status_code}",
                service="portfolio",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Portfolio fetch failed",
                extra={"url": url, "error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise UpstreamError(f"Portfolio fetch failed: {e}", service="portfolio") from e

        page = response.text
        title, description = extract_page_metadata(page)
        return PortfolioPage(
            url=url,
            title=title,
            description=description,
            content_preview=page[: self._settings.content_preview_chars],
        )
