from __future__ import annotations

import logging

from .base import ScrapeEngine, ScrapeReport
from ..config import ScrapeConfig
from ..extraction.extractor import ProductExtractor
from ..utils.http import build_headers, create_session, fetch_page
from ..utils.urls import validate_request_url

logger = logging.getLogger(__name__)


class SimpleScrapeEngine(ScrapeEngine):
    """
    Single-page scraper.
    - Engine owns HTTP.
    - The extractor owns page parsing.
    Any ScrapeError (URLError, FetchError, ParseError) propagates to the caller.
    """
    def __init__(self, config: ScrapeConfig, extractor: ProductExtractor | None = None) -> None:
        self.config = config
        self.extractor = extractor or ProductExtractor()

    async def fetch(self, url: str) -> bytes:
        cfg = self.config
        session = create_session()
        try:
            return await fetch_page(
                session,
                url,
                timeout=cfg.request_timeout,
                headers=build_headers(cfg.user_agent, cfg.accept, cfg.accept_language),
                retries=cfg.retries,
            )
        finally:
            await session.close()

    async def scrape(self, url: str) -> ScrapeReport:
        url = validate_request_url(url)
        logger.info("Scanning URL: %s", url)
        html = await self.fetch(url)
        result = self.extractor.extract(url, html)
        logger.info("Found %s products (%s unique) on %s",
                    len(result.products), len(result.unique_products), url)
        return ScrapeReport(url=url, result=result)
