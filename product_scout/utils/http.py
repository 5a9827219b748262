from __future__ import annotations

import asyncio
from typing import Dict, Optional
from aiohttp import ClientSession, ClientTimeout
import aiohttp
import logging

from ..errors import FetchError

logger = logging.getLogger(__name__)


def build_headers(
    user_agent: Optional[str] = None,
    accept: Optional[str] = None,
    accept_language: Optional[str] = None,
) -> Dict[str, str]:
    headers = {}
    if user_agent:
        headers["User-Agent"] = user_agent
    if accept:
        headers["Accept"] = accept
    if accept_language:
        headers["Accept-Language"] = accept_language
    return headers


async def fetch_page(
    session: ClientSession,
    url: str,
    *,
    timeout: float = 15.0,
    headers: Optional[Dict[str, str]] = None,
    retries: int = 0,
) -> bytes:
    """
    Fetch a URL and return the raw body.
    Decoding is left to the HTML parser, which sniffs the real encoding.
    Raises FetchError once every attempt has failed.
    """
    last_exc: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            async with session.get(url, headers=headers or {}, timeout=ClientTimeout(total=timeout)) as resp:
                resp.raise_for_status()
                return await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            last_exc = exc
            logger.debug("fetch_page attempt %s failed for %s: %r", attempt + 1, url, exc)
            if attempt < retries:
                await asyncio.sleep(min(2 ** attempt, 5))
    raise FetchError(f"Failed to fetch {url} after {retries + 1} attempts: {last_exc!r}") from last_exc


def create_session() -> ClientSession:
    """
    Create an aiohttp ClientSession.
    """
    # Note: caller is responsible for closing the session (await session.close()).
    return aiohttp.ClientSession()
