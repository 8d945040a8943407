from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import aiohttp

from .config import Settings
from .summarize import local_summarize

logger = logging.getLogger(__name__)


class RemoteSummaryError(Exception):
    """The backend answered, but not with a usable summary."""


@dataclass
class RemoteSummarizer:
    """
    Summarize through the backend proxy, degrading to a local callable.

    At most two sequential round trips: GET {base_url}/health, then
    POST {base_url}/summarize. Any failure along the way (unreachable, timeout,
    non-2xx, malformed body) is logged and answered by `fallback(text)`, so
    `summarize` always returns a string. No retries.
    """
    base_url: str
    health_timeout: float = 10.0
    request_timeout: float = 60.0
    fallback: Callable[[str], str] = local_summarize

    @classmethod
    def from_settings(cls, settings: Settings) -> "RemoteSummarizer":
        return cls(base_url=settings.backend_url,
                   health_timeout=settings.health_timeout,
                   request_timeout=settings.request_timeout)

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path}"

    async def check_health(self, session: aiohttp.ClientSession) -> bool:
        try:
            async with session.get(self._url("health"),
                                   timeout=aiohttp.ClientTimeout(total=self.health_timeout)) as resp:
                return 200 <= resp.status < 300
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Backend health check failed: %r", e)
            return False

    async def request_summary(self, session: aiohttp.ClientSession, text: str) -> str:
        async with session.post(self._url("summarize"), json={"text": text},
                                timeout=aiohttp.ClientTimeout(total=self.request_timeout)) as resp:
            try:
                data = await resp.json(content_type=None)
            except ValueError as e:
                raise RemoteSummaryError(f"Malformed response body (HTTP {resp.status})") from e
            if not isinstance(data, dict):
                raise RemoteSummaryError(f"Unexpected response payload (HTTP {resp.status})")
            if not 200 <= resp.status < 300:
                logger.error("Backend error (HTTP %s): %s", resp.status, data)
                raise RemoteSummaryError(data.get("details") or data.get("error") or "Failed to generate summary")
            summary = data.get("summary")
            if not isinstance(summary, str):
                raise RemoteSummaryError("Response has no 'summary' field")
            return summary

    async def _summarize(self, session: aiohttp.ClientSession, text: str) -> str:
        if not await self.check_health(session):
            logger.warning("Backend service unavailable, using fallback summarization")
            return self.fallback(text)
        return await self.request_summary(session, text)

    async def summarize(self, text: str, session: Optional[aiohttp.ClientSession] = None) -> str:
        try:
            if session is not None:
                return await self._summarize(session, text)
            async with aiohttp.ClientSession() as own_session:
                return await self._summarize(own_session, text)
        except Exception as e:
            logger.warning("Backend summarization failed, using fallback: %r", e)
            return self.fallback(text)


async def summarize_text(text: str, settings: Optional[Settings] = None,
                         session: Optional[aiohttp.ClientSession] = None) -> str:
    """Remote summary when the backend is healthy, local extractive summary otherwise."""
    settings = settings or Settings.load()
    return await RemoteSummarizer.from_settings(settings).summarize(text, session=session)
