"""Single-shot HTTPS GET wrapper used by the live provider."""

from __future__ import annotations

import logging
from typing import Final

import httpx

from .. import __version__
from .errors import FetchTimeoutError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

USER_AGENT: Final[str] = f"weather-fetcher/{__version__}"


class HttpClient:
    """GET a path on one host and return the body of a 200 response.

    A new `httpx.AsyncClient` is opened for every call and closed on exit,
    so a timed-out request never leaves its connection behind. There are no
    retries and redirects are not followed.
    """

    def __init__(
        self,
        *,
        host: str,
        timeout: float = 5.0,
        user_agent: str = USER_AGENT,
        scheme: str = "https",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.host = host
        self.timeout = timeout
        self.user_agent = user_agent
        self.scheme = scheme
        self._transport = transport

    def url_for(self, path: str) -> str:
        return f"{self.scheme}://{self.host}{path}"

    async def get_text(self, path: str) -> str:
        url = self.url_for(path)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": self.user_agent},
                follow_redirects=False,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException as exc:
            logger.warning("weather.http.timeout host=%s", self.host)
            raise FetchTimeoutError() from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "weather.http.transport host=%s err=%s", self.host, exc
            )
            raise TransportError(str(exc)) from exc

        if response.status_code != httpx.codes.OK:
            logger.info(
                "weather.http.status host=%s status=%s",
                self.host,
                response.status_code,
            )
            raise HttpStatusError(
                response.status_code, response.reason_phrase
            )
        return response.text
