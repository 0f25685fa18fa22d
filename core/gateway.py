# =============================================================================
# core/gateway.py  -  Rate-Limited Reddit Gateway
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every request to Reddit goes through ONE RedditGateway instance.  The
#   gateway guarantees that no two requests leave the process less than
#   `min_interval` seconds apart (1000 ms by default), no matter how many tool
#   calls the host dispatches at once.
#
# HOW THE THROTTLE WORKS:
#   acquire() is a critical section guarded by an asyncio.Lock:
#     1. read the time of the previous request
#     2. if it was too recent, await asyncio.sleep() for the remainder
#     3. record "now" as the time of this request
#   Steps 1-3 run under the lock, so two concurrent callers can never both
#   read the same old timestamp and proceed together.  asyncio.Lock wakes
#   waiters in FIFO order, so requests go out in arrival order.
#
#   Only callers of the SAME gateway wait on each other.  The sleep is an
#   asyncio sleep, so the event loop keeps serving everything else.
#
# WHAT HAPPENS AFTER THE THROTTLE:
#   The GET itself runs outside the lock and follows redirects (Reddit
#   answers some .json URLs with a 301).  The final response is mapped to:
#     2xx + JSON body  →  the parsed value
#     2xx + bad body   →  MalformedResponseError
#     other status     →  UpstreamError(status_code)
#     network failure  →  TransportError  (timeouts, too many redirects too)
#     undecodable body →  MalformedResponseError
# =============================================================================

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional

import httpx

from core.config import Settings
from core.errors import MalformedResponseError, TransportError, UpstreamError

logger = logging.getLogger(__name__)


class RedditGateway:
    """Serialises outbound Reddit requests behind a minimum-interval throttle.

    Args:
        settings: Base URL, User-Agent, interval and timeout.  Defaults to
            Settings.from_env().
        transport: Optional httpx transport (tests pass httpx.MockTransport).
        clock: Monotonic clock in seconds.
        sleep: Coroutine used to wait out the interval.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings or Settings.from_env()
        self._transport = transport
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_request_at: Optional[float] = None

    @property
    def last_request_at(self) -> Optional[float]:
        return self._last_request_at

    async def acquire(self) -> float:
        """Wait for the next request slot and claim it.

        Returns the clock reading at which this call was allowed to proceed.
        """
        interval = self.settings.min_interval
        async with self._lock:
            if self._last_request_at is not None:
                while True:
                    remaining = interval - (self._clock() - self._last_request_at)
                    if remaining <= 0:
                        break
                    logger.debug("Throttling Reddit request for %.3fs", remaining)
                    await self._sleep(remaining)
            self._last_request_at = self._clock()
            return self._last_request_at

    async def fetch_json(self, path: str) -> Any:
        """GET `path` (relative to the base URL, query string included) as JSON."""
        await self.acquire()

        url = f"{self.settings.base_url}{path}"
        headers = {"User-Agent": self.settings.user_agent}
        async with httpx.AsyncClient(
            headers=headers,
            timeout=self.settings.timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(url)
            except httpx.TimeoutException as exc:
                logger.warning("Timed out fetching %s", path)
                raise TransportError(
                    f"Timed out after {self.settings.timeout_seconds}s reaching Reddit"
                ) from exc
            except httpx.TransportError as exc:
                logger.warning("Network failure fetching %s: %s", path, exc)
                raise TransportError(f"Could not reach Reddit: {exc}") from exc
            except httpx.DecodingError as exc:
                logger.warning("Undecodable body fetching %s: %s", path, exc)
                raise MalformedResponseError(f"Reddit sent a body that could not be decoded: {exc}") from exc
            except httpx.RequestError as exc:
                logger.warning("Request to %s failed: %s", path, exc)
                raise TransportError(f"Request to Reddit failed: {exc}") from exc

        if not response.is_success:
            logger.warning("Reddit returned HTTP %s for %s", response.status_code, path)
            raise UpstreamError(response.status_code, path)

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError("Reddit returned a body that is not JSON") from exc
