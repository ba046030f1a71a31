"""Rate-limited async httpx transport for facts retrieval."""

import asyncio

import httpx
from limits import parse
from limits.aio.storage import MemoryStorage
from limits.aio.strategies import MovingWindowRateLimiter


class RateLimitedAsyncTransport(httpx.AsyncHTTPTransport):
    """An async httpx transport that enforces a rate limit on requests."""

    def __init__(self, max_calls: int, period: float, **kwargs):
        """Initialize the transport with a rate limiter.

        Args:
            max_calls: Maximum number of calls to allow in a period.
            period: The time period in seconds.
            **kwargs: Additional arguments for the httpx.AsyncHTTPTransport.
        """
        self.rate_limit_item = parse(f"{max_calls} per {max(int(period), 1)} second")
        self.limiter = MovingWindowRateLimiter(MemoryStorage())
        super().__init__(**kwargs)

    async def handle_async_request(
        self,
        request: httpx.Request,
    ) -> httpx.Response:
        """Handle the request, waiting for the rate limit before sending."""
        while not await self.limiter.hit(self.rate_limit_item, "global"):
            await asyncio.sleep(0.1)
        return await super().handle_async_request(request)
