import logging

import httpx

from ..errors import ConfigurationError, NetworkError, RequestTimeoutError
from ..specs import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "zip-fixture-runner/1.0"

class HttpClient:
    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float = DEFAULT_TIMEOUT):
        self.user_agent = user_agent
        self.timeout = timeout

    async def get(self, url: str, accept: str, timeout: float | None = None) -> httpx.Response:
        """Send one GET and return the response as received, whatever its status."""
        if timeout is None:
            timeout = self.timeout
        headers = {
            "User-Agent": self.user_agent,
            "Accept": accept
        }
        logger.debug("GET %s", url)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                return await client.get(url, headers=headers, timeout=timeout)
            except httpx.TimeoutException as e:
                raise RequestTimeoutError(url, f"timed out after {timeout}s") from e
            except httpx.RequestError as e:
                # transport failures plus redirect loops and undecodable bodies
                raise NetworkError(url, str(e) or type(e).__name__) from e
            except httpx.InvalidURL as e:
                raise ConfigurationError(f"Cannot request {url!r}: {e}") from e
