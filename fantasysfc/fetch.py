"""
Document fetcher for the fixtures site.

One GET per call with browser-like headers and a bounded timeout.
No retries: failures are raised as FetchError for the caller to decide.
"""
import random
import time
from collections.abc import Callable, Sequence

import httpx
from bs4 import BeautifulSoup

from fantasysfc.config import settings
from fantasysfc.events import log_event, logger

AgentSelector = Callable[[], str]

BROWSER_HEADERS = {
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
    'Connection': 'keep-alive',
    'Upgrade-Insecure-Requests': '1',
    'Cache-Control': 'max-age=0',
}


class FetchError(Exception):
    """HTTP fetch failure.

    ``reason`` is one of TRANSPORT, NON_2XX or TIMEOUT. Only transport and
    timeout failures are worth retrying.
    """

    TRANSPORT = 'transport'
    NON_2XX = 'non_2xx'
    TIMEOUT = 'timeout'

    def __init__(self, reason: str, url: str, status_code: int | None = None, detail: str = ''):
        self.reason = reason
        self.url = url
        self.status_code = status_code
        message = f'{reason} fetching {url}'
        if status_code is not None:
            message += f' (status {status_code})'
        if detail:
            message += f': {detail}'
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.reason in (self.TRANSPORT, self.TIMEOUT)


class RandomAgentSelector:
    """Pick a user agent uniformly from a fixed pool on every call."""

    def __init__(self, pool: Sequence[str] = settings.user_agents, rng: random.Random | None = None):
        if not pool:
            raise ValueError('user agent pool must be non-empty')
        self.pool = tuple(pool)
        self.rng = rng or random.Random()

    def __call__(self) -> str:
        return self.rng.choice(self.pool)


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw markup into a queryable document."""
    return BeautifulSoup(html, 'lxml')


class DocumentFetcher:
    """Fetch raw page markup over HTTP."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        agent_selector: AgentSelector | None = None,
        timeout: float = settings.req_timeout_s,
    ):
        self._owns_client = client is None
        self.client = client or httpx.Client(follow_redirects=False)
        self.agent_selector = agent_selector or RandomAgentSelector()
        self.timeout = timeout

    def headers(self) -> dict[str, str]:
        """Request headers, with a freshly selected user agent."""
        return {'User-Agent': self.agent_selector(), **BROWSER_HEADERS}

    def _check_deadline(self, deadline: float, response: httpx.Response):
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout(
                f'response not complete within {self.timeout}s',
                request=response.request,
            )

    def fetch(self, url: str) -> str:
        """
        GET ``url`` and return the body text.

        ``timeout`` bounds the whole call, including a body that trickles in.

        Raises:
            FetchError: on timeout, transport failure or any status but 200
        """
        start = time.monotonic()
        deadline = start + self.timeout
        try:
            with self.client.stream('GET', url, headers=self.headers(), timeout=self.timeout) as response:
                elapsed_ms = int((time.monotonic() - start) * 1000)
                log_event(event='fetch', url=url, status=response.status_code, ms=elapsed_ms)
                if response.status_code != 200:
                    raise FetchError(
                        FetchError.NON_2XX,
                        url,
                        status_code=response.status_code,
                        detail=response.reason_phrase,
                    )

                body = bytearray()
                for chunk in response.iter_bytes():
                    body.extend(chunk)
                    self._check_deadline(deadline, response)
                self._check_deadline(deadline, response)
                text = body.decode(response.encoding or 'utf-8', errors='replace')
        except httpx.TimeoutException as e:
            log_event(event='fetch_failed', url=url, reason=FetchError.TIMEOUT)
            raise FetchError(FetchError.TIMEOUT, url, detail=str(e)) from e
        except (httpx.TransportError, httpx.InvalidURL) as e:
            log_event(event='fetch_failed', url=url, reason=FetchError.TRANSPORT)
            raise FetchError(FetchError.TRANSPORT, url, detail=str(e)) from e

        logger.debug(f'Fetched {len(text)} chars from {url}')
        return text

    def close(self):
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
