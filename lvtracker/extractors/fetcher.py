"""
HTTP fetcher with a rotating client identity.

The storefront and its REST API refuse plain scripted requests, so every call
goes out with a freshly picked user agent and referer.
"""

import random
from dataclasses import dataclass
from typing import Optional

import httpx
from rich.console import Console

from config.settings import LoggingConfig, ScraperConfig, config

# Diagnostics go to stderr so stdout carries only results
console = Console(stderr=True)


@dataclass
class FetchResult:
    """Outcome of a single GET request."""

    url: str
    status_code: Optional[int] = None
    body: bytes = b""
    error: Optional[str] = None  # Set only on transport failure

    @property
    def ok(self) -> bool:
        """True when the request completed (any HTTP status)."""
        return self.error is None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Fetcher:
    """Performs GET requests with a new user agent and referer on every call."""

    def __init__(
        self,
        scraper_config: Optional[ScraperConfig] = None,
        logging_config: Optional[LoggingConfig] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.config = scraper_config or config.scraper
        self.logging = logging_config or config.logging
        self._owns_client = client is None
        self.client = client or self._create_client()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _create_client(self) -> httpx.Client:
        kwargs = {"follow_redirects": True}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds
        return httpx.Client(**kwargs)

    def close(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            self.client.close()

    def random_identity(self) -> dict:
        """Pick a user agent and referer for one request."""
        return {
            "User-Agent": random.choice(self.config.user_agents),
            "Referer": random.choice(self.config.referers),
            "Accept": "text/html,application/json;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    def fetch(self, url: str) -> FetchResult:
        """
        GET url once, without retries.

        A non-2xx status is not an error: the body is returned as is.
        Transport failures (DNS, connect, timeout) come back with ``error`` set
        and an empty body.
        """
        if self.logging.log_visits:
            console.print(f"[dim]Visiting {url}[/dim]")

        try:
            response = self.client.get(url, headers=self.random_identity())
        except httpx.HTTPError as e:
            if self.logging.log_errors:
                console.print(f"[red]Request URL: {url} failed with error: {e}[/red]")
            return FetchResult(url=url, error=str(e) or type(e).__name__)

        return FetchResult(
            url=url,
            status_code=response.status_code,
            body=response.content,
        )
