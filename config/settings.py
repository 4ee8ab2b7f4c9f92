"""
Configuration settings for the LV stock tracker.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ScraperConfig:
    """Configuration for the storefront page fetcher."""

    # Base URLs
    base_url: str = field(
        default_factory=lambda: os.getenv("LV_BASE_URL", "https://www.louisvuitton.com")
    )
    dispatch_path: str = "/dispatch/?noDRP=true"  # Region picker page

    # None keeps the httpx default timeout
    timeout_seconds: Optional[float] = None

    # User agents to rotate (a fresh one is picked on every request)
    user_agents: list = field(
        default_factory=lambda: [
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:121.0) Gecko/20100101 Firefox/121.0",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
        ]
    )

    # Referers to rotate alongside the user agent
    referers: list = field(
        default_factory=lambda: [
            "https://www.louisvuitton.com/",
            "https://www.google.com/",
            "https://www.bing.com/",
            "https://duckduckgo.com/",
        ]
    )

    @property
    def dispatch_url(self) -> str:
        """Full URL of the region dispatch page."""
        return f"{self.base_url}{self.dispatch_path}"


@dataclass
class ApiConfig:
    """Configuration for the catalog REST API."""

    api_host: str = field(
        default_factory=lambda: os.getenv("LV_API_HOST", "api.louisvuitton.com")
    )
    locale: str = field(default_factory=lambda: os.getenv("LV_API_LOCALE", "eng-ca"))

    # Raw-body markers
    empty_sku_list_marker: str = '"skuListSize":0'
    error_marker: str = "errorCode"

    # Returned by URL/endpoint lookups when the SKU is unknown upstream
    invalid_sku: str = "Invalid SKU"

    @property
    def catalog_root(self) -> str:
        return f"https://{self.api_host}/api/{self.locale}/catalog"

    def sku_lookup_url(self, sku: str) -> str:
        """Catalog lookup endpoint (product URL and self-link)."""
        return f"{self.catalog_root}/skus/{sku}"

    def product_lookup_url(self, sku: str) -> str:
        """Product lookup endpoint (availability, alternative styles)."""
        return f"{self.catalog_root}/product/{sku}"


@dataclass
class ServiceConfig:
    """Configuration for the availability HTTP service."""

    host: str = "0.0.0.0"
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    debug: bool = False


@dataclass
class LoggingConfig:
    """Configuration for console logging."""

    log_visits: bool = True  # "Visiting <url>" before each request
    log_errors: bool = True  # Transport failures


@dataclass
class TrackerConfig:
    """Main configuration combining all settings."""

    scraper: ScraperConfig = field(default_factory=ScraperConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Default configuration instance
config = TrackerConfig()
