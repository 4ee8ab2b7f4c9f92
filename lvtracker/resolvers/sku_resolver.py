"""
SKU resolver for the catalog REST API.

Answers three questions for a SKU: its product page URL, its product API
self-link, and whether it (and the alternative styles returned alongside it)
can be ordered online. Nothing is cached; every call hits the API again.
"""

import json
from typing import Any, Optional

from rich.console import Console

from config.settings import ApiConfig, config
from lvtracker.extractors.fetcher import Fetcher
from lvtracker.transformers.availability_transformer import ProductAvailability
from lvtracker.utils.json_navigator import MISSING, find_value, walk

console = Console(stderr=True)

BACK_ORDER_PROPERTY = "backOrderDisclaimer"


def _decode(body: str) -> Any:
    """Decoded JSON body, or MISSING when the body is empty or not JSON."""
    if not body:
        return MISSING
    try:
        return json.loads(body)
    except ValueError:
        console.print("[yellow]Response body is not valid JSON[/yellow]")
        return MISSING


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip().lower()


def back_order_verdict(item: Any) -> Optional[bool]:
    """
    Availability from the first back-order disclaimer in item's properties.

    ``value: false`` (not on back order) means available, ``value: true``
    means unavailable. Returns None when no disclaimer is present.
    """
    for prop in _as_list(find_value(item, "additionalProperty")):
        if find_value(prop, "name") != BACK_ORDER_PROPERTY:
            continue
        value = _as_text(find_value(prop, "value"))
        if value == "false":
            return True
        if value == "true":
            return False
    return None


class SkuResolver:
    """Resolves SKUs against the catalog and product lookup endpoints."""

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        api_config: Optional[ApiConfig] = None,
    ):
        self.config = api_config or config.api
        self.fetcher = fetcher or Fetcher()

    def _get_body(self, url: str) -> str:
        # A transport failure reads as an empty body
        result = self.fetcher.fetch(url)
        return result.text if result.ok else ""

    def _get_sku_list(self, sku: str) -> Any:
        """
        The catalog lookup's skuList for sku.

        Returns the invalid-SKU sentinel string when upstream reports an empty
        list, MISSING when the body could not be read.
        """
        body = self._get_body(self.config.sku_lookup_url(sku))
        if self.config.empty_sku_list_marker in body:
            return self.config.invalid_sku

        data = _decode(body)
        if find_value(data, "skuListSize") == 0:
            return self.config.invalid_sku
        return find_value(data, "skuList")

    def resolve_product_url(self, sku: str) -> str:
        """
        Product page URL for sku.

        When upstream lists several entries the last one wins.
        """
        sku_list = self._get_sku_list(sku)
        if sku_list == self.config.invalid_sku:
            return self.config.invalid_sku

        url = ""
        for item in _as_list(sku_list):
            value = find_value(item, "url")
            if value is not MISSING and value is not None:
                url = str(value)
        return url

    def resolve_product_endpoint(self, sku: str) -> str:
        """Product API self-link (``_links.self.href``) for sku; last entry wins."""
        sku_list = self._get_sku_list(sku)
        if sku_list == self.config.invalid_sku:
            return self.config.invalid_sku

        endpoint = ""
        for item in _as_list(sku_list):
            href = walk(item, "_links", "self", "href")
            if href is not MISSING and href is not None:
                endpoint = str(href)
        return endpoint

    def _get_model(self, sku: str) -> Optional[list]:
        """The product lookup's model list, or None when upstream reported an error."""
        body = self._get_body(self.config.product_lookup_url(sku))
        if self.config.error_marker in body:
            return None
        return _as_list(find_value(_decode(body), "model"))

    def resolve_availability(self, sku: str) -> ProductAvailability:
        """
        Online availability of sku.

        An unknown SKU and an out-of-stock SKU both come back as
        ``available=False``.
        """
        model = self._get_model(sku)
        available = False
        for item in model or []:
            if find_value(item, "identifier") != sku:
                continue
            verdict = back_order_verdict(item)
            if verdict is not None:
                available = verdict
                break
        return ProductAvailability(sku=sku, available=available)

    def resolve_family_availability(self, sku: str) -> list[ProductAvailability]:
        """
        Availability of every style returned with sku, in response order.

        Items without an identifier or without a back-order disclaimer are
        left out. An upstream error gives an empty list.
        """
        model = self._get_model(sku)
        if model is None:
            return []

        family = []
        for item in model:
            identifier = find_value(item, "identifier")
            if identifier is MISSING or identifier is None:
                continue
            verdict = back_order_verdict(item)
            if verdict is None:
                continue
            family.append(ProductAvailability(sku=identifier, available=verdict))
        return family
