"""SKU resolution against the catalog REST API."""

from .sku_resolver import SkuResolver

__all__ = ["SkuResolver"]
