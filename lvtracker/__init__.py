"""LV stock tracker: storefront catalog extraction and SKU availability."""

__version__ = "0.1.0"
