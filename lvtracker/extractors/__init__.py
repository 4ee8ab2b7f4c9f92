"""Page fetching and HTML extraction stages."""

from .catalog_extractor import (
    CatalogExtractor,
    CategoryURL,
    ProductImage,
    ProductRoute,
    RegionURL,
)
from .fetcher import Fetcher, FetchResult

__all__ = [
    "CatalogExtractor",
    "CategoryURL",
    "FetchResult",
    "Fetcher",
    "ProductImage",
    "ProductRoute",
    "RegionURL",
]
