"""
Discovery pipeline walking a region's catalog.

Runs the extraction stages level by level: main categories from the region
landing page, subcategories under each category, then the product listing of
every subcategory. Each level only hands the next one a URL; the catalog tree
itself is never assembled.
"""

from datetime import datetime
from typing import Optional
from urllib.parse import urljoin

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config.settings import TrackerConfig, config
from lvtracker.extractors.catalog_extractor import (
    CatalogExtractor,
    extract_main_categories,
    extract_product_images,
    extract_product_routes,
    extract_subcategories,
)
from lvtracker.extractors.fetcher import Fetcher

console = Console()


class DiscoveryPipeline:
    """
    Crawls one region from its landing page down to product listings.

    Counts are reported, records are printed as they are found; nothing is
    stored.
    """

    def __init__(
        self,
        tracker_config: Optional[TrackerConfig] = None,
        extractor: Optional[CatalogExtractor] = None,
    ):
        self.config = tracker_config or config
        self.extractor = extractor or CatalogExtractor(
            Fetcher(self.config.scraper, self.config.logging), self.config.scraper
        )
        self.subcategory_count = 0
        self.product_count = 0
        self.image_count = 0

    def run(
        self,
        region_url: str,
        categories: Optional[list[str]] = None,
        include_images: bool = False,
    ) -> dict:
        """
        Run discovery for region_url.

        Args:
            region_url: Region landing page (e.g. from the dispatch stage)
            categories: Main category labels to walk; all of them when None
            include_images: Also collect listing images for every subcategory

        Returns:
            Summary dict with discovery counts
        """
        start_time = datetime.now()
        self.subcategory_count = self.product_count = self.image_count = 0
        self._print_header(region_url, categories)

        try:
            landing = self.extractor.fetch_document(region_url)
            if landing is None:
                return {"success": False, "error": f"Could not fetch {region_url}"}

            if categories is None:
                categories = self._category_names(landing)
            if not categories:
                console.print("[bold red]No categories found. Aborting.[/bold red]")
                return {"success": False, "error": "No categories found"}

            for category in categories:
                console.print(f"\n[bold magenta]Processing category: {category}[/bold magenta]")
                for subcategory in extract_subcategories(landing, category):
                    self.subcategory_count += 1
                    listing_url = urljoin(region_url, subcategory.url)
                    self._walk_listing(subcategory.name, listing_url, include_images)

            elapsed = (datetime.now() - start_time).total_seconds()
            self._print_summary(len(categories), elapsed)

            return {
                "success": True,
                "categories": len(categories),
                "subcategories": self.subcategory_count,
                "products": self.product_count,
                "images": self.image_count,
                "elapsed_seconds": elapsed,
            }

        except Exception as e:
            console.print(f"[bold red]Discovery failed: {e}[/bold red]")
            return {"success": False, "error": str(e)}

    def _category_names(self, landing) -> list[str]:
        """Distinct, non-empty main category labels in page order."""
        names = []
        for category in extract_main_categories(landing):
            if category.name and category.name not in names:
                names.append(category.name)
        return names

    def _walk_listing(self, name: str, url: str, include_images: bool) -> None:
        listing = self.extractor.fetch_document(url)
        if listing is None:
            return

        routes = extract_product_routes(listing)
        self.product_count += len(routes)
        console.print(f"[green]  {name}: {len(routes)} products[/green]")
        for route in routes:
            console.print(f"[dim]    • {route.name} → {route.route}[/dim]")

        if include_images:
            images = extract_product_images(listing)
            self.image_count += len(images)
            console.print(f"[dim]    {len(images)} images[/dim]")

    def _print_header(self, region_url: str, categories: Optional[list[str]]):
        header = Panel(
            "[bold white]CATALOG DISCOVERY[/bold white]\n"
            f"[dim]Region: {region_url}[/dim]\n"
            f"[dim]Categories: {', '.join(categories) if categories else 'all'}[/dim]",
            title="Stock Tracker",
            border_style="blue",
        )
        console.print(header)

    def _print_summary(self, category_count: int, elapsed: float):
        table = Table(title="Discovery Results", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Categories", str(category_count))
        table.add_row("Subcategories", str(self.subcategory_count))
        table.add_row("Products", str(self.product_count))
        table.add_row("Images", str(self.image_count))
        table.add_row("Time Elapsed", f"{elapsed:.1f} seconds")

        console.print("\n")
        console.print(table)
