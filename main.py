#!/usr/bin/env python3
"""
LV Stock Tracker - Command Line Entry Point

Crawls the storefront catalog (regions, categories, subcategories, product
listings) and resolves SKUs against the catalog REST API.

Usage:
    python main.py --regions                          # List region landing pages
    python main.py --availability M40995              # Is a SKU orderable online?
    python main.py --discover https://www.louisvuitton.com/eng-ca/homepage
"""
import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from config.settings import TrackerConfig
from lvtracker.extractors.catalog_extractor import CatalogExtractor
from lvtracker.extractors.fetcher import Fetcher
from lvtracker.pipeline import DiscoveryPipeline
from lvtracker.resolvers.sku_resolver import SkuResolver
from lvtracker.transformers.availability_transformer import AvailabilityTransformer

load_dotenv(Path(__file__).parent / ".env")

console = Console()


class CustomHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that preserves formatting and adds width."""

    def __init__(self, prog):
        super().__init__(prog, max_help_position=40, width=100)


def parse_args(argv=None):
    """Parse command line arguments."""

    epilog = """
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
EXAMPLES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  Catalog discovery:
    python main.py --regions                            All region landing pages
    python main.py --categories URL                     Main nav categories on URL
    python main.py --subcategories Women URL            Subcategories under "Women"
    python main.py --products URL                       Product routes on a listing
    python main.py --images URL                         Product images on a listing
    python main.py --discover URL -c Women Men          Walk categories down to products

  SKU lookups:
    python main.py --product-url M40995                 Product page URL
    python main.py --product-endpoint M40995            Product API self-link
    python main.py --availability M40995                Online availability
    python main.py --family M40995                      Availability of every style

  Output:
    python main.py --family M40995 --json               JSON instead of tables

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
NOTES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  • Every request rotates user agent and referer; nothing is retried or cached
  • An unknown SKU reports "Invalid SKU" for URL lookups, unavailable otherwise
  • The availability service (python server.py) serves lookups on port 8080
"""

    parser = argparse.ArgumentParser(
        prog="python main.py",
        description="""
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
                              LV STOCK TRACKER
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Extracts catalog data from the storefront and its REST API:
  • Regions, navigation categories and subcategories
  • Product routes and listing images
  • Stock availability per SKU, including alternative styles
""",
        epilog=epilog,
        formatter_class=CustomHelpFormatter,
    )

    # Discovery group
    discovery_group = parser.add_argument_group(
        "Catalog Discovery", "Crawl storefront pages"
    )

    discovery_group.add_argument(
        "--regions",
        action="store_true",
        help="List region codes and landing pages",
    )

    discovery_group.add_argument(
        "--categories",
        type=str,
        metavar="URL",
        help="List main navigation categories on a region landing page",
    )

    discovery_group.add_argument(
        "--subcategories",
        type=str,
        nargs=2,
        metavar=("CATEGORY", "URL"),
        help="List subcategories under CATEGORY (exact label) on URL",
    )

    discovery_group.add_argument(
        "--products",
        type=str,
        metavar="URL",
        help="List product names and routes on a subcategory page",
    )

    discovery_group.add_argument(
        "--images",
        type=str,
        metavar="URL",
        help="List product names and image URLs on a subcategory page",
    )

    discovery_group.add_argument(
        "--discover",
        type=str,
        metavar="URL",
        help="Walk a region landing page down to product listings",
    )

    discovery_group.add_argument(
        "--category",
        "-c",
        type=str,
        nargs="+",
        default=None,
        metavar="NAME",
        help="Categories to walk with --discover (default: all)",
    )

    discovery_group.add_argument(
        "--with-images",
        action="store_true",
        help="Also collect listing images with --discover",
    )

    # SKU group
    sku_group = parser.add_argument_group(
        "SKU Lookups", "Resolve SKUs against the catalog REST API"
    )

    sku_group.add_argument(
        "--product-url",
        type=str,
        metavar="SKU",
        help="Product page URL for SKU",
    )

    sku_group.add_argument(
        "--product-endpoint",
        type=str,
        metavar="SKU",
        help="Product API self-link for SKU",
    )

    sku_group.add_argument(
        "--availability",
        type=str,
        metavar="SKU",
        help="Online availability of SKU",
    )

    sku_group.add_argument(
        "--family",
        type=str,
        metavar="SKU",
        help="Availability of SKU and its alternative styles",
    )

    # Output group
    output_group = parser.add_argument_group("Output Options")

    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )

    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Don't log each request",
    )

    return parser.parse_args(argv)


def print_records(title: str, records: list, as_json: bool = False) -> None:
    """Print extracted records as a table (or JSON)."""
    rows = [asdict(record) for record in records]
    if as_json:
        console.print_json(json.dumps(rows))
        return

    if not rows:
        console.print(f"[yellow]No {title.lower()} found[/yellow]")
        return

    table = Table(title=title, show_header=True)
    for column in rows[0]:
        table.add_column(column.title(), style="cyan" if column != "url" else "green")
    for row in rows:
        table.add_row(*(str(value) for value in row.values()))
    console.print(table)


def print_availability(result, as_json: bool = False) -> None:
    """Print one availability result or a family of them."""
    payload = AvailabilityTransformer().to_payload(result)
    if as_json:
        console.print_json(json.dumps(payload))
        return

    table = Table(title="Availability", show_header=True)
    table.add_column("SKU", style="cyan")
    table.add_column("Available")
    for item in payload if isinstance(payload, list) else [payload]:
        status = "[green]yes[/green]" if item["Available"] else "[red]no[/red]"
        table.add_row(item["Sku"], status)
    console.print(table)


def print_value(label: str, sku: str, value: str, as_json: bool = False) -> None:
    if as_json:
        console.print_json(json.dumps({"Sku": sku, label: value}))
    else:
        console.print(f"[dim]{label}:[/dim] {value or '[yellow]not found[/yellow]'}")


def run(args, tracker_config: TrackerConfig) -> int:
    """Dispatch the requested operation. Returns the exit code."""
    if args.quiet or args.json:
        tracker_config.logging.log_visits = False

    with Fetcher(tracker_config.scraper, tracker_config.logging) as fetcher:
        extractor = CatalogExtractor(fetcher, tracker_config.scraper)
        resolver = SkuResolver(fetcher, tracker_config.api)

        if args.regions:
            print_records("Regions", extractor.get_region_codes_and_urls(), args.json)
        elif args.categories:
            print_records(
                "Categories", extractor.get_main_categories(args.categories), args.json
            )
        elif args.subcategories:
            category, url = args.subcategories
            print_records(
                "Subcategories",
                extractor.get_subcategory_routes(category, url),
                args.json,
            )
        elif args.products:
            print_records(
                "Products", extractor.get_product_page_routes(args.products), args.json
            )
        elif args.images:
            print_records("Images", extractor.get_product_images(args.images), args.json)
        elif args.discover:
            pipeline = DiscoveryPipeline(tracker_config, extractor)
            result = pipeline.run(args.discover, args.category, args.with_images)
            if not result["success"]:
                console.print(f"\n[bold red]Discovery failed: {result.get('error')}[/bold red]")
                return 1
        elif args.product_url:
            url = resolver.resolve_product_url(args.product_url)
            print_value("Url", args.product_url, url, args.json)
        elif args.product_endpoint:
            endpoint = resolver.resolve_product_endpoint(args.product_endpoint)
            print_value("Endpoint", args.product_endpoint, endpoint, args.json)
        elif args.availability:
            print_availability(resolver.resolve_availability(args.availability), args.json)
        elif args.family:
            print_availability(resolver.resolve_family_availability(args.family), args.json)
        else:
            console.print("[yellow]Nothing to do. See --help for options.[/yellow]")
            return 1

    return 0


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        return run(args, TrackerConfig())
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        return 130
    except Exception as e:
        console.print(f"\n[bold red]Unexpected error: {e}[/bold red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
