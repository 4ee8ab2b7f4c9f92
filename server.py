#!/usr/bin/env python3
"""
Availability service.

Serves SKU availability lookups over HTTP:
  GET /api/item/<sku>          {"Sku": ..., "Available": ...}
  GET /api/itemfamily/<sku>    [{"Sku": ..., "Available": ...}, ...]
  GET /api/product/<sku>       {"Sku": ..., "Url": ..., "Endpoint": ...}

Usage:
    python server.py              # Listen on port 8080 (or $PORT)
    python server.py --port 5001

Every request goes to the upstream API; nothing is cached.
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path for package imports
sys.path.insert(0, str(Path(__file__).resolve().parent))

from dotenv import load_dotenv
from flask import Flask, jsonify
from rich.console import Console

from config.settings import config
from lvtracker.extractors.fetcher import Fetcher
from lvtracker.resolvers.sku_resolver import SkuResolver
from lvtracker.transformers.availability_transformer import (
    AvailabilityTransformer,
    ProductLinks,
)

load_dotenv(Path(__file__).parent / ".env")

console = Console()

app = Flask(__name__)
# Keep "Sku" ahead of "Available" in responses
app.json.sort_keys = False

transformer = AvailabilityTransformer()

# Shared by every request thread; the underlying httpx client is thread-safe
resolver = SkuResolver(Fetcher(config.scraper, config.logging), config.api)


@app.route("/")
def home_page():
    console.print("[dim]Endpoint Hit: homePage[/dim]")
    return "Welcome to the HomePage!"


@app.route("/api/item/<sku>")
def return_item(sku):
    """Availability of a single SKU."""
    console.print(f"[dim]Endpoint Hit: Item for SKU: {sku}[/dim]")
    return jsonify(transformer.to_payload(resolver.resolve_availability(sku)))


@app.route("/api/itemfamily/<sku>")
def return_item_family(sku):
    """Availability of a SKU and every alternative style returned with it."""
    console.print(f"[dim]Endpoint Hit: Item Family for SKU: {sku}[/dim]")
    family = resolver.resolve_family_availability(sku)
    return jsonify(transformer.to_payload(family))


@app.route("/api/product/<sku>")
def return_product_links(sku):
    """Product page URL and API self-link of a SKU."""
    console.print(f"[dim]Endpoint Hit: Product links for SKU: {sku}[/dim]")
    links = ProductLinks(
        sku=sku,
        url=resolver.resolve_product_url(sku),
        endpoint=resolver.resolve_product_endpoint(sku),
    )
    return jsonify(transformer.to_payload(links))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="LV stock availability service")
    parser.add_argument("--host", default=config.service.host, help="Interface to bind")
    parser.add_argument(
        "--port", type=int, default=config.service.port, help="Port to listen on"
    )
    parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode")
    args = parser.parse_args()

    console.print("[bold cyan]LV Stock Tracker - availability service[/bold cyan]")
    console.print(f"[dim]API host:[/dim] {config.api.api_host} ({config.api.locale})")
    console.print(f"[dim]Listening on:[/dim] http://{args.host}:{args.port}")

    app.run(host=args.host, port=args.port, debug=args.debug or config.service.debug)
