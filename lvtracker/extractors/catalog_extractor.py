"""
Storefront catalog extractor.

Four independent stages turn a fetched page into records:
regions (dispatch page), main categories and subcategories (header nav),
and product routes/images (subcategory listing). The markup classes are the
only stable contract, so every stage returns an empty list instead of failing
when they disappear.
"""

from dataclasses import dataclass
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag
from rich.console import Console

from config.settings import ScraperConfig, config
from lvtracker.extractors.fetcher import Fetcher

console = Console(stderr=True)

Document = Union[str, bytes, BeautifulSoup]

# Markup markers
DISPATCH_LINK = ".lvdispatch-link"
MAIN_NAV_ITEM = ".lv-header-main-nav__item"
MAIN_NAV_PANEL = ".lv-header-main-nav-panel"
NAV_CHILD_ITEM = ".lv-header-main-nav-child__item"
NAV_CHILD_LINK = ".lv-header-main-nav-child__link"
PRODUCT_LIST = 'ul[class="lv-list"]'
PRODUCT_CARD = ".lv-product-card"


@dataclass
class RegionURL:
    """A region code with its landing page."""

    code: str
    url: str


@dataclass
class CategoryURL:
    """A navigation category (or subcategory) label and its route."""

    name: str
    url: str


@dataclass
class ProductRoute:
    """A product name and the route to its product page."""

    name: str
    route: str


@dataclass
class ProductImage:
    """A product name and its listing image URL."""

    name: str
    url: str


def _as_soup(document: Document) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document, "html.parser")


def _label_text(item: Tag) -> str:
    """Concatenated text of every span under a nav item (untrimmed)."""
    return "".join(span.get_text() for span in item.find_all("span"))


def _card_name(card: Tag) -> str:
    """Card text with image markup removed, whitespace collapsed."""
    fragment = BeautifulSoup(str(card), "html.parser")
    for img in fragment.find_all("img"):
        img.decompose()
    return " ".join(fragment.get_text().split())


def _product_cards(soup: BeautifulSoup) -> list[Tag]:
    cards = []
    for product_list in soup.select(PRODUCT_LIST):
        cards.extend(product_list.select(PRODUCT_CARD))
    return cards


def extract_regions(document: Document) -> list[RegionURL]:
    """
    Region codes and landing URLs from the dispatch page.

    The code is the fourth "/" segment of the link
    (``https://host/<code>/...``). Links without an href, or too short to
    carry a code, are skipped.
    """
    regions = []
    for li in _as_soup(document).find_all("li"):
        for link in li.select(DISPATCH_LINK):
            href = link.get("href")
            if href is None:
                continue
            segments = href.split("/")
            if len(segments) < 4:
                continue
            regions.append(RegionURL(code=segments[3], url=href))
    return regions


def extract_main_categories(document: Document) -> list[CategoryURL]:
    """Main navigation categories in document order (no dedupe)."""
    categories = []
    for li in _as_soup(document).find_all("li"):
        for item in li.select(MAIN_NAV_ITEM):
            href = item.get("href")
            if href is None:
                anchor = item.find("a", href=True)
                href = anchor["href"] if anchor else ""
            categories.append(CategoryURL(name=_label_text(item).strip(), url=href))
    return categories


def extract_subcategories(document: Document, main_category: str) -> list[CategoryURL]:
    """
    Subcategory labels and routes under the nav item labelled main_category.

    The label must match exactly (case and whitespace). No match gives an
    empty list.
    """
    subcategories = []
    for li in _as_soup(document).select('li[role="presentation"]'):
        for item in li.select(MAIN_NAV_ITEM):
            if _label_text(item) != main_category or item.parent is None:
                continue
            for child in item.parent.select(f"{MAIN_NAV_PANEL} {NAV_CHILD_ITEM}"):
                link = child.select_one(NAV_CHILD_LINK)
                if link is None or link.get("href") is None:
                    continue
                subcategories.append(
                    CategoryURL(name=link.get_text().strip(), url=link["href"])
                )
    return subcategories


def extract_product_routes(document: Document) -> list[ProductRoute]:
    """Product names and page routes from a subcategory listing."""
    routes = []
    for card in _product_cards(_as_soup(document)):
        href = card.get("href")
        if href is None:
            continue
        routes.append(ProductRoute(name=_card_name(card), route=href))
    return routes


def extract_product_images(document: Document) -> list[ProductImage]:
    """Product names and their first listing image from a subcategory listing."""
    images = []
    for card in _product_cards(_as_soup(document)):
        img = card.find("img", src=True)
        if img is None:
            continue
        images.append(ProductImage(name=_card_name(card), url=img["src"]))
    return images


class CatalogExtractor:
    """Fetches storefront pages and runs the extraction stages on them."""

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        scraper_config: Optional[ScraperConfig] = None,
    ):
        self.config = scraper_config or config.scraper
        self.fetcher = fetcher or Fetcher(self.config)

    def fetch_document(self, url: str) -> Optional[BeautifulSoup]:
        """Fetch and parse url; None when the request itself failed."""
        result = self.fetcher.fetch(url)
        if not result.ok:
            return None
        return _as_soup(result.body)

    def get_region_codes_and_urls(self) -> list[RegionURL]:
        """Crawl the dispatch page for every region landing page."""
        soup = self.fetch_document(self.config.dispatch_url)
        if soup is None:
            return []
        regions = extract_regions(soup)
        console.print(f"[green]Found {len(regions)} regions[/green]")
        return regions

    def get_main_categories(self, url: str) -> list[CategoryURL]:
        soup = self.fetch_document(url)
        if soup is None:
            return []
        return extract_main_categories(soup)

    def get_subcategory_routes(self, main_category: str, url: str) -> list[CategoryURL]:
        """Crawl url's header nav for the subcategories under main_category."""
        soup = self.fetch_document(url)
        if soup is None:
            return []
        subcategories = extract_subcategories(soup, main_category)
        if not subcategories:
            console.print(
                f"[yellow]No subcategories found under '{main_category}'[/yellow]"
            )
        return subcategories

    def get_product_page_routes(self, url: str) -> list[ProductRoute]:
        soup = self.fetch_document(url)
        if soup is None:
            return []
        return extract_product_routes(soup)

    def get_product_images(self, url: str) -> list[ProductImage]:
        soup = self.fetch_document(url)
        if soup is None:
            return []
        return extract_product_images(soup)
