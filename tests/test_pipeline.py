from config.settings import LoggingConfig, TrackerConfig
from lvtracker.extractors.catalog_extractor import CatalogExtractor
from lvtracker.pipeline import DiscoveryPipeline

REGION_URL = "https://shop.example.test/eng-ca/homepage"

LANDING = """
<ul>
  <li role="presentation">
    <button class="lv-header-main-nav__item"><span>Women</span></button>
    <div class="lv-header-main-nav-panel"><ul>
      <li class="lv-header-main-nav-child__item">
        <a class="lv-header-main-nav-child__link" href="/eng-ca/women/handbags">Handbags</a>
      </li>
      <li class="lv-header-main-nav-child__item">
        <a class="lv-header-main-nav-child__link" href="https://shop.example.test/eng-ca/women/shoes">Shoes</a>
      </li>
    </ul></div>
  </li>
  <li role="presentation">
    <button class="lv-header-main-nav__item"><span>Men</span></button>
  </li>
</ul>
"""

HANDBAGS = """
<ul class="lv-list">
  <li><a class="lv-product-card" href="/p/1"><img src="/i/1.png"><span>Bag One</span></a></li>
  <li><a class="lv-product-card" href="/p/2"><span>Bag Two</span></a></li>
</ul>
"""

SHOES = """
<ul class="lv-list">
  <li><a class="lv-product-card" href="/p/3"><img src="/i/3.png"><span>Shoe</span></a></li>
</ul>
"""


def make_pipeline(fetcher):
    tracker_config = TrackerConfig(logging=LoggingConfig(log_visits=False))
    return DiscoveryPipeline(tracker_config, CatalogExtractor(fetcher, fetcher.config))


def test_walks_region_down_to_products(fetcher, upstream):
    upstream.add(REGION_URL, LANDING)
    upstream.add("https://shop.example.test/eng-ca/women/handbags", HANDBAGS)
    upstream.add("https://shop.example.test/eng-ca/women/shoes", SHOES)

    result = make_pipeline(fetcher).run(REGION_URL, include_images=True)

    assert result["success"] is True
    assert result["categories"] == 2
    assert result["subcategories"] == 2
    assert result["products"] == 3
    assert result["images"] == 2


def test_only_requested_categories_are_walked(fetcher, upstream):
    upstream.add(REGION_URL, LANDING)

    result = make_pipeline(fetcher).run(REGION_URL, categories=["Men"])

    assert result["success"] is True
    assert result["subcategories"] == 0
    assert [str(r.url) for r in upstream.requests] == [REGION_URL]


def test_unreachable_region_fails(fetcher, upstream):
    upstream.fail(REGION_URL)

    result = make_pipeline(fetcher).run(REGION_URL)

    assert result["success"] is False


def test_region_without_navigation_fails(fetcher, upstream):
    upstream.add(REGION_URL, "<html><body>maintenance</body></html>")

    result = make_pipeline(fetcher).run(REGION_URL)

    assert result == {"success": False, "error": "No categories found"}
