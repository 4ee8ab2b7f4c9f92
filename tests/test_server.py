import pytest

import server
from lvtracker.resolvers.sku_resolver import SkuResolver

SKU_URL = "https://api.example.test/api/eng-ca/catalog/skus/{}"
PRODUCT_URL = "https://api.example.test/api/eng-ca/catalog/product/{}"

FAMILY = {
    "model": [
        {
            "identifier": "A",
            "additionalProperty": [{"name": "backOrderDisclaimer", "value": False}],
        },
        {
            "identifier": "B",
            "additionalProperty": [{"name": "backOrderDisclaimer", "value": True}],
        },
    ]
}


@pytest.fixture
def client(monkeypatch, fetcher, api_config):
    monkeypatch.setattr(server, "resolver", SkuResolver(fetcher, api_config))
    server.app.config["TESTING"] = True
    with server.app.test_client() as client:
        yield client


def test_home_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert b"Welcome" in response.data


def test_item(client, upstream):
    upstream.add(PRODUCT_URL.format("A"), FAMILY)

    response = client.get("/api/item/A")

    assert response.status_code == 200
    assert response.get_json() == {"Sku": "A", "Available": True}
    assert response.data.index(b'"Sku"') < response.data.index(b'"Available"')


def test_item_unknown_sku(client, upstream):
    upstream.add(PRODUCT_URL.format("NOPE"), '{"errorCode":"ERR_404"}', 404)

    assert client.get("/api/item/NOPE").get_json() == {"Sku": "NOPE", "Available": False}


def test_item_family(client, upstream):
    upstream.add(PRODUCT_URL.format("A"), FAMILY)

    response = client.get("/api/itemfamily/A")

    assert response.get_json() == [
        {"Sku": "A", "Available": True},
        {"Sku": "B", "Available": False},
    ]


def test_item_family_unknown_sku(client, upstream):
    upstream.add(PRODUCT_URL.format("NOPE"), '{"errorCode":"ERR_404"}', 404)

    assert client.get("/api/itemfamily/NOPE").get_json() == []


def test_product_links(client, upstream):
    upstream.add(
        SKU_URL.format("A"),
        {
            "skuListSize": 1,
            "skuList": [
                {
                    "url": "https://shop.example.test/products/a",
                    "_links": {"self": {"href": "https://api.example.test/product/A"}},
                }
            ],
        },
    )

    response = client.get("/api/product/A")

    assert response.get_json() == {
        "Sku": "A",
        "Url": "https://shop.example.test/products/a",
        "Endpoint": "https://api.example.test/product/A",
    }


def test_product_links_invalid_sku(client, upstream):
    upstream.add(SKU_URL.format("NOPE"), '{"skuListSize":0,"skuList":[]}')

    assert client.get("/api/product/NOPE").get_json() == {
        "Sku": "NOPE",
        "Url": "Invalid SKU",
        "Endpoint": "Invalid SKU",
    }


def test_resolver_is_shared_by_all_requests():
    resolver = server.resolver

    assert isinstance(resolver, SkuResolver)
    assert resolver.config is server.config.api
    assert resolver.fetcher.client is not None
