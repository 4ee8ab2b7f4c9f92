import pytest

from lvtracker.utils.json_navigator import MISSING, find_index, find_value, is_missing, walk

PAYLOAD = {
    "skuList": [
        {
            "identifier": "M40995",
            "_links": {"self": {"href": "https://api.example.test/catalog/product/M40995"}},
            "stock": 0,
            "note": None,
        }
    ]
}


@pytest.mark.parametrize("node", [None, 0, "text", True, 1.5, [{"key": 1}], MISSING])
def test_find_value_on_non_mapping_is_missing(node):
    assert find_value(node, "key") is MISSING


def test_find_value_top_level_only():
    assert find_value(PAYLOAD, "skuList") is PAYLOAD["skuList"]
    assert find_value(PAYLOAD, "identifier") is MISSING


def test_missing_is_distinct_from_falsy_values():
    item = PAYLOAD["skuList"][0]

    assert find_value(item, "stock") == 0
    assert find_value(item, "note") is None
    assert not is_missing(find_value(item, "note"))
    assert is_missing(find_value(item, "absent"))
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_find_index():
    assert find_index(["a", "b"], 1) == "b"
    assert find_index(["a", "b"], -1) == "b"
    assert find_index(["a", "b"], 2) is MISSING
    assert find_index({"0": "a"}, 0) is MISSING


def test_walk_through_nested_links():
    href = walk(PAYLOAD, "skuList", 0, "_links", "self", "href")

    assert href == "https://api.example.test/catalog/product/M40995"


@pytest.mark.parametrize(
    "path",
    [
        ("skuList", 1, "_links", "self", "href"),
        ("skuList", 0, "links", "self", "href"),
        ("skuList", 0, "note", "self"),
        ("skuList", 0, "_links", "self", "href", "deeper"),
    ],
)
def test_walk_short_circuits_on_absent_level(path):
    assert walk(PAYLOAD, *path) is MISSING


def test_walk_with_empty_path_returns_node():
    assert walk(PAYLOAD) is PAYLOAD
