import pytest
import requests

from insights.db.api_client import PropertiesAPIClient, response_detail

from conftest import BASE_URL


def test_list_and_analytics_hit_expected_paths(api_client, backend):
    assert len(api_client.list_properties()) == 3
    assert api_client.get_analytics()["totalProperties"] == 3
    assert [(method, path) for method, path, _ in backend.calls] == [
        ("GET", "/properties"),
        ("GET", "/properties/analytics"),
    ]


def test_create_posts_payload(api_client, backend):
    body = api_client.create_property({"address": "1 New Rd", "propertyType": "House", "rent": 1000, "occupancy": 0})
    assert body["address"] == "1 New Rd"
    assert backend.calls[-1] == ("POST", "/properties", {"address": "1 New Rd", "propertyType": "House", "rent": 1000, "occupancy": 0})


def test_delete_returns_none_on_empty_body(api_client, backend):
    assert api_client.delete_property("1") is None
    assert backend.calls[-1][:2] == ("DELETE", "/properties/1")


def test_non_success_status_raises_with_body_detail(api_client, backend):
    backend.fail[("GET", "/properties")] = (500, "database unavailable")
    with pytest.raises(requests.HTTPError) as excinfo:
        api_client.list_properties()
    assert response_detail(excinfo.value) == "database unavailable"


def test_non_list_payload_is_rejected(api_client, backend):
    backend.fail[("GET", "/properties")] = (200, {"items": []})
    with pytest.raises(ValueError):
        api_client.list_properties()


def test_base_url_trailing_slash_is_trimmed(backend):
    client = PropertiesAPIClient(base_url=BASE_URL + "/", session=backend)
    client.get_analytics()
    assert backend.calls[-1][1] == "/properties/analytics"


def test_response_detail_without_response():
    assert response_detail(requests.ConnectionError("refused")) == "refused"
