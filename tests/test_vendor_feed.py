import pytest
import requests

from vendors.feed import VendorFeedClient, VendorFeedError, build_vendors, load_records_csv
from vendors.models import Vendor


RECORDS = [
    {"name": "El Tonayense", "menu": "Tacos", "location": "1800 MISSION ST", "latitude": "37.79", "longitude": "-122.42"},
    {"name": "Far Away", "menu": "Hot dogs", "location": "DALY CITY", "latitude": "37.70", "longitude": "-122.42"},
    {"name": "No Coords", "menu": "Coffee", "location": "UNKNOWN", "latitude": "", "longitude": ""},
    {"name": "Philz Cart", "menu": "Coffee", "location": "50 FREMONT ST", "latitude": 37.7906, "longitude": -122.3972},
]


class MockResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value")
        return self.payload


@pytest.fixture
def client():
    return VendorFeedClient(base_url="http://vendors.test/", timeout=3)


def test_build_vendors_assigns_ids_before_culling():
    vendors = build_vendors(RECORDS)

    # record 2 is off the map, record 3 has no coordinates
    assert [v.id for v in vendors] == [1, 4]
    assert all(isinstance(v, Vendor) for v in vendors)


def test_build_vendors_projects_coordinates():
    first = build_vendors(RECORDS)[0]
    assert first.x == pytest.approx((-122.42 + 122.45673) * 102500)
    assert first.y == pytest.approx((37.81027 - 37.79) * 120000)
    assert first.latitude == pytest.approx(37.79)
    assert first.name == "El Tonayense"
    assert first.location == "1800 MISSION ST"


def test_build_vendors_skips_invalid_records_with_warning(caplog):
    with caplog.at_level("WARNING", logger="vendors.feed"):
        build_vendors([{"name": "broken", "latitude": "n/a", "longitude": "-122.42"}, {"name": "missing"}])
    assert len([r for r in caplog.records if r.levelname == "WARNING"]) == 2


def test_build_vendors_empty():
    assert build_vendors([]) == []


def test_load_records_csv_round_trips_into_vendors(tmp_path):
    path = tmp_path / "vendors.csv"
    path.write_text(
        "name,menu,location,latitude,longitude\n"
        "El Tonayense,Tacos,1800 MISSION ST,37.79,-122.42\n"
        "Nameless,,,37.80,-122.40\n"
    )

    records = load_records_csv(str(path))
    vendors = build_vendors(records)

    assert len(records) == 2
    assert [v.id for v in vendors] == [1, 2]
    assert vendors[1].menu == ""


def test_client_requires_url(monkeypatch):
    monkeypatch.setattr("vendors.feed.VENDOR_FEED_URL", None)
    with pytest.raises(ValueError):
        VendorFeedClient()


def test_client_fetches_list_json(monkeypatch, client):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return MockResponse(RECORDS)

    monkeypatch.setattr(requests, "get", fake_get)

    assert client.fetch_records() == RECORDS
    assert calls == [("http://vendors.test/list.json", 3)]


def test_client_fetch_vendors_builds_vendors(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: MockResponse(RECORDS))
    assert [v.id for v in client.fetch_vendors()] == [1, 4]


def test_client_wraps_network_errors(monkeypatch, client):
    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fake_get)
    with pytest.raises(VendorFeedError):
        client.fetch_records()


def test_client_wraps_http_errors(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: MockResponse(status_code=503))
    with pytest.raises(VendorFeedError):
        client.fetch_records()


def test_client_rejects_invalid_json(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: MockResponse(bad_json=True))
    with pytest.raises(VendorFeedError):
        client.fetch_records()


def test_client_rejects_non_list_payload(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: MockResponse({"error": "nope"}))
    with pytest.raises(VendorFeedError):
        client.fetch_records()
