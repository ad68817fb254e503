import pytest

from app import app
from geodistance import Coordinate, DistanceService
from geodistance.config import DEFAULT_WIDTH_MILES


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_distance_endpoint(client):
    resp = client.get(
        "/distance",
        query_string={"start_lat": 0, "start_lon": 0, "end_lat": 0, "end_lon": 1},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["distance_miles"] == 69.09
    assert body["start"] == {"latitude": 0.0, "longitude": 0.0}
    assert body["end"] == {"latitude": 0.0, "longitude": 1.0}


def test_bounding_box_endpoint(client):
    resp = client.get("/bounding-box", query_string={"lat": 40.7128, "lon": -74.006, "width": 5})
    assert resp.status_code == 200
    body = resp.get_json()
    box = DistanceService.get_bounding_box(Coordinate(40.7128, -74.006), 5)
    assert body["width_miles"] == 5.0
    assert body["min"]["latitude"] == pytest.approx(box.min_latitude)
    assert body["max"]["longitude"] == pytest.approx(box.max_longitude)
    assert body["extent"] == box.to_extent()


def test_bounding_box_default_width(client):
    resp = client.get("/bounding-box", query_string={"lat": 10, "lon": 10})
    assert resp.status_code == 200
    assert resp.get_json()["width_miles"] == DEFAULT_WIDTH_MILES


@pytest.mark.parametrize(
    "query",
    [
        {"start_lat": 0, "start_lon": 0, "end_lat": 0},
        {"start_lat": "north", "start_lon": 0, "end_lat": 0, "end_lon": 1},
    ],
)
def test_distance_rejects_bad_params(client, query):
    resp = client.get("/distance", query_string=query)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


@pytest.mark.parametrize(
    "query",
    [
        {"lon": 0, "width": 5},
        {"lat": "equator", "lon": 0},
        {"lat": 0, "lon": 0, "width": "wide"},
        {"lat": 0, "lon": 0, "width": "nan"},
        {"lat": "inf", "lon": 0},
    ],
)
def test_bounding_box_rejects_bad_params(client, query):
    resp = client.get("/bounding-box", query_string=query)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_distance_rejects_non_finite_params(client):
    resp = client.get(
        "/distance",
        query_string={"start_lat": "-inf", "start_lon": 0, "end_lat": 0, "end_lon": 1},
    )
    assert resp.status_code == 400
    assert "finite" in resp.get_json()["error"]


def test_distance_past_the_pole_is_not_a_client_error(client):
    resp = client.get(
        "/distance",
        query_string={"start_lat": 91, "start_lon": 0, "end_lat": 89, "end_lon": 180},
    )
    assert resp.status_code == 200
    assert resp.get_json()["distance_miles"] == 0.0
