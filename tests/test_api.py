import pytest
from fastapi.testclient import TestClient

from route_optimizer.config import settings
from route_optimizer.main import create_app


def _point(lat: float, lon: float, **extra) -> dict:
    return {"latitude": lat, "longitude": lon, **extra}


# Stops along the equator: B is closest to the hub, C closest to B, D last.
LINE_STOPS = [
    _point(0.0, 0.0, id="hub"),
    _point(0.0, 0.1, id="B", window_start="09:00", window_end="11:00"),
    _point(0.0, 0.25, id="C"),
    _point(0.0, 0.45, id="D"),
]


@pytest.fixture
def api_client() -> TestClient:
    return TestClient(create_app())


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}


def test_distance_matrix_endpoint(api_client: TestClient):
    payload = {"coordinates": [_point(40.7128, -74.0060, id="NYC"), _point(34.0522, -118.2437, id="LA")]}

    response = api_client.post("/api/distances/matrix", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["unit"] == "mi"
    assert body["size"] == 2
    assert body["coordinate_ids"] == ["NYC", "LA"]
    assert body["matrix"][0][0] == 0
    assert body["matrix"][0][1] == pytest.approx(2445.56, abs=0.5)
    assert body["matrix"][1][0] == body["matrix"][0][1]


def test_distance_matrix_for_antipodal_pair(api_client: TestClient):
    payload = {"coordinates": [_point(-87.5, 0.0), _point(87.5, 180.0)]}

    response = api_client.post("/api/distances/matrix", json=payload)

    assert response.status_code == 200
    assert response.json()["matrix"][0][1] == pytest.approx(12437.65, abs=0.05)


def test_distance_matrix_csv(api_client: TestClient):
    response = api_client.post("/api/distances/matrix/csv", json={"coordinates": LINE_STOPS[:3]})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0] == ",Stop 1,Stop 2,Stop 3"
    assert lines[1].startswith("Stop 1,0.00,")


def test_matrix_requires_two_coordinates(api_client: TestClient):
    response = api_client.post("/api/distances/matrix", json={"coordinates": [_point(1.0, 1.0)]})

    assert response.status_code == 400
    assert "At least 2" in response.json()["detail"]


@pytest.mark.parametrize(
    "coordinate",
    [
        _point(95.0, 0.0),
        _point(0.0, -181.0),
        _point(0.0, 0.0, window_start="09:00"),
        _point(0.0, 0.0, window_start="11:00", window_end="09:00"),
        _point(0.0, 0.0, window_start="25:00", window_end="26:00"),
    ],
)
def test_invalid_coordinates_are_rejected(api_client: TestClient, coordinate: dict):
    response = api_client.post("/api/distances/matrix", json={"coordinates": [_point(1.0, 1.0), coordinate]})

    assert response.status_code == 422


def test_duplicate_ids_are_rejected(api_client: TestClient):
    payload = {"coordinates": [_point(1.0, 1.0, id="X"), _point(2.0, 2.0, id="X")]}

    response = api_client.post("/api/distances/matrix", json=payload)

    assert response.status_code == 400


def test_optimize_route(api_client: TestClient):
    payload = {"coordinates": LINE_STOPS, "hub_index": 0, "start_time": "08:00", "average_speed_mph": 60}

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["stop_order"] == [0, 1, 2, 3, 0]
    assert body["coordinate_ids"] == ["hub", "B", "C", "D", "hub"]
    assert body["start_time"] == "08:00"
    assert len(body["segments"]) == 4
    assert body["total_distance"] == pytest.approx(sum(s["distance"] for s in body["segments"]), abs=0.01)

    first = body["segments"][0]
    assert first["time_window_status"] == "too_early"
    assert first["within_window"] is False
    assert body["segments"][1]["time_window_status"] == "no_window"
    assert body["segments"][1]["within_window"] is None

    closing = body["segments"][-1]
    assert closing["departure_time"] is None
    assert closing["time_window_status"] == "no_window"
    assert closing["arrival_time"] == body["end_time"]

    duration = body["total_route_duration"]
    assert duration["hours"] * 60 + duration["minutes"] == round(body["total_duration_minutes"])
    assert body["metadata"]["algorithm"] == "nearest_neighbor"
    assert body["metadata"]["stop_count"] == 4
    assert len(body["metadata"]["map_overlays"]["route"]["coordinates"]) == 5


def test_optimize_route_uses_configured_defaults(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "default_start_time", "06:30")
    monkeypatch.setattr(settings, "stop_duration_minutes", 0.0)

    response = api_client.post("/api/routes/optimize", json={"coordinates": LINE_STOPS[:2]})

    assert response.status_code == 200
    body = response.json()
    assert body["start_time"] == "06:30"
    assert body["average_speed_mph"] == settings.default_average_speed_mph
    assert body["stop_duration_minutes"] == 0.0


def test_optimize_is_deterministic(api_client: TestClient):
    payload = {"coordinates": LINE_STOPS, "hub_index": 2, "start_time": "10:15", "average_speed_mph": 35}

    first = api_client.post("/api/routes/optimize", json=payload).json()
    second = api_client.post("/api/routes/optimize", json=payload).json()

    assert first == second


@pytest.mark.parametrize("speed", [0, -20])
def test_non_positive_speed_is_rejected(api_client: TestClient, speed: float):
    payload = {"coordinates": LINE_STOPS, "average_speed_mph": speed}

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 422


def test_hub_index_out_of_range(api_client: TestClient):
    payload = {"coordinates": LINE_STOPS, "hub_index": 4}

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 400
    assert "Hub index" in response.json()["detail"]


def test_route_csv_export(api_client: TestClient):
    payload = {"coordinates": LINE_STOPS[:3], "start_time": "08:00", "average_speed_mph": 30}

    response = api_client.post("/api/routes/optimize/csv", json=payload)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0].startswith("leg,from,to,to_coordinate_id,distance_mi")
    assert len(lines) == 4
    assert lines[1].split(",")[1:3] == ["Hub", "Stop 2"]
    assert lines[-1].split(",")[2] == "Hub"


def test_route_geojson_export(api_client: TestClient):
    payload = {"coordinates": LINE_STOPS, "start_time": "08:00"}

    response = api_client.post("/api/routes/optimize/geojson", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "FeatureCollection"
    line = body["features"][0]
    assert line["geometry"]["type"] == "LineString"
    assert len(line["geometry"]["coordinates"]) == 5
    assert line["geometry"]["coordinates"][0] == [0.0, 0.0]
    points = body["features"][1:]
    assert [p["properties"]["coordinate_id"] for p in points] == ["hub", "B", "C", "D"]
    assert points[0]["properties"]["kind"] == "hub"
    assert points[1]["properties"]["time_window_status"] == "too_early"


def test_session_workflow(api_client: TestClient):
    for stop in LINE_STOPS:
        assert api_client.post("/api/coordinates", json=stop).status_code == 201

    listing = api_client.get("/api/coordinates").json()
    assert listing["count"] == 4
    assert listing["coordinates"][1]["window_start"] == "09:00"

    matrix = api_client.get("/api/coordinates/matrix").json()
    assert matrix["size"] == 4

    route = api_client.post(
        "/api/coordinates/route",
        json={"hub_index": 0, "start_time": "08:00", "average_speed_mph": 60},
    ).json()
    assert route["stop_order"] == [0, 1, 2, 3, 0]

    assert api_client.delete("/api/coordinates/C").status_code == 200
    assert api_client.get("/api/coordinates/matrix").json()["size"] == 3
    assert api_client.delete("/api/coordinates/C").status_code == 404

    cleared = api_client.delete("/api/coordinates").json()
    assert cleared == {"success": True, "removed": 3}
    assert api_client.get("/api/coordinates/matrix").status_code == 400


def test_session_rejects_duplicate_and_invalid_coordinates(api_client: TestClient):
    assert api_client.post("/api/coordinates", json=_point(1.0, 1.0, id="A")).status_code == 201
    assert api_client.post("/api/coordinates", json=_point(2.0, 2.0, id="A")).status_code == 400
    assert api_client.post("/api/coordinates", json=_point(100.0, 2.0)).status_code == 422


def test_sessions_are_isolated_per_app():
    first = TestClient(create_app())
    second = TestClient(create_app())

    first.post("/api/coordinates", json=_point(1.0, 1.0))

    assert first.get("/api/coordinates").json()["count"] == 1
    assert second.get("/api/coordinates").json()["count"] == 0
