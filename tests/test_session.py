import pytest

from route_optimizer.errors import CoordinateNotFound, InvalidCoordinateRange, RouteOptimizerError
from route_optimizer.models.domain import Coordinate
from route_optimizer.services.session import CoordinateSession


def _coordinate(cid: str, lat: float, lon: float) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon, id=cid)


def test_add_list_and_remove_by_id():
    session = CoordinateSession(unit="mi")
    session.add(_coordinate("A", 40.7128, -74.0060))
    session.add(_coordinate("B", 34.0522, -118.2437))

    assert [c.id for c in session.coordinates()] == ["A", "B"]

    removed = session.remove("A")

    assert removed.id == "A"
    assert [c.id for c in session.coordinates()] == ["B"]


def test_remove_unknown_id_raises_not_found():
    session = CoordinateSession()

    with pytest.raises(CoordinateNotFound):
        session.remove("missing")
    with pytest.raises(KeyError):
        session.remove("missing")


def test_duplicate_ids_are_rejected():
    session = CoordinateSession()
    session.add(_coordinate("A", 1.0, 1.0))

    with pytest.raises(RouteOptimizerError):
        session.add(_coordinate("A", 2.0, 2.0))


def test_session_capacity_is_enforced():
    session = CoordinateSession(max_coordinates=2)
    session.add(_coordinate("A", 1.0, 1.0))
    session.add(_coordinate("B", 2.0, 2.0))

    with pytest.raises(RouteOptimizerError):
        session.add(_coordinate("C", 3.0, 3.0))


def test_matrix_is_cached_until_coordinates_change():
    session = CoordinateSession(unit="mi")
    session.add(_coordinate("A", 0.0, 0.0))
    session.add(_coordinate("B", 0.0, 1.0))

    coordinates, matrix = session.snapshot()
    _, cached = session.snapshot()

    assert len(coordinates) == 2
    assert cached is matrix

    session.add(_coordinate("C", 0.0, 2.0))
    coordinates, rebuilt = session.snapshot()

    assert len(rebuilt) == 3
    assert rebuilt[0][1] == matrix[0][1]

    session.remove("B")
    _, after_remove = session.snapshot()

    assert len(after_remove) == 2
    assert after_remove[0][1] == rebuilt[0][2]


def test_clear_empties_the_session():
    session = CoordinateSession()
    session.add(_coordinate("A", 1.0, 1.0))

    session.clear()

    assert len(session) == 0
    coordinates, matrix = session.snapshot()
    assert coordinates == ()
    assert matrix == ()


@pytest.mark.parametrize(("lat", "lon"), [(120.0, 500.0), (0.0, -180.5), (float("nan"), 0.0)])
def test_out_of_range_coordinates_are_rejected(lat, lon):
    session = CoordinateSession()

    with pytest.raises(InvalidCoordinateRange):
        session.add(_coordinate("X", lat, lon))

    assert len(session) == 0
