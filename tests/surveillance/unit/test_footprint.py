import pytest
from src.surveillance.domain.entities import GeoPoint
from src.surveillance.domain.footprint import fov_polygon, predict_trajectory
from src.surveillance.domain.geomath import bearing_degrees, distance_meters

def test_fov_polygon_starts_at_camera(make_camera, origin):
    polygon = fov_polygon(make_camera(heading=90, fov=90, range=800))
    assert polygon[0] == origin

def test_fov_polygon_arc_spans_field_of_view(make_camera, origin):
    camera = make_camera(heading=90, fov=90, range=800)
    polygon = fov_polygon(camera, step=5)
    arc = polygon[1:]
    # 45..135 every 5 degrees
    assert len(arc) == 19
    assert bearing_degrees(origin, arc[0]) == pytest.approx(45, abs=1e-6)
    assert bearing_degrees(origin, arc[-1]) == pytest.approx(135, abs=1e-6)
    for point in arc:
        assert distance_meters(origin, point) == pytest.approx(800, rel=1e-9)

def test_fov_polygon_closes_unaligned_arc(make_camera, origin):
    camera = make_camera(heading=0, fov=75, range=650)
    arc = fov_polygon(camera, step=10)[1:]
    # -37.5, -27.5, ..., 32.5 and the closing 37.5
    assert len(arc) == 9
    assert bearing_degrees(origin, arc[0]) == pytest.approx(322.5, abs=1e-6)
    assert bearing_degrees(origin, arc[-1]) == pytest.approx(37.5, abs=1e-6)

def test_fov_polygon_rejects_non_positive_step(make_camera):
    with pytest.raises(ValueError):
        fov_polygon(make_camera(), step=0)

def test_predict_trajectory_dead_reckoning(origin):
    # 36 km/h = 10 m/s
    trajectory = predict_trajectory(origin, heading=90, speed_kmh=36, steps=4, interval_seconds=30)
    assert [tp.seconds_ahead for tp in trajectory] == [30, 60, 90, 120]
    for tp in trajectory:
        assert distance_meters(origin, tp.point) == pytest.approx(10 * tp.seconds_ahead, rel=1e-9)
        assert bearing_degrees(origin, tp.point) == pytest.approx(90, abs=1e-6)

def test_predict_trajectory_stationary_drone(origin):
    trajectory = predict_trajectory(origin, heading=45, speed_kmh=0, steps=3)
    assert all(tp.point == GeoPoint(latitude=0.0, longitude=0.0) for tp in trajectory)
