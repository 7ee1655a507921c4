import pytest
from pydantic import ValidationError
from src.common.schemas import CameraCreate, CameraUpdate, DroneAlertCreate, GeoPointSchema

def camera_data(**overrides):
    data = dict(camera_id="cam_1", latitude=60.74, longitude=24.77, range=800, fov=90, heading=180)
    data.update(overrides)
    return data

# --- Camera Tests ---
def test_camera_valid_with_defaults():
    cam = CameraCreate(**camera_data())
    assert cam.camera_id == "cam_1"
    assert cam.status == "active"
    assert cam.camera_type == "Standard Surveillance"
    assert cam.feed_url is None

@pytest.mark.parametrize("alias", ["yaw", "direction"])
def test_camera_heading_aliases(alias):
    data = camera_data()
    del data["heading"]
    data[alias] = 225
    assert CameraCreate(**data).heading == 225

def test_camera_heading_360_is_north():
    assert CameraCreate(**camera_data(heading=360)).heading == 0

@pytest.mark.parametrize("field, value", [
    ("heading", 400),
    ("heading", -1),
    ("fov", 10),
    ("fov", 200),
    ("range", 50),
    ("range", 5000),
    ("latitude", 91),
    ("longitude", -181),
    ("status", "broken"),
    ("camera_type", "Sonar"),
    ("latitude", float("nan")),
])
def test_camera_invalid_fields(field, value):
    with pytest.raises(ValidationError):
        CameraCreate(**camera_data(**{field: value}))

def test_camera_feed_url():
    cam = CameraCreate(**camera_data(feed_url="rtsp://north1.heimdall.tactical/live"))
    assert str(cam.feed_url) == "rtsp://north1.heimdall.tactical/live"
    with pytest.raises(ValidationError):
        CameraCreate(**camera_data(feed_url="not a url"))

def test_camera_update_is_partial():
    update = CameraUpdate(status="offline")
    assert update.model_dump(exclude_unset=True) == {"status": "offline"}

def test_camera_update_validates_ranges():
    with pytest.raises(ValidationError):
        CameraUpdate(fov=0)

def test_camera_update_can_clear_feed_credentials():
    update = CameraUpdate(feed_url=None, feed_password=None)
    assert update.model_dump(exclude_unset=True) == {"feed_url": None, "feed_password": None}

@pytest.mark.parametrize("field", ["latitude", "range", "status", "camera_id"])
def test_camera_update_rejects_null_required_field(field):
    with pytest.raises(ValidationError):
        CameraUpdate(**{field: None})

def test_camera_update_rejects_null_heading_alias():
    with pytest.raises(ValidationError):
        CameraUpdate.model_validate({"yaw": None})

def test_drone_alert_trajectory():
    alert = DroneAlertCreate(camera_id="c1", latitude=0, longitude=0, altitude=50,
                             confidence=80, speed=20, heading=90,
                             estimated_trajectory=[{"latitude": 0.001, "longitude": 0, "seconds_ahead": 30}])
    assert alert.estimated_trajectory[0].seconds_ahead == 30
    assert alert.estimated_trajectory[0].confidence is None

# --- Alert Tests ---
def test_drone_alert_defaults():
    alert = DroneAlertCreate(camera_id="c1", latitude=0, longitude=0, altitude=50,
                             confidence=80, speed=20, heading=90)
    assert alert.status == "active"
    assert alert.drone_type == "Unknown"

def test_drone_alert_invalid_confidence():
    with pytest.raises(ValidationError):
        DroneAlertCreate(camera_id="c1", latitude=0, longitude=0, altitude=50,
                         confidence=120, speed=20, heading=90)

# --- Perimeter Tests ---
def test_geo_point_rejects_infinite():
    with pytest.raises(ValidationError):
        GeoPointSchema(latitude=float("inf"), longitude=0)
