import pytest
from src.common.config.manager import ConfigManager
from src.common.schemas import Camera
from src.surveillance.application.builder import SurveillanceApplicationBuilder
from src.surveillance.application.mappers import to_sensor
from src.surveillance.domain.entities import CameraSensor, GeoPoint

@pytest.fixture
def origin():
    return GeoPoint(latitude=0.0, longitude=0.0)

@pytest.fixture
def make_camera(origin):
    def _make(id="cam", position=None, range=500.0, fov=90.0, heading=0.0, operational=True):
        return CameraSensor(
            id=id,
            position=position or origin,
            range=range,
            field_of_view=fov,
            heading=heading,
            operational=operational
        )
    return _make

@pytest.fixture
def app_config():
    return ConfigManager().load_app_config()

@pytest.fixture
def default_perimeter(app_config):
    return [GeoPoint(latitude=p.latitude, longitude=p.longitude) for p in app_config.coverage.perimeter]

@pytest.fixture
def builder(app_config):
    return (
        SurveillanceApplicationBuilder(app_config)
        .build_repositories()
        .seed()
        .build_analyzer()
        .build_services()
    )

@pytest.fixture
def default_sensors(builder):
    return [to_sensor(c) for c in builder.cameras.list()]
