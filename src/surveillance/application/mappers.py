"""
Conversions between registry schemas and coverage-engine entities.
"""
from ...common.schemas import Camera, GeoPointSchema
from ..domain.entities import CameraSensor, GeoPoint

def to_sensor(camera: Camera) -> CameraSensor:
    return CameraSensor(
        id=camera.camera_id,
        position=GeoPoint(latitude=camera.latitude, longitude=camera.longitude),
        range=camera.range,
        field_of_view=camera.fov,
        heading=camera.heading,
        operational=camera.status == "active"
    )

def to_geo_point(point: GeoPointSchema) -> GeoPoint:
    return GeoPoint(latitude=point.latitude, longitude=point.longitude)

def to_point_schema(point: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(latitude=point.latitude, longitude=point.longitude)
