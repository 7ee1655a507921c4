"""
Domain module initialization.
"""
from .entities import (
    GeoPoint,
    CameraSensor,
    CoverageStatus,
    CoverageReport,
    PointCoverage,
    TrajectoryPoint
)
from .geomath import distance_meters, bearing_degrees, destination_point
from .visibility import covers
from .classifier import classify
from .repositories import CameraRepository
