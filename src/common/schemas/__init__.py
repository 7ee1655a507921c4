from .camera import Camera, CameraCreate, CameraUpdate
from .alert import DroneAlert, DroneAlertCreate, AlertStatusUpdate
from .coverage import (
    GeoPointSchema, Perimeter, CoverageSummary, CheckpointCoverage,
    FovPolygon, TrajectoryPrediction
)

__all__ = [
    "Camera",
    "CameraCreate",
    "CameraUpdate",
    "DroneAlert",
    "DroneAlertCreate",
    "AlertStatusUpdate",
    "GeoPointSchema",
    "Perimeter",
    "CoverageSummary",
    "CheckpointCoverage",
    "FovPolygon",
    "TrajectoryPrediction",
]
