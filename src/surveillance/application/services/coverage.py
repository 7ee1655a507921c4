"""
Perimeter state and on-demand coverage analysis over the camera registry.
"""
import threading
from typing import List, Optional, Sequence

from ..analyzer import CoverageAnalyzer
from ..mappers import to_sensor
from ...domain.entities import CameraSensor, CoverageReport, GeoPoint, PointCoverage
from ...domain.footprint import fov_polygon
from ...domain.repositories import CameraRepository
from ....common.exceptions import InvalidPerimeterError
from ....common.logging import setup_logger

class CoverageService:
    """
    Holds the current perimeter and recomputes the coverage report from the
    registry on every call. Nothing is cached between calls.
    """
    def __init__(self, cameras: CameraRepository, analyzer: CoverageAnalyzer,
                 default_perimeter: Sequence[GeoPoint] = (), fov_step: float = 5.0):
        self.cameras = cameras
        self.analyzer = analyzer
        self.default_perimeter = list(default_perimeter)
        self.fov_step = fov_step
        self._perimeter: List[GeoPoint] = list(default_perimeter)
        self._lock = threading.Lock()
        self.logger = setup_logger(__name__)

    def get_perimeter(self) -> List[GeoPoint]:
        with self._lock:
            return list(self._perimeter)

    def set_perimeter(self, points: Sequence[GeoPoint]) -> List[GeoPoint]:
        """
        Replaces the perimeter. Fewer than 3 points is accepted and yields an
        unclassified report; unusable coordinates are rejected.
        """
        for i, point in enumerate(points):
            if not point.is_finite():
                raise InvalidPerimeterError(f"Perimeter point {i} is not finite: {point}")
            if not (-90 <= point.latitude <= 90 and -180 <= point.longitude <= 180):
                raise InvalidPerimeterError(f"Perimeter point {i} is out of range: {point}")

        with self._lock:
            self._perimeter = list(points)
        self.logger.info(f"Perimeter updated with {len(points)} points")
        return self.get_perimeter()

    def reset_perimeter(self) -> List[GeoPoint]:
        return self.set_perimeter(self.default_perimeter)

    def sensors(self) -> List[CameraSensor]:
        return [to_sensor(camera) for camera in self.cameras.list()]

    def report(self, sensors: Optional[Sequence[CameraSensor]] = None) -> CoverageReport:
        if sensors is None:
            sensors = self.sensors()
        return self.analyzer.analyze(self.get_perimeter(), sensors)

    def point_details(self) -> List[PointCoverage]:
        return self.analyzer.point_coverage(self.get_perimeter(), self.sensors())

    def fov(self, sensor: CameraSensor) -> List[GeoPoint]:
        return fov_polygon(sensor, step=self.fov_step)
