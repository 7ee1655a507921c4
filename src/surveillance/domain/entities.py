"""
Domain entities for the perimeter coverage engine.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

@dataclass(frozen=True)
class GeoPoint:
    """
    A WGS84 position in decimal degrees.
    """
    latitude: float
    longitude: float

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)

@dataclass(frozen=True)
class CameraSensor:
    """
    The geometric view of a registered camera used by the coverage engine.
    Heading is measured clockwise from north.
    """
    id: str
    position: GeoPoint
    range: float # meters
    field_of_view: float # degrees
    heading: float # degrees, [0, 360)
    operational: bool = True

    def is_finite(self) -> bool:
        return self.position.is_finite() and all(
            math.isfinite(v) for v in (self.range, self.field_of_view, self.heading)
        )

class CoverageStatus(str, Enum):
    OPTIMAL = "optimal"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    CRITICAL = "critical"

@dataclass(frozen=True)
class PointCoverage:
    """
    Covering cameras for a single perimeter checkpoint.
    """
    point: GeoPoint
    camera_ids: Tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.camera_ids)

@dataclass(frozen=True)
class CoverageReport:
    """
    Aggregate coverage of a perimeter. A report with status None means the
    perimeter could not be analyzed (fewer than 3 usable checkpoints).
    """
    total_points: int = 0
    covered_points: int = 0
    redundant_points: int = 0
    vulnerable_points: int = 0
    status: Optional[CoverageStatus] = None

    @property
    def blind_spots(self) -> int:
        return self.total_points - self.covered_points

    @property
    def coverage_percent(self) -> float:
        if self.total_points == 0:
            return 0.0
        return self.covered_points / self.total_points * 100

    @property
    def redundancy_percent(self) -> float:
        if self.total_points == 0:
            return 0.0
        return self.redundant_points / self.total_points * 100

    @property
    def is_classified(self) -> bool:
        return self.status is not None

@dataclass(frozen=True)
class TrajectoryPoint:
    """
    Predicted position of a tracked drone.
    """
    point: GeoPoint
    seconds_ahead: int
