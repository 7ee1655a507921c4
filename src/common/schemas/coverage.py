from typing import List, Optional
from pydantic import BaseModel, Field

class GeoPointSchema(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class Perimeter(BaseModel):
    """
    Ordered checkpoints of the monitored boundary.
    """
    points: List[GeoPointSchema] = Field(default_factory=list)

class CoverageSummary(BaseModel):
    """
    Coverage report as shown on the status panel.
    status is None when the perimeter has fewer than 3 checkpoints.
    """
    total_points: int = Field(..., ge=0)
    covered_points: int = Field(..., ge=0)
    redundant_points: int = Field(..., ge=0)
    vulnerable_points: int = Field(..., ge=0)
    blind_spots: int = Field(..., ge=0)
    coverage_percent: float = Field(..., ge=0, le=100)
    redundancy_percent: float = Field(..., ge=0, le=100)
    status: Optional[str] = None
    active_cameras: int = Field(..., ge=0)
    total_cameras: int = Field(..., ge=0)

class CheckpointCoverage(BaseModel):
    latitude: float
    longitude: float
    camera_ids: List[str]
    count: int

class FovPolygon(BaseModel):
    camera_id: str
    points: List[GeoPointSchema]

class TrajectoryPrediction(BaseModel):
    """
    One projected drone position. Negative seconds_ahead marks a past fix.
    """
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    seconds_ahead: int
    confidence: Optional[int] = Field(None, ge=0, le=100)
