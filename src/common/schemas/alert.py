from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from .coverage import TrajectoryPrediction

DroneType = Literal["Unknown", "Commercial", "Military", "Racing"]
ThreatLevel = Literal["Low", "Medium", "High", "Critical"]
AlertStatus = Literal["active", "tracking", "lost", "neutralized"]

class DroneAlertCreate(BaseModel):
    """
    A simulated drone intrusion reported by a camera.
    """
    camera_id: str = Field(..., description="Camera that reported the drone")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    altitude: float = Field(..., ge=0, description="Drone altitude in meters")
    confidence: int = Field(..., ge=0, le=100, description="Detection probability (%)")
    speed: float = Field(..., ge=0, description="Ground speed in km/h")
    heading: float = Field(..., ge=0, lt=360, description="Direction of travel in degrees")
    drone_type: DroneType = "Unknown"
    threat_level: ThreatLevel = "Low"
    status: AlertStatus = "active"
    estimated_trajectory: Optional[List[TrajectoryPrediction]] = None
    notes: Optional[str] = None

class DroneAlert(DroneAlertCreate):
    id: int
    detected_at: datetime

class AlertStatusUpdate(BaseModel):
    status: AlertStatus
