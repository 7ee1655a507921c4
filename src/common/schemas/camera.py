from datetime import datetime
from typing import Literal, Optional
from pydantic import AliasChoices, AnyUrl, BaseModel, Field, field_validator, model_validator

CameraStatus = Literal["active", "maintenance", "offline"]
CameraType = Literal["Standard Surveillance", "Thermal Imaging", "Night Vision", "High Resolution"]

# Older payloads call the heading "yaw" or "direction"
HEADING_ALIASES = AliasChoices("heading", "yaw", "direction")

# Fields a partial update may clear by sending null
CLEARABLE_FIELDS = {"feed_url", "feed_username", "feed_password"}

class CameraCreate(BaseModel):
    """
    Registration payload for a camera sensor.
    """
    camera_id: str = Field(..., min_length=1, description="Unique identifier for the camera")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    altitude: float = Field(0, ge=0, le=10000, description="Height above sea level in meters")
    range: float = Field(..., ge=100, le=2000, description="Detection range in meters")
    fov: float = Field(..., ge=30, le=180, description="Field of View in degrees")
    heading: float = Field(..., ge=0, le=360, validation_alias=HEADING_ALIASES,
                           description="Heading in degrees, clockwise from north")
    pitch: float = Field(0, ge=-90, le=90, description="Vertical tilt in degrees")
    roll: float = Field(0, ge=-180, le=180, description="Rotation around the forward axis")
    status: CameraStatus = Field("active", description="Operational status")
    camera_type: CameraType = Field("Standard Surveillance", description="Sensor type")
    feed_url: Optional[AnyUrl] = Field(None, description="Live feed URL")
    feed_username: Optional[str] = Field(None, description="Feed authentication username")
    feed_password: Optional[str] = Field(None, description="Feed authentication password")

    @field_validator("heading")
    @classmethod
    def normalize_heading(cls, value: float) -> float:
        return value % 360

class CameraUpdate(BaseModel):
    """
    Partial update; only the fields that are set are applied.
    """
    camera_id: Optional[str] = Field(None, min_length=1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    altitude: Optional[float] = Field(None, ge=0, le=10000)
    range: Optional[float] = Field(None, ge=100, le=2000)
    fov: Optional[float] = Field(None, ge=30, le=180)
    heading: Optional[float] = Field(None, ge=0, le=360, validation_alias=HEADING_ALIASES)
    pitch: Optional[float] = Field(None, ge=-90, le=90)
    roll: Optional[float] = Field(None, ge=-180, le=180)
    status: Optional[CameraStatus] = None
    camera_type: Optional[CameraType] = None
    feed_url: Optional[AnyUrl] = None
    feed_username: Optional[str] = None
    feed_password: Optional[str] = None

    @field_validator("heading")
    @classmethod
    def normalize_heading(cls, value: Optional[float]) -> Optional[float]:
        return None if value is None else value % 360

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        nulled = sorted(
            name for name in self.model_fields_set - CLEARABLE_FIELDS
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be cleared: {', '.join(nulled)}")
        return self

class Camera(CameraCreate):
    """
    Represents a registered camera sensor.
    """
    id: int = Field(..., description="Registry key")
    last_detection: Optional[datetime] = Field(None, description="Time of the last reported detection")
