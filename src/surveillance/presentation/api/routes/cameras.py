"""
API for the camera registry.
"""
from fastapi import FastAPI, HTTPException, Response
from typing import List, Optional

from ....application.mappers import to_sensor, to_point_schema
from ....application.services.coverage import CoverageService
from ....application.services.feed import FeedCommand, FeedManager
from ....infrastructure.repositories import InMemoryCameraRepository
from .....common.schemas import Camera, CameraCreate, CameraUpdate, FovPolygon
from .....common.exceptions import CameraNotFoundError, DuplicateCameraError, FeedStateError

app = FastAPI()

# Singletons
_cameras: Optional[InMemoryCameraRepository] = None
_coverage: Optional[CoverageService] = None
_feeds: Optional[FeedManager] = None

def init_services(cameras: InMemoryCameraRepository, coverage: CoverageService, feeds: FeedManager):
    global _cameras, _coverage, _feeds
    _cameras = cameras
    _coverage = coverage
    _feeds = feeds

def get_cameras() -> InMemoryCameraRepository:
    if _cameras is None:
        raise HTTPException(500, "Camera registry not initialized")
    return _cameras

def get_coverage_service() -> CoverageService:
    if _coverage is None:
        raise HTTPException(500, "Coverage service not initialized")
    return _coverage

def get_feeds() -> FeedManager:
    if _feeds is None:
        raise HTTPException(500, "Feed manager not initialized")
    return _feeds

def _get_or_404(id: int) -> Camera:
    try:
        return get_cameras().get(id)
    except CameraNotFoundError as e:
        raise HTTPException(404, str(e))

@app.get("/api/cameras", response_model=List[Camera])
def list_cameras():
    """All registered cameras."""
    return get_cameras().list()

@app.get("/api/cameras/{id}", response_model=Camera)
def get_camera(id: int):
    return _get_or_404(id)

@app.post("/api/cameras", response_model=Camera, status_code=201)
def create_camera(payload: CameraCreate):
    """
    Registers a camera. `yaw` and `direction` are accepted as aliases of
    `heading`.

    Body example:
    {
        "camera_id": "HEIMDALL-N3",
        "latitude": 60.75, "longitude": 24.77,
        "range": 800, "fov": 90, "heading": 180,
        "status": "active"
    }
    """
    try:
        return get_cameras().create(payload)
    except DuplicateCameraError as e:
        raise HTTPException(409, str(e))

@app.patch("/api/cameras/{id}", response_model=Camera)
def update_camera(id: int, payload: CameraUpdate):
    try:
        return get_cameras().update(id, payload)
    except CameraNotFoundError as e:
        raise HTTPException(404, str(e))
    except DuplicateCameraError as e:
        raise HTTPException(409, str(e))

@app.delete("/api/cameras/{id}", status_code=204)
def delete_camera(id: int):
    try:
        get_cameras().delete(id)
    except CameraNotFoundError as e:
        raise HTTPException(404, str(e))
    get_feeds().discard(id)
    return Response(status_code=204)

@app.post("/api/cameras/{camera_id}/detection")
def record_detection(camera_id: str):
    """Updates the last detection time of a camera."""
    try:
        get_cameras().touch_detection(camera_id)
    except CameraNotFoundError as e:
        raise HTTPException(404, str(e))
    return {"message": "Detection time updated", "camera_id": camera_id}

@app.get("/api/cameras/{id}/fov", response_model=FovPolygon)
def get_fov_polygon(id: int):
    """Detection wedge polygon for map display."""
    camera = _get_or_404(id)
    points = get_coverage_service().fov(to_sensor(camera))
    return FovPolygon(camera_id=camera.camera_id, points=[to_point_schema(p) for p in points])

def _feed_camera(id: int) -> Camera:
    camera = _get_or_404(id)
    if camera.feed_url is None:
        raise HTTPException(404, f"Camera {camera.camera_id} has no feed configured")
    return camera

@app.get("/api/cameras/{id}/feed")
def get_feed(id: int):
    camera = _feed_camera(id)
    session = get_feeds().session(id)
    return {"camera_id": camera.camera_id, "feed_url": str(camera.feed_url), "state": session.state.value}

@app.post("/api/cameras/{id}/feed/{command}")
def control_feed(id: int, command: FeedCommand):
    camera = _feed_camera(id)
    try:
        state = get_feeds().apply(id, command)
    except FeedStateError as e:
        raise HTTPException(409, str(e))
    return {"camera_id": camera.camera_id, "state": state.value}
