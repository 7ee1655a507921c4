import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ...common.schemas import (
    Camera, CameraCreate, CameraUpdate, DroneAlert, DroneAlertCreate
)
from ...common.exceptions import (
    AlertNotFoundError, CameraNotFoundError, DuplicateCameraError
)
from ...common.logging import setup_logger

class InMemoryCameraRepository:
    """
    Camera registry keyed by an auto-incremented integer id.
    camera_id values are unique across the registry.
    """
    def __init__(self):
        self._cameras: Dict[int, Camera] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.logger = setup_logger(__name__)

    def list(self) -> List[Camera]:
        with self._lock:
            return list(self._cameras.values())

    def get(self, id: int) -> Camera:
        with self._lock:
            camera = self._cameras.get(id)
        if camera is None:
            raise CameraNotFoundError(f"Camera {id} not found")
        return camera

    def get_by_camera_id(self, camera_id: str) -> Optional[Camera]:
        with self._lock:
            return self._find(camera_id)

    def _find(self, camera_id: str) -> Optional[Camera]:
        for camera in self._cameras.values():
            if camera.camera_id == camera_id:
                return camera
        return None

    def create(self, data: CameraCreate) -> Camera:
        with self._lock:
            if self._find(data.camera_id) is not None:
                raise DuplicateCameraError(f"Camera ID {data.camera_id} already exists")
            camera = Camera(id=self._next_id, **data.model_dump())
            self._cameras[camera.id] = camera
            self._next_id += 1
        self.logger.info(f"Registered camera {camera.camera_id} (id={camera.id}, status={camera.status})")
        return camera

    def update(self, id: int, patch: CameraUpdate) -> Camera:
        changes = patch.model_dump(exclude_unset=True)
        with self._lock:
            existing = self._cameras.get(id)
            if existing is None:
                raise CameraNotFoundError(f"Camera {id} not found")
            new_camera_id = changes.get("camera_id")
            if new_camera_id and new_camera_id != existing.camera_id and self._find(new_camera_id):
                raise DuplicateCameraError(f"Camera ID {new_camera_id} already exists")
            camera = existing.model_copy(update=changes)
            self._cameras[id] = camera
        self.logger.info(f"Updated camera {camera.camera_id}: {sorted(changes)}")
        return camera

    def delete(self, id: int):
        with self._lock:
            camera = self._cameras.pop(id, None)
        if camera is None:
            raise CameraNotFoundError(f"Camera {id} not found")
        self.logger.info(f"Removed camera {camera.camera_id}")

    def touch_detection(self, camera_id: str, when: Optional[datetime] = None) -> Camera:
        """Records the time of the latest detection reported by a camera."""
        with self._lock:
            camera = self._find(camera_id)
            if camera is None:
                raise CameraNotFoundError(f"Camera {camera_id} not found")
            camera = camera.model_copy(update={"last_detection": when or datetime.now(timezone.utc)})
            self._cameras[camera.id] = camera
        return camera

class InMemoryAlertRepository:
    """
    Drone alert store. Alerts are simulated and never deleted.
    """
    def __init__(self):
        self._alerts: Dict[int, DroneAlert] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self, status: Optional[str] = None, threat_level: Optional[str] = None) -> List[DroneAlert]:
        with self._lock:
            alerts = list(self._alerts.values())
        if status:
            alerts = [a for a in alerts if a.status == status]
        if threat_level:
            alerts = [a for a in alerts if a.threat_level == threat_level]
        # Newest first
        return sorted(alerts, key=lambda a: (a.detected_at, a.id), reverse=True)

    def get(self, id: int) -> DroneAlert:
        with self._lock:
            alert = self._alerts.get(id)
        if alert is None:
            raise AlertNotFoundError(f"Alert {id} not found")
        return alert

    def create(self, data: DroneAlertCreate, detected_at: Optional[datetime] = None) -> DroneAlert:
        with self._lock:
            alert = DroneAlert(
                id=self._next_id,
                detected_at=detected_at or datetime.now(timezone.utc),
                **data.model_dump()
            )
            self._alerts[alert.id] = alert
            self._next_id += 1
        return alert

    def update_status(self, id: int, status: str) -> DroneAlert:
        with self._lock:
            alert = self._alerts.get(id)
            if alert is None:
                raise AlertNotFoundError(f"Alert {id} not found")
            alert = alert.model_copy(update={"status": status})
            self._alerts[id] = alert
        return alert
