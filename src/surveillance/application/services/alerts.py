from typing import List

from ...domain.entities import GeoPoint, TrajectoryPoint
from ...domain.footprint import predict_trajectory
from ....common.schemas import DroneAlert, DroneAlertCreate
from ....common.exceptions import CameraNotFoundError
from ....common.logging import setup_logger

class AlertService:
    """
    Simulated drone alert feed tied to the camera registry.
    """
    def __init__(self, alerts, cameras):
        self.alerts = alerts
        self.cameras = cameras
        self.logger = setup_logger(__name__)

    def report(self, data: DroneAlertCreate) -> DroneAlert:
        """
        Stores a new alert and stamps the reporting camera's last detection.
        """
        alert = self.alerts.create(data)
        try:
            self.cameras.touch_detection(data.camera_id, alert.detected_at)
        except CameraNotFoundError:
            self.logger.warning(f"Alert {alert.id} reported by unregistered camera {data.camera_id}")
        self.logger.info(
            f"Drone alert {alert.id}: {alert.drone_type} threat={alert.threat_level} "
            f"camera={alert.camera_id} confidence={alert.confidence}%"
        )
        return alert

    def trajectory(self, alert_id: int, steps: int = 10, interval_seconds: int = 30) -> List[TrajectoryPoint]:
        alert = self.alerts.get(alert_id)
        return predict_trajectory(
            GeoPoint(latitude=alert.latitude, longitude=alert.longitude),
            heading=alert.heading,
            speed_kmh=alert.speed,
            steps=steps,
            interval_seconds=interval_seconds
        )
