"""
API for the simulated drone alert feed.
"""
from fastapi import FastAPI, HTTPException, Query
from typing import List, Optional

from ....application.services.alerts import AlertService
from .....common.schemas import AlertStatusUpdate, DroneAlert, DroneAlertCreate, TrajectoryPrediction
from .....common.schemas.alert import AlertStatus, ThreatLevel
from .....common.exceptions import AlertNotFoundError

app = FastAPI()

# Singleton
_service: Optional[AlertService] = None

def init_service(service: AlertService):
    global _service
    _service = service

def get_service() -> AlertService:
    if _service is None:
        raise HTTPException(500, "Alert service not initialized")
    return _service

@app.get("/api/alerts", response_model=List[DroneAlert])
def list_alerts(status: Optional[AlertStatus] = None, threat_level: Optional[ThreatLevel] = None):
    """Alerts, newest first, optionally filtered."""
    return get_service().alerts.list(status=status, threat_level=threat_level)

@app.get("/api/alerts/{id}", response_model=DroneAlert)
def get_alert(id: int):
    try:
        return get_service().alerts.get(id)
    except AlertNotFoundError as e:
        raise HTTPException(404, str(e))

@app.post("/api/alerts", response_model=DroneAlert, status_code=201)
def create_alert(payload: DroneAlertCreate):
    return get_service().report(payload)

@app.patch("/api/alerts/{id}/status", response_model=DroneAlert)
def update_alert_status(id: int, payload: AlertStatusUpdate):
    try:
        return get_service().alerts.update_status(id, payload.status)
    except AlertNotFoundError as e:
        raise HTTPException(404, str(e))

@app.get("/api/alerts/{id}/trajectory", response_model=List[TrajectoryPrediction])
def get_trajectory(id: int,
                   steps: int = Query(10, ge=1, le=60),
                   interval_seconds: int = Query(30, ge=1, le=600)):
    """Dead-reckoning projection along the alert heading."""
    try:
        trajectory = get_service().trajectory(id, steps=steps, interval_seconds=interval_seconds)
    except AlertNotFoundError as e:
        raise HTTPException(404, str(e))
    return [
        TrajectoryPrediction(
            latitude=tp.point.latitude,
            longitude=tp.point.longitude,
            seconds_ahead=tp.seconds_ahead
        )
        for tp in trajectory
    ]
