"""
API for the monitored perimeter and its coverage status.
"""
from fastapi import FastAPI, HTTPException
from typing import List, Optional

from ....application.mappers import to_geo_point, to_point_schema
from ....application.services.coverage import CoverageService
from .....common.schemas import CheckpointCoverage, CoverageSummary, Perimeter
from .....common.exceptions import InvalidPerimeterError

app = FastAPI()

# Singleton
_service: Optional[CoverageService] = None

def init_service(service: CoverageService):
    global _service
    _service = service

def get_service() -> CoverageService:
    if _service is None:
        raise HTTPException(500, "Coverage service not initialized")
    return _service

def _perimeter_response(points) -> Perimeter:
    return Perimeter(points=[to_point_schema(p) for p in points])

@app.get("/api/perimeter", response_model=Perimeter)
def get_perimeter():
    return _perimeter_response(get_service().get_perimeter())

@app.put("/api/perimeter", response_model=Perimeter)
def set_perimeter(perimeter: Perimeter):
    """Replaces the perimeter checkpoints (ordered polygon vertices)."""
    try:
        points = get_service().set_perimeter([to_geo_point(p) for p in perimeter.points])
    except InvalidPerimeterError as e:
        raise HTTPException(400, str(e))
    return _perimeter_response(points)

@app.post("/api/perimeter/reset", response_model=Perimeter)
def reset_perimeter():
    return _perimeter_response(get_service().reset_perimeter())

@app.get("/api/coverage", response_model=CoverageSummary)
def get_coverage():
    """
    Coverage report recomputed from the current registry and perimeter.
    `status` is null when fewer than 3 checkpoints are defined.
    """
    service = get_service()
    sensors = service.sensors()
    report = service.report(sensors)
    return CoverageSummary(
        total_points=report.total_points,
        covered_points=report.covered_points,
        redundant_points=report.redundant_points,
        vulnerable_points=report.vulnerable_points,
        blind_spots=report.blind_spots,
        coverage_percent=report.coverage_percent,
        redundancy_percent=report.redundancy_percent,
        status=report.status.value if report.is_classified else None,
        active_cameras=sum(1 for s in sensors if s.operational),
        total_cameras=len(sensors)
    )

@app.get("/api/coverage/points", response_model=List[CheckpointCoverage])
def get_checkpoint_coverage():
    """Covering cameras per checkpoint."""
    return [
        CheckpointCoverage(
            latitude=pc.point.latitude,
            longitude=pc.point.longitude,
            camera_ids=list(pc.camera_ids),
            count=pc.count
        )
        for pc in get_service().point_details()
    ]
