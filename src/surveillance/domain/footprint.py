"""
Map geometry derived from camera and drone kinematics.
"""
import math
from typing import List

from .entities import CameraSensor, GeoPoint, TrajectoryPoint
from .geomath import destination_point

def fov_polygon(camera: CameraSensor, step: float = 5.0) -> List[GeoPoint]:
    """
    Detection wedge as a polygon: the camera position followed by points on
    the range arc from heading - fov/2 to heading + fov/2, every `step`
    degrees. The arc end is always included.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    start = camera.heading - camera.field_of_view / 2
    end = camera.heading + camera.field_of_view / 2
    n_steps = int(math.floor(camera.field_of_view / step))

    angles = [start + i * step for i in range(n_steps + 1)]
    if angles[-1] < end:
        angles.append(end)

    points = [camera.position]
    for angle in angles:
        points.append(destination_point(camera.position, angle % 360, camera.range))
    return points

def predict_trajectory(origin: GeoPoint, heading: float, speed_kmh: float,
                       steps: int = 10, interval_seconds: int = 30) -> List[TrajectoryPoint]:
    """
    Dead-reckoning projection at constant speed along a fixed heading.
    """
    speed_ms = speed_kmh / 3.6
    trajectory = []
    for i in range(1, steps + 1):
        seconds = i * interval_seconds
        trajectory.append(TrajectoryPoint(
            point=destination_point(origin, heading, speed_ms * seconds),
            seconds_ahead=seconds
        ))
    return trajectory
