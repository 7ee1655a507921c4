"""
Camera detection-wedge test.
"""
from .entities import CameraSensor, GeoPoint
from .geomath import angular_difference, bearing_degrees, distance_meters

# Closer than this the bearing is meaningless and the point sits on the camera.
COINCIDENT_DISTANCE_M = 1e-6

def covers(point: GeoPoint, camera: CameraSensor) -> bool:
    """
    True when `point` lies inside the camera's detection wedge: within range
    and within half the field of view of its heading (boundary inclusive).

    Non-operational cameras and non-finite coordinates never cover.
    """
    if not camera.operational:
        return False
    if not (camera.is_finite() and point.is_finite()):
        return False

    distance = distance_meters(camera.position, point)
    if distance > camera.range:
        return False

    # Also catches the same spot written twice, e.g. longitude 180 and -180.
    if distance < COINCIDENT_DISTANCE_M:
        return True

    bearing = bearing_degrees(camera.position, point)
    return angular_difference(bearing, camera.heading) <= camera.field_of_view / 2
