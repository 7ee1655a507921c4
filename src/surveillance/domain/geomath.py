"""
Spherical-earth geodesy helpers. All angles are in degrees at the API
boundary and converted to radians internally.
"""
import math

from .entities import GeoPoint

EARTH_RADIUS_M = 6_371_000.0

def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """
    Great-circle distance between two points using the haversine formula.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)

    h = (math.sin(d_lat / 2) ** 2
         + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c

def bearing_degrees(origin: GeoPoint, target: GeoPoint) -> float:
    """
    Initial compass bearing from origin to target, in [0, 360).

    When origin == target both atan2 components are zero and the result is 0.
    """
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lon = math.radians(target.longitude - origin.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = (math.cos(lat1) * math.sin(lat2)
         - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon))
    return (math.degrees(math.atan2(y, x)) + 360) % 360

def destination_point(origin: GeoPoint, bearing: float, distance: float) -> GeoPoint:
    """
    Point reached by travelling `distance` meters from origin along the
    great circle with the given initial bearing.
    """
    delta = distance / EARTH_RADIUS_M
    theta = math.radians(bearing)
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)

    lat2 = math.asin(math.sin(lat1) * math.cos(delta)
                     + math.cos(lat1) * math.sin(delta) * math.cos(theta))
    lon2 = lon1 + math.atan2(math.sin(theta) * math.sin(delta) * math.cos(lat1),
                             math.cos(delta) - math.sin(lat1) * math.sin(lat2))

    # Normalize longitude to [-180, 180)
    lon2 = (math.degrees(lon2) + 540) % 360 - 180
    return GeoPoint(latitude=math.degrees(lat2), longitude=lon2)

def angular_difference(a: float, b: float) -> float:
    """Shortest angle between two compass directions, in [0, 180]."""
    diff = abs(a - b) % 360
    if diff > 180:
        diff = 360 - diff
    return diff
