# ==============================================================================
# geochainage - Road Chainage and Geodesy Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Geodesy Module
==============

Distance, bearing and forward-position functions on a spherical earth,
plus WGS84 ellipsoidal alternatives backed by pyproj.

Sentinels:
    distance() returns 0.0 when the haversine term cannot be evaluated
    (for example rounding pushes it past 1 for near-antipodal points).
"""

import math
from typing import Sequence

import numpy as np
from pyproj import Geod

from .constants import EARTH_DIAMETER, EARTH_RADIUS, PI180
from .logging_config import get_logger
from .model import LngLat, PointLike, as_point

logger = get_logger(__name__)

_WGS84_GEOD = Geod(ellps="WGS84")


def distance(start: PointLike, end: PointLike) -> float:
    """Surface distance between two points (haversine).

    Args:
        start: First point
        end: Second point

    Returns:
        Distance in metres; 0.0 if the formula fails numerically
    """
    a = as_point(start)
    b = as_point(end)
    try:
        c = math.sin((b.lat - a.lat) * PI180 / 2)
        d = math.sin((b.lng - a.lng) * PI180 / 2)
        h = c * c + d * d * math.cos(a.lat * PI180) * math.cos(b.lat * PI180)
        result = EARTH_DIAMETER * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    except (ValueError, OverflowError) as e:
        logger.debug("Distance %s -> %s failed: %s", a, b, e)
        return 0.0

    if math.isnan(result):
        logger.debug("Distance %s -> %s is not a number", a, b)
        return 0.0
    return result


def distance_array(points: np.ndarray, target: PointLike) -> np.ndarray:
    """Vectorised distance() from every row of ``points`` to ``target``.

    Args:
        points: (n, 2) array of [lng, lat] rows
        target: Point to measure to

    Returns:
        (n,) array of distances in metres, 0.0 where the formula fails
    """
    t = as_point(target)
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    lng = points[:, 0]
    lat = points[:, 1]

    with np.errstate(invalid="ignore"):
        c = np.sin((lat - t.lat) * PI180 / 2)
        d = np.sin((lng - t.lng) * PI180 / 2)
        h = c * c + d * d * math.cos(t.lat * PI180) * np.cos(lat * PI180)
        result = EARTH_DIAMETER * np.arctan2(np.sqrt(h), np.sqrt(1 - h))

    return np.where(np.isnan(result), 0.0, result)


def polyline_length(points: Sequence[PointLike]) -> float:
    """Total length of a polyline.

    Returns:
        Sum of segment distances in metres; 0.0 for fewer than two points
    """
    pts = [as_point(p) for p in points]
    if len(pts) < 2:
        return 0.0
    return sum(distance(a, b) for a, b in zip(pts, pts[1:]))


def azimuth(start: PointLike, end: PointLike) -> float:
    """Initial great-circle bearing from start to end.

    Returns:
        Bearing in degrees, clockwise from north, in [0, 360)
    """
    a = as_point(start)
    b = as_point(end)
    lng1, lat1 = a.lng * PI180, a.lat * PI180
    lng2, lat2 = b.lng * PI180, b.lat * PI180

    y = math.sin(lng2 - lng1) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lng2 - lng1)
    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360.0) % 360.0


def destination(start: PointLike, bearing: float, meters: float) -> LngLat:
    """Point reached by travelling ``meters`` from ``start`` along ``bearing``.

    Args:
        start: Starting point
        bearing: Bearing in degrees, clockwise from north
        meters: Distance to travel (m)

    Returns:
        Destination point
    """
    p = as_point(start)
    lng = p.lng * PI180
    lat = p.lat * PI180
    brng = bearing * PI180
    delta = meters / EARTH_RADIUS

    lat2 = math.asin(
        math.sin(lat) * math.cos(delta) + math.cos(lat) * math.sin(delta) * math.cos(brng)
    )
    lng2 = lng + math.atan2(
        math.sin(brng) * math.sin(delta) * math.cos(lat),
        math.cos(delta) - math.sin(lat) * math.sin(lat2)
    )
    return LngLat(math.degrees(lng2), math.degrees(lat2))


def ellipsoidal_distance(start: PointLike, end: PointLike) -> float:
    """Geodesic distance on the WGS84 ellipsoid (Karney, via pyproj).

    Returns:
        Distance in metres
    """
    a = as_point(start)
    b = as_point(end)
    _, _, dist = _WGS84_GEOD.inv(a.lng, a.lat, b.lng, b.lat)
    return float(dist)


def ellipsoidal_length(points: Sequence[PointLike]) -> float:
    """Length of a polyline on the WGS84 ellipsoid.

    Returns:
        Length in metres; 0.0 for fewer than two points
    """
    pts = [as_point(p) for p in points]
    if len(pts) < 2:
        return 0.0
    return float(_WGS84_GEOD.line_length([p.lng for p in pts], [p.lat for p in pts]))


__all__ = [
    "distance",
    "distance_array",
    "polyline_length",
    "azimuth",
    "destination",
    "ellipsoidal_distance",
    "ellipsoidal_length",
]
