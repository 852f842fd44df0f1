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
Road Proximity Module
=====================

Point-to-route measurements used to check vehicle positions against a road
centreline: perpendicular distance to a polyline, off-route tests, GPS
coverage of a road, and chainage lookup for an arbitrary point.

Perpendicular feet are computed in degree space (the line through two
vertices as AX + BY + C = 0) and measured back in metres with distance().

Sentinels:
    foot_of_perpendicular()     -> None when the two vertices coincide
    point_to_polyline_distance() -> -1.0 when a foot cannot be computed
                                    or the polyline is empty
    calculate_coverage()        -> -1.0 for an invalid road or empty track
    locate_station()            -> (None, None) for fewer than two points
"""

from typing import Optional, Sequence, Tuple, TypeVar

from .constants import (
    DEFAULT_COVERAGE_THRESHOLD,
    DISTANCE_SENTINEL,
    FOOT_DEGENERATE_EPS,
    FOOT_ON_LINE_EPS,
)
from .geodesy import distance
from .logging_config import get_logger
from .model import LngLat, PointLike, as_point, as_points

logger = get_logger(__name__)

# Tolerance when testing a foot against a segment's bounding box (degrees)
EXTENT_EPS = 1e-9

T = TypeVar("T")


def foot_of_perpendicular(
    point: PointLike,
    start: PointLike,
    end: PointLike
) -> Optional[LngLat]:
    """Project a point onto the infinite line through start and end.

    Args:
        point: Point to project
        start: First point on the line
        end: Second point on the line

    Returns:
        Foot of the perpendicular; the point itself if it already lies on
        the line; None if start and end (nearly) coincide
    """
    p = as_point(point)
    s = as_point(start)
    e = as_point(end)

    a = e.lat - s.lat
    b = s.lng - e.lng
    c = e.lng * s.lat - s.lng * e.lat

    norm = a * a + b * b
    if norm < FOOT_DEGENERATE_EPS:
        return None
    if abs(a * p.lng + b * p.lat + c) < FOOT_ON_LINE_EPS:
        return p

    x = (b * b * p.lng - a * b * p.lat - a * c) / norm
    y = (-a * b * p.lng + a * a * p.lat - b * c) / norm
    return LngLat(x, y)


def _within_extent(foot: LngLat, s: LngLat, e: LngLat) -> bool:
    return (
        min(s.lng, e.lng) - EXTENT_EPS <= foot.lng <= max(s.lng, e.lng) + EXTENT_EPS
        and min(s.lat, e.lat) - EXTENT_EPS <= foot.lat <= max(s.lat, e.lat) + EXTENT_EPS
    )


def point_to_polyline_distance(point: PointLike, polyline: Sequence[PointLike]) -> float:
    """Shortest distance from a point to a polyline.

    For each segment the perpendicular foot is used when it falls inside
    the segment's extent, otherwise the nearer of the two endpoints.
    Coincident vertices are skipped; if nothing remains, the nearer of the
    first and last vertex is used.

    Args:
        point: Point to measure from
        polyline: Route vertices

    Returns:
        Distance in metres, or -1.0 if the geometry cannot be resolved
    """
    p = as_point(point)
    pts = as_points(polyline)
    if not pts:
        logger.debug("Empty polyline, distance unresolved")
        return DISTANCE_SENTINEL

    min_distance = None
    for s, e in zip(pts, pts[1:]):
        if s == e:
            continue

        foot = foot_of_perpendicular(p, s, e)
        if foot is None:
            logger.debug("Degenerate segment %s -> %s", s, e)
            return DISTANCE_SENTINEL

        if _within_extent(foot, s, e):
            d = distance(p, foot)
        else:
            d = min(distance(p, s), distance(p, e))

        if min_distance is None or d < min_distance:
            min_distance = d

    if min_distance is None:
        return min(distance(p, pts[0]), distance(p, pts[-1]))
    return min_distance


def is_off_route(point: PointLike, route: Sequence[PointLike], allow_range: float) -> bool:
    """True if the point is farther than ``allow_range`` metres from the route.

    An unresolvable distance is reported as on-route (False).
    """
    d = point_to_polyline_distance(point, route)
    if d < 0:
        logger.debug("Off-route test unresolved for %s", as_point(point))
        return False
    return d > allow_range


def calculate_coverage(
    road: Sequence[PointLike],
    track: Sequence[PointLike],
    threshold: float = DEFAULT_COVERAGE_THRESHOLD
) -> float:
    """Fraction of road vertices that a GPS track passed within ``threshold``.

    Args:
        road: Road centreline vertices (at least two)
        track: Recorded GPS positions in travel order
        threshold: Match distance in metres

    Returns:
        Coverage ratio in [0, 1], or -1.0 for invalid input
    """
    if road is None or len(road) < 2 or track is None or len(track) == 0:
        return DISTANCE_SENTINEL

    track_points = as_points(track)
    covered = 0
    for vertex in road:
        d = point_to_polyline_distance(vertex, track_points)
        if 0 <= d <= threshold:
            covered += 1
    return covered / len(road)


def locate_station(
    point: PointLike,
    tagged: Sequence[T]
) -> Tuple[Optional[T], Optional[int]]:
    """Estimate the chainage of an arbitrary point from tagged route points.

    The nearest tagged point gives the base station; the second nearest
    tells which way chainage runs, and the distance to the nearest point is
    added or subtracted accordingly.

    Args:
        point: Position to locate
        tagged: Anchors or stations (anything with lng, lat and station)

    Returns:
        Tuple of (nearest tagged point, estimated station), or
        (None, None) if fewer than two tagged points are given
    """
    if tagged is None or len(tagged) < 2:
        return None, None

    p = as_point(point)
    ranked = sorted(((distance(p, item), item) for item in tagged), key=lambda pair: pair[0])
    (d_nearest, nearest), (_, second) = ranked[0], ranked[1]

    if nearest.station > second.station:
        estimate = nearest.station - d_nearest
    else:
        estimate = nearest.station + d_nearest
    return nearest, int(round(estimate))


__all__ = [
    "foot_of_perpendicular",
    "point_to_polyline_distance",
    "is_off_route",
    "calculate_coverage",
    "locate_station",
]
