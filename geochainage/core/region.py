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
Region Module
=============

Polygon tests for geofencing: containment, distance to a boundary, and
buffering a route into a corridor polygon.
"""

from typing import List, Sequence

from .constants import DEFAULT_REGION_RANGE, DISTANCE_SENTINEL
from .geodesy import azimuth, destination
from .logging_config import get_logger
from .model import LngLat, PointLike, as_point, as_points
from .road import point_to_polyline_distance

logger = get_logger(__name__)


def is_in_polygon(point: PointLike, ring: Sequence[PointLike]) -> bool:
    """Even-odd ray casting containment test.

    The ring is closed implicitly (last vertex connects to the first).

    Args:
        point: Point to test
        ring: Polygon vertices in order (either winding)

    Returns:
        True if the point is inside; False if outside or the ring has
        fewer than 3 vertices
    """
    if ring is None or len(ring) < 3:
        return False

    p = as_point(point)
    vertices = as_points(ring)
    crossings = 0
    for i, start in enumerate(vertices):
        end = vertices[(i + 1) % len(vertices)]

        if (start.lat <= p.lat < end.lat) or (end.lat <= p.lat < start.lat):
            # Horizontal edges never reach here: the half-open test excludes them
            lng_cross = start.lng - (start.lng - end.lng) * (start.lat - p.lat) / (start.lat - end.lat)
            if lng_cross < p.lng:
                crossings += 1

    return crossings % 2 == 1


def point_to_polygon_distance(point: PointLike, ring: Sequence[PointLike]) -> float:
    """Shortest distance from a point to a polygon boundary.

    Measured to the boundary whether the point is inside or outside; use
    is_in_polygon() to tell the two apart.

    Returns:
        Distance in metres, or -1.0 for an empty ring or unresolvable edge
    """
    vertices = as_points(ring) if ring is not None else []
    if not vertices:
        return DISTANCE_SENTINEL
    closed = vertices + [vertices[0]] if vertices[0] != vertices[-1] else vertices
    return point_to_polyline_distance(point, closed)


def line_to_region(
    polyline: Sequence[PointLike],
    range_m: float = DEFAULT_REGION_RANGE
) -> List[LngLat]:
    """Buffer a polyline into a closed corridor polygon.

    Each vertex is offset ``range_m`` metres to the left and right of the
    segment bearing; the left side runs forward and the right side runs
    back, so the result is a single ring.

    Args:
        polyline: Route vertices
        range_m: Half-width of the corridor (m)

    Returns:
        Ring vertices; empty if the polyline has no non-zero segment
    """
    pts = as_points(polyline)
    pairs = [(s, e) for s, e in zip(pts, pts[1:]) if s != e]
    if not pairs:
        logger.debug("No usable segment to buffer")
        return []

    left: List[LngLat] = []
    right: List[LngLat] = []
    for s, e in pairs:
        bearing = azimuth(s, e)
        left.append(destination(s, bearing - 90, range_m))
        right.append(destination(s, bearing + 90, range_m))

    s, e = pairs[-1]
    bearing = azimuth(s, e)
    left.append(destination(e, bearing - 90, range_m))
    right.append(destination(e, bearing + 90, range_m))

    return left + right[::-1]


__all__ = [
    "is_in_polygon",
    "point_to_polygon_distance",
    "line_to_region",
]
