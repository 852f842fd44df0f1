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
Input Validation Module
=======================

Strict-mode counterparts to the lenient geometry functions.

The lenient functions return sentinels (-1, None, the caller's default, an
empty list) so batch jobs can skip bad records. Callers that prefer to fail
fast use the validators here, which return a list of issues, or the
``*_strict`` wrappers, which raise ValueError.
"""

import math
from typing import Any, List, Optional, Sequence

from .constants import MIN_ANCHORS
from .logging_config import get_logger
from .model import PointLike, as_anchor, as_point
from .road import point_to_polyline_distance
from .station_formatting import parse_station

logger = get_logger(__name__)


def validate_polyline(polyline: Optional[Sequence[PointLike]]) -> List[str]:
    """Check a polyline can carry chainage.

    Args:
        polyline: Route vertices

    Returns:
        List of issue strings (empty if valid)
    """
    if polyline is None or len(polyline) == 0:
        return ["Polyline is empty"]

    issues = []
    points = []
    for i, value in enumerate(polyline):
        try:
            p = as_point(value)
        except (TypeError, ValueError) as e:
            issues.append(f"Vertex {i}: {e}")
            continue
        if not (math.isfinite(p.lng) and math.isfinite(p.lat)):
            issues.append(f"Vertex {i}: non-finite coordinate {p}")
        elif not (-180.0 <= p.lng <= 180.0 and -90.0 <= p.lat <= 90.0):
            issues.append(f"Vertex {i}: coordinate out of range {p}")
        points.append(p)

    if len(set(points)) < 2:
        issues.append("Polyline needs at least 2 distinct points")

    return issues


def validate_anchors(anchors: Optional[Sequence[Any]]) -> List[str]:
    """Check an anchor list can split a route.

    An empty or missing list is valid (the route is not split). A single
    anchor is reported because the lenient pipeline silently ignores it.

    Returns:
        List of issue strings (empty if valid)
    """
    if anchors is None or len(anchors) == 0:
        return []

    issues = []
    if len(anchors) < MIN_ANCHORS:
        issues.append(f"Segmentation needs at least {MIN_ANCHORS} anchors, got {len(anchors)}")

    for i, value in enumerate(anchors):
        try:
            as_anchor(value)
        except (TypeError, ValueError) as e:
            issues.append(f"Anchor {i}: {e}")

    return issues


def point_to_polyline_distance_strict(point: PointLike, polyline: Sequence[PointLike]) -> float:
    """point_to_polyline_distance() that raises instead of returning -1.

    Raises:
        ValueError: If the polyline is empty or has a degenerate segment
    """
    d = point_to_polyline_distance(point, polyline)
    if d < 0:
        raise ValueError(f"Cannot resolve distance from {as_point(point)} to polyline")
    return d


def station_to_num_strict(station_str: str) -> int:
    """station_to_num() that raises instead of returning a default.

    Raises:
        ValueError: If the chainage text is malformed
    """
    return parse_station(station_str)


__all__ = [
    "validate_polyline",
    "validate_anchors",
    "point_to_polyline_distance_strict",
    "station_to_num_strict",
]
