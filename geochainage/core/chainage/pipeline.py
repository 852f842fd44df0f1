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
Chainage Pipeline
=================

Entry points that turn a route polyline into a list of chainage stations.

Example:
    >>> route = [(116.4074, 39.9042), (116.4374, 39.9342)]
    >>> stations = generate_stations(route, 100)
    >>> stations[0].label
    'K0+000'
"""

from typing import Any, List, Optional, Sequence

from ..geodesy import polyline_length
from ..logging_config import get_logger
from ..model import PointLike, Station, as_anchor, as_points
from ..validation import validate_anchors, validate_polyline
from .emitter import emit_stations
from .resampler import densify
from .segmenter import split_segments

logger = get_logger(__name__)


def generate_stations(
    polyline: Sequence[PointLike],
    interval: int,
    start_station: int = 0,
    anchors: Optional[Sequence[Any]] = None,
    direction: bool = False
) -> List[Station]:
    """Generate chainage stations along a route.

    Args:
        polyline: Route vertices as (lng, lat) pairs or LngLat
        interval: Station spacing (m)
        start_station: Station at the route start (m)
        anchors: Known stations in route order (Anchor, Station, or
            (lng, lat, station[, payload]) tuples); fewer than two are ignored
        direction: Request descending chainage for an unanchored route whose
            start station exceeds its length

    Returns:
        Stations in traversal order; empty if the route has fewer than two
        distinct points
    """
    points = as_points(polyline)
    total_length = polyline_length(points)
    dense = densify(points, total_length)
    if len(dense) < 2:
        logger.debug("Route has fewer than 2 distinct points, no stations")
        return []

    anchor_list = [as_anchor(a) for a in anchors] if anchors is not None else None
    segments = split_segments(dense, anchor_list, start_station, direction, total_length)
    stations = emit_stations(segments, interval)

    logger.debug(
        "Generated %d stations over %.1f m (%d dense points, %d segments)",
        len(stations), total_length, len(dense), len(segments)
    )
    return stations


def generate_stations_strict(
    polyline: Sequence[PointLike],
    interval: int,
    start_station: int = 0,
    anchors: Optional[Sequence[Any]] = None,
    direction: bool = False
) -> List[Station]:
    """generate_stations() that rejects input it would otherwise neutralise.

    Raises:
        ValueError: If the polyline, interval or anchors are unusable
    """
    issues = validate_polyline(polyline)
    if interval is None or interval <= 0:
        issues.append(f"Station interval must be positive, got {interval}")
    issues.extend(validate_anchors(anchors))

    if issues:
        logger.error("Chainage input rejected: %s", "; ".join(issues))
        raise ValueError("; ".join(issues))

    return generate_stations(polyline, interval, start_station, anchors, direction)


__all__ = ["generate_stations", "generate_stations_strict"]
