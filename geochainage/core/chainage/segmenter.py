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
Route Segmenter
===============

Splits a dense polyline into segments bounded by anchors, each carrying the
station range between consecutive anchors.

Rules:
    - Anchors are matched in the order given; each search starts at the
      previous match, so progress along the route is forward only.
    - An anchor that matches the current start point is skipped.
    - A segment with fewer than MIN_SEGMENT_POINTS dense points emits no
      segment, but its anchor still resets the running station and start
      index, so a chainage break one dense point ahead is kept.
    - Whatever follows the last anchor becomes a trailing segment, so the
      final station always lands on the route end.
    - With fewer than MIN_ANCHORS anchors the whole route is one segment.
"""

import math
from typing import List, Optional, Sequence

from ..constants import MIN_ANCHORS, MIN_SEGMENT_POINTS
from ..geodesy import polyline_length
from ..logging_config import get_logger
from ..model import Anchor, LngLat, Segment, as_points, to_array
from .locator import find_nearest

logger = get_logger(__name__)


def route_end_station(
    start_station: int,
    route_length: float,
    direction: bool = False
) -> int:
    """Station at the end of a route that starts at ``start_station``.

    Chainage runs down only when reverse traversal is requested and the
    start is large enough to count down the whole route.

    Args:
        start_station: Station at the route start (m)
        route_length: Geodesic route length (m)
        direction: True to request descending chainage

    Returns:
        start_station minus or plus the route length rounded up
    """
    span = int(math.ceil(route_length))
    if direction and start_station > route_length:
        return start_station - span
    return start_station + span


def split_segments(
    dense: Sequence[LngLat],
    anchors: Optional[Sequence[Anchor]] = None,
    start_station: int = 0,
    direction: bool = False,
    total_length: Optional[float] = None
) -> List[Segment]:
    """Partition a dense polyline into anchor-bounded segments.

    Args:
        dense: Dense points from densify()
        anchors: Known stations in route order
        start_station: Station at the route start (m)
        direction: True to request descending chainage when unanchored
        total_length: Route length (m), computed from ``dense`` if omitted

    Returns:
        Segments in route order; empty if ``dense`` has fewer than 2 points
    """
    dense = as_points(dense)
    if len(dense) < 2:
        return []

    if total_length is None:
        total_length = polyline_length(dense)

    if anchors is None or len(anchors) < MIN_ANCHORS:
        end_station = route_end_station(start_station, total_length, direction)
        return [Segment(dense, start_station, end_station)]

    coords = to_array(dense)
    segments: List[Segment] = []
    running_station = start_station
    start_index = 0

    for i, anchor in enumerate(anchors):
        end_index = find_nearest(coords, anchor.point, start_index)
        if end_index < 0 or end_index == start_index:
            logger.debug("Anchor %d (%s) matches the segment start, skipped", i, anchor.station)
            continue

        points = dense[start_index:end_index + 1]
        if len(points) < MIN_SEGMENT_POINTS:
            logger.debug(
                "Anchor %d (%s) bounds only %d points, no segment emitted",
                i, anchor.station, len(points)
            )
        else:
            segments.append(Segment(points, running_station, anchor.station))
        running_station = anchor.station
        start_index = end_index

    if start_index < len(dense) - 1:
        tail = dense[start_index:]
        tail_length = polyline_length(tail)
        if segments:
            span = int(math.ceil(tail_length))
            end_station = running_station + span if segments[0].is_increment else running_station - span
        else:
            end_station = route_end_station(running_station, tail_length, direction)
        segments.append(Segment(tail, running_station, end_station))

    logger.debug("Split %d dense points into %d segments", len(dense), len(segments))
    return segments


__all__ = ["route_end_station", "split_segments"]
