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
Station Emitter
===============

Walks segments point by point and emits chainage markers.

Per segment the station span is divided into span / interval stations and
the segment's geodesic length is shared out evenly between them. Walking the
dense points, a station is emitted each time the accumulated distance
reaches that share. The segment end is always emitted with its declared
station, which keeps anchors exact at the cost of an uneven last gap.

Chainage direction is decided once, from the first segment, and applied to
every segment.
"""

from typing import List, Sequence

from ..geodesy import distance, polyline_length
from ..logging_config import get_logger
from ..model import Segment, Station

logger = get_logger(__name__)


def walk_segment(segment: Segment, interval: int, is_increment: bool) -> List[Station]:
    """Intermediate stations of one segment (end station excluded).

    Args:
        segment: Segment to walk
        interval: Station spacing (m)
        is_increment: True for ascending chainage

    Returns:
        Stations in traversal order; empty for a zero span or a
        non-positive interval
    """
    span = abs(segment.length)
    if interval <= 0 or span == 0:
        return []

    segment_length = polyline_length(segment.points)
    if segment_length <= 0:
        return []

    station_count = span / interval
    distance_per_station = segment_length / station_count
    step = interval if is_increment else -interval

    stations: List[Station] = []
    current_station = segment.start_station
    accumulated = 0.0
    for previous, current in zip(segment.points, segment.points[1:]):
        accumulated += distance(previous, current)
        if accumulated >= distance_per_station:
            accumulated = 0.0
            current_station += step
            stations.append(Station(current, current_station))

    return stations


def emit_stations(segments: Sequence[Segment], interval: int) -> List[Station]:
    """Emit the full station list for a route.

    Args:
        segments: Segments in route order
        interval: Station spacing (m)

    Returns:
        The route start station, then each segment's intermediate stations
        followed by its end station; empty if there are no segments
    """
    if not segments:
        return []

    first = segments[0]
    is_increment = first.is_increment
    stations = [Station(first.start_point, first.start_station)]

    for index, segment in enumerate(segments):
        if segment.length and segment.is_increment != is_increment:
            logger.warning(
                "Segment %d runs %s but the route runs %s; stations follow the route",
                index,
                "up" if segment.is_increment else "down",
                "up" if is_increment else "down",
            )
        stations.extend(walk_segment(segment, interval, is_increment))
        stations.append(Station(segment.end_point, segment.end_station))

    return stations


__all__ = ["walk_segment", "emit_stations"]
