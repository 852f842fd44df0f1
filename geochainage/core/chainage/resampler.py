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
Polyline Resampler
==================

Densifies a sparse polyline into a near-uniform point sequence so that
chainage can be interpolated by walking point to point.

Each input segment is walked by repeatedly taking the bearing from the last
sample to the segment end and stepping one interval along it. Every input
vertex is kept verbatim, so the dense sequence starts and ends exactly on
the input.

Resource note:
    With the default interval the dense sequence holds roughly one point
    per metre of route; memory and time grow linearly with route length.
"""

from typing import List, Optional, Sequence

from ..constants import (
    MAX_RESAMPLE_INTERVAL,
    RESAMPLE_DISTANCE_DECIMALS,
    RESAMPLE_INTERVAL_DECIMALS,
)
from ..geodesy import azimuth, destination, distance, polyline_length
from ..logging_config import get_logger
from ..model import LngLat, PointLike, as_points

logger = get_logger(__name__)


def resample_interval(total_length: float) -> float:
    """Dense point spacing for a route of the given length.

    One third of the route, capped at MAX_RESAMPLE_INTERVAL; short routes
    are rounded to 4 decimals.

    Args:
        total_length: Route length (m)

    Returns:
        Spacing in metres

    Example:
        >>> resample_interval(4200.0)
        1.0
        >>> resample_interval(0.5)
        0.1667
    """
    interval = total_length / 3
    if interval > MAX_RESAMPLE_INTERVAL:
        return MAX_RESAMPLE_INTERVAL
    return round(interval, RESAMPLE_INTERVAL_DECIMALS)


def _sample_segment(
    start: LngLat,
    end: LngLat,
    interval: float,
    dense: List[LngLat]
) -> None:
    """Append interval samples from start towards end (end itself excluded)."""
    segment_length = distance(start, end)
    travelled = 0.0
    last = start

    while travelled < segment_length:
        sampled = destination(last, azimuth(last, end), interval)
        if sampled != dense[-1]:
            dense.append(sampled)

        step = round(distance(last, sampled), RESAMPLE_DISTANCE_DECIMALS)
        if step <= 0:
            # Zero interval or a failed distance would never reach the end
            logger.debug("Sampling stalled between %s and %s", start, end)
            break
        travelled += step
        last = sampled


def densify(
    polyline: Sequence[PointLike],
    total_length: Optional[float] = None
) -> List[LngLat]:
    """Resample a polyline into a dense point sequence.

    Args:
        polyline: Route vertices; adjacent duplicates are skipped
        total_length: Precomputed route length (m), computed if omitted

    Returns:
        Dense points, starting and ending on the input's first and last
        vertices; empty for empty input
    """
    points = as_points(polyline)
    if not points:
        return []

    if total_length is None:
        total_length = polyline_length(points)
    interval = resample_interval(total_length)

    dense = [points[0]]
    previous = points[0]
    for current in points[1:]:
        if current == previous:
            continue
        if interval > 0:
            _sample_segment(previous, current, interval, dense)
        if dense[-1] != current:
            dense.append(current)
        previous = current

    logger.debug(
        "Densified %d vertices to %d points (interval %.4f m)",
        len(points), len(dense), interval
    )
    return dense


__all__ = ["resample_interval", "densify"]
