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
Anchor Locator
==============

Finds the dense point nearest to an anchor, searching forward only from a
start index so an anchor never matches a stretch of route already consumed
by an earlier anchor.
"""

from typing import Sequence, Union

import numpy as np

from ..geodesy import distance_array
from ..logging_config import get_logger
from ..model import LngLat, PointLike, as_points, to_array

logger = get_logger(__name__)


def find_nearest(
    dense: Union[Sequence[LngLat], np.ndarray],
    point: PointLike,
    start: int = 0
) -> int:
    """Index of the dense point nearest to ``point`` at or after ``start``.

    A full linear scan; ties go to the first minimum in scan order.

    Args:
        dense: Dense points, or an (n, 2) [lng, lat] array of them
        point: Anchor location
        start: First index eligible for matching

    Returns:
        Index into ``dense``, or -1 if no point exists at or after ``start``
    """
    coords = dense if isinstance(dense, np.ndarray) else to_array(as_points(dense))
    start = max(start, 0)
    if start >= len(coords):
        logger.debug("Search start %d beyond %d dense points", start, len(coords))
        return -1

    distances = distance_array(coords[start:], point)
    return start + int(np.argmin(distances))


__all__ = ["find_nearest"]
