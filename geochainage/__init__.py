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
geochainage
Version 0.1.0

Chainage (linear referencing) and geodesy primitives for road location
data.

Example:
    >>> import geochainage
    >>> route = [(116.4074, 39.9042), (116.4374, 39.9342)]
    >>> [s.label for s in geochainage.generate_stations(route, 1000)][:2]
    ['K0+000', 'K1+000']
"""

from .core.logging_config import setup_logging, get_logger, enable_debug, disable_debug
from .core.model import Anchor, LngLat, Segment, Station
from .core.station_formatting import station_to_num, station_to_str
from .core.geodesy import azimuth, destination, distance, polyline_length
from .core.region import is_in_polygon
from .core.road import point_to_polyline_distance
from .core.chainage import generate_stations, generate_stations_strict

__version__ = "0.1.0"
