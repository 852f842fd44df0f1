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
geochainage Core Module

Pure-Python geometry for road location data. This module contains:
- Value types (model.py) and earth constants (constants.py)
- Spherical and ellipsoidal geodesy (geodesy.py)
- WGS84 / GCJ02 / BD09 datum conversion (datum.py)
- Polygon and route proximity tests (region.py, road.py)
- Chainage text formatting (station_formatting.py)
- The chainage pipeline (chainage/)
- Strict-mode validation (validation.py)
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from .model import Anchor, LngLat, Segment, Station, as_anchor, as_point, as_points
from .station_formatting import (
    normalize_station,
    parse_station,
    station_to_num,
    station_to_str,
    validate_station_input,
)
from .geodesy import (
    azimuth,
    destination,
    distance,
    distance_array,
    ellipsoidal_distance,
    ellipsoidal_length,
    polyline_length,
)
from .datum import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    out_of_china,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)
from .road import (
    calculate_coverage,
    foot_of_perpendicular,
    is_off_route,
    locate_station,
    point_to_polyline_distance,
)
from .region import is_in_polygon, line_to_region, point_to_polygon_distance
from .validation import (
    point_to_polyline_distance_strict,
    station_to_num_strict,
    validate_anchors,
    validate_polyline,
)
from .chainage import densify, generate_stations, generate_stations_strict
