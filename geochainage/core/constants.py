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
Geodesy and Chainage Constants
==============================

Earth model constants used by the distance, bearing and datum functions,
and the defaults used by the chainage pipeline.

Earth models:
    distance()     - haversine on a sphere, expressed with the WGS84
                     equatorial diameter
    destination()  - spherical forward problem with the mean earth radius
    GCJ02 offsets  - Krasovsky 1940 ellipsoid
"""

import math

PI = math.pi
PI180 = PI / 180.0

# Haversine distance uses the earth diameter directly (2 * 6378137 m)
EARTH_DIAMETER = 12756274.0

# Mean earth radius for the destination-point formula (m)
EARTH_RADIUS = 6371000.0

# Krasovsky 1940 ellipsoid, used by the GCJ02 offset
KRASOVSKY_A = 6378245.0
KRASOVSKY_EE = 0.00669342162296594323

# BD09 rotation constant and fixed offsets
BD_X_PI = PI * 3000.0 / 180.0
BD_DLNG = 0.0065
BD_DLAT = 0.006

# Rough bounding box of mainland China (degrees)
CHINA_LNG_RANGE = (72.004, 137.8347)
CHINA_LAT_RANGE = (0.8293, 55.8271)

# Resampling: at most one dense point per metre
MAX_RESAMPLE_INTERVAL = 1.0
RESAMPLE_INTERVAL_DECIMALS = 4
RESAMPLE_DISTANCE_DECIMALS = 3

# Segments shorter than this many dense points are dropped
MIN_SEGMENT_POINTS = 3

# Anchors needed before the route is split into segments
MIN_ANCHORS = 2

# Returned by station_to_num() for malformed input
DEFAULT_STATION_SENTINEL = -1

# Returned by station_to_str() for NaN or infinite values; parses back to
# DEFAULT_STATION_SENTINEL
INVALID_STATION_TEXT = "K--"

# Returned by distance functions when the geometry cannot be resolved
DISTANCE_SENTINEL = -1.0

# Perpendicular foot tolerances (squared degrees / degrees)
FOOT_DEGENERATE_EPS = 1e-13
FOOT_ON_LINE_EPS = 1e-13

DEFAULT_COVERAGE_THRESHOLD = 10.0
DEFAULT_REGION_RANGE = 10.0

__all__ = [
    "PI",
    "PI180",
    "EARTH_DIAMETER",
    "EARTH_RADIUS",
    "KRASOVSKY_A",
    "KRASOVSKY_EE",
    "BD_X_PI",
    "BD_DLNG",
    "BD_DLAT",
    "CHINA_LNG_RANGE",
    "CHINA_LAT_RANGE",
    "MAX_RESAMPLE_INTERVAL",
    "RESAMPLE_INTERVAL_DECIMALS",
    "RESAMPLE_DISTANCE_DECIMALS",
    "MIN_SEGMENT_POINTS",
    "MIN_ANCHORS",
    "DEFAULT_STATION_SENTINEL",
    "INVALID_STATION_TEXT",
    "DISTANCE_SENTINEL",
    "FOOT_DEGENERATE_EPS",
    "FOOT_ON_LINE_EPS",
    "DEFAULT_COVERAGE_THRESHOLD",
    "DEFAULT_REGION_RANGE",
]
