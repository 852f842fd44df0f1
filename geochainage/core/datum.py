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
Datum Conversion Module
=======================

Conversions between the three coordinate systems found in Chinese road data:

- WGS84: GPS receivers, international maps
- GCJ02: the state-mandated offset datum used by most Chinese web maps
- BD09:  Baidu Maps, a further offset of GCJ02

GCJ02 -> WGS84 is the usual single-step approximation (error of a few
metres at most); there is no closed-form inverse.
"""

import math
from typing import Tuple

from .constants import (
    BD_DLAT,
    BD_DLNG,
    BD_X_PI,
    CHINA_LAT_RANGE,
    CHINA_LNG_RANGE,
    KRASOVSKY_A,
    KRASOVSKY_EE,
    PI,
)
from .model import LngLat, PointLike, as_point


def out_of_china(point: PointLike) -> bool:
    """Rough test whether a point lies outside mainland China's bounding box.

    GCJ02 offsets are only defined inside China; callers can use this to
    leave foreign coordinates untouched.
    """
    p = as_point(point)
    lng_min, lng_max = CHINA_LNG_RANGE
    lat_min, lat_max = CHINA_LAT_RANGE
    return not (lng_min <= p.lng <= lng_max and lat_min <= p.lat <= lat_max)


def _offset_lat(x: float, y: float) -> float:
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * PI) + 40.0 * math.sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * PI) + 320.0 * math.sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def _offset_lng(x: float, y: float) -> float:
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * PI) + 40.0 * math.sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * PI) + 300.0 * math.sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret


def _gcj02_delta(lng: float, lat: float) -> Tuple[float, float]:
    """GCJ02 offset (d_lng, d_lat) in degrees at a WGS84 position."""
    d_lat = _offset_lat(lng - 105.0, lat - 35.0)
    d_lng = _offset_lng(lng - 105.0, lat - 35.0)
    rad_lat = lat / 180.0 * PI
    magic = 1 - KRASOVSKY_EE * math.sin(rad_lat) ** 2
    sqrt_magic = math.sqrt(magic)
    d_lat = (d_lat * 180.0) / ((KRASOVSKY_A * (1 - KRASOVSKY_EE)) / (magic * sqrt_magic) * PI)
    d_lng = (d_lng * 180.0) / (KRASOVSKY_A / sqrt_magic * math.cos(rad_lat) * PI)
    return d_lng, d_lat


def wgs84_to_gcj02(point: PointLike) -> LngLat:
    """WGS84 -> GCJ02."""
    p = as_point(point)
    d_lng, d_lat = _gcj02_delta(p.lng, p.lat)
    return LngLat(p.lng + d_lng, p.lat + d_lat)


def gcj02_to_wgs84(point: PointLike) -> LngLat:
    """GCJ02 -> WGS84 (single-step approximation)."""
    p = as_point(point)
    shifted = wgs84_to_gcj02(p)
    return LngLat(p.lng * 2 - shifted.lng, p.lat * 2 - shifted.lat)


def gcj02_to_bd09(point: PointLike) -> LngLat:
    """GCJ02 -> BD09."""
    p = as_point(point)
    x, y = p.lng, p.lat
    z = math.sqrt(x * x + y * y) + 0.00002 * math.sin(y * BD_X_PI)
    theta = math.atan2(y, x) + 0.000003 * math.cos(x * BD_X_PI)
    return LngLat(z * math.cos(theta) + BD_DLNG, z * math.sin(theta) + BD_DLAT)


def bd09_to_gcj02(point: PointLike) -> LngLat:
    """BD09 -> GCJ02."""
    p = as_point(point)
    x, y = p.lng - BD_DLNG, p.lat - BD_DLAT
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * BD_X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * BD_X_PI)
    return LngLat(z * math.cos(theta), z * math.sin(theta))


def bd09_to_wgs84(point: PointLike) -> LngLat:
    """BD09 -> WGS84."""
    return gcj02_to_wgs84(bd09_to_gcj02(point))


def wgs84_to_bd09(point: PointLike) -> LngLat:
    """WGS84 -> BD09."""
    return gcj02_to_bd09(wgs84_to_gcj02(point))


__all__ = [
    "out_of_china",
    "wgs84_to_gcj02",
    "gcj02_to_wgs84",
    "gcj02_to_bd09",
    "bd09_to_gcj02",
    "bd09_to_wgs84",
    "wgs84_to_bd09",
]
