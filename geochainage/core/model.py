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
Coordinate and Chainage Data Model
==================================

Value types shared by every geodesy and chainage function.

LngLat is the one canonical point type. Callers may pass plain
``(lng, lat)`` pairs, ``[lng, lat]`` lists, or any object with ``lng`` and
``lat`` attributes; ``as_point`` converts them at the module boundary.

Example:
    >>> anchor = Anchor(LngLat(116.4174, 39.9142), station=1500)
    >>> anchor.lng
    116.4174
    >>> Station(as_point((116.4074, 39.9042)), 0).label
    'K0+000'
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from .station_formatting import station_to_str


@dataclass(frozen=True)
class LngLat:
    """Geographic coordinate in degrees.

    Attributes:
        lng: Longitude (degrees, -180 to 180)
        lat: Latitude (degrees, -90 to 90)
    """

    lng: float
    lat: float

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to (lng, lat) tuple."""
        return (self.lng, self.lat)

    def __repr__(self):
        return f"LngLat({self.lng!r}, {self.lat!r})"

    def __str__(self):
        return f"{self.lng},{self.lat}"


PointLike = Union[LngLat, Sequence[float], Any]


def as_point(value: PointLike) -> LngLat:
    """Convert a point-like value to LngLat.

    Args:
        value: LngLat, (lng, lat) sequence, or object with lng/lat attributes

    Returns:
        LngLat instance (the same object if already a LngLat)

    Raises:
        TypeError: If the value has no recognisable coordinates
    """
    if isinstance(value, LngLat):
        return value
    if hasattr(value, "lng") and hasattr(value, "lat"):
        return LngLat(float(value.lng), float(value.lat))
    if isinstance(value, (list, tuple, np.ndarray)) and len(value) >= 2:
        return LngLat(float(value[0]), float(value[1]))
    raise TypeError(f"Cannot interpret {value!r} as a (lng, lat) point")


def as_points(values: Iterable[PointLike]) -> List[LngLat]:
    """Convert a sequence of point-likes to a list of LngLat."""
    return [as_point(v) for v in values]


def to_array(points: Sequence[LngLat]) -> np.ndarray:
    """Stack points into an (n, 2) float array of [lng, lat] rows."""
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.lng, p.lat) for p in points], dtype=float)


@dataclass(frozen=True)
class Anchor:
    """Known chainage at a real-world location.

    Anchors pin station values to surveyed points along a route. They are
    supplied in route order and are matched to the nearest dense point, so
    they do not need to lie exactly on the polyline.

    Attributes:
        point: Anchor location
        station: Target station value (m)
        payload: Optional caller data carried along unchanged
    """

    point: LngLat
    station: int
    payload: Any = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.point, LngLat):
            object.__setattr__(self, "point", as_point(self.point))

    @property
    def lng(self) -> float:
        return self.point.lng

    @property
    def lat(self) -> float:
        return self.point.lat


def as_anchor(value: Any) -> Anchor:
    """Convert an anchor-like value to Anchor.

    Accepts an Anchor, any object with lng, lat and station attributes
    (e.g. a Station), or a (lng, lat, station[, payload]) sequence.
    """
    if isinstance(value, Anchor):
        return value
    if hasattr(value, "station"):
        return Anchor(as_point(value), int(value.station), getattr(value, "payload", None))
    if isinstance(value, (list, tuple, np.ndarray)) and len(value) >= 3:
        payload = value[3] if len(value) > 3 else None
        return Anchor(LngLat(float(value[0]), float(value[1])), int(value[2]), payload)
    raise TypeError(f"Cannot interpret {value!r} as an anchor")


@dataclass(frozen=True)
class Station:
    """Chainage marker emitted by the station emitter.

    Attributes:
        point: Marker location
        station: Offset along the route (m)
    """

    point: LngLat
    station: int

    @property
    def lng(self) -> float:
        return self.point.lng

    @property
    def lat(self) -> float:
        return self.point.lat

    @property
    def label(self) -> str:
        """Station in K<km>+<m> notation."""
        return station_to_str(self.station)

    def __repr__(self):
        return f"Station({self.label}, {self.point.lng:.6f}, {self.point.lat:.6f})"


@dataclass(frozen=True)
class Segment:
    """Anchor-bounded slice of the dense polyline.

    Attributes:
        points: Dense points from the start boundary to the end boundary
        start_station: Station at the first point (m)
        end_station: Station at the last point (m)

    Properties:
        length: Signed station span; negative means descending chainage
    """

    points: List[LngLat]
    start_station: int
    end_station: int

    @property
    def length(self) -> int:
        return self.end_station - self.start_station

    @property
    def is_increment(self) -> bool:
        return self.length > 0

    @property
    def start_point(self) -> LngLat:
        return self.points[0]

    @property
    def end_point(self) -> LngLat:
        return self.points[-1]


__all__ = [
    "LngLat",
    "PointLike",
    "as_point",
    "as_points",
    "to_array",
    "Anchor",
    "as_anchor",
    "Station",
    "Segment",
]
