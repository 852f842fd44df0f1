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
Chainage Package
================

Linear referencing along road polylines.

This package provides:
- Polyline densification (resampler)
- Anchor matching against the dense route (locator)
- Anchor-bounded segmentation with station ranges (segmenter)
- Station marker emission (emitter)
- The generate_stations() entry point (pipeline)

Example:
    >>> from geochainage.core.chainage import generate_stations
    >>> stations = generate_stations([(116.4074, 39.9042), (116.4374, 39.9342)], 100)
    >>> stations[0].label
    'K0+000'
"""

from .resampler import densify, resample_interval
from .locator import find_nearest
from .segmenter import route_end_station, split_segments
from .emitter import emit_stations, walk_segment
from .pipeline import generate_stations, generate_stations_strict

__all__ = [
    "densify",
    "resample_interval",
    "find_nearest",
    "route_end_station",
    "split_segments",
    "walk_segment",
    "emit_stations",
    "generate_stations",
    "generate_stations_strict",
]
