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
Tests for Polyline Resampler
============================

Tests resample interval selection and polyline densification.
"""

import pytest

from geochainage.core.chainage.resampler import densify, resample_interval
from geochainage.core.geodesy import distance, polyline_length
from geochainage.core.model import LngLat

# destination() steps on a 6371 km sphere while distance() measures on a
# 6378 km one, so a nominal step measures about 0.11% long
SPACING_TOLERANCE = 1.01


class TestResampleInterval:
    """Tests for resample_interval."""

    @pytest.mark.unit
    def test_long_route_capped(self):
        """Test long routes use the one metre cap."""
        assert resample_interval(4200.0) == 1.0
        assert resample_interval(3.0) == 1.0

    @pytest.mark.unit
    def test_short_route_rounded(self):
        """Test short routes use a third of their length."""
        assert resample_interval(0.5) == 0.1667
        assert resample_interval(1.5) == 0.5

    @pytest.mark.unit
    def test_zero_length(self):
        """Test a zero-length route has zero interval."""
        assert resample_interval(0.0) == 0.0


class TestDensify:
    """Tests for densify."""

    @pytest.mark.unit
    def test_empty(self):
        """Test empty input gives empty output."""
        assert densify([]) == []

    @pytest.mark.unit
    def test_single_point(self):
        """Test a single vertex is returned unchanged."""
        assert densify([(1.0, 2.0)]) == [LngLat(1.0, 2.0)]

    @pytest.mark.unit
    def test_endpoints_preserved(self, beijing_route):
        """Test the first and last points equal the input exactly."""
        dense = densify(beijing_route)
        assert dense[0] == LngLat(*beijing_route[0])
        assert dense[-1] == LngLat(*beijing_route[-1])

    @pytest.mark.unit
    def test_interior_vertices_kept(self, beijing_road):
        """Test every input vertex appears in the output."""
        dense = densify(beijing_road)
        for vertex in beijing_road:
            assert LngLat(*vertex) in dense

    @pytest.mark.unit
    def test_spacing_bound(self, beijing_road):
        """Test consecutive points never exceed the interval."""
        dense = densify(beijing_road)
        interval = resample_interval(polyline_length(beijing_road))
        gaps = [distance(a, b) for a, b in zip(dense, dense[1:])]
        assert max(gaps) <= interval * SPACING_TOLERANCE

    @pytest.mark.unit
    def test_no_zero_gaps(self, beijing_route):
        """Test no two consecutive points coincide."""
        dense = densify(beijing_route)
        assert all(a != b for a, b in zip(dense, dense[1:]))

    @pytest.mark.unit
    def test_point_count(self, beijing_route):
        """Test about one point per metre on a long route."""
        dense = densify(beijing_route)
        length = polyline_length(beijing_route)
        assert length * 0.95 < len(dense) < length * 1.05

    @pytest.mark.unit
    def test_short_route(self):
        """Test a route shorter than three metres uses a finer step."""
        route = [(0.0, 0.0), (0.00001, 0.0)]
        dense = densify(route)
        interval = resample_interval(polyline_length(route))
        assert interval < 1.0
        assert len(dense) >= 4
        assert dense[-1] == LngLat(0.00001, 0.0)
        gaps = [distance(a, b) for a, b in zip(dense, dense[1:])]
        assert max(gaps) <= interval * SPACING_TOLERANCE

    @pytest.mark.unit
    def test_duplicate_vertices_skipped(self, beijing_route):
        """Test repeated vertices do not change the result."""
        repeated = [beijing_route[0], beijing_route[0], beijing_route[1], beijing_route[1]]
        assert densify(repeated) == densify(beijing_route)

    @pytest.mark.unit
    def test_all_duplicates(self):
        """Test a route of one repeated vertex collapses to that vertex."""
        assert densify([(1.0, 1.0), (1.0, 1.0)]) == [LngLat(1.0, 1.0)]

    @pytest.mark.unit
    def test_total_length_argument(self, beijing_route):
        """Test a precomputed length gives the same result."""
        length = polyline_length(beijing_route)
        assert densify(beijing_route, length) == densify(beijing_route)
