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
geochainage Test Suite
======================

Test organization:
- tests/core/       - Geodesy, datum, region, road, formatting and
                      chainage pipeline tests

Running tests:
    pytest                      # Run all tests
    pytest -m unit              # Run only unit tests
    pytest -m integration       # Run only end-to-end pipeline tests
    pytest -k "segmenter"       # Run tests matching "segmenter"
"""
