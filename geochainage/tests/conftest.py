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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the geochainage test suite.
"""

import logging
from typing import List, Tuple

import pytest

from geochainage.core.logging_config import LOGGER_PREFIX


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: End-to-end pipeline tests")


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def propagate_logs(monkeypatch):
    """Let caplog see geochainage records.

    The package logger does not propagate to the root logger, which is
    where caplog listens.
    """
    monkeypatch.setattr(logging.getLogger(LOGGER_PREFIX), "propagate", True)


# =============================================================================
# Route Fixtures
# =============================================================================

@pytest.fixture
def beijing_route() -> List[Tuple[float, float]]:
    """Two-vertex diagonal route in Beijing, about 4.2 km long."""
    return [(116.4074, 39.9042), (116.4374, 39.9342)]


@pytest.fixture
def beijing_road() -> List[Tuple[float, float]]:
    """The same route with two intermediate vertices."""
    return [
        (116.4074, 39.9042),
        (116.4174, 39.9142),
        (116.4274, 39.9242),
        (116.4374, 39.9342),
    ]


@pytest.fixture
def equator_line() -> List[Tuple[float, float]]:
    """Ten points along the equator, about 1.113 m apart."""
    return [(i * 0.00001, 0.0) for i in range(10)]


@pytest.fixture
def unit_square() -> List[Tuple[float, float]]:
    """One-degree square ring with its corner on the origin."""
    return [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]
