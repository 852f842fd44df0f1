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
Tests for Station Formatting Module
====================================

Tests the chainage parsing and formatting utilities used for
K-notation stations (e.g., "K1+010").
"""

import math

import pytest

from geochainage.core.station_formatting import (
    normalize_station,
    parse_station,
    station_to_num,
    station_to_str,
    validate_station_input,
)


class TestStationToStr:
    """Tests for station_to_str function."""

    @pytest.mark.unit
    def test_format_basic(self):
        """Test basic chainage formatting."""
        assert station_to_str(1010) == "K1+010"

    @pytest.mark.unit
    def test_format_whole_kilometre(self):
        """Test formatting a whole kilometre."""
        assert station_to_str(2000) == "K2+000"

    @pytest.mark.unit
    def test_format_zero(self):
        """Test formatting zero station."""
        assert station_to_str(0) == "K0+000"

    @pytest.mark.unit
    def test_format_custom_join(self):
        """Test formatting with a different separator."""
        assert station_to_str(12345, join="-") == "K12-345"

    @pytest.mark.unit
    def test_fractional_metres_round(self):
        """Test that fractional metres round to the nearest metre."""
        assert station_to_str(12345.4) == "K12+345"
        assert station_to_str(999.6) == "K1+000"

    @pytest.mark.unit
    def test_format_negative(self):
        """Test formatting a station behind the origin."""
        assert station_to_str(-1200) == "K-1+200"

    @pytest.mark.unit
    def test_non_finite_returns_placeholder(self):
        """Test that NaN and infinity format as text that parses to the default."""
        assert station_to_str(math.nan) == "K--"
        assert station_to_str(math.inf) == "K--"
        assert station_to_num(station_to_str(math.nan)) == -1


class TestStationToNum:
    """Tests for station_to_num function."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text, expected", [
        ("K1+234", 1234),
        ("k1-234", 1234),
        ("1.234", 1234),
        ("1234", 1234),
        ("K0+000", 0),
        ("K1+2", 1002),
        ("  K12+345  ", 12345),
    ])
    def test_accepted_formats(self, text, expected):
        """Test each accepted separator and form."""
        assert station_to_num(text) == expected

    @pytest.mark.unit
    def test_garbage_returns_default(self):
        """Test that non-numeric text returns the default sentinel."""
        assert station_to_num("K--") == -1

    @pytest.mark.unit
    def test_custom_default(self):
        """Test that the caller's default is returned for bad text."""
        assert station_to_num("K--", default=0) == 0
        assert station_to_num("Kabc", default=99) == 99

    @pytest.mark.unit
    def test_empty_and_non_text(self):
        """Test empty string and non-string input."""
        assert station_to_num("") == -1
        assert station_to_num(None) == -1

    @pytest.mark.unit
    def test_signed_metres_rejected(self):
        """Test that a sign on the metre part is malformed."""
        assert station_to_num("K1+-5") == -1

    @pytest.mark.unit
    def test_leading_minus_is_sign(self):
        """Test that a leading minus is read as a sign."""
        assert station_to_num("-5") == -5
        assert station_to_num("K-1+200") == -1200


class TestParseStation:
    """Tests for parse_station function."""

    @pytest.mark.unit
    def test_parse_standard_format(self):
        """Test parsing standard chainage format."""
        assert parse_station("K10+050") == 10050

    @pytest.mark.unit
    def test_parse_number(self):
        """Test that numbers are rounded to whole metres."""
        assert parse_station(1050.4) == 1050
        assert parse_station(7) == 7

    @pytest.mark.unit
    def test_parse_invalid_raises(self):
        """Test that invalid input raises ValueError."""
        with pytest.raises(ValueError):
            parse_station("invalid")

    @pytest.mark.unit
    def test_parse_none_raises(self):
        """Test that None raises ValueError."""
        with pytest.raises(ValueError):
            parse_station(None)


class TestNormalizeStation:
    """Tests for normalize_station function."""

    @pytest.mark.unit
    def test_normalize_dash(self):
        """Test rewriting a dash separator and short metres."""
        assert normalize_station("k1-5") == "K1+005"

    @pytest.mark.unit
    def test_normalize_dot(self):
        """Test rewriting a dot separator."""
        assert normalize_station("12.345") == "K12+345"

    @pytest.mark.unit
    def test_normalize_invalid_returns_default(self):
        """Test that malformed text returns the default."""
        assert normalize_station("K--") is None
        assert normalize_station("K--", default="?") == "?"


class TestValidateStationInput:
    """Tests for validate_station_input function."""

    @pytest.mark.unit
    def test_valid_station_format(self):
        """Test validation of valid chainage text."""
        is_valid, value, error = validate_station_input("K1+010")
        assert is_valid is True
        assert value == 1010
        assert error is None

    @pytest.mark.unit
    def test_invalid_format(self):
        """Test validation rejects invalid format."""
        is_valid, value, error = validate_station_input("not a station")
        assert is_valid is False
        assert value is None
        assert error is not None

    @pytest.mark.unit
    def test_empty_input(self):
        """Test validation rejects empty input."""
        is_valid, _, _ = validate_station_input("")
        assert is_valid is False


class TestRoundTrip:
    """Test that parse and format are inverse operations."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", [
        "K0+000",
        "K1+010",
        "K2+000",
        "k12-345",
        "99.999",
    ])
    def test_round_trip(self, text):
        """Test that str(num(s)) == normalize(s)."""
        assert station_to_str(station_to_num(text)) == normalize_station(text)
