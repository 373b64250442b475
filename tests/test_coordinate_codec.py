"""Tests for parsing and formatting latitude/longitude text."""

import pytest

from swegeodesy.coordinate_codec import (
    UNSET,
    CoordinateFormat,
    FormatError,
    format_decimal,
    format_latitude,
    format_longitude,
    is_unset,
    parse_decimal,
    parse_latitude,
    parse_longitude,
    parse_position,
)

D = CoordinateFormat.DEGREES
DM = CoordinateFormat.DEGREES_MINUTES
DMS = CoordinateFormat.DEGREES_MINUTES_SECONDS


class TestParseDecimal:
    """Test the locale-independent number reader."""

    @pytest.mark.parametrize("text,expected", [
        ("59", 59.0),
        ("59.330231", 59.330231),
        ("-18.5", -18.5),
        ("+0.5", 0.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("  17.25 ", 17.25),
        ("017", 17.0),
    ])
    def test_valid(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["", " ", "59,5", "1,000.5", "nan", "inf", "1_000", "5 9", "abc"])
    def test_invalid(self, text):
        with pytest.raises(FormatError):
            parse_decimal(text)

    def test_format_error_is_value_error(self):
        assert issubclass(FormatError, ValueError)


class TestParseDegreesMinutes:
    """Test DEGREES_MINUTES parsing."""

    def test_north(self):
        assert parse_latitude("N 59º 19.8138'", DM) == pytest.approx(59 + 19.8138 / 60, abs=1e-12)

    def test_south_is_negative(self):
        assert parse_latitude("S 33º 51.5'", DM) == pytest.approx(-(33 + 51.5 / 60), abs=1e-12)

    def test_west_is_negative(self):
        assert parse_longitude("W 3º 42'", DM) == pytest.approx(-3.7, abs=1e-12)

    def test_east_is_positive(self):
        assert parse_longitude("E 18º 3.5517'", DM) == pytest.approx(18 + 3.5517 / 60, abs=1e-12)

    def test_minus_sign_is_negative(self):
        assert parse_latitude("- 10º 30'", DM) == pytest.approx(-10.5, abs=1e-12)
        assert parse_longitude("- 10º 30'", DM) == pytest.approx(-10.5, abs=1e-12)

    def test_surrounding_whitespace(self):
        assert parse_latitude("   N 60º 0'  ", DM) == pytest.approx(60.0)

    def test_empty_is_unset(self):
        assert parse_latitude("", DM) == UNSET
        assert parse_longitude("", DM) == UNSET
        assert is_unset(parse_latitude("   ", DM))

    def test_magnitude_above_90_is_unset(self):
        assert parse_latitude("N 90º 0.6'", DM) == UNSET

    def test_exactly_90_is_kept(self):
        assert parse_latitude("N 90º 0'", DM) == 90.0

    def test_longitude_above_90_is_unset(self):
        """Longitudes are held to the same 90 limit as latitudes."""
        assert parse_longitude("E 120º 30'", DM) == UNSET

    def test_missing_degree_mark(self):
        with pytest.raises(FormatError):
            parse_latitude("N 59 20.123'", DM)

    def test_missing_minute_mark(self):
        with pytest.raises(FormatError):
            parse_latitude("N 59º 20.123", DM)

    def test_comma_decimal_separator_rejected(self):
        with pytest.raises(FormatError):
            parse_latitude("N 59º 20,123'", DM)

    @pytest.mark.parametrize("text", ["N 5e1º 0'", "N -5º 0'", "N +5º 0'", "N 5º -30'", "N 5º 3e1'"])
    def test_signed_or_exponent_fields_rejected(self, text):
        """Fields are unsigned plain decimals; only the letter carries the sign."""
        with pytest.raises(FormatError):
            parse_latitude(text, DM)

    def test_exponent_in_seconds_rejected(self):
        with pytest.raises(FormatError):
            parse_latitude("N 59º 19' 4.8e1\"", DMS)


class TestParseDegreesMinutesSeconds:
    """Test DEGREES_MINUTES_SECONDS parsing."""

    def test_north(self):
        value = parse_latitude("N 59º 19' 48.8316\"", DMS)
        assert value == pytest.approx(59.330231, abs=1e-10)

    def test_leading_zero_degrees(self):
        value = parse_longitude("E 017º 50' 06.12\"", DMS)
        assert value == pytest.approx(17 + 50 / 60 + 6.12 / 3600, abs=1e-12)

    def test_south(self):
        value = parse_latitude("S 1º 0' 36\"", DMS)
        assert value == pytest.approx(-1.01, abs=1e-12)

    def test_empty_is_unset(self):
        assert parse_longitude("", DMS) == UNSET

    def test_above_90_is_unset(self):
        assert parse_latitude("N 89º 59' 60.5\"", DMS) == UNSET

    def test_missing_second_mark(self):
        with pytest.raises(FormatError):
            parse_latitude("N 59º 19' 48.8316", DMS)

    def test_missing_degree_mark(self):
        with pytest.raises(FormatError):
            parse_latitude("N 59 19' 48.8316\"", DMS)


class TestParseDegrees:
    """Test single-number DEGREES components."""

    def test_value(self):
        assert parse_latitude("59.330231", D) == 59.330231
        assert parse_longitude("-18.059196", D) == -18.059196

    def test_no_range_check(self):
        assert parse_longitude("120.5", D) == 120.5

    def test_empty_is_format_error(self):
        with pytest.raises(FormatError):
            parse_latitude("", D)


class TestParsePosition:
    """Test parsing a latitude/longitude pair."""

    def test_degrees_pair(self):
        assert parse_position("59.330231 18.059196", D) == (59.330231, 18.059196)

    def test_degrees_pair_trimmed(self):
        assert parse_position("  59.5 18.25 ", D) == (59.5, 18.25)

    @pytest.mark.parametrize("text", ["59.5", "59.5  18.25", "59.5 18.25 3", "", "59,5 18,25"])
    def test_degrees_pair_invalid(self, text):
        with pytest.raises(FormatError):
            parse_position(text, D)

    def test_degrees_minutes_pair(self):
        lat, lon = parse_position("N 59º 19.8138' E 18º 3.5517'", DM)
        assert lat == pytest.approx(59 + 19.8138 / 60, abs=1e-12)
        assert lon == pytest.approx(18 + 3.5517 / 60, abs=1e-12)

    def test_degrees_minutes_seconds_pair(self):
        lat, lon = parse_position("N 59º 19' 48.8316\" E 18º 3' 33.1056\"", DMS)
        assert lat == pytest.approx(59.330231, abs=1e-10)
        assert lon == pytest.approx(18.059196, abs=1e-10)

    def test_southern_western_pair(self):
        lat, lon = parse_position("S 33º 52' 4\" W 70º 40' 0\"", DMS)
        assert lat < 0
        assert lon < 0

    def test_empty_sexagesimal_is_unset(self):
        assert parse_position("", DM) == (UNSET, UNSET)

    def test_missing_minute_mark_fails(self):
        with pytest.raises(FormatError):
            parse_position("N 59º 19.8138 E 18º 3.5517", DM)


class TestFormat:
    """Test formatting latitude/longitude values."""

    def test_degrees(self):
        assert format_latitude(59.330231, D) == "59.330231"
        assert format_longitude(18.0, D) == "18"

    def test_degrees_minutes(self):
        assert format_latitude(59.330231, DM) == "N 59º 19.8138'"
        assert format_longitude(18.059196, DM) == "E 18º 3.5517'"

    def test_degrees_minutes_seconds(self):
        assert format_latitude(59.330231, DMS) == "N 59º 19' 48.8316\""
        assert format_longitude(18.059196, DMS) == "E 18º 3' 33.1056\""

    def test_negative_hemispheres(self):
        assert format_latitude(-59.330231, DMS) == "S 59º 19' 48.8316\""
        assert format_longitude(-18.059196, DM) == "W 18º 3.5517'"

    def test_zero_is_positive_hemisphere(self):
        assert format_latitude(0.0, DM) == "N 0º 0'"
        assert format_longitude(0.0, DMS) == "E 0º 0' 0\""

    @pytest.mark.parametrize("fmt", list(CoordinateFormat))
    def test_unset_is_empty(self, fmt):
        assert format_latitude(UNSET, fmt) == ""
        assert format_longitude(UNSET, fmt) == ""

    def test_format_decimal(self):
        assert format_decimal(6580994.0) == "6580994"
        assert format_decimal(674032.125) == "674032.125"
        assert format_decimal(-0.5) == "-0.5"


class TestFormatParseInverse:
    """Formatting then parsing DMS keeps the value to the printed precision."""

    @pytest.mark.parametrize("value", [59.330231, -12.3456789, 0.0001, 67.8558, 55.123456789])
    def test_latitude(self, value):
        text = format_latitude(value, DMS)
        assert parse_latitude(text, DMS) == pytest.approx(value, abs=1e-8)

    @pytest.mark.parametrize("value", [18.059196, -3.7038, 24.999999, 11.11])
    def test_longitude(self, value):
        text = format_longitude(value, DMS)
        assert parse_longitude(text, DMS) == pytest.approx(value, abs=1e-8)

    def test_degrees_minutes_truncates(self):
        """Minutes are cut, not rounded, to four decimals."""
        value = 59 + 19.81389 / 60
        assert format_latitude(value, DM) == "N 59º 19.8138'"
        assert parse_latitude(format_latitude(value, DM), DM) <= value
