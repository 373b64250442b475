"""Tests for the forward and inverse Gauss-Krüger projection."""

import itertools

import pytest

from swegeodesy.gauss_kruger import geodetic_to_grid, grid_to_geodetic
from swegeodesy.grid_parameters import GridVariant, parameters_for

PROJECTED = [v for v in GridVariant if not v.is_wgs84]

# Nordic operating envelope
LATITUDES = [55.0, 57.5, 60.0, 62.5, 65.0, 67.5, 70.0]
LONGITUDES = [10.0, 12.5, 15.0, 17.5, 20.0, 22.5, 25.0]

STOCKHOLM = (59.330231, 18.059196)


class TestForward:
    """Test geodetic_to_grid()."""

    def test_stockholm_rt90(self):
        northing, easting = geodetic_to_grid(*STOCKHOLM, parameters_for(GridVariant.RT90_2_5_GON_V))
        assert northing == pytest.approx(6580994, abs=1.0)
        assert easting == pytest.approx(1628294, abs=1.0)

    def test_stockholm_sweref99_tm(self):
        northing, easting = geodetic_to_grid(*STOCKHOLM, parameters_for(GridVariant.SWEREF_99_TM))
        assert northing == pytest.approx(6580822, abs=1.0)
        assert easting == pytest.approx(674032, abs=1.0)

    def test_central_meridian_maps_to_false_easting(self):
        for variant in PROJECTED:
            p = parameters_for(variant)
            _, easting = geodetic_to_grid(62.0, p.central_meridian, p)
            assert easting == pytest.approx(p.false_easting, abs=1e-6)

    def test_equator_on_central_meridian(self):
        p = parameters_for(GridVariant.SWEREF_99_TM)
        northing, easting = geodetic_to_grid(0.0, 15.0, p)
        assert northing == pytest.approx(0.0, abs=1e-6)
        assert easting == pytest.approx(500000.0, abs=1e-6)

    def test_symmetric_about_central_meridian(self):
        p = parameters_for(GridVariant.SWEREF_99_1500)
        n_west, e_west = geodetic_to_grid(63.0, 13.0, p)
        n_east, e_east = geodetic_to_grid(63.0, 17.0, p)
        assert n_west == pytest.approx(n_east, abs=1e-6)
        assert e_west - p.false_easting == pytest.approx(p.false_easting - e_east, abs=1e-6)

    def test_deterministic(self):
        p = parameters_for(GridVariant.RT90_0_0_GON_V)
        assert geodetic_to_grid(*STOCKHOLM, p) == geodetic_to_grid(*STOCKHOLM, p)


class TestInverse:
    """Test grid_to_geodetic()."""

    def test_stockholm_rt90(self):
        lat, lon = grid_to_geodetic(6580994, 1628294, parameters_for(GridVariant.RT90_2_5_GON_V))
        assert lat == pytest.approx(STOCKHOLM[0], abs=1e-5)
        assert lon == pytest.approx(STOCKHOLM[1], abs=1e-5)

    @pytest.mark.parametrize("variant", PROJECTED, ids=str)
    def test_round_trip_envelope(self, variant):
        """Forward then inverse reproduces the input within 1e-9 degrees."""
        p = parameters_for(variant)
        for lat, lon in itertools.product(LATITUDES, LONGITUDES):
            back_lat, back_lon = grid_to_geodetic(*geodetic_to_grid(lat, lon, p), p)
            assert back_lat == pytest.approx(lat, abs=1e-9)
            assert back_lon == pytest.approx(lon, abs=1e-9)

    def test_false_origin_maps_to_central_meridian(self):
        p = parameters_for(GridVariant.SWEREF_99_2015)
        lat, lon = grid_to_geodetic(7000000.0, p.false_easting, p)
        assert lon == pytest.approx(p.central_meridian, abs=1e-12)
        assert 62.0 < lat < 64.0


class TestDomain:
    """Inputs outside the projection's domain raise instead of returning garbage."""

    def test_longitude_quarter_turn_from_meridian(self):
        with pytest.raises(ValueError):
            geodetic_to_grid(0.0, 105.0, parameters_for(GridVariant.SWEREF_99_TM))

    def test_huge_easting_overflows(self):
        with pytest.raises(OverflowError):
            grid_to_geodetic(6580994.0, 1e9, parameters_for(GridVariant.RT90_2_5_GON_V))
