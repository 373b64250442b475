"""Projection constants for every supported grid.

RT90 is expressed as a transverse Mercator projection directly on the GRS 80
ellipsoid, with the central meridian, scale and false origin adjusted so that
WGS84/SWEREF99 latitude and longitude project straight into RT90 grid
coordinates (Lantmäteriet's "RT90 via GRS 80" parameter sets). This avoids a
separate datum shift and is accurate to about a metre.

SWEREF99 TM and the twelve local SWEREF99 zones use GRS 80 unmodified.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class GridVariant(Enum):
    """Closed set of coordinate systems a Position can be expressed in."""

    WGS84 = "wgs84"

    RT90_7_5_GON_V = "rt90_7.5_gon_v"
    RT90_5_0_GON_V = "rt90_5.0_gon_v"
    RT90_2_5_GON_V = "rt90_2.5_gon_v"
    RT90_0_0_GON_V = "rt90_0.0_gon_v"
    RT90_2_5_GON_O = "rt90_2.5_gon_o"
    RT90_5_0_GON_O = "rt90_5.0_gon_o"

    SWEREF_99_TM = "sweref_99_tm"
    SWEREF_99_1200 = "sweref_99_1200"
    SWEREF_99_1330 = "sweref_99_1330"
    SWEREF_99_1415 = "sweref_99_1415"
    SWEREF_99_1500 = "sweref_99_1500"
    SWEREF_99_1545 = "sweref_99_1545"
    SWEREF_99_1630 = "sweref_99_1630"
    SWEREF_99_1715 = "sweref_99_1715"
    SWEREF_99_1800 = "sweref_99_1800"
    SWEREF_99_1845 = "sweref_99_1845"
    SWEREF_99_2015 = "sweref_99_2015"
    SWEREF_99_2145 = "sweref_99_2145"
    SWEREF_99_2315 = "sweref_99_2315"

    @property
    def is_wgs84(self) -> bool:
        return self is GridVariant.WGS84

    @property
    def is_rt90(self) -> bool:
        return self.value.startswith("rt90_")

    @property
    def is_sweref99(self) -> bool:
        return self.value.startswith("sweref_99_")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GridParameters:
    """Ellipsoid and transverse Mercator constants for one grid."""
    semi_major_axis: float   # metres
    flattening: float
    central_meridian: float  # decimal degrees
    scale: float             # on the central meridian
    false_northing: float    # metres
    false_easting: float     # metres

    def __post_init__(self):
        if not 0.0 < self.flattening < 1.0:
            raise ValueError(f"flattening must be in (0, 1), got {self.flattening!r}")
        if self.scale <= 0.0:
            raise ValueError(f"scale must be positive, got {self.scale!r}")


# ---------------------------------------------------------------------------
# Ellipsoids
# ---------------------------------------------------------------------------

GRS80_AXIS = 6378137.0
GRS80_FLATTENING = 1.0 / 298.257222101

WGS84_AXIS = 6378137.0
WGS84_FLATTENING = 1.0 / 298.257223563


def _rt90(central_meridian: float, scale: float, false_northing: float,
          false_easting: float) -> GridParameters:
    return GridParameters(
        semi_major_axis=GRS80_AXIS,
        flattening=GRS80_FLATTENING,
        central_meridian=central_meridian,
        scale=scale,
        false_northing=false_northing,
        false_easting=false_easting,
    )


def _sweref99_zone(central_meridian: float) -> GridParameters:
    return GridParameters(
        semi_major_axis=GRS80_AXIS,
        flattening=GRS80_FLATTENING,
        central_meridian=central_meridian,
        scale=1.0,
        false_northing=0.0,
        false_easting=150000.0,
    )


_PARAMETERS = MappingProxyType({
    GridVariant.WGS84: GridParameters(
        semi_major_axis=WGS84_AXIS,
        flattening=WGS84_FLATTENING,
        central_meridian=0.0,
        scale=1.0,
        false_northing=0.0,
        false_easting=0.0,
    ),

    GridVariant.RT90_7_5_GON_V: _rt90(11.0 + 18.375 / 60.0, 1.000006000000, -667.282, 1500025.141),
    GridVariant.RT90_5_0_GON_V: _rt90(13.0 + 33.376 / 60.0, 1.000005800000, -667.130, 1500044.695),
    GridVariant.RT90_2_5_GON_V: _rt90(15.0 + 48.0 / 60.0 + 22.624306 / 3600.0, 1.00000561024,
                                      -667.711, 1500064.274),
    GridVariant.RT90_0_0_GON_V: _rt90(18.0 + 3.378 / 60.0, 1.000005400000, -668.844, 1500083.521),
    GridVariant.RT90_2_5_GON_O: _rt90(20.0 + 18.379 / 60.0, 1.000005200000, -670.706, 1500102.765),
    GridVariant.RT90_5_0_GON_O: _rt90(22.0 + 33.380 / 60.0, 1.000004900000, -672.557, 1500121.846),

    GridVariant.SWEREF_99_TM: GridParameters(
        semi_major_axis=GRS80_AXIS,
        flattening=GRS80_FLATTENING,
        central_meridian=15.0,
        scale=0.9996,
        false_northing=0.0,
        false_easting=500000.0,
    ),
    GridVariant.SWEREF_99_1200: _sweref99_zone(12.00),
    GridVariant.SWEREF_99_1330: _sweref99_zone(13.50),
    GridVariant.SWEREF_99_1415: _sweref99_zone(14.25),
    GridVariant.SWEREF_99_1500: _sweref99_zone(15.00),
    GridVariant.SWEREF_99_1545: _sweref99_zone(15.75),
    GridVariant.SWEREF_99_1630: _sweref99_zone(16.50),
    GridVariant.SWEREF_99_1715: _sweref99_zone(17.25),
    GridVariant.SWEREF_99_1800: _sweref99_zone(18.00),
    GridVariant.SWEREF_99_1845: _sweref99_zone(18.75),
    GridVariant.SWEREF_99_2015: _sweref99_zone(20.25),
    GridVariant.SWEREF_99_2145: _sweref99_zone(21.75),
    GridVariant.SWEREF_99_2315: _sweref99_zone(23.25),
})


def parameters_for(variant) -> GridParameters:
    """Return the constants for *variant* (a GridVariant or its string value).

    Raises:
        ValueError: if *variant* is a string naming no known grid.
        KeyError:   if *variant* has no registered parameters.
    """
    return _PARAMETERS[GridVariant(variant)]
