"""Position value object and conversion between grids.

A Position is a pair of numbers tagged with the grid they belong to. For
WGS84 the pair is (latitude, longitude) in decimal degrees; for the RT90 and
SWEREF99 grids it is (northing, easting) in metres.

Every conversion between two projected grids goes through WGS84:

    RT90 ──inverse──▶ WGS84 ──forward──▶ SWEREF99
"""

import logging
from dataclasses import dataclass, replace

from .coordinate_codec import (
    CoordinateFormat,
    format_decimal,
    format_latitude,
    format_longitude,
    is_unset,
    parse_latitude,
    parse_longitude,
    parse_position,
)
from .gauss_kruger import geodetic_to_grid, grid_to_geodetic
from .grid_parameters import GridVariant, parameters_for

logger = logging.getLogger(__name__)

DEFAULT_RT90 = GridVariant.RT90_2_5_GON_V
DEFAULT_SWEREF99 = GridVariant.SWEREF_99_TM


def _round_mm(value: float) -> float:
    return round(value * 1000.0) / 1000.0


@dataclass(frozen=True)
class Position:
    """Two coordinate components tagged with their grid."""
    variant: GridVariant
    a: float    # latitude (WGS84) or northing (grids)
    b: float    # longitude (WGS84) or easting (grids)

    def __post_init__(self):
        # Accept the string value of a variant as well as the enum member.
        object.__setattr__(self, "variant", GridVariant(self.variant))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def wgs84(cls, latitude: float, longitude: float) -> "Position":
        return cls(GridVariant.WGS84, float(latitude), float(longitude))

    @classmethod
    def grid(cls, northing: float, easting: float, variant) -> "Position":
        variant = GridVariant(variant)
        if variant.is_wgs84:
            raise ValueError("use Position.wgs84() for geodetic coordinates")
        return cls(variant, float(northing), float(easting))

    @classmethod
    def rt90(cls, northing: float, easting: float, variant=DEFAULT_RT90) -> "Position":
        variant = GridVariant(variant)
        if not variant.is_rt90:
            raise ValueError(f"{variant} is not an RT90 projection")
        return cls.grid(northing, easting, variant)

    @classmethod
    def sweref99(cls, northing: float, easting: float, variant=DEFAULT_SWEREF99) -> "Position":
        variant = GridVariant(variant)
        if not variant.is_sweref99:
            raise ValueError(f"{variant} is not a SWEREF99 projection")
        return cls.grid(northing, easting, variant)

    @classmethod
    def parse(cls, text: str, fmt: CoordinateFormat) -> "Position":
        """Build a WGS84 position from a latitude/longitude string.

        Raises:
            FormatError: if *text* lacks a delimiter required by *fmt*.
        """
        latitude, longitude = parse_position(text, fmt)
        return cls(GridVariant.WGS84, latitude, longitude)

    def with_latitude_from_string(self, text: str, fmt: CoordinateFormat) -> "Position":
        self._require_wgs84()
        return replace(self, a=parse_latitude(text, fmt))

    def with_longitude_from_string(self, text: str, fmt: CoordinateFormat) -> "Position":
        self._require_wgs84()
        return replace(self, b=parse_longitude(text, fmt))

    # ------------------------------------------------------------------
    # Named components
    # ------------------------------------------------------------------

    @property
    def latitude(self) -> float:
        self._require_wgs84()
        return self.a

    @property
    def longitude(self) -> float:
        self._require_wgs84()
        return self.b

    @property
    def northing(self) -> float:
        self._require_grid()
        return self.a

    @property
    def easting(self) -> float:
        self._require_grid()
        return self.b

    @property
    def is_complete(self) -> bool:
        """False when a component holds the UNSET sentinel."""
        return not (is_unset(self.a) or is_unset(self.b))

    def _require_wgs84(self):
        if not self.variant.is_wgs84:
            raise AttributeError(f"{self.variant} positions have no latitude/longitude")

    def _require_grid(self):
        if self.variant.is_wgs84:
            raise AttributeError("WGS84 positions have no northing/easting")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert_to(self, target) -> "Position":
        """Return this position expressed in *target*.

        Grid-to-grid conversions pass through WGS84. Projected results are
        rounded to the millimetre.

        Raises:
            ValueError: if a component is UNSET, or the position lies outside
                the domain of a projection on the way (e.g. an easting too
                large to invert, or a longitude 90° from a central meridian).
        """
        target = GridVariant(target)
        if target is self.variant:
            return replace(self)
        if not self.is_complete:
            raise ValueError(f"cannot convert a position with unset components: {self!r}")

        try:
            return self._project(target)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"{self} cannot be expressed in {target}: {exc}") from exc

    def _project(self, target: GridVariant) -> "Position":
        if self.variant.is_wgs84:
            latitude, longitude = self.a, self.b
        else:
            latitude, longitude = grid_to_geodetic(self.a, self.b, parameters_for(self.variant))
            logger.debug("%s (%s, %s) -> WGS84 (%s, %s)",
                         self.variant, self.a, self.b, latitude, longitude)

        if target.is_wgs84:
            return Position(target, latitude, longitude)

        northing, easting = geodetic_to_grid(latitude, longitude, parameters_for(target))
        logger.debug("WGS84 (%s, %s) -> %s (%s, %s)",
                     latitude, longitude, target, northing, easting)
        return Position(target, _round_mm(northing), _round_mm(easting))

    def to_wgs84(self) -> "Position":
        return self.convert_to(GridVariant.WGS84)

    def to_rt90(self, variant=DEFAULT_RT90) -> "Position":
        variant = GridVariant(variant)
        if not variant.is_rt90:
            raise ValueError(f"{variant} is not an RT90 projection")
        return self.convert_to(variant)

    def to_sweref99(self, variant=DEFAULT_SWEREF99) -> "Position":
        variant = GridVariant(variant)
        if not variant.is_sweref99:
            raise ValueError(f"{variant} is not a SWEREF99 projection")
        return self.convert_to(variant)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def latitude_to_string(self, fmt: CoordinateFormat) -> str:
        return format_latitude(self.latitude, fmt)

    def longitude_to_string(self, fmt: CoordinateFormat) -> str:
        return format_longitude(self.longitude, fmt)

    def __str__(self) -> str:
        if self.variant.is_wgs84:
            dms = CoordinateFormat.DEGREES_MINUTES_SECONDS
            return (f"Latitude: {self.latitude_to_string(dms)}  "
                    f"Longitude: {self.longitude_to_string(dms)}")
        return (f"X: {format_decimal(self.a)} Y: {format_decimal(self.b)} "
                f"Projection: {self.variant}")
