"""Reference transformations through PROJ (pyproj).

The library projects with its own Gauss-Krüger series; this module runs the
same conversion through PROJ using the EPSG definition of each grid so the
two can be compared.

Note: always_xy=True is set so coordinates are always ordered
(easting/longitude, northing/latitude) regardless of the EPSG axis
convention. Position keeps (latitude, longitude) / (northing, easting), so
pairs are swapped on the way in and out.

PROJ defines RT90 on the Bessel 1841 ellipsoid with a Helmert datum shift,
while the built-in RT90 parameters project straight from GRS 80. Expect
agreement within a metre or so for RT90 and within millimetres for SWEREF99.
"""

import logging
from typing import Optional, Tuple

from .crs_metadata import epsg_code
from .grid_parameters import GridVariant
from .models import Position

logger = logging.getLogger(__name__)


class CoordTransformer:
    """One-shot transformer between two EPSG coordinate reference systems."""

    def __init__(self, src_epsg: int, dst_epsg: int):
        from pyproj import Transformer
        self.src_epsg = src_epsg
        self.dst_epsg = dst_epsg
        self._t = Transformer.from_crs(
            f"EPSG:{src_epsg}",
            f"EPSG:{dst_epsg}",
            always_xy=True,
        )

    def transform(
        self,
        x: float,
        y: float,
        z: Optional[float] = None,
    ) -> Tuple:
        """Transform a coordinate pair (or triple) from src to dst CRS.

        With always_xy=True:
          x = easting / longitude
          y = northing / latitude

        Returns a (x, y) or (x, y, z) tuple in the destination CRS.
        """
        if z is not None:
            return self._t.transform(x, y, z)
        return self._t.transform(x, y)


def reference_convert(position: Position, target) -> Position:
    """Convert *position* to *target* with PROJ instead of the built-in series.

    Args:
        position: Source position (must not hold UNSET components).
        target:   Destination GridVariant or its string value.

    Returns:
        A new Position in *target*; projected values are not rounded.
    """
    target = GridVariant(target)
    if not position.is_complete:
        raise ValueError(f"cannot convert a position with unset components: {position!r}")

    t = CoordTransformer(epsg_code(position.variant), epsg_code(target))
    x, y = t.transform(position.b, position.a)
    logger.debug("PROJ EPSG:%s -> EPSG:%s: (%s, %s) -> (%s, %s)",
                 t.src_epsg, t.dst_epsg, position.a, position.b, y, x)
    return Position(target, y, x)


def deviation(position: Position, target) -> Tuple[float, float]:
    """Difference (built-in minus PROJ) of both components after conversion.

    Degrees for a WGS84 target, metres for a grid target.
    """
    own = position.convert_to(target)
    ref = reference_convert(position, target)
    return own.a - ref.a, own.b - ref.b
