"""Conversion between WGS84, RT90 and SWEREF99 coordinates."""

from .coordinate_codec import (
    UNSET,
    CoordinateFormat,
    FormatError,
    format_latitude,
    format_longitude,
    is_unset,
    parse_latitude,
    parse_longitude,
    parse_position,
)
from .gauss_kruger import geodetic_to_grid, grid_to_geodetic
from .grid_parameters import GridParameters, GridVariant, parameters_for
from .models import Position

__all__ = [
    "UNSET",
    "CoordinateFormat",
    "FormatError",
    "GridParameters",
    "GridVariant",
    "Position",
    "format_latitude",
    "format_longitude",
    "geodetic_to_grid",
    "grid_to_geodetic",
    "is_unset",
    "parameters_for",
    "parse_latitude",
    "parse_longitude",
    "parse_position",
]

__version__ = "1.0.0"
