"""Gauss-Krüger (transverse Mercator) projection on an ellipsoid.

Forward and inverse projections use the Krüger n-series through the 8th
harmonic together with the series between geodetic and conformal latitude,
following the formulas published by Lantmäteriet for RT90 and SWEREF99.
Within the Nordic band (latitude 55-70°, a dozen degrees either side of the
central meridian) the pair is accurate well below a millimetre.

Latitudes near the poles are not guarded. The series are not validated
there and results should not be trusted.

Both functions are pure and do no rounding; callers decide the output
precision.
"""

import math
from typing import Tuple

from .grid_parameters import GridParameters


def _rectifying_radius(params: GridParameters, n: float) -> float:
    """Radius of the sphere with the same meridian length, scaled."""
    return params.scale * params.semi_major_axis / (1.0 + n) * (
        1.0 + n * n / 4.0 + n ** 4 / 64.0
    )


def geodetic_to_grid(
    latitude: float,
    longitude: float,
    params: GridParameters,
) -> Tuple[float, float]:
    """Project a geodetic position onto the grid described by *params*.

    Args:
        latitude:  Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        params:    Grid constants from grid_parameters.parameters_for().

    Returns:
        (northing, easting) in metres.

    Raises:
        ValueError: if the longitude is 90° or more from the central
            meridian (atanh leaves its domain).
    """
    f = params.flattening
    e2 = f * (2.0 - f)
    n = f / (2.0 - f)
    a_roof = _rectifying_radius(params, n)

    # geodetic -> conformal latitude
    A = e2
    B = (5.0 * e2 ** 2 - e2 ** 3) / 6.0
    C = (104.0 * e2 ** 3 - 45.0 * e2 ** 4) / 120.0
    D = (1237.0 * e2 ** 4) / 1260.0

    beta1 = n / 2.0 - 2.0 * n ** 2 / 3.0 + 5.0 * n ** 3 / 16.0 + 41.0 * n ** 4 / 180.0
    beta2 = 13.0 * n ** 2 / 48.0 - 3.0 * n ** 3 / 5.0 + 557.0 * n ** 4 / 1440.0
    beta3 = 61.0 * n ** 3 / 240.0 - 103.0 * n ** 4 / 140.0
    beta4 = 49561.0 * n ** 4 / 161280.0

    phi = math.radians(latitude)
    delta_lambda = math.radians(longitude) - math.radians(params.central_meridian)

    sin_phi = math.sin(phi)
    phi_star = phi - sin_phi * math.cos(phi) * (
        A + B * sin_phi ** 2 + C * sin_phi ** 4 + D * sin_phi ** 6
    )

    xi = math.atan(math.tan(phi_star) / math.cos(delta_lambda))
    eta = math.atanh(math.cos(phi_star) * math.sin(delta_lambda))

    northing = a_roof * (
        xi
        + beta1 * math.sin(2.0 * xi) * math.cosh(2.0 * eta)
        + beta2 * math.sin(4.0 * xi) * math.cosh(4.0 * eta)
        + beta3 * math.sin(6.0 * xi) * math.cosh(6.0 * eta)
        + beta4 * math.sin(8.0 * xi) * math.cosh(8.0 * eta)
    ) + params.false_northing
    easting = a_roof * (
        eta
        + beta1 * math.cos(2.0 * xi) * math.sinh(2.0 * eta)
        + beta2 * math.cos(4.0 * xi) * math.sinh(4.0 * eta)
        + beta3 * math.cos(6.0 * xi) * math.sinh(6.0 * eta)
        + beta4 * math.cos(8.0 * xi) * math.sinh(8.0 * eta)
    ) + params.false_easting

    return northing, easting


def grid_to_geodetic(
    northing: float,
    easting: float,
    params: GridParameters,
) -> Tuple[float, float]:
    """Inverse of geodetic_to_grid().

    Args:
        northing: Grid northing (X) in metres.
        easting:  Grid easting (Y) in metres.
        params:   Grid constants from grid_parameters.parameters_for().

    Returns:
        (latitude, longitude) in decimal degrees.

    Raises:
        OverflowError: if the easting is so far from the false easting that
            the hyperbolic terms overflow.
    """
    f = params.flattening
    e2 = f * (2.0 - f)
    n = f / (2.0 - f)
    a_roof = _rectifying_radius(params, n)

    delta1 = n / 2.0 - 2.0 * n ** 2 / 3.0 + 37.0 * n ** 3 / 96.0 - n ** 4 / 360.0
    delta2 = n ** 2 / 48.0 + n ** 3 / 15.0 - 437.0 * n ** 4 / 1440.0
    delta3 = 17.0 * n ** 3 / 480.0 - 37.0 * n ** 4 / 840.0
    delta4 = 4397.0 * n ** 4 / 161280.0

    # conformal -> geodetic latitude
    A_star = e2 + e2 ** 2 + e2 ** 3 + e2 ** 4
    B_star = -(7.0 * e2 ** 2 + 17.0 * e2 ** 3 + 30.0 * e2 ** 4) / 6.0
    C_star = (224.0 * e2 ** 3 + 889.0 * e2 ** 4) / 120.0
    D_star = -(4279.0 * e2 ** 4) / 1260.0

    xi = (northing - params.false_northing) / a_roof
    eta = (easting - params.false_easting) / a_roof

    xi_prim = (
        xi
        - delta1 * math.sin(2.0 * xi) * math.cosh(2.0 * eta)
        - delta2 * math.sin(4.0 * xi) * math.cosh(4.0 * eta)
        - delta3 * math.sin(6.0 * xi) * math.cosh(6.0 * eta)
        - delta4 * math.sin(8.0 * xi) * math.cosh(8.0 * eta)
    )
    eta_prim = (
        eta
        - delta1 * math.cos(2.0 * xi) * math.sinh(2.0 * eta)
        - delta2 * math.cos(4.0 * xi) * math.sinh(4.0 * eta)
        - delta3 * math.cos(6.0 * xi) * math.sinh(6.0 * eta)
        - delta4 * math.cos(8.0 * xi) * math.sinh(8.0 * eta)
    )

    phi_star = math.asin(math.sin(xi_prim) / math.cosh(eta_prim))
    delta_lambda = math.atan(math.sinh(eta_prim) / math.cos(xi_prim))

    sin_phi = math.sin(phi_star)
    phi = phi_star + sin_phi * math.cos(phi_star) * (
        A_star + B_star * sin_phi ** 2 + C_star * sin_phi ** 4 + D_star * sin_phi ** 6
    )

    latitude = math.degrees(phi)
    longitude = params.central_meridian + math.degrees(delta_lambda)
    return latitude, longitude
