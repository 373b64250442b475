"""Describe each supported grid as an EPSG coordinate reference system.

Strategy (in priority order):
  1. pyproj.CRS: local, no network, covers all well-known EPSG codes.
  2. epsg.io REST API: fallback for fields pyproj cannot supply.

EPSG codes:
  WGS84                       4326
  SWEREF99 TM                 3006
  SWEREF99 12 00 ... 23 15    3007 - 3018
  RT90 7.5 gon V ... 5 gon O  3019 - 3024
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType

from .grid_parameters import GridVariant

logger = logging.getLogger(__name__)

EPSG_CODES = MappingProxyType({
    GridVariant.WGS84: 4326,

    GridVariant.SWEREF_99_TM: 3006,
    GridVariant.SWEREF_99_1200: 3007,
    GridVariant.SWEREF_99_1330: 3008,
    GridVariant.SWEREF_99_1500: 3009,
    GridVariant.SWEREF_99_1630: 3010,
    GridVariant.SWEREF_99_1800: 3011,
    GridVariant.SWEREF_99_1415: 3012,
    GridVariant.SWEREF_99_1545: 3013,
    GridVariant.SWEREF_99_1715: 3014,
    GridVariant.SWEREF_99_1845: 3015,
    GridVariant.SWEREF_99_2015: 3016,
    GridVariant.SWEREF_99_2145: 3017,
    GridVariant.SWEREF_99_2315: 3018,

    GridVariant.RT90_7_5_GON_V: 3019,
    GridVariant.RT90_5_0_GON_V: 3020,
    GridVariant.RT90_2_5_GON_V: 3021,
    GridVariant.RT90_0_0_GON_V: 3022,
    GridVariant.RT90_2_5_GON_O: 3023,
    GridVariant.RT90_5_0_GON_O: 3024,
})


@dataclass
class CRSMetadata:
    """CRS identification strings for one grid."""
    epsg: int = 0
    crs_name: str = ""
    description: str = ""
    geodetic_datum: str = ""
    map_projection: str = ""    # empty for geographic CRSs
    map_zone: str = ""


def epsg_code(variant) -> int:
    """EPSG code of *variant* (a GridVariant or its string value)."""
    return EPSG_CODES[GridVariant(variant)]


def for_variant(variant) -> CRSMetadata:
    """Return CRS metadata for the EPSG code of *variant*."""
    return from_epsg(epsg_code(variant))


def from_epsg(code: int) -> CRSMetadata:
    """Return CRS metadata for *code*, trying pyproj then epsg.io.

    Raises:
        ValueError: if the EPSG code is not recognised by either source.
    """
    meta = _from_pyproj(code)

    if not meta.crs_name:
        logger.warning("pyproj could not resolve EPSG:%s, trying epsg.io", code)
        _fill_from_epsg_io(code, meta)

    if not meta.crs_name:
        raise ValueError(f"EPSG:{code} could not be resolved by pyproj or epsg.io")

    return meta


# ---------------------------------------------------------------------------
# pyproj source
# ---------------------------------------------------------------------------

def _from_pyproj(code: int) -> CRSMetadata:
    """Extract CRS metadata using pyproj (no network required)."""
    from pyproj import CRS
    from pyproj.exceptions import CRSError

    meta = CRSMetadata(epsg=code)
    try:
        crs = CRS.from_epsg(code)
    except CRSError as exc:
        logger.debug("pyproj has no EPSG:%s: %s", code, exc)
        return meta

    meta.crs_name = crs.name or ""
    meta.description = (getattr(crs, "remarks", None) or "").strip() or crs.name or ""

    geodetic = crs.geodetic_crs or crs
    if geodetic.datum is not None:
        meta.geodetic_datum = geodetic.datum.name or ""

    op = crs.coordinate_operation
    if op is not None:
        meta.map_projection = op.method_name or ""
        meta.map_zone = _extract_zone(op.name or "", crs.name)

    return meta


def _extract_zone(op_name: str, crs_name: str = "") -> str:
    """Heuristically extract a zone string from an operation or CRS name.

    Examples handled:
      "SWEREF99 18 00"    → "18 00"
      "RT90 2.5 gon V"    → "2.5 gon V"
      "SWEREF99 TM"       → "TM"
    """
    for name in (op_name, crs_name):
        m = re.search(r"\b(\d{2} \d{2})\b", name)
        if m:
            return m.group(1)

        m = re.search(r"\b(\d(?:\.\d)? gon(?: [VO])?)(?!\w)", name)
        if m:
            return m.group(1)

        m = re.search(r"\bSWEREF99 (TM)\b", name)
        if m:
            return m.group(1)

    return ""


# ---------------------------------------------------------------------------
# epsg.io fallback
# ---------------------------------------------------------------------------

_EPSG_IO_BASE = "https://epsg.io/{code}.json"
_EPSG_IO_TIMEOUT = 6


def _fill_from_epsg_io(code: int, meta: CRSMetadata) -> None:
    """Attempt to fill empty metadata fields from the epsg.io REST API.

    Network and decoding errors are logged and leave *meta* as it was, so
    the caller always gets whatever pyproj managed to provide.
    """
    import requests

    try:
        resp = requests.get(_EPSG_IO_BASE.format(code=code), timeout=_EPSG_IO_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("epsg.io lookup for EPSG:%s failed: %s", code, exc)
        return

    results = data.get("results", [])
    if not results:
        return
    r = results[0]

    if not meta.crs_name:
        meta.crs_name = r.get("name", "")

    if not meta.description:
        meta.description = r.get("name", "")

    if not meta.map_zone:
        meta.map_zone = _extract_zone(r.get("name", ""))
